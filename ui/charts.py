"""
规划本图表 — 储蓄进度 / 心情分布

图表统一经 plotly_layout() 套用纸张配色，render_chart() 负责输出。
"""
from __future__ import annotations

from typing import Any, Dict

import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from config.theme import COLORS, PLOTLY_LAYOUT_DEFAULTS


def plotly_layout(**overrides: Any) -> Dict[str, Any]:
    """
    构建统一 Plotly 布局参数

    用法::
        fig.update_layout(**plotly_layout(height=350, barmode="stack"))
    """
    layout = dict(PLOTLY_LAYOUT_DEFAULTS)
    layout.update(overrides)
    return layout


def render_chart(fig: go.Figure, **kwargs: Any) -> None:
    """渲染 Plotly 图表（铺满容器，关闭工具栏）"""
    st.plotly_chart(
        fig,
        use_container_width=True,
        config={"displayModeBar": False},
        **kwargs,
    )


def savings_chart(df: pd.DataFrame) -> go.Figure:
    """
    储蓄目标堆叠横条图

    Args:
        df: FinanceService.savings_frame() 的结果
    """
    fig = go.Figure()
    fig.add_trace(go.Bar(
        y=df["goal"], x=df["current"], orientation="h",
        name="Saved", marker_color=COLORS["gain"],
        text=[f"{p:.0f}%" for p in df["progress"]], textposition="inside",
    ))
    fig.add_trace(go.Bar(
        y=df["goal"], x=df["remaining"], orientation="h",
        name="Remaining", marker_color=COLORS["border_light"],
    ))
    fig.update_layout(**plotly_layout(
        barmode="stack",
        height=max(180, 60 * len(df) + 80),
        hovermode="y unified",
    ))
    return fig


def mood_chart(df: pd.DataFrame) -> go.Figure:
    """
    心情分布柱状图

    Args:
        df: DataFrame(mood, count)
    """
    fig = go.Figure(go.Bar(
        x=df["mood"], y=df["count"], marker_color=COLORS["primary"],
    ))
    fig.update_layout(**plotly_layout(height=260, showlegend=False))
    return fig
