"""
规划本 UI 原子组件 — 纸张卡片 / 指标行 / 表格 / 进度条 / 删除确认

页面只通过 UI.xxx() 画界面，不直接拼 HTML。
- 用户输入的文本一律转义后再嵌入 HTML
- 间距（compact / comfortable）随舒适度设置注入
- 只依赖 config.theme，不引用 services/ / pages/
"""
from __future__ import annotations

import html as _html
import re
from contextlib import contextmanager
from typing import Any, Optional, Sequence, Tuple

import pandas as pd
import streamlit as st
from streamlit_extras.metric_cards import style_metric_cards
from streamlit_extras.stylable_container import stylable_container

from config.theme import COLORS, GLOBAL_CSS, METRIC_CARD_STYLE, MOBILE_CSS, SPACING_PADDING

# 纸张卡片边框
_PAPER_CSS = (
    "{"
    f"border: 2px solid {COLORS['border']};"
    "border-radius: 10px;"
    f"background: {COLORS['bg_light']};"
    "padding: 6px 10px;"
    "}"
)


def _esc(text: Any) -> str:
    """防御性 HTML 转义"""
    return _html.escape(str(text)) if text is not None else ""


def _strip_html(text: Any) -> str:
    """去除标题中的 HTML 标签，仅保留纯文本"""
    return re.sub(r"<[^>]+>", "", str(text)) if text is not None else ""


def _key(prefix: str, text: str) -> str:
    return f"{prefix}_{re.sub(r'[^a-zA-Z0-9]+', '_', text).strip('_').lower() or 'x'}"


class UI:
    """
    原子级 UI 组件库

    使用示例::
        from ui import UI
        UI.inject_css("comfortable")
        UI.header("Finance", "Income, debts and savings")
        UI.metric_row([("Monthly income", "£2,400"), ("Debt", "£8,100")])
    """

    # ── 全局样式注入 ──

    @staticmethod
    def inject_css(spacing: str = "comfortable"):
        """注入全局 CSS + 移动端响应式 + 内容区间距（每次 rerun 调用一次）"""
        st.markdown(GLOBAL_CSS, unsafe_allow_html=True)
        st.markdown(MOBILE_CSS, unsafe_allow_html=True)
        padding = SPACING_PADDING.get(spacing, SPACING_PADDING["comfortable"])
        st.markdown(
            f"<style>.block-container {{ padding: {padding}; }}</style>",
            unsafe_allow_html=True,
        )

    # ── 指标行 ──

    @staticmethod
    def metric_row(items: Sequence[Tuple[str, ...]]):
        """水平排列的指标行: [(label, value), ...] 或 [(label, value, delta), ...]"""
        cols = st.columns(len(items))
        for col, item in zip(cols, items):
            delta = item[2] if len(item) > 2 else None
            col.metric(label=item[0], value=item[1], delta=delta)
        style_metric_cards(**METRIC_CARD_STYLE)

    # ── 标题 ──

    @staticmethod
    def header(title: str, subtitle: str = ""):
        st.subheader(title)
        if subtitle:
            st.caption(subtitle)

    @staticmethod
    def sub_heading(title: str):
        st.markdown(f"#### {_esc(title)}")

    # ── 纸张卡片 ──

    @staticmethod
    @contextmanager
    def paper(key: str):
        """带纸张边框的容器"""
        with stylable_container(key=_key("paper", key), css_styles=_PAPER_CSS):
            yield

    @staticmethod
    @contextmanager
    def expander(title: str, *, expanded: bool = False, key: Optional[str] = None):
        """带纸张边框的折叠面板"""
        clean_title = _strip_html(title)
        with stylable_container(key=key or _key("expander", clean_title), css_styles=_PAPER_CSS):
            with st.expander(clean_title, expanded=expanded):
                yield

    # ── 彩色胶囊 ──

    @staticmethod
    def pill(text: str, color: str):
        """小号彩色标签（color 为十六进制色值）"""
        st.markdown(
            f'<span style="background:{color};color:{COLORS["text_on_tab"]};'
            f'border-radius:999px;padding:2px 10px;font-size:12px;font-weight:600">'
            f'{_esc(text)}</span>',
            unsafe_allow_html=True,
        )

    # ── 数据表 ──

    @staticmethod
    def table(df: pd.DataFrame, title: str = "", max_height: int = 400):
        """数据表格（带纸张边框）"""
        if title:
            UI.sub_heading(title)
        with stylable_container(key=_key("table", title or str(id(df))), css_styles=_PAPER_CSS):
            st.dataframe(
                df, use_container_width=True, hide_index=True,
                height=min(len(df) * 35 + 38, max_height),
            )

    # ── 进度条 ──

    @staticmethod
    def progress_bar(pct: float, label: str = ""):
        """轻量进度条（pct 为 0-100）"""
        pct = max(0.0, min(pct, 100.0))
        done = " ✓" if pct >= 100 else ""
        st.progress(pct / 100, text=f"{label} · {pct:.0f}%{done}")

    # ── 删除确认 ──

    @staticmethod
    def confirm_delete(key: str, label: str = "Delete") -> bool:
        """勾选确认后才显示删除按钮；返回是否点击了删除"""
        confirmed = st.checkbox("Confirm delete", key=f"{key}_confirm")
        return st.button(label, key=f"{key}_delete", disabled=not confirmed, type="secondary")

    # ── 结果提示 ──

    @staticmethod
    def result(ok: bool, success: str, failure: str = "Could not save. Please try again.") -> bool:
        """写操作结果提示：成功 toast，失败 st.error；原样返回 ok"""
        if ok:
            st.toast(success)
        else:
            st.error(failure)
        return ok

    # ── 空状态 ──

    @staticmethod
    def empty(message: str = "Nothing here yet."):
        st.info(message)

    @staticmethod
    def money(value: Optional[float], currency: str = "£") -> str:
        """金额格式化"""
        if value is None:
            return "—"
        return f"{currency}{value:,.2f}"
