"""
UI 组件库 — 统一导出

依赖方向：ui/ → config/ + streamlit
不引用 services/ / pages/
"""
from .charts import mood_chart, plotly_layout, render_chart, savings_chart
from .components import UI
from .shell import (
    current_route,
    go_to,
    navigate,
    render_insights,
    render_quick_actions,
    render_shell,
    viewport_width_control,
)

__all__ = [
    "UI",
    "plotly_layout",
    "render_chart",
    "savings_chart",
    "mood_chart",
    "current_route",
    "go_to",
    "navigate",
    "render_shell",
    "render_insights",
    "render_quick_actions",
    "viewport_width_control",
]
