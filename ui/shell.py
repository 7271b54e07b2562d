"""
Shell 渲染 — 照着 ShellLayout 画标签栏 / 收藏栏 / 抽屉 / 洞察面板

路由存在 st.query_params 中：
    ?page=/planner/calendar&view=week
点击标签只改 query_params，Streamlit 随后自动 rerun（session_state 保留）。

依赖方向：ui/ → config/ + streamlit；ShellLayout 由 app.py 传入，
这里只读取其属性，不 import services/。
"""
from __future__ import annotations

from typing import Any, Dict, Iterable, List, Sequence, Tuple
from urllib.parse import parse_qsl, urlsplit

import streamlit as st
from streamlit_extras.stylable_container import stylable_container

from config.constants import DEFAULT_VIEWPORT_WIDTH, INDEX_PATH
from config.theme import COLORS, class_to_hex

VIEWPORT_KEY = "viewport_width"

# 视口档位 → 左栏 / 内容 / 右栏 宽度比例
_RAIL_RATIOS = {
    "desktop": [1.2, 10, 1.2],
    "tablet": [0.6, 11, 0.6],
}


# ═══════════════════════════════════════════════════════
#  路由
# ═══════════════════════════════════════════════════════

def current_route() -> Tuple[str, Dict[str, str]]:
    """(当前路径, 其余查询参数)；没有 page 参数时为首页"""
    params = st.query_params.to_dict()
    path = params.pop("page", None) or INDEX_PATH
    return path, params


def go_to(target: str) -> None:
    """把目标路径（可带查询串）写入 query_params"""
    parts = urlsplit(target)
    st.query_params.clear()
    st.query_params["page"] = parts.path or INDEX_PATH
    for key, value in parse_qsl(parts.query):
        st.query_params[key] = value


def navigate(target: str) -> None:
    """立即跳转（非回调场景使用）"""
    go_to(target)
    st.rerun()


# ═══════════════════════════════════════════════════════
#  视口
# ═══════════════════════════════════════════════════════

def viewport_width_control() -> int:
    """侧栏视口宽度控件（Streamlit 读不到真实窗口宽度）"""
    st.session_state.setdefault(VIEWPORT_KEY, DEFAULT_VIEWPORT_WIDTH)
    return int(st.sidebar.number_input(
        "Viewport width (px)",
        min_value=320,
        max_value=3840,
        step=64,
        key=VIEWPORT_KEY,
        help="Drives the mobile / tablet / desktop navigation layout.",
    ))


# ═══════════════════════════════════════════════════════
#  标签按钮
# ═══════════════════════════════════════════════════════

def _tab_css(color_class: str, active: bool) -> str:
    bg = class_to_hex(color_class)
    ring = "box-shadow: 0 0 0 2px #FFFFFF, 0 6px 12px rgba(0,0,0,0.25);" if active else ""
    opacity = "1" if active else "0.8"
    return (
        "button {"
        f"background-color: {bg};"
        f"color: {COLORS['text_on_tab']};"
        "border: none;"
        "font-weight: 700;"
        f"opacity: {opacity};"
        f"{ring}"
        "}"
    )


def _tab_button(button: Any, key: str) -> None:
    with stylable_container(key=key, css_styles=_tab_css(button.color, button.active)):
        st.button(
            button.display_label,
            key=f"{key}_btn",
            help=button.label,
            on_click=go_to,
            args=(button.path,),
            use_container_width=True,
        )


def _render_buttons(buttons: Iterable[Any], prefix: str) -> None:
    for i, button in enumerate(buttons):
        _tab_button(button, f"{prefix}_{i}")


def _favourites_bar(buttons: Sequence[Any]) -> None:
    if not buttons:
        return
    cols = st.columns(len(buttons))
    for i, (col, button) in enumerate(zip(cols, buttons)):
        with col:
            _tab_button(button, f"fav_{i}")


# ═══════════════════════════════════════════════════════
#  Shell
# ═══════════════════════════════════════════════════════

def render_shell(layout: Any):
    """
    画出 Shell 并返回内容区容器

    Args:
        layout: services.navigation.ShellLayout

    Returns:
        页面内容应写入的容器
    """
    if st.sidebar.button("🏠 Home", use_container_width=True):
        navigate(layout.home_path)

    if layout.bottom_nav:
        # 移动端：顶部两个抽屉，底部收藏胶囊栏
        drawer_cols = st.columns(len(layout.drawers) or 1)
        for col, drawer in zip(drawer_cols, layout.drawers):
            with col, st.expander(f"☰ {drawer.side.value.title()} tabs"):
                _render_buttons(drawer.buttons, f"drawer_{drawer.side.value}")
        content = st.container()
        _favourites_bar(layout.favourites)
        return content

    _favourites_bar(layout.favourites)
    ratios = _RAIL_RATIOS.get(layout.viewport.value, _RAIL_RATIOS["desktop"])
    left_col, content, right_col = st.columns(ratios)
    for col, rail in zip((left_col, right_col), layout.rails):
        with col:
            _render_buttons(rail.buttons, f"rail_{rail.side.value}")
    return content


def render_insights(layout: Any, items: List[Tuple[str, str]]) -> None:
    """侧栏洞察面板：宽屏强制展开，中等宽度可折叠，移动端不显示"""
    panel = layout.insights
    if panel is None or not items:
        return
    box = st.sidebar.container() if panel.pinned_open else st.sidebar.expander("Insights")
    with box:
        if panel.pinned_open:
            st.markdown("**Insights**")
        for label, value in items:
            st.metric(label, value)


def render_quick_actions(actions: Sequence[Any], *, columns: int = 3) -> None:
    """快捷操作按钮网格（navigate 类型）"""
    actions = [a for a in actions if a.type == "navigate" and a.path]
    if not actions:
        return
    cols = st.columns(min(columns, len(actions)))
    for i, action in enumerate(actions):
        with cols[i % len(cols)]:
            st.button(
                f"{action.icon} {action.label}".strip(),
                key=f"qa_{action.id}",
                help=action.description or None,
                on_click=go_to,
                args=(action.path,),
                use_container_width=True,
            )
