"""
设置页面 — 规划本外观 / 标签 / 收藏栏 / 舒适度 + 数据库信息

编辑中的设置存在 session_state["settings_draft"]，
每个控件只调用 PreferencesService 的纯函数生成新草稿；点「Save」才写库。
"""
from typing import Callable

import streamlit as st

from config import CORE_TABS, MAX_FAVOURITES, STYLE_PRESETS, TabSide, current_user_id
from config.theme import class_to_hex
from db.connection import get_db_path
from pages._common import option_index
from services import NavigationService, PreferencesService
from services.navigation import PlannerSettings
from ui import UI

DRAFT_KEY = "settings_draft"


def _draft() -> PlannerSettings:
    if DRAFT_KEY not in st.session_state:
        st.session_state[DRAFT_KEY] = PreferencesService.load_for_editing(current_user_id())
    return st.session_state[DRAFT_KEY]


def _apply(fn: Callable[..., PlannerSettings], *args, **kwargs) -> None:
    """回调：对草稿套用一个编辑操作"""
    st.session_state[DRAFT_KEY] = fn(_draft(), *args, **kwargs)


def _reset() -> None:
    st.session_state[DRAFT_KEY] = PreferencesService.reset()


def render():
    user_id = current_user_id()
    UI.header("Settings", "Planner appearance and navigation")
    draft = _draft()

    # ── 保存 / 重置 ──
    c1, c2, c3 = st.columns(3)
    if c1.button("💾 Save", type="primary", use_container_width=True, key="settings_save"):
        ok = PreferencesService.save(user_id, draft)
        UI.result(ok, "Settings saved")
        if ok:
            st.rerun()
    if c2.button("↩ Discard changes", use_container_width=True, key="settings_discard"):
        st.session_state.pop(DRAFT_KEY, None)
        st.rerun()
    c3.button(
        "Reset to defaults", use_container_width=True, key="settings_reset",
        on_click=_reset,
    )

    tab_style, tab_tabs, tab_favs, tab_comfort, tab_data = st.tabs(
        ["🎨 Style", "🗂 Tabs", "⭐ Favourites", "🪑 Comfort", "💾 Data"]
    )
    with tab_style:
        _style_section(draft)
    with tab_tabs:
        _tabs_section(draft)
    with tab_favs:
        _favourites_section(draft)
    with tab_comfort:
        _comfort_section(draft)
    with tab_data:
        _data_section()


# ═══════════════════════════════════════════════════════
#  风格预设
# ═══════════════════════════════════════════════════════

def _style_section(draft: PlannerSettings):
    preset_ids = list(STYLE_PRESETS)
    choice = st.radio(
        "Style preset", preset_ids,
        index=option_index(preset_ids, draft.style_preset),
        format_func=lambda pid: STYLE_PRESETS[pid]["name"],
        key=f"settings_preset_{draft.style_preset}",
    )
    if choice != draft.style_preset:
        _apply(PreferencesService.set_style_preset, choice)
        st.rerun()

    preset = STYLE_PRESETS[draft.style_preset]
    st.caption(preset["description"])
    left, right = NavigationService.tabs(draft)
    cols = st.columns(6)
    for i, tab in enumerate(left + right):
        with cols[i % len(cols)]:
            UI.pill(tab.label, class_to_hex(tab.color))


# ═══════════════════════════════════════════════════════
#  标签
# ═══════════════════════════════════════════════════════

def _tabs_section(draft: PlannerSettings):
    for side in (TabSide.LEFT, TabSide.RIGHT):
        UI.sub_heading(f"{side.value.title()} tabs")
        tabs = sorted(
            (t for t in draft.tab_config if t.side == side),
            key=lambda t: (t.order, t.path),
        )
        for i, tab in enumerate(tabs):
            c1, c2, c3, c4 = st.columns([5, 2, 1, 1])
            c1.markdown(tab.label if tab.enabled else f"~~{tab.label}~~")
            c2.checkbox(
                "Enabled", value=tab.enabled, key=f"settings_tab_on_{tab.path}_{tab.enabled}",
                disabled=tab.path in CORE_TABS,
                on_change=_apply, args=(PreferencesService.toggle_tab_enabled, tab.path),
            )
            c3.button(
                "↑", key=f"settings_tab_up_{tab.path}", disabled=i == 0,
                on_click=_apply, args=(PreferencesService.move_tab, tab.path, "up"),
            )
            c4.button(
                "↓", key=f"settings_tab_down_{tab.path}", disabled=i == len(tabs) - 1,
                on_click=_apply, args=(PreferencesService.move_tab, tab.path, "down"),
            )
    st.caption("Index and the day / week / month calendar tabs cannot be disabled.")


# ═══════════════════════════════════════════════════════
#  收藏栏
# ═══════════════════════════════════════════════════════

def _favourites_section(draft: PlannerSettings):
    labels = {t.path: t.label for t in draft.tab_config}
    favourites = list(draft.favourite_tabs)
    st.caption(f"{len(favourites)} / {MAX_FAVOURITES} favourites")

    for i, path in enumerate(favourites):
        c1, c2, c3, c4 = st.columns([6, 1, 1, 1])
        c1.markdown(f"⭐ {labels.get(path, path)}")
        c2.button(
            "↑", key=f"settings_fav_up_{path}", disabled=i == 0,
            on_click=_apply, args=(PreferencesService.move_favourite, path, "up"),
        )
        c3.button(
            "↓", key=f"settings_fav_down_{path}", disabled=i == len(favourites) - 1,
            on_click=_apply, args=(PreferencesService.move_favourite, path, "down"),
        )
        c4.button(
            "✕", key=f"settings_fav_rm_{path}", disabled=len(favourites) <= 1,
            on_click=_apply, args=(PreferencesService.toggle_favourite, path),
        )

    candidates = [t.path for t in draft.tab_config if t.path not in favourites]
    if candidates and len(favourites) < MAX_FAVOURITES:
        c1, c2 = st.columns([6, 2])
        pick = c1.selectbox(
            "Add favourite", candidates, format_func=lambda p: labels.get(p, p),
            key="settings_fav_add",
        )
        c2.button(
            "Add", key="settings_fav_add_btn", use_container_width=True,
            on_click=_apply, args=(PreferencesService.toggle_favourite, pick),
        )


# ═══════════════════════════════════════════════════════
#  舒适度
# ═══════════════════════════════════════════════════════

def _comfort_section(draft: PlannerSettings):
    comfort = draft.comfort
    spacing = st.radio(
        "Spacing", ["comfortable", "compact"], horizontal=True,
        index=0 if comfort.spacing == "comfortable" else 1,
        format_func=str.title, key=f"settings_spacing_{comfort.spacing}",
    )
    hide = st.toggle("Hide secondary panels", value=comfort.hide_secondary, key=f"settings_hide_{comfort.hide_secondary}")
    soften = st.toggle(
        "Reduce colour intensity", value=comfort.reduce_color_intensity, key=f"settings_soften_{comfort.reduce_color_intensity}",
    )
    if (spacing, hide, soften) != (comfort.spacing, comfort.hide_secondary, comfort.reduce_color_intensity):
        _apply(
            PreferencesService.update_comfort,
            spacing=spacing, hide_secondary=hide, reduce_color_intensity=soften,
        )
        st.rerun()


# ═══════════════════════════════════════════════════════
#  数据库
# ═══════════════════════════════════════════════════════

def _data_section():
    UI.sub_heading("Database")
    db_path = get_db_path()
    if db_path.exists():
        size_kb = db_path.stat().st_size / 1024
        st.info(f"Database: `{db_path}`\n\nSize: {size_kb:.1f} KB")
    else:
        st.warning("Database file does not exist yet.")
