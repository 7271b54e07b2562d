"""首页 — 今日概况 + 快捷操作 + 生活领域目录"""
from datetime import date

import streamlit as st

from config import current_household_id, current_user_id
from config.theme import class_to_hex
from pages._common import shell_layout, shell_settings
from services import HouseholdService, JournalService, NavigationService
from services.household import is_overdue
from ui import UI, go_to, render_quick_actions


def render():
    user_id = current_user_id()
    household_id = current_household_id()
    UI.header("Index", date.today().strftime("%A %d %B %Y"))

    # 1. 今日概况
    entry = JournalService.get_entry(user_id, date.today())
    tasks = HouseholdService.cleaning.list(household_id)
    needed = HouseholdService.groceries.list(household_id, status="needed")
    UI.metric_row([
        ("Journal today", "Written" if entry else "Not yet"),
        ("Overdue chores", str(sum(1 for t in tasks if is_overdue(t)))),
        ("Groceries needed", str(len(needed))),
    ])

    # 2. 快捷操作
    layout = shell_layout()
    if layout is not None and layout.quick_actions:
        UI.sub_heading("Quick actions")
        render_quick_actions(layout.quick_actions)

    # 3. 生活领域（右侧标签）
    _, right = NavigationService.tabs(shell_settings())
    if not right:
        return
    UI.sub_heading("Life areas")
    cols = st.columns(4)
    for i, tab in enumerate(right):
        with cols[i % len(cols)]:
            UI.pill(tab.label, class_to_hex(tab.color))
            st.button(
                "Open", key=f"index_area_{tab.path}",
                on_click=go_to, args=(tab.path,),
                use_container_width=True,
            )
