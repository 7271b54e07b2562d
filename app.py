#!/usr/bin/env python3
"""
Planner — Streamlit 入口

启动：streamlit run app.py

每次 rerun：
    读偏好 → 读路由 (?page=...&view=...) → NavigationService 解析 Shell
    → ui.shell 画标签栏 → 路由表分发到页面 render()
"""
from datetime import date, timedelta
from typing import List, Tuple

import streamlit as st

from config import PAGE_CONFIG, current_household_id, current_user_id
from db.connection import init_database
from pages import resolve_page
from services import FinanceService, HouseholdService, JournalService, NavigationService, PreferencesService
from services.household import is_overdue
from ui import UI, current_route, render_insights, render_shell, viewport_width_control
from utils.log import configure_logging, get_logger

log = get_logger(__name__)


def _insights(user_id: str, household_id: str) -> List[Tuple[str, str]]:
    """侧栏洞察面板内容"""
    tasks = HouseholdService.cleaning.list(household_id)
    needed = HouseholdService.groceries.list(household_id, status="needed")
    week = JournalService.entries_in_range(user_id, date.today() - timedelta(days=6), date.today())
    finance = FinanceService.summarize(
        FinanceService.income.list(user_id), FinanceService.debts.list(user_id), [],
    )
    return [
        ("Overdue chores", str(sum(1 for t in tasks if is_overdue(t)))),
        ("Groceries needed", str(len(needed))),
        ("Journal entries (7d)", str(len(week))),
        ("Monthly income", UI.money(finance["monthly_income"])),
    ]


def main():
    st.set_page_config(**PAGE_CONFIG)
    configure_logging()
    init_database()

    user_id = current_user_id()
    household_id = current_household_id()

    # ── 侧边栏 ──
    with st.sidebar:
        st.title("📒 Planner")
    width = viewport_width_control()

    # ── Shell ──
    settings = PreferencesService.load(user_id)
    path, query = current_route()
    layout = NavigationService.resolve(settings, path, query, width=width)
    st.session_state["planner_settings"] = settings
    st.session_state["shell_layout"] = layout
    log.debug("shell.resolved", path=path, viewport=layout.viewport.value, active=layout.active_path)

    UI.inject_css(layout.spacing)
    content = render_shell(layout)
    if not settings.comfort.hide_secondary:
        render_insights(layout, _insights(user_id, household_id))

    # ── 路由 ──
    with content:
        resolve_page(path)()


if __name__ == "__main__":
    main()
