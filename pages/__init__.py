"""
pages 包 — 规划本各栏目的视图层

每个页面只做：读路由 / session_state → 调 Service → 调 UI 渲染
不直接碰 DB。

路由表：路径 → render()；未注册的路径落到占位页。
"""
from typing import Callable, Dict

from config import CALENDAR_PATH, INDEX_ALIAS, INDEX_PATH, SETTINGS_PATH

from .calendar import render as page_calendar
from .finance import render as page_finance
from .household import render as page_household
from .index import render as page_index
from .journal import render as page_journal
from .placeholder import render as page_placeholder
from .settings import render as page_settings

PAGES: Dict[str, Callable[[], None]] = {
    INDEX_PATH:           page_index,
    INDEX_ALIAS:          page_index,
    CALENDAR_PATH:        page_calendar,
    "/planner/finance":   page_finance,
    "/planner/household": page_household,
    "/planner/journal":   page_journal,
    SETTINGS_PATH:        page_settings,
}


def resolve_page(path: str) -> Callable[[], None]:
    """路径 → 页面函数（/settings 下的子路径都进设置页）"""
    path = path.rstrip("/") or INDEX_PATH
    if path.startswith(SETTINGS_PATH):
        return page_settings
    return PAGES.get(path, page_placeholder)


__all__ = [
    "PAGES",
    "resolve_page",
    "page_index",
    "page_calendar",
    "page_finance",
    "page_household",
    "page_journal",
    "page_settings",
    "page_placeholder",
]
