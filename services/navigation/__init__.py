"""
导航 Shell — 标签解析 / 激活判定 / 收藏栏 / 布局描述

依赖方向：services/navigation/ → config/（纯计算，不碰 db/ 与 streamlit）
"""
from services.navigation.favourites import default_favourites, project_favourites
from services.navigation.layout import (
    InsightsPanel,
    NavButton,
    RailSpec,
    ResolvedNavigation,
    ShellLayout,
    build_layout,
    viewport_for_width,
)
from services.navigation.matching import find_active, is_active, normalize_path, split_path
from services.navigation.models import (
    ComfortSettings,
    PlannerSettings,
    QuickAction,
    ResolvedTab,
    TabEntry,
    Viewport,
)
from services.navigation.quick_actions import visible_quick_actions
from services.navigation.service import NavigationService
from services.navigation.tabs import partition_tabs, resolve_tabs, soften_color, tab_color

__all__ = [
    "NavigationService",
    "PlannerSettings",
    "TabEntry",
    "ComfortSettings",
    "QuickAction",
    "ResolvedTab",
    "Viewport",
    "NavButton",
    "RailSpec",
    "InsightsPanel",
    "ResolvedNavigation",
    "ShellLayout",
    "build_layout",
    "viewport_for_width",
    "is_active",
    "find_active",
    "split_path",
    "normalize_path",
    "default_favourites",
    "project_favourites",
    "visible_quick_actions",
    "partition_tabs",
    "resolve_tabs",
    "soften_color",
    "tab_color",
]
