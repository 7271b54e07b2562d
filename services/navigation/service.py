"""
导航服务 — 设置 + 当前路由 + 视口宽度 → Shell 渲染描述

纯计算，不读 DB、不依赖 streamlit；设置与用户由调用方显式传入。
"""
from __future__ import annotations

from typing import List, Optional, Tuple

from services.navigation.favourites import project_favourites
from services.navigation.layout import (
    ResolvedNavigation,
    ShellLayout,
    build_layout,
    viewport_for_width,
)
from services.navigation.matching import Query, is_active
from services.navigation.models import PlannerSettings, ResolvedTab, Viewport
from services.navigation.quick_actions import visible_quick_actions
from services.navigation.tabs import resolve_tabs


class NavigationService:
    """
    导航服务

    所有方法为 @staticmethod，输入相同则输出相同（幂等）。
    """

    @staticmethod
    def tabs(settings: PlannerSettings) -> Tuple[List[ResolvedTab], List[ResolvedTab]]:
        """(左侧标签, 右侧标签)"""
        return resolve_tabs(settings.tab_config, settings.style_preset, settings.comfort)

    @staticmethod
    def favourites(
        settings: PlannerSettings,
        viewport: Viewport,
    ) -> List[ResolvedTab]:
        """收藏栏标签（只含可解析的标签）"""
        left, right = NavigationService.tabs(settings)
        return project_favourites(settings.favourite_tabs, left + right, viewport)

    @staticmethod
    def active_path(
        settings: PlannerSettings,
        current_path: str,
        current_query: Query = None,
    ) -> Optional[str]:
        """当前激活的标签路径（左侧优先，其次右侧）"""
        left, right = NavigationService.tabs(settings)
        for tab in left + right:
            if is_active(tab.path, current_path, current_query):
                return tab.path
        return None

    @staticmethod
    def resolve(
        settings: PlannerSettings,
        current_path: str,
        current_query: Query = None,
        *,
        width: int,
    ) -> ShellLayout:
        """
        一次性解析整个 Shell

        Args:
            settings:      规划本设置（已清洗）
            current_path:  当前路径
            current_query: 当前查询串
            width:         视口宽度（px）

        Returns:
            ShellLayout 渲染描述
        """
        viewport = viewport_for_width(width)
        left, right = NavigationService.tabs(settings)
        all_tabs = left + right
        favourites = project_favourites(settings.favourite_tabs, all_tabs, viewport)
        active = frozenset(
            t.path for t in all_tabs
            if is_active(t.path, current_path, current_query)
        )
        nav = ResolvedNavigation(
            left=tuple(left),
            right=tuple(right),
            favourites=tuple(favourites),
            active_paths=active,
            quick_actions=tuple(visible_quick_actions(settings.quick_actions, current_path)),
            comfort=settings.comfort,
            style_preset=settings.style_preset,
        )
        return build_layout(viewport, nav, width=width)
