"""
布局描述 — 视口档位 → 渲染描述

纯函数：宽度只在 viewport_for_width() 里读一次，
之后 build_layout(viewport, nav) 产出 ShellLayout，ui/shell.py 只负责照着画。

三种布局：
- DESKTOP：左右固定标签栏（完整大写标签）
- TABLET：左右图标栏（两字母缩写）
- MOBILE：底部收藏胶囊栏 + 左右滑出抽屉
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from config.constants import (
    DAY_VIEW_PATH,
    DESKTOP_MIN_WIDTH,
    INDEX_PATH,
    INSIGHTS_MIN_WIDTH,
    INSIGHTS_PINNED_WIDTH,
    TABLET_MIN_WIDTH,
    TabSide,
)
from services.navigation.models import ComfortSettings, QuickAction, ResolvedTab, Viewport


def viewport_for_width(width: int) -> Viewport:
    """宽度 → 视口档位（<1024 移动端，<1280 平板，其余桌面）"""
    if width < TABLET_MIN_WIDTH:
        return Viewport.MOBILE
    if width < DESKTOP_MIN_WIDTH:
        return Viewport.TABLET
    return Viewport.DESKTOP


@dataclass(frozen=True)
class NavButton:
    """一个可点击的标签按钮"""
    path: str
    label: str
    display_label: str
    color: str
    active: bool


@dataclass(frozen=True)
class RailSpec:
    """侧边标签栏（桌面/平板）或抽屉（移动端）"""
    side: TabSide
    buttons: Tuple[NavButton, ...]
    icon_only: bool = False


@dataclass(frozen=True)
class InsightsPanel:
    """侧栏洞察面板：≥1024 出现，≥1920 强制展开，其余可折叠"""
    collapsible: bool
    pinned_open: bool


@dataclass(frozen=True)
class ResolvedNavigation:
    """已解析的导航数据（与视口无关的部分）"""
    left: Tuple[ResolvedTab, ...]
    right: Tuple[ResolvedTab, ...]
    favourites: Tuple[ResolvedTab, ...]
    active_paths: frozenset = frozenset()
    quick_actions: Tuple[QuickAction, ...] = ()
    comfort: ComfortSettings = field(default_factory=ComfortSettings)
    style_preset: str = ""


@dataclass(frozen=True)
class ShellLayout:
    """Shell 渲染描述"""
    viewport: Viewport
    rails: Tuple[RailSpec, ...]
    drawers: Tuple[RailSpec, ...]
    favourites: Tuple[NavButton, ...]
    bottom_nav: bool
    insights: Optional[InsightsPanel]
    home_path: str
    spacing: str
    quick_actions: Tuple[QuickAction, ...]
    style_preset: str

    @property
    def active_path(self) -> Optional[str]:
        """第一个激活按钮的路径（收藏栏优先，其次侧栏/抽屉）"""
        groups: List[Tuple[NavButton, ...]] = [self.favourites]
        groups.extend(r.buttons for r in self.rails + self.drawers)
        for buttons in groups:
            for b in buttons:
                if b.active:
                    return b.path
        return None


def _button(tab: ResolvedTab, nav: ResolvedNavigation, viewport: Viewport) -> NavButton:
    if viewport is Viewport.TABLET:
        display = tab.label[:2]
    elif viewport is Viewport.DESKTOP:
        display = tab.label.upper()
    else:
        display = tab.label
    return NavButton(
        path=tab.path,
        label=tab.label,
        display_label=display,
        color=tab.color,
        active=tab.path in nav.active_paths,
    )


def _insights_for_width(width: Optional[int]) -> Optional[InsightsPanel]:
    if width is None or width < INSIGHTS_MIN_WIDTH:
        return None
    pinned = width >= INSIGHTS_PINNED_WIDTH
    return InsightsPanel(collapsible=not pinned, pinned_open=pinned)


def build_layout(
    viewport: Viewport,
    nav: ResolvedNavigation,
    *,
    width: Optional[int] = None,
) -> ShellLayout:
    """
    (视口档位, 已解析标签) → 渲染描述

    Args:
        viewport: 视口档位
        nav:      已解析的导航数据
        width:    原始宽度（仅用于洞察面板；None 表示不显示面板）
    """
    def _rail(side: TabSide, tabs: Tuple[ResolvedTab, ...], icon_only: bool) -> RailSpec:
        return RailSpec(
            side=side,
            buttons=tuple(_button(t, nav, viewport) for t in tabs),
            icon_only=icon_only,
        )

    if viewport is Viewport.MOBILE:
        rails: Tuple[RailSpec, ...] = ()
        drawers = (
            _rail(TabSide.LEFT, nav.left, False),
            _rail(TabSide.RIGHT, nav.right, False),
        )
        home = DAY_VIEW_PATH
    else:
        icon_only = viewport is Viewport.TABLET
        rails = (
            _rail(TabSide.LEFT, nav.left, icon_only),
            _rail(TabSide.RIGHT, nav.right, icon_only),
        )
        drawers = ()
        home = INDEX_PATH

    favourites = tuple(
        NavButton(
            path=t.path,
            label=t.label,
            display_label=t.label,
            color=t.color,
            active=t.path in nav.active_paths,
        )
        for t in nav.favourites
    )

    return ShellLayout(
        viewport=viewport,
        rails=rails,
        drawers=drawers,
        favourites=favourites,
        bottom_nav=viewport is Viewport.MOBILE,
        insights=_insights_for_width(width),
        home_path=home,
        spacing=nav.comfort.spacing,
        quick_actions=nav.quick_actions,
        style_preset=nav.style_preset,
    )
