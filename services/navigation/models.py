"""
导航数据模型 — 标签配置 / 舒适度 / 快捷操作 / 规划本设置

所有模型为不可变 dataclass，from_dict() 负责容错解析：
格式不对的条目直接丢弃，绝不抛异常（渲染永不因坏数据崩溃）。
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from config.constants import TabSide
from config.defaults import DEFAULT_PLANNER_SETTINGS
from config.presets import DEFAULT_PRESET, STYLE_PRESETS


class Viewport(str, Enum):
    """视口档位（由宽度一次性推导）"""
    MOBILE = "mobile"
    TABLET = "tablet"
    DESKTOP = "desktop"


def _as_int(value: Any) -> Optional[int]:
    """int / 整数值 float / 数字字符串 → int；bool 与其他类型 → None"""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


@dataclass(frozen=True)
class TabEntry:
    """单个导航标签（path 唯一）"""
    path: str
    label: str
    side: TabSide
    order: int
    enabled: bool = True

    @classmethod
    def from_dict(cls, raw: Any) -> Optional["TabEntry"]:
        """容错解析；缺 path、side 非法、order 非整数时返回 None"""
        if not isinstance(raw, dict):
            return None
        path = raw.get("path")
        if not isinstance(path, str) or not path.strip():
            return None
        try:
            side = TabSide(raw.get("side"))
        except (ValueError, TypeError):
            return None
        order = _as_int(raw.get("order"))
        if order is None:
            return None
        label = raw.get("label")
        return cls(
            path=path.strip(),
            label=label if isinstance(label, str) and label else path.strip(),
            side=side,
            order=order,
            enabled=raw.get("enabled", True) is True,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "path": self.path,
            "label": self.label,
            "enabled": self.enabled,
            "side": self.side.value,
            "order": self.order,
        }


@dataclass(frozen=True)
class ComfortSettings:
    """阅读舒适度：间距 / 隐藏次要信息 / 降低颜色饱和度"""
    spacing: str = "comfortable"
    hide_secondary: bool = False
    reduce_color_intensity: bool = False

    @classmethod
    def from_dict(cls, raw: Any) -> "ComfortSettings":
        if not isinstance(raw, dict):
            return cls()
        spacing = raw.get("spacing")
        return cls(
            spacing=spacing if spacing in ("compact", "comfortable") else "comfortable",
            hide_secondary=bool(raw.get("hide_secondary", False)),
            reduce_color_intensity=bool(raw.get("reduce_color_intensity", False)),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "spacing": self.spacing,
            "hide_secondary": self.hide_secondary,
            "reduce_color_intensity": self.reduce_color_intensity,
        }


@dataclass(frozen=True)
class QuickAction:
    """
    快捷操作按钮

    context_routes 为空时处处显示，否则只在这些路由（及其子路由）显示。
    """
    id: str
    label: str
    type: str = "navigate"
    path: Optional[str] = None
    icon: str = ""
    description: str = ""
    icon_color: str = ""
    color: str = ""
    context_routes: Tuple[str, ...] = ()
    enabled: bool = True
    order: int = 0

    @classmethod
    def from_dict(cls, raw: Any) -> Optional["QuickAction"]:
        if not isinstance(raw, dict):
            return None
        action_id, label = raw.get("id"), raw.get("label")
        if not isinstance(action_id, str) or not isinstance(label, str):
            return None
        action_type = raw.get("type", "navigate")
        if action_type not in ("navigate", "callback"):
            return None
        routes = raw.get("context_routes")
        if not isinstance(routes, (list, tuple)):
            routes = []
        return cls(
            id=action_id,
            label=label,
            type=action_type,
            path=raw.get("path") if isinstance(raw.get("path"), str) else None,
            icon=str(raw.get("icon") or ""),
            description=str(raw.get("description") or ""),
            icon_color=str(raw.get("icon_color") or ""),
            color=str(raw.get("color") or ""),
            context_routes=tuple(r for r in routes if isinstance(r, str)),
            enabled=bool(raw.get("enabled", True)),
            order=_as_int(raw.get("order")) or 0,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "label": self.label,
            "description": self.description,
            "icon": self.icon,
            "icon_color": self.icon_color,
            "color": self.color,
            "type": self.type,
            "path": self.path,
            "context_routes": list(self.context_routes),
            "enabled": self.enabled,
            "order": self.order,
        }


@dataclass(frozen=True)
class PlannerSettings:
    """规划本设置（持久化为 planner_settings JSON）"""
    style_preset: str = DEFAULT_PRESET
    tab_config: Tuple[TabEntry, ...] = ()
    favourite_tabs: Tuple[str, ...] = ()
    comfort: ComfortSettings = field(default_factory=ComfortSettings)
    quick_actions: Tuple[QuickAction, ...] = ()

    @classmethod
    def from_dict(cls, raw: Any) -> "PlannerSettings":
        """
        容错解析持久化设置

        - 非 dict → 默认设置
        - tab_config 缺失/非列表 → 默认标签；列表中的坏条目丢弃，重复 path 保留首个
        - quick_actions 缺失/为空 → 默认快捷操作（旧数据兼容）
        - favourite_tabs 保持原样（为空表示「未自定义」，由 Shell 按视口取默认值）
        """
        if not isinstance(raw, dict):
            raw = DEFAULT_PLANNER_SETTINGS

        preset = raw.get("style_preset")
        if not isinstance(preset, str) or preset not in STYLE_PRESETS:
            preset = DEFAULT_PRESET

        raw_tabs = raw.get("tab_config")
        if not isinstance(raw_tabs, list):
            raw_tabs = DEFAULT_PLANNER_SETTINGS["tab_config"]
        tabs: List[TabEntry] = []
        seen = set()
        for item in raw_tabs:
            tab = TabEntry.from_dict(item)
            if tab is None or tab.path in seen:
                continue
            seen.add(tab.path)
            tabs.append(tab)

        raw_favs = raw.get("favourite_tabs")
        favourites = tuple(
            p for p in (raw_favs if isinstance(raw_favs, list) else [])
            if isinstance(p, str) and p
        )

        raw_actions = raw.get("quick_actions")
        if not isinstance(raw_actions, list) or not raw_actions:
            raw_actions = DEFAULT_PLANNER_SETTINGS["quick_actions"]
        actions = tuple(
            a for a in (QuickAction.from_dict(item) for item in raw_actions)
            if a is not None
        )

        return cls(
            style_preset=preset,
            tab_config=tuple(tabs),
            favourite_tabs=favourites,
            comfort=ComfortSettings.from_dict(raw.get("comfort")),
            quick_actions=actions,
        )

    @classmethod
    def default(cls) -> "PlannerSettings":
        return cls.from_dict(DEFAULT_PLANNER_SETTINGS)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "style_preset": self.style_preset,
            "tab_config": [t.to_dict() for t in self.tab_config],
            "favourite_tabs": list(self.favourite_tabs),
            "comfort": self.comfort.to_dict(),
            "quick_actions": [a.to_dict() for a in self.quick_actions],
        }

    def tab(self, path: str) -> Optional[TabEntry]:
        """按 path 查找标签"""
        return next((t for t in self.tab_config if t.path == path), None)


@dataclass(frozen=True)
class ResolvedTab:
    """已解析的可见标签（颜色已按预设与舒适度处理）"""
    path: str
    label: str
    side: TabSide
    color: str
