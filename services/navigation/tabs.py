"""
标签解析 — 过滤 · 分侧 · 排序 · 上色

排序规则：同侧按 order 升序，order 相同按 path 升序（显式规则，不依赖排序稳定性）。
"""
from __future__ import annotations

import re
from typing import Dict, Iterable, List, Tuple

from config.constants import TabSide
from config.presets import DEFAULT_PRESET, FALLBACK_TAB_COLOR, STYLE_PRESETS, TAB_COLOR_KEYS
from services.navigation.models import ComfortSettings, ResolvedTab, TabEntry

_STRONG_SHADE = re.compile(r"-(500|600|700|800|900)")


def partition_tabs(entries: Iterable[TabEntry]) -> Dict[TabSide, List[TabEntry]]:
    """只保留 enabled 标签，按侧分组并排序"""
    sides: Dict[TabSide, List[TabEntry]] = {TabSide.LEFT: [], TabSide.RIGHT: []}
    for tab in entries:
        if tab.enabled:
            sides[tab.side].append(tab)
    for tabs in sides.values():
        tabs.sort(key=lambda t: (t.order, t.path))
    return sides


def tab_color(path: str, preset_id: str) -> str:
    """按路径在预设中查颜色类；未知路径返回中性色"""
    preset = STYLE_PRESETS.get(preset_id) or STYLE_PRESETS[DEFAULT_PRESET]
    key = TAB_COLOR_KEYS.get(path)
    if key is None:
        return FALLBACK_TAB_COLOR
    group, name = key
    return preset.get(group, {}).get(name, FALLBACK_TAB_COLOR)


def soften_color(css_class: str) -> str:
    """降低颜色强度：首个 500-900 色阶 → 400，bg-black → bg-gray-600"""
    softened = _STRONG_SHADE.sub("-400", css_class, count=1)
    return softened.replace("bg-black", "bg-gray-600", 1)


def resolve_tabs(
    entries: Iterable[TabEntry],
    preset_id: str,
    comfort: ComfortSettings = ComfortSettings(),
) -> Tuple[List[ResolvedTab], List[ResolvedTab]]:
    """
    配置 → (左侧标签, 右侧标签)

    Args:
        entries:   标签配置（已由 PlannerSettings.from_dict 清洗）
        preset_id: 风格预设 ID（未知时用默认预设）
        comfort:   舒适度设置（reduce_color_intensity 时降低颜色强度）

    Returns:
        两个有序列表，只含 enabled 标签
    """
    sides = partition_tabs(entries)

    def _resolve(tab: TabEntry) -> ResolvedTab:
        color = tab_color(tab.path, preset_id)
        if comfort.reduce_color_intensity:
            color = soften_color(color)
        return ResolvedTab(path=tab.path, label=tab.label, side=tab.side, color=color)

    left = [_resolve(t) for t in sides[TabSide.LEFT]]
    right = [_resolve(t) for t in sides[TabSide.RIGHT]]
    return left, right
