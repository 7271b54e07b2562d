"""
偏好服务 — 规划本设置的读取 / 保存 / 编辑

数据来源：user_preferences 表（custom_overrides.planner_settings）
编辑操作都是纯函数：传入设置，返回新设置，不写库；保存由 save() 完成。
"""
from __future__ import annotations

import json
import sqlite3
from dataclasses import replace
from typing import Any, Optional

import db
from config.constants import CORE_TABS, MAX_FAVOURITES, MIN_FAVOURITES
from config.defaults import DEFAULT_PLANNER_SETTINGS, PLANNER_SETTINGS_KEY
from config.presets import STYLE_PRESETS
from services.navigation.models import ComfortSettings, PlannerSettings
from utils.log import get_logger

log = get_logger(__name__)


class PreferencesService:
    """
    偏好服务

    读写失败只记日志：load() 回落到默认设置，save() 返回 False。
    """

    # ── 通用自定义项 ──

    @staticmethod
    def get_custom_override(user_id: str, key: str, default: Any = None) -> Any:
        """读取单个自定义项；存储异常时返回 default"""
        try:
            return db.preferences.get_override(user_id, key, default)
        except (sqlite3.Error, json.JSONDecodeError) as exc:
            log.warning("preferences.read_failed", user_id=user_id, key=key, error=str(exc))
            return default

    @staticmethod
    def update_custom_override(user_id: str, key: str, value: Any) -> bool:
        """写入单个自定义项，返回是否成功"""
        try:
            db.preferences.set_override(user_id, key, value)
        except (sqlite3.Error, json.JSONDecodeError, TypeError) as exc:
            log.warning("preferences.write_failed", user_id=user_id, key=key, error=str(exc))
            return False
        log.info("preferences.saved", user_id=user_id, key=key)
        return True

    # ── 规划本设置 ──

    @staticmethod
    def load(user_id: str) -> PlannerSettings:
        """
        读取规划本设置（Shell 用）

        坏数据在 PlannerSettings.from_dict 中被清洗；
        收藏为空时保持为空，由 Shell 按视口决定默认收藏。
        """
        raw = PreferencesService.get_custom_override(
            user_id, PLANNER_SETTINGS_KEY, DEFAULT_PLANNER_SETTINGS,
        )
        try:
            return PlannerSettings.from_dict(raw)
        except (TypeError, ValueError, AttributeError) as exc:
            log.warning("preferences.parse_failed", user_id=user_id, error=str(exc))
            return PlannerSettings.default()

    @staticmethod
    def load_for_editing(user_id: str) -> PlannerSettings:
        """读取规划本设置（设置页用）：空收藏回填为默认收藏"""
        settings = PreferencesService.load(user_id)
        if not settings.favourite_tabs:
            settings = replace(
                settings,
                favourite_tabs=tuple(DEFAULT_PLANNER_SETTINGS["favourite_tabs"]),
            )
        return settings

    @staticmethod
    def save(user_id: str, settings: PlannerSettings) -> bool:
        """保存规划本设置"""
        return PreferencesService.update_custom_override(
            user_id, PLANNER_SETTINGS_KEY, settings.to_dict(),
        )

    @staticmethod
    def clear(user_id: str) -> bool:
        """删除用户全部偏好（恢复默认）"""
        try:
            return db.preferences.delete(user_id)
        except sqlite3.Error as exc:
            log.warning("preferences.clear_failed", user_id=user_id, error=str(exc))
            return False

    # ── 编辑操作（纯函数）──

    @staticmethod
    def reset() -> PlannerSettings:
        return PlannerSettings.default()

    @staticmethod
    def set_style_preset(settings: PlannerSettings, preset_id: str) -> PlannerSettings:
        """切换风格预设；未知预设忽略"""
        if preset_id not in STYLE_PRESETS:
            return settings
        return replace(settings, style_preset=preset_id)

    @staticmethod
    def toggle_tab_enabled(settings: PlannerSettings, path: str) -> PlannerSettings:
        """启用/停用标签；核心标签（首页 + 日/周/月）不可停用"""
        if path in CORE_TABS or settings.tab(path) is None:
            return settings
        tabs = tuple(
            replace(t, enabled=not t.enabled) if t.path == path else t
            for t in settings.tab_config
        )
        return replace(settings, tab_config=tabs)

    @staticmethod
    def move_tab(settings: PlannerSettings, path: str, direction: str) -> PlannerSettings:
        """
        同侧上移/下移标签（与相邻标签交换 order）

        Args:
            direction: "up" | "down"；到顶/到底或未知路径时不变
        """
        tab = settings.tab(path)
        if tab is None or direction not in ("up", "down"):
            return settings

        same_side = sorted(
            (t for t in settings.tab_config if t.side == tab.side),
            key=lambda t: (t.order, t.path),
        )
        idx = next(i for i, t in enumerate(same_side) if t.path == path)
        new_idx = idx - 1 if direction == "up" else idx + 1
        if new_idx < 0 or new_idx >= len(same_side):
            return settings

        swap = same_side[new_idx]
        if swap.order == tab.order:
            # order 相同时交换无效，改为按当前顺序重新编号
            renumbered = {t.path: i for i, t in enumerate(same_side)}
            renumbered[path], renumbered[swap.path] = new_idx, idx
            tabs = tuple(
                replace(t, order=renumbered[t.path]) if t.path in renumbered else t
                for t in settings.tab_config
            )
        else:
            def _swap(t):
                if t.path == path:
                    return replace(t, order=swap.order)
                if t.path == swap.path:
                    return replace(t, order=tab.order)
                return t
            tabs = tuple(_swap(t) for t in settings.tab_config)
        return replace(settings, tab_config=tabs)

    @staticmethod
    def toggle_favourite(settings: PlannerSettings, path: str) -> PlannerSettings:
        """收藏/取消收藏；至少保留 1 个，最多 10 个"""
        favourites = list(settings.favourite_tabs)
        if path in favourites:
            if len(favourites) <= MIN_FAVOURITES:
                return settings
            favourites.remove(path)
        else:
            if len(favourites) >= MAX_FAVOURITES or settings.tab(path) is None:
                return settings
            favourites.append(path)
        return replace(settings, favourite_tabs=tuple(favourites))

    @staticmethod
    def move_favourite(settings: PlannerSettings, path: str, direction: str) -> PlannerSettings:
        """收藏栏内上移/下移"""
        favourites = list(settings.favourite_tabs)
        if path not in favourites or direction not in ("up", "down"):
            return settings
        idx = favourites.index(path)
        new_idx = idx - 1 if direction == "up" else idx + 1
        if new_idx < 0 or new_idx >= len(favourites):
            return settings
        favourites[idx], favourites[new_idx] = favourites[new_idx], favourites[idx]
        return replace(settings, favourite_tabs=tuple(favourites))

    @staticmethod
    def update_comfort(
        settings: PlannerSettings,
        *,
        spacing: Optional[str] = None,
        hide_secondary: Optional[bool] = None,
        reduce_color_intensity: Optional[bool] = None,
    ) -> PlannerSettings:
        """更新舒适度设置（只改传入的字段）"""
        current = settings.comfort.to_dict()
        if spacing is not None:
            current["spacing"] = spacing
        if hide_secondary is not None:
            current["hide_secondary"] = hide_secondary
        if reduce_color_intensity is not None:
            current["reduce_color_intensity"] = reduce_color_intensity
        return replace(settings, comfort=ComfortSettings.from_dict(current))
