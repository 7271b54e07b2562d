"""偏好服务测试：读写 / 容错 / 编辑操作。"""
from __future__ import annotations

from dataclasses import replace

import db
from config import DAY_VIEW_PATH, INDEX_PATH, MAX_FAVOURITES, TabSide
from config.defaults import DEFAULT_PLANNER_SETTINGS, PLANNER_SETTINGS_KEY
from services import PreferencesService
from services.navigation import PlannerSettings


def _side(settings, side):
    return [t.path for t in sorted(
        (t for t in settings.tab_config if t.side == side),
        key=lambda t: (t.order, t.path),
    )]


# ═══════════════════════════════════════════════════════
#  读写
# ═══════════════════════════════════════════════════════

def test_load_defaults_when_nothing_saved(empty_db, user_id):
    """未保存过设置时返回默认设置。"""
    assert PreferencesService.load(user_id) == PlannerSettings.default()


def test_save_and_load_round_trip(empty_db, user_id):
    """保存后可原样读回，且不影响其他自定义项。"""
    PreferencesService.update_custom_override(user_id, "theme", "dark")
    settings = PreferencesService.set_style_preset(PlannerSettings.default(), "classic")
    assert PreferencesService.save(user_id, settings)

    assert PreferencesService.load(user_id).style_preset == "classic"
    assert PreferencesService.get_custom_override(user_id, "theme") == "dark"


def test_load_keeps_empty_favourites_for_shell(empty_db, user_id):
    """Shell 读取时空收藏保持为空；设置页读取时回填默认收藏。"""
    raw = dict(DEFAULT_PLANNER_SETTINGS, favourite_tabs=[])
    db.preferences.set_override(user_id, PLANNER_SETTINGS_KEY, raw)

    assert PreferencesService.load(user_id).favourite_tabs == ()
    editing = PreferencesService.load_for_editing(user_id)
    assert list(editing.favourite_tabs) == DEFAULT_PLANNER_SETTINGS["favourite_tabs"]


def test_load_survives_corrupt_json(empty_db, user_id):
    """custom_overrides 不是合法 JSON 时回落到默认设置。"""
    conn = db.connection.get_connection()
    conn.execute(
        "INSERT INTO user_preferences (user_id, custom_overrides) VALUES (?, ?)",
        (user_id, "{not json"),
    )
    conn.commit()
    conn.close()

    assert PreferencesService.load(user_id) == PlannerSettings.default()


def test_load_survives_malformed_settings(empty_db, user_id):
    """已保存的设置字段类型错误时不抛异常，坏字段回落到默认。"""
    raw = dict(
        DEFAULT_PLANNER_SETTINGS,
        style_preset={"a": 1},
        comfort=["compact"],
        favourite_tabs="/planner",
        quick_actions=[{"id": "x", "label": "X", "path": "/planner", "context_routes": 5}],
    )
    db.preferences.set_override(user_id, PLANNER_SETTINGS_KEY, raw)

    settings = PreferencesService.load(user_id)
    default = PlannerSettings.default()
    assert settings.style_preset == default.style_preset
    assert settings.comfort == default.comfort
    assert settings.favourite_tabs == ()
    assert settings.quick_actions[0].context_routes == ()
    assert settings.tab_config == default.tab_config


def test_clear_removes_preferences(empty_db, user_id):
    """clear 后恢复默认。"""
    PreferencesService.save(user_id, PreferencesService.set_style_preset(PlannerSettings.default(), "classic"))
    assert PreferencesService.clear(user_id)
    assert PreferencesService.load(user_id).style_preset == PlannerSettings.default().style_preset


# ═══════════════════════════════════════════════════════
#  编辑操作
# ═══════════════════════════════════════════════════════

def test_unknown_preset_ignored():
    """未知预设不生效。"""
    settings = PlannerSettings.default()
    assert PreferencesService.set_style_preset(settings, "neon") == settings


def test_core_tabs_cannot_be_disabled():
    """首页与日/周/月标签不可停用，普通标签可切换。"""
    settings = PlannerSettings.default()
    assert PreferencesService.toggle_tab_enabled(settings, INDEX_PATH) == settings
    assert PreferencesService.toggle_tab_enabled(settings, DAY_VIEW_PATH) == settings

    toggled = PreferencesService.toggle_tab_enabled(settings, "/planner/work")
    assert toggled.tab("/planner/work").enabled is False
    again = PreferencesService.toggle_tab_enabled(toggled, "/planner/work")
    assert again.tab("/planner/work").enabled is True


def test_move_tab_swaps_within_side():
    """move_tab 只与同侧相邻标签交换，两端不变。"""
    settings = PlannerSettings.default()
    right = _side(settings, TabSide.RIGHT)

    moved = PreferencesService.move_tab(settings, right[1], "up")
    assert _side(moved, TabSide.RIGHT)[:2] == [right[1], right[0]]
    assert _side(moved, TabSide.LEFT) == _side(settings, TabSide.LEFT)

    assert PreferencesService.move_tab(settings, right[0], "up") == settings
    assert PreferencesService.move_tab(settings, right[-1], "down") == settings
    assert PreferencesService.move_tab(settings, "/nope", "up") == settings


def test_move_tab_with_equal_orders():
    """order 相同时按当前显示顺序重新编号后交换。"""
    settings = PlannerSettings.from_dict({
        "tab_config": [
            {"path": "/planner/b", "side": "right", "order": 0},
            {"path": "/planner/a", "side": "right", "order": 0},
        ],
    })
    moved = PreferencesService.move_tab(settings, "/planner/b", "up")
    assert _side(moved, TabSide.RIGHT) == ["/planner/b", "/planner/a"]


def test_favourite_limits():
    """收藏至少保留 1 个，最多 10 个。"""
    settings = replace(PlannerSettings.default(), favourite_tabs=(INDEX_PATH,))
    assert PreferencesService.toggle_favourite(settings, INDEX_PATH) == settings

    paths = [t.path for t in settings.tab_config]
    for path in paths:
        settings = PreferencesService.toggle_favourite(settings, path) if path not in settings.favourite_tabs else settings
    assert len(settings.favourite_tabs) == MAX_FAVOURITES
    assert len(set(settings.favourite_tabs)) == MAX_FAVOURITES


def test_toggle_favourite_unknown_path_ignored():
    """未配置的路径不能加入收藏。"""
    settings = PlannerSettings.default()
    assert PreferencesService.toggle_favourite(settings, "/planner/ghost") == settings


def test_move_favourite():
    """收藏栏内上移/下移。"""
    settings = PlannerSettings.default()
    favs = list(settings.favourite_tabs)
    moved = PreferencesService.move_favourite(settings, favs[1], "up")
    assert list(moved.favourite_tabs)[:2] == [favs[1], favs[0]]
    assert PreferencesService.move_favourite(settings, favs[0], "up") == settings


def test_update_comfort_only_changes_given_fields():
    """update_comfort 只改传入的字段，非法间距回落到 comfortable。"""
    settings = PlannerSettings.default()
    updated = PreferencesService.update_comfort(settings, reduce_color_intensity=True)
    assert updated.comfort.reduce_color_intensity is True
    assert updated.comfort.spacing == settings.comfort.spacing

    weird = PreferencesService.update_comfort(settings, spacing="roomy")
    assert weird.comfort.spacing == "comfortable"


def test_reset_returns_defaults():
    assert PreferencesService.reset() == PlannerSettings.default()
