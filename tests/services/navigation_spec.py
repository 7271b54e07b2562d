"""导航 Shell 测试：标签解析 / 激活判定 / 收藏栏 / 布局。"""
from __future__ import annotations

from config import (
    DAY_VIEW_PATH,
    INDEX_PATH,
    MONTH_VIEW_PATH,
    SETTINGS_PATH,
    WEEK_VIEW_PATH,
    TabSide,
)
from config.presets import DEFAULT_PRESET, FALLBACK_TAB_COLOR, STYLE_PRESETS
from services.navigation import (
    ComfortSettings,
    NavigationService,
    PlannerSettings,
    QuickAction,
    ResolvedNavigation,
    Viewport,
    build_layout,
    is_active,
    project_favourites,
    resolve_tabs,
    soften_color,
    tab_color,
    viewport_for_width,
    visible_quick_actions,
)


def _settings(tabs, **extra) -> PlannerSettings:
    return PlannerSettings.from_dict({"tab_config": tabs, **extra})


def _paths(tabs):
    return [t.path for t in tabs]


# ═══════════════════════════════════════════════════════
#  标签解析
# ═══════════════════════════════════════════════════════

def test_example_disabled_tab_is_hidden():
    """示例：停用的右侧标签不出现。"""
    settings = _settings([
        {"path": "/planner", "side": "left", "order": 0, "enabled": True},
        {"path": "/planner/work", "side": "right", "order": 1, "enabled": False},
    ])
    left, right = NavigationService.tabs(settings)
    assert _paths(left) == ["/planner"]
    assert _paths(right) == []


def test_tabs_only_enabled_and_sorted_by_order():
    """左右列表只含 enabled 条目，按 order 升序。"""
    settings = _settings([
        {"path": "/planner/c", "side": "left", "order": 2},
        {"path": "/planner/a", "side": "left", "order": 0},
        {"path": "/planner/off", "side": "left", "order": 1, "enabled": False},
        {"path": "/planner/y", "side": "right", "order": 5},
        {"path": "/planner/x", "side": "right", "order": 3},
    ])
    left, right = NavigationService.tabs(settings)
    assert _paths(left) == ["/planner/a", "/planner/c"]
    assert _paths(right) == ["/planner/x", "/planner/y"]


def test_equal_order_tie_break_by_path():
    """order 相同时按 path 排序，与输入顺序无关。"""
    tabs = [
        {"path": "/planner/zeta", "side": "right", "order": 1},
        {"path": "/planner/alpha", "side": "right", "order": 1},
        {"path": "/planner/mid", "side": "right", "order": 0},
    ]
    _, right = NavigationService.tabs(_settings(tabs))
    _, right_reversed = NavigationService.tabs(_settings(list(reversed(tabs))))
    assert _paths(right) == ["/planner/mid", "/planner/alpha", "/planner/zeta"]
    assert _paths(right) == _paths(right_reversed)


def test_malformed_tabs_are_dropped():
    """坏条目丢弃，重复 path 保留首个，不抛异常。"""
    settings = _settings([
        {"path": "/planner", "side": "left", "order": 0},
        {"path": "/planner", "side": "right", "order": 9},
        {"path": "", "side": "left", "order": 1},
        {"path": "/planner/x", "side": "top", "order": 1},
        {"path": "/planner/y", "side": "left", "order": "soon"},
        {"path": "/planner/z", "side": ["left"], "order": 2},
        {"path": "/planner/w", "side": {"left": 1}, "order": 3},
        "not-a-dict",
        None,
    ])
    left, right = NavigationService.tabs(settings)
    assert _paths(left) == ["/planner"]
    assert right == []


def test_malformed_preset_and_quick_actions_do_not_raise():
    """预设不是字符串、context_routes 不是列表时回落为默认值。"""
    for preset in (["x"], {"a": 1}, 7, None, "neon"):
        assert PlannerSettings.from_dict({"style_preset": preset}).style_preset == DEFAULT_PRESET

    settings = PlannerSettings.from_dict({"quick_actions": [
        {"id": "a", "label": "A", "path": "/planner/journal", "context_routes": 5},
        {"id": "b", "label": "B", "path": "/planner/finance", "context_routes": "/planner"},
        {"id": "c", "label": "C", "path": "/planner", "context_routes": ["/planner", 3]},
    ]})
    routes = {a.id: a.context_routes for a in settings.quick_actions}
    assert routes == {"a": (), "b": (), "c": ("/planner",)}


def test_non_dict_settings_fall_back_to_defaults():
    """非 dict 设置回落到默认设置。"""
    for raw in (None, "oops", 42, []):
        settings = PlannerSettings.from_dict(raw)
        left, right = NavigationService.tabs(settings)
        assert INDEX_PATH in _paths(left)
        assert len(right) == 12


def test_missing_quick_actions_are_backfilled():
    """旧数据缺 quick_actions 时使用默认快捷操作。"""
    settings = _settings([{"path": "/planner", "side": "left", "order": 0}])
    assert settings.quick_actions
    assert all(isinstance(a, QuickAction) for a in settings.quick_actions)


def test_tab_color_from_preset_and_fallback():
    """颜色来自预设；未知路径用中性色。"""
    preset = STYLE_PRESETS["classic"]
    assert tab_color(INDEX_PATH, "classic") == preset["left_tabs"]["index"]
    assert tab_color("/planner/unknown", "classic") == FALLBACK_TAB_COLOR
    assert tab_color(INDEX_PATH, "no-such-preset") == tab_color(INDEX_PATH, "bright-playful")


def test_soften_color():
    """降低颜色强度只替换首个深色阶。"""
    assert soften_color("bg-blue-600") == "bg-blue-400"
    assert soften_color("bg-blue-600 hover:bg-blue-700") == "bg-blue-400 hover:bg-blue-700"
    assert soften_color("bg-black") == "bg-gray-600"
    assert soften_color("bg-pink-300") == "bg-pink-300"


def test_reduce_color_intensity_applies_to_resolved_tabs():
    """comfort.reduce_color_intensity 作用于解析结果。"""
    settings = PlannerSettings.default()
    strong, _ = resolve_tabs(settings.tab_config, settings.style_preset)
    soft, _ = resolve_tabs(
        settings.tab_config, settings.style_preset,
        ComfortSettings(reduce_color_intensity=True),
    )
    assert [t.color for t in soft] == [soften_color(t.color) for t in strong]


# ═══════════════════════════════════════════════════════
#  激活判定
# ═══════════════════════════════════════════════════════

def test_example_index_alias_activates_index_tab():
    """示例：/planner/index 激活 /planner 标签。"""
    settings = _settings([{"path": "/planner", "side": "left", "order": 0}])
    assert is_active("/planner", "/planner/index")
    assert NavigationService.active_path(settings, "/planner/index") == "/planner"


def test_index_tab_does_not_match_children():
    """首页标签不因子路径激活。"""
    assert is_active(INDEX_PATH, "/planner")
    assert not is_active(INDEX_PATH, "/planner/finance")


def test_calendar_view_matching():
    """日历：view 必须相等，缺省视为 month。"""
    assert is_active(WEEK_VIEW_PATH, "/planner/calendar?view=week")
    assert is_active(WEEK_VIEW_PATH, "/planner/calendar", "view=week")
    assert is_active(WEEK_VIEW_PATH, "/planner/calendar", {"view": "week"})
    assert not is_active(MONTH_VIEW_PATH, "/planner/calendar?view=week")
    assert is_active(MONTH_VIEW_PATH, "/planner/calendar")
    assert is_active("/planner/calendar", "/planner/calendar?view=month")
    assert not is_active("/planner/calendar", "/planner/calendar?view=day")
    assert not is_active(DAY_VIEW_PATH, "/planner/calendar/extra?view=day")


def test_settings_prefix_and_child_paths():
    """设置按前缀激活；普通标签匹配自身与子路径。"""
    assert is_active(SETTINGS_PATH, "/settings/profile")
    assert not is_active(SETTINGS_PATH, "/planner")
    assert is_active("/planner/finance", "/planner/finance/")
    assert is_active("/planner/finance", "/planner/finance/debts")
    assert not is_active("/planner/finance", "/planner/financeX")


def test_active_resolution_is_idempotent():
    """相同输入两次解析结果一致。"""
    settings = PlannerSettings.default()
    first = NavigationService.resolve(settings, "/planner/calendar", "view=week", width=1440)
    second = NavigationService.resolve(settings, "/planner/calendar", "view=week", width=1440)
    assert first == second
    assert first.active_path == WEEK_VIEW_PATH


# ═══════════════════════════════════════════════════════
#  收藏栏
# ═══════════════════════════════════════════════════════

def test_favourites_subset_of_resolved_tabs():
    """收藏栏只含已解析的标签。"""
    settings = _settings(
        [
            {"path": "/planner", "side": "left", "order": 0},
            {"path": "/planner/work", "side": "right", "order": 0, "enabled": False},
        ],
        favourite_tabs=["/planner/work", "/planner/ghost", "/planner"],
    )
    left, right = NavigationService.tabs(settings)
    resolved = set(_paths(left + right))
    for viewport in Viewport:
        favs = NavigationService.favourites(settings, viewport)
        assert _paths(favs) == ["/planner"]
        assert set(_paths(favs)) <= resolved


def test_favourites_dedupe_and_cap():
    """重复收藏去重，最多 10 个。"""
    tabs = [{"path": f"/planner/t{i}", "side": "right", "order": i} for i in range(15)]
    paths = [t["path"] for t in tabs]
    settings = _settings(tabs, favourite_tabs=paths[:3] + paths[:3] + paths[3:])
    favs = NavigationService.favourites(settings, Viewport.DESKTOP)
    assert len(favs) == 10
    assert len(set(_paths(favs))) == 10
    assert _paths(favs) == paths[:10]


def test_empty_favourites_default_depends_on_viewport():
    """未自定义收藏：移动端日/周/月优先，宽屏首页优先。"""
    settings = PlannerSettings.default()
    settings = PlannerSettings(
        style_preset=settings.style_preset,
        tab_config=settings.tab_config,
        favourite_tabs=(),
        comfort=settings.comfort,
        quick_actions=settings.quick_actions,
    )
    mobile = _paths(NavigationService.favourites(settings, Viewport.MOBILE))
    desktop = _paths(NavigationService.favourites(settings, Viewport.DESKTOP))
    assert mobile == [DAY_VIEW_PATH, WEEK_VIEW_PATH, MONTH_VIEW_PATH, INDEX_PATH]
    assert desktop[0] == INDEX_PATH


def test_favourite_paths_are_normalised():
    """末尾斜杠不影响收藏匹配，规范化后重复的只保留一个。"""
    settings = _settings(
        [
            {"path": "/planner", "side": "left", "order": 0},
            {"path": "/planner/work", "side": "right", "order": 0},
        ],
        favourite_tabs=["/planner/", "/planner", "/planner/work/"],
    )
    left, right = NavigationService.tabs(settings)
    favs = project_favourites(settings.favourite_tabs, left + right, Viewport.DESKTOP)
    assert _paths(favs) == ["/planner", "/planner/work"]


def test_project_favourites_with_no_tabs():
    """没有可见标签时收藏栏为空。"""
    assert project_favourites([INDEX_PATH], [], Viewport.DESKTOP) == []


# ═══════════════════════════════════════════════════════
#  快捷操作
# ═══════════════════════════════════════════════════════

def test_quick_actions_filtered_by_context_and_enabled():
    """context_routes 限定显示路由；停用的不显示；按 order 排序。"""
    actions = [
        QuickAction(id="b", label="B", path="/x", order=1),
        QuickAction(id="a", label="A", path="/x", order=1),
        QuickAction(id="fin", label="Fin", path="/x", order=0, context_routes=("/planner/finance",)),
        QuickAction(id="off", label="Off", path="/x", enabled=False),
    ]
    on_finance = visible_quick_actions(actions, "/planner/finance/debts")
    assert [a.id for a in on_finance] == ["fin", "a", "b"]
    elsewhere = visible_quick_actions(actions, "/planner/journal")
    assert [a.id for a in elsewhere] == ["a", "b"]


# ═══════════════════════════════════════════════════════
#  布局
# ═══════════════════════════════════════════════════════

def test_viewport_breakpoints():
    """<1024 移动端，<1280 平板，其余桌面。"""
    assert viewport_for_width(375) is Viewport.MOBILE
    assert viewport_for_width(1023) is Viewport.MOBILE
    assert viewport_for_width(1024) is Viewport.TABLET
    assert viewport_for_width(1279) is Viewport.TABLET
    assert viewport_for_width(1280) is Viewport.DESKTOP


def test_mobile_layout_uses_drawers_and_bottom_nav():
    """移动端：抽屉 + 底部收藏栏，Home 指向日视图，无洞察面板。"""
    layout = NavigationService.resolve(PlannerSettings.default(), "/planner", width=390)
    assert layout.viewport is Viewport.MOBILE
    assert layout.rails == ()
    assert [d.side for d in layout.drawers] == [TabSide.LEFT, TabSide.RIGHT]
    assert layout.bottom_nav
    assert layout.home_path == DAY_VIEW_PATH
    assert layout.insights is None


def test_tablet_layout_icon_rails():
    """平板：图标栏（两字母缩写），洞察面板可折叠。"""
    layout = NavigationService.resolve(PlannerSettings.default(), "/planner", width=1100)
    assert layout.viewport is Viewport.TABLET
    assert all(r.icon_only for r in layout.rails)
    labels = {b.path: b.display_label for r in layout.rails for b in r.buttons}
    assert labels[INDEX_PATH] == "In"
    assert layout.insights.collapsible and not layout.insights.pinned_open
    assert layout.home_path == INDEX_PATH


def test_desktop_layout_and_pinned_insights():
    """桌面：完整大写标签；≥1920 洞察面板强制展开。"""
    settings = PlannerSettings.default()
    layout = NavigationService.resolve(settings, "/planner/finance", width=1920)
    assert layout.viewport is Viewport.DESKTOP
    assert not layout.bottom_nav
    assert layout.insights.pinned_open and not layout.insights.collapsible
    buttons = {b.path: b for r in layout.rails for b in r.buttons}
    assert buttons["/planner/finance"].display_label == "FINANCE"
    assert buttons["/planner/finance"].active
    assert not buttons[INDEX_PATH].active


def test_build_layout_without_width_has_no_insights():
    """build_layout 不传宽度时不显示洞察面板。"""
    settings = PlannerSettings.default()
    layout = NavigationService.resolve(settings, "/planner", width=1440)
    nav_layout = build_layout(Viewport.DESKTOP, _nav_from(layout, settings))
    assert nav_layout.insights is None


def _nav_from(layout, settings):
    left, right = NavigationService.tabs(settings)
    return ResolvedNavigation(
        left=tuple(left), right=tuple(right), favourites=(),
        quick_actions=layout.quick_actions, comfort=settings.comfort,
        style_preset=settings.style_preset,
    )
