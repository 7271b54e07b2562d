"""
配置层 — 统一导出

依赖方向：config/ 不引用任何其他项目包
"""
from config.constants import (
    AUTOSAVE_DELAY_SECONDS,
    CALENDAR_PATH,
    CALENDAR_VIEWS,
    CLEANING_FREQUENCIES,
    CORE_TABS,
    DAY_VIEW_PATH,
    DEBT_TYPES,
    DEFAULT_CALENDAR_VIEW,
    DEFAULT_VIEWPORT_WIDTH,
    GROCERY_CATEGORIES,
    INCOME_FREQUENCIES,
    INCOME_SOURCE_TYPES,
    INDEX_ALIAS,
    INDEX_PATH,
    JOURNAL_MOODS,
    MAX_FAVOURITES,
    MIN_FAVOURITES,
    MONTH_VIEW_PATH,
    PAGE_CONFIG,
    SAVINGS_GOAL_TYPES,
    SETTINGS_PATH,
    WEEK_VIEW_PATH,
    TabSide,
    current_household_id,
    current_user_id,
)
from config.defaults import DEFAULT_PLANNER_SETTINGS, PLANNER_SETTINGS_KEY
from config.presets import (
    DEFAULT_PRESET,
    FALLBACK_TAB_COLOR,
    STYLE_PRESETS,
    TAB_COLOR_KEYS,
)
