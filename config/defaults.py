"""
默认规划本设置

用户从未保存过设置时使用；也用于旧数据缺字段时的回填。
结构与持久化的 planner_settings JSON 一致（纯 dict，可直接 json.dumps）。
"""
from typing import Any, Dict

from config.constants import (
    DAY_VIEW_PATH,
    INDEX_PATH,
    MONTH_VIEW_PATH,
    SETTINGS_PATH,
    WEEK_VIEW_PATH,
)
from config.presets import DEFAULT_PRESET

PLANNER_SETTINGS_KEY = "planner_settings"

DEFAULT_PLANNER_SETTINGS: Dict[str, Any] = {
    "style_preset": DEFAULT_PRESET,
    "tab_config": [
        # 左侧
        {"path": INDEX_PATH,        "label": "Index",    "enabled": True, "side": "left", "order": 0},
        {"path": DAY_VIEW_PATH,     "label": "Daily",    "enabled": True, "side": "left", "order": 1},
        {"path": WEEK_VIEW_PATH,    "label": "Weekly",   "enabled": True, "side": "left", "order": 2},
        {"path": MONTH_VIEW_PATH,   "label": "Monthly",  "enabled": True, "side": "left", "order": 3},
        {"path": "/planner/tasks",  "label": "Tasks",    "enabled": True, "side": "left", "order": 4},
        {"path": SETTINGS_PATH,     "label": "Settings", "enabled": True, "side": "left", "order": 5},
        # 右侧
        {"path": "/planner/personal",  "label": "Personal",  "enabled": True, "side": "right", "order": 0},
        {"path": "/planner/work",      "label": "Work",      "enabled": True, "side": "right", "order": 1},
        {"path": "/planner/education", "label": "Education", "enabled": True, "side": "right", "order": 2},
        {"path": "/planner/finance",   "label": "Finance",   "enabled": True, "side": "right", "order": 3},
        {"path": "/planner/budget",    "label": "Budget",    "enabled": True, "side": "right", "order": 4},
        {"path": "/planner/vision",    "label": "Vision",    "enabled": True, "side": "right", "order": 5},
        {"path": "/planner/planning",  "label": "Planning",  "enabled": True, "side": "right", "order": 6},
        {"path": "/planner/household", "label": "Household", "enabled": True, "side": "right", "order": 7},
        {"path": "/planner/selfcare",  "label": "Self-Care", "enabled": True, "side": "right", "order": 8},
        {"path": "/planner/travel",    "label": "Travel",    "enabled": True, "side": "right", "order": 9},
        {"path": "/planner/social",    "label": "Social",    "enabled": True, "side": "right", "order": 10},
        {"path": "/planner/journal",   "label": "Journal",   "enabled": True, "side": "right", "order": 11},
    ],
    "favourite_tabs": [
        INDEX_PATH,
        DAY_VIEW_PATH,
        WEEK_VIEW_PATH,
        MONTH_VIEW_PATH,
    ],
    "comfort": {
        "spacing": "comfortable",
        "hide_secondary": False,
        "reduce_color_intensity": False,
    },
    "quick_actions": [
        {
            "id": "add-event",
            "label": "Add Event",
            "description": "Create a new calendar event",
            "icon": "📅",
            "icon_color": "text-blue-600",
            "color": "bg-blue-100",
            "type": "navigate",
            "path": DAY_VIEW_PATH,
            "context_routes": [],
            "enabled": True,
            "order": 0,
        },
        {
            "id": "add-goal",
            "label": "Add Goal",
            "description": "Create a new goal",
            "icon": "🎯",
            "icon_color": "text-green-600",
            "color": "bg-green-100",
            "type": "navigate",
            "path": "/planner/personal",
            "context_routes": [],
            "enabled": True,
            "order": 1,
        },
        {
            "id": "add-task",
            "label": "Add Task",
            "description": "Create a new task",
            "icon": "✅",
            "icon_color": "text-purple-600",
            "color": "bg-purple-100",
            "type": "navigate",
            "path": "/planner/planning/todos",
            "context_routes": [],
            "enabled": True,
            "order": 2,
        },
        {
            "id": "journal-entry",
            "label": "Journal Entry",
            "description": "Write a journal entry",
            "icon": "📖",
            "icon_color": "text-amber-600",
            "color": "bg-amber-100",
            "type": "navigate",
            "path": "/planner/journal",
            "context_routes": [],
            "enabled": True,
            "order": 3,
        },
        {
            "id": "quick-note",
            "label": "Quick Note",
            "description": "Add a quick note",
            "icon": "📝",
            "icon_color": "text-gray-600",
            "color": "bg-gray-100",
            "type": "navigate",
            "path": INDEX_PATH,
            "context_routes": [],
            "enabled": True,
            "order": 4,
        },
    ],
}
