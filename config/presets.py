"""
风格预设 — 标签颜色类映射

每个预设是一组 Tailwind 风格的颜色类名（bg-blue-500 等），
由 ui/ 层翻译为实际色值。Shell 只读取，从不修改。
"""
from typing import Any, Dict, Tuple

from config.constants import (
    CALENDAR_PATH,
    DAY_VIEW_PATH,
    INDEX_PATH,
    MONTH_VIEW_PATH,
    SETTINGS_PATH,
    WEEK_VIEW_PATH,
)

DEFAULT_PRESET = "bright-playful"

# 未知路径统一回落到中性色
FALLBACK_TAB_COLOR = "bg-gray-500"

# ═══════════════════════════════════════════════════════
#  路径 → 预设颜色键 (group, key)
# ═══════════════════════════════════════════════════════

TAB_COLOR_KEYS: Dict[str, Tuple[str, str]] = {
    INDEX_PATH:             ("left_tabs", "index"),
    DAY_VIEW_PATH:          ("left_tabs", "daily"),
    WEEK_VIEW_PATH:         ("left_tabs", "weekly"),
    MONTH_VIEW_PATH:        ("left_tabs", "monthly"),
    CALENDAR_PATH:          ("left_tabs", "monthly"),
    "/planner/quarterly":   ("left_tabs", "quarterly"),
    "/planner/tasks":       ("left_tabs", "tasks"),
    SETTINGS_PATH:          ("left_tabs", "settings"),
    "/planner/personal":    ("right_tabs", "personal"),
    "/planner/work":        ("right_tabs", "work"),
    "/planner/education":   ("right_tabs", "education"),
    "/planner/finance":     ("right_tabs", "finance"),
    "/planner/budget":      ("right_tabs", "budget"),
    "/planner/vision":      ("right_tabs", "vision"),
    "/planner/planning":    ("right_tabs", "planning"),
    "/planner/household":   ("right_tabs", "household"),
    "/planner/selfcare":    ("right_tabs", "selfCare"),
    "/planner/travel":      ("right_tabs", "travel"),
    "/planner/social":      ("right_tabs", "social"),
    "/planner/journal":     ("right_tabs", "journal"),
}


def _left(index, daily, weekly, monthly, quarterly, tasks, settings) -> Dict[str, str]:
    return dict(
        index=index, daily=daily, weekly=weekly, monthly=monthly,
        quarterly=quarterly, tasks=tasks, settings=settings,
    )


def _right(*colors: str) -> Dict[str, str]:
    keys = (
        "personal", "work", "education", "finance", "budget", "vision",
        "planning", "household", "selfCare", "travel", "social", "journal",
    )
    return dict(zip(keys, colors))


# ═══════════════════════════════════════════════════════
#  五个内置预设
# ═══════════════════════════════════════════════════════

STYLE_PRESETS: Dict[str, Dict[str, Any]] = {
    "classic": {
        "id": "classic",
        "name": "Classic Planner",
        "description": "Neutral, soft paper tones with minimal color. Suitable for everyone.",
        "book_border": "border-[#9B8774]",
        "book_bg": "#F5F5F4",
        "paper_bg": "#FDFDFB",
        "header_bg": "#F3F4F6",
        "left_tabs": _left(
            "bg-gray-500", "bg-gray-600", "bg-gray-600", "bg-gray-500",
            "bg-gray-500", "bg-gray-600", "bg-gray-600",
        ),
        "right_tabs": _right(*(["bg-stone-500", "bg-stone-600"] * 6)),
    },
    "bold-structured": {
        "id": "bold-structured",
        "name": "Bold & Structured",
        "description": "Darker accents, strong contrast, muted blues and greys. Professional focus.",
        "book_border": "border-[#2C3E50]",
        "book_bg": "#F1F5F9",
        "paper_bg": "#F8F9FA",
        "header_bg": "#E2E8F0",
        "left_tabs": _left(
            "bg-slate-700", "bg-blue-700", "bg-blue-800", "bg-slate-700",
            "bg-slate-800", "bg-slate-600", "bg-slate-600",
        ),
        "right_tabs": _right(
            "bg-slate-600", "bg-blue-900", "bg-slate-700", "bg-slate-800",
            "bg-slate-700", "bg-slate-600", "bg-slate-700", "bg-slate-600",
            "bg-slate-700", "bg-slate-600", "bg-blue-600", "bg-slate-700",
        ),
    },
    "calm-minimal": {
        "id": "calm-minimal",
        "name": "Calm & Minimal",
        "description": "Very low saturation, beige and grey tones. Reduced visual noise. ADHD-friendly.",
        "book_border": "border-[#B8AFA4]",
        "book_bg": "#F5F5F4",
        "paper_bg": "#FAF9F7",
        "header_bg": "#F5F5F4",
        "left_tabs": _left(
            "bg-stone-400", "bg-stone-500", "bg-stone-500", "bg-stone-400",
            "bg-stone-400", "bg-stone-500", "bg-stone-500",
        ),
        "right_tabs": _right(*(["bg-neutral-400", "bg-neutral-500"] * 6)),
    },
    "bright-playful": {
        "id": "bright-playful",
        "name": "Bright & Playful",
        "description": "Colorful and expressive. Suitable for children or creative users.",
        "book_border": "border-[#8b7355]",
        "book_bg": "#F0E6DC",
        "paper_bg": "#FEFDFB",
        "header_bg": "#F3F4F6",
        "left_tabs": _left(
            "bg-gray-400", "bg-blue-500", "bg-green-500", "bg-amber-500",
            "bg-purple-500", "bg-purple-500", "bg-indigo-500",
        ),
        "right_tabs": _right(
            "bg-pink-500", "bg-indigo-600", "bg-cyan-500", "bg-emerald-600",
            "bg-teal-600", "bg-violet-500", "bg-orange-500", "bg-rose-500",
            "bg-fuchsia-500", "bg-sky-500", "bg-blue-400", "bg-amber-600",
        ),
    },
    "high-contrast": {
        "id": "high-contrast",
        "name": "High Contrast",
        "description": "Accessibility-focused with clear separation of sections. Maximum readability.",
        "book_border": "border-black",
        "book_bg": "#FFFFFF",
        "paper_bg": "#FFFFFF",
        "header_bg": "#E5E7EB",
        "left_tabs": _left(
            "bg-gray-900", "bg-black", "bg-gray-800", "bg-black",
            "bg-gray-900", "bg-gray-700", "bg-gray-700",
        ),
        "right_tabs": _right(
            "bg-gray-900", "bg-black", "bg-gray-800", "bg-black",
            "bg-gray-900", "bg-black", "bg-gray-800", "bg-black",
            "bg-gray-900", "bg-black", "bg-gray-800", "bg-black",
        ),
    },
}
