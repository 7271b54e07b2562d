"""
规划本常量 — Single Source of Truth

本文件是整个系统中关于「路由」「断点」「标签栏规则」「记录枚举」的唯一定义处。
任何新增/修改路由或枚举值都只改这一个文件。
"""
import os
from enum import Enum
from typing import Dict, FrozenSet, List, Tuple

# ═══════════════════════════════════════════════════════
#  Streamlit 页面配置
# ═══════════════════════════════════════════════════════

PAGE_CONFIG: Dict = dict(
    page_title="Planner",
    page_icon="📒",
    layout="wide",
    initial_sidebar_state="expanded",
)

# ═══════════════════════════════════════════════════════
#  身份（单机版：由环境变量指定，默认本地用户）
# ═══════════════════════════════════════════════════════


def current_user_id() -> str:
    """当前用户 ID（每次调用时读取环境变量）"""
    return os.getenv("PLANNER_USER_ID", "local-user")


def current_household_id() -> str:
    """当前家庭 ID"""
    return os.getenv("PLANNER_HOUSEHOLD_ID", "local-household")


# ═══════════════════════════════════════════════════════
#  路由
# ═══════════════════════════════════════════════════════

INDEX_PATH = "/planner"
INDEX_ALIAS = "/planner/index"
SETTINGS_PATH = "/settings"
CALENDAR_PATH = "/planner/calendar"

# 日历 view 参数缺省值（比较两侧都适用）
DEFAULT_CALENDAR_VIEW = "month"
CALENDAR_VIEWS: Tuple[str, ...] = ("day", "week", "month")

DAY_VIEW_PATH = f"{CALENDAR_PATH}?view=day"
WEEK_VIEW_PATH = f"{CALENDAR_PATH}?view=week"
MONTH_VIEW_PATH = f"{CALENDAR_PATH}?view=month"


class TabSide(str, Enum):
    """标签所在侧"""
    LEFT = "left"
    RIGHT = "right"


# 核心标签：不可在设置中停用
CORE_TABS: FrozenSet[str] = frozenset({
    INDEX_PATH, DAY_VIEW_PATH, WEEK_VIEW_PATH, MONTH_VIEW_PATH,
})

# 收藏栏上限 / 下限
MAX_FAVOURITES = 10
MIN_FAVOURITES = 1

# 未自定义收藏时的默认顺序（移动端优先日/周/月视图）
DEFAULT_FAVOURITES_MOBILE: List[str] = [
    DAY_VIEW_PATH, WEEK_VIEW_PATH, MONTH_VIEW_PATH, INDEX_PATH,
]
DEFAULT_FAVOURITES_WIDE: List[str] = [
    INDEX_PATH, DAY_VIEW_PATH, WEEK_VIEW_PATH, MONTH_VIEW_PATH,
]

# ═══════════════════════════════════════════════════════
#  视口断点（px）
# ═══════════════════════════════════════════════════════

TABLET_MIN_WIDTH = 1024     # lg
DESKTOP_MIN_WIDTH = 1280    # xl
INSIGHTS_MIN_WIDTH = 1024   # 侧栏洞察面板出现
INSIGHTS_PINNED_WIDTH = 1920  # 2xl：面板强制展开

DEFAULT_VIEWPORT_WIDTH = 1440

# ═══════════════════════════════════════════════════════
#  自动保存
# ═══════════════════════════════════════════════════════

AUTOSAVE_DELAY_SECONDS = 1.5

# ═══════════════════════════════════════════════════════
#  记录枚举（各表的状态/类型字段）
# ═══════════════════════════════════════════════════════

INCOME_SOURCE_TYPES: List[str] = [
    "salary", "freelance", "benefits", "passive",
    "business", "investment_income", "other",
]

INCOME_FREQUENCIES: List[str] = [
    "weekly", "biweekly", "monthly", "quarterly", "annual", "irregular",
]

# 频率 → 每月次数（用于月收入折算；irregular 不计入）
MONTHLY_FACTOR: Dict[str, float] = {
    "weekly": 52 / 12,
    "biweekly": 26 / 12,
    "monthly": 1.0,
    "quarterly": 1 / 3,
    "annual": 1 / 12,
    "irregular": 0.0,
}

DEBT_TYPES: List[str] = [
    "mortgage", "student_loan", "car_loan",
    "personal_loan", "credit_card", "other",
]

SAVINGS_GOAL_TYPES: List[str] = [
    "emergency_fund", "sinking_fund", "short_term", "medium_term", "long_term",
]

GROCERY_CATEGORIES: List[Tuple[str, str, str]] = [
    ("produce", "Produce", "🥬"),
    ("dairy", "Dairy", "🥛"),
    ("meat", "Meat & Seafood", "🥩"),
    ("bakery", "Bakery", "🍞"),
    ("pantry", "Pantry", "🥫"),
    ("frozen", "Frozen", "❄️"),
    ("beverages", "Beverages", "🥤"),
    ("snacks", "Snacks", "🍿"),
    ("household", "Household", "🧹"),
    ("other", "Other", "📦"),
]

CLEANING_FREQUENCIES: List[str] = ["daily", "weekly", "monthly"]

# 清洁频率 → 间隔天数
CLEANING_INTERVAL_DAYS: Dict[str, int] = {
    "daily": 1,
    "weekly": 7,
    "monthly": 30,
}

JOURNAL_MOODS: List[str] = ["great", "good", "okay", "low", "rough"]
