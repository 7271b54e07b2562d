"""
数据库连接管理 + Schema 初始化

唯一的数据库连接入口。启用 WAL 模式支持多标签页并发访问。
"""
import os
import shutil
import sqlite3
from pathlib import Path
from typing import Optional

# 数据库路径（默认 prod + shadow）
DEFAULT_DB_PATH = Path(__file__).parent.parent / "data" / "planner.db"
SHADOW_DB_PATH = Path(__file__).parent.parent / "data" / "planner_test.db"


def get_db_path() -> Path:
    """获取数据库路径（支持 prod/shadow 与自定义路径）。"""
    env_path = os.getenv("PLANNER_DB_PATH")
    if env_path:
        return Path(env_path)
    role = os.getenv("PLANNER_DB_ROLE", "prod").lower()
    return SHADOW_DB_PATH if role == "shadow" else DEFAULT_DB_PATH


# ═══════════════════════════════════════════════════════
#  Schema：偏好表 + 6 个记录表（每行归属一个 owner）
# ═══════════════════════════════════════════════════════

_SCHEMA = """
CREATE TABLE IF NOT EXISTS user_preferences (
    user_id          TEXT PRIMARY KEY,
    custom_overrides TEXT NOT NULL DEFAULT '{}',
    created_at       TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
    updated_at       TIMESTAMP DEFAULT CURRENT_TIMESTAMP
);

CREATE TABLE IF NOT EXISTS income_sources (
    id              INTEGER PRIMARY KEY AUTOINCREMENT,
    user_id         TEXT NOT NULL,
    source_name     TEXT NOT NULL,
    source_type     TEXT NOT NULL DEFAULT 'other' CHECK(
        source_type IN ('salary','freelance','benefits','passive',
                        'business','investment_income','other')
    ),
    frequency       TEXT NOT NULL DEFAULT 'monthly' CHECK(
        frequency IN ('weekly','biweekly','monthly','quarterly','annual','irregular')
    ),
    expected_amount REAL,
    currency        TEXT DEFAULT 'GBP',
    is_active       INTEGER DEFAULT 1,
    notes           TEXT,
    created_at      TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
    updated_at      TIMESTAMP DEFAULT CURRENT_TIMESTAMP
);
CREATE INDEX IF NOT EXISTS idx_income_user ON income_sources(user_id);

CREATE TABLE IF NOT EXISTS debts (
    id              INTEGER PRIMARY KEY AUTOINCREMENT,
    user_id         TEXT NOT NULL,
    debt_name       TEXT NOT NULL,
    debt_type       TEXT NOT NULL DEFAULT 'other' CHECK(
        debt_type IN ('mortgage','student_loan','car_loan',
                      'personal_loan','credit_card','other')
    ),
    current_balance REAL NOT NULL DEFAULT 0,
    interest_rate   REAL,
    payment_amount  REAL,
    priority        INTEGER DEFAULT 0,
    is_active       INTEGER DEFAULT 1,
    notes           TEXT,
    created_at      TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
    updated_at      TIMESTAMP DEFAULT CURRENT_TIMESTAMP
);
CREATE INDEX IF NOT EXISTS idx_debts_user ON debts(user_id);

CREATE TABLE IF NOT EXISTS savings_goals (
    id              INTEGER PRIMARY KEY AUTOINCREMENT,
    user_id         TEXT NOT NULL,
    goal_name       TEXT NOT NULL,
    goal_type       TEXT NOT NULL DEFAULT 'short_term' CHECK(
        goal_type IN ('emergency_fund','sinking_fund','short_term',
                      'medium_term','long_term')
    ),
    target_amount   REAL NOT NULL DEFAULT 0,
    current_amount  REAL NOT NULL DEFAULT 0,
    target_date     DATE,
    priority        INTEGER DEFAULT 0,
    is_active       INTEGER DEFAULT 1,
    notes           TEXT,
    created_at      TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
    updated_at      TIMESTAMP DEFAULT CURRENT_TIMESTAMP
);
CREATE INDEX IF NOT EXISTS idx_savings_user ON savings_goals(user_id);

CREATE TABLE IF NOT EXISTS grocery_items (
    id              INTEGER PRIMARY KEY AUTOINCREMENT,
    household_id    TEXT NOT NULL,
    item_name       TEXT NOT NULL,
    quantity        TEXT,
    category        TEXT NOT NULL DEFAULT 'other',
    notes           TEXT,
    estimated_price REAL,
    is_recurring    INTEGER DEFAULT 0,
    recurrence_days INTEGER,
    status          TEXT NOT NULL DEFAULT 'needed' CHECK(status IN ('needed','purchased')),
    purchased_at    TIMESTAMP,
    created_at      TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
    updated_at      TIMESTAMP DEFAULT CURRENT_TIMESTAMP
);
CREATE INDEX IF NOT EXISTS idx_grocery_household ON grocery_items(household_id);

CREATE TABLE IF NOT EXISTS cleaning_tasks (
    id               INTEGER PRIMARY KEY AUTOINCREMENT,
    household_id     TEXT NOT NULL,
    task_name        TEXT NOT NULL,
    room             TEXT,
    frequency        TEXT NOT NULL DEFAULT 'weekly' CHECK(
        frequency IN ('daily','weekly','monthly')
    ),
    last_completed   TIMESTAMP,
    assigned_to_name TEXT,
    created_at       TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
    updated_at       TIMESTAMP DEFAULT CURRENT_TIMESTAMP
);
CREATE INDEX IF NOT EXISTS idx_cleaning_household ON cleaning_tasks(household_id);

CREATE TABLE IF NOT EXISTS journal_entries (
    id          INTEGER PRIMARY KEY AUTOINCREMENT,
    user_id     TEXT NOT NULL,
    entry_date  DATE NOT NULL,
    title       TEXT,
    content     TEXT NOT NULL DEFAULT '',
    mood        TEXT,
    created_at  TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
    updated_at  TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
    UNIQUE(user_id, entry_date)
);
CREATE INDEX IF NOT EXISTS idx_journal_date ON journal_entries(entry_date);
"""


def get_connection() -> sqlite3.Connection:
    """
    获取数据库连接（单次使用）

    启用：
    - WAL 模式：支持并发读 + 单写
    - foreign_keys：外键约束生效
    - Row factory：查询结果可按列名访问

    注意：此函数返回的连接不缓存，每次调用创建新连接，用完即关。
    """
    db_path = get_db_path()
    db_path.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(str(db_path), check_same_thread=False)
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA journal_mode=WAL")
    conn.execute("PRAGMA foreign_keys = ON")
    return conn


def init_database():
    """
    初始化数据库 Schema

    幂等操作：所有 CREATE 语句带 IF NOT EXISTS，重复调用安全。
    应在 app.py 启动时调用一次。
    """
    conn = get_connection()
    conn.executescript(_SCHEMA)
    conn.close()


def sync_shadow_from_prod(
    prod_path: Optional[Path] = None,
    shadow_path: Optional[Path] = None,
    *,
    overwrite: bool = True,
) -> Path:
    """将 prod 数据一键复制到 shadow。"""
    prod = Path(prod_path) if prod_path else DEFAULT_DB_PATH
    shadow = Path(shadow_path) if shadow_path else SHADOW_DB_PATH
    if not prod.exists():
        raise FileNotFoundError(f"prod 数据库不存在: {prod}")
    shadow.parent.mkdir(parents=True, exist_ok=True)
    if shadow.exists() and not overwrite:
        return shadow
    shutil.copy2(prod, shadow)
    return shadow
