"""
数据库访问层 — 统一导出

使用方式：
    from db import connection, preferences, records, journal

    # 或者
    import db
    db.records.add("debts", user_id, debt_name="Card", current_balance=500)
    db.preferences.get_override(user_id, "planner_settings")
"""
from db import connection
from db import preferences
from db import records
from db import journal

__all__ = [
    "connection",
    "preferences",
    "records",
    "journal",
]
