"""
日记 CRUD

每个用户每天最多一篇（UNIQUE(user_id, entry_date)），写入走 upsert。
"""
from typing import Any, Dict, List, Optional

from db.connection import get_connection


def upsert(
    user_id: str,
    entry_date: str,
    content: str,
    *,
    title: Optional[str] = None,
    mood: Optional[str] = None,
) -> int:
    """
    写入某天的日记（已存在则覆盖正文/标题/心情）

    Returns:
        日记 ID
    """
    conn = get_connection()
    conn.execute("""
        INSERT INTO journal_entries (user_id, entry_date, title, content, mood)
        VALUES (?, ?, ?, ?, ?)
        ON CONFLICT(user_id, entry_date) DO UPDATE SET
            title = excluded.title,
            content = excluded.content,
            mood = excluded.mood,
            updated_at = CURRENT_TIMESTAMP
    """, (user_id, entry_date, title, content, mood))
    row = conn.execute(
        "SELECT id FROM journal_entries WHERE user_id = ? AND entry_date = ?",
        (user_id, entry_date),
    ).fetchone()
    conn.commit()
    conn.close()
    return row["id"]


def get_for_date(user_id: str, entry_date: str) -> Optional[Dict[str, Any]]:
    """获取某天的日记"""
    conn = get_connection()
    row = conn.execute(
        "SELECT * FROM journal_entries WHERE user_id = ? AND entry_date = ?",
        (user_id, entry_date),
    ).fetchone()
    conn.close()
    return dict(row) if row else None


def get_range(user_id: str, start_date: str, end_date: str) -> List[Dict[str, Any]]:
    """获取日期区间 [start, end] 内的日记（按日期正序）"""
    conn = get_connection()
    rows = conn.execute("""
        SELECT * FROM journal_entries
        WHERE user_id = ? AND entry_date >= ? AND entry_date <= ?
        ORDER BY entry_date ASC
    """, (user_id, start_date, end_date)).fetchall()
    conn.close()
    return [dict(r) for r in rows]
