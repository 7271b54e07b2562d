"""
通用记录 CRUD（表级白名单）

所有规划本记录表结构相同：自增 id + owner 列（user_id / household_id）
+ 业务字段 + created_at / updated_at。
纯数据访问，不含业务逻辑；表名与列名只来自白名单，不拼接用户输入。
"""
from typing import Any, Dict, List, Optional

from db.connection import get_connection

# 表名 → owner 列
OWNER_COLUMNS: Dict[str, str] = {
    "income_sources": "user_id",
    "debts": "user_id",
    "savings_goals": "user_id",
    "grocery_items": "household_id",
    "cleaning_tasks": "household_id",
    "journal_entries": "user_id",
}

# 不允许通过 fields 写入的列
_PROTECTED = frozenset({"id", "created_at", "updated_at"})


def _owner_column(table: str) -> str:
    try:
        return OWNER_COLUMNS[table]
    except KeyError:
        raise ValueError(f"未知记录表: {table}") from None


def _columns(conn, table: str) -> List[str]:
    return [r["name"] for r in conn.execute(f"PRAGMA table_info({table})")]


def _clean(conn, table: str, fields: Dict[str, Any]) -> Dict[str, Any]:
    """只保留表中真实存在且非受保护的列"""
    allowed = set(_columns(conn, table)) - _PROTECTED - {_owner_column(table)}
    return {k: v for k, v in fields.items() if k in allowed}


def add(table: str, owner_id: str, **fields) -> int:
    """
    新增记录

    Args:
        table:    记录表名（必须在 OWNER_COLUMNS 中）
        owner_id: 所属用户/家庭 ID
        **fields: 业务字段（未知列被忽略）

    Returns:
        新记录的 ID
    """
    owner = _owner_column(table)
    conn = get_connection()
    data = _clean(conn, table, fields)
    data[owner] = owner_id

    cols = ", ".join(data)
    placeholders = ", ".join("?" for _ in data)
    cursor = conn.execute(
        f"INSERT INTO {table} ({cols}) VALUES ({placeholders})",
        list(data.values()),
    )
    row_id = cursor.lastrowid
    conn.commit()
    conn.close()
    return row_id


def list_for_owner(
    table: str,
    owner_id: str,
    *,
    where: Optional[Dict[str, Any]] = None,
    order_by: str = "created_at DESC",
    limit: int = 1000,
) -> List[Dict[str, Any]]:
    """
    按 owner 查询记录

    Args:
        where:    额外等值过滤（列名 → 值，未知列被忽略）
        order_by: 排序子句（只允许 "<列> [ASC|DESC]" 逗号分隔）
        limit:    返回条数上限
    """
    owner = _owner_column(table)
    conn = get_connection()
    columns = set(_columns(conn, table))

    clauses = [f"{owner} = ?"]
    params: list = [owner_id]
    for col, value in (where or {}).items():
        if col in columns:
            clauses.append(f"{col} = ?")
            params.append(value)

    order_parts = []
    for part in order_by.split(","):
        tokens = part.split()
        if tokens and tokens[0] in columns:
            direction = tokens[1].upper() if len(tokens) > 1 else "ASC"
            if direction not in ("ASC", "DESC"):
                direction = "ASC"
            order_parts.append(f"{tokens[0]} {direction}")
    order_sql = ", ".join(order_parts) or "id DESC"

    sql = (
        f"SELECT * FROM {table} WHERE {' AND '.join(clauses)} "
        f"ORDER BY {order_sql} LIMIT ?"
    )
    params.append(limit)
    rows = conn.execute(sql, params).fetchall()
    conn.close()
    return [dict(r) for r in rows]


def get_by_id(table: str, owner_id: str, row_id: int) -> Optional[Dict[str, Any]]:
    """根据 ID 获取单条记录（只返回属于 owner 的记录）"""
    owner = _owner_column(table)
    conn = get_connection()
    row = conn.execute(
        f"SELECT * FROM {table} WHERE id = ? AND {owner} = ?", (row_id, owner_id)
    ).fetchone()
    conn.close()
    return dict(row) if row else None


def update(table: str, owner_id: str, row_id: int, **fields) -> bool:
    """更新指定字段（自动刷新 updated_at），返回是否命中；不属于 owner 的记录不改"""
    owner = _owner_column(table)
    conn = get_connection()
    data = _clean(conn, table, fields)
    if not data:
        conn.close()
        return False

    set_clause = ", ".join(f"{k} = ?" for k in data)
    cursor = conn.execute(
        f"UPDATE {table} SET {set_clause}, updated_at = CURRENT_TIMESTAMP "
        f"WHERE id = ? AND {owner} = ?",
        list(data.values()) + [row_id, owner_id],
    )
    conn.commit()
    updated = cursor.rowcount > 0
    conn.close()
    return updated


def delete(table: str, owner_id: str, row_id: int) -> bool:
    """删除属于 owner 的记录，返回是否成功"""
    owner = _owner_column(table)
    conn = get_connection()
    cursor = conn.execute(
        f"DELETE FROM {table} WHERE id = ? AND {owner} = ?", (row_id, owner_id)
    )
    conn.commit()
    deleted = cursor.rowcount > 0
    conn.close()
    return deleted
