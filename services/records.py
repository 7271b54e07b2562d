"""
记录仓库基类 — 按 owner 的增删改查 + 统一容错

每个规划本页面都是同一个套路：按用户/家庭拉列表、表单新增/修改、确认后删除。
本类把 db.records 的调用包一层：存储异常只记日志，返回空结果，
页面保持原状态（不崩溃、不重试）。
"""
from __future__ import annotations

import sqlite3
from typing import Any, Dict, List, Optional

import db
from utils.log import get_logger

log = get_logger(__name__)


class RecordStore:
    """单表记录仓库"""

    def __init__(self, table: str, *, order_by: str = "created_at DESC"):
        if table not in db.records.OWNER_COLUMNS:
            raise ValueError(f"未知记录表: {table}")
        self.table = table
        self.order_by = order_by

    def list(self, owner_id: str, **where) -> List[Dict[str, Any]]:
        """owner 的全部记录；失败返回 []"""
        try:
            return db.records.list_for_owner(
                self.table, owner_id, where=where or None, order_by=self.order_by,
            )
        except sqlite3.Error as exc:
            log.warning("records.list_failed", table=self.table, owner_id=owner_id, error=str(exc))
            return []

    def get(self, owner_id: str, row_id: int) -> Optional[Dict[str, Any]]:
        """单条记录；不属于 owner 或失败时返回 None"""
        try:
            return db.records.get_by_id(self.table, owner_id, row_id)
        except sqlite3.Error as exc:
            log.warning("records.get_failed", table=self.table, owner_id=owner_id, row_id=row_id, error=str(exc))
            return None

    def create(self, owner_id: str, **fields) -> Optional[int]:
        """新增；失败返回 None"""
        try:
            row_id = db.records.add(self.table, owner_id, **fields)
        except sqlite3.Error as exc:
            log.warning("records.create_failed", table=self.table, owner_id=owner_id, error=str(exc))
            return None
        log.info("records.created", table=self.table, owner_id=owner_id, row_id=row_id)
        return row_id

    def update(self, owner_id: str, row_id: int, **fields) -> bool:
        try:
            return db.records.update(self.table, owner_id, row_id, **fields)
        except sqlite3.Error as exc:
            log.warning("records.update_failed", table=self.table, owner_id=owner_id, row_id=row_id, error=str(exc))
            return False

    def delete(self, owner_id: str, row_id: int) -> bool:
        try:
            deleted = db.records.delete(self.table, owner_id, row_id)
        except sqlite3.Error as exc:
            log.warning("records.delete_failed", table=self.table, owner_id=owner_id, row_id=row_id, error=str(exc))
            return False
        if deleted:
            log.info("records.deleted", table=self.table, owner_id=owner_id, row_id=row_id)
        return deleted

    def save(self, owner_id: str, row_id: Optional[int] = None, **fields) -> bool:
        """表单提交：有 row_id 则修改，否则新增"""
        if row_id is not None:
            return self.update(owner_id, row_id, **fields)
        return self.create(owner_id, **fields) is not None
