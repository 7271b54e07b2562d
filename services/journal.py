"""
日记服务 — 每日一篇 + 日期区间查询

数据来源：journal_entries 表（UNIQUE(user_id, entry_date)）
写入由日记页的 AutosaveDraft 防抖调用 save_entry()。
"""
from __future__ import annotations

import sqlite3
from datetime import date
from typing import Any, Dict, List, Optional

import db
from config.constants import JOURNAL_MOODS
from utils.log import get_logger

log = get_logger(__name__)


def _iso(day) -> str:
    return day.isoformat() if isinstance(day, date) else str(day)


class JournalService:
    """日记服务"""

    @staticmethod
    def save_entry(
        user_id: str,
        entry_date,
        content: str,
        *,
        title: Optional[str] = None,
        mood: Optional[str] = None,
    ) -> bool:
        """写入某天日记；未知心情按空处理"""
        if mood not in JOURNAL_MOODS:
            mood = None
        try:
            db.journal.upsert(user_id, _iso(entry_date), content, title=title, mood=mood)
        except sqlite3.Error as exc:
            log.warning("journal.save_failed", user_id=user_id, entry_date=_iso(entry_date), error=str(exc))
            return False
        log.debug("journal.saved", user_id=user_id, entry_date=_iso(entry_date))
        return True

    @staticmethod
    def get_entry(user_id: str, entry_date) -> Optional[Dict[str, Any]]:
        try:
            return db.journal.get_for_date(user_id, _iso(entry_date))
        except sqlite3.Error as exc:
            log.warning("journal.read_failed", user_id=user_id, entry_date=_iso(entry_date), error=str(exc))
            return None

    @staticmethod
    def entries_in_range(user_id: str, start, end) -> List[Dict[str, Any]]:
        """[start, end] 闭区间内的日记，按日期正序；失败返回 []"""
        try:
            return db.journal.get_range(user_id, _iso(start), _iso(end))
        except sqlite3.Error as exc:
            log.warning("journal.range_failed", user_id=user_id, error=str(exc))
            return []

    @staticmethod
    def entries_by_date(user_id: str, start, end) -> Dict[str, Dict[str, Any]]:
        """entry_date → 日记（日历格子用）"""
        return {
            e["entry_date"]: e
            for e in JournalService.entries_in_range(user_id, start, end)
        }
