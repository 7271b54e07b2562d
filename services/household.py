"""
家务服务 — 购物清单 + 清洁任务

数据来源：grocery_items / cleaning_tasks 表（按 household_id）

清洁任务到期规则：
    下次到期 = last_completed + 间隔天数（daily=1 / weekly=7 / monthly=30）
    从未完成的任务视为已逾期
"""
from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from config.constants import CLEANING_INTERVAL_DAYS, GROCERY_CATEGORIES
from services.records import RecordStore

_CATEGORY_ORDER = {value: i for i, (value, _, _) in enumerate(GROCERY_CATEGORIES)}


def _parse_ts(value: Any) -> Optional[datetime]:
    """sqlite TIMESTAMP / ISO 字符串 → datetime"""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    try:
        return datetime.fromisoformat(str(value).replace("Z", ""))
    except ValueError:
        return None


def days_until_due(task: Dict[str, Any], now: Optional[datetime] = None) -> Optional[int]:
    """
    距离下次到期的天数（负数 = 已逾期几天）

    Returns:
        从未完成时返回 None
    """
    last = _parse_ts(task.get("last_completed"))
    if last is None:
        return None
    now = now or datetime.now()
    interval = CLEANING_INTERVAL_DAYS.get(task.get("frequency", "weekly"), 7)
    elapsed = (now - last).days
    return interval - elapsed


def is_overdue(task: Dict[str, Any], now: Optional[datetime] = None) -> bool:
    """是否逾期（从未完成 → True）"""
    remaining = days_until_due(task, now)
    return remaining is None or remaining < 0


def group_by_room(tasks: List[Dict[str, Any]]) -> Dict[str, List[Dict[str, Any]]]:
    """按房间分组（无房间归入 "General"），组名按字母序"""
    groups: Dict[str, List[Dict[str, Any]]] = {}
    for t in tasks:
        groups.setdefault(t.get("room") or "General", []).append(t)
    return dict(sorted(groups.items()))


def group_by_category(items: List[Dict[str, Any]]) -> Dict[str, List[Dict[str, Any]]]:
    """按购物类别分组，组顺序与 GROCERY_CATEGORIES 一致，未知类别排最后"""
    groups: Dict[str, List[Dict[str, Any]]] = {}
    for item in items:
        groups.setdefault(item.get("category") or "other", []).append(item)
    return dict(sorted(
        groups.items(),
        key=lambda kv: (_CATEGORY_ORDER.get(kv[0], len(_CATEGORY_ORDER)), kv[0]),
    ))


class HouseholdService:
    """家务服务"""

    groceries = RecordStore("grocery_items", order_by="status ASC, item_name ASC")
    cleaning = RecordStore("cleaning_tasks", order_by="room ASC, task_name ASC")

    # ── 购物清单 ──

    @staticmethod
    def toggle_purchased(
        household_id: str,
        item: Dict[str, Any],
        now: Optional[datetime] = None,
    ) -> bool:
        """needed ↔ purchased；购买时记录 purchased_at"""
        if item.get("status") == "purchased":
            return HouseholdService.groceries.update(
                household_id, item["id"], status="needed", purchased_at=None,
            )
        stamp = (now or datetime.now()).isoformat(timespec="seconds")
        return HouseholdService.groceries.update(
            household_id, item["id"], status="purchased", purchased_at=stamp,
        )

    @staticmethod
    def shopping_list(household_id: str) -> Dict[str, List[Dict[str, Any]]]:
        """待购项目按类别分组"""
        needed = HouseholdService.groceries.list(household_id, status="needed")
        return group_by_category(needed)

    @staticmethod
    def clear_purchased(household_id: str) -> int:
        """删除全部已购项目，返回删除条数"""
        purchased = HouseholdService.groceries.list(household_id, status="purchased")
        return sum(
            1 for item in purchased
            if HouseholdService.groceries.delete(household_id, item["id"])
        )

    # ── 清洁任务 ──

    @staticmethod
    def mark_completed(
        household_id: str,
        task_id: int,
        now: Optional[datetime] = None,
    ) -> bool:
        stamp = (now or datetime.now()).isoformat(timespec="seconds")
        return HouseholdService.cleaning.update(household_id, task_id, last_completed=stamp)

    @staticmethod
    def overdue_tasks(
        household_id: str,
        now: Optional[datetime] = None,
    ) -> List[Dict[str, Any]]:
        """逾期任务（日历 / 首页提醒用）"""
        return [
            t for t in HouseholdService.cleaning.list(household_id)
            if is_overdue(t, now)
        ]

    @staticmethod
    def due_on(
        tasks: List[Dict[str, Any]],
        day: datetime,
    ) -> List[Dict[str, Any]]:
        """某天到期的任务（从未完成的任务不计入具体日期）"""
        due = []
        for t in tasks:
            last = _parse_ts(t.get("last_completed"))
            if last is None:
                continue
            interval = CLEANING_INTERVAL_DAYS.get(t.get("frequency", "weekly"), 7)
            if (day.date() - last.date()).days == interval:
                due.append(t)
        return due
