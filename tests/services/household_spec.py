"""家务服务测试：购物清单 + 清洁任务到期规则。"""
from __future__ import annotations

from datetime import datetime

from services import HouseholdService
from services.household import days_until_due, group_by_category, group_by_room, is_overdue

NOW = datetime(2026, 3, 5, 12, 0)


def test_days_until_due_and_overdue():
    """每日/每周/每月间隔 1/7/30 天；从未完成视为逾期。"""
    weekly = {"frequency": "weekly", "last_completed": "2026-03-01T10:00:00"}
    assert days_until_due(weekly, NOW) == 3
    assert not is_overdue(weekly, NOW)

    daily = {"frequency": "daily", "last_completed": "2026-03-03T08:00:00"}
    assert days_until_due(daily, NOW) == -1
    assert is_overdue(daily, NOW)

    monthly = {"frequency": "monthly", "last_completed": "2026-02-10 09:00:00"}
    assert days_until_due(monthly, NOW) == 7

    never = {"frequency": "weekly", "last_completed": None}
    assert days_until_due(never, NOW) is None
    assert is_overdue(never, NOW)


def test_group_by_room():
    """无房间归入 General，组名排序。"""
    tasks = [
        {"task_name": "a", "room": "Kitchen"},
        {"task_name": "b", "room": None},
        {"task_name": "c", "room": "Bathroom"},
        {"task_name": "d", "room": "Kitchen"},
    ]
    groups = group_by_room(tasks)
    assert list(groups) == ["Bathroom", "General", "Kitchen"]
    assert [t["task_name"] for t in groups["Kitchen"]] == ["a", "d"]


def test_group_by_category_order():
    """类别顺序跟随预定义列表，未知类别排最后。"""
    items = [
        {"item_name": "x", "category": "mystery"},
        {"item_name": "milk", "category": "dairy"},
        {"item_name": "apple", "category": "produce"},
    ]
    assert list(group_by_category(items)) == ["produce", "dairy", "mystery"]


def test_shopping_list_only_needed(seeded_db, household_id):
    """购物清单只含待购项目。"""
    shopping = HouseholdService.shopping_list(household_id)
    names = [i["item_name"] for items in shopping.values() for i in items]
    assert sorted(names) == ["Apples", "Milk"]
    assert list(shopping) == ["produce", "dairy"]


def test_toggle_purchased(seeded_db, household_id):
    """needed ↔ purchased，并记录 purchased_at。"""
    milk = next(
        i for i in HouseholdService.groceries.list(household_id) if i["item_name"] == "Milk"
    )
    assert HouseholdService.toggle_purchased(household_id, milk, now=NOW)
    updated = HouseholdService.groceries.get(household_id, milk["id"])
    assert updated["status"] == "purchased"
    assert updated["purchased_at"].startswith("2026-03-05")

    assert HouseholdService.toggle_purchased(household_id, updated)
    reverted = HouseholdService.groceries.get(household_id, milk["id"])
    assert reverted["status"] == "needed"
    assert reverted["purchased_at"] is None


def test_clear_purchased(seeded_db, household_id):
    """清除已购项目。"""
    assert HouseholdService.clear_purchased(household_id) == 1
    assert HouseholdService.groceries.list(household_id, status="purchased") == []


def test_other_household_cannot_change_items(seeded_db, household_id):
    """其他家庭不能勾选 / 完成本家庭的项目。"""
    milk = next(
        i for i in HouseholdService.groceries.list(household_id) if i["item_name"] == "Milk"
    )
    assert HouseholdService.toggle_purchased("household-2", milk, now=NOW) is False
    assert HouseholdService.groceries.get(household_id, milk["id"])["status"] == "needed"

    task = HouseholdService.cleaning.list(household_id)[0]
    assert HouseholdService.mark_completed("household-2", task["id"], now=NOW) is False


def test_mark_completed_and_overdue_tasks(seeded_db, household_id):
    """完成后不再逾期。"""
    overdue = HouseholdService.overdue_tasks(household_id, now=NOW)
    assert [t["task_name"] for t in overdue] == ["Wipe hob"]

    assert HouseholdService.mark_completed(household_id, overdue[0]["id"], now=NOW)
    assert HouseholdService.overdue_tasks(household_id, now=NOW) == []


def test_due_on(seeded_db, household_id):
    """每周任务在上次完成 7 天后到期。"""
    tasks = HouseholdService.cleaning.list(household_id)
    due = HouseholdService.due_on(tasks, datetime(2026, 3, 8))
    assert [t["task_name"] for t in due] == ["Hoover"]
    assert HouseholdService.due_on(tasks, datetime(2026, 3, 7)) == []
