"""测试夹具：每个测试一个临时数据库，可选插入最小可用数据。"""
from __future__ import annotations

import sys
from pathlib import Path
from typing import Iterable

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import db
from db.connection import init_database

USER_ID = "user-1"
HOUSEHOLD_ID = "household-1"


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path) -> Iterable[Path]:
    """所有测试都指向临时数据库与固定身份，互不影响。"""
    db_path = tmp_path / "planner.db"
    monkeypatch.setenv("PLANNER_DB_PATH", str(db_path))
    monkeypatch.setenv("PLANNER_USER_ID", USER_ID)
    monkeypatch.setenv("PLANNER_HOUSEHOLD_ID", HOUSEHOLD_ID)
    yield db_path


def _seed_finance() -> None:
    db.records.add("income_sources", USER_ID, source_name="Salary", source_type="salary",
                   frequency="monthly", expected_amount=2500)
    db.records.add("income_sources", USER_ID, source_name="Tutoring", source_type="freelance",
                   frequency="weekly", expected_amount=120)
    db.records.add("income_sources", USER_ID, source_name="Old job", source_type="salary",
                   frequency="monthly", expected_amount=900, is_active=0)
    db.records.add("debts", USER_ID, debt_name="Credit card", debt_type="credit_card",
                   current_balance=1200, payment_amount=150, priority=2)
    db.records.add("debts", USER_ID, debt_name="Car", debt_type="car_loan",
                   current_balance=6800, payment_amount=210, priority=1)
    db.records.add("savings_goals", USER_ID, goal_name="Emergency fund",
                   goal_type="emergency_fund", target_amount=3000, current_amount=1500)
    db.records.add("savings_goals", USER_ID, goal_name="Holiday",
                   goal_type="short_term", target_amount=1000, current_amount=1000)


def _seed_household() -> None:
    db.records.add("grocery_items", HOUSEHOLD_ID, item_name="Milk", category="dairy", quantity="2L")
    db.records.add("grocery_items", HOUSEHOLD_ID, item_name="Apples", category="produce")
    db.records.add("grocery_items", HOUSEHOLD_ID, item_name="Bread", category="bakery",
                   status="purchased", purchased_at="2026-03-01T09:00:00")
    db.records.add("cleaning_tasks", HOUSEHOLD_ID, task_name="Hoover", room="Lounge",
                   frequency="weekly", last_completed="2026-03-01T10:00:00")
    db.records.add("cleaning_tasks", HOUSEHOLD_ID, task_name="Wipe hob", room="Kitchen",
                   frequency="daily")


def _seed_journal() -> None:
    db.journal.upsert(USER_ID, "2026-03-01", "First page", title="Start", mood="good")
    db.journal.upsert(USER_ID, "2026-03-03", "Rainy day", mood="low")


@pytest.fixture(scope="function")
def empty_db() -> Iterable[None]:
    """只建 Schema 的空库。"""
    init_database()
    yield


@pytest.fixture(scope="function")
def seeded_db() -> Iterable[None]:
    """建库并插入财务 / 家务 / 日记测试数据。"""
    init_database()
    _seed_finance()
    _seed_household()
    _seed_journal()
    yield


@pytest.fixture
def user_id() -> str:
    return USER_ID


@pytest.fixture
def household_id() -> str:
    return HOUSEHOLD_ID
