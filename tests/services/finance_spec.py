"""财务服务测试。"""
from __future__ import annotations

import pytest

from services import FinanceService
from services.finance import monthly_amount, progress_percent


def test_monthly_amount_normalises_frequency():
    """各频率折算为月金额；irregular 不计入。"""
    assert monthly_amount(1200, "annual") == pytest.approx(100)
    assert monthly_amount(100, "weekly") == pytest.approx(100 * 52 / 12)
    assert monthly_amount(300, "quarterly") == pytest.approx(100)
    assert monthly_amount(500, "irregular") == 0
    assert monthly_amount(None, "monthly") == 0


def test_progress_percent_bounds():
    """进度封顶 100%，目标为 0 时为 0。"""
    assert progress_percent(50, 200) == 25
    assert progress_percent(300, 200) == 100
    assert progress_percent(10, 0) == 0
    assert progress_percent(None, 100) == 0


def test_overview_totals(seeded_db, user_id):
    """汇总只算活跃记录。"""
    ov = FinanceService.get_overview(user_id)
    assert len(ov["incomes"]) == 3
    assert ov["monthly_income"] == pytest.approx(2500 + 120 * 52 / 12)
    assert ov["total_debt"] == pytest.approx(8000)
    assert ov["monthly_debt_payments"] == pytest.approx(360)
    assert ov["savings_current"] == pytest.approx(2500)
    assert ov["savings_target"] == pytest.approx(4000)
    assert ov["savings_progress"] == pytest.approx(62.5)


def test_debts_ordered_by_priority(seeded_db, user_id):
    """负债按优先级降序。"""
    names = [d["debt_name"] for d in FinanceService.debts.list(user_id)]
    assert names == ["Credit card", "Car"]


def test_income_crud(empty_db, user_id):
    """新增 / 修改 / 删除收入来源。"""
    assert FinanceService.income.save(user_id, source_name="Salary", expected_amount=2000)
    row = FinanceService.income.list(user_id)[0]
    assert row["frequency"] == "monthly"

    assert FinanceService.income.save(user_id, row["id"], expected_amount=2100)
    assert FinanceService.income.get(user_id, row["id"])["expected_amount"] == 2100

    assert FinanceService.income.delete(user_id, row["id"])
    assert FinanceService.income.list(user_id) == []


def test_records_scoped_to_owner(seeded_db):
    """其他用户看不到这些记录。"""
    assert FinanceService.income.list("someone-else") == []
    assert FinanceService.get_overview("someone-else")["monthly_income"] == 0


def test_other_owner_cannot_touch_record(seeded_db, user_id):
    """按 id 读 / 改 / 删他人的记录一律落空，原记录不变。"""
    card = next(d for d in FinanceService.debts.list(user_id) if d["debt_name"] == "Credit card")

    assert FinanceService.debts.get("someone-else", card["id"]) is None
    assert FinanceService.debts.update("someone-else", card["id"], current_balance=0) is False
    assert FinanceService.debts.save("someone-else", card["id"], debt_name="Stolen") is False
    assert FinanceService.debts.delete("someone-else", card["id"]) is False

    unchanged = FinanceService.debts.get(user_id, card["id"])
    assert unchanged["debt_name"] == "Credit card"
    assert unchanged["current_balance"] == 1200


def test_invalid_enum_is_rejected_without_raising(empty_db, user_id):
    """违反 CHECK 约束时返回失败而不是抛异常。"""
    assert FinanceService.income.create(user_id, source_name="X", frequency="hourly") is None
    assert FinanceService.income.list(user_id) == []


def test_savings_frame(seeded_db, user_id):
    """储蓄 DataFrame 含剩余金额与进度。"""
    df = FinanceService.savings_frame(FinanceService.savings.list(user_id))
    assert df is not None
    assert set(df.columns) >= {"goal", "current", "remaining", "progress"}
    holiday = df[df["goal"] == "Holiday"].iloc[0]
    assert holiday["remaining"] == 0
    assert holiday["progress"] == 100
    assert FinanceService.savings_frame([]) is None
