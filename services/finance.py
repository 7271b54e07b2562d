"""
财务服务 — 收入来源 / 负债 / 储蓄目标

数据来源：income_sources / debts / savings_goals 表（按 user_id）
汇总口径：
- 月收入 = Σ expected_amount × MONTHLY_FACTOR[frequency]（仅 is_active）
- 总负债 = Σ current_balance（仅 is_active）
- 储蓄进度 = current_amount / target_amount（封顶 100%）
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional

import pandas as pd

from config.constants import MONTHLY_FACTOR
from services.records import RecordStore


def monthly_amount(amount: Optional[float], frequency: str) -> float:
    """把任意频率的金额折算为每月金额；irregular / 未知频率为 0"""
    if not amount:
        return 0.0
    return float(amount) * MONTHLY_FACTOR.get(frequency, 0.0)


def progress_percent(current: Optional[float], target: Optional[float]) -> float:
    """储蓄进度百分比（0-100）"""
    if not target or target <= 0:
        return 0.0
    pct = (current or 0) / target * 100
    return max(0.0, min(100.0, pct))


class FinanceService:
    """
    财务服务

    三张表共用 RecordStore 的增删改查；汇总为纯计算。
    """

    income = RecordStore("income_sources", order_by="source_name ASC")
    debts = RecordStore("debts", order_by="priority DESC, current_balance DESC")
    savings = RecordStore("savings_goals", order_by="priority DESC, goal_name ASC")

    @staticmethod
    def summarize(
        incomes: List[Dict[str, Any]],
        debts: List[Dict[str, Any]],
        goals: List[Dict[str, Any]],
    ) -> Dict[str, float]:
        """
        财务汇总

        Returns:
            {monthly_income, total_debt, monthly_debt_payments,
             savings_current, savings_target, savings_progress}
        """
        active = lambda rows: [r for r in rows if r.get("is_active", 1)]  # noqa: E731

        monthly_income = sum(
            monthly_amount(r.get("expected_amount"), r.get("frequency", "monthly"))
            for r in active(incomes)
        )
        total_debt = sum(r.get("current_balance") or 0 for r in active(debts))
        payments = sum(r.get("payment_amount") or 0 for r in active(debts))
        saved = sum(r.get("current_amount") or 0 for r in active(goals))
        target = sum(r.get("target_amount") or 0 for r in active(goals))

        return {
            "monthly_income": monthly_income,
            "total_debt": total_debt,
            "monthly_debt_payments": payments,
            "savings_current": saved,
            "savings_target": target,
            "savings_progress": progress_percent(saved, target),
        }

    @staticmethod
    def get_overview(user_id: str) -> Dict[str, Any]:
        """拉取三张表并汇总"""
        incomes = FinanceService.income.list(user_id)
        debts = FinanceService.debts.list(user_id)
        goals = FinanceService.savings.list(user_id)
        return {
            "incomes": incomes,
            "debts": debts,
            "goals": goals,
            **FinanceService.summarize(incomes, debts, goals),
        }

    @staticmethod
    def savings_frame(goals: List[Dict[str, Any]]) -> Optional[pd.DataFrame]:
        """
        储蓄目标进度 DataFrame（图表用）

        Returns:
            DataFrame(goal, current, remaining, progress) 或 None
        """
        rows = [g for g in goals if g.get("is_active", 1)]
        if not rows:
            return None
        df = pd.DataFrame({
            "goal": [g["goal_name"] for g in rows],
            "current": [float(g.get("current_amount") or 0) for g in rows],
            "target": [float(g.get("target_amount") or 0) for g in rows],
        })
        df["remaining"] = (df["target"] - df["current"]).clip(lower=0)
        df["progress"] = [
            progress_percent(c, t) for c, t in zip(df["current"], df["target"])
        ]
        return df
