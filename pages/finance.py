"""财务页面 — 收入来源 / 负债 / 储蓄目标"""
import streamlit as st

from config import DEBT_TYPES, INCOME_FREQUENCIES, INCOME_SOURCE_TYPES, SAVINGS_GOAL_TYPES, current_user_id
from pages._common import option_index, pick_record, records_frame
from services import FinanceService
from services.finance import progress_percent
from ui import UI, render_chart, savings_chart


_DELETE_FAILED = "Could not delete. Please try again."


def _title(value: str) -> str:
    return value.replace("_", " ").title()


def render():
    user_id = current_user_id()
    UI.header("Finance", "Income sources, debts and savings goals")

    ov = FinanceService.get_overview(user_id)
    UI.metric_row([
        ("Monthly income", UI.money(ov["monthly_income"])),
        ("Total debt", UI.money(ov["total_debt"])),
        ("Debt payments / mo", UI.money(ov["monthly_debt_payments"])),
        ("Savings progress", f"{ov['savings_progress']:.0f}%"),
    ])

    tab_income, tab_debts, tab_savings = st.tabs(["💷 Income", "💳 Debts", "🐷 Savings"])
    with tab_income:
        _income_section(user_id, ov["incomes"])
    with tab_debts:
        _debt_section(user_id, ov["debts"])
    with tab_savings:
        _savings_section(user_id, ov["goals"])


# ═══════════════════════════════════════════════════════
#  收入来源
# ═══════════════════════════════════════════════════════

def _income_section(user_id: str, incomes):
    if incomes:
        UI.table(records_frame(incomes, {
            "source_name": "Source", "source_type": "Type",
            "frequency": "Frequency", "expected_amount": "Amount",
            "is_active": "Active",
        }), title="Income sources")
    else:
        UI.empty("No income sources yet.")

    row = pick_record(incomes, "source_name", key="finance_income_pick") or {}
    with st.form("finance_income_form", clear_on_submit=not row):
        name = st.text_input("Source name", value=row.get("source_name", ""))
        c1, c2, c3 = st.columns(3)
        source_type = c1.selectbox(
            "Type", INCOME_SOURCE_TYPES, format_func=_title,
            index=option_index(INCOME_SOURCE_TYPES, row.get("source_type", "salary")),
        )
        frequency = c2.selectbox(
            "Frequency", INCOME_FREQUENCIES, format_func=_title,
            index=option_index(INCOME_FREQUENCIES, row.get("frequency", "monthly")),
        )
        amount = c3.number_input(
            "Expected amount", min_value=0.0, step=50.0,
            value=float(row.get("expected_amount") or 0),
        )
        active = st.checkbox("Active", value=bool(row.get("is_active", 1)))
        notes = st.text_area("Notes", value=row.get("notes") or "")
        submitted = st.form_submit_button("Save income source")

    if submitted:
        if not name.strip():
            st.error("Source name is required.")
        else:
            ok = FinanceService.income.save(
                user_id, row.get("id"),
                source_name=name.strip(), source_type=source_type,
                frequency=frequency, expected_amount=amount,
                is_active=int(active), notes=notes or None,
            )
            UI.result(ok, "Income source saved")
            if ok:
                st.rerun()

    if row and UI.confirm_delete(f"income_{row['id']}"):
        deleted = FinanceService.income.delete(user_id, row["id"])
        if UI.result(deleted, "Income source deleted", _DELETE_FAILED):
            st.rerun()


# ═══════════════════════════════════════════════════════
#  负债
# ═══════════════════════════════════════════════════════

def _debt_section(user_id: str, debts):
    if debts:
        UI.table(records_frame(debts, {
            "debt_name": "Debt", "debt_type": "Type",
            "current_balance": "Balance", "interest_rate": "Rate %",
            "payment_amount": "Payment", "priority": "Priority",
        }), title="Debts")
    else:
        UI.empty("No debts recorded.")

    row = pick_record(debts, "debt_name", key="finance_debt_pick") or {}
    with st.form("finance_debt_form", clear_on_submit=not row):
        name = st.text_input("Debt name", value=row.get("debt_name", ""))
        c1, c2 = st.columns(2)
        debt_type = c1.selectbox(
            "Type", DEBT_TYPES, format_func=_title,
            index=option_index(DEBT_TYPES, row.get("debt_type", "other")),
        )
        priority = c2.number_input("Priority", min_value=0, step=1, value=int(row.get("priority") or 0))
        c3, c4, c5 = st.columns(3)
        balance = c3.number_input(
            "Current balance", min_value=0.0, step=100.0,
            value=float(row.get("current_balance") or 0),
        )
        rate = c4.number_input(
            "Interest rate %", min_value=0.0, step=0.1,
            value=float(row.get("interest_rate") or 0),
        )
        payment = c5.number_input(
            "Monthly payment", min_value=0.0, step=10.0,
            value=float(row.get("payment_amount") or 0),
        )
        active = st.checkbox("Active", value=bool(row.get("is_active", 1)))
        submitted = st.form_submit_button("Save debt")

    if submitted:
        if not name.strip():
            st.error("Debt name is required.")
        else:
            ok = FinanceService.debts.save(
                user_id, row.get("id"),
                debt_name=name.strip(), debt_type=debt_type,
                current_balance=balance, interest_rate=rate or None,
                payment_amount=payment or None, priority=int(priority),
                is_active=int(active),
            )
            UI.result(ok, "Debt saved")
            if ok:
                st.rerun()

    if row and UI.confirm_delete(f"debt_{row['id']}"):
        deleted = FinanceService.debts.delete(user_id, row["id"])
        if UI.result(deleted, "Debt deleted", _DELETE_FAILED):
            st.rerun()


# ═══════════════════════════════════════════════════════
#  储蓄目标
# ═══════════════════════════════════════════════════════

def _savings_section(user_id: str, goals):
    df = FinanceService.savings_frame(goals)
    if df is not None:
        render_chart(savings_chart(df), key="finance_savings_chart")
        for g in goals:
            UI.progress_bar(
                progress_percent(g.get("current_amount"), g.get("target_amount")),
                label=f"{g['goal_name']} · {UI.money(g.get('current_amount'))} / {UI.money(g.get('target_amount'))}",
            )
    else:
        UI.empty("No savings goals yet.")

    row = pick_record(goals, "goal_name", key="finance_goal_pick") or {}
    with st.form("finance_goal_form", clear_on_submit=not row):
        name = st.text_input("Goal name", value=row.get("goal_name", ""))
        c1, c2 = st.columns(2)
        goal_type = c1.selectbox(
            "Type", SAVINGS_GOAL_TYPES, format_func=_title,
            index=option_index(SAVINGS_GOAL_TYPES, row.get("goal_type", "short_term")),
        )
        target_date = c2.text_input("Target date (YYYY-MM-DD)", value=row.get("target_date") or "")
        c3, c4 = st.columns(2)
        target = c3.number_input(
            "Target amount", min_value=0.0, step=100.0,
            value=float(row.get("target_amount") or 0),
        )
        current = c4.number_input(
            "Saved so far", min_value=0.0, step=50.0,
            value=float(row.get("current_amount") or 0),
        )
        submitted = st.form_submit_button("Save goal")

    if submitted:
        if not name.strip():
            st.error("Goal name is required.")
        else:
            ok = FinanceService.savings.save(
                user_id, row.get("id"),
                goal_name=name.strip(), goal_type=goal_type,
                target_amount=target, current_amount=current,
                target_date=target_date.strip() or None,
            )
            UI.result(ok, "Savings goal saved")
            if ok:
                st.rerun()

    if row and UI.confirm_delete(f"goal_{row['id']}"):
        deleted = FinanceService.savings.delete(user_id, row["id"])
        if UI.result(deleted, "Savings goal deleted", _DELETE_FAILED):
            st.rerun()
