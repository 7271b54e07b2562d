"""家务页面 — 购物清单 + 清洁任务"""
import streamlit as st

from config import CLEANING_FREQUENCIES, GROCERY_CATEGORIES, current_household_id
from services import HouseholdService
from services.household import days_until_due, group_by_room
from ui import UI

_CATEGORY_LABELS = {value: f"{emoji} {label}" for value, label, emoji in GROCERY_CATEGORIES}


def render():
    household_id = current_household_id()
    UI.header("Household", "Groceries and cleaning")

    tab_groceries, tab_cleaning = st.tabs(["🛒 Groceries", "🧹 Cleaning"])
    with tab_groceries:
        _groceries(household_id)
    with tab_cleaning:
        _cleaning(household_id)


# ═══════════════════════════════════════════════════════
#  购物清单
# ═══════════════════════════════════════════════════════

def _groceries(household_id: str):
    with st.form("grocery_add_form", clear_on_submit=True):
        c1, c2, c3 = st.columns([3, 1, 2])
        name = c1.text_input("Item")
        quantity = c2.text_input("Qty")
        category = c3.selectbox(
            "Category", list(_CATEGORY_LABELS), format_func=_CATEGORY_LABELS.get,
        )
        price = st.number_input("Estimated price", min_value=0.0, step=0.5)
        submitted = st.form_submit_button("Add to list")

    if submitted:
        if not name.strip():
            st.error("Item name is required.")
        else:
            ok = HouseholdService.groceries.create(
                household_id,
                item_name=name.strip(), quantity=quantity or None,
                category=category, estimated_price=price or None,
            ) is not None
            UI.result(ok, f"Added {name.strip()}")

    shopping = HouseholdService.shopping_list(household_id)
    if not shopping:
        UI.empty("The shopping list is empty.")
    for category, items in shopping.items():
        UI.sub_heading(_CATEGORY_LABELS.get(category, category.title()))
        for item in items:
            label = item["item_name"] + (f" · {item['quantity']}" if item.get("quantity") else "")
            st.checkbox(
                label, value=False, key=f"grocery_{item['id']}",
                on_change=HouseholdService.toggle_purchased, args=(household_id, item),
            )

    purchased = HouseholdService.groceries.list(household_id, status="purchased")
    if purchased:
        with UI.expander(f"Purchased ({len(purchased)})", key="grocery_purchased"):
            for item in purchased:
                st.checkbox(
                    item["item_name"], value=True, key=f"grocery_{item['id']}",
                    on_change=HouseholdService.toggle_purchased, args=(household_id, item),
                )
            if st.button("Clear purchased", key="grocery_clear"):
                removed = HouseholdService.clear_purchased(household_id)
                st.toast(f"Removed {removed} item(s)")
                st.rerun()


# ═══════════════════════════════════════════════════════
#  清洁任务
# ═══════════════════════════════════════════════════════

def _due_text(task) -> str:
    remaining = days_until_due(task)
    if remaining is None:
        return "🔴 Never done"
    if remaining < 0:
        return f"🔴 Overdue by {-remaining}d"
    if remaining == 0:
        return "🟠 Due today"
    return f"🟢 Due in {remaining}d"


def _cleaning(household_id: str):
    with st.form("cleaning_add_form", clear_on_submit=True):
        c1, c2, c3 = st.columns([3, 2, 2])
        name = c1.text_input("Task")
        room = c2.text_input("Room")
        frequency = c3.selectbox("Frequency", CLEANING_FREQUENCIES, index=1, format_func=str.title)
        assignee = st.text_input("Assigned to")
        submitted = st.form_submit_button("Add task")

    if submitted:
        if not name.strip():
            st.error("Task name is required.")
        else:
            ok = HouseholdService.cleaning.create(
                household_id,
                task_name=name.strip(), room=room.strip() or None,
                frequency=frequency, assigned_to_name=assignee.strip() or None,
            ) is not None
            UI.result(ok, f"Added {name.strip()}")

    tasks = HouseholdService.cleaning.list(household_id)
    if not tasks:
        UI.empty("No cleaning tasks yet.")
        return

    for room, room_tasks in group_by_room(tasks).items():
        UI.sub_heading(room)
        for task in room_tasks:
            c1, c2, c3, c4 = st.columns([4, 2, 1, 1])
            who = f" · {task['assigned_to_name']}" if task.get("assigned_to_name") else ""
            c1.markdown(f"**{task['task_name']}** ({task['frequency']}){who}")
            c2.caption(_due_text(task))
            if c3.button("✅", key=f"cleaning_done_{task['id']}", help="Mark done"):
                if UI.result(HouseholdService.mark_completed(household_id, task["id"]), "Marked done"):
                    st.rerun()
            if c4.button("🗑", key=f"cleaning_del_{task['id']}", help="Delete"):
                st.session_state["cleaning_pending_delete"] = task["id"]

    pending = st.session_state.get("cleaning_pending_delete")
    if pending is not None:
        st.warning("Delete this cleaning task?")
        if UI.confirm_delete(f"cleaning_{pending}"):
            deleted = HouseholdService.cleaning.delete(household_id, pending)
            if UI.result(deleted, "Task deleted", "Could not delete. Please try again."):
                st.session_state.pop("cleaning_pending_delete", None)
                st.rerun()
