"""日历页面 — 日 / 周 / 月视图（日记 + 到期清洁任务）"""
import calendar as _cal
from datetime import date, datetime, timedelta

import streamlit as st

from config import (
    CALENDAR_PATH,
    CALENDAR_VIEWS,
    DEFAULT_CALENDAR_VIEW,
    current_household_id,
    current_user_id,
)
from services import HouseholdService, JournalService
from services.household import is_overdue
from ui import UI, current_route, go_to

_WEEKDAYS = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]


def _view() -> str:
    _, query = current_route()
    view = query.get("view", DEFAULT_CALENDAR_VIEW)
    return view if view in CALENDAR_VIEWS else DEFAULT_CALENDAR_VIEW


def _due(tasks, day: date):
    return HouseholdService.due_on(tasks, datetime.combine(day, datetime.min.time()))


def render():
    user_id = current_user_id()
    household_id = current_household_id()
    view = _view()
    UI.header("Calendar", f"{view.title()} view")

    cols = st.columns(len(CALENDAR_VIEWS) + 1)
    for col, name in zip(cols, CALENDAR_VIEWS):
        col.button(
            name.title(), key=f"calendar_view_{name}",
            type="primary" if name == view else "secondary",
            on_click=go_to, args=(f"{CALENDAR_PATH}?view={name}",),
            use_container_width=True,
        )
    anchor = cols[-1].date_input("Date", value=date.today(), key="calendar_anchor", label_visibility="collapsed")

    tasks = HouseholdService.cleaning.list(household_id)
    if view == "day":
        _day_view(user_id, tasks, anchor)
    elif view == "week":
        _week_view(user_id, tasks, anchor)
    else:
        _month_view(user_id, tasks, anchor)


def _day_view(user_id: str, tasks, day: date):
    UI.sub_heading(day.strftime("%A %d %B %Y"))
    entry = JournalService.get_entry(user_id, day)
    with UI.paper("calendar_day_journal"):
        if entry:
            st.markdown(f"**📝 {entry.get('title') or 'Journal'}**")
            st.write(entry.get("content") or "")
        else:
            st.caption("No journal entry for this day.")
        st.button(
            "Open journal", key="calendar_open_journal",
            on_click=go_to, args=("/planner/journal",),
        )

    due = _due(tasks, day)
    overdue = [t for t in tasks if is_overdue(t)] if day == date.today() else []
    UI.sub_heading("Chores")
    if not due and not overdue:
        st.caption("Nothing due.")
    for t in due:
        st.markdown(f"- 🧹 {t['task_name']} ({t.get('room') or 'General'})")
    for t in overdue:
        st.markdown(f"- 🔴 {t['task_name']} ({t.get('room') or 'General'}) · overdue")


def _week_view(user_id: str, tasks, anchor: date):
    start = anchor - timedelta(days=anchor.weekday())
    days = [start + timedelta(days=i) for i in range(7)]
    entries = JournalService.entries_by_date(user_id, days[0], days[-1])
    cols = st.columns(7)
    for col, day in zip(cols, days):
        with col:
            marker = "**" if day == date.today() else ""
            st.markdown(f"{marker}{_WEEKDAYS[day.weekday()]} {day.day}{marker}")
            entry = entries.get(day.isoformat())
            if entry:
                st.caption(f"📝 {entry.get('title') or 'Journal'}")
            for t in _due(tasks, day):
                st.caption(f"🧹 {t['task_name']}")


def _month_view(user_id: str, tasks, anchor: date):
    weeks = _cal.Calendar(firstweekday=0).monthdatescalendar(anchor.year, anchor.month)
    entries = JournalService.entries_by_date(user_id, weeks[0][0], weeks[-1][-1])
    UI.sub_heading(anchor.strftime("%B %Y"))

    header = st.columns(7)
    for col, name in zip(header, _WEEKDAYS):
        col.markdown(f"**{name}**")
    for week in weeks:
        cols = st.columns(7)
        for col, day in zip(cols, week):
            marks = []
            if day.isoformat() in entries:
                marks.append("📝")
            n_due = len(_due(tasks, day))
            if n_due:
                marks.append(f"🧹{n_due}")
            text = f"{day.day} {' '.join(marks)}".strip()
            if day.month != anchor.month:
                col.caption(text)
            elif day == date.today():
                col.markdown(f"**[{text}]**")
            else:
                col.markdown(text)
