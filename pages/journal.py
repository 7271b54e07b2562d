"""
日记页面 — 每日一篇，防抖自动保存

每个日期一个 AutosaveDraft（存在 session_state）：
编辑 → SCHEDULED；状态片段每 AUTOSAVE_DELAY_SECONDS 秒 poll 一次，到期写库。
切换日期时，其他日期未写入的草稿立即 flush。
"""
from datetime import date, timedelta

import pandas as pd
import streamlit as st

from config import AUTOSAVE_DELAY_SECONDS, JOURNAL_MOODS, current_user_id
from pages._common import option_index
from services import AutosaveDraft, DraftState, JournalService, flush_pending
from ui import UI, mood_chart, render_chart

_MOOD_LABELS = {
    None: "—",
    "great": "😄 Great",
    "good": "🙂 Good",
    "okay": "😐 Okay",
    "low": "🙁 Low",
    "rough": "😣 Rough",
}

_STATE_TEXT = {
    DraftState.CLEAN: "✓ Saved",
    DraftState.DIRTY: "● Unsaved changes",
    DraftState.SCHEDULED: "… Saving soon",
    DraftState.SAVING: "… Saving",
}


def _draft_key(user_id: str, day: date) -> str:
    return f"journal_draft_{user_id}_{day.isoformat()}"


def _flush_other_days(user_id: str, day: date) -> int:
    """切换日期后，立即写入其他日期仍待保存的草稿"""
    prefix = f"journal_draft_{user_id}_"
    current = _draft_key(user_id, day)
    others = [
        draft for key, draft in list(st.session_state.items())
        if isinstance(key, str) and key.startswith(prefix) and key != current
    ]
    return flush_pending(others)


def _draft_for(user_id: str, day: date) -> AutosaveDraft:
    """取（或创建）某天的草稿"""
    key = _draft_key(user_id, day)
    draft = st.session_state.get(key)
    if draft is None:
        entry = JournalService.get_entry(user_id, day) or {}
        initial = {
            "title": entry.get("title") or "",
            "mood": entry.get("mood"),
            "content": entry.get("content") or "",
        }

        def _save(value):
            return JournalService.save_entry(
                user_id, day, value["content"],
                title=value["title"] or None, mood=value["mood"],
            )

        draft = AutosaveDraft(_save, initial=initial)
        st.session_state[key] = draft
    return draft


@st.fragment(run_every=AUTOSAVE_DELAY_SECONDS)
def _autosave_status(draft: AutosaveDraft):
    state = draft.poll()
    text = _STATE_TEXT[state]
    if state is DraftState.DIRTY and draft.last_error:
        st.error(f"Could not save: {draft.last_error}")
    else:
        st.caption(text)


def render():
    user_id = current_user_id()
    UI.header("Journal", "One page per day. Changes save automatically.")

    day = st.date_input("Date", value=date.today(), key="journal_date")
    _flush_other_days(user_id, day)
    draft = _draft_for(user_id, day)
    saved = draft.value or {}

    c1, c2 = st.columns([3, 1])
    title = c1.text_input("Title", value=saved.get("title", ""), key=f"journal_title_{day}")
    moods = [None, *JOURNAL_MOODS]
    mood = c2.selectbox(
        "Mood", moods, format_func=_MOOD_LABELS.get,
        index=option_index(moods, saved.get("mood")), key=f"journal_mood_{day}",
    )
    content = st.text_area(
        "Entry", value=saved.get("content", ""), height=320,
        key=f"journal_content_{day}",
    )

    draft.edit({"title": title, "mood": mood, "content": content})

    c_status, c_save = st.columns([4, 1])
    with c_status:
        _autosave_status(draft)
    if c_save.button("Save now", key="journal_flush", disabled=not draft.pending):
        UI.result(draft.flush() is DraftState.CLEAN, "Journal saved")

    _recent(user_id, day)


def _recent(user_id: str, day: date):
    """最近 30 天：心情分布 + 日记列表"""
    start = day - timedelta(days=29)
    entries = JournalService.entries_in_range(user_id, start, day)
    UI.sub_heading("Last 30 days")
    if not entries:
        UI.empty("No journal entries in the last 30 days.")
        return

    moods = pd.Series([e.get("mood") or "none" for e in entries]).value_counts()
    df = moods.rename_axis("mood").reset_index(name="count")
    render_chart(mood_chart(df), key="journal_mood_chart")

    for e in reversed(entries):
        with UI.expander(f"{e['entry_date']} · {e.get('title') or 'Untitled'}", key=f"journal_recent_{e['id']}"):
            st.caption(_MOOD_LABELS.get(e.get("mood"), "—"))
            st.write(e.get("content") or "")
