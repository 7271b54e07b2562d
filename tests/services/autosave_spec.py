"""防抖自动保存状态机测试（注入时钟，不 sleep）。"""
from __future__ import annotations

from services import AutosaveDraft, DraftState, flush_pending


class FakeClock:
    def __init__(self, now: float = 0.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def _draft(clock, writes, *, ok=True, delay=1.5):
    def _save(value):
        writes.append(value)
        return ok
    return AutosaveDraft(_save, delay=delay, clock=clock, initial="")


def test_edit_schedules_and_saves_after_delay():
    """编辑 → SCHEDULED；到期 poll → CLEAN 并写入一次。"""
    clock, writes = FakeClock(), []
    draft = _draft(clock, writes)

    assert draft.state is DraftState.CLEAN
    assert draft.edit("hello") is DraftState.SCHEDULED
    assert draft.pending

    clock.advance(1.0)
    assert draft.poll() is DraftState.SCHEDULED
    assert writes == []

    clock.advance(0.5)
    assert draft.poll() is DraftState.CLEAN
    assert writes == ["hello"]
    assert draft.saved_value == "hello"
    assert draft.save_count == 1


def test_repeated_edits_coalesce_into_one_write():
    """连续编辑重置 deadline，只写最后一次。"""
    clock, writes = FakeClock(), []
    draft = _draft(clock, writes)

    for text in ("h", "he", "hel", "hell", "hello"):
        draft.edit(text)
        clock.advance(1.0)
        draft.poll()
    assert writes == []

    clock.advance(0.5)
    draft.poll()
    assert writes == ["hello"]


def test_unchanged_value_does_not_schedule():
    """值与已保存内容相同且 CLEAN 时不排期。"""
    clock, writes = FakeClock(), []
    draft = _draft(clock, writes)
    assert draft.edit("") is DraftState.CLEAN
    assert not draft.pending


def test_failed_save_returns_to_dirty():
    """写入失败 → DIRTY，记录错误，不自动重试。"""
    clock, writes = FakeClock(), []
    draft = _draft(clock, writes, ok=False)

    draft.edit("oops")
    clock.advance(2)
    assert draft.poll() is DraftState.DIRTY
    assert draft.last_error
    assert draft.pending

    clock.advance(10)
    assert draft.poll() is DraftState.DIRTY
    assert writes == ["oops"]


def test_exception_in_writer_is_treated_as_failure():
    """写入方抛异常同样回到 DIRTY。"""
    def _boom(_value):
        raise RuntimeError("disk full")

    clock = FakeClock()
    draft = AutosaveDraft(_boom, clock=clock)
    draft.edit("x")
    clock.advance(5)
    assert draft.poll() is DraftState.DIRTY
    assert "disk full" in draft.last_error


def test_flush_saves_immediately():
    """flush 不等 deadline 立即写入；CLEAN 时 flush 无操作。"""
    clock, writes = FakeClock(), []
    draft = _draft(clock, writes)

    assert draft.flush() is DraftState.CLEAN
    assert writes == []

    draft.edit("now")
    assert draft.flush() is DraftState.CLEAN
    assert writes == ["now"]


def test_edit_after_failure_reschedules():
    """失败后的新编辑重新排期。"""
    clock, results = FakeClock(), [False, True]
    writes = []

    def _save(value):
        writes.append(value)
        return results.pop(0)

    draft = AutosaveDraft(_save, delay=1.0, clock=clock)
    draft.edit("a")
    clock.advance(1)
    draft.poll()
    assert draft.state is DraftState.DIRTY

    assert draft.edit("ab") is DraftState.SCHEDULED
    clock.advance(1)
    assert draft.poll() is DraftState.CLEAN
    assert writes == ["a", "ab"]


def test_same_value_keeps_deadline_and_does_not_retry():
    """相同值的重复 edit 不推迟 deadline；失败后也不会因此重试。"""
    clock, writes = FakeClock(), []
    draft = _draft(clock, writes, ok=False)

    draft.edit("x")
    clock.advance(1.0)
    draft.edit("x")
    clock.advance(0.5)
    assert draft.poll() is DraftState.DIRTY
    assert writes == ["x"]

    assert draft.edit("x") is DraftState.DIRTY
    clock.advance(5)
    assert draft.poll() is DraftState.DIRTY
    assert writes == ["x"]


def test_flush_pending_writes_only_pending_drafts():
    """flush_pending 只写有修改的草稿；失败的不计数并保持 DIRTY。"""
    clock, good_writes, bad_writes = FakeClock(), [], []
    clean = _draft(clock, [])
    good = _draft(clock, good_writes)
    bad = _draft(clock, bad_writes, ok=False)
    good.edit("kept")
    bad.edit("lost")

    assert flush_pending([clean, good, bad]) == 1
    assert good_writes == ["kept"]
    assert bad_writes == ["lost"]
    assert clean.save_count == 0
    assert bad.state is DraftState.DIRTY
    assert flush_pending([]) == 0
