"""
防抖自动保存 — 显式「待写入」状态机

状态：
    CLEAN      与已保存内容一致
    DIRTY      有未保存修改（尚未排期，或上次保存失败）
    SCHEDULED  已排期，到 deadline 后写入；每次新编辑都会重置 deadline
    SAVING     正在写入

转移：
    edit()         值有变化时：任意状态 → DIRTY → SCHEDULED（deadline = now + delay）
    poll(now)      SCHEDULED 且 now ≥ deadline → SAVING → CLEAN（成功）/ DIRTY（失败）
    flush()        DIRTY / SCHEDULED → SAVING → CLEAN / DIRTY（立即写入）

Streamlit 每次 rerun 调一次 poll()；时钟可注入，便于测试。
失败只记日志，不重试（下次编辑或 flush 时再写）。
"""
from __future__ import annotations

import time
from enum import Enum
from typing import Callable, Generic, Iterable, Optional, TypeVar

from config.constants import AUTOSAVE_DELAY_SECONDS
from utils.log import get_logger

log = get_logger(__name__)

T = TypeVar("T")


class DraftState(str, Enum):
    CLEAN = "clean"
    DIRTY = "dirty"
    SCHEDULED = "scheduled"
    SAVING = "saving"


class AutosaveDraft(Generic[T]):
    """
    单个草稿的自动保存状态机

    使用示例::
        draft = AutosaveDraft(save_fn=lambda text: JournalService.save_entry(...))
        draft.edit("hello")      # SCHEDULED
        draft.poll()             # 未到 deadline，仍 SCHEDULED
        ...
        draft.poll()             # 到期 → 调用 save_fn → CLEAN
    """

    def __init__(
        self,
        save_fn: Callable[[T], bool],
        *,
        delay: float = AUTOSAVE_DELAY_SECONDS,
        clock: Callable[[], float] = time.monotonic,
        initial: Optional[T] = None,
    ):
        """
        Args:
            save_fn: 写入函数，返回 True 表示成功；抛异常视为失败
            delay:   防抖延迟（秒）
            clock:   时钟函数（默认 time.monotonic）
            initial: 已保存的初始值
        """
        self._save_fn = save_fn
        self._delay = delay
        self._clock = clock
        self.state = DraftState.CLEAN
        self.value: Optional[T] = initial
        self.saved_value: Optional[T] = initial
        self.deadline: Optional[float] = None
        self.save_count = 0
        self.last_error: Optional[str] = None

    @property
    def pending(self) -> bool:
        """是否有未写入的修改"""
        return self.state in (DraftState.DIRTY, DraftState.SCHEDULED)

    def edit(self, value: T) -> DraftState:
        """记录一次编辑并（重新）排期；值未变化不算编辑"""
        if value == self.value:
            return self.state
        self.value = value
        self.state = DraftState.DIRTY
        self.deadline = self._clock() + self._delay
        self.state = DraftState.SCHEDULED
        return self.state

    def poll(self, now: Optional[float] = None) -> DraftState:
        """到期则写入；返回当前状态"""
        if self.state is not DraftState.SCHEDULED:
            return self.state
        now = self._clock() if now is None else now
        if self.deadline is not None and now >= self.deadline:
            self._save()
        return self.state

    def flush(self) -> DraftState:
        """立即写入未保存的修改"""
        if self.pending:
            self._save()
        return self.state

    def _save(self) -> None:
        self.state = DraftState.SAVING
        value = self.value
        try:
            ok = bool(self._save_fn(value))
            error = None if ok else "save returned False"
        except Exception as exc:  # 写入方任意异常都按失败处理
            ok, error = False, str(exc)

        self.deadline = None
        if ok:
            self.state = DraftState.CLEAN
            self.saved_value = value
            self.save_count += 1
            self.last_error = None
        else:
            self.state = DraftState.DIRTY
            self.last_error = error
            log.warning("autosave.failed", error=error)


def flush_pending(drafts: Iterable[AutosaveDraft]) -> int:
    """立即写入所有有未保存修改的草稿，返回写入成功的个数"""
    flushed = 0
    for draft in drafts:
        if draft.pending and draft.flush() is DraftState.CLEAN:
            flushed += 1
    return flushed
