"""
业务逻辑层 — 按业务域隔离

目录结构：
- services/navigation/    导航 Shell（标签解析 / 激活判定 / 布局）
- services/preferences.py 规划本设置的读写与编辑
- services/finance.py     收入 / 负债 / 储蓄
- services/household.py   购物清单 / 清洁任务
- services/journal.py     日记
- services/autosave.py    防抖自动保存状态机

架构规则：
- services/ → db/ + config/ + utils/（可以调用）
- 绝对禁止：services/ → ui/、services/ → pages/
"""
from services.autosave import AutosaveDraft, DraftState, flush_pending
from services.finance import FinanceService
from services.household import HouseholdService
from services.journal import JournalService
from services.navigation import NavigationService
from services.preferences import PreferencesService
from services.records import RecordStore

__all__ = [
    "NavigationService",
    "PreferencesService",
    "FinanceService",
    "HouseholdService",
    "JournalService",
    "AutosaveDraft",
    "DraftState",
    "flush_pending",
    "RecordStore",
]
