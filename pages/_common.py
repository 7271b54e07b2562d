"""页面共用小工具 — 记录选择 / 列表表格 / 当前 Shell 状态"""
from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

import pandas as pd
import streamlit as st

from config import current_user_id
from services import NavigationService, PreferencesService
from services.navigation import PlannerSettings

NEW_RECORD = "➕ New"


def pick_record(
    rows: List[Dict[str, Any]],
    label_field: str,
    key: str,
) -> Optional[Dict[str, Any]]:
    """下拉选择一条记录进行编辑；选 NEW_RECORD 返回 None"""
    labels = {f"{r[label_field]} (#{r['id']})": r for r in rows}
    choice = st.selectbox("Edit", [NEW_RECORD, *labels], key=key)
    return labels.get(choice)


def records_frame(
    rows: List[Dict[str, Any]],
    columns: Dict[str, str],
) -> pd.DataFrame:
    """记录列表 → 展示用 DataFrame（只保留 columns 中的列并改名）"""
    df = pd.DataFrame(rows)
    for col in columns:
        if col not in df.columns:
            df[col] = None
    return df[list(columns)].rename(columns=columns)


def shell_settings() -> PlannerSettings:
    """app.py 本次 rerun 已加载的规划本设置"""
    settings = st.session_state.get("planner_settings")
    if settings is None:
        settings = PreferencesService.load(current_user_id())
    return settings


def shell_layout():
    """app.py 本次 rerun 解析出的 ShellLayout（可能为 None）"""
    return st.session_state.get("shell_layout")


def tab_label(path: str) -> Optional[str]:
    """路径对应的标签名（未配置时返回 None）"""
    left, right = NavigationService.tabs(shell_settings())
    for tab in left + right:
        if tab.path == path:
            return tab.label
    return None


def option_index(options: Sequence[Any], value: Any) -> int:
    """selectbox 的默认索引（值不在选项中时取 0）"""
    try:
        return list(options).index(value)
    except ValueError:
        return 0
