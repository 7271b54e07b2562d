"""
激活标签判定 — 路径前缀匹配 + 三个特例

- 首页：/planner 只在 /planner 与 /planner/index 时激活
- 设置：/settings* 标签在任何 /settings 开头的路径激活
- 日历：路径完全相同，且 view 参数相等（任一侧缺省视为 month）
- 其他：路径相同，或当前路径是标签路径的子路径
"""
from __future__ import annotations

from typing import Dict, Iterable, Mapping, Optional, Tuple, Union
from urllib.parse import parse_qsl, urlsplit

from config.constants import (
    CALENDAR_PATH,
    DEFAULT_CALENDAR_VIEW,
    INDEX_ALIAS,
    INDEX_PATH,
    SETTINGS_PATH,
)

Query = Union[str, Mapping[str, str], None]


def normalize_path(path: str) -> str:
    """去掉首尾空白与末尾斜杠；空路径为 /"""
    path = (path or "").strip() or "/"
    if len(path) > 1:
        path = path.rstrip("/") or "/"
    return path


def _parse_query(query: Query) -> Dict[str, str]:
    if query is None:
        return {}
    if isinstance(query, Mapping):
        return {str(k): str(v) for k, v in query.items()}
    return dict(parse_qsl(query.lstrip("?")))


def split_path(url: str) -> Tuple[str, Dict[str, str]]:
    """'/planner/calendar?view=week' → ('/planner/calendar', {'view': 'week'})"""
    parts = urlsplit(url or "")
    return normalize_path(parts.path), dict(parse_qsl(parts.query))


def is_active(tab_path: str, current_path: str, current_query: Query = None) -> bool:
    """
    判断标签是否对应当前路由

    Args:
        tab_path:      标签配置中的路径（可带查询串）
        current_path:  当前路径（也可直接带查询串）
        current_query: 当前查询串（'view=week' / '?view=week' / dict）
    """
    target, target_params = split_path(tab_path)
    current, current_params = split_path(current_path)
    current_params.update(_parse_query(current_query))

    if target == INDEX_PATH:
        return current in (INDEX_PATH, INDEX_ALIAS)

    if target.startswith(SETTINGS_PATH):
        return current.startswith(SETTINGS_PATH)

    if target == CALENDAR_PATH:
        if current != CALENDAR_PATH:
            return False
        target_view = target_params.get("view") or DEFAULT_CALENDAR_VIEW
        current_view = current_params.get("view") or DEFAULT_CALENDAR_VIEW
        return target_view == current_view

    return current == target or current.startswith(target + "/")


def find_active(
    tab_paths: Iterable[str],
    current_path: str,
    current_query: Query = None,
) -> Optional[str]:
    """返回第一个激活的标签路径；没有则 None"""
    for path in tab_paths:
        if is_active(path, current_path, current_query):
            return path
    return None
