"""快捷操作过滤 — enabled + 排序 + 路由上下文"""
from __future__ import annotations

from typing import Iterable, List

from services.navigation.matching import split_path
from services.navigation.models import QuickAction


def _in_context(action: QuickAction, current_path: str) -> bool:
    if not action.context_routes:
        return True
    current, _ = split_path(current_path)
    for route in action.context_routes:
        base, _ = split_path(route)
        if current == base or current.startswith(base.rstrip("/") + "/"):
            return True
    return False


def visible_quick_actions(
    actions: Iterable[QuickAction],
    current_path: str,
) -> List[QuickAction]:
    """当前路由下可见的快捷操作（order 升序，相同按 id）"""
    visible = [a for a in actions if a.enabled and _in_context(a, current_path)]
    return sorted(visible, key=lambda a: (a.order, a.id))
