"""
收藏栏投影

收藏列表是路径引用，渲染时投影到已解析的标签集合上：
路径先规范化（末尾斜杠不计），未知/已停用路径丢弃，重复路径只保留首个，最多 MAX_FAVOURITES 个。
"""
from __future__ import annotations

from typing import Dict, Iterable, List, Sequence

from config.constants import (
    DEFAULT_FAVOURITES_MOBILE,
    DEFAULT_FAVOURITES_WIDE,
    MAX_FAVOURITES,
)
from services.navigation.matching import normalize_path
from services.navigation.models import ResolvedTab, Viewport


def default_favourites(viewport: Viewport) -> List[str]:
    """未自定义收藏时的默认顺序（移动端日/周/月优先，其余首页优先）"""
    if viewport is Viewport.MOBILE:
        return list(DEFAULT_FAVOURITES_MOBILE)
    return list(DEFAULT_FAVOURITES_WIDE)


def project_favourites(
    favourite_paths: Sequence[str],
    tabs: Iterable[ResolvedTab],
    viewport: Viewport,
) -> List[ResolvedTab]:
    """
    收藏路径 → 有序标签列表

    Args:
        favourite_paths: 用户收藏（为空视为未自定义）
        tabs:            已解析的全部可见标签（左 + 右）
        viewport:        视口档位（决定默认收藏顺序）
    """
    by_path: Dict[str, ResolvedTab] = {}
    for tab in tabs:
        by_path.setdefault(normalize_path(tab.path), tab)

    paths = list(favourite_paths) or default_favourites(viewport)

    result: List[ResolvedTab] = []
    seen = set()
    for raw_path in paths:
        path = normalize_path(raw_path)
        tab = by_path.get(path)
        if tab is None or path in seen:
            continue
        seen.add(path)
        result.append(tab)
        if len(result) >= MAX_FAVOURITES:
            break
    return result
