"""
用户偏好 CRUD

每个用户一行，custom_overrides 列存放 JSON 对象（key → 任意值）。
纯数据访问，不含业务逻辑；JSON 解析失败由调用方处理。
"""
import json
from typing import Any, Dict

from db.connection import get_connection


def get_overrides(user_id: str) -> Dict[str, Any]:
    """读取用户的全部自定义项（不存在返回空 dict）"""
    conn = get_connection()
    row = conn.execute(
        "SELECT custom_overrides FROM user_preferences WHERE user_id = ?",
        (user_id,),
    ).fetchone()
    conn.close()
    if not row or not row["custom_overrides"]:
        return {}
    data = json.loads(row["custom_overrides"])
    return data if isinstance(data, dict) else {}


def get_override(user_id: str, key: str, default: Any = None) -> Any:
    """读取单个自定义项，缺失时返回 default"""
    value = get_overrides(user_id).get(key)
    return default if value is None else value


def set_override(user_id: str, key: str, value: Any) -> None:
    """
    写入单个自定义项（upsert，保留其他 key）

    Args:
        user_id: 用户 ID
        key:     自定义项名称（如 planner_settings）
        value:   任意可 JSON 序列化的值
    """
    overrides = get_overrides(user_id)
    overrides[key] = value
    payload = json.dumps(overrides, ensure_ascii=False)

    conn = get_connection()
    conn.execute("""
        INSERT INTO user_preferences (user_id, custom_overrides)
        VALUES (?, ?)
        ON CONFLICT(user_id) DO UPDATE SET
            custom_overrides = excluded.custom_overrides,
            updated_at = CURRENT_TIMESTAMP
    """, (user_id, payload))
    conn.commit()
    conn.close()


def delete(user_id: str) -> bool:
    """删除用户的全部偏好"""
    conn = get_connection()
    cursor = conn.execute(
        "DELETE FROM user_preferences WHERE user_id = ?", (user_id,)
    )
    conn.commit()
    deleted = cursor.rowcount > 0
    conn.close()
    return deleted
