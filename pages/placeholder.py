"""占位页面 — 已配置标签但尚无专属页面的栏目"""
import streamlit as st

from config import INDEX_PATH
from pages._common import tab_label
from ui import UI, current_route, go_to


def render():
    path, _ = current_route()
    label = tab_label(path) or path.rstrip("/").rsplit("/", 1)[-1].replace("-", " ").title()
    UI.header(label or "Planner", path)
    UI.empty(f"The {label} section has no content yet. Use the tabs to jump to another section.")
    st.button("Back to index", key="placeholder_home", on_click=go_to, args=(INDEX_PATH,))
