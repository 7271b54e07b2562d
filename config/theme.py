"""
主题配置 — 颜色、CSS、Plotly 布局、Tailwind 色板

所有视觉风格的唯一定义处。UI 组件只引用此文件。
"""
import re
from typing import Any, Dict

# ═══════════════════════════════════════════════════════
#  颜色定义
# ═══════════════════════════════════════════════════════

COLORS: Dict[str, str] = {
    # 品牌色
    "primary":     "#4F46E5",
    "secondary":   "#059669",
    "danger":      "#DC2626",
    "warning":     "#D97706",

    # 背景
    "bg_main":     "#FEFDFB",
    "bg_card":     "#FFFFFF",
    "bg_light":    "#F9F7F0",

    # 边框
    "border":      "#8B7355",
    "border_light": "#D6D3D1",

    # 文字
    "text":        "#1F2937",
    "text_muted":  "#6B7280",
    "text_on_tab": "#FFFFFF",

    # 进度色
    "gain":        "#059669",
    "loss":        "#DC2626",

    # 强调色
    "accent":      "#D97706",
}

# ═══════════════════════════════════════════════════════
#  Tailwind 色板（预设中出现的颜色 × 400-900 色阶）
# ═══════════════════════════════════════════════════════

TAILWIND_HEX: Dict[str, Dict[int, str]] = {
    "gray":    {400: "#9CA3AF", 500: "#6B7280", 600: "#4B5563", 700: "#374151", 800: "#1F2937", 900: "#111827"},
    "stone":   {400: "#A8A29E", 500: "#78716C", 600: "#57534E", 700: "#44403C", 800: "#292524", 900: "#1C1917"},
    "slate":   {400: "#94A3B8", 500: "#64748B", 600: "#475569", 700: "#334155", 800: "#1E293B", 900: "#0F172A"},
    "neutral": {400: "#A3A3A3", 500: "#737373", 600: "#525252", 700: "#404040", 800: "#262626", 900: "#171717"},
    "blue":    {400: "#60A5FA", 500: "#3B82F6", 600: "#2563EB", 700: "#1D4ED8", 800: "#1E40AF", 900: "#1E3A8A"},
    "green":   {400: "#4ADE80", 500: "#22C55E", 600: "#16A34A", 700: "#15803D", 800: "#166534", 900: "#14532D"},
    "amber":   {400: "#FBBF24", 500: "#F59E0B", 600: "#D97706", 700: "#B45309", 800: "#92400E", 900: "#78350F"},
    "purple":  {400: "#C084FC", 500: "#A855F7", 600: "#9333EA", 700: "#7E22CE", 800: "#6B21A8", 900: "#581C87"},
    "indigo":  {400: "#818CF8", 500: "#6366F1", 600: "#4F46E5", 700: "#4338CA", 800: "#3730A3", 900: "#312E81"},
    "pink":    {400: "#F472B6", 500: "#EC4899", 600: "#DB2777", 700: "#BE185D", 800: "#9D174D", 900: "#831843"},
    "cyan":    {400: "#22D3EE", 500: "#06B6D4", 600: "#0891B2", 700: "#0E7490", 800: "#155E75", 900: "#164E63"},
    "emerald": {400: "#34D399", 500: "#10B981", 600: "#059669", 700: "#047857", 800: "#065F46", 900: "#064E3B"},
    "teal":    {400: "#2DD4BF", 500: "#14B8A6", 600: "#0D9488", 700: "#0F766E", 800: "#115E59", 900: "#134E4A"},
    "violet":  {400: "#A78BFA", 500: "#8B5CF6", 600: "#7C3AED", 700: "#6D28D9", 800: "#5B21B6", 900: "#4C1D95"},
    "orange":  {400: "#FB923C", 500: "#F97316", 600: "#EA580C", 700: "#C2410C", 800: "#9A3412", 900: "#7C2D12"},
    "rose":    {400: "#FB7185", 500: "#F43F5E", 600: "#E11D48", 700: "#BE123C", 800: "#9F1239", 900: "#881337"},
    "fuchsia": {400: "#E879F9", 500: "#D946EF", 600: "#C026D3", 700: "#A21CAF", 800: "#86198F", 900: "#701A75"},
    "sky":     {400: "#38BDF8", 500: "#0EA5E9", 600: "#0284C7", 700: "#0369A1", 800: "#075985", 900: "#0C4A6E"},
}

_BG_CLASS = re.compile(r"bg-([a-z]+)-(\d{3})")


def class_to_hex(css_class: str, fallback: str = "#6B7280") -> str:
    """bg-blue-500 → #3B82F6；bg-black / bg-white 特判；未知类名返回 fallback"""
    if css_class == "bg-black":
        return "#000000"
    if css_class == "bg-white":
        return "#FFFFFF"
    m = _BG_CLASS.search(css_class or "")
    if not m:
        return fallback
    return TAILWIND_HEX.get(m.group(1), {}).get(int(m.group(2)), fallback)


# ═══════════════════════════════════════════════════════
#  全局 CSS（纸张背景 + 标签按钮）
# ═══════════════════════════════════════════════════════

GLOBAL_CSS: str = """
<style>
    .stApp {
        background: #FEFDFB;
        background-image: repeating-linear-gradient(
            0deg, transparent, transparent 31px,
            rgba(0, 0, 0, 0.03) 31px, rgba(0, 0, 0, 0.03) 32px
        );
    }
    .planner-tab {
        display: block;
        color: #FFFFFF !important;
        font-weight: 700;
        font-size: 11px;
        text-transform: uppercase;
        text-decoration: none !important;
        border-radius: 8px;
        padding: 10px 8px;
        margin-bottom: 4px;
        opacity: 0.8;
        text-align: center;
    }
    .planner-tab.active {
        opacity: 1;
        box-shadow: 0 0 0 2px rgba(255, 255, 255, 0.5), 0 6px 12px rgba(0, 0, 0, 0.2);
    }
    .planner-tab.icon { width: 48px; height: 48px; padding: 14px 0; }
    .planner-fav-bar { display: flex; gap: 6px; overflow-x: auto; padding: 4px 0 10px; }
    .planner-fav-bar .planner-tab { display: inline-block; min-width: 80px; margin: 0; }
</style>
"""

# ═══════════════════════════════════════════════════════
#  移动端响应式 CSS
# ═══════════════════════════════════════════════════════

MOBILE_CSS: str = """
<style>
    @media (max-width: 1023px) {
        .planner-tab { font-size: 10px; padding: 12px 6px; }
        .planner-fav-bar { position: sticky; bottom: 0; background: rgba(255, 255, 255, 0.95); }
    }
</style>
"""

# 间距预设 → 内容区 padding
SPACING_PADDING: Dict[str, str] = {
    "compact": "0.75rem 1rem",
    "comfortable": "1.25rem 1.75rem",
}

# ═══════════════════════════════════════════════════════
#  metric_cards 样式参数（streamlit-extras）
# ═══════════════════════════════════════════════════════

METRIC_CARD_STYLE: Dict[str, str] = {
    "background_color": "#FFFFFF",
    "border_color": "#D6D3D1",
    "border_left_color": "#8B7355",
    "box_shadow": "0 0 6px rgba(0, 0, 0, 0.1)",
}


# ═══════════════════════════════════════════════════════
#  Plotly 布局默认配置
# ═══════════════════════════════════════════════════════

PLOTLY_LAYOUT_DEFAULTS: Dict[str, Any] = dict(
    template="plotly_white",
    paper_bgcolor="rgba(0,0,0,0)",
    plot_bgcolor="rgba(0,0,0,0)",
    margin=dict(l=40, r=20, t=40, b=40),
    font=dict(size=14, color="#1F2937"),
    xaxis=dict(showgrid=False, zeroline=False, linecolor="#D6D3D1", linewidth=1),
    yaxis=dict(showgrid=True, gridcolor="#F3F4F6", zeroline=False),
    legend=dict(bgcolor="rgba(0,0,0,0)"),
)
