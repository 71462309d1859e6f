FPS_MS = 16
WINDOW_WIDTH = 1200
WINDOW_HEIGHT = 760

PIXELS_PER_UNIT = 150
REFERENCE_DEPTH = 3.0
TARGET_OUTLINE_WIDTH = 2
HOVER_OUTLINE_WIDTH = 4

LOG_LEVEL_ORDER = ("DEBUG", "INFO", "WARNING", "ERROR")
THEME_ORDER = ("Bakery", "Night")

THEMES = {
    "Bakery": {
        "bg_base": "#fdf6ec",
        "bg_floor": "#e7d3b5",
        "hud_text": "#3f2d20",
        "hud_subtext": "#7c5b3e",
        "panel_fill": "#f5e6d3",
        "panel_outline": "#b08968",
        "slot_outline": "#b08968",
        "slot_hover": "#16a34a",
        "swatch_used": "#cbd5e1",
        "shadow": "#d6c2a8",
    },
    "Night": {
        "bg_base": "#111827",
        "bg_floor": "#1f2937",
        "hud_text": "#f9fafb",
        "hud_subtext": "#cbd5e1",
        "panel_fill": "#1e293b",
        "panel_outline": "#64748b",
        "slot_outline": "#94a3b8",
        "slot_hover": "#4ade80",
        "swatch_used": "#475569",
        "shadow": "#0b1220",
    },
}
