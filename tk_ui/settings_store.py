import configparser
import logging
from pathlib import Path

from dropmatch.entities import DropConfig
from tk_ui.ui_config import LOG_LEVEL_ORDER, THEME_ORDER

SETTINGS_PATH = Path(__file__).with_name("settings.ini")
SECTION = "drop"

DEFAULT_SETTINGS = {
    "depth_offset": "3.0",
    "hover_scale": "1.1",
    "placement_surface": "Ground",
    "required_parts": "Base,icing",
    "theme_name": "Bakery",
    "log_level": "INFO",
}


def _clamped_float(raw, default, lo, hi):
    try:
        value = float(raw)
    except (TypeError, ValueError):
        value = float(default)
    if value != value:  # NaN
        value = float(default)
    return min(hi, max(lo, value))


def _sanitize(settings):
    data = dict(DEFAULT_SETTINGS)
    data.update({k: v for k, v in settings.items() if k in DEFAULT_SETTINGS})

    data["depth_offset"] = str(_clamped_float(data["depth_offset"], DEFAULT_SETTINGS["depth_offset"], 0.1, 100.0))
    hover = _clamped_float(data["hover_scale"], DEFAULT_SETTINGS["hover_scale"], 1.0, 3.0)
    # The hover factor must exceed 1.
    if hover <= 1.0:
        hover = float(DEFAULT_SETTINGS["hover_scale"])
    data["hover_scale"] = str(hover)

    surface = str(data["placement_surface"]).strip()
    data["placement_surface"] = surface or DEFAULT_SETTINGS["placement_surface"]

    parts = [p.strip() for p in str(data["required_parts"]).split(",") if p.strip()]
    data["required_parts"] = ",".join(parts) if parts else DEFAULT_SETTINGS["required_parts"]

    if data["theme_name"] not in THEME_ORDER:
        data["theme_name"] = DEFAULT_SETTINGS["theme_name"]
    level = str(data["log_level"]).strip().upper()
    data["log_level"] = level if level in LOG_LEVEL_ORDER else DEFAULT_SETTINGS["log_level"]
    return data


def load_settings():
    parser = configparser.ConfigParser()
    if not SETTINGS_PATH.exists():
        return dict(DEFAULT_SETTINGS)
    try:
        parser.read(SETTINGS_PATH, encoding="utf-8")
    except configparser.Error:
        return dict(DEFAULT_SETTINGS)
    if SECTION not in parser:
        return dict(DEFAULT_SETTINGS)
    return _sanitize(dict(parser[SECTION]))


def save_settings(settings):
    data = _sanitize(settings)
    parser = configparser.ConfigParser()
    parser[SECTION] = data
    SETTINGS_PATH.parent.mkdir(parents=True, exist_ok=True)
    with SETTINGS_PATH.open("w", encoding="utf-8") as f:
        parser.write(f)


def build_drop_config(settings) -> DropConfig:
    data = _sanitize(settings)
    return DropConfig(
        depth_offset=float(data["depth_offset"]),
        hover_scale=float(data["hover_scale"]),
        placement_surface=data["placement_surface"],
        required_parts=tuple(data["required_parts"].split(",")),
    )


def log_level(settings) -> int:
    return getattr(logging, _sanitize(settings)["log_level"])
