"""Persistent render defaults and load/save helpers."""

from __future__ import annotations

import json
import os
import platform
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any


CONFIG_VERSION = 2

COLOR_MODES = ("auto", "truecolor", "256", "ansi")
VERTICAL_ALIGNMENTS = ("top", "bottom")
RESIZE_FILTERS = ("nearest", "box", "bilinear", "hamming", "bicubic", "lanczos")


@dataclass
class RenderConfig:
    color_mode: str = "auto"
    vertical_alignment: str = "top"
    resize_filter: str = "nearest"
    resize_to_width: int | None = None


@dataclass
class DiagnosticsConfig:
    keep_log_files: int = 7


@dataclass
class AppConfig:
    config_version: int = CONFIG_VERSION
    render: RenderConfig = field(default_factory=RenderConfig)
    diagnostics: DiagnosticsConfig = field(default_factory=DiagnosticsConfig)


def config_root() -> Path:
    system = platform.system()
    if system == "Windows":
        base = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
        return base / "termpix"
    if system == "Darwin":
        return Path.home() / "Library" / "Application Support" / "termpix"
    xdg = os.environ.get("XDG_CONFIG_HOME")
    base = Path(xdg) if xdg else Path.home() / ".config"
    return base / "termpix"


def config_path() -> Path:
    return config_root() / "config.json"


def _section(data: dict[str, Any], key: str) -> dict[str, Any]:
    value = data.get(key)
    return value if isinstance(value, dict) else {}


def _as_int(value: Any, default: int) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _merge(dataclass_type, raw: dict[str, Any]):
    defaults = dataclass_type()  # type: ignore[misc]
    for k, v in raw.items():
        if hasattr(defaults, k):
            setattr(defaults, k, v)
    return defaults


def _normalize_render(cfg: AppConfig) -> None:
    render = cfg.render
    if render.color_mode not in COLOR_MODES:
        render.color_mode = "auto"
    if render.vertical_alignment not in VERTICAL_ALIGNMENTS:
        render.vertical_alignment = "top"
    if render.resize_filter not in RESIZE_FILTERS:
        render.resize_filter = "nearest"
    if render.resize_to_width is not None:
        width = _as_int(render.resize_to_width, 0)
        render.resize_to_width = width if width > 0 else None


def _normalize_diagnostics(cfg: AppConfig) -> None:
    cfg.diagnostics.keep_log_files = max(2, _as_int(cfg.diagnostics.keep_log_files, DiagnosticsConfig.keep_log_files))


def _migrate(raw: dict[str, Any]) -> dict[str, Any]:
    version = _as_int(raw.get("config_version", 1), 1)
    data = dict(raw)

    if version < 2:
        # v1 stored the odd-height policy as image gravity ("up"/"down").
        render = dict(_section(data, "render"))
        gravity = render.pop("vertical_gravity", None)
        if gravity is not None and "vertical_alignment" not in render:
            render["vertical_alignment"] = {"up": "top", "down": "bottom"}.get(str(gravity).lower(), "top")
        data["render"] = render
        data.setdefault("diagnostics", {})
        data["config_version"] = 2

    return data


def load_config(path: Path | None = None) -> AppConfig:
    path = path or config_path()
    if not path.exists():
        return AppConfig()

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return AppConfig()
    if not isinstance(raw, dict):
        return AppConfig()

    data = _migrate(raw)
    cfg = AppConfig(
        config_version=_as_int(data.get("config_version"), CONFIG_VERSION),
        render=_merge(RenderConfig, _section(data, "render")),
        diagnostics=_merge(DiagnosticsConfig, _section(data, "diagnostics")),
    )

    _normalize_render(cfg)
    _normalize_diagnostics(cfg)
    return cfg


def save_config(cfg: AppConfig, path: Path | None = None) -> Path:
    cfg.config_version = CONFIG_VERSION
    path = path or config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(asdict(cfg), indent=2, sort_keys=True), encoding="utf-8")
    return path
