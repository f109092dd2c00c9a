# freecam/utils/config.py
"""
JSON camera configuration.

Every key is optional; anything missing falls back to `freecam.utils.settings`.

    {
      "zoom_levels": [1, 4],
      "initial_zoom": 2,
      "key_pan_speed": 10,
      "bounds": {"left": -100, "right": 100, "bottom": -50, "top": 50},
      "window": [1280, 720],
      "clear_color": [163, 169, 194]
    }
"""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union
import json
import logging

from freecam.core.camera import Free2DCamera, WorldBounds, ZoomLevels
from freecam.utils import settings

__all__ = ["CameraConfig", "CameraConfigError", "load_camera_config", "parse_camera_config", "spawn_camera"]

log = logging.getLogger(__name__)


class CameraConfigError(ValueError):
    """Raised when a camera configuration value is missing its shape or range."""


@dataclass(frozen=True)
class CameraConfig:
    zoom_levels: ZoomLevels = field(default_factory=lambda: ZoomLevels(*settings.DEFAULT_ZOOM_LEVELS))
    initial_zoom: float = settings.DEFAULT_INITIAL_ZOOM
    key_pan_speed: float = settings.KEY_PAN_SPEED
    bounds: Optional[WorldBounds] = None
    window: Tuple[int, int] = (settings.SCREEN_WIDTH, settings.SCREEN_HEIGHT)
    clear_color: Tuple[int, int, int] = settings.CLEAR_COLOR


def _pair(data: Dict[str, Any], key: str, cast: type) -> Optional[tuple]:
    raw = data.get(key)
    if raw is None:
        return None
    if not isinstance(raw, (list, tuple)) or len(raw) != 2:
        raise CameraConfigError(f"'{key}' must be a list of two numbers, got {raw!r}")
    try:
        return cast(raw[0]), cast(raw[1])
    except (TypeError, ValueError) as e:
        raise CameraConfigError(f"'{key}' must be a list of two numbers, got {raw!r}") from e


def _number(data: Dict[str, Any], key: str, default: float) -> float:
    raw = data.get(key, default)
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        raise CameraConfigError(f"'{key}' must be a number, got {raw!r}")
    return float(raw)


def parse_camera_config(data: Dict[str, Any]) -> CameraConfig:
    """Build a CameraConfig from already-decoded JSON."""
    if not isinstance(data, dict):
        raise CameraConfigError(f"camera config must be an object, got {type(data).__name__}")
    defaults = CameraConfig()

    levels = defaults.zoom_levels
    pair = _pair(data, "zoom_levels", float)
    if pair is not None:
        try:
            levels = ZoomLevels(*pair)
        except ValueError as e:
            raise CameraConfigError(f"'zoom_levels': {e}") from e

    initial = _number(data, "initial_zoom", levels.start)
    if initial not in levels:
        log.warning("initial_zoom %s outside %s..%s; clamped", initial, levels.start, levels.end)
        initial = levels.clamp(initial)

    speed = _number(data, "key_pan_speed", defaults.key_pan_speed)

    bounds = None
    raw_bounds = data.get("bounds")
    if raw_bounds is not None:
        try:
            bounds = WorldBounds.from_dict(raw_bounds)
        except (KeyError, TypeError) as e:
            raise CameraConfigError(f"'bounds' needs numeric left/right/bottom/top, got {raw_bounds!r}") from e
        except ValueError as e:
            raise CameraConfigError(f"'bounds': {e}") from e

    window = _pair(data, "window", int) or defaults.window
    if window[0] <= 0 or window[1] <= 0:
        raise CameraConfigError(f"'window' must be positive, got {window!r}")

    color = data.get("clear_color", defaults.clear_color)
    if not isinstance(color, (list, tuple)) or len(color) != 3:
        raise CameraConfigError(f"'clear_color' must be [r, g, b], got {color!r}")

    return CameraConfig(
        zoom_levels=levels,
        initial_zoom=initial,
        key_pan_speed=speed,
        bounds=bounds,
        window=(int(window[0]), int(window[1])),
        clear_color=(int(color[0]), int(color[1]), int(color[2])),
    )


def load_camera_config(path: Optional[Union[str, Path]] = None) -> CameraConfig:
    """Read a JSON config. A missing file (or no path) yields the defaults."""
    if path is None:
        return CameraConfig()
    p = Path(path)
    if not p.exists():
        log.warning("Camera config %s not found; using defaults", p)
        return CameraConfig()
    try:
        with p.open("r", encoding="utf-8") as f:
            payload = json.load(f)
    except json.JSONDecodeError as e:
        raise CameraConfigError(f"{p}: invalid JSON ({e})") from e
    log.info("Loaded camera config from %s", p)
    return parse_camera_config(payload)


def spawn_camera(config: CameraConfig, *, name: str = "camera") -> Free2DCamera:
    return Free2DCamera(
        zoom_levels=config.zoom_levels,
        current_zoom=config.initial_zoom,
        bounds=config.bounds,
        name=name,
    )
