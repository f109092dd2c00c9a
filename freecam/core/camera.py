# freecam/core/camera.py
"""
Camera record for a 2D tile world (pygame).

- Inclusive zoom range; render scale is always 1 / zoom
- Optional world-space bounds the visible viewport is kept inside
- Drag anchor captured while the pan button is held
- Far plane derived from zoom for depth sorting
- Change tracking (transform / config) so the clamp and align passes only
  touch cameras that moved
- State save/restore

World space is y-up: `bounds.top` is above `bounds.bottom`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

import math
import pygame

from freecam.utils.settings import BASE_FAR, DEFAULT_CAMERA_DEPTH


def _clamp(x: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, x))


def far_plane_for(zoom: float) -> float:
    return float(math.floor(BASE_FAR * zoom))


@dataclass(frozen=True)
class ZoomLevels:
    """Inclusive [start, end] range the camera zoom is held inside."""
    start: float
    end: float

    def __post_init__(self) -> None:
        if not (self.start > 0.0):
            raise ValueError(f"zoom levels must start above zero, got {self.start!r}")
        if self.end < self.start:
            raise ValueError(f"zoom levels end {self.end!r} is below start {self.start!r}")

    def clamp(self, value: float) -> float:
        return _clamp(value, self.start, self.end)

    def __contains__(self, value: float) -> bool:
        return self.start <= value <= self.end


@dataclass(frozen=True)
class WorldBounds:
    """Axis-aligned world rectangle (y-up) the visible region must stay within."""
    left: float
    right: float
    bottom: float
    top: float

    def __post_init__(self) -> None:
        if self.right < self.left:
            raise ValueError(f"bounds right {self.right!r} is left of {self.left!r}")
        if self.top < self.bottom:
            raise ValueError(f"bounds top {self.top!r} is below bottom {self.bottom!r}")

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.top - self.bottom

    @property
    def center(self) -> pygame.Vector2:
        return pygame.Vector2((self.left + self.right) / 2.0, (self.bottom + self.top) / 2.0)

    def contains(self, other: "WorldBounds") -> bool:
        return (
            self.left <= other.left and other.right <= self.right
            and self.bottom <= other.bottom and other.top <= self.top
        )

    def to_dict(self) -> Dict[str, float]:
        return {"left": self.left, "right": self.right, "bottom": self.bottom, "top": self.top}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WorldBounds":
        return cls(
            left=float(data["left"]),
            right=float(data["right"]),
            bottom=float(data["bottom"]),
            top=float(data["top"]),
        )


@dataclass(frozen=True)
class DragAnchor:
    """Cursor and camera position captured when a pan gesture starts."""
    cursor_at_drag_start: pygame.Vector2
    camera_position_at_drag_start: pygame.Vector2


@dataclass(eq=False)
class Free2DCamera:
    """
    One viewport's camera.

    `current_zoom` is authoritative; `scale` and `far_plane` are derived from
    it and refreshed by `apply_zoom`. A new camera starts with both change
    flags raised so the first frame clamps and aligns it.
    """
    zoom_levels: ZoomLevels
    current_zoom: Optional[float] = None
    bounds: Optional[WorldBounds] = None
    translation: pygame.Vector3 = field(default_factory=lambda: pygame.Vector3(0.0, 0.0, DEFAULT_CAMERA_DEPTH))
    name: str = "camera"

    scale: float = field(init=False)
    far_plane: float = field(init=False)
    drag_origin: Optional[DragAnchor] = field(default=None, init=False)
    transform_dirty: bool = field(default=True, init=False)
    config_dirty: bool = field(default=True, init=False)

    def __post_init__(self) -> None:
        self.translation = pygame.Vector3(self.translation)
        zoom = self.zoom_levels.start if self.current_zoom is None else float(self.current_zoom)
        self.apply_zoom(self.zoom_levels.clamp(zoom))

    # -------------------------
    # Zoom
    # -------------------------

    def apply_zoom(self, zoom: float) -> None:
        """Set the zoom and its derived scale / far plane (no clamping)."""
        self.current_zoom = float(zoom)
        self.scale = 1.0 / self.current_zoom
        self.far_plane = far_plane_for(self.current_zoom)

    def set_zoom_levels(self, levels: ZoomLevels) -> None:
        """Replace the zoom range at runtime; the current zoom is re-clamped."""
        self.zoom_levels = levels
        clamped = levels.clamp(self.current_zoom)
        if clamped != self.current_zoom:
            self.apply_zoom(clamped)
            self.transform_dirty = True
        self.config_dirty = True

    def set_bounds(self, bounds: Optional[WorldBounds]) -> None:
        self.bounds = bounds
        self.config_dirty = True

    # -------------------------
    # Position helpers
    # -------------------------

    @property
    def position(self) -> pygame.Vector2:
        """World-space x, y of the viewport centre (a copy)."""
        return pygame.Vector2(self.translation.x, self.translation.y)

    @property
    def depth(self) -> float:
        return self.translation.z

    def set_position(self, x: float, y: float) -> None:
        if x != self.translation.x or y != self.translation.y:
            self.translation.x = float(x)
            self.translation.y = float(y)
            self.transform_dirty = True

    def half_extent(self, screen_size: Tuple[float, float]) -> pygame.Vector2:
        """Half the visible world-space width/height at the current zoom."""
        return pygame.Vector2(screen_size[0] / 2.0, screen_size[1] / 2.0) / self.current_zoom

    def visible_world_rect(self, screen_size: Tuple[float, float]) -> WorldBounds:
        """World rectangle currently shown by a viewport of `screen_size` pixels."""
        half = self.half_extent(screen_size)
        x, y = self.translation.x, self.translation.y
        return WorldBounds(left=x - half.x, right=x + half.x, bottom=y - half.y, top=y + half.y)

    # -------------------------
    # Persistence
    # -------------------------

    def to_dict(self) -> Dict[str, Any]:
        """Serialize camera state (position/zoom/config) for save files or dev tools."""
        return {
            "name": self.name,
            "pos": (float(self.translation.x), float(self.translation.y)),
            "depth": float(self.translation.z),
            "zoom": float(self.current_zoom),
            "zoom_levels": (self.zoom_levels.start, self.zoom_levels.end),
            "bounds": self.bounds.to_dict() if self.bounds is not None else None,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Free2DCamera":
        """Restore a camera from `to_dict` output."""
        start, end = data.get("zoom_levels", (1.0, 1.0))
        bounds = data.get("bounds")
        px, py = data.get("pos", (0.0, 0.0))
        return cls(
            zoom_levels=ZoomLevels(float(start), float(end)),
            current_zoom=float(data.get("zoom", start)),
            bounds=WorldBounds.from_dict(bounds) if bounds else None,
            translation=pygame.Vector3(float(px), float(py), float(data.get("depth", DEFAULT_CAMERA_DEPTH))),
            name=str(data.get("name", "camera")),
        )
