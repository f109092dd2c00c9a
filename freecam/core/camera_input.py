# freecam/core/camera_input.py
"""
Per-frame input aggregation for the camera pipeline.

`InputCollector` drains the pygame events of one frame and reduces them:
wheel deltas are summed, cursor motion is last-wins, the pan button and the
direction keys are tracked as held state across frames. Cursor positions are
reported in viewport pixel space with the origin at the bottom-left (y up),
matching world space.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

import logging
import pygame

from freecam.utils import settings

log = logging.getLogger(__name__)

_DIRECTIONS = ("left", "right", "up", "down")

# pygame 2 window events; older builds fall back to VIDEORESIZE / ACTIVEEVENT only.
_RESIZE_EVENTS = tuple(
    t for t in (
        pygame.VIDEORESIZE,
        getattr(pygame, "WINDOWRESIZED", None),
        getattr(pygame, "WINDOWSIZECHANGED", None),
    ) if t is not None
)
_FOCUS_LOST = getattr(pygame, "WINDOWFOCUSLOST", None)
_APPINPUTFOCUS = getattr(pygame, "APPINPUTFOCUS", 2)


@dataclass(frozen=True)
class Viewport:
    """Pixel size of the primary window."""
    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"viewport must have a positive size, got {self.width}x{self.height}")

    @property
    def size(self) -> Tuple[float, float]:
        return float(self.width), float(self.height)

    @property
    def center(self) -> pygame.Vector2:
        return pygame.Vector2(self.width / 2.0, self.height / 2.0)


def resolve_viewport() -> Optional[Viewport]:
    """Size of the current display surface, or None when no window exists."""
    if not pygame.display.get_init():
        return None
    surface = pygame.display.get_surface()
    if surface is None:
        return None
    w, h = surface.get_size()
    if w <= 0 or h <= 0:
        return None
    return Viewport(w, h)


@dataclass(frozen=True)
class FrameInput:
    """Everything the camera update needs from one frame of input."""
    zoom_scroll: float = 0.0
    cursor_position: Optional[pygame.Vector2] = None
    pan_held: bool = False
    pan_released: bool = False
    left: bool = False
    right: bool = False
    up: bool = False
    down: bool = False
    resized: bool = False
    resized_to: Optional[Tuple[int, int]] = None

    def pan_direction(self) -> pygame.Vector2:
        """Unit (or zero) keyboard pan direction; opposing keys cancel."""
        v = pygame.Vector2(0, 0)
        if self.left:
            v.x -= 1
        if self.right:
            v.x += 1
        if self.up:
            v.y += 1
        if self.down:
            v.y -= 1
        if v.length_squared() > 0:
            v.normalize_ip()
        return v


def _key_codes(names: Iterable[str]) -> List[int]:
    """Resolve names like "left" or "a" to pygame K_* constants."""
    codes: List[int] = []
    for name in names:
        code = getattr(pygame, f"K_{name}", None)
        if code is None:
            code = getattr(pygame, f"K_{name.upper()}", None)
        if code is None:
            log.warning("Unrecognized key name %r in pan bindings", name)
            continue
        codes.append(int(code))
    return codes


class InputCollector:
    """Reduces raw pygame events into one `FrameInput` per frame."""

    def __init__(
        self,
        *,
        pan_button: int = settings.PAN_MOUSE_BUTTON,
        pan_keys: Optional[Dict[str, Sequence[str]]] = None,
        invert_wheel: bool = settings.ZOOM_INVERT_WHEEL,
    ) -> None:
        self.pan_button = int(pan_button)
        self.invert_wheel = bool(invert_wheel)
        bindings = pan_keys if pan_keys is not None else settings.PAN_KEYS
        self._key_to_dir: Dict[int, str] = {}
        for direction in _DIRECTIONS:
            for code in _key_codes(bindings.get(direction, ())):
                self._key_to_dir[code] = direction

        self._pan_held = False
        self._held: Dict[str, bool] = {d: False for d in _DIRECTIONS}

    @property
    def pan_held(self) -> bool:
        return self._pan_held

    def release_all(self) -> None:
        """Forget every held button and key (e.g. on focus loss)."""
        self._pan_held = False
        for d in _DIRECTIONS:
            self._held[d] = False

    def collect(self, events: Sequence[pygame.event.Event], viewport_height: float) -> FrameInput:
        """Drain this frame's events. `viewport_height` flips pygame's y-down cursor."""
        zoom_scroll = 0.0
        cursor: Optional[pygame.Vector2] = None
        resized = False
        resized_to: Optional[Tuple[int, int]] = None
        pan_released = False

        for e in events:
            if e.type == pygame.MOUSEWHEEL:
                dy = float(e.y)
                zoom_scroll += -dy if self.invert_wheel else dy
            elif e.type == pygame.MOUSEMOTION:
                mx, my = e.pos
                cursor = pygame.Vector2(float(mx), float(viewport_height) - float(my))
            elif e.type == pygame.MOUSEBUTTONDOWN:
                if e.button == self.pan_button:
                    self._pan_held = True
            elif e.type == pygame.MOUSEBUTTONUP:
                if e.button == self.pan_button:
                    self._pan_held = False
                    pan_released = True
            elif e.type in (pygame.KEYDOWN, pygame.KEYUP):
                direction = self._key_to_dir.get(e.key)
                if direction is not None:
                    self._held[direction] = e.type == pygame.KEYDOWN
            elif _FOCUS_LOST is not None and e.type == _FOCUS_LOST:
                pan_released = pan_released or self._pan_held
                self.release_all()
            elif e.type == pygame.ACTIVEEVENT:
                if getattr(e, "gain", 1) == 0 and getattr(e, "state", 0) & _APPINPUTFOCUS:
                    pan_released = pan_released or self._pan_held
                    self.release_all()
            elif e.type in _RESIZE_EVENTS:
                resized = True
                size = _event_size(e)
                if size is not None:
                    resized_to = size

        return FrameInput(
            zoom_scroll=zoom_scroll,
            cursor_position=cursor,
            pan_held=self._pan_held,
            pan_released=pan_released,
            left=self._held["left"],
            right=self._held["right"],
            up=self._held["up"],
            down=self._held["down"],
            resized=resized,
            resized_to=resized_to,
        )


def _event_size(e: pygame.event.Event) -> Optional[Tuple[int, int]]:
    if e.type == pygame.VIDEORESIZE:
        return int(e.w), int(e.h)
    x, y = getattr(e, "x", None), getattr(e, "y", None)
    if x is None or y is None:
        return None
    return int(x), int(y)
