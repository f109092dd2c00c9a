# freecam/core/camera_systems.py
"""
The three per-frame camera passes, in the order they must run:

1. `update_cameras`  - wheel zoom (cursor anchored), drag pan, keyboard pan
2. `clamp_cameras`   - keep the visible rectangle inside the camera bounds
3. `align_cameras`   - floor x/y to whole pixels against shimmer

Each pass walks the camera list independently; cameras never read each
other's state.
"""

from __future__ import annotations

from typing import Iterable, Tuple

import logging
import math
import pygame

from freecam.core.camera import DragAnchor, Free2DCamera, WorldBounds
from freecam.core.camera_input import FrameInput, Viewport
from freecam.utils.settings import CLAMP_EPSILON, KEY_PAN_SPEED

log = logging.getLogger(__name__)


# ---------------------------------------------------------------------
# Update
# ---------------------------------------------------------------------

def keyboard_pan_offset(frame: FrameInput, speed: float = KEY_PAN_SPEED) -> pygame.Vector2:
    return frame.pan_direction() * speed


def _guard_zoom(camera: Free2DCamera) -> None:
    z = camera.current_zoom
    if z is None or not (z > 0.0) or math.isinf(z):
        log.warning("Camera %r had zoom %r; reset to %s", camera.name, z, camera.zoom_levels.start)
        camera.apply_zoom(camera.zoom_levels.start)
        camera.transform_dirty = True
        return
    # Zoom written directly: pull it back into range and refresh scale / far plane
    clamped = camera.zoom_levels.clamp(z)
    if clamped != z or camera.scale != 1.0 / clamped:
        log.debug("Camera %r zoom %r re-applied as %s", camera.name, z, clamped)
        camera.apply_zoom(clamped)
        camera.transform_dirty = True


def zoom_camera(camera: Free2DCamera, zoom_scroll: float, screen_size: Tuple[float, float],
                cursor: pygame.Vector2) -> None:
    """Step the zoom by `zoom_scroll`, keeping the world point under `cursor` fixed."""
    screen = pygame.Vector2(screen_size)
    old_zoom = camera.current_zoom
    new_zoom = camera.zoom_levels.clamp(old_zoom + zoom_scroll)

    center_offset = pygame.Vector2(
        (cursor.x - screen.x / 2.0) / screen.x,
        (cursor.y - screen.y / 2.0) / screen.y,
    )
    span_change = screen / old_zoom - screen / new_zoom
    pos_change = pygame.Vector2(span_change.x * center_offset.x, span_change.y * center_offset.y)

    camera.translation.x += pos_change.x
    camera.translation.y += pos_change.y
    camera.apply_zoom(new_zoom)
    log.debug("Camera %r zoom %.3f -> %.3f, shift %s", camera.name, old_zoom, new_zoom, pos_change)


def drag_camera(camera: Free2DCamera, pan_held: bool, cursor: pygame.Vector2,
                released: bool = False) -> None:
    """Capture the drag anchor on press, follow it while held, drop it on release.

    `released` marks a release seen earlier in the frame; a button that went
    up and down again within one frame starts a fresh drag.
    """
    if released:
        camera.drag_origin = None
    if not pan_held:
        camera.drag_origin = None
        return
    if camera.drag_origin is None:
        camera.drag_origin = DragAnchor(
            cursor_at_drag_start=pygame.Vector2(cursor),
            camera_position_at_drag_start=camera.position,
        )
        return
    anchor = camera.drag_origin
    target = anchor.camera_position_at_drag_start + (anchor.cursor_at_drag_start - cursor) / camera.current_zoom
    camera.translation.x = target.x
    camera.translation.y = target.y


def update_camera(camera: Free2DCamera, frame: FrameInput, viewport: Viewport,
                  cursor: pygame.Vector2, key_pan_speed: float = KEY_PAN_SPEED) -> None:
    _guard_zoom(camera)
    before = tuple(camera.translation)
    before_scale = camera.scale

    if frame.zoom_scroll != 0:
        zoom_camera(camera, frame.zoom_scroll, viewport.size, cursor)

    drag_camera(camera, frame.pan_held, cursor, frame.pan_released)

    offset = keyboard_pan_offset(frame, key_pan_speed)
    if offset.x or offset.y:
        camera.translation.x += offset.x
        camera.translation.y += offset.y

    if tuple(camera.translation) != before or camera.scale != before_scale:
        camera.transform_dirty = True


def update_cameras(cameras: Iterable[Free2DCamera], frame: FrameInput, viewport: Viewport,
                   cursor: pygame.Vector2, key_pan_speed: float = KEY_PAN_SPEED) -> None:
    for camera in cameras:
        update_camera(camera, frame, viewport, cursor, key_pan_speed)


# ---------------------------------------------------------------------
# Clamp
# ---------------------------------------------------------------------

def _clamp_axis(center: float, half: float, low: float, high: float, eps: float) -> float:
    edge_low = center - half
    edge_high = center + half
    low_out = edge_low < low - eps
    high_out = edge_high > high + eps

    if not (low_out or high_out):
        return center
    if (low_out and high_out) or (edge_high - edge_low) >= (high - low):
        # Viewport can't fit on this axis: centre it on the bounds
        return (low + high) / 2.0
    if low_out:
        return center - (edge_low - low)
    return center - (edge_high - high)


def clamp_translation(translation: pygame.Vector3, bounds: WorldBounds, zoom: float,
                      screen_size: Tuple[float, float], eps: float = CLAMP_EPSILON) -> pygame.Vector3:
    """Translation corrected so the viewport stays within `bounds` (z preserved)."""
    half_x = (screen_size[0] / 2.0) / zoom
    half_y = (screen_size[1] / 2.0) / zoom
    x = _clamp_axis(translation.x, half_x, bounds.left, bounds.right, eps)
    y = _clamp_axis(translation.y, half_y, bounds.bottom, bounds.top, eps)
    return pygame.Vector3(x, y, translation.z)


def clamp_cameras(cameras: Iterable[Free2DCamera], viewport: Viewport, resized: bool = False,
                  *, always: bool = False) -> None:
    for camera in cameras:
        if not (always or resized or camera.transform_dirty or camera.config_dirty):
            continue
        camera.config_dirty = False
        if camera.bounds is None:
            continue
        clamped = clamp_translation(camera.translation, camera.bounds, camera.current_zoom, viewport.size)
        if tuple(clamped) != tuple(camera.translation):
            log.debug("Camera %r clamped %s -> %s", camera.name, camera.translation, clamped)
            camera.translation = clamped
            camera.transform_dirty = True


# ---------------------------------------------------------------------
# Align
# ---------------------------------------------------------------------

def align_translation(translation: pygame.Vector3) -> pygame.Vector3:
    return pygame.Vector3(math.floor(translation.x), math.floor(translation.y), translation.z)


def align_cameras(cameras: Iterable[Free2DCamera]) -> None:
    for camera in cameras:
        if not camera.transform_dirty:
            continue
        t = camera.translation
        if t.x != math.floor(t.x) or t.y != math.floor(t.y):
            camera.translation = align_translation(t)
        camera.transform_dirty = False
