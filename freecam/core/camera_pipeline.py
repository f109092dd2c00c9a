# freecam/core/camera_pipeline.py
"""
Frame driver for the camera passes.

    pipeline = CameraPipeline([camera])
    while running:
        events = pygame.event.get()
        viewport = resolve_viewport()
        frame = collector.collect(events, viewport.height if viewport else 0)
        pipeline.run_frame(frame, viewport)

The pipeline owns the only state that outlives a frame besides the cameras
themselves: the last cursor position ever reported.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

import logging
import pygame

from freecam.core.camera import Free2DCamera
from freecam.core.camera_input import FrameInput, Viewport
from freecam.core.camera_systems import align_cameras, clamp_cameras, update_cameras
from freecam.utils import settings

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class CameraProjection:
    """What the renderer needs from a camera."""
    translation: Tuple[float, float, float]
    scale: float
    far_plane: float


def camera_projection(camera: Free2DCamera) -> CameraProjection:
    t = camera.translation
    return CameraProjection((t.x, t.y, t.z), camera.scale, camera.far_plane)


def world_to_screen(camera: Free2DCamera, viewport: Viewport, world_pos: Tuple[float, float]) -> pygame.Vector2:
    """World (y-up) -> pygame pixel coordinates (top-left origin, y-down)."""
    dx = (world_pos[0] - camera.translation.x) * camera.current_zoom
    dy = (world_pos[1] - camera.translation.y) * camera.current_zoom
    return pygame.Vector2(viewport.width / 2.0 + dx, viewport.height / 2.0 - dy)


def screen_to_world(camera: Free2DCamera, viewport: Viewport, screen_pos: Tuple[float, float]) -> pygame.Vector2:
    """pygame pixel coordinates -> world (y-up)."""
    inv_z = camera.scale
    wx = camera.translation.x + (screen_pos[0] - viewport.width / 2.0) * inv_z
    wy = camera.translation.y - (screen_pos[1] - viewport.height / 2.0) * inv_z
    return pygame.Vector2(wx, wy)


class CameraPipeline:
    """Runs update -> clamp -> align over every camera once per frame."""

    def __init__(
        self,
        cameras: Optional[Iterable[Free2DCamera]] = None,
        *,
        key_pan_speed: float = settings.KEY_PAN_SPEED,
        always_clamp: bool = settings.ALWAYS_CLAMP,
    ) -> None:
        self.cameras: List[Free2DCamera] = list(cameras or ())
        self.key_pan_speed = float(key_pan_speed)
        self.always_clamp = bool(always_clamp)
        self.last_cursor: Optional[pygame.Vector2] = None
        self.frames_run = 0
        self.frames_skipped = 0

    def add_camera(self, camera: Free2DCamera) -> Free2DCamera:
        self.cameras.append(camera)
        return camera

    def remove_camera(self, camera: Free2DCamera) -> None:
        try:
            self.cameras.remove(camera)
        except ValueError:
            log.debug("Camera %r was not registered", camera.name)

    def _track_cursor(self, frame: FrameInput, viewport: Viewport) -> pygame.Vector2:
        if frame.cursor_position is not None:
            self.last_cursor = pygame.Vector2(frame.cursor_position)
        elif self.last_cursor is None:
            self.last_cursor = viewport.center
        return pygame.Vector2(self.last_cursor)

    def run_frame(self, frame: FrameInput, viewport: Optional[Viewport]) -> bool:
        """
        Run one frame. Returns False (and changes nothing) when there is no
        primary viewport to measure against.
        """
        if viewport is None:
            log.error("No primary viewport; skipping camera frame")
            self.frames_skipped += 1
            return False

        cursor = self._track_cursor(frame, viewport)
        update_cameras(self.cameras, frame, viewport, cursor, self.key_pan_speed)
        clamp_cameras(self.cameras, viewport, frame.resized, always=self.always_clamp)
        align_cameras(self.cameras)
        self.frames_run += 1
        return True
