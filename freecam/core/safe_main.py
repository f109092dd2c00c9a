# freecam/core/safe_main.py
from __future__ import annotations

import logging
import math
import os
from typing import Optional, Tuple

from freecam.core.camera import Free2DCamera
from freecam.core.camera_input import InputCollector, Viewport, resolve_viewport
from freecam.core.camera_pipeline import CameraPipeline, screen_to_world, world_to_screen

log = logging.getLogger(__name__)


def configure_environment(headless: Optional[bool] = None) -> None:
    """Robust SDL/Pygame defaults for Linux/CI/headless."""
    ci = os.getenv("CI", "").lower() == "true"
    no_display = not (os.getenv("DISPLAY") or os.getenv("WAYLAND_DISPLAY"))
    if headless is None:
        headless = ci or no_display
    os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
    if headless:
        os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
        os.environ.setdefault("SDL_AUDIODRIVER", "dummy")


def init_pygame_display(size: Tuple[int, int] = (1280, 720), *, caption: str = "freecam"):
    """Initialize pygame and return a resizable display surface (or None if it can't be created)."""
    import pygame
    pygame.init()
    try:
        surf = pygame.display.set_mode(size, pygame.RESIZABLE)
        pygame.display.set_caption(caption)
        return surf
    except pygame.error as e:
        log.warning("Could not create a display surface: %s", e)
        return None


def draw_world(surface, camera: Free2DCamera, viewport: Viewport, clear_color, tile_size: int,
               tile_colors, outline_color) -> None:
    """Checkerboard of world tiles in view plus the camera bounds outline."""
    import pygame
    surface.fill(clear_color)

    top_left = screen_to_world(camera, viewport, (0, 0))
    bottom_right = screen_to_world(camera, viewport, (viewport.width, viewport.height))
    tx0 = int(math.floor(top_left.x / tile_size))
    tx1 = int(math.floor(bottom_right.x / tile_size))
    ty0 = int(math.floor(bottom_right.y / tile_size))
    ty1 = int(math.floor(top_left.y / tile_size))
    px = max(1, int(math.ceil(tile_size * camera.current_zoom)))

    b = camera.bounds
    for ty in range(ty0, ty1 + 1):
        for tx in range(tx0, tx1 + 1):
            wx, wy = tx * tile_size, ty * tile_size
            if b is not None and not (b.left <= wx < b.right and b.bottom <= wy < b.top):
                continue
            # tile's top-left corner in world space is (wx, wy + tile_size)
            sp = world_to_screen(camera, viewport, (wx, wy + tile_size))
            color = tile_colors[(tx + ty) % len(tile_colors)]
            surface.fill(color, pygame.Rect(int(sp.x), int(sp.y), px, px))

    if b is not None:
        tl = world_to_screen(camera, viewport, (b.left, b.top))
        br = world_to_screen(camera, viewport, (b.right, b.bottom))
        rect = pygame.Rect(int(tl.x), int(tl.y), int(br.x - tl.x), int(br.y - tl.y))
        pygame.draw.rect(surface, outline_color, rect, 1)


def run_viewer(config_path: Optional[str] = None, *, max_frames: Optional[int] = None) -> int:
    """
    Safe entrypoint runner:
      - Configures env for Linux/headless.
      - Initializes logging.
      - Spawns the camera from config and runs the frame loop.
      - Catches exceptions and writes a crash log.
    """
    import pygame
    from freecam.core.camera_debug import describe_camera
    from freecam.utils import settings
    from freecam.utils.config import load_camera_config, spawn_camera
    from freecam.utils.error_report import write_crash_report
    from freecam.utils.logging_setup import configure_logging

    configure_environment()
    configure_logging()

    try:
        config = load_camera_config(config_path)
        screen = init_pygame_display(config.window, caption=settings.WINDOW_TITLE)
        if screen is None:
            log.warning("Running without a visible display (SDL dummy).")

        collector = InputCollector()
        pipeline = CameraPipeline(key_pan_speed=config.key_pan_speed)
        camera = pipeline.add_camera(spawn_camera(config))
        clock = pygame.time.Clock()

        frames = 0
        running = True
        while running:
            events = pygame.event.get()
            for ev in events:
                if ev.type == pygame.QUIT:
                    running = False
                elif ev.type == pygame.KEYDOWN and ev.key == pygame.K_ESCAPE:
                    running = False

            viewport = resolve_viewport()
            frame = collector.collect(events, viewport.height if viewport else 0)
            if pipeline.run_frame(frame, viewport):
                surface = pygame.display.get_surface()
                draw_world(surface, camera, viewport, config.clear_color, settings.TILE_SIZE,
                           settings.TILE_COLORS, settings.BOUNDS_OUTLINE_COLOR)
                pygame.display.set_caption(f"{settings.WINDOW_TITLE}  {describe_camera(camera, viewport.size)}")
                pygame.display.flip()

            clock.tick(settings.FPS)
            frames += 1
            if max_frames is not None and frames >= max_frames:
                running = False
        return 0
    except SystemExit as e:
        return int(e.code or 0)
    except Exception as e:
        log.exception("Unhandled exception in viewer loop: %s", e)
        write_crash_report(e)
        return 1
    finally:
        pygame.quit()


if __name__ == "__main__":
    raise SystemExit(run_viewer())
