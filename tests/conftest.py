# tests/conftest.py
from __future__ import annotations
import os
import sys
from pathlib import Path
import pytest

# Ensure repo root is importable as a package root (so `import freecam...` works on CI)
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Headless Pygame setup
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")


@pytest.fixture(scope="session", autouse=True)
def _init_pygame():
    import pygame
    pygame.init()
    try:
        yield
    finally:
        pygame.quit()


@pytest.fixture
def bounded_camera():
    """Zoom fixed at 1 with the bounds used by the end-to-end scenario."""
    from freecam.core.camera import Free2DCamera, WorldBounds, ZoomLevels
    return Free2DCamera(
        zoom_levels=ZoomLevels(1.0, 1.0),
        bounds=WorldBounds(left=-100.0, right=100.0, bottom=-50.0, top=50.0),
    )
