# --- FILE: freecam/core/__init__.py
"""Camera record, per-frame input, and the update/clamp/align passes."""
from freecam.core.camera import DragAnchor, Free2DCamera, WorldBounds, ZoomLevels
from freecam.core.camera_input import FrameInput, InputCollector, Viewport, resolve_viewport
from freecam.core.camera_pipeline import CameraPipeline, CameraProjection, camera_projection

__all__ = [
    "CameraPipeline",
    "CameraProjection",
    "DragAnchor",
    "FrameInput",
    "Free2DCamera",
    "InputCollector",
    "Viewport",
    "WorldBounds",
    "ZoomLevels",
    "camera_projection",
    "resolve_viewport",
]
