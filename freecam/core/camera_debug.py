# camera_debug.py
from __future__ import annotations

from typing import Optional, Tuple

from freecam.core.camera import Free2DCamera


def describe_camera(camera: Free2DCamera, screen_size: Optional[Tuple[float, float]] = None) -> str:
    """One-line status: position, zoom, drag state and (with a screen size) the visible rect."""
    t = camera.translation
    parts = [
        f"{camera.name}",
        f"pos=({t.x:.0f}, {t.y:.0f})",
        f"zoom={camera.current_zoom:g} [{camera.zoom_levels.start:g}..{camera.zoom_levels.end:g}]",
        f"far={camera.far_plane:g}",
    ]
    if camera.drag_origin is not None:
        parts.append("dragging")
    if screen_size is not None:
        r = camera.visible_world_rect(screen_size)
        parts.append(f"view=({r.left:.0f}, {r.bottom:.0f})..({r.right:.0f}, {r.top:.0f})")
    if camera.bounds is not None:
        b = camera.bounds
        parts.append(f"bounds=({b.left:g}, {b.bottom:g})..({b.right:g}, {b.top:g})")
    return "  ".join(parts)
