# tests/test_camera_model.py
"""
Unit tests for the camera record: zoom range, bounds, derived values,
runtime config changes and save/restore.
"""
from __future__ import annotations

import unittest

import pygame

from freecam.core.camera import Free2DCamera, WorldBounds, ZoomLevels
from freecam.utils.settings import DEFAULT_CAMERA_DEPTH


class TestZoomLevels(unittest.TestCase):

    def test_clamp_is_inclusive(self):
        levels = ZoomLevels(1.0, 4.0)
        self.assertEqual(levels.clamp(0.2), 1.0)
        self.assertEqual(levels.clamp(1.0), 1.0)
        self.assertEqual(levels.clamp(4.0), 4.0)
        self.assertEqual(levels.clamp(9.0), 4.0)
        self.assertIn(2.5, levels)
        self.assertNotIn(4.01, levels)

    def test_rejects_non_positive_start(self):
        with self.assertRaises(ValueError):
            ZoomLevels(0.0, 2.0)
        with self.assertRaises(ValueError):
            ZoomLevels(-1.0, 2.0)

    def test_rejects_inverted_range(self):
        with self.assertRaises(ValueError):
            ZoomLevels(3.0, 2.0)


class TestWorldBounds(unittest.TestCase):

    def test_extent_and_center(self):
        b = WorldBounds(left=-100, right=100, bottom=-50, top=50)
        self.assertEqual(b.width, 200)
        self.assertEqual(b.height, 100)
        self.assertEqual(tuple(b.center), (0.0, 0.0))

    def test_rejects_inverted_axes(self):
        with self.assertRaises(ValueError):
            WorldBounds(left=10, right=0, bottom=0, top=10)
        with self.assertRaises(ValueError):
            WorldBounds(left=0, right=10, bottom=10, top=0)

    def test_dict_round_trip(self):
        b = WorldBounds(left=-1.5, right=2.0, bottom=-3.0, top=4.0)
        self.assertEqual(WorldBounds.from_dict(b.to_dict()), b)


class TestFree2DCamera(unittest.TestCase):

    def test_defaults(self):
        cam = Free2DCamera(zoom_levels=ZoomLevels(2.0, 4.0))
        self.assertEqual(cam.current_zoom, 2.0)
        self.assertEqual(cam.scale, 0.5)
        self.assertEqual(cam.far_plane, 2000.0)
        self.assertEqual(tuple(cam.translation), (0.0, 0.0, DEFAULT_CAMERA_DEPTH))
        self.assertIsNone(cam.bounds)
        self.assertIsNone(cam.drag_origin)
        # fresh cameras get clamped and aligned on their first frame
        self.assertTrue(cam.transform_dirty)
        self.assertTrue(cam.config_dirty)

    def test_initial_zoom_is_clamped(self):
        cam = Free2DCamera(zoom_levels=ZoomLevels(1.0, 4.0), current_zoom=10.0)
        self.assertEqual(cam.current_zoom, 4.0)
        self.assertEqual(cam.scale, 0.25)
        self.assertEqual(cam.far_plane, 4000.0)

    def test_far_plane_is_floored(self):
        cam = Free2DCamera(zoom_levels=ZoomLevels(0.5, 4.0), current_zoom=1.2345)
        self.assertEqual(cam.far_plane, 1234.0)

    def test_translation_is_copied(self):
        start = pygame.Vector3(1, 2, 3)
        cam = Free2DCamera(zoom_levels=ZoomLevels(1, 2), translation=start)
        cam.translation.x = 99
        self.assertEqual(start.x, 1)

    def test_set_zoom_levels_reclamps(self):
        cam = Free2DCamera(zoom_levels=ZoomLevels(1.0, 4.0), current_zoom=3.0)
        cam.transform_dirty = cam.config_dirty = False
        cam.set_zoom_levels(ZoomLevels(1.0, 2.0))
        self.assertEqual(cam.current_zoom, 2.0)
        self.assertEqual(cam.scale, 0.5)
        self.assertTrue(cam.config_dirty)
        self.assertTrue(cam.transform_dirty)

    def test_set_bounds_marks_config_dirty(self):
        cam = Free2DCamera(zoom_levels=ZoomLevels(1.0, 1.0))
        cam.config_dirty = False
        cam.set_bounds(WorldBounds(0, 10, 0, 10))
        self.assertTrue(cam.config_dirty)

    def test_visible_world_rect(self):
        cam = Free2DCamera(zoom_levels=ZoomLevels(2.0, 2.0), translation=(10.0, 20.0, 0.0))
        r = cam.visible_world_rect((800, 600))
        self.assertEqual((r.left, r.right, r.bottom, r.top), (-190.0, 210.0, -130.0, 170.0))

    def test_save_and_restore(self):
        cam = Free2DCamera(
            zoom_levels=ZoomLevels(1.0, 4.0),
            current_zoom=3.0,
            bounds=WorldBounds(-10, 10, -5, 5),
            translation=(4.0, -2.0, 7.5),
            name="main",
        )
        restored = Free2DCamera.from_dict(cam.to_dict())
        self.assertEqual(restored.name, "main")
        self.assertEqual(tuple(restored.translation), (4.0, -2.0, 7.5))
        self.assertEqual(restored.current_zoom, 3.0)
        self.assertEqual(restored.zoom_levels, cam.zoom_levels)
        self.assertEqual(restored.bounds, cam.bounds)
