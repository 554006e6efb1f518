#!/usr/bin/env python3
"""
Tests for highway_dash.camera -- perspective projection (numpy only, no window).
"""

import unittest

from highway_dash.camera import Camera


class TestCamera(unittest.TestCase):

    def setUp(self):
        self.camera = Camera(800, 600)

    def test_target_projects_to_centre(self):
        pixels, visible = self.camera.project([(0.0, 0.0, 0.0)])
        self.assertTrue(visible[0])
        self.assertAlmostEqual(pixels[0][0], 400.0)
        self.assertAlmostEqual(pixels[0][1], 300.0)

    def test_right_is_right_and_up_is_up(self):
        pixels, _ = self.camera.project([(1.0, 0.0, 0.0), (0.0, 1.0, 0.0)])
        self.assertGreater(pixels[0][0], 400.0)
        self.assertLess(pixels[1][1], 300.0)

    def test_farther_is_closer_to_horizon(self):
        pixels, _ = self.camera.project([(0.0, 0.0, -10.0), (0.0, 0.0, -400.0)])
        self.assertLess(pixels[1][1], pixels[0][1])

    def test_points_behind_camera_hidden(self):
        _, visible = self.camera.project([(0.0, 0.0, 20.0)])
        self.assertFalse(visible[0])

    def test_polygon_behind_camera_skipped(self):
        face = [(-1, 0, 20), (1, 0, 20), (1, 1, 20), (-1, 1, 20)]
        self.assertIsNone(self.camera.project_polygon(face))

    def test_polygon_in_view(self):
        face = [(-1, 0, -50), (1, 0, -50), (1, 1, -50), (-1, 1, -50)]
        poly = self.camera.project_polygon(face)
        self.assertEqual(len(poly), 4)

    def test_resize_keeps_centre(self):
        self.camera.resize(1200, 400)
        self.assertAlmostEqual(self.camera.aspect, 3.0)
        pixels, _ = self.camera.project([(0.0, 0.0, 0.0)])
        self.assertAlmostEqual(pixels[0][0], 600.0)
        self.assertAlmostEqual(pixels[0][1], 200.0)


if __name__ == "__main__":
    unittest.main()
