import unittest

from dropmatch.camera import Camera
from dropmatch.geometry import Box, Ray, Rect, Vec3


class GeometryTestCase(unittest.TestCase):
    def test_rect_contains_edges(self):
        rect = Rect(10, 20, 30, 40)
        self.assertTrue(rect.contains(10, 20))
        self.assertTrue(rect.contains(40, 60))
        self.assertFalse(rect.contains(41, 30))
        self.assertFalse(rect.contains(20, 19))

    def test_box_overlap_excludes_touching_faces(self):
        a = Box(Vec3(0, 0, 0), Vec3(0.5, 0.5, 0.5))
        self.assertTrue(a.overlaps(Box(Vec3(0.9, 0, 0), Vec3(0.5, 0.5, 0.5))))
        self.assertFalse(a.overlaps(Box(Vec3(1.0, 0, 0), Vec3(0.5, 0.5, 0.5))))
        self.assertFalse(a.overlaps(Box(Vec3(0, 0, 2), Vec3(0.5, 0.5, 0.5))))

    def test_ray_box_intersection(self):
        box = Box(Vec3(0, 0, 5), Vec3(1, 1, 1))
        self.assertAlmostEqual(4.0, box.intersect(Ray(Vec3(), Vec3(0, 0, 1))))
        self.assertIsNone(box.intersect(Ray(Vec3(), Vec3(0, 0, -1))))
        self.assertIsNone(box.intersect(Ray(Vec3(3, 0, 0), Vec3(0, 0, 1))))
        # Origin inside the box reports distance zero.
        self.assertEqual(0.0, box.intersect(Ray(Vec3(0, 0, 5), Vec3(1, 0, 0))))

    def test_vector_helpers(self):
        v = Vec3(3, 4, 0)
        self.assertEqual(5.0, v.length())
        self.assertAlmostEqual(1.0, v.normalized().length())
        self.assertEqual(Vec3(), Vec3().normalized())
        self.assertEqual(Vec3(3, 9, 0), v.with_y(9))
        self.assertEqual([3, 4, 0], list(v))


class CameraTestCase(unittest.TestCase):
    def test_screen_to_world_at_depth(self):
        camera = Camera(position=Vec3(), pitch_deg=0.0, fov_deg=90.0, width=200, height=200)
        center = camera.screen_to_world(100, 100, 3.0)
        self.assertAlmostEqual(0.0, center.x)
        self.assertAlmostEqual(0.0, center.y)
        self.assertAlmostEqual(3.0, center.z)
        corner = camera.screen_to_world(200, 0, 2.0)
        self.assertAlmostEqual(2.0, corner.x)
        self.assertAlmostEqual(2.0, corner.y)

    def test_pitched_ray_points_down(self):
        camera = Camera(position=Vec3(0, 5, 0), pitch_deg=45.0, fov_deg=90.0, width=200, height=200)
        ray = camera.screen_point_to_ray(100, 100)
        self.assertAlmostEqual(1.0, ray.direction.length())
        self.assertAlmostEqual(-ray.direction.y, ray.direction.z)

    def test_world_to_screen_inverts_projection(self):
        camera = Camera(position=Vec3(0, 2, -5), pitch_deg=20.0, fov_deg=60.0, width=1200, height=760)
        point = camera.screen_to_world(300, 500, 4.0)
        sx, sy = camera.world_to_screen(point)
        self.assertAlmostEqual(300, sx)
        self.assertAlmostEqual(500, sy)
        self.assertAlmostEqual(4.0, camera.depth_of(point))
        self.assertIsNone(camera.world_to_screen(Vec3(0, 2, -10)))

    def test_resize_guards_zero(self):
        camera = Camera()
        camera.resize(0, 300.7)
        self.assertEqual((1, 300), (camera.width, camera.height))


if __name__ == "__main__":
    unittest.main()
