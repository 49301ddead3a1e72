"""Tests for light sources and the lighting/shadow model."""

import pytest
import math
from raycaster.vec3 import Vec3, Point3
from raycaster.ray import Ray
from raycaster.color import Color, BLACK
from raycaster.shapes import Sphere, Plane, Background
from raycaster.scene import Scene, HitRecord
from raycaster.lights import (
    AmbientLight, PointLight, DirectionalLight, compute_lighting, is_in_shadow
)

WHITE = Color(255, 255, 255)


class TestLightTypes:
    """Test light construction."""

    def test_ambient_has_no_direction(self):
        assert AmbientLight(0.2).direction_from(Point3(1, 2, 3)) is None

    def test_point_direction_spans_distance_to_light(self):
        light = PointLight(0.6, Point3(0, 4, 0))
        direction = light.direction_from(Point3(0, 0, 0))
        assert direction == Vec3(0, 4, 0)
        assert direction.length() == pytest.approx(4.0)
        assert light.shadow_t_max == 1.0

    def test_directional_fixed_direction(self):
        light = DirectionalLight(0.2, Vec3(1, 4, 4))
        assert light.direction_from(Point3(0, 0, 0)) == Vec3(1, 4, 4)
        assert light.direction_from(Point3(100, 0, -3)) == Vec3(1, 4, 4)
        assert light.shadow_t_max == math.inf

    def test_negative_intensity_rejected(self):
        with pytest.raises(ValueError):
            AmbientLight(-0.1)

    def test_zero_direction_rejected(self):
        with pytest.raises(ValueError):
            DirectionalLight(0.2, Vec3(0, 0, 0))


@pytest.fixture
def sphere_hit():
    """A matte sphere hit head-on at (0, 0, 4) from the origin."""
    sphere = Sphere(Point3(0, 0, 5), 1.0, WHITE)
    ray = Ray(Point3(0, 0, 0), Vec3(0, 0, 1))
    return Scene([Background(BLACK), sphere]), ray, HitRecord(sphere, 4.0)


class TestComputeLighting:
    """Test compute_lighting."""

    def test_ambient_only(self, sphere_hit):
        scene, ray, hit = sphere_hit
        assert compute_lighting(scene, [AmbientLight(0.2)], ray, hit) == pytest.approx(0.2)

    def test_point_light_diffuse(self, sphere_hit):
        scene, ray, hit = sphere_hit
        lights = [AmbientLight(0.25), PointLight(0.5, Point3(0, 0, 0))]
        assert compute_lighting(scene, lights, ray, hit) == pytest.approx(0.75)

    def test_directional_light_diffuse(self, sphere_hit):
        scene, ray, hit = sphere_hit
        lights = [DirectionalLight(0.3, Vec3(0, 0, -1))]
        assert compute_lighting(scene, lights, ray, hit) == pytest.approx(0.3)

    def test_diffuse_cosine(self, sphere_hit):
        scene, ray, hit = sphere_hit
        lights = [DirectionalLight(1.0, Vec3(0, 1, -1))]
        assert compute_lighting(scene, lights, ray, hit) == pytest.approx(1 / math.sqrt(2))

    def test_light_behind_surface(self, sphere_hit):
        scene, ray, hit = sphere_hit
        lights = [PointLight(0.6, Point3(0, 0, 10))]
        assert compute_lighting(scene, lights, ray, hit) == 0.0

    def test_intensities_are_summed_not_clamped(self, sphere_hit):
        scene, ray, hit = sphere_hit
        lights = [AmbientLight(1.0), AmbientLight(1.5), DirectionalLight(1.0, Vec3(0, 0, -1))]
        assert compute_lighting(scene, lights, ray, hit) == pytest.approx(3.5)

    def test_specular_highlight(self):
        shiny = Sphere(Point3(0, 0, 5), 1.0, WHITE, reflection=10)
        ray = Ray(Point3(0, 0, 0), Vec3(0, 0, 1))
        scene = Scene([shiny])
        lights = [PointLight(0.5, Point3(0, 0, 0))]

        # Light sits at the viewer, so the highlight peaks: diffuse + specular
        assert compute_lighting(scene, lights, ray, HitRecord(shiny, 4.0)) == pytest.approx(1.0)

    def test_specular_falloff(self):
        shiny = Plane(Point3(0, 0, 0), Vec3(0, 1, 0), WHITE, reflection=2)
        ray = Ray(Point3(0, 1, 0), Vec3(0, -1, 0))
        scene = Scene([shiny])
        lights = [DirectionalLight(1.0, Vec3(1, 1, 0))]

        # N.L/(|N||L|) = cos 45; R = (-1, 1, 0), R.V/(|R||V|) = cos 45
        expected = 1 / math.sqrt(2) + (1 / math.sqrt(2)) ** 2
        assert compute_lighting(scene, lights, ray, HitRecord(shiny, 1.0)) == pytest.approx(expected)

    def test_no_highlight_without_exponent(self):
        matte = Plane(Point3(0, 0, 0), Vec3(0, 1, 0), WHITE)
        ray = Ray(Point3(0, 1, 0), Vec3(0, -1, 0))
        lights = [DirectionalLight(1.0, Vec3(0, 1, 0))]
        assert compute_lighting(Scene([matte]), lights, ray, HitRecord(matte, 1.0)) == pytest.approx(1.0)

    def test_background_only_gets_ambient(self):
        background = Background(Color(100, 100, 100))
        ray = Ray(Point3(0, 0, 0), Vec3(0, 0, 1))
        lights = [AmbientLight(0.2), PointLight(0.6, Point3(0, 0, 0)), DirectionalLight(0.2, Vec3(0, 0, -1))]
        hit = HitRecord(background, 0.0, found=False)
        assert compute_lighting(Scene([background]), lights, ray, hit) == pytest.approx(0.2)


@pytest.fixture
def floor_scene():
    """A floor lit from above with an occluder hanging between floor and lamp."""
    floor = Plane(Point3(0, 0, 0), Vec3(0, 1, 0), WHITE)
    occluder = Sphere(Point3(0, 2, 0), 0.5, WHITE)
    ray = Ray(Point3(0, 5, 0), Vec3(0, -1, 0))
    return floor, occluder, ray, HitRecord(floor, 5.0)


class TestShadows:
    """Test shadow occlusion."""

    def test_occluder_removes_only_that_light(self, floor_scene):
        floor, occluder, ray, hit = floor_scene
        lamp = PointLight(0.5, Point3(0, 4, 0))
        sun = DirectionalLight(0.3, Vec3(1, 1, 0))
        lights = [AmbientLight(0.1), lamp, sun]

        lit = compute_lighting(Scene([floor]), lights, ray, hit)
        shadowed = compute_lighting(Scene([floor, occluder]), lights, ray, hit)

        assert lit == pytest.approx(0.1 + 0.5 + 0.3 / math.sqrt(2))
        assert shadowed == pytest.approx(0.1 + 0.3 / math.sqrt(2))
        assert lit - shadowed == pytest.approx(0.5)

    def test_occluder_beyond_point_light_casts_no_shadow(self, floor_scene):
        floor, _, ray, hit = floor_scene
        beyond = Sphere(Point3(0, 6, 0), 0.5, WHITE)
        lamp = PointLight(0.5, Point3(0, 4, 0))
        scene = Scene([floor, beyond])

        # Shadow ray runs along the un-normalized light vector with t_max = 1.0
        direction = lamp.direction_from(Point3(0, 0, 0))
        assert not is_in_shadow(scene, Point3(0, 0, 0), direction, lamp.shadow_t_max)
        assert compute_lighting(scene, [lamp], ray, hit) == pytest.approx(0.5)

    def test_same_occluder_blocks_farther_point_light(self, floor_scene):
        floor, _, ray, hit = floor_scene
        blocker = Sphere(Point3(0, 6, 0), 0.5, WHITE)
        lamp = PointLight(0.5, Point3(0, 8, 0))
        assert compute_lighting(Scene([floor, blocker]), [lamp], ray, hit) == 0.0

    def test_directional_light_shadow_is_unbounded(self, floor_scene):
        floor, _, ray, hit = floor_scene
        far_blocker = Sphere(Point3(0, 100, 0), 1.0, WHITE)
        sun = DirectionalLight(0.3, Vec3(0, 1, 0))
        assert compute_lighting(Scene([floor, far_blocker]), [sun], ray, hit) == 0.0

    def test_surface_does_not_shadow_itself(self, floor_scene):
        floor, _, ray, hit = floor_scene
        sun = DirectionalLight(0.3, Vec3(0, 1, 0))
        assert not is_in_shadow(Scene([floor]), Point3(0, 0, 0), Vec3(0, 1, 0), math.inf)
        assert compute_lighting(Scene([floor]), [sun], ray, hit) == pytest.approx(0.3)
