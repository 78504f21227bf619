import pytest

from bulbit.light_builder import (
    DirectionalLight,
    PointLight,
    UniformInfiniteLight,
    create_directional_light,
    create_point_light,
    create_uniform_infinite_light,
)
from bulbit.material_builder import Scene


def test_point_light_scalar_intensity():
    scene = Scene()
    light = create_point_light(scene, (0.5, 0.9, -0.5), 0.25)
    assert isinstance(light, PointLight)
    assert light.position == (0.5, 0.9, -0.5)
    assert light.intensity == (0.25, 0.25, 0.25)
    assert scene.lights == (light,)


def test_point_light_spectrum_intensity():
    light = create_point_light(Scene(), (1, 2, 3), (30.0, 11.76, 3.66))
    assert light.intensity == (30.0, 11.76, 3.66)
    assert light.position == (1.0, 2.0, 3.0)


def test_directional_light_default_radius():
    scene = Scene()
    light = create_directional_light(scene, (0, -1, 0), 5.0)
    assert isinstance(light, DirectionalLight)
    assert light.visible_radius == 0.0
    assert light.direction == (0.0, -1.0, 0.0)
    with_radius = create_directional_light(scene, (0, -1, 0), 5.0, 0.02)
    assert with_radius.visible_radius == 0.02
    assert len(scene.lights) == 2


def test_uniform_infinite_light_default_scale():
    light = create_uniform_infinite_light(Scene(), (0.5, 0.8, 1.0))
    assert isinstance(light, UniformInfiniteLight)
    assert light.scale == 1.0
    assert light.l == (0.5, 0.8, 1.0)
    scaled = create_uniform_infinite_light(Scene(), 1.0, 20.0)
    assert scaled.scale == 20.0


def test_bad_vector_raises():
    with pytest.raises(ValueError):
        create_point_light(Scene(), (1.0, 2.0), 1.0)
    with pytest.raises(ValueError):
        create_directional_light(Scene(), (0, -1, 0), (1.0, 2.0))