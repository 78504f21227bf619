# bulbit

Building blocks for a physically based ray tracer, in plain Python with no
dependencies outside the standard library.

## Contents

- `bulbit.floats` holds float constants (`pi`, `inv_pi`, `epsilon`,
  `infinity` and others). `is_nullish` reports NaN or infinite values,
  including those inside sequences.
- `bulbit.matrix` provides column-major `Mat2`, `Mat3` and `Mat4`.
  - Every size has `identity`, `diagonal`, `zero`, `transpose` and `inverse`.
    A singular matrix inverts to the zero matrix.
  - `Mat2` has `determinant`.
  - `Mat3` has `scale`, `rotate` and `translate` for 2D transforms.
  - `Mat4` has `scale`, `rotate` (Euler angles), `translate`,
    `from_rotation_translation`, `orth` and `perspective`.
  - `mul(a, b)` computes `a * b` and `mul_t(a, b)` computes `transpose(a) * b`.
    Each takes a matrix or a vector as `b`. `a @ b` is the same as `mul(a, b)`.
- `bulbit.ray` provides `Ray(o, d)`. `Ray.at(t)` returns the point at `t`.
- `bulbit.bounding_box` provides `BoundingBox2` and `BoundingBox3`.
  - A box built with no arguments is empty.
  - Both have `center`, `extents`, `surface_area`, `contains`, `test_point`,
    `test_overlap`, `union`, and the slab tests `test_ray`,
    `test_ray_precomputed` and `intersect`. `intersect` returns `infinity` on
    a miss.
  - `BoundingBox2` adds `perimeter` and `bounding_circle`.
  - `BoundingBox3` adds `volume` and `bounding_sphere`.
  - `iter_points(box)` yields the integer points of `[min, max)` with x
    varying fastest.
- `bulbit.sampling` provides:
  - `balance_heuristic` and `power_heuristic`.
  - Uniform hemisphere, sphere, cosine hemisphere and unit disk warps, with
    their pdfs.
  - Exponential sampling.
  - GGX and visible-normal sampling: `sample_ggx`,
    `sample_ggx_vndf_dupuy_benyoub` and `sample_ggx_vndf_heitz`.
  - `henyey_greenstein`.
  - `sample_discrete`.
  - `Distribution1D` and `Distribution2D`.
  - `WeightedReservoirSampler`.
- `bulbit.sampler` provides `Sampler`, an abstract base. It keeps the current
  pixel and sample index, and subclasses supply `next_1d`, `next_2d` and
  `clone`.
- `bulbit.textures` provides `ConstantTexture`, `CheckerTexture` and
  `TexturePool`. `TexturePool` returns the same texture object for identical
  requests.
- `bulbit.async_job` provides `AsyncJob` and `run_async`.
  - A job runs once, either on an `Executor` or inline.
  - A thread that waits on a job nobody has started runs it itself.
  - `result()` re-raises any error the job raised.
- `bulbit.progress` provides `RenderingProgress`, which counts finished tiles.
  It can wait for the end of a render, or write a
  `Rendering.. NN.NN% [done/total]` line while it waits.
- `bulbit.samples` provides `SampleRegistry` and a module-level `registry`.
  A registry maps names to functions that fill a scene and return a camera.
  `get` raises `SampleNotFoundError` for an unknown name.
- `bulbit.material_builder` provides `Scene`, which collects textures,
  materials and lights. It also has `create_*_material` helpers that build
  diffuse, dielectric, conductor, unreal, subsurface, mixture, mirror and
  diffuse-light materials from plain numbers and colours.
- `bulbit.light_builder` provides `create_point_light`,
  `create_directional_light` and `create_uniform_infinite_light`.

## Installing

```
pip install .
```

To run the tests, install the `test` extra and run pytest:

```
pip install .[test]
pytest
```

## Example

```python
from bulbit.material_builder import Scene, create_diffuse_material
from bulbit.light_builder import create_point_light
from bulbit.samples import SampleRegistry

def cornell(scene):
    create_diffuse_material(scene, (0.65, 0.05, 0.05))
    create_point_light(scene, (0.5, 0.9, -0.5), 0.25)
    return "camera"

registry = SampleRegistry()
registry.register("cornell-box", cornell)

scene = Scene()
camera = registry.get("cornell-box", scene)
```

The sampling helpers take their random numbers as arguments, so the same
inputs always give the same results:

```python
from bulbit.sampling import sample_cosine_hemisphere, Distribution1D

direction = sample_cosine_hemisphere((0.25, 0.5))
dist = Distribution1D([1.0, 3.0])
index, pmf, u_remapped = dist.sample_discrete(0.6)
```

## What it does not do

This package does not render images. It has none of the following:

- Geometry or shapes.
- Acceleration structures.
- Cameras.
- Integrators.
- A film or image output.

It also has no image textures and no image-based lights, and it does not load
model files. Materials and lights are plain records held by a `Scene`, and
nothing evaluates them. There is no command-line program.