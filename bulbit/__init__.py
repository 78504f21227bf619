"""Building blocks for a physically based ray tracer: matrices, rays, bounds, sampling, textures, materials and lights."""

__version__ = "0.1.0"