"""Scene graph, scene objects, collision bounds, camera frames, transforms and colour conversion."""

__version__ = "0.1.0"