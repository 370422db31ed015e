"""Fly-through camera, shader programs, indexed meshes and a triangle demo window for OpenGL."""

__version__ = "0.1.0"