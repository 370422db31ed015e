"""Indexed triangle meshes with textures, uploaded to the GPU for drawing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Protocol, Sequence

import numpy as np

FLOATS_PER_VERTEX = 8
VERTEX_STRIDE = FLOATS_PER_VERTEX * np.dtype(np.float32).itemsize
POSITION_OFFSET = 0
NORMAL_OFFSET = 3 * np.dtype(np.float32).itemsize
TEX_COORDS_OFFSET = 6 * np.dtype(np.float32).itemsize

DIFFUSE = "texture_diffuse"
SPECULAR = "texture_specular"
_NUMBERED_KINDS = (DIFFUSE, SPECULAR)


def _components(values: Sequence[float], count: int, what: str) -> tuple[float, ...]:
    components = tuple(float(v) for v in values)
    if len(components) != count:
        raise ValueError(f"{what} needs {count} components, got {len(components)}")
    return components


@dataclass(frozen=True)
class Vertex:
    """One mesh vertex: position, normal and texture coordinates."""

    position: tuple[float, float, float]
    normal: tuple[float, float, float]
    tex_coords: tuple[float, float] = (0.0, 0.0)

    def __post_init__(self) -> None:
        object.__setattr__(self, "position", _components(self.position, 3, "position"))
        object.__setattr__(self, "normal", _components(self.normal, 3, "normal"))
        object.__setattr__(self, "tex_coords", _components(self.tex_coords, 2, "tex_coords"))


@dataclass(frozen=True)
class Texture:
    """A GPU texture, the material slot it fills and the file it came from."""

    id: int
    kind: str
    path: str = ""


class MeshBackend(Protocol):
    """Graphics operations a mesh needs to upload and draw itself."""

    def upload(self, vertex_data: np.ndarray, index_data: np.ndarray) -> object: ...

    def bind_texture(self, unit: int, texture_id: int) -> None: ...

    def draw(self, handle: object, count: int) -> None: ...


class UniformSink(Protocol):
    def set_int(self, name: str, value: int) -> None: ...


def pack_vertices(vertices: Iterable[Vertex]) -> np.ndarray:
    """Interleave vertices into a float32 array, one row of 8 floats per vertex."""
    rows = [(*v.position, *v.normal, *v.tex_coords) for v in vertices]
    if not rows:
        return np.zeros((0, FLOATS_PER_VERTEX), dtype=np.float32)
    return np.ascontiguousarray(rows, dtype=np.float32)


def sampler_uniforms(textures: Iterable[Texture]) -> list[tuple[int, str, Texture]]:
    """Assign each texture a texture unit and its material sampler uniform name.

    Diffuse and specular maps are numbered from 1 within their kind; other
    kinds are used unnumbered.
    """
    counters = {kind: 0 for kind in _NUMBERED_KINDS}
    assignments = []
    for unit, texture in enumerate(textures):
        suffix = ""
        if texture.kind in counters:
            counters[texture.kind] += 1
            suffix = str(counters[texture.kind])
        assignments.append((unit, f"material.{texture.kind}{suffix}", texture))
    return assignments


@dataclass
class _GpuMesh:
    vertex_array: object
    vertex_buffer: object
    element_buffer: object


class _PygletBackend:
    """Uploads and draws meshes through the current OpenGL context."""

    def upload(self, vertex_data: np.ndarray, index_data: np.ndarray) -> _GpuMesh:
        from pyglet import gl
        from pyglet.graphics.vertexarray import VertexArray
        from pyglet.graphics.vertexbuffer import BufferObject

        vertex_data = np.ascontiguousarray(vertex_data, dtype=np.float32)
        index_data = np.ascontiguousarray(index_data, dtype=np.uint32)

        vertex_array = VertexArray()
        gl.glBindVertexArray(vertex_array.id)

        vertex_buffer = BufferObject(max(vertex_data.nbytes, 1))
        gl.glBindBuffer(gl.GL_ARRAY_BUFFER, vertex_buffer.id)
        gl.glBufferData(
            gl.GL_ARRAY_BUFFER, vertex_data.nbytes, vertex_data.ctypes.data, gl.GL_STATIC_DRAW
        )

        element_buffer = BufferObject(max(index_data.nbytes, 1))
        gl.glBindBuffer(gl.GL_ELEMENT_ARRAY_BUFFER, element_buffer.id)
        gl.glBufferData(
            gl.GL_ELEMENT_ARRAY_BUFFER, index_data.nbytes, index_data.ctypes.data, gl.GL_STATIC_DRAW
        )

        for location, size, offset in (
            (0, 3, POSITION_OFFSET),
            (1, 3, NORMAL_OFFSET),
            (2, 2, TEX_COORDS_OFFSET),
        ):
            gl.glEnableVertexAttribArray(location)
            gl.glVertexAttribPointer(
                location, size, gl.GL_FLOAT, gl.GL_FALSE, VERTEX_STRIDE, offset
            )

        gl.glBindVertexArray(0)
        return _GpuMesh(vertex_array, vertex_buffer, element_buffer)

    def bind_texture(self, unit: int, texture_id: int) -> None:
        from pyglet import gl

        gl.glActiveTexture(gl.GL_TEXTURE0 + unit)
        gl.glBindTexture(gl.GL_TEXTURE_2D, texture_id)

    def draw(self, handle: _GpuMesh, count: int) -> None:
        from pyglet import gl

        gl.glActiveTexture(gl.GL_TEXTURE0)
        gl.glBindVertexArray(handle.vertex_array.id)
        gl.glDrawElements(gl.GL_TRIANGLES, count, gl.GL_UNSIGNED_INT, 0)
        gl.glBindVertexArray(0)


class Mesh:
    """Vertices, triangle indices and textures, uploaded on construction."""

    def __init__(
        self,
        vertices: Iterable[Vertex],
        indices: Iterable[int],
        textures: Iterable[Texture],
        backend: MeshBackend | None = None,
    ) -> None:
        self.vertices = list(vertices)
        self.indices = [int(i) for i in indices]
        if any(i < 0 for i in self.indices):
            raise ValueError("mesh indices must be non-negative")
        self.textures = list(textures)
        self.backend = backend if backend is not None else _PygletBackend()
        self.handle: object = None
        self.upload()

    def upload(self) -> None:
        """Send the vertex and index data to the GPU."""
        index_data = np.asarray(self.indices, dtype=np.uint32)
        self.handle = self.backend.upload(pack_vertices(self.vertices), index_data)

    def draw(self, shader: UniformSink) -> None:
        """Bind each texture to its sampler and draw the indexed triangles."""
        for unit, name, texture in sampler_uniforms(self.textures):
            shader.set_int(name, unit)
            self.backend.bind_texture(unit, texture.id)
        self.backend.draw(self.handle, len(self.indices))