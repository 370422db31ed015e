"""Shader programs built from vertex and fragment source files."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Protocol, Sequence

import numpy as np


class ShaderError(Exception):
    """Raised when shader sources cannot be read, compiled or linked."""


class Program(Protocol):
    """A linked GPU program that can be activated and given uniform values."""

    def use(self) -> None: ...

    def set_uniform(self, name: str, value: object) -> None: ...


Compiler = Callable[[str, str], Program]


def read_sources(vertex_path: str | Path, fragment_path: str | Path) -> tuple[str, str]:
    """Read and return the vertex and fragment shader sources."""
    sources = []
    for path in (vertex_path, fragment_path):
        try:
            sources.append(Path(path).read_text())
        except OSError as exc:
            raise ShaderError(f"shader file not successfully read: {path}") from exc
    return sources[0], sources[1]


class _PygletProgram:
    """Adapter over a pyglet shader program; unknown uniforms are ignored."""

    def __init__(self, program) -> None:
        self._program = program

    def use(self) -> None:
        self._program.use()

    def set_uniform(self, name: str, value: object) -> None:
        if name in self._program.uniforms:
            self._program[name] = value


def _pyglet_compiler(vertex_source: str, fragment_source: str) -> Program:
    from pyglet.graphics import shader as gl_shader

    try:
        vertex = gl_shader.Shader(vertex_source, "vertex")
    except gl_shader.ShaderException as exc:
        raise ShaderError(f"vertex shader compilation failed\n{exc}") from exc
    try:
        fragment = gl_shader.Shader(fragment_source, "fragment")
    except gl_shader.ShaderException as exc:
        raise ShaderError(f"fragment shader compilation failed\n{exc}") from exc
    try:
        program = gl_shader.ShaderProgram(vertex, fragment)
    except gl_shader.ShaderException as exc:
        raise ShaderError(f"program linking failed\n{exc}") from exc
    return _PygletProgram(program)


class Shader:
    """A vertex and fragment shader pair linked into one program."""

    def __init__(
        self,
        vertex_path: str | Path,
        fragment_path: str | Path,
        compiler: Compiler | None = None,
    ) -> None:
        self.vertex_source, self.fragment_source = read_sources(vertex_path, fragment_path)
        build = compiler if compiler is not None else _pyglet_compiler
        self.program = build(self.vertex_source, self.fragment_source)

    def use(self) -> None:
        """Make this program the active one."""
        self.program.use()

    def set_bool(self, name: str, value: bool) -> None:
        self.program.set_uniform(name, int(bool(value)))

    def set_int(self, name: str, value: int) -> None:
        self.program.set_uniform(name, int(value))

    def set_float(self, name: str, value: float) -> None:
        self.program.set_uniform(name, float(value))

    def set_mat4(self, name: str, value: Sequence[Sequence[float]]) -> None:
        """Upload a 4x4 matrix, sent in column-major order."""
        matrix = np.asarray(value, dtype=np.float64)
        if matrix.shape != (4, 4):
            raise ValueError(f"expected a 4x4 matrix, got shape {matrix.shape}")
        self.program.set_uniform(name, tuple(float(x) for x in matrix.flatten(order="F")))

    def set_vec3(self, name: str, *args) -> None:
        """Upload a vec3 given either as x, y, z or as one 3-component sequence."""
        if len(args) == 3:
            components = args
        elif len(args) == 1:
            components = tuple(args[0])
            if len(components) != 3:
                raise TypeError("set_vec3 expects a sequence of exactly 3 components")
        else:
            raise TypeError("set_vec3 expects x, y, z or one 3-component sequence")
        self.program.set_uniform(name, tuple(float(c) for c in components))