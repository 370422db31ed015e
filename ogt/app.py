"""Window application that renders a coloured triangle with a fly camera."""

from __future__ import annotations

import argparse
import sys
import time
from dataclasses import dataclass

import numpy as np

from ogt.camera import Camera, CameraMovement
from ogt.shader import Shader, ShaderError

SCR_WIDTH = 800
SCR_HEIGHT = 600
TITLE = "APPLICATION_NAME_HERE"

TRIANGLE_VERTICES = np.array(
    [
        -0.5, -0.5, 0.0, 1.0, 0.0, 0.0,
        0.5, -0.5, 0.0, 0.0, 1.0, 0.0,
        0.0, 0.5, 0.0, 0.0, 0.0, 1.0,
    ],
    dtype=np.float32,
)


@dataclass
class MouseTracker:
    """Turns absolute cursor positions into offsets since the previous position."""

    last_x: float = SCR_WIDTH / 2.0
    last_y: float = SCR_HEIGHT / 2.0
    first: bool = True

    def update(self, xpos: float, ypos: float) -> tuple[float, float]:
        """Return (x offset, y offset); y grows upwards, screen y downwards."""
        xpos, ypos = float(xpos), float(ypos)
        if self.first:
            self.last_x, self.last_y = xpos, ypos
            self.first = False
        xoffset = xpos - self.last_x
        yoffset = self.last_y - ypos
        self.last_x, self.last_y = xpos, ypos
        return xoffset, yoffset


@dataclass
class FrameClock:
    """Measures the time between successive frames."""

    last_frame: float = 0.0

    def tick(self, now: float) -> float:
        """Record a frame at time now and return the time since the last one."""
        delta = now - self.last_frame
        self.last_frame = now
        return delta


def _upload_triangle():
    from pyglet import gl
    from pyglet.graphics.vertexarray import VertexArray
    from pyglet.graphics.vertexbuffer import BufferObject

    data = np.ascontiguousarray(TRIANGLE_VERTICES)
    vertex_buffer = BufferObject(data.nbytes)
    gl.glBindBuffer(gl.GL_ARRAY_BUFFER, vertex_buffer.id)
    gl.glBufferData(gl.GL_ARRAY_BUFFER, data.nbytes, data.ctypes.data, gl.GL_STATIC_DRAW)

    vertex_array = VertexArray()
    gl.glBindVertexArray(vertex_array.id)
    stride = 6 * data.itemsize
    gl.glVertexAttribPointer(0, 3, gl.GL_FLOAT, gl.GL_FALSE, stride, 0)
    gl.glEnableVertexAttribArray(0)
    gl.glVertexAttribPointer(1, 3, gl.GL_FLOAT, gl.GL_FALSE, stride, 3 * data.itemsize)
    gl.glEnableVertexAttribArray(1)
    gl.glBindVertexArray(0)
    gl.glBindBuffer(gl.GL_ARRAY_BUFFER, 0)
    return vertex_array, vertex_buffer


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="ogt", description="Render a triangle in a window.")
    parser.add_argument("--vertex-shader", default="shaders/triangle.vert.glsl")
    parser.add_argument("--fragment-shader", default="shaders/triangle.frag.glsl")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Open the window and run the render loop until it is closed."""
    args = _parse_args(argv)

    import pyglet
    from pyglet import gl
    from pyglet.window import key

    config = gl.Config(
        major_version=4,
        minor_version=1,
        forward_compatible=True,
        double_buffer=True,
        depth_size=24,
    )
    try:
        window = pyglet.window.Window(
            SCR_WIDTH, SCR_HEIGHT, caption=TITLE, config=config, resizable=True
        )
    except (pyglet.window.NoSuchConfigException, gl.ContextException) as exc:
        print(f"Failed to create window: {exc}", file=sys.stderr)
        return 1

    window.set_exclusive_mouse(True)
    gl.glEnable(gl.GL_DEPTH_TEST)

    try:
        shader = Shader(args.vertex_shader, args.fragment_shader)
    except ShaderError as exc:
        print(exc, file=sys.stderr)
        window.close()
        return 1

    vertex_array, _vertex_buffer = _upload_triangle()

    camera = Camera((0.0, 0.0, 3.0))
    tracker = MouseTracker()
    clock = FrameClock()
    keys = key.KeyStateHandler()
    window.push_handlers(keys)
    bindings = {
        key.W: CameraMovement.FORWARD,
        key.S: CameraMovement.BACKWARD,
        key.A: CameraMovement.LEFT,
        key.D: CameraMovement.RIGHT,
    }
    cursor = [tracker.last_x, tracker.last_y]
    start = time.perf_counter()

    @window.event
    def on_mouse_motion(x, y, dx, dy):
        cursor[0] += dx
        cursor[1] -= dy
        camera.process_mouse_movement(*tracker.update(cursor[0], cursor[1]))

    @window.event
    def on_mouse_scroll(x, y, scroll_x, scroll_y):
        camera.process_mouse_scroll(scroll_y)

    @window.event
    def on_draw():
        window.clear()
        shader.use()
        gl.glBindVertexArray(vertex_array.id)
        gl.glDrawArrays(gl.GL_TRIANGLES, 0, 3)

    def update(_dt):
        delta = clock.tick(time.perf_counter() - start)
        if keys[key.ESCAPE]:
            window.close()
            return
        for symbol, movement in bindings.items():
            if keys[symbol]:
                camera.process_keyboard(movement, delta)

    pyglet.clock.schedule(update)
    pyglet.app.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())