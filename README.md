# ogt

A small starting point for OpenGL programs. It includes a fly-through camera, shader program loading, indexed meshes and a demo window that draws one coloured triangle. Rendering goes through pyglet, and the matrices are numpy arrays.

## Install

```
pip install .
```

To run the tests, install with the test extra and then run pytest:

```
pip install .[test]
pytest
```

## Run the demo

```
ogt
```

The demo opens an 800×600 window titled `APPLICATION_NAME_HERE` and asks for an OpenGL 4.1 context. It draws one triangle with red, green and blue corners.

The demo reads its shaders from `shaders/triangle.vert.glsl` and `shaders/triangle.frag.glsl`, relative to the current directory. The package does not ship these files. You can point to other files:

```
ogt --vertex-shader path/to/triangle.vert.glsl --fragment-shader path/to/triangle.frag.glsl
```

The vertex shader receives the triangle's position at attribute location 0 and its colour at location 1.

Controls:

- W, A, S and D move the camera.
- The mouse turns the camera. The window captures the pointer.
- The scroll wheel changes the camera's zoom.
- Escape closes the window.

The demo draws the triangle without view or projection matrices. Camera input updates the camera's state but does not change the picture.

If the window cannot be created, or a shader cannot be read, compiled or linked, `ogt` prints the error and exits with status 1.

## Use it as a library

### Camera

`ogt.camera` holds the camera and two matrix helpers.

- `Camera(position, up, yaw, pitch)` is the fly-through camera. The defaults are the origin, +Y as up, a yaw of -90° and a pitch of 0°.
- `process_keyboard(direction, delta_time)` moves the camera by `movement_speed × delta_time` along the camera's own axes. The default `movement_speed` is 2.5.
- `process_mouse_movement(xoffset, yoffset, constrain_pitch=True)` turns the camera. Both offsets are scaled by `mouse_sensitivity`, which defaults to 0.1. With `constrain_pitch`, pitch stays within ±89°.
- `process_mouse_scroll(yoffset)` lowers `zoom` by `yoffset` and keeps it between 1 and 45.
- `view_matrix()` returns the 4×4 view matrix.
- `CameraMovement` names the four directions: `FORWARD`, `BACKWARD`, `LEFT` and `RIGHT`.
- `look_at(eye, center, up)` builds a right-handed 4×4 view matrix.
- `perspective(fovy_degrees, aspect, near, far)` builds a right-handed 4×4 projection with clip depth in [-1, 1]. A zero aspect, a zero field of view, or equal near and far planes raise `ValueError`.

```python
from ogt.camera import Camera, CameraMovement, perspective

camera = Camera((0.0, 0.0, 3.0))
camera.process_keyboard(CameraMovement.FORWARD, 0.016)
view = camera.view_matrix()
projection = perspective(camera.zoom, 800 / 600, 0.01, 100.0)
```

### Shaders

`ogt.shader` reads shader files and builds programs from them.

- `read_sources(vertex_path, fragment_path)` returns the text of both files.
- `Shader(vertex_path, fragment_path, compiler=None)` reads both files, then compiles and links them. By default it uses pyglet and needs a current OpenGL context. You can pass your own `compiler` callable. It takes the vertex and fragment source and returns an object with `use()` and `set_uniform(name, value)`.
- `use()` makes the program the active one.
- `set_bool`, `set_int` and `set_float` set scalar uniforms.
- `set_vec3(name, x, y, z)` and `set_vec3(name, (x, y, z))` set a vec3 uniform.
- `set_mat4(name, matrix)` sets a 4×4 matrix and sends it in column-major order.
- With the pyglet compiler, setting a uniform the program does not have is ignored.
- If a file cannot be read, or compiling or linking fails, `ShaderError` is raised.

### Meshes

`ogt.mesh` describes and draws indexed triangle geometry.

- `Vertex(position, normal, tex_coords=(0.0, 0.0))` is one vertex.
- `Texture(id, kind, path="")` is one texture. `kind` is the material slot, such as `"texture_diffuse"` or `"texture_specular"`.
- `pack_vertices(vertices)` interleaves vertices into a float32 array with 8 floats per vertex: position, then normal, then texture coordinates.
- `sampler_uniforms(textures)` gives each texture a texture unit and a sampler name. Diffuse and specular maps are numbered within their kind, for example `material.texture_diffuse1` and `material.texture_specular1`. Other kinds are not numbered.
- `Mesh(vertices, indices, textures, backend=None)` uploads its data when it is created.
- `Mesh.draw(shader)` sets each sampler uniform, binds the textures and draws the triangles.
- The default backend uses pyglet's OpenGL bindings, with attribute locations 0 for position, 1 for normal and 2 for texture coordinates. You can pass any object with `upload`, `bind_texture` and `draw` as `backend`.

## What it does not do

The package has no model-file importer and no image loader. It cannot read meshes or textures from disk. You build `Mesh` objects from vertices and indices yourself. The `Texture` objects you pass must refer to textures that already exist on the GPU.