# glmesh

Utilities for preparing geometry and textures for real-time 3D rendering,
written in plain Python with NumPy. Nothing here needs a graphics context.
Every function takes data and returns data, ready to upload to whatever
API you draw with.

## Installation

```
pip install glmesh
```

## Modules

### `glmesh.objloader`

- `parse_obj(text)` reads triangulated Wavefront OBJ text into a `Mesh`.
  A `Mesh` holds per-corner `vertices`, `uvs` and `normals`, and `len(mesh)`
  is its number of corners.
- `load_obj(path)` reads a file and parses it the same way.
- Faces must be written as `v/vt/vn`. Only the first three corners of a face
  are used. Records other than `v`, `vt`, `vn` and `f` are skipped.
- The V texture coordinate is negated on load.
- Malformed records, faces not in `v/vt/vn` form and out-of-range indices
  raise `ObjFormatError`, which is a subclass of `ValueError`.

### `glmesh.tangentspace`

`compute_tangent_basis(vertices, uvs, normals)` works on unindexed triangles
and returns `(tangents, bitangents)`, one of each per vertex.

- The three vertices of a triangle share one tangent and one bitangent.
- Each tangent is then orthogonalised against its vertex normal.
- A tangent is flipped where `cross(n, t)` points away from the bitangent.
- Inputs of unequal length, or a vertex count that is not a multiple of 3,
  raise `ValueError`.

### `glmesh.vboindexer`

These functions merge duplicate vertices and build a 16-bit index buffer.

- `index_vbo(vertices, uvs, normals)` merges vertices whose single-precision
  values match exactly, and returns an `IndexedMesh` with `indices`,
  `vertices`, `uvs` and `normals`.
- `index_vbo_slow(vertices, uvs, normals)` merges vertices whose components
  all lie within 0.01 of each other. It uses a linear search.
- `index_vbo_tbn(vertices, uvs, normals, tangents, bitangents)` merges like
  `index_vbo_slow`. It returns an `IndexedTBNMesh` in which the tangents and
  bitangents of merged vertices are summed.
- `is_near(v1, v2)` and `find_similar_vertex(...)` are the tolerance helpers
  these functions use.

### `glmesh.texture`

- `parse_bmp(data)` and `load_bmp(path)` read uncompressed 24-bit BMP files
  into a `BmpImage` with `width`, `height`, `image_size`, `data_offset` and
  raw `data`. The pixel data is stored bottom-up in BGR order. A missing image
  size or data offset is guessed.
- `parse_dds(data)` and `load_dds(path)` read DXT1, DXT3 and DXT5 DDS files
  into a `DdsImage`. It carries its `DdsFormat` and a list of `MipLevel`s,
  each with its level, width, height and compressed bytes. `DdsFormat` gives
  the `block_size` and `components` of each format.
- Data these readers do not understand raises `TextureFormatError`, which is
  a subclass of `ValueError`.

### `glmesh.text2d`

- `layout_text(text, x, y, size)` builds two triangles per character, with
  the lower-left corner at `(x, y)`. It returns a `TextGeometry` of screen
  `vertices` and atlas `uvs` for a 16×16 glyph atlas.
- `glyph_uv_origin(character)` gives the top-left atlas coordinate of a
  character's cell. Characters are treated as signed bytes.

### `glmesh.shader`

- `read_shader_source(path)` returns a shader file's text with each line
  preceded by a newline.
- `load_shader_sources(vertex_file_path, fragment_file_path)` reads both
  files into a `ShaderSources` with `vertex` and `fragment` text. A missing
  vertex shader raises `OSError`. A missing fragment shader gives empty text
  and logs a warning.

### `glmesh.glerrors`

- `GLErrorCode` lists the OpenGL error codes.
- `error_name(code)` names a reportable code, and gives an empty string for
  any other code.
- `describe_errors(codes, file, line)` turns queued codes into lines of the
  form `GL_<NAME> - <file>:<line>`. It stops at the first `NO_ERROR`.

### `glmesh.picking`

- `screen_pos_to_world_ray(mouse_x, mouse_y, screen_width, screen_height,
  view_matrix, projection_matrix)` unprojects a pixel, measured from the
  bottom-left corner of the window, into a world-space `Ray`. The ray starts
  on the near plane and has a unit-length direction. Matrices act on column
  vectors.
- `ray_obb_intersection(ray_origin, ray_direction, aabb_min, aabb_max,
  model_matrix)` returns the distance to an oriented bounding box, or `None`
  on a miss.
- `pick_first(ray, model_matrices, aabb_min, aabb_max)` returns the index of
  the first box the ray hits, or `None` if it hits none.

### `glmesh.colorpick`

These functions support picking by drawing each object in its own colour.

- `id_to_color(mesh_id)` encodes the low 24 bits of an identifier as
  `(r, g, b)`, with red holding the lowest byte.
- `color_to_id(rgb)` decodes a read-back pixel. It accepts RGB or RGBA.
- `pick_message(picked_id)` gives `"background"` for `BACKGROUND_ID` (full
  white) and `"mesh <id>"` otherwise.

## Example

```python
from glmesh.objloader import load_obj
from glmesh.vboindexer import index_vbo

mesh = load_obj("suzanne.obj")
indexed = index_vbo(mesh.vertices, mesh.uvs, mesh.normals)
print(len(indexed.indices), "indices,", len(indexed.vertices), "unique vertices")
```

## What this package does not do

glmesh only prepares data for rendering. It does not do any of the following:

- open windows or create a graphics context;
- compile or link shaders;
- upload buffers or textures;
- decompress DXT blocks;
- handle keyboard, mouse or camera input;
- draw anything.

Those steps belong to whichever graphics library you pair it with.

## Running the tests

```
pip install -e .[test]
pytest
```