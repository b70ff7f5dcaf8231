# massive

Building blocks for a 2D renderer, in plain Python with no dependencies
outside the standard library.

- **Geometry** (`massive.point`, `massive.size`, `massive.line`,
  `massive.rect`, `massive.color`, `massive.unit_interval`): `Point`,
  `PointI`, `Size`, `SizeI`, `Line`, `Rect`, `Bounds`, `Color`, `HSV` and
  `UnitInterval`, plus `bounds_of` to join rectangles.
- **Cubic Bézier curves** (`massive.cubic_bezier`,
  `massive.bezier_algorithms`): `CubicBezier` with evaluation, tangents,
  normals, nearest point, bisection against a geometry (`intersect_with`),
  marching along the chord, bending, tight and control point bounds, and
  `NormalizedSpans` for storing span points relative to the start and end.
- **Glyph classification** (`massive.glyph_class`):
  `classify_transformed_pixel` tells whether a glyph's center pixel, after
  transformation to surface pixels, is `PixelPerfect`, `Zoomed` or
  `Distorted`; `GlyphRasterizationParam.for_class` and `.pipeline()` choose
  hinting, SDF preference and the `Pipeline` to draw with.
- **Glyph images and distance fields** (`massive.glyph_image`,
  `massive.distance_field`): `GlyphImage`, `Placement`, `ImageContent`,
  one-pixel padding (`pad_image`, `pad_image_data`) and signed distance
  field generation (`render_sdf`, `generate_distance_field`).
- **Quad indices** (`massive.quad_index`): `generate_quad_indices` and the
  growing `QuadIndices`, packed as little-endian 32-bit integers.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Examples

Rectangles and points:

```python
from massive.point import Point
from massive.size import Size
from massive.rect import Rect

r = Rect.from_origin_size(Point(10.0, 10.0), Size(100.0, 50.0))
r.center()                     # Point(x=60.0, y=35.0)
r.contains(Point(20.0, 20.0))  # True
```

Finding the nearest point on a cubic Bézier curve:

```python
from massive.point import Point
from massive.cubic_bezier import CubicBezier

curve = CubicBezier(Point(0.0, 0.0), Point(0.0, 100.0), Point(100.0, 100.0), Point(100.0, 0.0))
t = curve.nearest_t_of_point(Point(50.0, 120.0))
curve.point_at_t(t)
```

Classifying a transformed glyph pixel:

```python
from massive.glyph_class import GlyphRasterizationParam, classify_transformed_pixel

quad = [(10.0, 20.0, 0.0), (11.0, 20.0, 0.0), (11.0, 21.0, 0.0), (10.0, 21.0, 0.0)]
glyph_class = classify_transformed_pixel(quad)  # PixelPerfect(alignment=(True, True))
GlyphRasterizationParam.for_class(glyph_class).pipeline()  # Pipeline.PLANAR_GLYPH
```

A signed distance field from an 8-bit glyph mask:

```python
from massive.glyph_image import GlyphImage, ImageContent, Placement, render_sdf

image = GlyphImage(Placement(0, 8, 8, 8), ImageContent.MASK, bytes([255]) * 64)
sdf = render_sdf(image)
sdf.placement  # Placement(left=-4, top=12, width=16, height=16)
```

Quad indices:

```python
from massive.quad_index import QuadIndices, generate_quad_indices

generate_quad_indices(2)  # (0, 1, 2, 0, 2, 3, 4, 5, 6, 4, 6, 7)

indices = QuadIndices()
indices.ensure_can_index_num_quads(3)  # True, grows to 4 quads
indices.slice_len(3)                   # 72 bytes
```

## What this package does not do

It draws nothing. There is no GPU device, window or render loop, no 3D
camera, projection or matrix math, no scene graph, and no vertex or uniform
buffer packing. It does not load fonts or rasterize glyph outlines either:
`GlyphImage` values have to be supplied by the caller.