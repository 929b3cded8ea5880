# vectrace

`vectrace` holds vector shapes made of linear and cubic Bézier segments and
writes them out in several vector formats. It also thins the strokes of a
raster bitmap down to one pixel wide. It uses only the standard library.

## Contents

- **`vectrace.geometry`**: the data types.
  - `Coord` and `RealCoord` are points.
  - `Color` is an 8-bit RGB colour.
  - `PolynomialDegree` gives a segment's degree.
  - `Spline` is one segment. `Spline.evaluate(t)` evaluates it with
    de Casteljau's algorithm. `Spline.format()` returns a readable one-line
    description of a linear or cubic segment.
  - `SplineList` is one outline, with its colour and an `open` flag.
  - `SplineListArray` is the whole shape, with a `centerline` flag.
  - `Bitmap` is a raster image with `planes` bytes per pixel. It has
    `get_color`, `set_color`, `is_valid_pixel` and `copy`.
  - `TracingError` is the package's error.
- **`vectrace.vector`**: the `Vector` class and point arithmetic. `Vector` has
  `magnitude`, `normalized`, `dot`, `scaled`, `angle` (in degrees, from 0 to
  180) and `absolute`. The module also has `make_vector`, `vector_to_point`,
  `add_point`, `subtract_point`, `add_int_point`, `point_add`, `point_scale`,
  `point_subtract`, `int_subtract`, `int_subtract_point`, `int_add`,
  `int_scale` and `int_scale_real`. Integer points wrap to 16 bits.
- **`vectrace.thinning`**: `thin_image(bitmap, bg_color=None)` thins every
  non-background colour of a bitmap in place. It uses Rosenfeld's parallel
  thinning algorithm. The background defaults to white. Only one- and
  three-plane bitmaps are accepted.
- **`vectrace.registry`**: `OutputRegistry` and `SplineWriter` choose a
  writer by file suffix.
- **Writers**: each writer takes `(stream, name, llx, lly, urx, ury, shape)`.
  - `stream` is a text stream.
  - `name` is the document name.
  - `llx, lly, urx, ury` give the bounding box.
  - `shape` is a `SplineListArray`, and each of its lists must hold at least
    one spline.

| Module            | Writer      | Format                                             |
|-------------------|-------------|----------------------------------------------------|
| `vectrace.svg`    | `write_svg` | SVG paths, y axis flipped, one path per colour run |
| `vectrace.pdf`    | `write_pdf` | Single-page PDF 1.2 with an xref table             |
| `vectrace.p2e`    | `write_p2e` | Flattened PostScript as read by `pstoedit -bo`     |
| `vectrace.sketch` | `write_sk`  | Sketch documents                                   |
| `vectrace.pov`    | `write_pov` | POV-Ray `prism` objects                            |
| `vectrace.plt`    | `write_plt` | HPGL; curves are flattened to line segments        |
| `vectrace.ugs`    | `write_ugs` | UGS glyph outlines                                 |

`write_ugs` also takes a `UgsGlyph` that holds the glyph's metrics. It writes
each cubic segment as two quadratic segments, which it makes with
`cubic_to_quadratic`. The `vectrace.plt` module also has `nearest_pen` and
`bezier_points`.

## Building and writing a shape

```python
import io

from vectrace.geometry import (
    Color, PolynomialDegree, RealCoord, Spline, SplineList, SplineListArray,
)
from vectrace.svg import write_svg

corners = [RealCoord(0, 0), RealCoord(10, 0), RealCoord(10, 10), RealCoord(0, 10)]
square = SplineList(color=Color(255, 0, 0))
for a, b in zip(corners, corners[1:] + corners[:1]):
    square.append(Spline(a, a, b, b, PolynomialDegree.LINEAR))

shape = SplineListArray()
shape.append(square)

buffer = io.StringIO()
write_svg(buffer, "square", 0, 0, 10, 10, shape)
print(buffer.getvalue())
```

## Thinning a bitmap

```python
from vectrace.geometry import Bitmap, Color
from vectrace.thinning import thin_image

bitmap = Bitmap(5, 5, planes=3, bits=bytes([255]) * 75)  # all white
for row in range(5):
    for col in range(1, 4):
        bitmap.set_color(row, col, Color(0, 0, 0))
thin_image(bitmap)  # black strokes are thinned in place
```

## Choosing a writer by file name

`OutputRegistry.add_handler(suffix, description, writer, override=False,
data=None)` registers a writer. Suffixes are matched case-insensitively. An
existing entry is replaced only when `override` is true. If `data` is not
`None`, `SplineWriter.write` passes it to the writer as a last argument. For
example, that is how a `UgsGlyph` reaches `write_ugs`.

```python
from vectrace.registry import OutputRegistry
from vectrace.svg import write_svg

registry = OutputRegistry()
registry.add_handler("svg", "Scalable Vector Graphics", write_svg)

writer = registry.get_handler("picture.SVG")
with open("picture.svg", "w") as stream:
    writer.write(stream, "picture", 0, 0, 10, 10, shape)

print(registry.formats())    # [('svg', 'Scalable Vector Graphics')]
print(registry.shortlist())  # "svg"
```

`get_handler` and `get_handler_by_suffix` return `None` when a suffix is
unknown or empty.

## Errors

The package raises `TracingError` when it cannot go on:

- `write_pov` raises it for centerline shapes.
- `thin_image` raises it for bitmaps that have neither one nor three planes.
- `Vector.angle` raises it when the cosine falls outside the range `acos`
  accepts.

## What this package does not do

This package does not find outlines or centerlines in a bitmap. It does not
fit splines to pixels, and it does not read image files. You build a
`SplineListArray` yourself, or get one elsewhere, before you write it. There
is no command-line program; everything is used from Python.

## Running the tests

```
pip install -e ".[test]"
pytest
```