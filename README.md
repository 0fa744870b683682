# svgsketch

A small library for building SVG documents from Python objects. It has
circle, polyline and text elements with fill and stroke properties. It also
has drawable shapes that add their elements to a document.

## Installing

```
pip install .
```

## Building a document

```python
import sys

from svgsketch.svg import Circle, Document, Point, Rgb, StrokeLineCap, Text

doc = Document()
doc.add(Circle(center=Point(20, 20), radius=10, fill_color="red", stroke_color="black"))
doc.add(
    Text(
        position=Point(10, 50),
        font_size=12,
        font_family="Verdana",
        data="Hello & welcome",
        fill_color=Rgb(12, 42, 122),
        stroke_linecap=StrokeLineCap.ROUND,
    )
)
doc.render(sys.stdout)
```

`Document.render(out)` writes to any text stream. It writes the XML
declaration, an `<svg>` root, and then each element on its own line,
indented by two spaces.

`Document.add` stores a copy of the element. Changing the element afterwards
does not change the document. A `Document` can be iterated over, and `len()`
gives the number of elements it holds.

### Elements

All elements live in `svgsketch.svg`:

- `Circle`: `center` (a `Point`) and `radius`, which defaults to `1.0`.
- `Polyline`: a list of `points`. `add_point(point)` appends a vertex and
  returns the polyline, so calls can be chained.
- `Text`: `position`, `offset`, `font_size` (default `1`), `font_family`,
  `font_weight` and `data`. The characters `" < > ' &` in `data` are escaped
  when the element is rendered. A negative `font_size` raises `ValueError`.

Every element also takes the properties of `PathProps`. These are
`fill_color`, `stroke_color`, `stroke_width`, `stroke_linecap` (a
`StrokeLineCap`) and `stroke_linejoin` (a `StrokeLineJoin`). Fill and stroke
colours are always written out. The other three are written only when set.

### Colours

A colour can be one of:

- `None`, which renders as `none`;
- a string such as `"yellow"`, written as given;
- `Rgb(red, green, blue)`;
- `Rgba(red, green, blue, opacity)`.

A channel outside 0..255 raises `ValueError`. `format_color(name, color)`
returns the attribute text for a colour, for example ` fill="rgb(1,2,3)"`.

## Shapes

`svgsketch.shapes` provides `Star`, `Snowman` and `Triangle`. Each one is a
`Drawable`: its `draw(container)` adds its elements to any `ObjectContainer`,
for example a `Document`. `draw_picture(drawables, target)` draws a whole
sequence in order.

```python
from svgsketch.shapes import Snowman, Star, draw_picture
from svgsketch.svg import Document, Point

doc = Document()
draw_picture([Star(Point(50, 20), 10, 4, 5), Snowman(Point(30, 20), 10)], doc)
```

A `Star` with fewer than one ray raises `ValueError`.

To make a shape of your own, subclass `Drawable` and implement `draw`.

## Command

```
svgsketch
```

This writes a sample holiday picture to `file.svg` in the current directory.
The picture has a triangle, a star, a snowman and a greeting. To write the
picture to a different file, give its path as the only argument:

```
svgsketch picture.svg
```

## Tests

```
pip install .[test]
pytest
```