import io

import pytest

from svgsketch.svg import (
    Circle,
    Document,
    Drawable,
    Object,
    ObjectContainer,
    PathProps,
    Point,
    Polyline,
    RenderContext,
    Rgb,
    Rgba,
    StrokeLineCap,
    StrokeLineJoin,
    Text,
    format_color,
)

HEADER = (
    '<?xml version="1.0" encoding="UTF-8" ?>\n'
    '<svg xmlns="http://www.w3.org/2000/svg" version="1.1">\n'
)
FOOTER = "</svg>\n"


def _render_object(obj):
    out = io.StringIO()
    obj.render_object(RenderContext(out))
    return out.getvalue()


def test_format_color_none():
    assert format_color("fill", None) == ' fill="none"'


def test_format_color_string():
    assert format_color("stroke", "black") == ' stroke="black"'


def test_format_color_rgb():
    assert format_color("fill", Rgb(12, 42, 122)) == ' fill="rgb(12,42,122)"'


def test_format_color_rgba_uses_general_number_format():
    result = format_color("fill", Rgba(1, 2, 3, 0.5))
    assert result.startswith(' fill="rgba(1,2,3,')
    assert result.endswith('0.5)"')


def test_format_color_rejects_unknown_type():
    with pytest.raises(TypeError):
        format_color("fill", 42)


@pytest.mark.parametrize("channels", [(256, 0, 0), (0, -1, 0), (0, 0, 300)])
def test_rgb_channel_range(channels):
    with pytest.raises(ValueError):
        Rgb(*channels)


def test_rgba_channel_range():
    with pytest.raises(ValueError):
        Rgba(0, 0, 999, 1.0)


@pytest.mark.parametrize(
    "cap, text",
    [(StrokeLineCap.BUTT, "butt"), (StrokeLineCap.ROUND, "round"), (StrokeLineCap.SQUARE, "square")],
)
def test_line_cap_names(cap, text):
    assert str(cap) == text


@pytest.mark.parametrize(
    "join, text",
    [
        (StrokeLineJoin.ARCS, "arcs"),
        (StrokeLineJoin.BEVEL, "bevel"),
        (StrokeLineJoin.MITER, "miter"),
        (StrokeLineJoin.MITER_CLIP, "miter-clip"),
        (StrokeLineJoin.ROUND, "round"),
    ],
)
def test_line_join_names(join, text):
    assert str(join) == text


def test_point_defaults_to_origin():
    assert Point() == Point(0, 0)


def test_render_context_indented_adds_step():
    ctx = RenderContext(io.StringIO(), 2, 3)
    deeper = ctx.indented()
    assert deeper.indent == 5
    assert deeper.indent_step == 2
    assert deeper.out is ctx.out
    assert ctx.indent == 3


def test_render_indent_writes_spaces():
    out = io.StringIO()
    RenderContext(out, 2, 4).render_indent()
    assert out.getvalue() == " " * 4


def test_object_render_indents_and_ends_line():
    out = io.StringIO()
    circle = Circle()
    circle.render(RenderContext(out, 2, 2))
    line = out.getvalue()
    assert line == "  " + _render_object(circle) + "\n"


def test_render_attrs_defaults():
    assert PathProps().render_attrs() == ' fill="none" stroke="none"'


def test_render_attrs_all_set():
    props = PathProps(
        fill_color="red",
        stroke_color=Rgb(1, 2, 3),
        stroke_width=3,
        stroke_linecap=StrokeLineCap.ROUND,
        stroke_linejoin=StrokeLineJoin.MITER_CLIP,
    )
    attrs = props.render_attrs()
    assert attrs.startswith(' fill="red" stroke="rgb(1,2,3)"')
    assert ' stroke-width="3"' in attrs
    assert ' stroke-linecap="round"' in attrs
    assert attrs.endswith(' stroke-linejoin="miter-clip"')


def test_circle_render():
    circle = Circle(center=Point(20, 30), radius=10, fill_color="white")
    assert _render_object(circle) == '<circle cx="20" cy="30" r="10"  fill="white" stroke="none"/>'


def test_circle_default_radius():
    assert Circle().radius == 1.0
    assert 'r="1"' in _render_object(Circle())


def test_polyline_add_point_chains():
    line = Polyline()
    result = line.add_point(Point(1, 2)).add_point(Point(3, 4))
    assert result is line
    assert line.points == [Point(1, 2), Point(3, 4)]


def test_polyline_render_points():
    line = Polyline().add_point(Point(1.5, 2.25)).add_point(Point(3, 4))
    rendered = _render_object(line)
    assert rendered.startswith('<polyline points="1.5,2.25 3,4 "')
    assert rendered.endswith(PathProps().render_attrs() + "/>")


def test_polyline_empty():
    rendered = _render_object(Polyline())
    assert rendered.startswith('<polyline points=""')


def test_text_escapes_data():
    rendered = _render_object(Text(data="<a & \"b\" 'c'>"))
    assert "&lt;a &amp; &quot;b&quot; &apos;c&apos;&gt;</text>" in rendered


def test_text_optional_attributes_omitted():
    rendered = _render_object(Text())
    assert "font-family" not in rendered
    assert "font-weight" not in rendered
    assert rendered.endswith("></text>")
    assert ' font-size="1"' in rendered


def test_text_attributes_rendered():
    text = Text(
        position=Point(10, 100),
        offset=Point(1, 2),
        font_size=12,
        font_family="Verdana",
        font_weight="bold",
        data="Hi",
        fill_color="red",
    )
    rendered = _render_object(text)
    assert rendered.startswith('<text x="10" y="100" dx="1" dy="2" font-size="12"')
    assert ' font-family="Verdana"' in rendered
    assert ' font-weight="bold"' in rendered
    assert ' fill="red"' in rendered
    assert rendered.endswith(">Hi</text>")


def test_text_rejects_negative_font_size():
    with pytest.raises(ValueError):
        Text(font_size=-1)


def test_empty_document():
    out = io.StringIO()
    Document().render(out)
    assert out.getvalue() == HEADER + FOOTER


def test_document_renders_objects_in_order():
    doc = Document()
    doc.add(Circle(radius=5))
    doc.add(Text(data="x"))
    out = io.StringIO()
    doc.render(out)
    lines = out.getvalue().splitlines()
    assert len(lines) == 5
    assert lines[2].startswith("  <circle")
    assert lines[3].startswith("  <text")
    assert lines[-1] == "</svg>"


def test_document_add_copies_object():
    doc = Document()
    line = Polyline().add_point(Point(1, 1))
    doc.add(line)
    line.add_point(Point(2, 2))
    (stored,) = list(doc)
    assert stored.points == [Point(1, 1)]
    assert len(doc) == 1


def test_document_add_rejects_non_objects():
    with pytest.raises(TypeError):
        Document().add("circle")


def test_abstract_classes_cannot_be_instantiated():
    for cls in (Object, ObjectContainer, Drawable):
        with pytest.raises(TypeError):
            cls()