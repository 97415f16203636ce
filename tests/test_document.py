import io

import pytest

from svgdoc.context import RenderContext
from svgdoc.document import Document
from svgdoc.elements import Circle, Polyline, Text
from svgdoc.types_svg import Point

HEADER = (
    '<?xml version="1.0" encoding="UTF-8" ?>\n'
    '<svg xmlns="http://www.w3.org/2000/svg" version="1.1">\n'
)
FOOTER = "</svg>"


def test_empty_document_renders_three_fixed_lines():
    assert Document().render_to_string() == HEADER + FOOTER


def test_single_circle_is_indented_two_spaces():
    doc = Document()
    doc.add(Circle().set_center(Point(40, 40)).set_radius(15))
    assert doc.render_to_string() == (
        HEADER + '  <circle cx="40" cy="40" r="15" />\n' + FOOTER
    )


def test_render_order_follows_insertion_order():
    doc = Document()
    doc.add(Text().set_data("first"))
    doc.add(Polyline().add_point((0, 0)).add_point((1, 1)))
    doc.add(Circle())

    lines = doc.render_to_string().split("\n")
    assert lines[2].startswith("  <text")
    assert lines[3] == '  <polyline points="0,0 1,1" />'
    assert lines[4] == '  <circle cx="0" cy="0" r="1" />'
    assert lines[5] == FOOTER
    assert len(doc) == 3


def test_render_to_sink_matches_string():
    doc = Document()
    doc.add(Circle().set_fill_color("red"))
    out = io.StringIO()
    doc.render(out)
    assert out.getvalue() == doc.render_to_string()


def test_rendering_is_deterministic():
    doc = Document()
    doc.add(Text().set_data("a < b").set_font_family("Arial"))
    doc.add(Circle().set_radius(2.25))
    assert doc.render_to_string() == doc.render_to_string()


def test_add_stores_a_copy():
    circle = Circle().set_radius(2)
    doc = Document()
    doc.add(circle)
    circle.set_radius(5).set_fill_color("red")
    assert '  <circle cx="0" cy="0" r="2" />' in doc.render_to_string()


def test_add_ptr_stores_the_given_object():
    circle = Circle().set_radius(3)
    doc = Document()
    doc.add_ptr(circle)
    assert doc.render_to_string() == HEADER + '  <circle cx="0" cy="0" r="3" />\n' + FOOTER


def test_mutating_iterated_objects_does_not_change_the_document():
    doc = Document()
    doc.add(Circle().set_radius(2))
    before = doc.render_to_string()

    next(iter(doc)).set_radius(99).set_fill_color("red")
    for obj in doc:
        obj.set_stroke_width(5)

    assert doc.render_to_string() == before
    assert 'r="99"' not in before


def test_iteration_does_not_expose_the_collection():
    doc = Document()
    doc.add(Circle())
    objects = list(doc)
    objects.clear()
    assert len(doc) == 1


def test_prototype_reuse():
    base = Circle().set_fill_color("white").set_stroke_color("black")
    doc = Document()
    doc.add(base.set_radius(1))
    doc.add(base.set_radius(2))
    rendered = doc.render_to_string()
    assert 'r="1" fill="white"' in rendered
    assert 'r="2" fill="white"' in rendered


class _BrokenSink(io.StringIO):
    def write(self, s):
        raise OSError("sink closed")


def test_sink_errors_propagate():
    doc = Document()
    doc.add(Circle())
    with pytest.raises(OSError):
        doc.render(_BrokenSink())


def test_context_indented_returns_new_context():
    out = io.StringIO()
    ctx = RenderContext(out, 2, 2)
    nested = ctx.indented()
    assert (ctx.indent, nested.indent, nested.indent_step) == (2, 4, 2)
    assert nested.out is out
    nested.render_indent()
    ctx.render_indent()
    assert out.getvalue() == " " * 6


def test_context_zero_indent_writes_nothing():
    out = io.StringIO()
    RenderContext(out).render_indent()
    assert out.getvalue() == ""
