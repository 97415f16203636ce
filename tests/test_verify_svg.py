from pathlib import Path

from bs4 import BeautifulSoup

from scripts.verify_svg import main, verify_svg
from svgdoc.document import Document
from svgdoc.elements import Circle, Text
from svgdoc.scene import greeting_document, picture_document


def test_verify_rendered_picture(tmp_path: Path):
    path = tmp_path / "picture.svg"
    path.write_text(picture_document().render_to_string(), encoding="utf-8")

    assert verify_svg(path) == []
    assert main(["--file", str(path)]) == 0


def test_rendered_text_parses_back_to_raw_content():
    soup = BeautifulSoup(greeting_document().render_to_string(), "html.parser")
    texts = soup.find_all("text")
    assert [text.get_text() for text in texts] == ["Happy New Year!"] * 2
    assert texts[0]["stroke-linejoin"] == "round"


def test_verify_reports_bad_indentation_and_tags(tmp_path: Path):
    path = tmp_path / "broken.svg"
    path.write_text(
        '<?xml version="1.0" encoding="UTF-8" ?>\n'
        '<svg xmlns="http://www.w3.org/2000/svg" version="1.1">\n'
        '    <circle cx="0" cy="0" r="1" />\n'
        '  <rect x="0" y="0" />\n'
        "</svg>",
        encoding="utf-8",
    )

    errors = verify_svg(path)
    assert any("Line 3" in message for message in errors)
    assert any("<rect>" in message for message in errors)
    assert main(["--file", str(path)]) == 1


def test_verify_missing_file(tmp_path: Path):
    assert verify_svg(tmp_path / "none.svg") == [f"SVG file not found: {tmp_path / 'none.svg'}"]


def test_verify_accepts_multiline_text_content(tmp_path: Path):
    doc = Document()
    doc.add(Text().set_data("first line\nsecond <line>\n  indented third"))
    doc.add(Circle())
    path = tmp_path / "multiline.svg"
    path.write_text(doc.render_to_string(), encoding="utf-8")

    assert verify_svg(path) == []
