import io
import unittest

from svgdoc.escape import escape_text, format_number, write_attr, write_escaped


class EscapeTextTest(unittest.TestCase):
    def test_reserved_characters_are_replaced(self) -> None:
        self.assertEqual(
            escape_text("<a href=\"x\">Tom & Jerry's</a>"),
            "&lt;a href=&quot;x&quot;&gt;Tom &amp; Jerry&apos;s&lt;/a&gt;",
        )

    def test_empty_input(self) -> None:
        self.assertEqual(escape_text(""), "")

    def test_plain_and_non_ascii_text_is_unchanged(self) -> None:
        self.assertEqual(escape_text("Привет, мир 42"), "Привет, мир 42")

    def test_existing_entities_are_escaped_again(self) -> None:
        self.assertEqual(escape_text("&amp;"), "&amp;amp;")

    def test_no_bare_reserved_characters_remain(self) -> None:
        encoded = escape_text("&<>\"'" * 3 + "x&y")
        for entity in ("&amp;", "&lt;", "&gt;", "&quot;", "&apos;"):
            encoded = encoded.replace(entity, "")
        for ch in "&<>\"'":
            self.assertNotIn(ch, encoded)

    def test_streaming_writer_matches_buffered_result(self) -> None:
        for sample in ["", "plain", "5 > 3 & true", "'quoted'", "&&&", "a<b>c"]:
            out = io.StringIO()
            write_escaped(out, sample)
            self.assertEqual(out.getvalue(), escape_text(sample))


class FormatNumberTest(unittest.TestCase):
    def test_whole_floats_drop_the_fraction(self) -> None:
        self.assertEqual(format_number(40.0), "40")
        self.assertEqual(format_number(-3.0), "-3")

    def test_six_significant_digits(self) -> None:
        self.assertEqual(format_number(0.5), "0.5")
        self.assertEqual(format_number(59.51056516295153), "59.5106")
        self.assertEqual(format_number(1e-5), "1e-05")

    def test_integers_and_nan(self) -> None:
        self.assertEqual(format_number(12), "12")
        self.assertEqual(format_number(float("nan")), "nan")

    def test_write_attr_escapes_values(self) -> None:
        out = io.StringIO()
        write_attr(out, "font-family", 'A "B" & C')
        self.assertEqual(out.getvalue(), ' font-family="A &quot;B&quot; &amp; C"')


if __name__ == "__main__":
    unittest.main()
