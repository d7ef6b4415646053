"""Tests for ANSI to HTML conversion."""

from transcript_lens.utils.ansi_html import ansi_to_html, color_256_to_hex


class TestAnsiToHtml:
    def test_plain_text_is_escaped(self):
        assert ansi_to_html('a < b & "c"') == "a &lt; b &amp; &quot;c&quot;"

    def test_foreground_color(self):
        assert ansi_to_html("\x1b[31merror\x1b[0m") == '<span style="color:#ef4444">error</span>'

    def test_bold_and_background(self):
        html = ansi_to_html("\x1b[1;44mhi\x1b[0m")
        assert html == '<span style="background-color:#1e3a5f;font-weight:bold">hi</span>'

    def test_reset_closes_span(self):
        html = ansi_to_html("\x1b[32mok\x1b[0m done")
        assert html.endswith("</span> done")

    def test_unclosed_style_is_closed(self):
        assert ansi_to_html("\x1b[3mitalic") == '<span style="font-style:italic">italic</span>'

    def test_256_color(self):
        html = ansi_to_html("\x1b[38;5;196mred\x1b[0m")
        assert 'color:#ff0000' in html

    def test_cursor_sequences_removed(self):
        assert ansi_to_html("\x1b[2Kprogress") == "progress"

    def test_empty(self):
        assert ansi_to_html("") == ""


class TestColor256:
    def test_base_palette(self):
        assert color_256_to_hex(1) == "#aa0000"

    def test_cube(self):
        assert color_256_to_hex(16) == "#000000"
        assert color_256_to_hex(231) == "#ffffff"

    def test_grayscale(self):
        assert color_256_to_hex(232) == "#080808"
