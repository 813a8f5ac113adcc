"""Unit tests for statement HTML conversion."""

from infrastructure.parsers import DescriptionParser


def test_blank_html_gives_empty_text():
    """Test that blank HTML gives empty text."""
    assert DescriptionParser.to_text("") == ""
    assert DescriptionParser.to_text("   ") == ""


def test_converts_statement_to_plain_text():
    """Test conversion of a problem statement to plain text."""
    html = (
        "<p>Given an array of integers <code>nums</code>&nbsp;and an integer "
        "<code>target</code>.</p>\n"
        "<p><strong>Constraints:</strong></p>\n"
        "<ul><li><code>2 &lt;= nums.length &lt;= 10<sup>4</sup></code></li>"
        "<li>Only one valid answer exists.</li></ul>"
    )

    text = DescriptionParser.to_text(html)

    assert text.startswith("Given an array of integers nums and an integer target.")
    assert "Constraints:" in text
    assert "- 2 <= nums.length <= 10^4" in text
    assert "- Only one valid answer exists." in text
    assert "<" not in text.replace("<=", "")
    assert "\n\n\n" not in text


def test_paragraphs_are_separated_by_blank_lines():
    """Test that block elements become separate paragraphs."""
    text = DescriptionParser.to_text("<p>First.</p><p>Second.</p>")

    assert text == "First.\n\nSecond."


def test_line_breaks_are_kept():
    """Test that br tags become newlines."""
    assert DescriptionParser.to_text("<p>a<br>b</p>") == "a\nb"
