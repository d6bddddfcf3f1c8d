import pytest

from inkwell.rendering.converter import MarkdownConverter


def test_converts_markdown_to_html():
    html = MarkdownConverter().convert("Some *text* and `code`.")

    assert "<em>text</em>" in html
    assert "<code>code</code>" in html


def test_heading_anchors_use_site_slugs():
    html = MarkdownConverter().convert("## Getting Started")

    assert 'id="getting-started"' in html


def test_fenced_code_blocks():
    html = MarkdownConverter().convert("```python\nprint('hi')\n```")

    assert "<code" in html
    assert "print" in html


def test_extension_configs_are_merged():
    converter = MarkdownConverter(extension_configs={"toc": {"permalink": True}})

    assert converter.extension_configs["toc"]["permalink"] is True
    assert "slugify" in converter.extension_configs["toc"]


def test_non_text_body_is_rejected():
    with pytest.raises(TypeError):
        MarkdownConverter().convert(b"bytes")  # type: ignore[arg-type]
