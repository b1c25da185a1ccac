"""
Tests for message rendering.
"""
from app.client.render import (
    EMPTY_STATE_TITLE,
    THINKING_LABEL,
    render_conversation,
    render_markdown,
    render_message,
    render_text,
)
from app.client.store import new_message
from app.models.chat import MessageFormat


class TestMarkdown:

    def test_bold(self):
        assert "<strong>bold</strong>" in render_markdown("**bold**")

    def test_fenced_code_is_literal(self):
        out = render_markdown("```python\na **b** c\n```")
        assert '<code class="language-python">' in out
        assert "a **b** c" in out
        assert "<strong>" not in out

    def test_table(self):
        out = render_markdown("| a | b |\n|---|---|\n| 1 | 2 |")
        assert "<table>" in out
        assert "<td>1</td>" in out

    def test_strikethrough(self):
        assert "<s>gone</s>" in render_markdown("~~gone~~")

    def test_autolink(self):
        out = render_markdown("see https://example.com today")
        assert 'href="https://example.com"' in out

    def test_links_open_without_opener(self):
        out = render_markdown("[Example](https://example.com)")
        assert 'target="_blank"' in out
        assert 'rel="noopener noreferrer"' in out

    def test_raw_html_escaped(self):
        out = render_markdown("<script>alert(1)</script>")
        assert "<script>" not in out


class TestText:

    def test_text_not_interpreted(self):
        out = render_text("**bold**\n  indented")
        assert "<strong>" not in out
        assert "**bold**\n  indented" in out
        assert "white-space: pre-wrap" in out

    def test_text_escaped(self):
        assert "&lt;b&gt;" in render_text("<b>")


class TestMessages:

    def test_user_message_rendered_as_text(self):
        msg = new_message("# not a heading", is_user=True, fmt=MessageFormat.TEXT)
        out = render_message(msg)
        assert "message-user" in out
        assert "<h1>" not in out

    def test_bot_message_rendered_as_markdown(self):
        msg = new_message("# Heading", is_user=False, fmt=MessageFormat.MARKDOWN)
        out = render_message(msg)
        assert "message-bot" in out
        assert "<h1>Heading</h1>" in out

    def test_empty_conversation(self):
        assert EMPTY_STATE_TITLE in render_conversation([])

    def test_thinking_indicator(self):
        msg = new_message("hi", is_user=True, fmt=MessageFormat.TEXT)
        out = render_conversation([msg], awaiting_response=True)
        assert THINKING_LABEL in out
        assert EMPTY_STATE_TITLE not in out
        assert THINKING_LABEL not in render_conversation([msg])
