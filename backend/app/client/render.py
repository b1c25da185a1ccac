"""
HTML rendering for chat messages.

Markdown messages go through markdown-it-py with tables, strikethrough and
autolinks enabled. Plain-text messages are escaped and shown verbatim.
"""
import html
from datetime import datetime
from typing import Iterable

from markdown_it import MarkdownIt

from app.models.chat import Message, MessageFormat

EMPTY_STATE_TITLE = "Start a new conversation"
EMPTY_STATE_SUBTITLE = "Ask anything to get started"
THINKING_LABEL = "Thinking..."


def _render_link_open(self, tokens, idx, options, env):
    # Links open in a new tab without access to this page.
    tokens[idx].attrSet("target", "_blank")
    tokens[idx].attrSet("rel", "noopener noreferrer")
    return self.renderToken(tokens, idx, options, env)


def build_markdown() -> MarkdownIt:
    md = MarkdownIt("commonmark", {"html": False, "linkify": True})
    md.enable(["table", "strikethrough", "linkify"])
    md.add_render_rule("link_open", _render_link_open)
    return md


_markdown = build_markdown()


def render_markdown(source: str) -> str:
    return _markdown.render(source)


def render_text(source: str) -> str:
    return (
        '<div class="message-text" style="white-space: pre-wrap">'
        f"{html.escape(source)}</div>"
    )


def format_time(timestamp: int) -> str:
    """Local time of day for an epoch-millis timestamp."""
    return datetime.fromtimestamp(timestamp / 1000).strftime("%X")


def render_message(message: Message) -> str:
    if message.format == MessageFormat.MARKDOWN:
        body = f'<div class="message-markdown">{render_markdown(message.content)}</div>'
    else:
        body = render_text(message.content)

    role = "user" if message.is_user else "bot"
    return (
        f'<div class="message message-{role}" data-id="{html.escape(message.id)}">'
        f"{body}"
        f'<time class="message-time">{format_time(message.timestamp)}</time>'
        "</div>"
    )


def render_conversation(messages: Iterable[Message], awaiting_response: bool = False) -> str:
    """Message list markup, with the empty state and loading indicator."""
    parts = [render_message(m) for m in messages]
    if not parts:
        parts.append(
            '<div class="empty-state">'
            f"<h2>{EMPTY_STATE_TITLE}</h2>"
            f"<p>{EMPTY_STATE_SUBTITLE}</p>"
            "</div>"
        )
    if awaiting_response:
        parts.append(f'<div class="message message-bot thinking">{THINKING_LABEL}</div>')
    return '<div class="messages">' + "".join(parts) + "</div>"
