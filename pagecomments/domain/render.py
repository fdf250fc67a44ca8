"""Message rendering pipeline.

    raw text -> HTML escape -> markdown -> typography (optional) -> tag filter

Escaping first means markup typed by the commenter is never interpreted as
HTML; only the markdown converter produces tags, and of those only the
allow-listed ones survive.
"""

import bleach
import markdown

from pagecomments.config import MessageSettings
from pagecomments.domain.sanitize import escape_html


def to_html(text: str, smartypants: bool = False) -> str:
    """Convert markdown to HTML.

    Args:
        text: Markdown source, already HTML-escaped
        smartypants: Also convert straight quotes, dashes and ellipses to
            their typographic equivalents

    Returns:
        HTML fragment
    """
    extensions = ["smarty"] if smartypants else []
    return markdown.markdown(text, extensions=extensions, output_format="html")


def filter_tags(html: str, settings: MessageSettings) -> str:
    """Remove every tag not in the allow-list, keeping its text content."""
    return bleach.clean(
        html,
        tags=set(settings.allowed_tags),
        attributes={tag: list(attrs) for tag, attrs in settings.allowed_attributes.items()},
        protocols=set(settings.allowed_protocols),
        strip=True,
        strip_comments=True,
    )


def render_message(raw: str, settings: MessageSettings) -> str:
    """Render a raw comment message to HTML that is safe to embed in a page."""
    # Quotes are left as-is for the typographic pass. Code spans and blocks
    # receive the escaped text as well, so `<` typed inside backticks shows up
    # as the literal text `&lt;`.
    escaped = escape_html(raw, quote=False)
    html = to_html(escaped, smartypants=settings.smartypants)
    return filter_tags(html, settings).strip()
