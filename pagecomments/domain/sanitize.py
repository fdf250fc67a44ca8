"""Sanitation helpers for untrusted comment input.

All functions are pure and operate on plain strings.
"""

import html
import re

from email_validator import EmailNotValidError, validate_email

_TAG_RE = re.compile(r"<!--.*?-->|<[^>]*>", re.DOTALL)
_SCHEME_RE = re.compile(r"^https?://")
_JAVASCRIPT_RE = re.compile(r"^\s*javascript:", re.IGNORECASE)


def trim(value: str | None) -> str:
    """Strip surrounding whitespace, treating None as empty."""
    return (value or "").strip()


def strip_tags(value: str) -> str:
    """Remove HTML tags and comments, keeping the text between them."""
    return _TAG_RE.sub("", value)


def escape_html(value: str | None, quote: bool = True) -> str:
    """Entity-encode characters reserved in HTML."""
    return html.escape(value or "", quote=quote)


def normalize_website(value: str | None) -> str | None:
    """Return a website address with a scheme, or None when empty.

    Addresses that do not start with `http://` or `https://` get `http://`
    prepended.
    """
    value = trim(strip_tags(value or ""))
    if not value:
        return None
    if not _SCHEME_RE.match(value):
        return "http://" + value
    return value


def normalize_optional(value: str | None) -> str | None:
    """Strip tags and whitespace; empty results become None."""
    value = trim(strip_tags(value or ""))
    return value or None


def is_javascript_url(value: str) -> bool:
    """Whether the address uses the javascript: scheme."""
    return bool(_JAVASCRIPT_RE.match(value))


def is_valid_email(value: str) -> bool:
    """Syntax-only email check, no DNS lookup."""
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def is_human(submitted: str | None, human_value: str) -> bool:
    """Whether the honeypot holds the value only a human leaves behind."""
    return (submitted if submitted is not None else "") == human_value
