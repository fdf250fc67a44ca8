"""Strongly typed identifiers for comment domain entities."""

from typing import NewType

# Per-page comment id, starts at 1 and is assigned by storage
CommentId = NewType("CommentId", int)

# Storage key of a content page (for example its URI)
PageId = NewType("PageId", str)
