"""Domain layer errors."""

from typing import ClassVar


class DomainError(Exception):
    """Base domain error."""

    pass


class CommentValidationError(DomainError):
    """A comment submission was rejected.

    Every rejection carries a stable numeric `code` (kept for compatibility
    with existing form templates that switch on it) and a human-readable
    message. Structured details such as the offending field or the configured
    limit are available as attributes so callers can localize the message.
    """

    code: ClassVar[int]

    def __init__(self, message: str, code: int | None = None):
        if code is not None:
            self.code = code
        super().__init__(message)

    @property
    def message(self) -> str:
        """Human-readable description of the rejection."""
        return str(self)


class SpamSuspectedError(CommentValidationError):
    """The honeypot field did not hold the value a human would leave."""

    code = 310

    def __init__(self):
        super().__init__("Comment must be written by a human being.")


class RequiredFieldMissingError(CommentValidationError):
    """A required input was absent or empty."""

    code = 312

    _CODES: ClassVar[dict[str, int]] = {"name": 301, "email": 303}
    _LABELS: ClassVar[dict[str, str]] = {
        "name": "name",
        "email": "email address",
    }

    def __init__(self, field: str, custom: bool = False):
        """
        Args:
            field: Built-in field name, or the title of a custom field
            custom: Whether `field` names a registered custom field
        """
        self.field = field
        self.custom = custom
        if custom:
            super().__init__(f"The {field} field is required.")
        else:
            label = self._LABELS.get(field, field)
            super().__init__(
                f"The {label} field is required.", self._CODES.get(field)
            )


class InvalidIdError(CommentValidationError):
    """The assigned comment id is not a positive integer."""

    code = 101

    def __init__(self, comment_id: object):
        self.comment_id = comment_id
        if isinstance(comment_id, bool) or not isinstance(comment_id, int):
            super().__init__(
                "The ID of a comment must be of the type integer.", code=100
            )
        else:
            super().__init__("The ID of a comment must be bigger than 0.")


class FieldTooLongError(CommentValidationError):
    """An author field exceeds its configured maximum length."""

    code = 302

    _CODES: ClassVar[dict[str, int]] = {"name": 302, "email": 305, "website": 307}
    _LABELS: ClassVar[dict[str, str]] = {
        "name": "name",
        "email": "email address",
        "website": "website address",
    }

    def __init__(self, field: str, limit: int):
        self.field = field
        self.limit = limit
        label = self._LABELS.get(field, field)
        super().__init__(
            f"The {label} is too long. (A maximum of {limit} characters is allowed.)",
            self._CODES.get(field),
        )


class InvalidEmailError(CommentValidationError):
    """The email address is not syntactically valid."""

    code = 304

    def __init__(self, email: str):
        self.email = email
        super().__init__("The email address is not valid.")


class UnsafeWebsiteError(CommentValidationError):
    """The website address uses the javascript: scheme."""

    code = 306

    def __init__(self):
        super().__init__("The website address may not contain JavaScript code.")


class EmptyMessageError(CommentValidationError):
    """The message is empty after trimming."""

    code = 308

    def __init__(self):
        super().__init__("The message must not be empty.")


class MessageTooLongError(CommentValidationError):
    """The message exceeds the configured maximum length."""

    code = 309

    def __init__(self, limit: int):
        self.limit = limit
        super().__init__(
            f"The message is too long. (A maximum of {limit} characters is allowed.)"
        )


class InvalidOperationError(DomainError):
    """Raised when an operation violates an aggregate's lifecycle rules."""

    def __init__(self, message: str):
        super().__init__(message)


class DuplicateCommentError(DomainError):
    """Raised when a comment id is already taken on a content page."""

    def __init__(self, page_id: str, comment_id: int):
        self.page_id = page_id
        self.comment_id = comment_id
        super().__init__(f"Comment {comment_id} already exists on page {page_id}")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")
