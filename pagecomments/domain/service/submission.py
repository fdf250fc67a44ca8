"""Comment submission validation."""

from collections.abc import Mapping
from datetime import datetime
from typing import Any

import logfire

from pagecomments.config import CommentSettings
from pagecomments.domain import sanitize
from pagecomments.domain.error import (
    CommentValidationError,
    EmptyMessageError,
    FieldTooLongError,
    InvalidEmailError,
    InvalidIdError,
    MessageTooLongError,
    RequiredFieldMissingError,
    SpamSuspectedError,
    UnsafeWebsiteError,
)
from pagecomments.domain.model import Comment, CustomField
from pagecomments.domain.value import CommentId, FieldTypeRegistry

from .base import Service


class SubmissionValidator(Service):
    """Turns a raw form submission into a `Comment`.

    Rules run in a fixed order and the first failing rule wins. The order is
    part of the contract: callers re-display the form with exactly one
    complaint, and which one they see must not change between releases.

        1. honeypot (before any other input is read)
        2. custom fields, in registration order
        3. comment id
        4. name: required, length
        5. email: required, syntax, length
        6. website: javascript: scheme, length
        7. message: empty, length
    """

    def __init__(self, settings: CommentSettings, registry: FieldTypeRegistry) -> None:
        """Initialize submission validator.

        Args:
            settings: Form, honeypot and message configuration
            registry: Registered custom field types
        """
        self.settings = settings
        self.registry = registry

    def validate(
        self,
        submission: Mapping[str, str],
        *,
        comment_id: Any,
        posted_at: datetime,
        content_page: Any = None,
    ) -> Comment:
        """Validate a submission and build the comment.

        Args:
            submission: Submitted form values, keyed by POST name
            comment_id: Id assigned by storage (must be a positive int)
            posted_at: Point in time of the submission
            content_page: Page the comment is posted on (passed through)

        Returns:
            The validated comment

        Raises:
            CommentValidationError: The first rule the submission violates
        """
        with logfire.span(
            "submission.validate",
            comment_id=str(comment_id),
            custom_field_count=len(self.registry),
        ):
            try:
                comment = self._validate(
                    submission,
                    comment_id=comment_id,
                    posted_at=posted_at,
                    content_page=content_page,
                )
            except CommentValidationError as e:
                logfire.warn(
                    "Comment submission rejected",
                    code=e.code,
                    error=type(e).__name__,
                    field=getattr(e, "field", None),
                )
                raise

            logfire.debug(
                "Comment submission accepted",
                comment_id=comment.id,
                is_preview=comment.is_preview,
            )
            return comment

    def _validate(
        self,
        submission: Mapping[str, str],
        *,
        comment_id: Any,
        posted_at: datetime,
        content_page: Any,
    ) -> Comment:
        form = self.settings.form
        honeypot = self.settings.honeypot

        if honeypot.enabled and not sanitize.is_human(
            submission.get(honeypot.field), honeypot.human_value
        ):
            raise SpamSuspectedError()

        keys = form.post_keys
        name = sanitize.trim(submission.get(keys.name))
        email = sanitize.trim(submission.get(keys.email))
        website = sanitize.trim(submission.get(keys.website))
        message = sanitize.trim(submission.get(keys.message))
        is_preview = keys.preview in submission

        custom_fields = {
            field_type.name: CustomField.from_submission(
                field_type, submission.get(field_type.http_post_name), content_page
            )
            for field_type in self.registry
        }

        if isinstance(comment_id, bool) or not isinstance(comment_id, int):
            raise InvalidIdError(comment_id)
        if comment_id <= 0:
            raise InvalidIdError(comment_id)

        if form.name.required and name == "":
            raise RequiredFieldMissingError("name")
        if len(name) > form.name.max_length:
            raise FieldTooLongError("name", form.name.max_length)

        if form.email.required and email == "":
            raise RequiredFieldMissingError("email")
        if email != "" and not sanitize.is_valid_email(email):
            raise InvalidEmailError(email)
        if len(email) > form.email.max_length:
            raise FieldTooLongError("email", form.email.max_length)

        if sanitize.is_javascript_url(website):
            raise UnsafeWebsiteError()
        if len(website) > form.website.max_length:
            raise FieldTooLongError("website", form.website.max_length)

        if message == "":
            raise EmptyMessageError()
        if len(message) > form.message_max_length:
            raise MessageTooLongError(form.message_max_length)

        return Comment(
            id=CommentId(comment_id),
            author_name=name,
            author_email=email,
            author_website=website,
            text=message,
            custom_fields=custom_fields,
            posted_at=posted_at,
            is_preview=is_preview,
            content_page=content_page,
        )
