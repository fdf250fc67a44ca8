"""Application configuration."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class HoneypotSettings(BaseModel):
    """Anti-spam honeypot configuration."""

    # When enabled, every submission must carry the honeypot field with the
    # human value. Bots tend to fill in every input they find.
    enabled: bool = True

    # POST key of the hidden honeypot input
    field: str = "subject"

    # The value a human leaves in the honeypot (the input is hidden, so empty)
    human_value: str = ""


class FormFieldNames(BaseModel):
    """POST keys of the comment form inputs.

    Resolved once when settings are loaded. The submission pipeline only ever
    reads the keys declared here.
    """

    name: str = "name"
    email: str = "email"
    website: str = "website"
    message: str = "message"
    preview: str = "preview"


class FieldRule(BaseModel):
    """Required flag and length limit of a single form input."""

    required: bool = False
    max_length: int = Field(default=64, gt=0)


class FormSettings(BaseModel):
    """Comment form configuration."""

    post_keys: FormFieldNames = FormFieldNames()
    name: FieldRule = FieldRule(required=True, max_length=64)
    email: FieldRule = FieldRule(required=False, max_length=64)
    website: FieldRule = FieldRule(required=False, max_length=64)

    # The message is always required, only its length is configurable
    message_max_length: int = Field(default=1024, gt=0)


class MessageSettings(BaseModel):
    """Rendering configuration for comment messages."""

    # Convert straight quotes and dashes to their typographic equivalents
    smartypants: bool = True

    # Tags that survive the final filter; everything else is stripped
    # (text content is kept)
    allowed_tags: list[str] = [
        "p",
        "br",
        "a",
        "em",
        "strong",
        "code",
        "pre",
        "blockquote",
        "ul",
        "ol",
        "li",
    ]
    allowed_attributes: dict[str, list[str]] = {"a": ["href", "title"]}
    allowed_protocols: list[str] = ["http", "https", "mailto"]

    @field_validator("allowed_tags")
    @classmethod
    def normalize_tags(cls, v: list[str]) -> list[str]:
        """Accept both `b` and `<b>` spellings."""
        return [tag.strip().strip("<>/").lower() for tag in v if tag.strip()]


class CustomFieldSettings(BaseModel):
    """A custom comment field registered by configuration."""

    name: str = Field(min_length=1)
    title: str | None = None
    http_post_name: str | None = None
    required: bool = False


class CommentSettings(BaseModel):
    """Everything the submission pipeline and renderer need to know."""

    honeypot: HoneypotSettings = HoneypotSettings()
    form: FormSettings = FormSettings()
    message: MessageSettings = MessageSettings()


class StorageSettings(BaseModel):
    """Comment storage configuration."""

    # Directory holding one JSON file per content page
    directory: Path = Path("data/comments")


class ObservabilitySettings(BaseModel):
    """Observability configuration for Logfire."""

    # Logfire API token (optional - if not set, logs only go to console)
    # Can be set via OBSERVABILITY__LOGFIRE_TOKEN env var
    logfire_token: str | None = None

    # Whether to send telemetry to Logfire cloud
    # If None, will auto-determine: sends if token is present, otherwise console-only
    send_to_logfire: bool | None = None


class Settings(BaseSettings):
    """Application settings.

    Values come from the environment or a `.env` file. Nested sections use
    the `__` delimiter, for example:

        COMMENTS__HONEYPOT__ENABLED=false
        COMMENTS__FORM__NAME__MAX_LENGTH=128
        COMMENTS__MESSAGE__SMARTYPANTS=false
        STORAGE__DIRECTORY=/var/lib/comments
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
    )

    environment: Literal["test", "development", "staging", "production"] = "development"
    debug: bool = False

    # Nested settings
    comments: CommentSettings = CommentSettings()
    custom_fields: list[CustomFieldSettings] = []
    storage: StorageSettings = StorageSettings()
    observability: ObservabilitySettings = ObservabilitySettings()

    @model_validator(mode="after")
    def check_custom_field_names(self) -> "Settings":
        """Reject custom fields that share a name or collide with form inputs."""
        names = [field.name for field in self.custom_fields]
        duplicates = {name for name in names if names.count(name) > 1}
        if duplicates:
            raise ValueError(f"Duplicate custom field names: {sorted(duplicates)}")

        reserved = set(self.comments.form.post_keys.model_dump().values())
        reserved.add(self.comments.honeypot.field)
        for field in self.custom_fields:
            post_name = field.http_post_name or field.name
            if post_name in reserved:
                raise ValueError(
                    f"Custom field '{field.name}' uses reserved POST key '{post_name}'"
                )
        return self
