"""
Configuration models for parsing and encoding command notation.
"""

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_MAX_DEPTH = 64
# Builder and encoder recurse once per level, so stay well under the interpreter limit
MAX_ALLOWED_DEPTH = 256


class ParserConfig(BaseModel):
    """Settings applied by CommandParser."""

    model_config = ConfigDict(frozen=True)

    max_depth: int = Field(
        default=DEFAULT_MAX_DEPTH,
        ge=1,
        le=MAX_ALLOWED_DEPTH,
        description="Maximum brace nesting depth before parsing is aborted",
    )


class EncoderConfig(BaseModel):
    """Settings applied when rendering commands back to text."""

    model_config = ConfigDict(frozen=True)

    encode_rn: bool = Field(
        default=True,
        description="Escape carriage returns and newlines inside quoted values",
    )
    fancy: bool = Field(
        default=True,
        description="Render nested blocks as indented multi-line text",
    )
