"""
Pydantic model for output options.

ctxcat has no configuration file; the options for a run come from the
command line and are validated here before anything is read.
"""

from typing import Optional
from pydantic import BaseModel, Field, field_validator, ConfigDict

from .exceptions import ConfigurationError


class OutputOptions(BaseModel):
    """Options for one run."""
    model_config = ConfigDict(extra='forbid', frozen=True)

    container_tag: str = Field("code", description="Name of the wrapping tag")
    comment_override: Optional[str] = Field(
        None, description="Comment marker used for every input instead of suffix detection"
    )

    @field_validator('container_tag')
    @classmethod
    def validate_container_tag(cls, v):
        if not v:
            raise ValueError("Container tag must not be empty")
        bad = [c for c in v if c in '<>\r\n']
        if bad:
            raise ValueError(f"Container tag contains invalid character {bad[0]!r}")
        return v

    @field_validator('comment_override')
    @classmethod
    def validate_comment_override(cls, v):
        if v is not None and ('\n' in v or '\r' in v):
            raise ValueError("Comment prefix must not contain a line break")
        return v


def build_options(container_tag: str = "code", comment_override: Optional[str] = None) -> OutputOptions:
    """
    Build validated OutputOptions.

    Raises:
        ConfigurationError: With every validation error in context['errors']
    """
    from pydantic import ValidationError as PydanticValidationError

    try:
        return OutputOptions(container_tag=container_tag, comment_override=comment_override)
    except PydanticValidationError as e:
        errors = []
        for error in e.errors():
            loc = " -> ".join(str(l) for l in error['loc'])
            msg = error['msg']
            errors.append(f"{loc}: {msg}")

        raise ConfigurationError(
            "Invalid output options",
            context={"errors": errors}
        )
