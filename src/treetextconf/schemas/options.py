"""Parser limit options."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from treetextconf.config import TREETEXTCONF_MAX_DEPTH, TREETEXTCONF_MAX_SIZE
from treetextconf.exceptions import InvalidOptionError


class ParserOptions(BaseModel):
    """Immutable limits applied while parsing.

    Attributes:
        max_depth: Deepest allowed group nesting, root being depth 0.
            Reaching the limit is allowed, going past it is an error.
            ``None`` disables the check.
        max_size: Number of consumed bytes at which parsing is aborted.
            ``None`` disables the check.
    """

    model_config = ConfigDict(frozen=True)

    max_depth: int | None = None
    max_size: int | None = None

    @field_validator("max_depth")
    @classmethod
    def _check_depth(cls, value: int | None) -> int | None:
        if value is not None and value <= 0:
            raise ValueError("Height limit must be greater than 0.")
        return value

    @field_validator("max_size")
    @classmethod
    def _check_size(cls, value: int | None) -> int | None:
        if value is not None and value <= 0:
            raise ValueError("Size limit must be greater than 0.")
        return value

    @classmethod
    def build(cls, *, max_depth: int | None = None, max_size: int | None = None) -> ParserOptions:
        """Validate limits, raising InvalidOptionError instead of a pydantic error."""
        try:
            return cls(max_depth=max_depth, max_size=max_size)
        except ValidationError as exc:
            first = exc.errors()[0]
            reason = first.get("ctx", {}).get("error", first["msg"])
            raise InvalidOptionError(str(reason)) from exc

    @classmethod
    def from_env(cls) -> ParserOptions:
        """Limits taken from the TREETEXTCONF_MAX_* environment variables."""
        return cls.build(max_depth=TREETEXTCONF_MAX_DEPTH, max_size=TREETEXTCONF_MAX_SIZE)

    def merged(self, *, max_depth: int | None = None, max_size: int | None = None) -> ParserOptions:
        """Copy of these options with the given non-None limits replaced."""
        return ParserOptions.build(
            max_depth=self.max_depth if max_depth is None else max_depth,
            max_size=self.max_size if max_size is None else max_size,
        )
