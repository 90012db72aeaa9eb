"""Domain exceptions for update payloads and CLI diagnostics."""

from __future__ import annotations


class StageError(RuntimeError):
    """Raised when a specific service stage fails."""

    def __init__(
        self,
        *,
        stage: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize a stage-scoped error."""

        super().__init__(detail)
        self.stage = stage
        self.detail = detail
        self.hint = hint


class ContactPayloadError(ValueError):
    """Raised when a record cannot be turned into a valid update payload."""

    def __init__(self, *, field: str, detail: str) -> None:
        """Initialize a payload validation error for one record field."""

        super().__init__(detail)
        self.field = field
        self.detail = detail
