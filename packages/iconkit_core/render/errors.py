"""Error types raised by the icon renderer."""

from __future__ import annotations

from typing import Any


class IconError(RuntimeError):
    def __init__(self, message: str, *, error_code: str) -> None:
        super().__init__(message)
        self.error_code = error_code


class InvalidConfigError(IconError):
    def __init__(
        self,
        message: str,
        *,
        error_code: str = "invalid_config",
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        super().__init__(message, error_code=error_code)
        self.details = details or []
