from __future__ import annotations

from typing import Optional


class EspnFFError(Exception):
    """Base class for every error raised by espn_ff."""


class ConfigurationError(EspnFFError, RuntimeError):
    """Settings are missing or invalid, or a model cannot be read as configured."""


class MissingParameterError(EspnFFError, ValueError):
    def __init__(self, entity: str, operation: str, field: str) -> None:
        self.entity = entity
        self.operation = operation
        self.field = field
        super().__init__(f"{entity}: {operation}: cannot read without {field}")


class TransportError(EspnFFError):
    def __init__(
        self,
        message: str,
        *,
        url: Optional[str] = None,
        status_code: Optional[int] = None,
    ) -> None:
        self.url = url
        self.status_code = status_code
        super().__init__(message)
