"""Errors raised by errwrap itself when it is misused or misconfigured."""

from __future__ import annotations

from typing import Any, Dict, Protocol


class _EnvelopeProtocol(Protocol):
    code: str
    message: str


class ErrwrapError(Exception):
    """Library error carrying an ``ErrorEnvelope`` with code, source and details."""

    def __init__(self, envelope: _EnvelopeProtocol | Any) -> None:
        super().__init__(str(getattr(envelope, "message", envelope)))
        self.envelope = envelope

    @property
    def code(self) -> str | None:
        return getattr(self.envelope, "code", None)

    @property
    def source(self) -> str | None:
        source = getattr(self.envelope, "source", None)
        return getattr(source, "value", source)

    @property
    def details(self) -> Dict[str, Any]:
        return dict(getattr(self.envelope, "details", None) or {})

    def as_dict(self) -> Dict[str, Any]:
        if hasattr(self.envelope, "model_dump"):
            return self.envelope.model_dump(mode="json")
        return {"message": str(self)}

    def __str__(self) -> str:
        message = getattr(self.envelope, "message", None)
        return message if isinstance(message, str) else repr(self.envelope)


class ConfigurationError(ErrwrapError):
    """A joiner or an environment setting is outside its allowed values."""
