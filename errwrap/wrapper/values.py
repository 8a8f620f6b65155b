"""Error values produced by wrapper factories.

Two kinds of value exist: ``RawError`` is a leaf created from a plain string,
``WrappedError`` is a composite holding a prefix, an optional one-shot
annotation, a joiner and the error it wraps. Anything else found in a chain is
a foreign exception. All of them are ordinary ``Exception`` instances so they
can be raised, caught and logged without adapters.
"""

from __future__ import annotations

from typing import List, Optional

from errwrap.wrapper.models import DEFAULT_JOINER, MESSAGE_SEPARATOR, ErrorKind


class RawError(Exception):
    """Leaf error holding only a message text."""

    def __init__(self, text: str) -> None:
        super().__init__(text)
        self._text = text

    @property
    def text(self) -> str:
        return self._text

    def render(self) -> str:
        return self._text

    def unwrap(self) -> None:
        return None

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"RawError({self._text!r})"


class WrappedError(Exception):
    """Composite error: ``prefix: [message] inner``."""

    def __init__(
        self,
        prefix: str = "",
        message: Optional[str] = None,
        inner: Optional[BaseException] = None,
        joiner: str = DEFAULT_JOINER,
    ) -> None:
        super().__init__(prefix, message, inner, joiner)
        self._prefix = prefix or ""
        self._message = message or None
        self._inner = inner
        self._joiner = joiner
        # Lets standard tracebacks print the wrapped exception.
        if inner is not None:
            self.__cause__ = inner

    @property
    def prefix(self) -> str:
        return self._prefix

    @property
    def message(self) -> Optional[str]:
        return self._message

    @property
    def inner(self) -> Optional[BaseException]:
        return self._inner

    @property
    def joiner(self) -> str:
        return self._joiner

    def render(self) -> str:
        parts: List[str] = []
        if self._prefix:
            parts.append(self._prefix)
            parts.append(MESSAGE_SEPARATOR)
        if self._message:
            parts.append(f"[{self._message}]")
        if self._inner is not None:
            if self._message:
                parts.append(" ")
            parts.append(display(self._inner))
        return "".join(parts)

    def unwrap(self) -> Optional[BaseException]:
        """Return the wrapped error, one level only."""
        return self._inner

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return (
            f"WrappedError(prefix={self._prefix!r}, message={self._message!r}, "
            f"inner={self._inner!r}, joiner={self._joiner!r})"
        )


def kind_of(err: Optional[BaseException]) -> Optional[ErrorKind]:
    """Classify a chain value; ``None`` has no kind."""
    if err is None:
        return None
    if isinstance(err, WrappedError):
        return ErrorKind.WRAPPED
    if isinstance(err, RawError):
        return ErrorKind.RAW
    return ErrorKind.FOREIGN


def display(err: BaseException) -> str:
    if kind_of(err) is ErrorKind.FOREIGN:
        return str(err)
    return err.render()  # type: ignore[attr-defined]
