import logging
from typing import Optional, Tuple, Union

from errwrap.config import settings
from errwrap.errors import ConfigurationError
from errwrap.wrapper.interface import ErrorWrapper
from errwrap.wrapper.models import ErrorEnvelope, ErrorKind, ErrorSource, WrapperConfig
from errwrap.wrapper.values import RawError, WrappedError, kind_of

logger = logging.getLogger(__name__)

JoinerLike = Union[str, bytes, int, None]


def _invalid_joiner(joiner: object) -> ConfigurationError:
    return ConfigurationError(
        ErrorEnvelope(
            code="WRAPPER_INVALID_JOINER",
            message=f"Joiner must be a single character or byte value, got {joiner!r}.",
            source=ErrorSource.WRAPPER,
            details={"joiner": repr(joiner)},
        )
    )


def coerce_joiner(joiner: JoinerLike) -> str:
    """Normalize a joiner argument; the zero value selects the default joiner."""
    if isinstance(joiner, bytes):
        if len(joiner) > 1:
            raise _invalid_joiner(joiner)
        joiner = joiner.decode("latin-1")
    if joiner is None or joiner == 0 or joiner == "" or joiner == "\0":
        return settings.default_joiner
    if isinstance(joiner, bool):
        raise _invalid_joiner(joiner)
    if isinstance(joiner, int):
        if not 0 < joiner < 256:
            raise _invalid_joiner(joiner)
        return chr(joiner)
    if isinstance(joiner, str) and len(joiner) == 1:
        return joiner
    raise _invalid_joiner(joiner)


def join_prefixes(left: str, right: str, joiner: str) -> str:
    if left and right:
        return f"{left}{joiner}{right}"
    return left or right


def flatten(err: Optional[BaseException], joiner: str) -> Tuple[str, Optional[BaseException]]:
    """
    Collapse a chain of WrappedErrors.

    Returns the prefixes of every WrappedError reached by unwrapping, joined
    outer-to-inner with *joiner*, and the first value that is not a
    WrappedError (possibly None). Empty prefixes are skipped, not terminal.
    """
    segments = []
    current = err
    while kind_of(current) is ErrorKind.WRAPPED:
        if current.prefix:  # type: ignore[union-attr]
            segments.append(current.prefix)  # type: ignore[union-attr]
        current = current.inner  # type: ignore[union-attr]
    return joiner.join(segments), current


class PrefixWrapper(ErrorWrapper):
    """Wraps errors under a fixed prefix, merging prefixes of nested wrappers."""

    def __init__(self, config: WrapperConfig) -> None:
        self._config = config

    @classmethod
    def create(cls, joiner: JoinerLike = None, prefix: Optional[str] = None) -> "PrefixWrapper":
        return cls(WrapperConfig(joiner=coerce_joiner(joiner), prefix=prefix or ""))

    @property
    def config(self) -> WrapperConfig:
        return self._config

    @property
    def prefix(self) -> str:
        return self._config.prefix

    @property
    def joiner(self) -> str:
        return self._config.joiner

    def wrap_error(self, err: Optional[BaseException], message: Optional[str] = None) -> Optional[BaseException]:
        """
        Wrap *err* under this wrapper's prefix.

        A WrappedError is flattened into a single node whose prefix combines
        every prefix in its chain; its annotation is replaced by *message*.
        Returns None when *err* is None.
        """
        if err is None:
            return None
        if kind_of(err) is ErrorKind.WRAPPED:
            inner_prefix, terminal = flatten(err, self.joiner)
            prefix = join_prefixes(self.prefix, inner_prefix, self.joiner)
            logger.debug("Merged prefix %r over %r into %r", self.prefix, inner_prefix, prefix)
            return WrappedError(prefix=prefix, message=message, inner=terminal, joiner=self.joiner)
        return WrappedError(prefix=self.prefix, message=message, inner=err, joiner=self.joiner)

    def wrap_string(self, text: str, message: Optional[str] = None) -> Optional[BaseException]:
        """Wrap a new RawError built from *text*; returns None for empty text."""
        if not text:
            return None
        return WrappedError(prefix=self.prefix, message=message, inner=RawError(text), joiner=self.joiner)

    def __repr__(self) -> str:
        return f"PrefixWrapper(joiner={self.joiner!r}, prefix={self.prefix!r})"


def new(joiner: JoinerLike = None, prefix: Optional[str] = None) -> PrefixWrapper:
    """Create a PrefixWrapper; see PrefixWrapper.create."""
    return PrefixWrapper.create(joiner, prefix)
