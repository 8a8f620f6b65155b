from typing import Optional

from errwrap.wrapper.models import ErrorKind, ErrorReport
from errwrap.wrapper.values import display, kind_of


def describe(err: Optional[BaseException]) -> Optional[ErrorReport]:
    """Build a serializable snapshot of *err* and the chain below it."""
    if err is None:
        return None
    kind = kind_of(err)
    if kind is ErrorKind.WRAPPED:
        return ErrorReport(
            kind=kind,
            text=display(err),
            type_name=type(err).__name__,
            prefix=err.prefix,  # type: ignore[attr-defined]
            message=err.message,  # type: ignore[attr-defined]
            joiner=err.joiner,  # type: ignore[attr-defined]
            inner=describe(err.inner),  # type: ignore[attr-defined]
        )
    return ErrorReport(kind=kind, text=display(err), type_name=type(err).__name__)
