from __future__ import annotations

import pickle

import pytest

from errwrap.wrapper.models import ErrorKind
from errwrap.wrapper.values import RawError, WrappedError, kind_of


@pytest.mark.unit
def test_raw_error_renders_its_text():
    err = RawError("disk full")
    assert err.render() == "disk full"
    assert str(err) == "disk full"
    assert err.unwrap() is None
    assert repr(err) == "RawError('disk full')"


@pytest.mark.unit
@pytest.mark.parametrize(
    "prefix, message, inner, expected",
    [
        ("svc", "io", RawError("disk full"), "svc: [io] disk full"),
        ("svc", None, RawError("disk full"), "svc: disk full"),
        ("", "io", RawError("disk full"), "[io] disk full"),
        ("", None, RawError("disk full"), "disk full"),
        ("svc", "io", None, "svc: [io]"),
        ("svc", None, None, "svc: "),
        ("", None, None, ""),
        ("svc", "", RawError("disk full"), "svc: disk full"),
    ],
)
def test_wrapped_error_render_sections(prefix, message, inner, expected):
    err = WrappedError(prefix=prefix, message=message, inner=inner)
    assert err.render() == expected
    assert str(err) == expected


@pytest.mark.unit
def test_foreign_inner_uses_str():
    err = WrappedError(prefix="db", message="connect", inner=ConnectionError("refused"))
    assert err.render() == "db: [connect] refused"


@pytest.mark.unit
def test_render_is_idempotent():
    err = WrappedError("svc", "io", RawError("disk full"))
    assert err.render() == err.render()


@pytest.mark.unit
def test_unwrap_returns_inner_exactly():
    inner = KeyError("k")
    err = WrappedError("svc", None, inner)
    assert err.unwrap() is inner
    assert err.inner is inner


@pytest.mark.unit
def test_fields_are_read_only():
    err = WrappedError("svc", "io", RawError("x"))
    with pytest.raises(AttributeError):
        err.prefix = "other"  # type: ignore[misc]
    with pytest.raises(AttributeError):
        err.message = "other"  # type: ignore[misc]
    with pytest.raises(AttributeError):
        RawError("x").text = "y"  # type: ignore[misc]


@pytest.mark.unit
def test_wrapped_error_can_be_raised_and_keeps_cause():
    inner = RawError("disk full")
    with pytest.raises(WrappedError) as ei:
        raise WrappedError("svc", "io", inner)
    assert ei.value.__cause__ is inner
    assert str(ei.value) == "svc: [io] disk full"


@pytest.mark.unit
def test_kind_of_classifies_values():
    assert kind_of(None) is None
    assert kind_of(RawError("x")) is ErrorKind.RAW
    assert kind_of(WrappedError("p")) is ErrorKind.WRAPPED
    assert kind_of(ValueError("x")) is ErrorKind.FOREIGN


@pytest.mark.unit
def test_values_survive_pickling():
    err = WrappedError("svc", "io", RawError("disk full"), "/")
    restored = pickle.loads(pickle.dumps(err))
    assert restored.render() == "svc: [io] disk full"
    assert restored.joiner == "/"
