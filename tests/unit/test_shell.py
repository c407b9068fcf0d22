import pytest

from logln.outcomes import Fatal, Ok, Recoverable, Unrecoverable
from logln.shell import PanicError, resolve


def test_resolve_passes_through_ok_and_recoverable() -> None:
    assert resolve(Ok()) == Ok()
    assert resolve(Recoverable(2, "x")) == Recoverable(2, "x")


def test_resolve_fatal_exits_with_status_one() -> None:
    with pytest.raises(SystemExit) as exc_info:
        resolve(Fatal("bye"))

    assert exc_info.value.code == 1


def test_resolve_unrecoverable_raises_panic() -> None:
    with pytest.raises(PanicError) as exc_info:
        resolve(Unrecoverable("Panic m: false"))

    assert str(exc_info.value) == "Panic m: false"
    assert exc_info.value.message == "Panic m: false"
    assert isinstance(exc_info.value, RuntimeError)
