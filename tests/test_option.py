"""Tests for the Option containers."""

import pytest

import pyresult as pr


@pytest.mark.parametrize("value", [42, "text", 0, "", None, False, [], 0.0])
def test_some_is_present(value: object) -> None:
    """Falsy payloads are still present."""
    opt = pr.Some(value)
    assert opt.is_some()
    assert not opt.is_none()
    assert opt.unwrap() is value


def test_none_is_absent() -> None:  # noqa: D103
    assert not pr.NONE.is_some()
    assert pr.NONE.is_none()


def test_none_unwrap_raises() -> None:  # noqa: D103
    with pytest.raises(pr.OptionUnwrapError, match="called `unwrap` on a `None`"):
        pr.NONE.unwrap()


def test_unwrap_error_is_runtime_error() -> None:
    """Contract violations share one base class."""
    with pytest.raises(pr.UnwrapError) as exc_info:
        pr.NONE.unwrap()
    assert exc_info.value.payload is None
    assert issubclass(pr.OptionUnwrapError, RuntimeError)


def test_unwrap_or() -> None:  # noqa: D103
    fallback = object()
    assert pr.Some(3).unwrap_or(7) == 3
    assert pr.Some(None).unwrap_or(7) is None
    assert pr.NONE.unwrap_or(fallback) is fallback


def test_expect() -> None:  # noqa: D103
    assert pr.Some("value").expect("fruits are healthy") == "value"
    with pytest.raises(
        pr.OptionUnwrapError,
        match=r"fruits are healthy \(called `expect` on a `None`\)",
    ):
        pr.NONE.expect("fruits are healthy")


def test_fresh_none_behaves_like_singleton() -> None:  # noqa: D103
    fresh = pr.NoneOption()
    assert fresh.is_none()
    assert fresh.unwrap_or(1) == 1
    assert repr(fresh) == "NONE"


def test_repr() -> None:  # noqa: D103
    assert repr(pr.Some(42)) == "Some(value=42)"
    assert repr(pr.NONE) == "NONE"


def test_queries_are_stable() -> None:
    """Repeated queries never change the answer."""
    opt = pr.Some(1)
    assert [opt.is_some() for _ in range(3)] == [True, True, True]
    assert [pr.NONE.is_none() for _ in range(3)] == [True, True, True]
    assert opt.unwrap() == opt.unwrap()


def test_immutable() -> None:  # noqa: D103
    opt = pr.Some(1)
    with pytest.raises(AttributeError):
        opt.value = 2  # type: ignore[misc]
    assert opt.unwrap() == 1


def test_identity_equality() -> None:
    """Containers compare by identity only."""
    opt = pr.Some(1)
    assert opt == opt  # noqa: PLR0124
    assert pr.Some(1) != pr.Some(1)
    assert pr.NONE == pr.NONE  # noqa: PLR0124


def test_option_cannot_be_instantiated() -> None:  # noqa: D103
    with pytest.raises(TypeError):
        pr.Option()  # type: ignore[abstract]
