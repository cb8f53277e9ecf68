"""Tests for the shared display configuration."""

from collections.abc import Iterator

import pytest

import pyresult as pr


@pytest.fixture
def short_payloads() -> Iterator[pr.Config]:
    """Shrink payload rendering for the duration of a test."""
    config = pr.get_config()
    previous = config.max_payload_length
    config.max_payload_length = 12
    yield config
    config.max_payload_length = previous


def test_shared_instance() -> None:  # noqa: D103
    assert pr.get_config() is pr.get_config()
    assert pr.get_config().max_payload_length == 120


def test_short_payload_untouched() -> None:  # noqa: D103
    assert pr.get_config().payload_repr("abc") == "'abc'"


def test_long_payload_truncated(short_payloads: pr.Config) -> None:  # noqa: D103
    text = short_payloads.payload_repr("x" * 100)
    assert len(text) <= 12
    assert "..." in text


def test_error_message_uses_config(short_payloads: pr.Config) -> None:  # noqa: ARG001, D103
    with pytest.raises(pr.ResultUnwrapError) as exc_info:
        pr.Err("y" * 100).unwrap()
    message = str(exc_info.value)
    assert message.startswith("called `unwrap` on Err: ")
    assert len(message.removeprefix("called `unwrap` on Err: ")) <= 12
    assert exc_info.value.payload == "y" * 100


def test_short_list_payload_rendered_whole() -> None:  # noqa: D103
    with pytest.raises(pr.ResultUnwrapError) as exc_info:
        pr.Err([1, 2, 3, 4, 5, 6, 7]).unwrap()
    assert str(exc_info.value) == "called `unwrap` on Err: [1, 2, 3, 4, 5, 6, 7]"


def test_large_int_payload_rendered_whole() -> None:  # noqa: D103
    value = 10**45
    with pytest.raises(pr.ResultUnwrapError) as exc_info:
        pr.Ok(value).unwrap_err()
    assert str(exc_info.value) == f"called `unwrap_err` on Ok: {value}"


def test_failing_repr_falls_back_to_type_name() -> None:  # noqa: D103
    class Opaque:
        def __repr__(self) -> str:
            msg = "no repr"
            raise ValueError(msg)

    assert pr.get_config().payload_repr(Opaque()) == "<Opaque object (repr failed)>"
