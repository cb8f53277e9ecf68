from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Never, TypeIs

from .._core import get_config
from ._errors import ResultUnwrapError
from ._option import NONE, Option, Some


class Result[T, E = Exception](ABC):
    """The outcome of an operation: either `Ok(value)` or `Err(error)`.

    Only the two variants can be instantiated, and neither can change after construction.

    Example:
    ```python
    >>> import pyresult as pr
    >>> def parse(text: str) -> pr.Result[int, str]:
    ...     if text.isdigit():
    ...         return pr.Ok(int(text))
    ...     return pr.Err(f"not a number: {text!r}")
    >>> parse("12").unwrap()
    12
    >>> parse("twelve").unwrap_err()
    "not a number: 'twelve'"

    ```
    """

    __slots__ = ()

    @abstractmethod
    def is_ok(self) -> TypeIs[Ok[T, E]]:  # type: ignore[misc]
        """
        Returns True if the result is Ok.

        Equivalent to Rust's Result::is_ok().
        """
        ...

    @abstractmethod
    def is_err(self) -> TypeIs[Err[T, E]]:  # type: ignore[misc]
        """
        Returns True if the result is Err.

        Equivalent to Rust's Result::is_err().
        """
        ...

    @abstractmethod
    def unwrap(self) -> T:
        """
        Returns the contained Ok value, or raises ResultUnwrapError if the result is Err.

        The error message carries the rendered Err payload, see `Config.max_payload_length`.

        Equivalent to Rust's Result::unwrap().
        """
        ...

    @abstractmethod
    def unwrap_err(self) -> E:
        """
        Returns the contained Err value, or raises ResultUnwrapError if the result is Ok.

        Equivalent to Rust's Result::unwrap_err().
        """
        ...

    def expect(self, msg: str) -> T:
        """
        Returns the contained Ok value, or raises ResultUnwrapError with a custom message if the result is Err.

        Args:
            msg: The message to display if the result is Err.

        Returns:
            The contained Ok value.

        Raises:
            ResultUnwrapError: If the result is Err, with the provided message and error.

        Equivalent to Rust's Result::expect().
        """
        if self.is_ok():
            return self.unwrap()
        error = self.unwrap_err()
        raise ResultUnwrapError(f"{msg}: {get_config().payload_repr(error)}", error)

    def expect_err(self, msg: str) -> E:
        """
        Returns the contained Err value, or raises ResultUnwrapError with a custom message if the result is Ok.

        Args:
            msg: The message to display if the result is Ok.

        Returns:
            The contained Err value.

        Raises:
            ResultUnwrapError: If the result is Ok, with the provided message and value.

        Equivalent to Rust's Result::expect_err().
        """
        if self.is_err():
            return self.unwrap_err()
        value = self.unwrap()
        raise ResultUnwrapError(
            f"{msg}: expected Err, got Ok({get_config().payload_repr(value)})", value
        )

    def unwrap_or(self, default: T) -> T:
        """
        Returns the contained Ok value or a provided default.

        Args:
            default: The value to return if the result is Err.

        Returns:
            The contained Ok value or the default.

        Example:
        ```python
        >>> import pyresult as pr
        >>> pr.Ok(2).unwrap_or(0)
        2
        >>> pr.Err("nope").unwrap_or(0)
        0

        ```
        """
        return self.unwrap() if self.is_ok() else default

    def ok(self) -> Option[T]:
        """
        Converts the Result into an Option, mapping Ok(v) to Some(v) and Err(e) to None.

        Returns:
            Option[T]: Some(value) if Ok, otherwise None.

        Example:
        ```python
        >>> import pyresult as pr
        >>> pr.Ok(2).ok()
        Some(value=2)
        >>> pr.Err("nope").ok()
        NONE

        ```
        """
        if self.is_ok():
            return Some(self.unwrap())
        return NONE

    def err(self) -> Option[E]:
        """
        Converts the Result into an Option, mapping Err(e) to Some(e) and Ok(v) to None.

        Returns:
            Option[E]: Some(error) if Err, otherwise None.

        Example:
        ```python
        >>> import pyresult as pr
        >>> pr.Err("nope").err()
        Some(value='nope')
        >>> pr.Ok(2).err()
        NONE

        ```
        """
        if self.is_err():
            return Some(self.unwrap_err())
        return NONE


@dataclass(slots=True, frozen=True, eq=False)
class Ok[T, E](Result[T, E]):
    """Represents a successful value."""

    value: T

    def is_ok(self) -> TypeIs[Ok[T, E]]:  # type: ignore[misc]
        """Always returns True for Ok."""
        return True

    def is_err(self) -> TypeIs[Err[T, E]]:  # type: ignore[misc]
        """Always returns False for Ok."""
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_err(self) -> Never:
        """
        Raises ResultUnwrapError because there is no error value.

        Raises:
            ResultUnwrapError: Always, with the Ok value rendered in the message.
        """
        raise ResultUnwrapError(
            f"called `unwrap_err` on Ok: {get_config().payload_repr(self.value)}",
            self.value,
        )


@dataclass(slots=True, frozen=True, eq=False)
class Err[T, E](Result[T, E]):
    """Represents an error value."""

    error: E

    def is_ok(self) -> TypeIs[Ok[T, E]]:  # type: ignore[misc]
        """Always returns False for Err."""
        return False

    def is_err(self) -> TypeIs[Err[T, E]]:  # type: ignore[misc]
        """Always returns True for Err."""
        return True

    def unwrap(self) -> Never:
        """
        Raises ResultUnwrapError because there is no Ok value.

        Raises:
            ResultUnwrapError: Always, with the Err payload rendered in the message.
        """
        raise ResultUnwrapError(
            f"called `unwrap` on Err: {get_config().payload_repr(self.error)}",
            self.error,
        )

    def unwrap_err(self) -> E:
        return self.error
