from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Never, TypeIs

from ._errors import OptionUnwrapError


class Option[T](ABC):
    """An optional value: either `Some(value)` or `NONE`.

    Presence is decided by the variant, never by the payload, so `Some(None)` is present.

    Example:
    ```python
    >>> import pyresult as pr
    >>> pr.Some(None).is_some()
    True
    >>> pr.NONE.is_some()
    False

    ```
    """

    __slots__ = ()

    @abstractmethod
    def is_some(self) -> TypeIs[Some[T]]:  # type: ignore[misc]
        """
        Tell whether a value is held.

        After a `True` answer, type checkers treat the option as `Some[T]`.

        Example:
            ```python
            >>> import pyresult as pr
            >>> pr.Some(0).is_some(), pr.NONE.is_some()
            (True, False)

            ```
        """
        ...

    @abstractmethod
    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        """Tell whether no value is held; always the opposite of `is_some()`."""
        ...

    @abstractmethod
    def unwrap(self) -> T:
        """
        Read the held value.

        Only call this after `is_some()`: reading an empty option is a bug in the caller.

        Raises:
            OptionUnwrapError: On `NONE`. Its `payload` is `None`.
        """
        ...

    def expect(self, msg: str) -> T:
        """
        Read the held value, failing with `msg` when there is none.

        Args:
            msg: Leading text of the `OptionUnwrapError` raised on `NONE`.

        Returns:
            The held value.

        Example:
            ```python
            >>> import pyresult as pr
            >>> pr.Some("token").expect("token must be loaded")
            'token'

            ```
        """
        if self.is_some():
            return self.unwrap()
        raise OptionUnwrapError(f"{msg} (called `expect` on a `None`)")

    def unwrap_or(self, default: T) -> T:
        """
        Read the held value, or fall back to `default` when there is none.

        `default` is returned as is, and only used for `NONE`.

        Example:
            ```python
            >>> import pyresult as pr
            >>> pr.Some("").unwrap_or("fallback")
            ''
            >>> pr.NONE.unwrap_or("fallback")
            'fallback'

            ```
        """
        return self.unwrap() if self.is_some() else default


@dataclass(slots=True, frozen=True, eq=False)
class Some[T](Option[T]):
    """A held value, which may itself be falsy or `None`.

    Example:
    ```python
    >>> import pyresult as pr
    >>> pr.Some(42)
    Some(value=42)

    ```
    """

    value: T

    def is_some(self) -> TypeIs[Some[T]]:  # type: ignore[misc]
        return True

    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        return False

    def unwrap(self) -> T:
        return self.value


@dataclass(slots=True, frozen=True, eq=False)
class NoneOption(Option[Any]):
    """No value. Use the shared `NONE` rather than building new ones."""

    def __repr__(self) -> str:
        return "NONE"

    def is_some(self) -> TypeIs[Some[Any]]:  # type: ignore[misc]
        return False

    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        return True

    def unwrap(self) -> Never:
        raise OptionUnwrapError("called `unwrap` on a `None`")


NONE: Option[Any] = NoneOption()
"""The shared empty option."""
