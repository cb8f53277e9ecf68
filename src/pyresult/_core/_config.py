from __future__ import annotations

from dataclasses import dataclass

from ._format import payload_repr


@dataclass(slots=True)
class Config:
    """Process-wide display settings.

    Obtain the shared instance with `get_config()` and set attributes on it.

    Example:
    ```python
    >>> import pyresult as pr
    >>> pr.get_config().max_payload_length
    120

    ```
    """

    max_payload_length: int = 120
    """Maximum length of a payload rendered inside an unwrap error message."""

    def payload_repr(self, value: object) -> str:
        return payload_repr(value, self.max_payload_length)


_CONFIG = Config()


def get_config() -> Config:
    """Return the shared `Config` instance."""
    return _CONFIG
