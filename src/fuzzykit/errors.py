from __future__ import annotations

"""Exception types shared across the package."""

from typing import Any


class InvalidArgumentError(ValueError):
    """Raised when a helper receives an argument it cannot work with."""


def require_not_none(**values: Any) -> None:
    """Raise :class:`InvalidArgumentError` naming the first ``None`` keyword."""

    for name, value in values.items():
        if value is None:
            raise InvalidArgumentError(f"{name} must not be None")
