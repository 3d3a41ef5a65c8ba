"""Unit type for operations that succeed without a value."""

from __future__ import annotations

from typing import Final


class Void:
    """Data of an ``Outcome[Void]``. Only one instance exists: ``VOID``."""

    __slots__ = ()
    _instance: Void | None = None

    def __new__(cls) -> Void:
        if cls._instance is None:
            cls._instance = object.__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "VOID"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "VOID"


VOID: Final = Void()
