from __future__ import annotations

from typing import Iterable

from ..core.constants import CLASS_ORDER


def class_sort_key(class_name: str) -> tuple[int, str]:
    """Known classes in school order first, anything else alphabetically after."""

    try:
        return (CLASS_ORDER.index(class_name), "")
    except ValueError:
        return (len(CLASS_ORDER), class_name)


def sort_class_names(names: Iterable[str]) -> list[str]:
    return sorted(set(names), key=class_sort_key)
