"""Binary search over sorted sequences."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def binary_search(items: Sequence[Any], key: Any) -> bool:
    """Return whether *key* occurs in the ascending sequence *items*."""
    low, high = 0, len(items) - 1
    while low <= high:
        mid = (low + high) // 2
        value = items[mid]
        if value == key:
            return True
        if value > key:
            high = mid - 1
        else:
            low = mid + 1
    return False


def binary_search_recursive(items: Sequence[Any], key: Any) -> bool:
    """Return whether *key* occurs in *items*, searching recursively."""

    def search(low: int, high: int) -> bool:
        if low > high:
            return False
        if low == high:
            return items[low] == key
        mid = (low + high) // 2
        if items[mid] == key:
            return True
        if key < items[mid]:
            return search(low, mid - 1)
        return search(mid + 1, high)

    return search(0, len(items) - 1)