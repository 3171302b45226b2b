"""Duplicate removal keyed on the first element of the input.

Only repeats of the original head are collapsed. Every step compares against
that same head, so repeats of later elements survive:

    remove_duplicates(["a", "b", "a"]) -> ["a", "b"]
    remove_duplicates(["a", "b", "b"]) -> ["a", "b", "b"]
"""

from __future__ import annotations

from typing import List, Sequence


def remove_repeats_of(head: str, rest: Sequence[str]) -> List[str]:
    """Return *head* followed by every element of *rest* not equal to *head*.

    *head* stays fixed while *rest* is consumed front to back.
    """
    result: List[str] = [head]
    for x in rest:
        if x != head:
            result.append(x)
    return result


def remove_duplicates(items: Sequence[str]) -> List[str]:
    if not items:
        return []
    return remove_repeats_of(items[0], items[1:])
