"""Family fixture and the mother/child query."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Tuple

MotherAndChildName = Tuple[str, str]


@dataclass(frozen=True)
class Person:
    name: str
    is_male: bool
    children: Tuple["Person", ...] = ()


def default_family() -> List[Person]:
    lara = Person("Lara", is_male=False)
    bob = Person("Bob", is_male=True)
    julie = Person("Julie", is_male=False, children=(lara, bob))
    return [lara, bob, julie]


def mothers_and_children(persons: Iterable[Person]) -> List[MotherAndChildName]:
    """Pair every non-male person's name with each of their children's names."""
    return [(p.name, c.name) for p in persons if not p.is_male for c in p.children]
