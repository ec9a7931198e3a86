"""
Circular ordering of webring members.
"""

from typing import Any, Iterable, List, NamedTuple, Sequence, Tuple


class RingLink(NamedTuple):
    previous: Any
    current: Any
    next: Any


def _name_of(entry):
    # Accepts (name, path) tuples as well as objects with a ``name``.
    if isinstance(entry, tuple) and not hasattr(entry, 'name'):
        return entry[0]
    return entry.name


def order_users(entries: Iterable) -> List:
    """Sort user entries by name (codepoint order)."""
    return sorted(entries, key=_name_of)


def ring_neighbors(index: int, count: int) -> Tuple[int, int]:
    """Return the (previous, next) indices of ``index`` in a ring of ``count``."""
    if count <= 0:
        raise ValueError("A ring needs at least one member")
    if not 0 <= index < count:
        raise ValueError(f"Index {index} is outside a ring of {count} members")
    return (index - 1 + count) % count, (index + 1) % count


def link_ring(items: Sequence) -> List[RingLink]:
    """
    Pair every item with its circular predecessor and successor.

    The items must already be in ring order. A single item is its own
    neighbour on both sides; an empty sequence has no links.
    """
    count = len(items)
    links = []
    for index, item in enumerate(items):
        prev_index, next_index = ring_neighbors(index, count)
        links.append(RingLink(items[prev_index], item, items[next_index]))
    return links
