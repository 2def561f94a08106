"""Suggest address book contacts for a name typed by the index.

The typed name is lowercased, ``.`` and ``,`` are dropped, and every part is
matched by prefix against a distinct part of each contact's full name. So
``"J. Appleseed"`` and ``"Appleseed, J"`` both match ``"John Appleseed"``.
A contact is only suggested when more than one part matched, or when a
single matched part is longer than one character. Of those, only the
contacts with the highest number of matched parts are returned, in their
original order.
"""

from __future__ import annotations

from typing import Callable, List, Sequence, Tuple, TypeVar

T = TypeVar("T")


def _normalize(name: str) -> List[str]:
    return name.lower().replace(".", "").replace(",", "").split()


def _match(parts: Sequence[str], full_name: str) -> Tuple[int, int]:
    """Return the number of matched parts and the length of the longest match."""

    remaining = full_name.lower().split()
    matched = 0
    longest = 0
    for part in parts:
        index = next((i for i, candidate in enumerate(remaining) if candidate.startswith(part)), None)
        if index is None:
            continue
        del remaining[index]
        matched += 1
        longest = max(longest, len(part))
    return matched, longest


def suggestions(name: str, contacts: Sequence[T], full_name: Callable[[T], str] = str) -> List[T]:
    """Return the entries of ``contacts`` that best match ``name``.

    ``full_name`` maps a contact to its display name; plain strings are used as is.
    """

    parts = _normalize(name)
    scored = [(contact, *_match(parts, full_name(contact))) for contact in contacts]
    if not scored:
        return []

    best = max(matched for _, matched, _ in scored)
    return [
        contact
        for contact, matched, longest in scored
        if (matched > 1 or longest > 1) and matched == best
    ]


__all__ = ["suggestions"]
