from __future__ import annotations

"""
Directory Entry Sorter.

Orders directory entries case-insensitively, breaking ties with an exact
comparison so that names differing only by case always land in the same
order (e.g. 'Cat.png' before 'cat.png').
"""

import os
from typing import Iterable, List, Tuple

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def sort_key(name: str) -> Tuple[str, str]:
    """Build the (case-folded, exact) comparison key for an entry name."""
    return name.casefold(), name


def sort_entries(entries: Iterable[str]) -> List[str]:
    """
    Return the entries in deterministic display order.

    Entries may be bare names or paths; only the last path component takes
    part in the comparison.

    Args:
        entries: Names or paths from a single directory listing.

    Returns:
        List[str]: A new, sorted list.
    """
    return sorted(entries, key=lambda entry: sort_key(os.path.basename(entry)))
