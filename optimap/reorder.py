"""Turn a drag-and-drop reorder of the interior stops into a stop permutation."""

from __future__ import annotations
from typing import Iterable, List, Union

StopId = Union[int, str]


def to_permutation(ordered_stop_ids: Iterable[StopId]) -> List[int]:
    """
    Frame the new on-screen order of the interior stops with the fixed
    origin (0) and terminal (N+1) indices.

    Ids may be given as strings, as they come from element ids.

    >>> to_permutation([5, 2, 8])
    [0, 5, 2, 8, 4]
    """
    perm = [0]
    for stop_id in ordered_stop_ids:
        if isinstance(stop_id, bool) or (isinstance(stop_id, float) and not stop_id.is_integer()):
            raise ValueError(f"Invalid stop id: {stop_id!r}")
        try:
            perm.append(int(stop_id))
        except (TypeError, ValueError, OverflowError) as e:
            raise ValueError(f"Invalid stop id: {stop_id!r}") from e
    perm.append(len(perm))
    return perm
