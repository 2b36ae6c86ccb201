from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Tuple

__all__ = ["NussinovBacktrackOp", "NussinovBackPointer"]

Interval = Tuple[int, int]


class NussinovBacktrackOp(Enum):
    """
    The recurrence cases of the maximum-pairing DP, in traceback priority order.

    NONE            : Interval too short to hold a pair; nothing to trace.
    UNPAIRED_LEFT   : score[i,j] = score[i+1,j]; base i left unpaired.
    UNPAIRED_RIGHT  : score[i,j] = score[i,j-1]; base j left unpaired.
    PAIR            : score[i,j] = score[i+1,j-1] + 1; i pairs with j.
    INTERIOR_PAIR   : score[i,j] = score[i+1,k-1] + score[k+1,j] + 1; i pairs with k.
    """
    NONE = auto()
    UNPAIRED_LEFT = auto()
    UNPAIRED_RIGHT = auto()
    PAIR = auto()
    INTERIOR_PAIR = auto()


@dataclass(frozen=True, slots=True)
class NussinovBackPointer:
    """
    The case that explains one score matrix cell.

    Attributes
    ----------
    operation : NussinovBacktrackOp
        The winning recurrence case.
    partner_k : Optional[int]
        The partner of `i` for `INTERIOR_PAIR`; `None` otherwise.
    """
    operation: NussinovBacktrackOp = NussinovBacktrackOp.NONE
    partner_k: Optional[int] = None

    def children(self, i: int, j: int) -> Tuple[Interval, ...]:
        """The sub-intervals the traceback continues into for cell `(i, j)`."""
        op = self.operation
        if op is NussinovBacktrackOp.UNPAIRED_LEFT:
            return ((i + 1, j),)
        if op is NussinovBacktrackOp.UNPAIRED_RIGHT:
            return ((i, j - 1),)
        if op is NussinovBacktrackOp.PAIR:
            return ((i + 1, j - 1),)
        if op is NussinovBacktrackOp.INTERIOR_PAIR and self.partner_k is not None:
            k = self.partner_k
            return ((i + 1, k - 1), (k + 1, j))
        return ()
