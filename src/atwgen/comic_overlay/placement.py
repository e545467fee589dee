"""Deterministic caption placement.

A caption's vertical slot and its small jitter offset are derived only from
the caption's own characters, so the same text always lands in the same spot
regardless of the other captions on the page.
"""
import operator
from enum import IntEnum
from typing import Callable, Optional, Tuple

NUM_PLACEMENTS = 5

# between -10 and 10 pixel offset
OFFSET_BOUND = 21

_ACCUMULATOR_MASK = 0xFFFFFFFF


class Placement(IntEnum):
    """Vertical slot inside a panel. NONE means "derive it from the text"."""
    NONE = 0
    TOP = 1
    TOP_MIDDLE = 2
    MIDDLE = 3
    BOTTOM_MIDDLE = 4
    BOTTOM = 5

    @classmethod
    def from_name(cls, name: Optional[str]) -> "Placement":
        """Parse a config name such as ``"top-middle"``; anything unknown is NONE."""
        if not name:
            return cls.NONE
        return _NAMES.get(str(name).strip().lower(), cls.NONE)


_NAMES = {
    'top': Placement.TOP,
    'top-middle': Placement.TOP_MIDDLE,
    'middle': Placement.MIDDLE,
    'bottom-middle': Placement.BOTTOM_MIDDLE,
    'bottom': Placement.BOTTOM,
}

CONCRETE_PLACEMENTS = tuple(p for p in Placement if p is not Placement.NONE)


def fold_string(text: str, combine: Callable[[int, int], int]) -> int:
    """Left fold over the code points of ``text`` with ``combine``.

    The accumulator starts at 0 and every intermediate value is kept to an
    unsigned 32-bit word. The empty string folds to 0, and a multiplying fold
    is always 0.

    Args:
        text: String to reduce
        combine: Binary operator applied as ``combine(accumulator, code_point)``

    Returns:
        int: Accumulator in the range [0, 2**32)
    """
    accumulator = 0
    for ch in text:
        accumulator = combine(accumulator, ord(ch)) & _ACCUMULATOR_MASK
    return accumulator


def choose_placement(text: str) -> Placement:
    """Pick one of the five concrete slots from the OR of the characters."""
    value = fold_string(text, operator.or_)
    # mod by the number of placements and then add one to skip NONE
    return Placement(value % NUM_PLACEMENTS + 1)


def _offset(text, combine):
    return fold_string(text, combine) % OFFSET_BOUND - OFFSET_BOUND // 2


def offset_x(text: str) -> int:
    """Horizontal jitter from the multiplying fold.

    The fold starts from a zero accumulator, so this is -10 for every text.
    """
    return _offset(text, operator.mul)


def offset_y(text: str) -> int:
    """Vertical jitter in [-10, 10] from the sum of the characters."""
    return _offset(text, operator.add)


def jitter(text: str) -> Tuple[int, int]:
    return offset_x(text), offset_y(text)


def resolve_placement(placement: Placement, text: str) -> Placement:
    """Return ``placement`` unless it is NONE, in which case derive it from ``text``."""
    placement = Placement(placement)
    if placement is Placement.NONE:
        return choose_placement(text)
    return placement
