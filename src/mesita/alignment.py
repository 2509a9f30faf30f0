"""Column alignment enumerations.

Alignment is what a delimiter cell encodes:

    | Default | Left | Right | Center |
    | ------- |:---- | -----:|:------:|

DefaultAlignment and HeaderAlignment are formatting policies layered over
it. Their members share values with Alignment, so a policy resolves to a
column alignment with ``Alignment(policy.value)``.

Thread Safety:
Enums are inherently immutable.

"""

from __future__ import annotations

from enum import Enum


class Alignment(Enum):
    """Alignment of a table column.

    DEFAULT means the delimiter cell carries no colon: the column has no
    alignment of its own and is resolved by the formatter's policy.
    NONE is an alias of DEFAULT.

    """

    DEFAULT = "default"
    NONE = "default"
    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"


class DefaultAlignment(Enum):
    """Alignment applied to columns whose delimiter cell is DEFAULT."""

    LEFT = Alignment.LEFT.value
    RIGHT = Alignment.RIGHT.value
    CENTER = Alignment.CENTER.value


class HeaderAlignment(Enum):
    """Alignment of header cells.

    FOLLOW aligns each header cell like the rest of its column.

    """

    FOLLOW = "follow"
    LEFT = Alignment.LEFT.value
    RIGHT = Alignment.RIGHT.value
    CENTER = Alignment.CENTER.value
