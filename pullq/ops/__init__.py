"""
the operator layer: plain functions from iterables to single-pass sequences.

    from pullq import ops
    list(ops.take(ops.filter(ops.from_range(0, 100), lambda x, i: x % 3 == 0), 4))

map and filter shadow the builtins inside this namespace; import the module,
not the names, unless that is what you want.
"""

from ..producers import from_mapping, from_range, from_repeat
from .elementwise import map, filter
from .structural import append, prepend, concat, skip, take, reverse
from .set import distinct, except_, intersect, union
from .grouping import group_by, group_compared

__all__ = [
    "from_mapping",
    "from_range",
    "from_repeat",
    "map",
    "filter",
    "append",
    "prepend",
    "concat",
    "skip",
    "take",
    "reverse",
    "distinct",
    "except_",
    "intersect",
    "union",
    "group_by",
    "group_compared",
]
