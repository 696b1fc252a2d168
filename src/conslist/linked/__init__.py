from conslist.linked.formatting import format_list
from conslist.linked.node import ConsList, Node
from conslist.linked.operations import (
    compose,
    cons,
    first,
    from_iterable,
    iterate,
    length,
    map_list,
    nth_rest,
    rest,
    to_tuple,
)

__all__ = (
    "ConsList",
    "Node",
    "compose",
    "cons",
    "first",
    "format_list",
    "from_iterable",
    "iterate",
    "length",
    "map_list",
    "nth_rest",
    "rest",
    "to_tuple",
)
