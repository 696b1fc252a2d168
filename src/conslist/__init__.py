from conslist.linked import (
    ConsList,
    Node,
    compose,
    cons,
    first,
    format_list,
    from_iterable,
    iterate,
    length,
    map_list,
    nth_rest,
    rest,
    to_tuple,
)
from conslist.types import (
    NIL,
    Immutable,
    InvalidAccess,
    Nil,
    is_nil,
    not_nil,
)
from conslist.utils import getenv_bool, setup_logging

__all__ = (
    "NIL",
    "ConsList",
    "Immutable",
    "InvalidAccess",
    "Nil",
    "Node",
    "compose",
    "cons",
    "first",
    "format_list",
    "from_iterable",
    "getenv_bool",
    "is_nil",
    "iterate",
    "length",
    "map_list",
    "not_nil",
    "nth_rest",
    "rest",
    "setup_logging",
    "to_tuple",
)
