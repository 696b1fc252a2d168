from conslist.types.errors import InvalidAccess
from conslist.types.immutable import Immutable
from conslist.types.nil import NIL, Nil, is_nil, not_nil

__all__ = (
    "NIL",
    "Immutable",
    "InvalidAccess",
    "Nil",
    "is_nil",
    "not_nil",
)
