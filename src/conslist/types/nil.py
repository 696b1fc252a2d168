from collections.abc import Iterator
from typing import Any, Final, NoReturn, TypeGuard, final

from conslist.types.errors import InvalidAccess

__all__ = (
    "NIL",
    "Nil",
    "is_nil",
    "not_nil",
)


class NilType(type):
    """
    Metaclass for the Nil type implementing the singleton pattern.

    Ensures that only one instance of the Nil class ever exists,
    allowing for identity comparison using the 'is' operator.
    """

    _instance: Any = None

    def __call__(cls) -> Any:
        if cls._instance is None:
            cls._instance = super().__call__()
            return cls._instance

        else:
            return cls._instance


@final
class Nil(metaclass=NilType):
    """
    Type representing the end of a list. Use NIL constant for its value.

    NIL is the empty list and the tail of the last node of every non empty
    list. It behaves like an empty collection: it is falsy, has no elements
    and its length is zero. Reading ``value`` or ``next`` of NIL raises
    InvalidAccess.

    The NIL constant is the only instance of this class and should be used
    for all comparisons using the 'is' operator.
    """

    __slots__ = ()
    __match_args__ = ()

    def __bool__(self) -> bool:
        return False

    def __len__(self) -> int:
        return 0

    def __iter__(self) -> Iterator[Any]:
        return iter(())

    def __hash__(self) -> int:
        return hash(self.__class__)

    def __eq__(
        self,
        value: object,
    ) -> bool:
        return value is NIL

    def __str__(self) -> str:
        return "NIL"

    def __repr__(self) -> str:
        return "NIL"

    def __reduce__(self) -> str:
        return "NIL"

    def __copy__(self) -> "Nil":
        return self

    def __deepcopy__(
        self,
        memo: dict[int, Any] | None,
    ) -> "Nil":
        return self

    def __getattr__(
        self,
        name: str,
    ) -> NoReturn:
        if name in ("value", "next"):
            raise InvalidAccess(attribute=name)

        raise AttributeError(f"Nil has no attribute '{name}'")

    def __setattr__(
        self,
        __name: str,
        __value: Any,
    ) -> None:
        raise AttributeError("Nil can't be modified")

    def __delattr__(
        self,
        __name: str,
    ) -> None:
        raise AttributeError("Nil can't be modified")


NIL: Final[Nil] = Nil()


def is_nil(
    check: Any,
    /,
) -> TypeGuard[Nil]:
    """
    Check if a value is the NIL terminal marker.

    Parameters
    ----------
    check : Any
        The value to check

    Returns
    -------
    TypeGuard[Nil]
        True if the value is NIL, False otherwise
    """
    return check is NIL


def not_nil[Value](
    check: Value | Nil,
    /,
) -> TypeGuard[Value]:
    """
    Check if a value is not the NIL terminal marker.

    Parameters
    ----------
    check : Value | Nil
        The value to check

    Returns
    -------
    TypeGuard[Value]
        True if the value is not NIL, False otherwise
    """
    return check is not NIL
