from collections.abc import Callable, Iterable, Iterator
from typing import Any

from conslist.linked.node import ConsList, Node
from conslist.types import NIL, InvalidAccess

__all__ = (
    "compose",
    "cons",
    "first",
    "from_iterable",
    "iterate",
    "length",
    "map_list",
    "nth_rest",
    "rest",
    "to_tuple",
)


def first[Element](
    elements: ConsList[Element],
    /,
) -> Element:
    """
    Get the value stored at the head of a list.

    Parameters
    ----------
    elements : ConsList[Element]
        A non empty list

    Returns
    -------
    Element
        The value of the first node

    Raises
    ------
    InvalidAccess
        If the list is empty
    """
    if isinstance(elements, Node):
        return elements.value

    raise InvalidAccess(attribute="value")


def rest[Element](
    elements: ConsList[Element],
    /,
) -> ConsList[Element]:
    """
    Get the tail of a list, which is NIL for a single element list.

    Parameters
    ----------
    elements : ConsList[Element]
        A non empty list

    Returns
    -------
    ConsList[Element]
        The list following the first node

    Raises
    ------
    InvalidAccess
        If the list is empty
    """
    if isinstance(elements, Node):
        return elements.next

    raise InvalidAccess(attribute="next")


def cons[Element](
    value: Element,
    elements: ConsList[Element],
    /,
) -> Node[Element]:
    """
    Prepend a value to a list. The given list becomes the shared tail of the result.
    """
    return Node(
        value=value,
        next=elements,
    )


def compose[**Args, Intermediate, Result](
    outer: Callable[[Intermediate], Result],
    inner: Callable[Args, Intermediate],
    /,
) -> Callable[Args, Result]:
    """
    Compose two functions so that the result of inner is passed to outer.

    Parameters
    ----------
    outer : Callable[[Intermediate], Result]
        Function applied to the result of inner
    inner : Callable[Args, Intermediate]
        Function receiving all of the arguments

    Returns
    -------
    Callable[Args, Result]
        Function equivalent to ``outer(inner(*args, **kwargs))``
    """

    def composed(
        *args: Args.args,
        **kwargs: Args.kwargs,
    ) -> Result:
        return outer(inner(*args, **kwargs))

    return composed


def iterate[Element](
    elements: ConsList[Element],
    /,
) -> Iterator[Element]:
    current: ConsList[Element] = elements
    while isinstance(current, Node):
        yield current.value
        current = current.next


def from_iterable[Element](
    values: Iterable[Element],
    /,
) -> ConsList[Element]:
    """
    Build a list containing given values in the same order.

    Parameters
    ----------
    values : Iterable[Element]
        Values to put into the list, consumed once

    Returns
    -------
    ConsList[Element]
        A new list, NIL when no values were given
    """
    result: ConsList[Element] = NIL
    # build from the tail to keep the source order
    for value in reversed(tuple(values)):
        result = cons(value, result)

    return result


def map_list[Element, Result](
    elements: ConsList[Element],
    transform: Callable[[Element], Result],
    /,
) -> ConsList[Result]:
    """
    Transform each value of a list producing a new list of the same length.

    The transform is called exactly once for each value, from head to tail.
    All nodes of the result are newly constructed, the input list stays
    untouched. Lists of any length are supported as no recursion is involved.

    Parameters
    ----------
    elements : ConsList[Element]
        The list to transform
    transform : Callable[[Element], Result]
        Function applied to each value, expected to be pure

    Returns
    -------
    ConsList[Result]
        A new list with transformed values, NIL for an empty input

    Raises
    ------
    Exception
        Any exception raised by the transform is propagated unchanged
    """
    if elements is NIL:
        return NIL

    transform_first: Callable[[ConsList[Element]], Result] = compose(transform, first)
    transformed: list[Result] = []
    current: ConsList[Element] = elements
    while isinstance(current, Node):
        transformed.append(transform_first(current))
        current = rest(current)

    return from_iterable(transformed)


def length(
    elements: ConsList[Any],
    /,
) -> int:
    return len(elements)


def nth_rest[Element](
    elements: ConsList[Element],
    /,
    index: int,
) -> ConsList[Element]:
    """
    Skip a number of leading nodes of a list.

    Parameters
    ----------
    elements : ConsList[Element]
        The list to walk
    index : int
        Number of nodes to skip, zero returns the list itself

    Returns
    -------
    ConsList[Element]
        The list remaining after skipping ``index`` nodes

    Raises
    ------
    ValueError
        If the index is negative
    InvalidAccess
        If the list has less than ``index`` nodes
    """
    if index < 0:
        raise ValueError(f"Index must not be negative, received {index}")

    current: ConsList[Element] = elements
    for _ in range(index):
        current = rest(current)

    return current


def to_tuple[Element](
    elements: ConsList[Element],
    /,
) -> tuple[Element, ...]:
    return tuple(iterate(elements))
