from collections.abc import Iterator
from typing import Any

from conslist.types import NIL, Immutable, Nil

__all__ = (
    "ConsList",
    "Node",
)


class Node[Element](Immutable):
    """
    Single element of an immutable singly linked list.

    Node holds a value and the rest of the list which is either another Node
    or the NIL terminal marker. Nodes can't be modified after construction,
    multiple lists may safely share the same tail.

    Node behaves like a read only collection of its values: it can be iterated
    from head to tail, measured with len and compared structurally. None of
    those operations use recursion so lists of any length are supported.

    Examples
    --------
    >>> node = Node(value="first", next=Node(value="last", next=NIL))
    >>> tuple(node)
    ('first', 'last')
    """

    value: Element
    next: "Node[Element] | Nil"

    def __iter__(self) -> Iterator[Element]:
        current: Node[Element] | Nil = self
        while isinstance(current, Node):
            yield current.value
            current = current.next

    def __len__(self) -> int:
        count: int = 0
        current: Node[Element] | Nil = self
        while isinstance(current, Node):
            count += 1
            current = current.next

        return count

    def __bool__(self) -> bool:
        return True  # never empty, NIL is the empty list

    def __eq__(
        self,
        other: object,
    ) -> bool:
        if self is other:
            return True

        if not isinstance(other, Node):
            return False

        left: Node[Any] | Nil = self
        right: Node[Any] | Nil = other
        while isinstance(left, Node) and isinstance(right, Node):
            if left is right:
                return True  # shared tail

            if left.value != right.value:
                return False

            left = left.next
            right = right.next

        return left is NIL and right is NIL

    def __hash__(self) -> int:
        return hash(tuple(self))

    def __str__(self) -> str:
        from conslist.linked.formatting import format_list

        return format_list(self)

    def __repr__(self) -> str:
        values: list[str] = [f"cons({value!r}, " for value in self]
        return "".join(values) + "NIL" + ")" * len(values)


type ConsList[Element] = Node[Element] | Nil
