from logging import Logger, getLogger

from conslist.linked import ConsList, Node, first, format_list, map_list, rest
from conslist.types import NIL

__all__ = ("main",)

logger: Logger = getLogger(__name__)


def _first_three(
    elements: ConsList[str],
    /,
) -> str:
    return ", ".join(
        (
            first(elements),
            first(rest(elements)),
            first(rest(rest(elements))),
        )
    )


def main() -> None:
    """
    Build a three element list, map it and print both lists with their values.
    """
    node3: Node[str] = Node(value="last", next=NIL)
    node2: Node[str] = Node(value="middle", next=node3)
    node1: Node[str] = Node(value="first", next=node2)
    logger.debug("Prepared list of %d elements", len(node1))

    print("node1:")
    print(format_list(node1))
    print("")

    print("result1:")
    print(_first_three(node1))
    print("")

    new_list: ConsList[str] = map_list(node1, lambda value: f"{value} mapped!")
    logger.debug("Mapped list of %d elements", len(new_list))

    print("newList:")
    print(format_list(new_list))
    print("")

    print("result2:")
    print(_first_three(new_list))
