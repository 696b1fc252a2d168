from typing import Any

from conslist.linked.node import ConsList, Node
from conslist.types import NIL

__all__ = ("format_list",)


def format_list(
    elements: ConsList[Any],
    /,
) -> str:
    """
    Format a list into a readable string representation of its structure.

    Each node is rendered as a block with its value and the rest of the list
    nested inside with additional indentation, closing blocks follow in
    reverse order. The terminal marker is rendered as NIL.

    Parameters
    ----------
    elements : ConsList[Any]
        The list to format

    Returns
    -------
    str
        A formatted string representation of the list structure

    Examples
    --------
    >>> print(format_list(cons("first", NIL)))
    ┍━ Node:
    ┝ value: "first"
    ┝ next: NIL
    ┕━
    """
    if elements is NIL:
        return "NIL"

    opening: list[str] = []
    closing: list[str] = []
    current: ConsList[Any] = elements
    indent: int = 0
    while isinstance(current, Node):
        indent_str: str = " " * indent
        opening.append(f"{indent_str}┍━ Node:")
        opening.append(_attribute_str(key="value", value=current.value, indent=indent))
        if current.next is NIL:
            opening.append(f"{indent_str}┝ next: NIL")

        else:
            opening.append(f"{indent_str}┝ next:")

        closing.append(f"{indent_str}┕━")
        current = current.next
        indent += 2

    return "\n".join(opening + closing[::-1])


def _attribute_str(
    *,
    key: str,
    value: Any,
    indent: int,
) -> str:
    indent_str: str = " " * indent
    value_str: str = _value_str(value)
    if "\n" in value_str:
        inner_indent: str = " " * (indent + 2)
        indented_value: str = value_str.replace("\n", f"\n{inner_indent}")
        return f"{indent_str}┝ {key}:\n{inner_indent}{indented_value}"

    else:
        return f"{indent_str}┝ {key}: {value_str}"


def _value_str(
    value: Any,
    /,
) -> str:
    if value is None:
        return "None"

    elif isinstance(value, str):
        return f'"{value}"'

    else:
        return str(value)
