from copy import copy, deepcopy

from pytest import raises

from conslist import NIL, Immutable, Node, cons, from_iterable


def test_node_initializes_with_arguments() -> None:
    node = Node(value="first", next=NIL)

    assert node.value == "first"
    assert node.next is NIL


def test_node_requires_all_attributes() -> None:
    with raises(AttributeError, match="Missing required attribute: next@Node"):
        Node(value="first")


def test_node_rejects_unexpected_attributes() -> None:
    with raises(AttributeError, match="Unexpected attributes: other@Node"):
        Node(value="first", next=NIL, other=42)


def test_node_can_not_be_modified() -> None:
    node = Node(value="first", next=NIL)

    with raises(AttributeError, match="'value' cannot be modified"):
        node.value = "changed"

    with raises(AttributeError, match="'next' cannot be deleted"):
        del node.next

    assert node.value == "first"


def test_node_attributes_are_collected_in_order() -> None:
    assert Node.__ATTRIBUTES__ == ("value", "next")
    assert Node.__match_args__ == ("value", "next")


def test_node_supports_pattern_matching() -> None:
    match cons("first", cons("last", NIL)):
        case Node(head, Node(second, tail)):
            assert head == "first"
            assert second == "last"
            assert tail is NIL

        case _:
            raise AssertionError("Pattern not matched")


def test_custom_immutable_subclass() -> None:
    class Pair(Immutable):
        left: int
        right: int

    pair = Pair(left=1, right=2)

    assert (pair.left, pair.right) == (1, 2)
    with raises(AttributeError):
        pair.left = 3


def test_copying_leaves_same_object() -> None:
    node = cons("first", NIL)

    assert copy(node) is node
    assert deepcopy(node) is node


def test_node_iterates_from_head_to_tail() -> None:
    node = from_iterable(["first", "middle", "last"])

    assert list(node) == ["first", "middle", "last"]
    assert len(node) == 3
    assert node


def test_node_equals_checks_values() -> None:
    left = from_iterable([1, 2, 3])
    right = from_iterable([1, 2, 3])

    assert left == right
    assert left is not right
    assert hash(left) == hash(right)
    assert left != from_iterable([1, 2])
    assert left != from_iterable([1, 2, 4])
    assert left != (1, 2, 3)


def test_node_equals_with_shared_tail() -> None:
    tail = from_iterable(["middle", "last"])

    assert cons("first", tail) == cons("first", tail)
    assert cons("first", tail) != cons("other", tail)


def test_node_repr_shows_construction() -> None:
    node = from_iterable(["first", "last"])

    assert repr(node) == "cons('first', cons('last', NIL))"


def test_node_str_uses_list_formatting() -> None:
    assert str(cons(1, NIL)) == "┍━ Node:\n┝ value: 1\n┝ next: NIL\n┕━"


def test_long_list_dunders_do_not_recurse() -> None:
    node = from_iterable(range(50_000))

    assert len(node) == 50_000
    assert node == from_iterable(range(50_000))
    assert repr(node).startswith("cons(0, cons(1, ")
    assert isinstance(hash(node), int)


def test_string_class_variables_are_not_attributes() -> None:
    class Limited(Immutable):
        limit: "typing.ClassVar[int]" = 3  # noqa: F821
        shared: "ClassVar[str]" = "shared"  # noqa: F821
        value: int

    assert Limited.__ATTRIBUTES__ == ("value",)
    assert Limited(value=1).value == 1
