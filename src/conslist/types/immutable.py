import inspect
from typing import (
    Any,
    ClassVar,
    NoReturn,
    Self,
    dataclass_transform,
    final,
    get_origin,
)

__all__ = ("Immutable",)


@dataclass_transform(
    kw_only_default=True,
    frozen_default=True,
)
class ImmutableMeta(type):
    __slots__: tuple[str, ...]

    def __new__(
        mcs,
        name: str,
        bases: tuple[type, ...],
        namespace: dict[str, Any],
        **kwargs: Any,
    ) -> type:
        immutable_type = type.__new__(
            mcs,
            name,
            bases,
            namespace,
            **kwargs,
        )

        immutable_type.__ATTRIBUTES__ = _collect_attributes(immutable_type)  # pyright: ignore[reportAttributeAccessIssue]
        immutable_type.__slots__ = immutable_type.__ATTRIBUTES__  # pyright: ignore[reportAttributeAccessIssue]
        immutable_type.__match_args__ = immutable_type.__ATTRIBUTES__  # pyright: ignore[reportAttributeAccessIssue]

        # Only mark subclasses as final (not the base Immutable class itself)
        if name != "Immutable":
            immutable_type = final(immutable_type)

        return immutable_type


def _collect_attributes(
    cls: type[Any],
) -> tuple[str, ...]:
    attributes: list[str] = []
    # annotations are read without evaluation, forward references stay as strings
    for base in reversed(cls.__mro__):
        for key, annotation in inspect.get_annotations(base).items():
            if key.startswith("__"):
                continue  # do not dunder specials

            if get_origin(annotation) is ClassVar:
                continue  # do not include ClassVars

            if isinstance(annotation, str) and "ClassVar[" in annotation:
                continue  # do not include ClassVars declared as strings

            if key not in attributes:
                attributes.append(key)

    return tuple(attributes)


class Immutable(metaclass=ImmutableMeta):
    """
    Base for classes with a fixed set of attributes assigned once on construction.

    Attributes are declared with annotations and passed as keyword arguments.
    All of them are required. Any attempt to set or delete an attribute after
    construction raises AttributeError.
    """

    __ATTRIBUTES__: ClassVar[tuple[str, ...]]

    def __init__(
        self,
        **kwargs: Any,
    ) -> None:
        for name in self.__ATTRIBUTES__:
            if name in kwargs:
                object.__setattr__(
                    self,
                    name,
                    kwargs[name],
                )

            else:
                raise AttributeError(
                    f"Missing required attribute: {name}@{self.__class__.__qualname__}"
                )

        if unexpected := kwargs.keys() - set(self.__ATTRIBUTES__):
            raise AttributeError(
                f"Unexpected attributes: {', '.join(sorted(unexpected))}"
                f"@{self.__class__.__qualname__}"
            )

    def __setattr__(
        self,
        name: str,
        value: Any,
    ) -> NoReturn:
        raise AttributeError(
            f"Can't modify immutable {self.__class__.__qualname__}"
            f" attribute - '{name}' cannot be modified"
        )

    def __delattr__(
        self,
        name: str,
    ) -> NoReturn:
        raise AttributeError(
            f"Can't modify immutable {self.__class__.__qualname__}"
            f" attribute - '{name}' cannot be deleted"
        )

    def __copy__(self) -> Self:
        return self  # Immutable, no need to provide an actual copy

    def __deepcopy__(
        self,
        memo: dict[int, Any] | None,
    ) -> Self:
        return self  # Immutable, no need to provide an actual copy
