__all__ = ("InvalidAccess",)


class InvalidAccess(Exception):
    """
    Exception raised when reading an element past the end of a list.

    This exception is raised when code attempts to access ``value`` or ``next``
    of the terminal marker, either directly or through ``first``, ``rest``
    and other list accessors.

    Attributes:
        attribute: The attribute which was requested from the terminal marker.
    """

    __slots__ = ("attribute",)

    def __init__(
        self,
        *,
        attribute: str,
    ) -> None:
        super().__init__(f"Can't access '{attribute}' of an empty list")
        self.attribute: str = attribute
