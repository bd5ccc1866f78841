"""Mixin for value types that are neither comparable nor hashable."""


class NoValueEquality:
    """Makes ``==``, ``!=`` and ``hash()`` raise ``TypeError``.

    Containers that need to track instances key them by identity.
    """

    __slots__ = ()

    def __eq__(self, other):
        raise TypeError(f"{type(self).__name__} does not support equality comparison")

    def __ne__(self, other):
        raise TypeError(f"{type(self).__name__} does not support equality comparison")

    __hash__ = None
