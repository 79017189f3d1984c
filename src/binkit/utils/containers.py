"""Helpers for appending values to mutable sequences."""

from typing import Iterable, MutableSequence, TypeVar

T = TypeVar("T")


def add_range(container: MutableSequence[T], *values: T) -> None:
    """
    Append each positional value to the end of a sequence.

    Example:
        >>> numbers = []
        >>> add_range(numbers, 1, 2, 3)
        >>> numbers
        [1, 2, 3]
    """
    for value in values:
        container.append(value)


def add_to_container(container: MutableSequence[T], values: Iterable[T]) -> None:
    """
    Append every item of an iterable to the end of a sequence.

    Example:
        >>> numbers = [0]
        >>> add_to_container(numbers, [1, 2])
        >>> numbers
        [0, 1, 2]
    """
    container.extend(values)
