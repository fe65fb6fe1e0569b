"""Ordered registry keyed by small integer sequence numbers."""

from bisect import insort
from collections.abc import Callable, Iterator
from typing import Generic, TypeVar

from .constants import MSG_DUPLICATED_NAME, MSG_DUPLICATED_SEQUENCE
from .exceptions import DuplicateNameError, DuplicateSequenceError
from .validation import require_int

T = TypeVar("T")


class SequencedRegistry(Generic[T]):
    """Entries stored by sequence number, unique by sequence and by name.

    Keys are kept sorted so iteration is always in ascending sequence order,
    whatever the insertion order. A secondary name index makes duplicate-name
    checks constant time. Accepted sequence numbers are never reassigned.
    """

    def __init__(self, name_of: Callable[[T], str]):
        self._name_of = name_of
        self._entries: dict[int, T] = {}
        self._sequences: list[int] = []
        self._by_name: dict[str, int] = {}

    def add(self, sequence: int, entry: T) -> None:
        """Register entry at sequence.

        Raises:
            InvalidArgumentError: If sequence is not an integer
            DuplicateSequenceError: If sequence is already used
            DuplicateNameError: If another entry has the same name
        """
        require_int(sequence, "sequence")
        if sequence in self._entries:
            raise DuplicateSequenceError(
                MSG_DUPLICATED_SEQUENCE, field="sequence", value=sequence
            )
        name = self._name_of(entry)
        if name in self._by_name:
            raise DuplicateNameError(MSG_DUPLICATED_NAME, field="name", value=name)

        self._entries[sequence] = entry
        insort(self._sequences, sequence)
        self._by_name[name] = sequence

    def find(self, name: str) -> T | None:
        sequence = self._by_name.get(name)
        return None if sequence is None else self._entries[sequence]

    def contains_entry(self, entry: T) -> bool:
        """Check whether this exact object is registered."""
        found = self.find(self._name_of(entry))
        return found is entry

    def items(self) -> Iterator[tuple[int, T]]:
        for sequence in self._sequences:
            yield sequence, self._entries[sequence]

    def __iter__(self) -> Iterator[T]:
        for sequence in self._sequences:
            yield self._entries[sequence]

    def __len__(self) -> int:
        return len(self._sequences)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name
