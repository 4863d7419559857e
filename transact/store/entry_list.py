"""List of entries that enforces the no-duplicates invariant"""

from typing import Generic, Iterable, Iterator, List, TypeVar

from transact.utils.errors import DuplicateEntryException, EntryNotFoundException

# Person or Transaction; anything exposing is_same_entry()
E = TypeVar("E")


class UniqueEntryList(Generic[E]):
    """
    Ordered list of entries where no two entries are the same entry.

    Sameness is decided by ``entry.is_same_entry(other)``. Removal uses full
    equality, so only the exact entry is removed.
    """

    def __init__(self, entries: Iterable[E] = ()):
        self._entries: List[E] = []
        self.set_entries(list(entries))

    def contains(self, to_check: E) -> bool:
        """Returns True if the list holds an entry that is the same entry as to_check"""
        return any(entry.is_same_entry(to_check) for entry in self._entries)

    def add(self, to_add: E) -> None:
        if self.contains(to_add):
            raise DuplicateEntryException()
        self._entries.append(to_add)

    def set_entry(self, target: E, edited: E) -> None:
        """
        Replaces target with edited, keeping its position.

        Raises:
            EntryNotFoundException: target is not in the list
            DuplicateEntryException: edited collides with another entry
        """
        index = self._index_of(target)

        if not target.is_same_entry(edited) and self.contains(edited):
            raise DuplicateEntryException()

        self._entries[index] = edited

    def remove(self, to_remove: E) -> None:
        self._entries.pop(self._index_of(to_remove))

    def set_entries(self, entries: List[E]) -> None:
        if not self._entries_are_unique(entries):
            raise DuplicateEntryException()
        self._entries = list(entries)

    def as_list(self) -> List[E]:
        """Snapshot of the entries; mutating it does not affect the list"""
        return list(self._entries)

    def _index_of(self, target: E) -> int:
        for i, entry in enumerate(self._entries):
            if entry == target:
                return i
        raise EntryNotFoundException()

    @staticmethod
    def _entries_are_unique(entries: List[E]) -> bool:
        for i, entry in enumerate(entries):
            for other in entries[i + 1:]:
                if entry.is_same_entry(other):
                    return False
        return True

    def __iter__(self) -> Iterator[E]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other) -> bool:
        if not isinstance(other, UniqueEntryList):
            return NotImplemented
        return self._entries == other._entries

    def __repr__(self) -> str:
        return f"UniqueEntryList({self._entries!r})"
