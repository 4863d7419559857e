"""Staff records and transactions held together"""

from typing import List, Optional

from transact.models import Person, Transaction
from .entry_list import UniqueEntryList


class TransactBook:
    """Duplicates are not allowed among persons or among transactions"""

    def __init__(self, persons: List[Person] = (), transactions: List[Transaction] = ()):
        self._persons: UniqueEntryList[Person] = UniqueEntryList(persons)
        self._transactions: UniqueEntryList[Transaction] = UniqueEntryList(transactions)

    @classmethod
    def copy_of(cls, other: "TransactBook") -> "TransactBook":
        return cls(other.persons, other.transactions)

    def reset_data(self, other: "TransactBook") -> None:
        self._persons.set_entries(other.persons)
        self._transactions.set_entries(other.transactions)

    # Persons

    @property
    def persons(self) -> List[Person]:
        return self._persons.as_list()

    def has_person(self, person: Person) -> bool:
        return self._persons.contains(person)

    def add_person(self, person: Person) -> None:
        self._persons.add(person)

    def set_person(self, target: Person, edited: Person) -> None:
        self._persons.set_entry(target, edited)

    def remove_person(self, person: Person) -> None:
        self._persons.remove(person)

    def find_person(self, employee_id: int) -> Optional[Person]:
        for person in self._persons:
            if person.employee_id == employee_id:
                return person
        return None

    # Transactions

    @property
    def transactions(self) -> List[Transaction]:
        return self._transactions.as_list()

    def has_transaction(self, transaction: Transaction) -> bool:
        return self._transactions.contains(transaction)

    def add_transaction(self, transaction: Transaction) -> None:
        self._transactions.add(transaction)

    def set_transaction(self, target: Transaction, edited: Transaction) -> None:
        self._transactions.set_entry(target, edited)

    def remove_transaction(self, transaction: Transaction) -> None:
        self._transactions.remove(transaction)

    def __eq__(self, other) -> bool:
        if not isinstance(other, TransactBook):
            return NotImplemented
        return self._persons == other._persons and self._transactions == other._transactions

    def __repr__(self) -> str:
        return f"TransactBook(persons={len(self._persons)}, transactions={len(self._transactions)})"
