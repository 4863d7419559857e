"""In-memory model of the book plus the currently displayed views"""

from typing import List, Optional

from transact.models import Person, Transaction, PREDICATE_SHOW_ALL
from transact.models.predicates import Predicate
from transact.utils.logging import get_logger
from .transact_book import TransactBook

logger = get_logger(__name__)


class ModelManager:
    """
    Holds the TransactBook and the predicates of the person and transaction
    views. Filtered lists are recomputed from the book on every call, so they
    always reflect the latest contents.
    """

    def __init__(self, transact_book: Optional[TransactBook] = None):
        self._book = TransactBook.copy_of(transact_book) if transact_book else TransactBook()
        self._person_predicate: Predicate = PREDICATE_SHOW_ALL
        self._transaction_predicate: Predicate = PREDICATE_SHOW_ALL

        logger.debug("Model initialised",
                     persons=len(self._book.persons),
                     transactions=len(self._book.transactions))

    @property
    def transact_book(self) -> TransactBook:
        return self._book

    def set_transact_book(self, transact_book: TransactBook) -> None:
        self._book.reset_data(transact_book)

    # Persons

    def has_person(self, person: Person) -> bool:
        return self._book.has_person(person)

    def add_person(self, person: Person) -> None:
        self._book.add_person(person)
        self.update_filtered_person_list(PREDICATE_SHOW_ALL)

    def find_person(self, employee_id: int) -> Optional[Person]:
        return self._book.find_person(employee_id)

    def get_filtered_person_list(self) -> List[Person]:
        return [p for p in self._book.persons if self._person_predicate(p)]

    def update_filtered_person_list(self, predicate: Predicate) -> None:
        self._person_predicate = predicate

    # Transactions

    def has_transaction(self, transaction: Transaction) -> bool:
        return self._book.has_transaction(transaction)

    def add_transaction(self, transaction: Transaction) -> None:
        self._book.add_transaction(transaction)
        self.update_filtered_transaction_list(PREDICATE_SHOW_ALL)

    def set_transaction(self, target: Transaction, edited: Transaction) -> None:
        self._book.set_transaction(target, edited)

    def delete_transaction(self, target: Transaction) -> None:
        self._book.remove_transaction(target)

    def get_filtered_transaction_list(self) -> List[Transaction]:
        return [t for t in self._book.transactions if self._transaction_predicate(t)]

    def update_filtered_transaction_list(self, predicate: Predicate) -> None:
        self._transaction_predicate = predicate

    def __eq__(self, other) -> bool:
        if not isinstance(other, ModelManager):
            return NotImplemented
        return (
            self._book == other._book
            and self.get_filtered_person_list() == other.get_filtered_person_list()
            and self.get_filtered_transaction_list() == other.get_filtered_transaction_list()
        )
