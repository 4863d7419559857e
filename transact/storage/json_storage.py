"""JSON file persistence for the TransactBook"""

import datetime
import json
import shutil
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field, ValidationError

from transact.constants import TransactionType
from transact.models import Person, Transaction, TransactionId
from transact.store import TransactBook
from transact.utils import metrics
from transact.utils.errors import DataLoadingError, DuplicateEntryException
from transact.utils.logging import get_logger

logger = get_logger(__name__)


class JsonAdaptedTransaction(BaseModel):
    """Stored form of a transaction; the staff member is referenced by employee id"""

    transaction_id: str = Field(..., description="Generated identifier")
    type: TransactionType = Field(..., description="Expense or revenue")
    description: str = Field(..., description="What the transaction was for")
    amount: float = Field(..., description="Transaction amount")
    date: datetime.date = Field(..., description="Transaction date")
    staff_id: int = Field(..., description="Employee id of the responsible staff member")

    @classmethod
    def from_model(cls, transaction: Transaction) -> "JsonAdaptedTransaction":
        return cls(
            transaction_id=str(transaction.transaction_id),
            type=transaction.type,
            description=transaction.description,
            amount=transaction.amount,
            date=transaction.date,
            staff_id=transaction.person.employee_id,
        )

    def to_model(self, book: TransactBook) -> Transaction:
        person = book.find_person(self.staff_id)
        if person is None:
            raise DataLoadingError(f"Transaction {self.transaction_id} references unknown staff {self.staff_id}")
        try:
            return Transaction(
                transaction_id=TransactionId(value=self.transaction_id),
                type=self.type,
                description=self.description,
                amount=self.amount,
                date=self.date,
                person=person,
            )
        except ValidationError as e:
            raise DataLoadingError(f"Invalid transaction {self.transaction_id}: {e}")


class JsonSerializableTransactBook(BaseModel):
    """Top-level document written to the data file"""

    persons: List[Person] = Field(default_factory=list)
    transactions: List[JsonAdaptedTransaction] = Field(default_factory=list)

    @classmethod
    def from_model(cls, book: TransactBook) -> "JsonSerializableTransactBook":
        return cls(
            persons=book.persons,
            transactions=[JsonAdaptedTransaction.from_model(t) for t in book.transactions],
        )

    def to_model(self) -> TransactBook:
        book = TransactBook()
        try:
            for person in self.persons:
                book.add_person(person)
            for adapted in self.transactions:
                book.add_transaction(adapted.to_model(book))
        except DuplicateEntryException as e:
            raise DataLoadingError(f"Data file contains duplicate entries: {e}")
        return book


class JsonTransactBookStorage:
    """Reads and writes a TransactBook as a JSON file"""

    def __init__(self, file_path: Path):
        self.file_path = Path(file_path)

    def read_transact_book(self) -> Optional[TransactBook]:
        """
        Load the book from disk.

        Returns:
            The book, or None if the data file does not exist

        Raises:
            DataLoadingError: If the file is unreadable or its content invalid
        """
        if not self.file_path.exists():
            logger.info("Data file not found", path=str(self.file_path))
            return None

        try:
            raw = self.file_path.read_text(encoding="utf-8")
            document = JsonSerializableTransactBook.model_validate_json(raw)
        except OSError as e:
            raise DataLoadingError(f"Unable to read {self.file_path}: {e}")
        except ValidationError as e:
            raise DataLoadingError(f"Invalid data in {self.file_path}: {e}")

        book = document.to_model()
        logger.info("Loaded data file", path=str(self.file_path),
                    persons=len(book.persons), transactions=len(book.transactions))
        return book

    def save_transact_book(self, book: TransactBook) -> None:
        """
        Write the book to disk, creating parent directories as needed.

        Raises:
            DataLoadingError: If the file cannot be written
        """
        document = JsonSerializableTransactBook.from_model(book)
        try:
            self.file_path.parent.mkdir(parents=True, exist_ok=True)
            self.file_path.write_text(
                json.dumps(document.model_dump(mode="json"), indent=2), encoding="utf-8")
        except OSError as e:
            metrics.storage_saves.labels(status="failure").inc()
            logger.error("Failed to save data file", path=str(self.file_path), error=str(e))
            raise DataLoadingError(f"Unable to write {self.file_path}: {e}")

        metrics.storage_saves.labels(status="success").inc()
        logger.debug("Saved data file", path=str(self.file_path))

    def back_up_data_file(self) -> Path:
        """
        Copy the data file to a sibling ".bak" file, replacing any earlier backup.

        Returns:
            Path of the backup

        Raises:
            DataLoadingError: If the copy fails
        """
        backup_path = self.file_path.with_name(self.file_path.name + ".bak")
        try:
            shutil.copy2(self.file_path, backup_path)
        except OSError as e:
            raise DataLoadingError(f"Unable to back up {self.file_path}: {e}")

        logger.warning("Backed up unreadable data file", path=str(self.file_path), backup=str(backup_path))
        return backup_path
