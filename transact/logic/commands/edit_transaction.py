"""Edit an existing transaction"""

import datetime
from typing import Optional

from transact.constants import (
    TabWindow,
    TransactionType,
    PREFIX_TYPE,
    PREFIX_DESCRIPTION,
    PREFIX_AMOUNT,
    PREFIX_DATE,
    PREFIX_STAFF,
)
from transact.logic import messages
from transact.logic.index import Index
from transact.models import Person, Transaction, TransactionId, PREDICATE_SHOW_ALL
from transact.store import ModelManager
from transact.utils.errors import CommandException
from transact.utils.logging import get_logger
from .base import Command, CommandResult

logger = get_logger(__name__)


class EditTransactionDescriptor:
    """
    The fields to change on a transaction. A slot left as None means
    "keep the existing value".
    """

    def __init__(self, to_copy: Optional["EditTransactionDescriptor"] = None):
        self.type: Optional[TransactionType] = None
        self.description: Optional[str] = None
        self.amount: Optional[float] = None
        self.date: Optional[datetime.date] = None
        self.staff: Optional[Person] = None

        if to_copy is not None:
            self.type = to_copy.type
            self.description = to_copy.description
            self.amount = to_copy.amount
            self.date = to_copy.date
            self.staff = to_copy.staff

    def is_any_field_edited(self) -> bool:
        return any(value is not None for value in
                   (self.type, self.description, self.amount, self.date, self.staff))

    def __eq__(self, other) -> bool:
        if other is self:
            return True
        if not isinstance(other, EditTransactionDescriptor):
            return NotImplemented
        return vars(self) == vars(other)

    def __repr__(self) -> str:
        return (f"EditTransactionDescriptor(type={self.type}, description={self.description!r}, "
                f"amount={self.amount}, date={self.date}, staff={self.staff})")


class EditTransactionCommand(Command):
    """Edits the details of the transaction at a displayed index"""

    COMMAND_WORD = "edittransaction"

    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Edits the details of the transaction identified "
        "by the index number used in the displayed transactions list. "
        "Existing values will be overwritten by the input values.\n"
        "Parameters: INDEX (must be a positive integer) "
        f"[{PREFIX_TYPE}TYPE] "
        f"[{PREFIX_DESCRIPTION}DESCRIPTION] "
        f"[{PREFIX_AMOUNT}AMOUNT] "
        f"[{PREFIX_DATE}DATE] "
        f"[{PREFIX_STAFF}EMPLOYEE_ID]\n"
        f"Example: {COMMAND_WORD} 1 {PREFIX_TYPE}E {PREFIX_AMOUNT}10000"
    )
    MESSAGE_EDIT_TRANSACTION_SUCCESS = "Edited Transaction: {}"
    MESSAGE_NOT_EDITED = "At least one field to edit must be provided."
    MESSAGE_DUPLICATE_TRANSACTION = "This transaction already exists in the Transaction book."

    def __init__(self, index: Index, descriptor: EditTransactionDescriptor):
        self.index = index
        self.descriptor = EditTransactionDescriptor(descriptor)

    def execute(self, model: ModelManager) -> CommandResult:
        last_shown_list = model.get_filtered_transaction_list()

        if self.index.zero_based >= len(last_shown_list):
            raise CommandException(messages.MESSAGE_INVALID_TRANSACTION_DISPLAYED_INDEX)

        transaction_to_edit = last_shown_list[self.index.zero_based]
        edited_transaction = create_edited_transaction(transaction_to_edit, self.descriptor)

        if not transaction_to_edit.is_same_entry(edited_transaction) and model.has_transaction(edited_transaction):
            raise CommandException(self.MESSAGE_DUPLICATE_TRANSACTION)

        model.set_transaction(transaction_to_edit, edited_transaction)
        model.update_filtered_person_list(PREDICATE_SHOW_ALL)
        model.update_filtered_transaction_list(PREDICATE_SHOW_ALL)

        logger.info("Edited transaction",
                    old_id=str(transaction_to_edit.transaction_id),
                    new_id=str(edited_transaction.transaction_id))
        return CommandResult(
            self.MESSAGE_EDIT_TRANSACTION_SUCCESS.format(messages.format_transaction(edited_transaction)),
            TabWindow.TRANSACTIONS)


def create_edited_transaction(transaction_to_edit: Transaction,
                              descriptor: EditTransactionDescriptor) -> Transaction:
    """
    Overlays the set descriptor fields onto transaction_to_edit.
    The result always carries a newly generated identifier.
    """
    def pick(override, current):
        return current if override is None else override

    return Transaction(
        transaction_id=TransactionId(),
        type=pick(descriptor.type, transaction_to_edit.type),
        description=pick(descriptor.description, transaction_to_edit.description),
        amount=pick(descriptor.amount, transaction_to_edit.amount),
        date=pick(descriptor.date, transaction_to_edit.date),
        person=pick(descriptor.staff, transaction_to_edit.person),
    )
