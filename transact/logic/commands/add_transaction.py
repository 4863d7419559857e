"""Add a transaction"""

from transact.constants import (
    TabWindow,
    PREFIX_TYPE,
    PREFIX_DESCRIPTION,
    PREFIX_AMOUNT,
    PREFIX_DATE,
    PREFIX_STAFF,
)
from transact.logic import messages
from transact.models import Transaction
from transact.store import ModelManager
from transact.utils.errors import CommandException
from transact.utils.logging import get_logger
from .base import Command, CommandResult

logger = get_logger(__name__)


class AddTransactionCommand(Command):
    """Adds a transaction to the book"""

    COMMAND_WORD = "addtransaction"

    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Adds a transaction to the Transaction book. "
        "Parameters: "
        f"{PREFIX_TYPE}TYPE "
        f"{PREFIX_DESCRIPTION}DESCRIPTION "
        f"{PREFIX_AMOUNT}AMOUNT "
        f"{PREFIX_DATE}DATE "
        f"{PREFIX_STAFF}EMPLOYEE_ID\n"
        f"Example: {COMMAND_WORD} {PREFIX_TYPE}E {PREFIX_DESCRIPTION}Printer toner "
        f"{PREFIX_AMOUNT}85.90 {PREFIX_DATE}2024-03-01 {PREFIX_STAFF}1001"
    )
    MESSAGE_SUCCESS = "New transaction added: {}"
    MESSAGE_DUPLICATE_TRANSACTION = "This transaction already exists in the Transaction book."

    def __init__(self, transaction: Transaction):
        self.to_add = transaction

    def execute(self, model: ModelManager) -> CommandResult:
        if model.has_transaction(self.to_add):
            raise CommandException(self.MESSAGE_DUPLICATE_TRANSACTION)

        model.add_transaction(self.to_add)
        logger.info("Added transaction", transaction_id=str(self.to_add.transaction_id))
        return CommandResult(self.MESSAGE_SUCCESS.format(messages.format_transaction(self.to_add)),
                             TabWindow.TRANSACTIONS)

    def __eq__(self, other) -> bool:
        # Identifiers are generated, so compare by what the transaction records
        if not isinstance(other, AddTransactionCommand):
            return NotImplemented
        return self.to_add.is_same_entry(other.to_add)
