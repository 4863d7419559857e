"""Delete a transaction"""

from transact.constants import TabWindow
from transact.logic import messages
from transact.logic.index import Index
from transact.store import ModelManager
from transact.utils.errors import CommandException
from transact.utils.logging import get_logger
from .base import Command, CommandResult

logger = get_logger(__name__)


class DeleteTransactionCommand(Command):
    """Deletes the transaction at a displayed index"""

    COMMAND_WORD = "deletetransaction"

    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Deletes the transaction identified by the index number "
        "used in the displayed transactions list.\n"
        "Parameters: INDEX (must be a positive integer)\n"
        f"Example: {COMMAND_WORD} 1"
    )
    MESSAGE_DELETE_TRANSACTION_SUCCESS = "Deleted Transaction: {}"

    def __init__(self, index: Index):
        self.index = index

    def execute(self, model: ModelManager) -> CommandResult:
        last_shown_list = model.get_filtered_transaction_list()

        if self.index.zero_based >= len(last_shown_list):
            raise CommandException(messages.MESSAGE_INVALID_TRANSACTION_DISPLAYED_INDEX)

        transaction_to_delete = last_shown_list[self.index.zero_based]
        model.delete_transaction(transaction_to_delete)

        logger.info("Deleted transaction", transaction_id=str(transaction_to_delete.transaction_id))
        return CommandResult(
            self.MESSAGE_DELETE_TRANSACTION_SUCCESS.format(messages.format_transaction(transaction_to_delete)),
            TabWindow.TRANSACTIONS)
