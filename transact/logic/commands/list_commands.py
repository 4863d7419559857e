"""Commands that change what the views show"""

from transact.constants import TabWindow
from transact.logic import messages
from transact.models import PREDICATE_SHOW_ALL, DescriptionContainsKeywordsPredicate
from transact.store import ModelManager
from .base import Command, CommandResult


class ListCommand(Command):
    """Lists all staff"""

    COMMAND_WORD = "list"
    MESSAGE_SUCCESS = "Listed all staff"

    def execute(self, model: ModelManager) -> CommandResult:
        model.update_filtered_person_list(PREDICATE_SHOW_ALL)
        return CommandResult(self.MESSAGE_SUCCESS, TabWindow.ADDRESSBOOK)


class ListTransactionCommand(Command):
    """Lists all transactions"""

    COMMAND_WORD = "listtransaction"
    MESSAGE_SUCCESS = "Listed all transactions"

    def execute(self, model: ModelManager) -> CommandResult:
        model.update_filtered_transaction_list(PREDICATE_SHOW_ALL)
        return CommandResult(self.MESSAGE_SUCCESS, TabWindow.TRANSACTIONS)


class FindTransactionCommand(Command):
    """Shows transactions whose description contains any of the keywords"""

    COMMAND_WORD = "findtransaction"
    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Finds all transactions whose descriptions contain any of "
        "the specified keywords (case-insensitive).\n"
        "Parameters: KEYWORD [MORE_KEYWORDS]...\n"
        f"Example: {COMMAND_WORD} printer toner"
    )

    def __init__(self, predicate: DescriptionContainsKeywordsPredicate):
        self.predicate = predicate

    def execute(self, model: ModelManager) -> CommandResult:
        model.update_filtered_transaction_list(self.predicate)
        shown = len(model.get_filtered_transaction_list())
        return CommandResult(messages.MESSAGE_TRANSACTIONS_LISTED_OVERVIEW.format(shown),
                             TabWindow.TRANSACTIONS)


class HelpCommand(Command):
    """Shows program usage"""

    COMMAND_WORD = "help"
    MESSAGE_USAGE = f"{COMMAND_WORD}: Shows program usage instructions."
    SHOWING_HELP_MESSAGE = "Opened help window."

    def execute(self, model: ModelManager) -> CommandResult:
        return CommandResult(self.SHOWING_HELP_MESSAGE, show_help=True)


class ExitCommand(Command):
    """Terminates the program"""

    COMMAND_WORD = "exit"
    MESSAGE_EXIT_ACKNOWLEDGEMENT = "Exiting Transact as requested ..."

    def execute(self, model: ModelManager) -> CommandResult:
        return CommandResult(self.MESSAGE_EXIT_ACKNOWLEDGEMENT, exit=True)
