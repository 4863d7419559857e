"""Runs user input against the model and persists the result"""

from typing import List, Optional

from transact.logic.commands import CommandResult
from transact.logic.parser import TransactParser
from transact.models import Person, Transaction
from transact.storage import JsonTransactBookStorage
from transact.store import ModelManager
from transact.utils import metrics
from transact.utils.errors import CommandException, ParseException
from transact.utils.logging import get_logger

logger = get_logger(__name__)


class LogicManager:
    """Parses a line of input, executes it, then saves the book"""

    def __init__(self, model: ModelManager, storage: Optional[JsonTransactBookStorage] = None):
        self.model = model
        self.storage = storage
        self.parser = TransactParser(staff_lookup=model.find_person)

    def execute(self, command_text: str) -> CommandResult:
        """
        Raises:
            ParseException: If the input is malformed
            CommandException: If the command cannot be carried out
            DataLoadingError: If the book could not be saved
        """
        logger.info("Executing command", command_text=command_text)

        try:
            command = self.parser.parse_command(command_text)
        except ParseException as e:
            metrics.record_command("unparsed", success=False)
            logger.warning("Could not parse command", reason=str(e))
            raise

        try:
            result = command.execute(self.model)
        except CommandException as e:
            metrics.record_command(command.COMMAND_WORD, success=False)
            logger.warning("Command rejected", command=command.COMMAND_WORD, reason=str(e))
            raise

        metrics.record_command(command.COMMAND_WORD, success=True)
        book = self.model.transact_book
        metrics.update_store_gauges(len(book.transactions), len(book.persons))

        if self.storage is not None:
            self.storage.save_transact_book(book)

        return result

    def get_filtered_transaction_list(self) -> List[Transaction]:
        return self.model.get_filtered_transaction_list()

    def get_filtered_person_list(self) -> List[Person]:
        return self.model.get_filtered_person_list()
