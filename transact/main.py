"""Main entry point for Transact"""

import sys
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables FIRST, before any other imports
env_path = Path(__file__).parent.parent / '.env'
load_dotenv(dotenv_path=env_path)

from transact.constants import TabWindow
from transact.logic import messages
from transact.logic.commands import (
    AddTransactionCommand,
    DeleteTransactionCommand,
    EditTransactionCommand,
    FindTransactionCommand,
    HelpCommand,
)
from transact.logic.logic_manager import LogicManager
from transact.storage import JsonTransactBookStorage, get_sample_transact_book
from transact.store import ModelManager
from transact.utils.config_loader import load_config, get_storage_path, get_log_level
from transact.utils.errors import CommandException, ParseException, DataLoadingError
from transact.utils.logging import get_logger, set_global_level

logger = get_logger(__name__)

HELP_TEXT = "\n\n".join([
    AddTransactionCommand.MESSAGE_USAGE,
    EditTransactionCommand.MESSAGE_USAGE,
    DeleteTransactionCommand.MESSAGE_USAGE,
    FindTransactionCommand.MESSAGE_USAGE,
    "listtransaction: Lists all transactions.",
    "list: Lists all staff.",
    HelpCommand.MESSAGE_USAGE,
    "exit: Exits the program.",
])


def init_model(storage: JsonTransactBookStorage, seed_sample_data: bool = True) -> ModelManager:
    """
    Build the model from the data file.
    A missing file is seeded with sample data. An unreadable one is copied
    to a ".bak" file before starting empty.

    Raises:
        DataLoadingError: If an unreadable data file cannot be backed up
    """
    try:
        book = storage.read_transact_book()
    except DataLoadingError as e:
        backup_path = storage.back_up_data_file()
        logger.warning(f"Data file could not be loaded, starting with an empty book: {e}",
                       backup=str(backup_path))
        return ModelManager()

    if book is None:
        if not seed_sample_data:
            return ModelManager()
        logger.info("Starting with sample data")
        book = get_sample_transact_book()

    return ModelManager(book)


def print_transactions(logic: LogicManager, out=sys.stdout):
    for i, transaction in enumerate(logic.get_filtered_transaction_list(), start=1):
        print(f"{i}. {messages.format_transaction(transaction)}", file=out)


def print_staff(logic: LogicManager, out=sys.stdout):
    for i, person in enumerate(logic.get_filtered_person_list(), start=1):
        print(f"{i}. {messages.format_person(person)}", file=out)


def run(logic: LogicManager, lines, prompt: str = "", out=sys.stdout) -> int:
    """Read-eval-print loop over lines of input. Returns the process exit code."""
    for line in lines:
        if line.strip():
            try:
                result = logic.execute(line)
            except (ParseException, CommandException) as e:
                print(str(e), file=out)
            else:
                print(result.feedback_to_user, file=out)
                if result.show_help:
                    print(HELP_TEXT, file=out)
                if result.exit:
                    return 0
                if result.tab == TabWindow.ADDRESSBOOK:
                    print_staff(logic, out)
                elif result.tab == TabWindow.TRANSACTIONS:
                    print_transactions(logic, out)
        if prompt:
            print(prompt, end="", file=out, flush=True)
    return 0


def main(config_path: str = None) -> int:
    """Main entry point"""
    config = load_config(config_path)
    set_global_level(get_log_level(config))

    storage = JsonTransactBookStorage(get_storage_path(config))
    model = init_model(storage, config['storage'].get('seed_sample_data', True))
    logic = LogicManager(model, storage)

    app_config = config.get('app', {})
    prompt = app_config.get('prompt', "> ")
    logger.info(f"Starting {app_config.get('name', 'Transact')}", data_file=str(storage.file_path))

    print(prompt, end="", flush=True)
    try:
        return run(logic, sys.stdin, prompt)
    except DataLoadingError as e:
        logger.error(f"Stopping, could not save data: {e}")
        raise


if __name__ == "__main__":
    sys.exit(main())
