"""Custom exceptions for Transact"""


class TransactError(Exception):
    """Base exception for Transact errors"""
    pass


class CommandException(TransactError):
    """Command execution errors reported back to the user"""
    pass


class ParseException(TransactError):
    """User input that does not conform to the expected format"""
    pass


class DuplicateEntryException(TransactError):
    """
    Signals that the operation will result in duplicate entries.

    Persons and transactions are duplicates when they are the same entry,
    which is a weaker notion than full equality.
    """

    def __init__(self):
        super().__init__("Operation would result in duplicate entries")


class EntryNotFoundException(TransactError):
    """The entry to replace or remove is not in the list"""

    def __init__(self):
        super().__init__("Entry not found in the list")


class DataLoadingError(TransactError):
    """Reading or writing the data file failed"""
    pass


class ConfigurationError(TransactError):
    """Configuration loading errors"""
    pass
