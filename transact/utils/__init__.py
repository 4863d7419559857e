"""Utility modules"""

from .config_loader import load_config, save_config, get_storage_path
from .errors import (
    TransactError,
    CommandException,
    ParseException,
    DuplicateEntryException,
    EntryNotFoundException,
    DataLoadingError,
    ConfigurationError
)

__all__ = [
    "load_config",
    "save_config",
    "get_storage_path",
    "TransactError",
    "CommandException",
    "ParseException",
    "DuplicateEntryException",
    "EntryNotFoundException",
    "DataLoadingError",
    "ConfigurationError"
]
