"""Constants and enums for Transact"""

from enum import Enum


class TransactionType(str, Enum):
    """Transaction categories"""
    EXPENSE = "E"
    REVENUE = "R"


class TabWindow(str, Enum):
    """Which tab the UI should bring to the front after a command"""
    ADDRESSBOOK = "addressbook"
    TRANSACTIONS = "transactions"


# Command-line prefixes
PREFIX_TYPE = "ty/"
PREFIX_DESCRIPTION = "desc/"
PREFIX_AMOUNT = "amt/"
PREFIX_DATE = "on/"
PREFIX_STAFF = "by/"

# Accepted date input formats, tried in order
DATE_INPUT_FORMATS = ("%Y-%m-%d", "%d/%m/%Y")
DATE_DISPLAY_FORMAT = "%Y-%m-%d"

AMOUNT_DECIMAL_PLACES = 2
MAX_AMOUNT = 999_999_999_999.99

# Default configuration values
DEFAULT_LOG_LEVEL = "INFO"
