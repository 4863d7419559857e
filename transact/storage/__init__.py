"""Persistence of the TransactBook"""

from .json_storage import JsonTransactBookStorage
from .sample_data import get_sample_transact_book

__all__ = ["JsonTransactBookStorage", "get_sample_transact_book"]
