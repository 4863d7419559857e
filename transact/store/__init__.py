"""Record store"""

from .entry_list import UniqueEntryList
from .transact_book import TransactBook
from .model_manager import ModelManager

__all__ = ["UniqueEntryList", "TransactBook", "ModelManager"]
