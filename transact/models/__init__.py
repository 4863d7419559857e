"""Data models for Transact"""

from .person import Person
from .transaction import Transaction, TransactionId
from .predicates import PREDICATE_SHOW_ALL, DescriptionContainsKeywordsPredicate

__all__ = [
    "Person",
    "Transaction",
    "TransactionId",
    "PREDICATE_SHOW_ALL",
    "DescriptionContainsKeywordsPredicate"
]
