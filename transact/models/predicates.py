"""Predicates that drive the filtered views"""

from typing import Any, Callable, List

from .transaction import Transaction

Predicate = Callable[[Any], bool]


def PREDICATE_SHOW_ALL(entry: Any) -> bool:
    """Matches every entry"""
    return True


class DescriptionContainsKeywordsPredicate:
    """Matches transactions whose description contains any keyword (case-insensitive, whole word)"""

    def __init__(self, keywords: List[str]):
        self.keywords = list(keywords)

    def __call__(self, transaction: Transaction) -> bool:
        words = transaction.description.lower().split()
        return any(keyword.lower() in words for keyword in self.keywords)

    def __eq__(self, other) -> bool:
        if not isinstance(other, DescriptionContainsKeywordsPredicate):
            return NotImplemented
        return self.keywords == other.keywords

    def __repr__(self) -> str:
        return f"DescriptionContainsKeywordsPredicate(keywords={self.keywords!r})"
