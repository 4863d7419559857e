"""Tests for UniqueEntryList, TransactBook and ModelManager"""

import pytest

from transact.models import TransactionId, PREDICATE_SHOW_ALL, DescriptionContainsKeywordsPredicate
from transact.store import UniqueEntryList, TransactBook, ModelManager
from transact.utils.errors import DuplicateEntryException, EntryNotFoundException


def test_duplicate_entry_exception_message():
    assert str(DuplicateEntryException()) == "Operation would result in duplicate entries"


def test_entry_list_add_rejects_same_entry(office_chairs):
    entries = UniqueEntryList([office_chairs])
    twin = office_chairs.model_copy(update={"transaction_id": TransactionId()})

    with pytest.raises(DuplicateEntryException):
        entries.add(twin)
    assert len(entries) == 1


def test_entry_list_rejects_duplicates_on_construction(office_chairs):
    twin = office_chairs.model_copy(update={"transaction_id": TransactionId()})
    with pytest.raises(DuplicateEntryException):
        UniqueEntryList([office_chairs, twin])


def test_entry_list_set_entry_keeps_position(office_chairs, consulting_fee):
    entries = UniqueEntryList([office_chairs, consulting_fee])
    edited = office_chairs.model_copy(update={"description": "Office desks"})

    entries.set_entry(office_chairs, edited)
    assert entries.as_list() == [edited, consulting_fee]


def test_entry_list_set_entry_to_same_entry_is_allowed(office_chairs):
    """Replacing an entry with a same-entry copy is not a duplicate"""
    entries = UniqueEntryList([office_chairs])
    renewed = office_chairs.model_copy(update={"transaction_id": TransactionId()})

    entries.set_entry(office_chairs, renewed)
    assert entries.as_list() == [renewed]


def test_entry_list_set_entry_rejects_collision(office_chairs, consulting_fee):
    entries = UniqueEntryList([office_chairs, consulting_fee])
    collides = consulting_fee.model_copy(update={"transaction_id": TransactionId()})

    with pytest.raises(DuplicateEntryException):
        entries.set_entry(office_chairs, collides)
    assert entries.as_list() == [office_chairs, consulting_fee]


def test_entry_list_set_entry_missing_target(office_chairs, consulting_fee):
    entries = UniqueEntryList([consulting_fee])
    with pytest.raises(EntryNotFoundException):
        entries.set_entry(office_chairs, office_chairs)


def test_entry_list_remove_uses_full_equality(office_chairs):
    entries = UniqueEntryList([office_chairs])
    twin = office_chairs.model_copy(update={"transaction_id": TransactionId()})

    with pytest.raises(EntryNotFoundException):
        entries.remove(twin)
    entries.remove(office_chairs)
    assert len(entries) == 0


def test_entry_list_as_list_is_a_snapshot(office_chairs):
    entries = UniqueEntryList([office_chairs])
    snapshot = entries.as_list()
    snapshot.clear()
    assert len(entries) == 1


def test_book_person_operations(book, alice):
    assert book.has_person(alice)
    assert book.find_person(1) == alice
    assert book.find_person(99) is None

    with pytest.raises(DuplicateEntryException):
        book.add_person(alice.model_copy(update={"name": "Someone Else"}))


def test_book_reset_data(book):
    other = TransactBook()
    other.reset_data(book)
    assert other == book


def test_model_copies_book(book, office_chairs):
    model = ModelManager(book)
    model.delete_transaction(office_chairs)
    assert book.has_transaction(office_chairs)
    assert not model.has_transaction(office_chairs)


def test_model_filtered_transaction_list(model, office_chairs, consulting_fee):
    assert model.get_filtered_transaction_list() == [office_chairs, consulting_fee]

    model.update_filtered_transaction_list(DescriptionContainsKeywordsPredicate(["consulting"]))
    assert model.get_filtered_transaction_list() == [consulting_fee]

    model.update_filtered_transaction_list(PREDICATE_SHOW_ALL)
    assert len(model.get_filtered_transaction_list()) == 2


def test_model_filtered_list_tracks_book_changes(model, office_chairs):
    model.update_filtered_transaction_list(DescriptionContainsKeywordsPredicate(["chairs"]))
    edited = office_chairs.model_copy(update={"amount": 300.0})

    model.set_transaction(office_chairs, edited)
    assert model.get_filtered_transaction_list() == [edited]


def test_model_add_transaction_resets_view(model, office_chairs):
    model.update_filtered_transaction_list(lambda t: False)
    extra = office_chairs.model_copy(update={"description": "Standing desk", "transaction_id": TransactionId()})

    model.add_transaction(extra)
    assert extra in model.get_filtered_transaction_list()
    assert len(model.get_filtered_transaction_list()) == 3


def test_model_filtered_person_list(model, alice, benson):
    model.update_filtered_person_list(lambda p: p.employee_id == 2)
    assert model.get_filtered_person_list() == [benson]
    model.update_filtered_person_list(PREDICATE_SHOW_ALL)
    assert model.get_filtered_person_list() == [alice, benson]
