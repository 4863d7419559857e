"""Tests for EditTransactionCommand and EditTransactionDescriptor"""

import datetime

import pytest

from transact.constants import TabWindow, TransactionType
from transact.logic import messages
from transact.logic.commands import (
    CommandResult,
    EditTransactionCommand,
    EditTransactionDescriptor,
    create_edited_transaction,
)
from transact.logic.index import Index
from transact.models import DescriptionContainsKeywordsPredicate
from transact.store import ModelManager, TransactBook
from transact.utils.errors import CommandException


def descriptor(**fields):
    result = EditTransactionDescriptor()
    for name, value in fields.items():
        setattr(result, name, value)
    return result


def test_descriptor_starts_empty():
    empty = EditTransactionDescriptor()
    assert not empty.is_any_field_edited()
    assert empty.type is None and empty.staff is None


def test_descriptor_any_field_edited(benson):
    assert descriptor(amount=5.0).is_any_field_edited()
    assert descriptor(staff=benson).is_any_field_edited()


def test_descriptor_copy_is_independent(benson):
    original = descriptor(description="Office desks", amount=150.0)
    copy = EditTransactionDescriptor(original)
    assert copy == original

    copy.amount = 999.0
    copy.staff = benson
    assert original.amount == 150.0
    assert original.staff is None
    assert copy != original


def test_command_keeps_own_descriptor_copy(model):
    shared = descriptor(amount=200.0)
    command = EditTransactionCommand(Index.from_one_based(1), shared)
    shared.amount = 1.0

    command.execute(model)
    assert model.get_filtered_transaction_list()[0].amount == 200.0


def test_edit_single_field(model, office_chairs):
    """Amount changes, everything else is kept and the identifier is new"""
    command = EditTransactionCommand(Index.from_zero_based(0), descriptor(amount=200.0))

    result = command.execute(model)

    transactions = model.get_filtered_transaction_list()
    edited = transactions[0]
    assert len(transactions) == 2
    assert edited.amount == 200.0
    assert edited.type == office_chairs.type
    assert edited.description == office_chairs.description
    assert edited.date == office_chairs.date
    assert edited.person == office_chairs.person
    assert edited.transaction_id != office_chairs.transaction_id
    assert office_chairs not in transactions

    expected_message = EditTransactionCommand.MESSAGE_EDIT_TRANSACTION_SUCCESS.format(
        messages.format_transaction(edited))
    assert result == CommandResult(expected_message, TabWindow.TRANSACTIONS)
    assert messages.format_transaction(edited) in result.feedback_to_user


def test_edit_all_fields(model, benson):
    new_date = datetime.date(2024, 5, 1)
    command = EditTransactionCommand(Index.from_one_based(1), descriptor(
        type=TransactionType.REVENUE, description="Chair resale", amount=60.0,
        date=new_date, staff=benson))

    command.execute(model)

    edited = model.get_filtered_transaction_list()[0]
    assert edited.type is TransactionType.REVENUE
    assert edited.description == "Chair resale"
    assert edited.amount == 60.0
    assert edited.date == new_date
    assert edited.person == benson


def test_edit_without_changes_is_not_a_duplicate(model, office_chairs):
    """A transaction edited to itself only gets a new identifier"""
    command = EditTransactionCommand(Index.from_one_based(1), descriptor(amount=office_chairs.amount))

    command.execute(model)

    edited = model.get_filtered_transaction_list()[0]
    assert edited.is_same_entry(office_chairs)
    assert edited.transaction_id != office_chairs.transaction_id


def test_edit_invalid_index_leaves_store_unchanged(model):
    before = model.transact_book.transactions
    command = EditTransactionCommand(Index.from_one_based(3), descriptor(amount=1.0))

    with pytest.raises(CommandException, match=messages.MESSAGE_INVALID_TRANSACTION_DISPLAYED_INDEX):
        command.execute(model)
    assert model.transact_book.transactions == before


def test_edit_index_checks_filtered_list(model):
    """Index 2 exists in the book but not in the filtered view"""
    model.update_filtered_transaction_list(DescriptionContainsKeywordsPredicate(["chairs"]))
    command = EditTransactionCommand(Index.from_one_based(2), descriptor(amount=1.0))

    with pytest.raises(CommandException):
        command.execute(model)


def test_edit_into_duplicate_fails(model, office_chairs, consulting_fee):
    before = model.transact_book.transactions
    command = EditTransactionCommand(Index.from_one_based(1), descriptor(
        type=consulting_fee.type, description=consulting_fee.description,
        amount=consulting_fee.amount, date=consulting_fee.date, staff=consulting_fee.person))

    with pytest.raises(CommandException, match=EditTransactionCommand.MESSAGE_DUPLICATE_TRANSACTION):
        command.execute(model)
    assert model.transact_book.transactions == before


def test_edit_resets_filtered_views(model):
    model.update_filtered_transaction_list(DescriptionContainsKeywordsPredicate(["chairs"]))
    model.update_filtered_person_list(lambda p: False)

    EditTransactionCommand(Index.from_one_based(1), descriptor(description="Office desks")).execute(model)

    assert len(model.get_filtered_transaction_list()) == 2
    assert len(model.get_filtered_person_list()) == 2


def test_edit_on_filtered_view_edits_right_entry(model, office_chairs, consulting_fee):
    model.update_filtered_transaction_list(DescriptionContainsKeywordsPredicate(["consulting"]))

    EditTransactionCommand(Index.from_one_based(1), descriptor(amount=2600.0)).execute(model)

    transactions = model.get_filtered_transaction_list()
    assert transactions[0] == office_chairs
    assert transactions[1].amount == 2600.0
    assert transactions[1].description == consulting_fee.description


def test_create_edited_transaction_always_new_id(office_chairs):
    first = create_edited_transaction(office_chairs, EditTransactionDescriptor())
    second = create_edited_transaction(office_chairs, EditTransactionDescriptor())
    assert first.is_same_entry(office_chairs)
    assert len({str(office_chairs.transaction_id), str(first.transaction_id), str(second.transaction_id)}) == 3


def test_command_equality(benson):
    first = EditTransactionCommand(Index.from_one_based(1), descriptor(amount=5.0))
    same = EditTransactionCommand(Index.from_one_based(1), descriptor(amount=5.0))
    assert first == same
    assert first != EditTransactionCommand(Index.from_one_based(2), descriptor(amount=5.0))
    assert first != EditTransactionCommand(Index.from_one_based(1), descriptor(staff=benson))
    assert first != "edittransaction 1 amt/5"


def test_single_transaction_scenario(alice, office_chairs):
    model = ModelManager(TransactBook([alice], [office_chairs]))

    result = EditTransactionCommand(Index.from_zero_based(0), descriptor(amount=200.0)).execute(model)

    [edited] = model.transact_book.transactions
    assert edited.amount == 200.0
    assert (edited.type, edited.description, edited.date, edited.person) == (
        office_chairs.type, office_chairs.description, office_chairs.date, office_chairs.person)
    assert edited.transaction_id != office_chairs.transaction_id
    assert messages.format_transaction(edited) in result.feedback_to_user
