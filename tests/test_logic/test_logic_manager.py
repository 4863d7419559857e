"""Tests for LogicManager and the read-eval-print loop"""

import io
import math

import pytest
from prometheus_client import REGISTRY

from transact.logic.commands import EditTransactionCommand
from transact.logic.logic_manager import LogicManager
from transact.main import run, init_model
from transact.storage import JsonTransactBookStorage
from transact.store import ModelManager, TransactBook
from transact.utils.errors import CommandException, ParseException


def counter_value(command, status):
    value = REGISTRY.get_sample_value("commands_executed_total", {"command": command, "status": status})
    return value or 0.0


def test_execute_edit_saves_book(model, tmp_path):
    storage = JsonTransactBookStorage(tmp_path / "book.json")
    logic = LogicManager(model, storage)

    result = logic.execute("edittransaction 1 amt/200")

    assert result.feedback_to_user.startswith("Edited Transaction: ")
    saved = storage.read_transact_book()
    assert saved.transactions[0].amount == 200.0
    assert saved == model.transact_book


def test_execute_counts_commands(model):
    logic = LogicManager(model)
    before_ok = counter_value("edittransaction", "success")
    before_failed = counter_value("edittransaction", "failure")

    logic.execute("edittransaction 1 desc/Office desks")
    with pytest.raises(CommandException):
        logic.execute("edittransaction 9 desc/Office desks")

    assert counter_value("edittransaction", "success") == before_ok + 1
    assert counter_value("edittransaction", "failure") == before_failed + 1


def test_execute_failure_does_not_save(model, tmp_path):
    storage = JsonTransactBookStorage(tmp_path / "book.json")
    logic = LogicManager(model, storage)

    with pytest.raises(ParseException):
        logic.execute("edittransaction 1")
    with pytest.raises(CommandException, match=EditTransactionCommand.MESSAGE_DUPLICATE_TRANSACTION):
        logic.execute("edittransaction 1 ty/R desc/Consulting fee amt/2500 on/2024-03-20 by/2")

    assert storage.read_transact_book() is None


def test_run_loop_reports_errors_and_exits(model):
    logic = LogicManager(model)
    out = io.StringIO()
    lines = ["edittransaction 7 amt/1\n", "\n", "listtransaction\n", "exit\n", "list\n"]

    assert run(logic, lines, out=out) == 0

    output = out.getvalue()
    assert "The transaction index provided is invalid" in output
    assert "Listed all transactions" in output
    assert "1. " in output and "Office chairs" in output
    assert "Exiting Transact" in output
    assert "Listed all staff" not in output


def test_init_model_seeds_sample_data(tmp_path):
    storage = JsonTransactBookStorage(tmp_path / "book.json")
    assert len(init_model(storage).get_filtered_transaction_list()) == 3
    assert init_model(storage, seed_sample_data=False) == ModelManager()


def test_init_model_with_corrupt_file(tmp_path):
    path = tmp_path / "book.json"
    path.write_text("[]")
    assert init_model(JsonTransactBookStorage(path)) == ModelManager()


def test_corrupt_file_is_backed_up_before_overwrite(tmp_path):
    """The original content survives the first save after a failed load"""
    path = tmp_path / "book.json"
    path.write_text("{not json")
    storage = JsonTransactBookStorage(path)

    logic = LogicManager(init_model(storage), storage)
    logic.execute("list")

    assert (tmp_path / "book.json.bak").read_text() == "{not json"
    assert storage.read_transact_book() == TransactBook()


def test_huge_amount_is_rejected(model, tmp_path):
    storage = JsonTransactBookStorage(tmp_path / "book.json")
    logic = LogicManager(model, storage)

    with pytest.raises(ParseException, match="Amount must be a positive number"):
        logic.execute("edittransaction 1 amt/" + "9" * 400)

    assert all(math.isfinite(t.amount) for t in model.transact_book.transactions)
    assert storage.read_transact_book() is None
