"""Shared fixtures for Transact tests"""

import datetime

import pytest

from transact.constants import TransactionType
from transact.models import Person, Transaction
from transact.store import ModelManager, TransactBook


@pytest.fixture
def alice():
    return Person(employee_id=1, name="Alice Pauline", phone="94351253",
                  email="alice@example.com", address="123 Jurong West Ave 6")


@pytest.fixture
def benson():
    return Person(employee_id=2, name="Benson Meier", phone="98765432",
                  email="benson@example.com", address="311 Clementi Ave 2")


@pytest.fixture
def office_chairs(alice):
    return Transaction(type=TransactionType.EXPENSE, description="Office chairs", amount=100,
                       date=datetime.date(2024, 3, 14), person=alice)


@pytest.fixture
def consulting_fee(benson):
    return Transaction(type=TransactionType.REVENUE, description="Consulting fee", amount=2500,
                       date=datetime.date(2024, 3, 20), person=benson)


@pytest.fixture
def book(alice, benson, office_chairs, consulting_fee):
    return TransactBook([alice, benson], [office_chairs, consulting_fee])


@pytest.fixture
def model(book):
    return ModelManager(book)
