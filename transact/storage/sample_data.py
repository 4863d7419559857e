"""Seed data for a first run"""

import datetime

from transact.constants import TransactionType
from transact.models import Person, Transaction
from transact.store import TransactBook


def get_sample_persons():
    return [
        Person(employee_id=1001, name="Alex Yeoh", phone="87438807",
               email="alexyeoh@example.com", address="Blk 30 Geylang Street 29, #06-40"),
        Person(employee_id=1002, name="Bernice Yu", phone="99272758",
               email="berniceyu@example.com", address="Blk 30 Lorong 3 Serangoon Gardens, #07-18"),
        Person(employee_id=1003, name="Charlotte Oliveiro", phone="93210283",
               email="charlotte@example.com", address="Blk 11 Ang Mo Kio Street 74, #11-04"),
    ]


def get_sample_transactions(persons):
    alex, bernice, charlotte = persons
    return [
        Transaction(type=TransactionType.EXPENSE, description="Office chairs", amount=420.50,
                    date=datetime.date(2024, 3, 14), person=alex),
        Transaction(type=TransactionType.REVENUE, description="Consulting invoice 118", amount=3200.00,
                    date=datetime.date(2024, 3, 20), person=bernice),
        Transaction(type=TransactionType.EXPENSE, description="Printer toner", amount=85.90,
                    date=datetime.date(2024, 4, 2), person=charlotte),
    ]


def get_sample_transact_book() -> TransactBook:
    persons = get_sample_persons()
    return TransactBook(persons, get_sample_transactions(persons))
