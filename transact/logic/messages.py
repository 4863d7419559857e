"""User-facing messages and entry formatting"""

from transact.constants import DATE_DISPLAY_FORMAT
from transact.models import Person, Transaction

MESSAGE_UNKNOWN_COMMAND = "Unknown command"
MESSAGE_INVALID_COMMAND_FORMAT = "Invalid command format! \n{}"
MESSAGE_INVALID_TRANSACTION_DISPLAYED_INDEX = "The transaction index provided is invalid"
MESSAGE_TRANSACTIONS_LISTED_OVERVIEW = "{} transactions listed!"
MESSAGE_DUPLICATE_PREFIXES = "Multiple values specified for the following single-valued field(s): {}"
MESSAGE_UNKNOWN_STAFF = "No staff member has employee id {}"


def format_person(person: Person) -> str:
    return (f"{person.name}; Employee ID: {person.employee_id}; Phone: {person.phone}; "
            f"Email: {person.email}; Address: {person.address}")


def format_transaction(transaction: Transaction) -> str:
    """Render a transaction for display in command feedback"""
    return (f"{transaction.transaction_id}; Type: {transaction.type.value}; "
            f"Description: {transaction.description}; Amount: {transaction.amount:.2f}; "
            f"Date: {transaction.date.strftime(DATE_DISPLAY_FORMAT)}; "
            f"Staff: {transaction.person.name}")
