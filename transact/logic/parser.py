"""Turns user input text into commands"""

import datetime
import re
from decimal import Decimal, InvalidOperation
from typing import Callable, Dict, List, Optional

from transact.constants import (
    TransactionType,
    DATE_INPUT_FORMATS,
    AMOUNT_DECIMAL_PLACES,
    MAX_AMOUNT,
    PREFIX_TYPE,
    PREFIX_DESCRIPTION,
    PREFIX_AMOUNT,
    PREFIX_DATE,
    PREFIX_STAFF,
)
from transact.logic import messages
from transact.logic.commands import (
    Command,
    AddTransactionCommand,
    DeleteTransactionCommand,
    EditTransactionCommand,
    EditTransactionDescriptor,
    ListCommand,
    ListTransactionCommand,
    FindTransactionCommand,
    HelpCommand,
    ExitCommand,
)
from transact.logic.index import Index
from transact.models import Person, Transaction, DescriptionContainsKeywordsPredicate
from transact.utils.errors import ParseException

StaffLookup = Callable[[int], Optional[Person]]

MESSAGE_INVALID_INDEX = "Index is not a non-zero unsigned integer."
MESSAGE_INVALID_TYPE = "Type must be E (expense) or R (revenue)."
MESSAGE_INVALID_DESCRIPTION = "Description must not be blank."
MESSAGE_INVALID_AMOUNT = (
    f"Amount must be a positive number no larger than {MAX_AMOUNT:,.2f} "
    f"with at most {AMOUNT_DECIMAL_PLACES} decimal places."
)
MESSAGE_INVALID_DATE = "Date must be in YYYY-MM-DD or DD/MM/YYYY format."
MESSAGE_INVALID_EMPLOYEE_ID = "Employee id must be a positive integer."

BASIC_COMMAND_FORMAT = re.compile(r"^(?P<command_word>\S+)(?P<arguments>.*)$", re.DOTALL)
AMOUNT_FORMAT = re.compile(r"^[0-9]+(\.[0-9]{1,%d})?$" % AMOUNT_DECIMAL_PLACES)
UNSIGNED_INT_FORMAT = re.compile(r"^[0-9]+$")


class ArgumentMultimap:
    """Values of each prefix found in an argument string, in order of appearance"""

    def __init__(self):
        self._values: Dict[str, List[str]] = {}

    def put(self, prefix: str, value: str) -> None:
        self._values.setdefault(prefix, []).append(value)

    def get_value(self, prefix: str) -> Optional[str]:
        """Last value of prefix, or None if absent"""
        values = self._values.get(prefix)
        return values[-1] if values else None

    def get_all_values(self, prefix: str) -> List[str]:
        return list(self._values.get(prefix, []))

    def get_preamble(self) -> str:
        return self.get_value("") or ""

    def verify_no_duplicate_prefixes_for(self, *prefixes: str) -> None:
        duplicated = [p for p in prefixes if len(self._values.get(p, [])) > 1]
        if duplicated:
            raise ParseException(messages.MESSAGE_DUPLICATE_PREFIXES.format(" ".join(duplicated)))


def tokenize(args_string: str, *prefixes: str) -> ArgumentMultimap:
    """
    Splits args_string on the given prefixes. A prefix only counts when it
    starts the string or follows whitespace. Text before the first prefix is
    the preamble.
    """
    positions = []
    for prefix in prefixes:
        for match in re.finditer(r"(?:^|(?<=\s))" + re.escape(prefix), args_string):
            positions.append((match.start(), prefix))
    positions.sort()

    multimap = ArgumentMultimap()
    preamble_end = positions[0][0] if positions else len(args_string)
    multimap.put("", args_string[:preamble_end].strip())

    for i, (start, prefix) in enumerate(positions):
        end = positions[i + 1][0] if i + 1 < len(positions) else len(args_string)
        multimap.put(prefix, args_string[start + len(prefix):end].strip())

    return multimap


# Field parsers

def parse_index(text: str) -> Index:
    text = text.strip()
    if not UNSIGNED_INT_FORMAT.match(text) or int(text) == 0:
        raise ParseException(MESSAGE_INVALID_INDEX)
    return Index.from_one_based(int(text))


def parse_type(text: str) -> TransactionType:
    try:
        return TransactionType(text.strip().upper())
    except ValueError:
        raise ParseException(MESSAGE_INVALID_TYPE)


def parse_description(text: str) -> str:
    text = text.strip()
    if not text:
        raise ParseException(MESSAGE_INVALID_DESCRIPTION)
    return text


def parse_amount(text: str) -> float:
    text = text.strip()
    if not AMOUNT_FORMAT.match(text):
        raise ParseException(MESSAGE_INVALID_AMOUNT)
    try:
        amount = Decimal(text)
    except InvalidOperation:
        raise ParseException(MESSAGE_INVALID_AMOUNT)
    if amount <= 0 or amount > Decimal(str(MAX_AMOUNT)):
        raise ParseException(MESSAGE_INVALID_AMOUNT)
    return float(amount)


def parse_date(text: str) -> datetime.date:
    text = text.strip()
    for fmt in DATE_INPUT_FORMATS:
        try:
            return datetime.datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    raise ParseException(MESSAGE_INVALID_DATE)


def parse_employee_id(text: str) -> int:
    text = text.strip()
    if not UNSIGNED_INT_FORMAT.match(text) or int(text) == 0:
        raise ParseException(MESSAGE_INVALID_EMPLOYEE_ID)
    return int(text)


class TransactParser:
    """
    Parses a full line of user input.

    Args:
        staff_lookup: Resolves an employee id to the matching staff record,
            returning None when there is none
    """

    def __init__(self, staff_lookup: StaffLookup):
        self.staff_lookup = staff_lookup

    def parse_command(self, user_input: str) -> Command:
        match = BASIC_COMMAND_FORMAT.match(user_input.strip())
        if not match:
            raise ParseException(messages.MESSAGE_INVALID_COMMAND_FORMAT.format(HelpCommand.MESSAGE_USAGE))

        command_word = match.group("command_word").lower()
        arguments = match.group("arguments")

        if command_word == AddTransactionCommand.COMMAND_WORD:
            return self.parse_add_transaction(arguments)
        if command_word == EditTransactionCommand.COMMAND_WORD:
            return self.parse_edit_transaction(arguments)
        if command_word == DeleteTransactionCommand.COMMAND_WORD:
            return self.parse_delete_transaction(arguments)
        if command_word == FindTransactionCommand.COMMAND_WORD:
            return self.parse_find_transaction(arguments)
        if command_word == ListTransactionCommand.COMMAND_WORD:
            return ListTransactionCommand()
        if command_word == ListCommand.COMMAND_WORD:
            return ListCommand()
        if command_word == HelpCommand.COMMAND_WORD:
            return HelpCommand()
        if command_word == ExitCommand.COMMAND_WORD:
            return ExitCommand()

        raise ParseException(messages.MESSAGE_UNKNOWN_COMMAND)

    def parse_staff(self, text: str) -> Person:
        employee_id = parse_employee_id(text)
        person = self.staff_lookup(employee_id)
        if person is None:
            raise ParseException(messages.MESSAGE_UNKNOWN_STAFF.format(employee_id))
        return person

    def parse_add_transaction(self, args: str) -> AddTransactionCommand:
        prefixes = (PREFIX_TYPE, PREFIX_DESCRIPTION, PREFIX_AMOUNT, PREFIX_DATE, PREFIX_STAFF)
        multimap = tokenize(args, *prefixes)

        if any(multimap.get_value(p) is None for p in prefixes) or multimap.get_preamble():
            raise ParseException(
                messages.MESSAGE_INVALID_COMMAND_FORMAT.format(AddTransactionCommand.MESSAGE_USAGE))
        multimap.verify_no_duplicate_prefixes_for(*prefixes)

        transaction = Transaction(
            type=parse_type(multimap.get_value(PREFIX_TYPE)),
            description=parse_description(multimap.get_value(PREFIX_DESCRIPTION)),
            amount=parse_amount(multimap.get_value(PREFIX_AMOUNT)),
            date=parse_date(multimap.get_value(PREFIX_DATE)),
            person=self.parse_staff(multimap.get_value(PREFIX_STAFF)),
        )
        return AddTransactionCommand(transaction)

    def parse_edit_transaction(self, args: str) -> EditTransactionCommand:
        prefixes = (PREFIX_TYPE, PREFIX_DESCRIPTION, PREFIX_AMOUNT, PREFIX_DATE, PREFIX_STAFF)
        multimap = tokenize(args, *prefixes)

        try:
            index = parse_index(multimap.get_preamble())
        except ParseException:
            raise ParseException(
                messages.MESSAGE_INVALID_COMMAND_FORMAT.format(EditTransactionCommand.MESSAGE_USAGE))

        multimap.verify_no_duplicate_prefixes_for(*prefixes)

        descriptor = EditTransactionDescriptor()
        if multimap.get_value(PREFIX_TYPE) is not None:
            descriptor.type = parse_type(multimap.get_value(PREFIX_TYPE))
        if multimap.get_value(PREFIX_DESCRIPTION) is not None:
            descriptor.description = parse_description(multimap.get_value(PREFIX_DESCRIPTION))
        if multimap.get_value(PREFIX_AMOUNT) is not None:
            descriptor.amount = parse_amount(multimap.get_value(PREFIX_AMOUNT))
        if multimap.get_value(PREFIX_DATE) is not None:
            descriptor.date = parse_date(multimap.get_value(PREFIX_DATE))
        if multimap.get_value(PREFIX_STAFF) is not None:
            descriptor.staff = self.parse_staff(multimap.get_value(PREFIX_STAFF))

        if not descriptor.is_any_field_edited():
            raise ParseException(EditTransactionCommand.MESSAGE_NOT_EDITED)

        return EditTransactionCommand(index, descriptor)

    def parse_delete_transaction(self, args: str) -> DeleteTransactionCommand:
        try:
            return DeleteTransactionCommand(parse_index(args))
        except ParseException:
            raise ParseException(
                messages.MESSAGE_INVALID_COMMAND_FORMAT.format(DeleteTransactionCommand.MESSAGE_USAGE))

    def parse_find_transaction(self, args: str) -> FindTransactionCommand:
        keywords = args.split()
        if not keywords:
            raise ParseException(
                messages.MESSAGE_INVALID_COMMAND_FORMAT.format(FindTransactionCommand.MESSAGE_USAGE))
        return FindTransactionCommand(DescriptionContainsKeywordsPredicate(keywords))
