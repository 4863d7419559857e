"""Executable commands"""

from .base import Command, CommandResult
from .add_transaction import AddTransactionCommand
from .delete_transaction import DeleteTransactionCommand
from .edit_transaction import EditTransactionCommand, EditTransactionDescriptor, create_edited_transaction
from .list_commands import (
    ListCommand,
    ListTransactionCommand,
    FindTransactionCommand,
    HelpCommand,
    ExitCommand
)

__all__ = [
    "Command",
    "CommandResult",
    "AddTransactionCommand",
    "DeleteTransactionCommand",
    "EditTransactionCommand",
    "EditTransactionDescriptor",
    "create_edited_transaction",
    "ListCommand",
    "ListTransactionCommand",
    "FindTransactionCommand",
    "HelpCommand",
    "ExitCommand"
]
