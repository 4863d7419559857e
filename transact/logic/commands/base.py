"""Command interface and result"""

from typing import Optional

from transact.constants import TabWindow
from transact.store import ModelManager


class CommandResult:
    """Feedback from a command, with hints for the UI"""

    def __init__(self, feedback_to_user: str, tab: Optional[TabWindow] = None,
                 show_help: bool = False, exit: bool = False):
        self.feedback_to_user = feedback_to_user
        self.tab = tab
        self.show_help = show_help
        self.exit = exit

    def __eq__(self, other) -> bool:
        if not isinstance(other, CommandResult):
            return NotImplemented
        return (self.feedback_to_user == other.feedback_to_user
                and self.tab == other.tab
                and self.show_help == other.show_help
                and self.exit == other.exit)

    def __repr__(self) -> str:
        return (f"CommandResult(feedback_to_user={self.feedback_to_user!r}, tab={self.tab}, "
                f"show_help={self.show_help}, exit={self.exit})")


class Command:
    """Base class for executable commands"""

    COMMAND_WORD = ""

    def execute(self, model: ModelManager) -> CommandResult:
        """
        Runs the command against the model.

        Raises:
            CommandException: If the command cannot be carried out
        """
        raise NotImplementedError

    def __eq__(self, other) -> bool:
        if other is self:
            return True
        return type(other) is type(self) and vars(other) == vars(self)

    def __repr__(self) -> str:
        fields = ", ".join(f"{k.lstrip('_')}={v!r}" for k, v in vars(self).items())
        return f"{type(self).__name__}({fields})"
