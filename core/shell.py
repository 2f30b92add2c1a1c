"""Interactive command loop for the face recognition shell."""

import sys
from typing import Callable, List, Optional

from configs.config import (
    CMD_CREATE,
    CMD_EXIT,
    CMD_LOAD,
    CMD_QUIT,
    CMD_SAVE,
    CMD_SEARCH,
    CMD_TRAIN,
    PROMPT,
)
from core.results import CommandResult, Status
from core.session import Session

COMMAND_USAGE = {
    CMD_CREATE: "create <EIGEN|FISHER|LBPH> <dir>",
    CMD_TRAIN: "train <dir>",
    CMD_LOAD: "load <path>",
    CMD_SAVE: "save [path]",
    CMD_SEARCH: "search <image>",
    CMD_EXIT: "exit",
    CMD_QUIT: "quit",
}

# Checked in order; the first command the input token starts with wins.
COMMANDS = [CMD_CREATE, CMD_TRAIN, CMD_LOAD, CMD_SAVE, CMD_SEARCH, CMD_EXIT, CMD_QUIT]

_STATUS_MARKERS = {
    Status.OK: "",
    Status.USAGE: "",
    Status.MISSING_PATH: "⚠️ ",
    Status.MISSING_PREREQUISITE: "⚠️ ",
    Status.LIBRARY_ERROR: "❌ ",
}


def usage() -> str:
    return "commands: " + ", ".join(COMMAND_USAGE[cmd] for cmd in COMMANDS)


class CommandDispatcher:
    """Reads operator commands and routes them to a Session."""

    def __init__(self, session: Session, input_func: Callable[[str], str] = input):
        """
        Initialize the dispatcher.

        Args:
            session: Session every command operates on
            input_func: Prompt reader (default: built-in input)
        """
        self.session = session
        self.input_func = input_func

    @staticmethod
    def match_command(token: str) -> Optional[str]:
        """Return the command a token selects by prefix, or None."""
        for cmd in COMMANDS:
            if token.startswith(cmd):
                return cmd
        return None

    def _missing_args(self, cmd: str) -> CommandResult:
        return CommandResult.failure(Status.USAGE, f"usage: {COMMAND_USAGE[cmd]}")

    def _run_command(self, cmd: str, args: List[str]) -> CommandResult:
        session = self.session

        if cmd == CMD_CREATE:
            if len(args) < 2:
                return self._missing_args(cmd)
            return session.create(args[0], args[1])

        if cmd == CMD_SAVE:
            return session.save(args[0] if args else None)

        if not args:
            return self._missing_args(cmd)

        handler = {
            CMD_TRAIN: session.train,
            CMD_LOAD: session.load,
            CMD_SEARCH: session.search,
        }[cmd]
        return handler(args[0])

    def report(self, result: CommandResult) -> None:
        """Print a command result for the operator."""
        if result.message:
            print(f"{_STATUS_MARKERS[result.status]}{result.message}")
        if result.detail:
            print(result.detail)

    def exit(self) -> None:
        print("Exiting..")
        sys.exit(0)

    def dispatch(self, line: str) -> Optional[CommandResult]:
        """
        Execute one line of operator input.

        Returns:
            The command's result, or None for blank input
        """
        tokens = line.split()
        if not tokens:
            return None

        cmd = self.match_command(tokens[0])

        if cmd is None:
            print(f"Don't recognize command: {tokens[0]}")
            print(usage() + "\n")
            return CommandResult.failure(Status.USAGE, "")

        if cmd in (CMD_EXIT, CMD_QUIT):
            self.exit()

        result = self._run_command(cmd, tokens[1:])
        self.report(result)
        return result

    def run(self) -> None:
        """Prompt for commands until exit, quit or end of input."""
        print("🟢 Face recognition shell started...")
        print(usage())

        while True:
            try:
                line = self.input_func(PROMPT)
            except (EOFError, KeyboardInterrupt):
                print()
                self.exit()

            self.dispatch(line)
