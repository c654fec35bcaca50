import logging
import readline
import sys

from seashell.builtin import (
    Command,
    builtin_exit,
    builtin_history,
    classify,
    event_not_found,
    replay_id,
    should_record,
)
from seashell.config import MAX_REPLAY_DEPTH, PROMPT
from seashell.executor import run_external
from seashell.history import CommandHistory
from seashell.parser import parse_command

logger = logging.getLogger(__name__)


def init_readline():
    """Line editing for the prompt; has nothing to do with the history built-in"""
    if not sys.stdin.isatty():
        return

    try:
        readline.parse_and_bind("set editing-mode emacs")
        readline.parse_and_bind("\\e[A: previous-history")
        readline.parse_and_bind("\\e[B: next-history")
        readline.parse_and_bind("\\e[1;5D: backward-word")
        readline.parse_and_bind("\\e[1;5C: forward-word")
    except Exception as e:
        print(f"Warning: Could not configure readline: {e}", file=sys.stderr)


class Shell:
    """
    Owns the command history and runs each input line through
    tokenize -> record -> classify -> dispatch.
    """

    def __init__(self, history=None, launcher=run_external):
        self.history = history if history is not None else CommandHistory()
        self.launcher = launcher
        # exit code of the last foreground command; informational only
        self.last_status = 0

    def handle_input(self, line):
        """
        Process one raw input line (trailing newline included).

        A !num replay feeds the stored text back through the same steps,
        without recording anything for the rest of this line.
        """
        record = True
        token = None
        for _ in range(MAX_REPLAY_DEPTH):
            tokens, background = parse_command(line)
            if record and should_record(tokens):
                self.history.record(line)

            kind = classify(tokens)
            if kind is not Command.REPLAY:
                self.dispatch(kind, tokens, background)
                return

            token = tokens[0]
            entry = self.history.lookup(replay_id(token))
            if entry is None:
                event_not_found(token)
                return

            logger.debug("replaying %d: %r", entry.command_id, entry.text)
            line = entry.text
            record = False

        print(f"{token}: replay depth exceeded", flush=True)

    def dispatch(self, kind, tokens, background):
        if kind is Command.EMPTY:
            return
        if kind is Command.EXIT:
            builtin_exit()
        elif kind is Command.HISTORY:
            builtin_history(self.history)
        else:
            status = self.launcher(tokens, background)
            if status is not None:
                self.last_status = status

    def run(self):
        """Main shell loop"""
        while True:
            try:
                line = input(PROMPT)
            except (EOFError, OSError):
                print("Failed to read input. Exiting...", flush=True)
                sys.exit(1)

            self.handle_input(line + "\n")
