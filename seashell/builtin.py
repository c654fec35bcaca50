import re
import sys
from enum import Enum

_replay_re = re.compile(r"!([0-9]+)")


class Command(Enum):
    EMPTY = "empty"
    EXIT = "exit"
    HISTORY = "history"
    REPLAY = "replay"
    EXTERNAL = "external"


# Built-in names handled inside the shell process
builtins = {
    'exit': Command.EXIT,
    'history': Command.HISTORY,
}


def is_replay(token):
    """True for '!' followed by one or more digits"""
    return _replay_re.fullmatch(token) is not None


def replay_id(token):
    """Return the command id named by a !num token"""
    return int(_replay_re.fullmatch(token).group(1))


def should_record(tokens):
    """Every non-empty command goes into history, except anything starting with '!'"""
    return bool(tokens) and not tokens[0].startswith("!")


def classify(tokens):
    """
    Decide what a tokenized command line is.
    Returns: Command
    """
    if not tokens:
        return Command.EMPTY

    cmd = tokens[0]
    if cmd in builtins:
        return builtins[cmd]
    if is_replay(cmd):
        return Command.REPLAY
    return Command.EXTERNAL


def builtin_exit():
    """Exit the shell right away; background jobs are left running"""
    sys.exit(0)


def builtin_history(history):
    """Show command history"""
    for entry in history.show():
        # text already ends with its newline
        print(f"\t\t{entry.command_id} {entry.text}", end="")
    sys.stdout.flush()


def event_not_found(token):
    print(f"{token}: event not found", flush=True)
