import logging
import os

# Number of commands the history ledger remembers
HISTORY_LENGTH = 10

# Upper bound on chained !num replays handled for a single input line
MAX_REPLAY_DEPTH = 16

DEFAULT_LOG_LEVEL = "WARNING"


def resolve_log_level(name):
    """Return name as a logging level name, or the default if logging does not know it"""
    name = (name or DEFAULT_LOG_LEVEL).upper()
    if not isinstance(logging.getLevelName(name), int):
        return DEFAULT_LOG_LEVEL
    return name


PROMPT = os.getenv("SEASHELL_PROMPT", "seaShell> ")

LOG_LEVEL = resolve_log_level(os.getenv("SEASHELL_LOG_LEVEL"))
