import re
import sys
from typing import NamedTuple

# Same character set as C isspace(): space, \t, \n, \v, \f, \r
_token_re = re.compile(r"[^ \t\n\v\f\r]+")


class ParsedCommand(NamedTuple):
    tokens: list
    background: bool


def handle_heap_error():
    """Out of memory while tokenizing: nothing sensible left to do."""
    print("Error - out of heap space. Exiting...", file=sys.stderr)
    sys.exit(1)


def split_tokens(line):
    """
    Split a line into maximal runs of non-whitespace characters.
    Returns: list of tokens, in the order they appear
    """
    return _token_re.findall(line)


def parse_command(line):
    """
    Parse command line into tokens and background flag.
    Returns: ParsedCommand(tokens: list, background: bool)

    A command runs in the background when the last token is a lone '&'
    (the token is dropped) or ends with '&' (that one character is stripped).
    """
    try:
        tokens = split_tokens(line)
    except MemoryError:
        handle_heap_error()

    background = False
    if tokens:
        last = tokens[-1]
        if last == "&":
            tokens.pop()
            background = True
        elif last.endswith("&"):
            tokens[-1] = last[:-1]
            background = True

    return ParsedCommand(tokens, background)
