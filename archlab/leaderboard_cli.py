"""Line-oriented command shell for the leaderboard."""

from __future__ import annotations

import argparse
import re
import sys
from typing import Optional, TextIO

from archlab.leaderboard import Leaderboard, format_array, format_int, format_nil

BANNER = "================================\nLeaderboard\nType HELP for available commands\n"
PROMPT = "> "
FAREWELL = "Program exited!\n"

_MAX_TOKENS = 4
_INT_PREFIX = re.compile(r"\s*([+-]?[0-9]+)")

_HELP_LINES = (
    "Leaderboard Commands:\n",
    "  ZADD <member> <score>     - Add or update a member with score\n",
    "  ZREM <member>             - Remove a member from leaderboard",
    "  ZCARD                     - The the number of elements in leaderboard\n",
    "  ZSCORE <member>           - Get score of member\n",
    "  ZRANK <member>            - Get rank of member (1-based, ascending)\n",
    "  ZREVRANK <member>         - Get rank of member (1-based, descending)\n",
    "  ZRANGE <start> <end>      - Get range of members by rank (ascending)\n",
    "  ZREVRANGE <start> <end>   - Get range of members by rank (descending)\n",
    "  ZRANGEBYSCORE <min> <max> - Get range of members by score\n",
    "  HELP                      - Show this help\n",
    "  EXIT                      - Exit program\n",
)


def help_text() -> str:
    """The text printed for HELP and after an unknown command."""
    return "".join(_HELP_LINES)


def _atoi(text: str) -> int:
    """Leading decimal integer of `text` as a 32-bit int; 0 if there is none."""
    match = _INT_PREFIX.match(text)
    if match is None:
        return 0
    value = max(-(2**63), min(2**63 - 1, int(match.group(1))))
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def _optional_int(value: Optional[int]) -> str:
    return format_nil() if value is None else format_int(value)


class CommandShell:
    """Parses command lines and applies them to a leaderboard."""

    def __init__(self, board: Optional[Leaderboard] = None) -> None:
        self.board = board if board is not None else Leaderboard()
        self.exited = False

    def execute(self, line: str) -> str:
        """Run one command line and return the text it prints."""
        tokens = line.split()[:_MAX_TOKENS]
        if not tokens:
            return ""
        command = tokens[0].upper()
        args = tokens[1:]

        match command:
            case "EXIT":
                self.exited = True
                return ""
            case "HELP":
                return help_text()
            case "ZREM":
                if not args:
                    return "Error: ZREM <member> - Remove a member from leaderboard\n"
                return format_int(self.board.zrem(args[0]))
            case "ZCARD":
                return format_int(self.board.zcard())
            case "ZADD":
                if len(args) < 2:
                    return (
                        "Error: ZADD <member> <score> - Add or update a member "
                        "with score\n"
                    )
                return format_int(self.board.zadd(args[0], _atoi(args[1])))
            case "ZSCORE":
                if not args:
                    return "Error: ZSCORE <member> - Get score of member\n"
                return _optional_int(self.board.zscore(args[0]))
            case "ZRANK":
                if not args:
                    return (
                        "Error: ZRANK <member> - Get rank of member (1-based, "
                        "ascending)\n"
                    )
                return _optional_int(self.board.zrank(args[0], False))
            case "ZREVRANK":
                if not args:
                    return (
                        "Error: ZREVRANK <member> - Get rank of member (1-based, "
                        "descending)\n"
                    )
                return _optional_int(self.board.zrevrank(args[0]))
            case "ZRANGE" | "ZREVRANGE":
                if len(args) < 2:
                    return f"Error: {command} <start> <end>\n"
                start, end = _atoi(args[0]), _atoi(args[1])
                if command == "ZRANGE":
                    return format_array(self.board.zrange(start, end))
                return format_array(self.board.zrevrange(start, end))
            case "ZRANGEBYSCORE":
                if len(args) < 2:
                    return (
                        "Error: ZRANGEBYSCORE <min> <max> - Get range of members "
                        "by score\n"
                    )
                return format_array(
                    self.board.zrangebyscore(_atoi(args[0]), _atoi(args[1]))
                )
            case _:
                return f"Unknown command: {command}\n" + help_text()

    def run(self, stdin: TextIO, stdout: TextIO) -> None:
        """Prompt for commands on `stdin` until EXIT or end of input."""
        stdout.write(BANNER)
        while not self.exited:
            stdout.write(PROMPT)
            line = stdin.readline()
            if not line:
                break
            stdout.write(self.execute(line))
        stdout.write(FAREWELL)


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Interactive leaderboard reading commands from standard input."
    )
    parser.parse_args(argv)
    CommandShell().run(sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())