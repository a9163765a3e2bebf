"""String helpers used by the command evaluator."""

from __future__ import annotations


def remove_white_space(text: str) -> str:
    """Return *text* with every space character removed."""
    return text.replace(" ", "")


def start_matches(text: str, prefix: str) -> bool:
    """Return True if *text* begins with *prefix*."""
    return text.startswith(prefix)


def split_payload(payload: str, delimiter: str, max_commands: int) -> list[str]:
    """Split *payload* on *delimiter*, dropping empty pieces.

    At most *max_commands* pieces are returned; any further ones are ignored.
    """
    pieces = (piece for piece in payload.split(delimiter) if piece)
    result: list[str] = []
    for piece in pieces:
        if len(result) >= max_commands:
            break
        result.append(piece)
    return result


def part_of_string(text: str, start: int, end: int) -> str:
    """Return the characters of *text* from *start* up to, not including, *end*."""
    return text[start:end]