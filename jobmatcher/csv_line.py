"""Split a single CSV line into raw field values."""
from __future__ import annotations

QUOTE = '"'
DELIMITER = ","


def tokenize_line(line: str) -> list[str]:
    """Return the fields of one CSV-quoted line.

    Commas inside double quotes do not split fields, and a doubled quote
    inside a quoted field yields one literal quote. An unterminated quote
    simply stays open until end of line.
    """
    fields: list[str] = []
    current: list[str] = []
    in_quotes = False
    i = 0
    n = len(line)

    while i < n:
        char = line[i]
        if char == QUOTE:
            if in_quotes and i + 1 < n and line[i + 1] == QUOTE:
                current.append(QUOTE)
                i += 2
                continue
            in_quotes = not in_quotes
        elif char == DELIMITER and not in_quotes:
            fields.append("".join(current))
            current = []
        else:
            current.append(char)
        i += 1

    fields.append("".join(current))
    return fields


def quote_field(value: str) -> str:
    """Inverse of tokenize_line for one field."""
    if any(c in value for c in (DELIMITER, QUOTE, "\n")):
        return QUOTE + value.replace(QUOTE, QUOTE * 2) + QUOTE
    return value


def join_line(values: list[str]) -> str:
    return DELIMITER.join(quote_field(v) for v in values)
