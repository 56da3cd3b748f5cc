"""Word splitting for command lines and search paths."""

from __future__ import annotations

QUOTES = "\"'"


def next_quote(char: str, quote: str) -> str:
    """Return the quote state after reading ``char``.

    ``quote`` is the currently open quote character, or ``""`` when no
    quote is open.
    """
    if char in QUOTES and char and not quote:
        return char
    if quote and char == quote:
        return ""
    return quote


def unquoted_length(s: str, sep: str, start: int) -> int:
    """Length of the run of characters from ``start`` up to ``sep`` or the end."""
    end = s.find(sep, start) if sep else -1
    return (len(s) if end == -1 else end) - start if start < len(s) else 0


def quoted_length(s: str, quote: str, start: int) -> int:
    """Length of the text after the opening quote at ``start`` up to its closing quote."""
    if not quote or start + 1 >= len(s):
        return 0
    end = s.find(quote, start + 1)
    return (len(s) if end == -1 else end) - (start + 1)


def split_quoted(s: str, sep: str) -> list[str]:
    """Split ``s`` on ``sep``, keeping quoted text together.

    A word that opens with a quote yields only the text inside the quotes.
    Separators inside an open quote do not end the current word.
    """
    words: list[str] = []
    quote = ""
    in_word = False
    for index, char in enumerate(s):
        quote = next_quote(char, quote)
        if char != sep and not in_word:
            if quote:
                length = quoted_length(s, quote, index)
                words.append(s[index + 1:index + 1 + length])
            else:
                length = unquoted_length(s, sep, index)
                words.append(s[index:index + length])
            in_word = True
        elif char == sep and not quote:
            in_word = False
    return words


def split_plain(s: str, sep: str) -> list[str]:
    """Split ``s`` on ``sep``, dropping empty words."""
    return [word for word in s.split(sep) if word]