"""Heuristic single-pass colorizer for file contents.

Turns a character stream into a stream of chunks, each either plain text or
a bold-colored span. Rules are tried in a fixed order with one character of
lookahead; a rule either consumes text and returns it or returns ``None``
without consuming anything.
"""

from __future__ import annotations

from collections.abc import Callable
from functools import partial

from ..ansi import paint
from ..stream import Stream

BRACKETS = frozenset("(){}[]")
QUOTE_CHARS = ('"', "'")

Rule = Callable[[], str | None]


def _is_ascii_digit(char: str) -> bool:
    return "0" <= char <= "9"


class Parser:
    """Chunk producer over a character stream.

    Rule order decides ambiguous input: ``foo42bar`` is one word and stays
    plain, while ``42foo23`` is a number-word with both digit runs colored.
    """

    def __init__(self, chars: Stream[str]) -> None:
        self._chars = chars
        self._rules: tuple[Rule, ...] = (
            self.word,
            self.bracket,
            self.number_word,
            *(partial(self.quoted, quote) for quote in QUOTE_CHARS),
        )

    def next_chunk(self) -> str | None:
        """Return the next chunk, or ``None`` when the input is exhausted."""
        for rule in self._rules:
            chunk = rule()
            if chunk is not None:
                return chunk
        return self.any_char()

    def any_char(self) -> str | None:
        return self._chars.next()

    def word(self) -> str | None:
        first = self._char(str.isalpha)
        if first is None:
            return None
        return first + self._zero_or_more(partial(self._char, str.isalnum))

    def bracket(self) -> str | None:
        char = self._char(BRACKETS.__contains__)
        if char is None:
            return None
        return paint(char, "cyan")

    def number_word(self) -> str | None:
        return self._one_or_more(self._digits_or_letters)

    def _digits_or_letters(self) -> str | None:
        digits = self._one_or_more(partial(self._char, _is_ascii_digit))
        if digits is not None:
            return paint(digits, "red")
        return self._one_or_more(partial(self._char, str.isalpha))

    def quoted(self, quote: str) -> str | None:
        """Match a quoted string, closed or broken by a newline or end of input."""
        opening = self._char(lambda char: char == quote)
        if opening is None:
            return None
        body = self._zero_or_more(partial(self._quoted_char, quote))
        closing = self._char(lambda char: char == quote) or ""
        return paint(f"{opening}{body}{closing}", "yellow")

    def _quoted_char(self, quote: str) -> str | None:
        escaped = self._escaped_char()
        if escaped is not None:
            return escaped
        return self._char(lambda char: char != quote and char != "\n")

    def _escaped_char(self) -> str | None:
        # A newline is never escaped: it always ends the string.
        backslash = self._char(lambda char: char == "\\")
        if backslash is None:
            return None
        return backslash + (self._char(lambda char: char != "\n") or "")

    def _char(self, predicate: Callable[[str], bool]) -> str | None:
        char = self._chars.peek()
        if char is None or not predicate(char):
            return None
        self._chars.next()
        return char

    def _zero_or_more(self, rule: Rule) -> str:
        parts: list[str] = []
        while True:
            part = rule()
            if part is None:
                return "".join(parts)
            parts.append(part)

    def _one_or_more(self, rule: Rule) -> str | None:
        first = rule()
        if first is None:
            return None
        return first + self._zero_or_more(rule)


def colorize(chars: Stream[str]) -> Stream[str]:
    """Lazily colorize ``chars`` into a stream of chunks."""
    parser = Parser(chars)
    return Stream(iter(parser.next_chunk, None), owned=(chars,))


def colorize_text(text: str) -> str:
    return colorize(Stream.from_iterable(text)).join()
