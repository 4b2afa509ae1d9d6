"""Tests for the heuristic chunk colorizer.

Pins rule precedence (words before number-words), quoted-string termination
at newlines and end of input, and lossless reconstruction of the input.
"""

from __future__ import annotations

import unittest

from si.ansi import paint, strip_ansi
from si.source.colorize import Parser, colorize, colorize_text
from si.stream import Stream


def yellow(text: str) -> str:
    return paint(text, "yellow")


def cyan(text: str) -> str:
    return paint(text, "cyan")


def red(text: str) -> str:
    return paint(text, "red")


class QuotedStringTests(unittest.TestCase):
    def test_colorizes_quoted_strings_for_both_quote_chars(self) -> None:
        for quote in ('"', "'"):
            with self.subTest(quote=quote):
                source = f"f{quote}o{quote}o"
                self.assertEqual(colorize_text(source), f"f{yellow(f'{quote}o{quote}')}o")

    def test_escaped_quotes_do_not_close_the_string(self) -> None:
        self.assertEqual(colorize_text(r'a"b\"c\"d"e'), "a" + yellow(r'"b\"c\"d"') + "e")

    def test_unterminated_string_resets_at_newline(self) -> None:
        self.assertEqual(
            colorize_text('foo"bar\nf"o"o'),
            "foo" + yellow('"bar') + "\nf" + yellow('"o"') + "o",
        )

    def test_unterminated_string_runs_to_end_of_input(self) -> None:
        self.assertEqual(colorize_text('a"bc'), "a" + yellow('"bc'))

    def test_trailing_backslash_is_kept(self) -> None:
        self.assertEqual(colorize_text('"ab\\'), yellow('"ab\\'))

    def test_backslash_before_newline_does_not_escape_it(self) -> None:
        self.assertEqual(colorize_text('"a\\\nb'), yellow('"a\\') + "\nb")

    def test_other_quote_char_inside_string_is_plain_content(self) -> None:
        self.assertEqual(colorize_text("\"it's\""), yellow("\"it's\""))


class BracketTests(unittest.TestCase):
    def test_colorizes_each_bracket_kind(self) -> None:
        for opening, closing in (("(", ")"), ("{", "}"), ("[", "]")):
            with self.subTest(bracket=opening + closing):
                self.assertEqual(
                    colorize_text(f"{opening}foo{closing}"),
                    f"{cyan(opening)}foo{cyan(closing)}",
                )


class NumberTests(unittest.TestCase):
    def test_colorizes_numbers(self) -> None:
        self.assertEqual(colorize_text("foo 42 bar"), f"foo {red('42')} bar")

    def test_works_for_numbers_at_the_end_of_lines(self) -> None:
        self.assertEqual(colorize_text("23\n42"), f"{red('23')}\n{red('42')}")

    def test_does_not_colorize_numbers_within_identifiers(self) -> None:
        self.assertEqual(colorize_text("foo42bar"), "foo42bar")

    def test_colorizes_digit_runs_when_the_word_starts_with_a_digit(self) -> None:
        self.assertEqual(colorize_text("42foo23"), f"{red('42')}foo{red('23')}")

    def test_number_word_is_a_single_chunk(self) -> None:
        chunks = colorize(Stream.from_iterable("42foo23 x")).to_list()
        self.assertEqual(chunks, [f"{red('42')}foo{red('23')}", " ", "x"])

    def test_non_ascii_digits_are_not_colored(self) -> None:
        self.assertEqual(colorize_text("٣"), "٣")


class PlainTextTests(unittest.TestCase):
    def test_plain_text_is_unchanged(self) -> None:
        source = "Hello, wörld!\n  tabs\tand spaces; ümlauts & symbols: +-*/=<>\n"
        self.assertEqual(colorize_text(source), source)

    def test_words_are_single_chunks(self) -> None:
        chunks = colorize(Stream.from_iterable("héllo wörld2")).to_list()
        self.assertEqual(chunks, ["héllo", " ", "wörld2"])

    def test_stripping_escapes_reproduces_the_input(self) -> None:
        sources = [
            'print("x = %d" % (42,))\n',
            "int main() { return a[0] + 'c'; }\n",
            'unterminated "string\nnext line 7\n',
            "trailing backslash \"\\",
            "42foo23 foo42bar {[()]}\n\n",
            "",
        ]
        for source in sources:
            with self.subTest(source=source):
                self.assertEqual(strip_ansi(colorize_text(source)), source)

    def test_parser_returns_none_when_exhausted(self) -> None:
        parser = Parser(Stream.from_iterable("a"))
        self.assertEqual(parser.next_chunk(), "a")
        self.assertIsNone(parser.next_chunk())
        self.assertIsNone(parser.next_chunk())


if __name__ == "__main__":
    unittest.main()
