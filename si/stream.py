"""Lazy pull-based sequences with push-back lookahead.

A ``Stream`` produces one element per pull and owns whatever produces it: a
wrapped iterator, a producer function, an open file or an upstream stream.
Values can be pushed back onto the front, which is how ``peek`` works.
"""

from __future__ import annotations

import itertools
from collections.abc import Callable, Iterable, Iterator
from pathlib import Path
from typing import Any, Generic, TypeVar

from .errors import DecodeError

T = TypeVar("T")
U = TypeVar("U")
A = TypeVar("A")

READ_BLOCK_CHARS = 4_096

_MISSING: Any = object()


class _Utf8FileReader:
    """Character iterator over a file, decoding UTF-8 strictly.

    Reads bounded blocks so memory use does not grow with file size. Newlines
    are passed through untranslated. The handle is closed on exhaustion, on a
    decode failure, or by ``close``.
    """

    def __init__(self, path: Path) -> None:
        self._path = path
        self._handle = path.open("r", encoding="utf-8", errors="strict", newline="")
        self._block = ""
        self._offset = 0

    def __iter__(self) -> _Utf8FileReader:
        return self

    def __next__(self) -> str:
        if self._offset >= len(self._block):
            if self._handle.closed:
                raise StopIteration
            try:
                self._block = self._handle.read(READ_BLOCK_CHARS)
            except UnicodeDecodeError as exc:
                self.close()
                raise DecodeError(self._path, exc.reason) from exc
            self._offset = 0
            if not self._block:
                self.close()
                raise StopIteration
        char = self._block[self._offset]
        self._offset += 1
        return char

    def close(self) -> None:
        self._handle.close()


def _flatten(outer: Stream[Iterable[U]]) -> Iterator[U]:
    for inner in outer:
        yield from inner


class Stream(Generic[T]):
    """Single-consumption sequence pulled one element at a time.

    Transformations (``map``, ``filter``, ``flat_map``...) take ownership of
    the stream they are called on; the original must not be pulled from
    afterwards. Once the source is exhausted it is never pulled again, so only
    pushed-back values can follow exhaustion.
    """

    __slots__ = ("_source", "_owned", "_pushed", "_exhausted")

    def __init__(self, source: Iterator[T], owned: Iterable[Stream[Any]] = ()) -> None:
        self._source = source
        self._owned = tuple(owned)
        self._pushed: list[T] = []
        self._exhausted = False

    @classmethod
    def empty(cls) -> Stream[T]:
        return cls(iter(()))

    @classmethod
    def of(cls, *values: T) -> Stream[T]:
        return cls(iter(values))

    @classmethod
    def from_iterable(cls, iterable: Iterable[T]) -> Stream[T]:
        return cls(iter(iterable))

    @classmethod
    def from_function(cls, produce: Callable[[], T | None]) -> Stream[T]:
        """Pull from ``produce`` until it returns ``None``."""
        return cls(iter(produce, None))

    @classmethod
    def replicate(cls, value: T, count: int) -> Stream[T]:
        return cls(itertools.repeat(value, max(0, count)))

    @classmethod
    def read_utf8_file(cls, path: Path) -> Stream[str]:
        """Stream the characters of ``path``.

        Opening happens immediately so a missing file fails here. Invalid UTF-8
        raises ``DecodeError`` from the pull that reaches it.
        """
        return cls(_Utf8FileReader(path))

    def __iter__(self) -> Stream[T]:
        return self

    def __next__(self) -> T:
        value = self.next(_MISSING)
        if value is _MISSING:
            raise StopIteration
        return value

    def __enter__(self) -> Stream[T]:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def next(self, default: Any = None) -> Any:
        """Return the next element, or ``default`` once the stream is exhausted."""
        if self._pushed:
            return self._pushed.pop()
        if self._exhausted:
            return default
        try:
            return next(self._source)
        except StopIteration:
            self._exhausted = True
            return default

    def push(self, value: T) -> None:
        """Put ``value`` in front; the last pushed value is returned first."""
        self._pushed.append(value)

    def peek(self, default: Any = None) -> Any:
        """Return the next element without consuming it.

        Costs one production step; its side effects happen once even though
        the value is observed again by the following ``next``.
        """
        value = self.next(_MISSING)
        if value is _MISSING:
            return default
        self.push(value)
        return value

    def has_next(self) -> bool:
        return self.peek(_MISSING) is not _MISSING

    def map(self, function: Callable[[T], U]) -> Stream[U]:
        return Stream((function(value) for value in self), owned=(self,))

    def filter(self, predicate: Callable[[T], bool]) -> Stream[T]:
        return Stream((value for value in self if predicate(value)), owned=(self,))

    def flatten(self: Stream[Iterable[U]]) -> Stream[U]:
        """Exhaust each inner sequence before pulling the next outer one."""
        return Stream(_flatten(self), owned=(self,))

    def flat_map(self, function: Callable[[T], Iterable[U]]) -> Stream[U]:
        return self.map(function).flatten()

    def concat(self, other: Iterable[T]) -> Stream[T]:
        return Stream(itertools.chain(self, other), owned=(self,))

    def append(self, value: T) -> Stream[T]:
        return self.concat((value,))

    def fold(self, initial: A, function: Callable[[A, T], A]) -> A:
        accumulator = initial
        for value in self:
            accumulator = function(accumulator, value)
        return accumulator

    def count(self, predicate: Callable[[T], bool] | None = None) -> int:
        if predicate is None:
            return self.fold(0, lambda total, _value: total + 1)
        return self.fold(0, lambda total, value: total + 1 if predicate(value) else total)

    def join(self, separator: str = "") -> str:
        return separator.join(self)  # type: ignore[arg-type]

    def to_list(self) -> list[T]:
        return list(self)

    def close(self) -> None:
        """Drop pending values and release the source and owned upstreams."""
        self._pushed.clear()
        self._exhausted = True
        close_source = getattr(self._source, "close", None)
        if close_source is not None:
            close_source()
        for upstream in self._owned:
            upstream.close()


__all__ = ["Stream", "READ_BLOCK_CHARS"]
