from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence as SequenceABC
from typing import Iterator, List, Sequence, Tuple, overload

from ..models import Token


class TokenWindow(SequenceABC):
    """
    A read-only view of ``tokens[start:stop]`` that slices without copying.

    Contiguous slices of a window are windows over the same underlying
    sequence, so walking a cursor across a document stays linear.
    """

    __slots__ = ("_tokens", "_start", "_stop")

    def __init__(
        self, tokens: Sequence[Token], start: int = 0, stop: int | None = None
    ) -> None:
        if isinstance(tokens, TokenWindow):
            start += tokens._start
            stop = tokens._stop if stop is None else tokens._start + stop
            tokens = tokens._tokens
        self._tokens = tokens
        self._start = start
        self._stop = len(tokens) if stop is None else stop

    @classmethod
    def of(cls, tokens: Sequence[Token]) -> TokenWindow:
        return tokens if isinstance(tokens, TokenWindow) else cls(tokens)

    def __len__(self) -> int:
        return self._stop - self._start

    @overload
    def __getitem__(self, index: int) -> Token: ...

    @overload
    def __getitem__(self, index: slice) -> Sequence[Token]: ...

    def __getitem__(self, index):
        length = len(self)
        if isinstance(index, slice):
            start, stop, step = index.indices(length)
            if step != 1:
                return tuple(self[i] for i in range(start, stop, step))
            return TokenWindow(self._tokens, self._start + start, self._start + max(start, stop))
        if index < 0:
            index += length
        if not 0 <= index < length:
            raise IndexError("token window index out of range")
        return self._tokens[self._start + index]

    def __iter__(self) -> Iterator[Token]:
        for index in range(self._start, self._stop):
            yield self._tokens[index]

    def __repr__(self) -> str:
        return f"TokenWindow({list(self)!r})"


class Pattern(ABC):
    """
    A prefix matcher over a token sequence.

    Implementations decide whether, and over how many leading tokens, a match
    starts at index 0 of ``tokens``. ``None`` means "no match here" and is an
    ordinary result, not an error. A match length of 0 is allowed.
    """

    @abstractmethod
    def matches(self, tokens: Sequence[Token], source: str) -> int | None:
        """Return the number of leading tokens matched, or None."""
        raise NotImplementedError

    def find_all_matches(
        self, tokens: Sequence[Token], source: str
    ) -> List[Tuple[int, int]]:
        """
        Return the ``[start, end)`` token ranges of every non-empty match.

        Matches do not overlap: scanning resumes after the end of each match.
        """
        window = TokenWindow.of(tokens)
        found: List[Tuple[int, int]] = []
        cursor = 0
        while cursor < len(window):
            match_len = self.matches(window[cursor:], source)
            if match_len:
                found.append((cursor, cursor + match_len))
                cursor += match_len
            else:
                cursor += 1
        return found
