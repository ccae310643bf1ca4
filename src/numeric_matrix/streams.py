"""Whitespace-delimited token reading over text streams."""

from __future__ import annotations

import io
import logging
from collections import deque
from typing import Deque, Iterator, Optional, TextIO

from .errors import ParseError

LOGGER = logging.getLogger(__name__)


class TokenReader:
    """Pull whitespace separated tokens from a text stream on demand.

    Lines are consumed lazily so an interactive ``stdin`` is only read as far as
    the caller needs.  Several consumers (dimension prompts, matrix reads,
    scalar prompts) may share one reader without losing buffered tokens.

    With ``exact=True`` the stream is read one character at a time and nothing
    past the delimiter that ends the last returned token is consumed, so the
    stream can be handed to another reader afterwards.
    """

    def __init__(self, stream: TextIO, *, exact: bool = False) -> None:
        self._stream = stream
        self._exact = exact
        self._pending: Deque[str] = deque()
        self._exhausted = False
        self.consumed = 0

    @classmethod
    def from_text(cls, text: str) -> "TokenReader":
        return cls(io.StringIO(text))

    def _mark_exhausted(self) -> None:
        self._exhausted = True
        LOGGER.debug("Token stream exhausted after %d tokens", self.consumed)

    def _read_word(self) -> None:
        chars = []
        while True:
            char = self._stream.read(1)
            if char == "":
                self._mark_exhausted()
                break
            if char.isspace():
                if chars:
                    break
                continue
            chars.append(char)
        if chars:
            self._pending.append("".join(chars))

    def _fill(self) -> bool:
        while not self._pending:
            if self._exhausted:
                return False
            if self._exact:
                self._read_word()
                continue
            line = self._stream.readline()
            if line == "":
                self._mark_exhausted()
                return False
            self._pending.extend(line.split())
        return True

    def discard_line(self) -> int:
        """Drop the tokens still buffered from the current line; return how many."""

        dropped = len(self._pending)
        self._pending.clear()
        if dropped:
            LOGGER.debug("Discarded %d buffered tokens", dropped)
        return dropped

    def peek(self) -> Optional[str]:
        if not self._fill():
            return None
        return self._pending[0]

    def next_token(self) -> Optional[str]:
        """Return the next token, or ``None`` at end of input."""

        if not self._fill():
            return None
        self.consumed += 1
        return self._pending.popleft()

    def require_token(self, what: str = "value") -> str:
        token = self.next_token()
        if token is None:
            raise ParseError(f"unexpected end of input while reading {what}")
        return token

    @property
    def at_end(self) -> bool:
        return self.peek() is None

    def __iter__(self) -> Iterator[str]:
        while True:
            token = self.next_token()
            if token is None:
                return
            yield token


def as_token_reader(source: TokenReader | TextIO) -> TokenReader:
    if isinstance(source, TokenReader):
        return source
    return TokenReader(source, exact=True)
