"""Line providers: where the lexer gets its source text, one line at a time."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TextIO

logger = logging.getLogger(__name__)


class LineProvider(ABC):
    """Supplies raw source text to the lexer one line at a time."""

    @abstractmethod
    def next_line(self) -> str:
        """Return the next line, including its trailing newline if any.

        An empty string signals exhaustion. Once returned, every later call
        must return an empty string too.
        """


class BufferLineProvider(LineProvider):
    """Provide lines from the span text[start:end] of an in-memory string.

    A NUL character ends the logical text, as it would in a C string: the
    line stops before it and the provider is exhausted from then on.
    """

    def __init__(self, text: str, start: int = 0, end: int | None = None) -> None:
        if end is None:
            end = len(text)
        if not 0 <= start <= end <= len(text):
            raise ValueError(f"invalid span [{start}:{end}] for text of length {len(text)}")
        self._text = text
        self._pos = start
        self._end = end

    @property
    def position(self) -> int:
        return self._pos

    def next_line(self) -> str:
        begin = self._pos
        stop = self._end
        nul = self._text.find("\0", begin, stop)
        if nul != -1:
            stop = nul
        newline = self._text.find("\n", begin, stop)
        if newline != -1:
            self._pos = newline + 1
        else:
            # Nothing after this line can be reached any more.
            self._pos = stop
            self._end = stop
        return self._text[begin : self._pos]


class StreamLineProvider(LineProvider):
    """Provide lines from a text stream such as an open file."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._exhausted = False

    def next_line(self) -> str:
        if self._exhausted:
            return ""
        line = self._stream.readline()
        if not line:
            self._exhausted = True
            logger.debug("stream exhausted")
        return line
