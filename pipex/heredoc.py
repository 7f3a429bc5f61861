"""Collecting here-document input up to a limiter line."""

from __future__ import annotations

import sys
from typing import TextIO

from pipex.linereader import LineReader
from pipex.strings import strncmp

PROMPT = "heredoc> "


def read_heredoc(limiter: str, stream, prompt_stream: TextIO | None = None) -> str:
    """Read lines from ``stream`` until one equal to ``limiter`` or end of input.

    A prompt is written to ``prompt_stream`` (standard error by default)
    before each line is read. The limiter line itself is not included.
    """
    prompt = sys.stderr if prompt_stream is None else prompt_stream
    size = len(limiter)
    reader = LineReader(stream)
    lines: list[str] = []
    while True:
        prompt.write(PROMPT)
        prompt.flush()
        line = reader.read_line()
        if line is None:
            break
        if strncmp(line, limiter, size) == 0 and len(line) - 1 == size:
            break
        lines.append(line)
    return "".join(lines)