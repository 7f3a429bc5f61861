"""Command-line parsing for a pipeline of shell commands."""

from __future__ import annotations

import os
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from pipex.strings import split, strncmp

HERE_DOC_KEYWORD = "here_doc"
PATH_VARIABLE = "PATH"
INFILE_ERROR_MESSAGE = "Error\n infile doesn't exist"
MIN_ARGUMENTS = 4


class InfileError(OSError):
    """The input file is missing or cannot be read."""

    def __init__(self, filename: str):
        super().__init__(INFILE_ERROR_MESSAGE)
        self.filename = filename


@dataclass
class PipelineSpec:
    """Everything needed to run one pipeline."""

    commands: list[list[str]]
    outfile: str
    search_dirs: list[str] = field(default_factory=list)
    infile: str | None = None
    limiter: str | None = None

    @property
    def here_doc(self) -> bool:
        """True when input comes from a here-document rather than a file."""
        return self.limiter is not None


def find_path_value(env: Mapping[str, str]) -> str:
    """Return the value of PATH in ``env``, raising LookupError if absent."""
    try:
        return env[PATH_VARIABLE]
    except KeyError:
        raise LookupError(f"{PATH_VARIABLE} is not set in the environment") from None


def parse_args(argv: Sequence[str], env: Mapping[str, str]) -> PipelineSpec:
    """Build a PipelineSpec from the arguments that follow the program name.

    The forms accepted are ``infile cmd1 ... cmdN outfile`` and
    ``here_doc LIMITER cmd1 ... cmdN outfile``.
    """
    args = list(argv)
    if len(args) < MIN_ARGUMENTS:
        raise ValueError(f"expected at least {MIN_ARGUMENTS} arguments, got {len(args)}")
    outfile = args[-1]
    if strncmp(args[0], HERE_DOC_KEYWORD, len(HERE_DOC_KEYWORD)) == 0:
        infile = None
        limiter: str | None = args[1]
        raw_commands = args[2:-1]
    else:
        infile = args[0]
        limiter = None
        if not os.access(infile, os.R_OK):
            raise InfileError(infile)
        raw_commands = args[1:-1]
    search_dirs = split(find_path_value(env), ":")
    commands = [split(command, " ") for command in raw_commands]
    return PipelineSpec(
        commands=commands,
        outfile=outfile,
        search_dirs=search_dirs,
        infile=infile,
        limiter=limiter,
    )