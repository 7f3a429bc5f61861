"""Locating commands on the search path and running them as a pipeline."""

from __future__ import annotations

import errno
import os
import subprocess
import sys
import tempfile
from collections.abc import Mapping, Sequence
from contextlib import ExitStack
from typing import IO, Any

from pipex.parsing import PipelineSpec


class CommandNotFound(FileNotFoundError):
    """No directory on the search path holds the named command."""

    def __init__(self, name: str):
        super().__init__(errno.ENOENT, "command not found", name)
        self.name = name


def resolve_command(name: str, search_dirs: Sequence[str]) -> str:
    """Return the first ``dir/name`` that exists among ``search_dirs``."""
    if not name:
        raise CommandNotFound(name)
    for directory in search_dirs:
        candidate = f"{directory}/{name}"
        if os.path.exists(candidate):
            return candidate
    raise CommandNotFound(name)


def _input_source(stdin: Any, stack: ExitStack) -> Any:
    if isinstance(stdin, (bytes, bytearray)):
        spool = stack.enter_context(tempfile.TemporaryFile())
        spool.write(stdin)
        spool.seek(0)
        return spool
    return stdin


def _start(argv: list[str], spec: PipelineSpec, source: Any, target: Any,
           env: Mapping[str, str] | None) -> subprocess.Popen | None:
    try:
        path = resolve_command(argv[0] if argv else "", spec.search_dirs)
        return subprocess.Popen(
            argv, executable=path, stdin=source, stdout=target,
            env=None if env is None else dict(env),
        )
    except OSError as exc:
        print(exc, file=sys.stderr)
        return None


def run_pipeline(spec: PipelineSpec, stdin: Any = None, stdout: Any = None,
                 env: Mapping[str, str] | None = None) -> list[int | None]:
    """Run the commands of ``spec``, each feeding the next.

    ``stdin`` is the first command's input: a file, a descriptor, or bytes.
    The last command writes to ``stdout``. A command that cannot be started
    is reported on standard error and the next one receives empty input.
    Returns each command's exit status, None for those never started.
    """
    if not spec.commands:
        raise ValueError("a pipeline needs at least one command")
    last_index = len(spec.commands) - 1
    processes: list[subprocess.Popen | None] = []
    with ExitStack() as stack:
        source = _input_source(stdin, stack)
        previous_pipe: IO[bytes] | None = None
        for index, argv in enumerate(spec.commands):
            last = index == last_index
            target = stdout if last else subprocess.PIPE
            process = _start(argv, spec, source, target, env)
            if previous_pipe is not None:
                previous_pipe.close()
            processes.append(process)
            if process is None:
                source = subprocess.DEVNULL
                previous_pipe = None
            elif not last:
                source = previous_pipe = process.stdout
        return [None if process is None else process.wait() for process in processes]