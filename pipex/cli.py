"""Command-line entry point: run ``infile cmd ... outfile`` as a pipeline."""

from __future__ import annotations

import os
import sys
from contextlib import ExitStack
from typing import Sequence

from pipex.executor import run_pipeline
from pipex.heredoc import read_heredoc
from pipex.parsing import MIN_ARGUMENTS, InfileError, PipelineSpec, parse_args

_OUTFILE_MODE = 0o644


def _open_outfile(spec: PipelineSpec):
    flags = os.O_CREAT | os.O_WRONLY
    flags |= os.O_APPEND if spec.here_doc else os.O_TRUNC
    return os.fdopen(os.open(spec.outfile, flags, _OUTFILE_MODE), "wb")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the pipeline described by ``argv`` and return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    env = dict(os.environ)
    if not env or len(args) < MIN_ARGUMENTS:
        return 0
    try:
        spec = parse_args(args, env)
    except InfileError as exc:
        sys.stderr.write(str(exc))
        return 0
    except LookupError as exc:
        print(f"pipex: {exc}", file=sys.stderr)
        return 1
    with ExitStack() as stack:
        try:
            infile = None if spec.here_doc else stack.enter_context(open(spec.infile, "rb"))
            outfile = stack.enter_context(_open_outfile(spec))
        except OSError as exc:
            print(f"pipex: {exc}", file=sys.stderr)
            return 0
        if spec.here_doc:
            source = read_heredoc(spec.limiter, sys.stdin, sys.stderr).encode()
        else:
            source = infile
        run_pipeline(spec, source, outfile, env)
    return 0


if __name__ == "__main__":
    sys.exit(main())