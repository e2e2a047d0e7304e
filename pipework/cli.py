"""Run ``infile < cmd1 | cmd2 > outfile`` from four arguments."""

from __future__ import annotations

import os
import subprocess
import sys
from typing import List, Mapping, Optional, Sequence

from pipework.output import put_str
from pipework.paths import CommandNotFoundError, parse_command

NOT_FOUND_STATUS = 127
FAILURE_STATUS = 1
USAGE_STATUS = 3  # the value of SIGQUIT


class UsageError(ValueError):
    """The command line does not hold exactly four arguments."""


def _report(prefix: str, exc: OSError) -> None:
    message = exc.strerror or str(exc)
    if prefix:
        put_str(f"{prefix}: {message}\n", sys.stderr)
    else:
        put_str(f"{message}\n", sys.stderr)


def _report_missing(exc: CommandNotFoundError) -> None:
    put_str(f"{exc.name}: command not found ", sys.stderr)


def _status(returncode: int) -> int:
    return returncode if returncode >= 0 else 128 - returncode


def _first_stage(infile: str, command: str, env: Mapping[str, str]) -> bytes:
    """Run the first command on ``infile`` and return what it wrote."""
    try:
        source = open(infile, "rb")
    except OSError as exc:
        _report(infile, exc)
        return b""
    with source:
        try:
            path, args = parse_command(command, env)
        except CommandNotFoundError as exc:
            _report_missing(exc)
            return b""
        try:
            result = subprocess.run(
                args,
                executable=path,
                stdin=source,
                stdout=subprocess.PIPE,
                env=dict(env),
                check=False,
            )
        except OSError as exc:
            _report("", exc)
            return b""
    return result.stdout


def run_pipeline(
    infile: str,
    first: str,
    second: str,
    outfile: str,
    env: Optional[Mapping[str, str]] = None,
) -> int:
    """Feed ``infile`` through ``first`` then ``second`` into ``outfile``.

    The first command finishes before the output file is opened. Return the
    exit status of the second command, 127 when it cannot be found and 1
    when the output file cannot be opened or the command cannot be started.
    """
    environment = os.environ if env is None else env
    data = _first_stage(infile, first, environment)
    try:
        fd_out = os.open(outfile, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o777)
    except OSError as exc:
        _report(outfile, exc)
        return FAILURE_STATUS
    try:
        try:
            path, args = parse_command(second, environment)
        except CommandNotFoundError as exc:
            _report_missing(exc)
            return NOT_FOUND_STATUS
        try:
            result = subprocess.run(
                args,
                executable=path,
                input=data,
                stdout=fd_out,
                env=dict(environment),
                check=False,
            )
        except OSError as exc:
            _report("", exc)
            return FAILURE_STATUS
    finally:
        os.close(fd_out)
    return _status(result.returncode)


def _parse_args(argv: Sequence[str]) -> List[str]:
    if len(argv) != 4:
        raise UsageError("expected <file1> <cmd1> <cmd2> <file2>")
    return list(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point: ``pipework <file1> <cmd1> <cmd2> <file2>``."""
    args = sys.argv[1:] if argv is None else argv
    try:
        infile, first, second, outfile = _parse_args(args)
    except UsageError:
        put_str("\033[31mError: Bad arguments\n", sys.stderr)
        put_str("Ex: pipework <file1> <cmd1> <cmd2> <file2>\n", sys.stdout)
        return USAGE_STATUS
    return run_pipeline(infile, first, second, outfile)


if __name__ == "__main__":
    sys.exit(main())