"""Minimal command runner: in a child process or through the system shell."""

from __future__ import annotations

import argparse
import shlex
import subprocess
import sys
from typing import Optional, Sequence


def run_command(command: str, use_fork: bool = True) -> int:
    """Run ``command`` and report how it ended; return its exit status.

    ``exit`` as the first word raises SystemExit(0). With ``use_fork`` the
    command is split into words and run directly; otherwise the system
    shell runs it. A program that cannot be started yields status 1.
    """
    words = shlex.split(command)
    if words and words[0] == "exit":
        raise SystemExit(0)
    sys.stdout.flush()

    if not use_fork:
        try:
            status = subprocess.run(command, shell=True).returncode
        except OSError:
            print("System failure occurred..")
            return -1
        print(f"Process exited with status {status}")
        return status

    try:
        status = subprocess.run(words).returncode if words else 1
    except OSError:
        status = 1
    if status == 1 and not words:
        print("could not run an empty command")
    if status < 0:
        print("Process did not exit normally.")
    else:
        print(f"Process exited with status {status}")
    return status


def _runs(words: list[str]) -> int:
    try:
        return subprocess.run(words).returncode
    except OSError:
        print(f"could not run {words[0]!r}")
        return 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Run commands read from standard input.")
    parser.add_argument(
        "--system",
        action="store_true",
        help="run each command through the system shell",
    )
    args = parser.parse_args(argv)
    for line in sys.stdin:
        command = line.strip()
        if not command:
            continue
        if command.split()[0] == "exit":
            return 0
        run_command(command, not args.system)
    return 0