"""Running shell commands and reporting the build's commit hash."""

from __future__ import annotations

import subprocess

VERSION = "1.0"


class CommandError(RuntimeError):
    """A command exited with a non-zero status; holds its terminal output."""

    def __init__(self, output: str, returncode: int) -> None:
        super().__init__(output)
        self.output = output
        self.returncode = returncode


def capture_call(cmd: str) -> str:
    """Run ``cmd`` in the shell and return its combined stdout and stderr."""
    result = subprocess.run(
        cmd,
        shell=True,
        stdout=subprocess.PIPE,
        stderr=subprocess.STDOUT,
    )
    output = result.stdout.decode(errors="replace")
    if result.returncode:
        raise CommandError(output, result.returncode)
    return output


def version_banner(commit_hash: str) -> str:
    """Return the version banner showing the first ten digits of the hash."""
    return f"  metagems\n  version {VERSION}\n  hash: {commit_hash[:10]}\n"


def print_version() -> None:
    """Print the version banner for the current git commit."""
    commit_hash = capture_call("git rev-parse HEAD")
    print(version_banner(commit_hash))