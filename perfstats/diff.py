"""Human-readable differences between two strings."""

from __future__ import annotations

import json
import os
import shutil
import subprocess
import tempfile
from contextlib import ExitStack

_PREFIX = "benchfmt_test"


def _write_temp_file(data: str) -> str:
    fd, name = tempfile.mkstemp(prefix=_PREFIX)
    try:
        with os.fdopen(fd, "wb") as handle:
            handle.write(data.encode())
    except OSError:
        os.remove(name)
        raise
    return name


def _quote(s: str) -> str:
    return json.dumps(s, ensure_ascii=False)


def diff(s1: str, s2: str) -> str:
    """Describe the differences between s1 and s2.

    Returns an empty string if they are equal. If the diff command is
    available the result is its unified diff output; a non-empty result
    means the strings differ or the command failed.
    """
    if s1 == s2:
        return ""
    if shutil.which("diff") is None:
        return f"diff command unavailable\nold: {_quote(s1)}\nnew: {_quote(s2)}"

    with ExitStack() as cleanup:
        names = []
        for text in (s1, s2):
            try:
                name = _write_temp_file(text)
            except OSError as err:
                return str(err)
            cleanup.callback(os.remove, name)
            names.append(name)

        try:
            completed = subprocess.run(
                ["diff", "-u", *names],
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                check=False,
            )
        except OSError as err:
            return str(err)

        output = completed.stdout.decode(errors="replace")
        # diff exits non-zero when the files differ; output is what matters.
        if not output and completed.returncode != 0:
            output += f"exit status {completed.returncode}"
        return output