"""Locate the directory holding templates and static files for a package."""

from __future__ import annotations

import os
import subprocess
import sys


def _go_root() -> str:
    """Return the Go root directory, if one is known."""
    root = os.environ.get("GOROOT", "")
    if root:
        return root
    try:
        completed = subprocess.run(
            ["go", "env", "GOROOT"], capture_output=True, check=False
        )
    except OSError:
        return ""
    if completed.returncode != 0:
        return ""
    return completed.stdout.decode(errors="replace").rstrip("\r\n")


def default_gopath() -> str:
    """Return the default GOPATH: the "go" directory under the home directory.

    Returns an empty string if there is no home directory, or if the default
    would coincide with the Go root.
    """
    if sys.platform.startswith("win"):
        env = "USERPROFILE"
    elif sys.platform.startswith("plan9"):
        env = "home"
    else:
        env = "HOME"
    home = os.environ.get(env, "")
    if not home:
        return ""
    default = os.path.join(home, "go")
    root = _go_root()
    if root and os.path.normpath(default) == os.path.normpath(root):
        # Using the Go root as GOPATH makes the go tool complain.
        return ""
    return default


def find(pkg: str) -> str:
    """Return the directory of pkg, or an empty string if it cannot be found.

    pkg names the directory that contains the templates and/or static
    directories. The go tool is asked first; failing that, each entry of
    GOPATH (or the default GOPATH) is searched.
    """
    try:
        completed = subprocess.run(
            ["go", "list", "-e", "-f", "{{.Dir}}", pkg],
            capture_output=True,
            check=False,
        )
    except OSError:
        completed = None
    if completed is not None and completed.returncode == 0 and completed.stdout:
        return completed.stdout.decode(errors="replace").rstrip("\r\n")

    gopath = os.environ.get("GOPATH", "") or default_gopath()
    if gopath:
        for entry in gopath.split(":"):
            candidate = os.path.join(entry, pkg)
            if os.path.exists(candidate):
                return candidate
    return ""