from __future__ import annotations
from collections.abc import Callable
from functools import wraps
import logging
from pathlib import Path
import shlex
import shutil
import subprocess
import sys
from typing import Any

log = logging.getLogger(__name__)

#: Clipboard commands to try, in order, for `copy_to_clipboard()`
CLIPBOARD_COMMANDS = [
    ["pbcopy"],
    ["clip"],
    ["wl-copy"],
    ["xclip", "-selection", "clipboard"],
    ["xsel", "--clipboard", "--input"],
]


def runcmd(*args: str | Path, **kwargs: Any) -> subprocess.CompletedProcess:
    log.debug("Running: %s", shlex.join(map(str, args)))
    kwargs.setdefault("check", True)
    return subprocess.run(args, **kwargs)


def readcmd(*args: str | Path, **kwargs: Any) -> str:
    kwargs["stdout"] = subprocess.PIPE
    kwargs["text"] = True
    r = runcmd(*args, **kwargs)
    assert isinstance(r.stdout, str)
    return r.stdout.strip()


def copy_to_clipboard(text: str) -> None:
    for cmd in CLIPBOARD_COMMANDS:
        if shutil.which(cmd[0]) is not None:
            runcmd(*cmd, input=text, text=True)
            return
    raise RuntimeError("No clipboard command available")


def cpe_no_tb(func: Callable) -> Callable:
    @wraps(func)
    def wrapped(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except subprocess.CalledProcessError as e:
            sys.exit(e.returncode)

    return wrapped
