from __future__ import annotations
from dataclasses import dataclass
import logging
from pathlib import Path, PurePath
import subprocess
from typing import Any
from . import util

log = logging.getLogger(__name__)


@dataclass
class Git:
    dirpath: Path

    def run(self, *args: str | Path, **kwargs: Any) -> subprocess.CompletedProcess:
        return util.runcmd("git", *args, cwd=self.dirpath, **kwargs)

    def read(self, *args: str | Path) -> str:
        return util.readcmd("git", *args, cwd=self.dirpath)

    def readlines(self, *args: str | Path) -> list[str]:
        return self.read(*args).splitlines()

    def is_repository(self) -> bool:
        try:
            self.run(
                "rev-parse",
                "--git-dir",
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
            )
        except subprocess.CalledProcessError:
            return False
        else:
            return True

    def workdir_name(self) -> str:
        return PurePath(self.read("rev-parse", "--show-toplevel")).name

    def get_remotes(self) -> list[str]:
        return self.readlines("remote")

    def get_remote_push_url(self, remote: str) -> str | None:
        if remote not in self.get_remotes():
            return None
        return self.read("remote", "get-url", "--push", remote)
