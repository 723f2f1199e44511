from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
import logging
import shlex
from typing import Optional
from .errors import UnparsableRemoteURLError
from .git import Git
from .identity import ProjectIdentity

log = logging.getLogger(__name__)

ORIGIN = "origin"


class BindAction(Enum):
    NOOP = "noop"
    ADD_REMOTE = "add-remote"
    CONFLICT_WARNING = "conflict-warning"


@dataclass
class CommandQueue:
    """Git commands to run once all checks have passed"""

    commands: list[list[str]] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.commands)

    def add(self, *args: str) -> None:
        self.commands.append(list(args))

    def run(self, git: Git, dry_run: bool = False) -> None:
        for args in self.commands:
            if dry_run:
                log.info("Would run: git %s", shlex.join(args))
            else:
                git.run(*args)


@dataclass
class Binding:
    action: BindAction
    #: The URL of the remote to add, if any
    remote_url: Optional[str]
    web_url: str
    commands: CommandQueue


def bind(
    final: ProjectIdentity,
    origin_url: Optional[str],
    protocol: str = "ssh",
    default_owner: Optional[str] = None,
) -> Binding:
    """
    Decide what to do about the local repository's "origin" remote given the
    hosted repository ``final`` and the push URL of the current "origin" (or
    `None` if there is no such remote).  Nothing is executed; any needed
    commands are returned in the `Binding`'s `CommandQueue`.
    """
    commands = CommandQueue()
    remote_url: Optional[str] = None
    if origin_url is None:
        remote_url = final.git_url(protocol)
        commands.add("remote", "add", "-f", ORIGIN, remote_url)
        action = BindAction.ADD_REMOTE
    else:
        try:
            origin = ProjectIdentity.from_remote_url(origin_url)
        except UnparsableRemoteURLError as e:
            log.debug("%s", e)
            matches = False
        else:
            matches = origin.same_as(final, default_owner)
        if matches:
            log.debug("%r remote already points to %s", ORIGIN, final)
            action = BindAction.NOOP
        else:
            log.warning(
                'A git remote named "%s" already exists and is set to push to %r.',
                ORIGIN,
                origin_url,
            )
            action = BindAction.CONFLICT_WARNING
    return Binding(
        action=action,
        remote_url=remote_url,
        web_url=final.web_url(),
        commands=commands,
    )
