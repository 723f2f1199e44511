from __future__ import annotations
from dataclasses import dataclass, replace
import re
from typing import Optional
from urllib.parse import urlsplit
from .errors import InvalidArgumentError, UnparsableRemoteURLError

#: Matches SCP-style remote URLs like ``git@github.com:owner/repo.git``
SCP_RGX = re.compile(r"(?:[^@/:]+@)?(?P<host>[^@/:]+):(?P<path>[^/].*)")

REMOTE_SCHEMES = {"git", "http", "https", "ssh", "git+ssh", "ssh+git"}


def normalize_host(host: str) -> str:
    host = host.strip().lower()
    if host.startswith("www."):
        host = host[4:]
    return host


@dataclass(frozen=True)
class ProjectIdentity:
    """The owner, name, & host uniquely identifying a hosted repository"""

    #: May be empty, meaning "the authenticated user"
    owner: str
    name: str
    host: str

    def __post_init__(self) -> None:
        if not self.name:
            raise InvalidArgumentError("Repository name cannot be empty")
        if "/" in self.name:
            raise InvalidArgumentError(
                f"Invalid repository name {self.name!r}: name cannot contain '/'"
            )
        if self.name.startswith("-"):
            raise InvalidArgumentError(
                f"Invalid repository name {self.name!r}: name cannot start with '-'"
            )

    @classmethod
    def from_raw_name(
        cls, raw_name: str, default_owner: str, host: str
    ) -> ProjectIdentity:
        # Only the first slash is significant; anything after it is the name,
        # which then fails validation if it contains a slash of its own.
        if "/" in raw_name:
            owner, _, name = raw_name.partition("/")
            if not owner:
                raise InvalidArgumentError(f"invalid argument: {raw_name}")
        else:
            owner, name = default_owner, raw_name
        return cls(owner=owner, name=name, host=host)

    @classmethod
    def from_full_name(cls, full_name: str, host: str) -> ProjectIdentity:
        owner, sep, name = full_name.partition("/")
        if not sep:
            raise InvalidArgumentError(
                f"Invalid repository full name {full_name!r}: expected OWNER/NAME"
            )
        return cls(owner=owner, name=name, host=host)

    @classmethod
    def from_remote_url(cls, url: str) -> ProjectIdentity:
        url = url.strip()
        host: Optional[str]
        if "://" in url:
            parts = urlsplit(url)
            if parts.scheme.lower() not in REMOTE_SCHEMES:
                raise UnparsableRemoteURLError(url)
            try:
                host = parts.hostname
            except ValueError:
                raise UnparsableRemoteURLError(url)
            path = parts.path
        elif m := SCP_RGX.fullmatch(url):
            host = m["host"]
            path = m["path"]
        else:
            raise UnparsableRemoteURLError(url)
        path = path.strip("/")
        if path.endswith(".git"):
            path = path[:-4]
        owner, sep, name = path.partition("/")
        if not host or not sep or not owner or not name or "/" in name:
            raise UnparsableRemoteURLError(url)
        try:
            return cls(owner=owner, name=name, host=normalize_host(host))
        except InvalidArgumentError:
            raise UnparsableRemoteURLError(url)

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.name}"

    def resolved(self, default_owner: Optional[str]) -> ProjectIdentity:
        """
        Return a copy of the identity with an empty owner replaced by
        ``default_owner``
        """
        if not self.owner and default_owner:
            return replace(self, owner=default_owner)
        return self

    def same_as(
        self, other: ProjectIdentity, default_owner: Optional[str] = None
    ) -> bool:
        """
        Test whether two identities refer to the same hosted repository,
        ignoring differences in case and in host formatting.  Empty owners
        are filled in with ``default_owner`` before comparing.
        """
        a = self.resolved(default_owner)
        b = other.resolved(default_owner)
        return (
            a.owner.lower() == b.owner.lower()
            and a.name.lower() == b.name.lower()
            and normalize_host(a.host) == normalize_host(b.host)
        )

    def git_url(self, protocol: str = "ssh") -> str:
        if protocol == "ssh":
            return f"git@{self.host}:{self.full_name}.git"
        elif protocol == "https":
            return f"https://{self.host}/{self.full_name}.git"
        else:
            raise ValueError(f"Unsupported Git protocol: {protocol!r}")

    def web_url(self) -> str:
        return f"https://{self.host}/{self.full_name}"

    def __str__(self) -> str:
        return self.full_name
