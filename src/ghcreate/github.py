from __future__ import annotations
from dataclasses import dataclass
import logging
from typing import Any
from ghreq import Client, make_user_agent
import ghtoken  # Module import for mocking purposes
from . import __url__, __version__
from .identity import ProjectIdentity, normalize_host

log = logging.getLogger(__name__)


def api_url_for_host(host: str) -> str:
    host = normalize_host(host)
    if host == "github.com":
        return "https://api.github.com"
    else:
        return f"https://{host}/api/v3"


@dataclass
class RemoteRepository:
    full_name: str
    private: bool

    @classmethod
    def from_payload(cls, data: dict[str, Any]) -> RemoteRepository:
        return cls(full_name=data["full_name"], private=bool(data["private"]))


class GitHub(Client):
    def __init__(self, host: str = "github.com") -> None:
        super().__init__(
            api_url=api_url_for_host(host),
            token=ghtoken.get_ghtoken(),
            user_agent=make_user_agent("ghcreate", __version__, url=__url__),
        )

    def current_user(self) -> str:
        login = self.get("/user")["login"]
        assert isinstance(login, str)
        return login

    def lookup(self, project: ProjectIdentity) -> RemoteRepository:
        return RemoteRepository.from_payload(
            self.get(f"/repos/{project.owner}/{project.name}")
        )

    def create(
        self,
        project: ProjectIdentity,
        description: str | None,
        homepage: str | None,
        private: bool,
        user: str | None = None,
    ) -> RemoteRepository:
        payload: dict[str, Any] = {"name": project.name, "private": private}
        if description:
            payload["description"] = description
        if homepage:
            payload["homepage"] = homepage
        if not project.owner or (
            user is not None and project.owner.lower() == user.lower()
        ):
            path = "/user/repos"
        else:
            path = f"/orgs/{project.owner}/repos"
        log.debug("POSTing to %s: %r", path, payload)
        return RemoteRepository.from_payload(self.post(path, payload))
