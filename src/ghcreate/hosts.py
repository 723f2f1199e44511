from __future__ import annotations
from collections.abc import Callable, Mapping
from dataclasses import dataclass
import logging
import os
import re
from typing import Any, Optional
import ghtoken
import requests
from .errors import NoConfiguredHostError
from .github import GitHub
from .identity import normalize_host

log = logging.getLogger(__name__)

DEFAULT_HOST = "github.com"

PROTOCOLS = ("ssh", "https")


@dataclass
class HostSettings:
    """Host configuration as read from the config file & environment"""

    host: str = DEFAULT_HOST
    user: Optional[str] = None
    #: Protocol to use for the URLs of newly-added remotes
    protocol: str = "ssh"

    @classmethod
    def from_config(
        cls, cfg: Mapping[str, Any], env: Optional[Mapping[str, str]] = None
    ) -> HostSettings:
        if env is None:
            env = os.environ
        host = env.get("GITHUB_HOST") or cfg.get("host") or DEFAULT_HOST
        user = env.get("GITHUB_USER") or cfg.get("user") or None
        if user is not None:
            user = str(user)
        protocol = cfg.get("protocol", "ssh")
        return cls(host=str(host), user=user, protocol=str(protocol))


@dataclass(frozen=True)
class HostContext:
    """The resolved host & account that a repository is created under"""

    host: str
    user: str
    protocol: str = "ssh"


def default_host(
    settings: HostSettings, client_factory: Callable[[str], GitHub] = GitHub
) -> HostContext:
    host = normalize_host(settings.host)
    if not host or re.search(r"[\s/:@]", host):
        raise NoConfiguredHostError(f"Invalid GitHub host: {settings.host!r}")
    if settings.protocol not in PROTOCOLS:
        raise NoConfiguredHostError(
            f"Invalid Git protocol for {host}: {settings.protocol!r}"
            f" (expected one of: {', '.join(PROTOCOLS)})"
        )
    user = settings.user
    if not user:
        log.debug("No user configured for %s; asking the API", host)
        try:
            with client_factory(host) as gh:
                user = gh.current_user()
        except ghtoken.GHTokenNotFound:
            raise NoConfiguredHostError(
                f"No GitHub token found for {host}; cannot determine user"
            )
        except requests.RequestException as e:
            raise NoConfiguredHostError(
                f"Could not determine GitHub user for {host}: {e}"
            )
    return HostContext(host=host, user=user, protocol=settings.protocol)
