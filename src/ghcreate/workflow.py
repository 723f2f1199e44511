from __future__ import annotations
from collections.abc import Callable
from dataclasses import dataclass
import logging
from typing import Optional
import ghtoken
from .binder import ORIGIN, BindAction, bind
from .errors import NoConfiguredHostError, NotARepositoryError
from .git import Git
from .github import GitHub
from .hosts import HostContext, HostSettings, default_host
from .identity import ProjectIdentity
from .naming import resolve_raw_name
from .reconcile import RepositoryHost, reconcile

log = logging.getLogger(__name__)


@dataclass
class CreateOptions:
    private: bool = False
    description: Optional[str] = None
    homepage: Optional[str] = None
    browse: bool = False
    copy: bool = False
    dry_run: bool = False


@dataclass
class Outcome:
    #: Web URL of the repository
    url: str
    identity: ProjectIdentity
    created: bool
    action: BindAction


def execute(
    git: Git,
    raw_name: Optional[str],
    options: CreateOptions,
    settings: HostSettings,
    client_factory: Callable[[str], GitHub] = GitHub,
) -> Outcome:
    """
    Ensure that a hosted repository exists for the local repository and that
    the local "origin" remote points to it.  The only local modification, the
    adding of "origin", is performed last, after every check has passed.
    """
    if raw_name is not None:
        # Validate an explicit name before touching Git or the network
        raw_name = resolve_raw_name(raw_name, "")
    if not git.is_repository():
        raise NotARepositoryError("'create' must be run from inside a git repository")
    if raw_name is None:
        raw_name = resolve_raw_name(None, git.workdir_name())
    host_ctx = default_host(settings, client_factory)
    desired = ProjectIdentity.from_raw_name(raw_name, host_ctx.user, host_ctx.host)
    log.debug("Desired repository: %s on %s", desired, desired.host)
    try:
        gh = client_factory(host_ctx.host)
    except ghtoken.GHTokenNotFound:
        raise NoConfiguredHostError(f"No GitHub token found for {host_ctx.host}")
    with gh:
        return reconcile_and_bind(git, desired, options, host_ctx, gh)


def reconcile_and_bind(
    git: Git,
    desired: ProjectIdentity,
    options: CreateOptions,
    host_ctx: HostContext,
    gateway: RepositoryHost,
) -> Outcome:
    result = reconcile(
        desired,
        gateway,
        want_private=options.private,
        description=options.description,
        homepage=options.homepage,
        dry_run=options.dry_run,
        default_owner=host_ctx.user,
    )
    binding = bind(
        result.identity,
        git.get_remote_push_url(ORIGIN),
        protocol=host_ctx.protocol,
        default_owner=host_ctx.user,
    )
    if binding.action is BindAction.ADD_REMOTE:
        log.info("Setting %r remote to %s", ORIGIN, binding.remote_url)
    binding.commands.run(git, dry_run=options.dry_run)
    return Outcome(
        url=binding.web_url,
        identity=result.identity,
        created=result.created,
        action=binding.action,
    )
