from __future__ import annotations
from dataclasses import dataclass
import logging
from typing import Optional, Protocol
from .errors import (
    InvalidArgumentError,
    RepositoryCreationError,
    VisibilityConflictError,
)
from .github import RemoteRepository
from .identity import ProjectIdentity

log = logging.getLogger(__name__)


class RepositoryHost(Protocol):
    def lookup(self, project: ProjectIdentity) -> RemoteRepository: ...

    def create(
        self,
        project: ProjectIdentity,
        description: str | None,
        homepage: str | None,
        private: bool,
        user: str | None = None,
    ) -> RemoteRepository: ...


@dataclass(frozen=True)
class Reconciliation:
    #: The repository to use, as reported by the host if it was found or
    #: created
    identity: ProjectIdentity
    created: bool


def reconcile(
    desired: ProjectIdentity,
    gateway: RepositoryHost,
    want_private: bool = False,
    description: str | None = None,
    homepage: str | None = None,
    dry_run: bool = False,
    default_owner: Optional[str] = None,
) -> Reconciliation:
    """
    Find the hosted repository matching ``desired`` or, if there is none,
    create it (unless ``dry_run`` is true).  At most one repository is ever
    created per call, and an existing compatible repository is always reused.

    :raises VisibilityConflictError:
        if ``want_private`` is true and the existing repository is public
    :raises RepositoryCreationError: if creating the repository failed
    """
    record: Optional[RemoteRepository]
    try:
        record = gateway.lookup(desired)
    except Exception as e:
        # Lookup errors of all kinds are taken to mean "does not exist"
        log.debug("Lookup of %s failed: %s", desired, e)
        record = None
    found: Optional[ProjectIdentity] = None
    if record is not None:
        try:
            found = ProjectIdentity.from_full_name(record.full_name, desired.host)
        except InvalidArgumentError as e:
            log.debug("Lookup of %s returned unusable record: %s", desired, e)
    if record is not None and found is not None:
        if not found.same_as(desired, default_owner):
            log.debug(
                "Lookup of %s returned unrelated repository %s; ignoring",
                desired,
                found,
            )
        elif not record.private and want_private:
            raise VisibilityConflictError(
                f"Repository '{record.full_name}' already exists and is public"
            )
        else:
            log.warning("Existing repository detected")
            return Reconciliation(identity=found, created=False)
    if dry_run:
        log.info("Would create repository %s", desired)
        return Reconciliation(identity=desired, created=False)
    log.info(
        "Creating %s repository %s",
        "private" if want_private else "public",
        desired,
    )
    try:
        repo = gateway.create(
            desired, description, homepage, want_private, user=default_owner
        )
    except Exception as e:
        raise RepositoryCreationError(str(e)) from e
    return Reconciliation(
        identity=ProjectIdentity.from_full_name(repo.full_name, desired.host),
        created=True,
    )
