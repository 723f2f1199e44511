from __future__ import annotations


class GHCreateError(Exception):
    """Base class for errors raised while creating & wiring up a repository"""


class InvalidArgumentError(GHCreateError):
    """Raised when a requested repository name is malformed"""


class NoConfiguredHostError(GHCreateError):
    """Raised when the target GitHub host or account cannot be determined"""


class NotARepositoryError(GHCreateError):
    pass


class VisibilityConflictError(GHCreateError):
    """
    Raised when a private repository was requested but a public repository
    of the same name already exists
    """


class RepositoryCreationError(GHCreateError):
    pass


class UnparsableRemoteURLError(GHCreateError):
    """
    Raised when a Git remote URL cannot be decomposed into an owner, name, &
    host
    """

    def __init__(self, url: str) -> None:
        super().__init__(url)
        self.url = url

    def __str__(self) -> str:
        return f"Cannot parse owner & name from remote URL {self.url!r}"
