from __future__ import annotations
from pathlib import PurePath
import re
from .errors import InvalidArgumentError


def resolve_raw_name(explicit: str | None, workdir_name: str) -> str:
    """
    Determine the raw (possibly ``owner/``-qualified) name of the repository
    to create.  An explicitly-given name is used as-is as long as it doesn't
    look like an option and is of the form ``NAME`` or ``OWNER/NAME``;
    otherwise, the name is derived from the name of the working directory.
    """
    if explicit is not None:
        if not re.match(r"[^-]", explicit):
            raise InvalidArgumentError(f"invalid argument: {explicit}")
        if "/" in explicit:
            owner, _, name = explicit.partition("/")
        else:
            owner, name = None, explicit
        if owner == "" or not name or "/" in name or name.startswith("-"):
            raise InvalidArgumentError(f"invalid argument: {explicit}")
        return explicit
    return sanitize_project_name(workdir_name)


def sanitize_project_name(name: str) -> str:
    """
    Convert a directory name into a name that GitHub will accept for a
    repository

    >>> sanitize_project_name("/home/user/My Cool Project")
    'my-cool-project'
    """
    base = PurePath(name).name.lower()
    base = re.sub(r"[^a-z0-9._-]+", "-", base)
    base = base.lstrip("-.").rstrip("-")
    if not base:
        raise InvalidArgumentError(
            f"Cannot derive a repository name from directory name {name!r}"
        )
    return base
