from __future__ import annotations
from unittest.mock import MagicMock
import ghtoken
import pytest
from ghcreate.binder import BindAction
from ghcreate.errors import NoConfiguredHostError
from ghcreate.github import RemoteRepository
from ghcreate.hosts import HostContext, HostSettings
from ghcreate.identity import ProjectIdentity
from ghcreate.workflow import CreateOptions, Outcome, execute, reconcile_and_bind

CTX = HostContext(host="github.com", user="jdoe")


def test_reconcile_and_bind_new_repo() -> None:
    git = MagicMock(**{"get_remote_push_url.return_value": None})
    gateway = MagicMock()
    gateway.lookup.side_effect = RuntimeError("404 Not Found")
    gateway.create.return_value = RemoteRepository("myorg/widgets", private=False)
    desired = ProjectIdentity("myorg", "widgets", "github.com")
    outcome = reconcile_and_bind(git, desired, CreateOptions(), CTX, gateway)
    assert outcome == Outcome(
        url="https://github.com/myorg/widgets",
        identity=desired,
        created=True,
        action=BindAction.ADD_REMOTE,
    )
    gateway.create.assert_called_once_with(desired, None, None, False, user="jdoe")
    git.run.assert_called_once_with(
        "remote", "add", "-f", "origin", "git@github.com:myorg/widgets.git"
    )


def test_reconcile_and_bind_dry_run_queues_nothing_for_real() -> None:
    git = MagicMock(**{"get_remote_push_url.return_value": None})
    gateway = MagicMock()
    gateway.lookup.side_effect = RuntimeError("404 Not Found")
    desired = ProjectIdentity("jdoe", "widgets", "github.com")
    outcome = reconcile_and_bind(
        git, desired, CreateOptions(dry_run=True), CTX, gateway
    )
    assert outcome.identity is desired
    assert not outcome.created
    assert outcome.action is BindAction.ADD_REMOTE
    gateway.create.assert_not_called()
    git.run.assert_not_called()


def test_execute_no_token() -> None:
    git = MagicMock(**{"is_repository.return_value": True})

    def factory(_host: str) -> MagicMock:
        raise ghtoken.GHTokenNotFound()

    with pytest.raises(NoConfiguredHostError) as excinfo:
        execute(
            git,
            "myorg/widgets",
            CreateOptions(),
            HostSettings(user="jdoe"),
            client_factory=factory,
        )
    assert str(excinfo.value) == "No GitHub token found for github.com"
    git.get_remote_push_url.assert_not_called()
    git.run.assert_not_called()


def test_execute_uses_host_settings() -> None:
    git = MagicMock(
        **{
            "is_repository.return_value": True,
            "workdir_name.return_value": "widgets",
            "get_remote_push_url.return_value": "git@ghe.example.com:jdoe/widgets.git",
        }
    )
    gh = MagicMock()
    gh.__enter__.return_value = gh
    gh.lookup.return_value = RemoteRepository("jdoe/widgets", private=False)
    seen_hosts = []

    def factory(host: str) -> MagicMock:
        seen_hosts.append(host)
        return gh

    outcome = execute(
        git,
        None,
        CreateOptions(),
        HostSettings(host="ghe.example.com", user="jdoe"),
        client_factory=factory,
    )
    assert outcome == Outcome(
        url="https://ghe.example.com/jdoe/widgets",
        identity=ProjectIdentity("jdoe", "widgets", "ghe.example.com"),
        created=False,
        action=BindAction.NOOP,
    )
    assert seen_hosts == ["ghe.example.com"]
    gh.lookup.assert_called_once_with(
        ProjectIdentity("jdoe", "widgets", "ghe.example.com")
    )
    gh.create.assert_not_called()
    git.run.assert_not_called()
