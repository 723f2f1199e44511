from __future__ import annotations
import ghtoken
import pytest
from pytest_mock import MockerFixture
import responses
from ghcreate.errors import NoConfiguredHostError
from ghcreate.hosts import HostContext, HostSettings, default_host


def test_settings_defaults() -> None:
    assert HostSettings.from_config({}, env={}) == HostSettings(
        host="github.com", user=None, protocol="ssh"
    )


def test_settings_from_config() -> None:
    cfg = {"host": "ghe.example.com", "user": "jdoe", "protocol": "https"}
    assert HostSettings.from_config(cfg, env={}) == HostSettings(
        host="ghe.example.com", user="jdoe", protocol="https"
    )


def test_settings_non_string_user() -> None:
    cfg = {"host": "github.com", "user": 123}
    assert HostSettings.from_config(cfg, env={}) == HostSettings(
        host="github.com", user="123", protocol="ssh"
    )


def test_settings_env_overrides_config() -> None:
    cfg = {"host": "ghe.example.com", "user": "jdoe"}
    env = {"GITHUB_HOST": "github.com", "GITHUB_USER": "octocat"}
    assert HostSettings.from_config(cfg, env=env) == HostSettings(
        host="github.com", user="octocat", protocol="ssh"
    )


def test_default_host_configured_user() -> None:
    settings = HostSettings(host="GitHub.com", user="jdoe")
    assert default_host(settings) == HostContext(
        host="github.com", user="jdoe", protocol="ssh"
    )


@responses.activate
def test_default_host_user_from_api(mocker: MockerFixture) -> None:
    mocker.patch("ghtoken.get_ghtoken", return_value="some_token")
    responses.get("https://api.github.com/user", json={"login": "jdoe"})
    assert default_host(HostSettings()) == HostContext(
        host="github.com", user="jdoe", protocol="ssh"
    )


@responses.activate
def test_default_host_enterprise_api(mocker: MockerFixture) -> None:
    mocker.patch("ghtoken.get_ghtoken", return_value="some_token")
    responses.get("https://ghe.example.com/api/v3/user", json={"login": "jdoe"})
    ctx = default_host(HostSettings(host="ghe.example.com", protocol="https"))
    assert ctx == HostContext(host="ghe.example.com", user="jdoe", protocol="https")


def test_default_host_no_token(mocker: MockerFixture) -> None:
    mocker.patch("ghtoken.get_ghtoken", side_effect=ghtoken.GHTokenNotFound())
    with pytest.raises(NoConfiguredHostError) as excinfo:
        default_host(HostSettings())
    assert str(excinfo.value) == (
        "No GitHub token found for github.com; cannot determine user"
    )


@responses.activate
def test_default_host_api_error(mocker: MockerFixture) -> None:
    mocker.patch("ghtoken.get_ghtoken", return_value="bad_token")
    responses.get(
        "https://api.github.com/user",
        status=401,
        json={"message": "Bad credentials"},
    )
    with pytest.raises(NoConfiguredHostError) as excinfo:
        default_host(HostSettings())
    assert str(excinfo.value).startswith(
        "Could not determine GitHub user for github.com: "
    )


@pytest.mark.parametrize("host", ["", "github.com/foo", "git@github.com", "a b"])
def test_default_host_invalid_host(host: str) -> None:
    with pytest.raises(NoConfiguredHostError):
        default_host(HostSettings(host=host, user="jdoe"))


def test_default_host_invalid_protocol() -> None:
    with pytest.raises(NoConfiguredHostError) as excinfo:
        default_host(HostSettings(user="jdoe", protocol="svn"))
    assert str(excinfo.value) == (
        "Invalid Git protocol for github.com: 'svn' (expected one of: ssh, https)"
    )
