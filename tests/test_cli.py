"""Tests for the command line interface."""

import json

import pytest

from github_releases import cli
from github_releases.client import GitHubGraphQLClient, GraphQLResponse
from github_releases.fetcher import GitHubReleaseFetcher

from conftest import releases_page


@pytest.fixture
def env(monkeypatch, tmp_path):
    # Keep a developer's .env out of the picture
    monkeypatch.chdir(tmp_path)
    for name in ("GITHUB_API_TOKEN", "GITHUB_TOKEN", "REPLACE_GITHUB_SCHEMA", "GITHUB_SCHEMA_PATH"):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.setenv("GITHUB_API_TOKEN", "token")
    return tmp_path


def stub_post(monkeypatch, responses):
    calls = []

    def fake_post(self, query, variables=None):
        calls.append(dict(variables or {}))
        return responses.pop(0)

    monkeypatch.setattr(GitHubGraphQLClient, "post", fake_post)
    return calls


def test_prints_all_releases_when_limit_is_zero(env, monkeypatch, capsys):
    calls = stub_post(monkeypatch, [releases_page(0, 100, "c1"), releases_page(100, 5, None)])

    code = cli.main(["-o", "octo", "-r", "repo", "--no-progress"])

    assert code == 0
    releases = json.loads(capsys.readouterr().out)
    assert len(releases) == 105
    assert [c.get("cursor") for c in calls] == [None, "c1"]


def test_limit_stops_early(env, monkeypatch, capsys):
    calls = stub_post(monkeypatch, [releases_page(0, 100, "c1"), releases_page(100, 100, None)])

    code = cli.main(["-o", "octo", "-r", "repo", "-l", "30", "--no-progress"])

    assert code == 0
    assert len(json.loads(capsys.readouterr().out)) == 30
    assert len(calls) == 1


def test_service_error_exits_non_zero(env, monkeypatch, capsys):
    stub_post(monkeypatch, [GraphQLResponse(errors=[{"message": "Could not resolve to a Repository"}])])

    code = cli.main(["-o", "octo", "-r", "nope", "--no-progress"])

    captured = capsys.readouterr()
    assert code == 1
    assert captured.out == ""
    assert "Could not resolve to a Repository" in captured.err


def test_missing_token_exits_non_zero(env, monkeypatch, capsys):
    monkeypatch.delenv("GITHUB_API_TOKEN")

    assert cli.main(["-o", "octo", "-r", "repo"]) == 1
    assert "GITHUB_API_TOKEN" in capsys.readouterr().err


def test_negative_limit_is_usage_error(env):
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["-o", "octo", "-r", "repo", "-l", "-5"])
    assert exc_info.value.code == 2


def test_save_writes_file(env, monkeypatch, capsys):
    stub_post(monkeypatch, [releases_page(0, 4, None)])

    code = cli.main(["-o", "octo", "-r", "repo", "--no-progress", "--save", "releases.json"])

    assert code == 0
    assert len(json.loads((env / "releases.json").read_text())) == 4
    assert "Saved 4 releases" in capsys.readouterr().err


def test_save_failure_exits_non_zero(env, monkeypatch, capsys):
    stub_post(monkeypatch, [releases_page(0, 2, None)])

    def failing_save(self, output_path):
        raise OSError("disk full")

    monkeypatch.setattr(GitHubReleaseFetcher, "save", failing_save)

    code = cli.main(["-o", "octo", "-r", "repo", "--no-progress", "--save", "releases.csv"])

    captured = capsys.readouterr()
    assert code == 1
    assert "disk full" in captured.err
    assert captured.out == ""
