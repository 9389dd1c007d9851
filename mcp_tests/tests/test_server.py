import logging
import sys

import pytest

from core.models import RepositoryConfig
from server import server as server_mod


@pytest.mark.asyncio
async def test_register_all_wires_client_and_env_config(monkeypatch, dummy_mcp):
    captured = {}

    async def fake_register_resources(mcp, access_token, config, *, client=None):
        captured.update({"mcp": mcp, "access_token": access_token, "config": config, "client": client})
        return []

    monkeypatch.setattr(server_mod, "register_resources", fake_register_resources)
    monkeypatch.setattr(server_mod, "GITHUB_TOKEN", "tok")
    monkeypatch.setenv("SOURCE_REPOSITORY_NAME", "octocat/Hello-World")
    monkeypatch.delenv("BRANCH_NAME", raising=False)

    await server_mod.register_all(dummy_mcp)

    assert captured["mcp"] is dummy_mcp
    assert captured["access_token"] == "tok"
    assert captured["config"] == RepositoryConfig(repository="octocat/Hello-World", branch=None)
    assert isinstance(captured["client"], server_mod.GitHubClient)
    assert captured["client"]._headers["Authorization"] == "Bearer tok"


def test_main_registers_then_runs_stdio(monkeypatch):
    order = []

    async def fake_register_all(server=None):
        order.append("register")

    def fake_run(*, transport: str):
        order.append(("run", transport))

    monkeypatch.setattr(server_mod, "configure_logging", lambda: order.append("logging"))
    monkeypatch.setattr(server_mod, "register_all", fake_register_all)
    monkeypatch.setattr(server_mod.mcp, "run", fake_run)

    server_mod.main()

    assert order == ["logging", "register", ("run", "stdio")]


def test_configure_logging_targets_stderr(monkeypatch):
    captured = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: captured.update(kw))

    server_mod.configure_logging("debug")

    assert captured["level"] == logging.DEBUG
    assert captured["stream"] is sys.stderr
