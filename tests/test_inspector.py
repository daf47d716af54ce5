"""Tests for page inspection and the CLI report path (fake session)."""

from __future__ import annotations

import asyncio
from contextlib import asynccontextmanager
from unittest.mock import AsyncMock, patch

import pytest

from pageobjects import __main__ as cli
from pageobjects.definitions import load_pages
from pageobjects.inspector import inspect_page, inspect_pages
from pageobjects.settings import PageObjectSettings


def test_inspect_page_reports_each_element(session, tmp_pages_yaml):
    session.titles["https://www.google.com"] = "Google"
    page = load_pages(tmp_pages_yaml)["search"](session)

    report = asyncio.run(inspect_page(page))

    assert report.loaded is True
    assert report.title == "Google"
    assert [(e.name, e.found) for e in report.elements] == [
        ("q", True),
        ("btnK", True),
        ("lucky", False),
    ]
    assert report.missing == 1
    assert report.ok is False


def test_inspect_page_navigation_failure(session, tmp_pages_yaml):
    session.fail_urls.add("https://www.google.com")
    page = load_pages(tmp_pages_yaml)["search"](session)

    report = asyncio.run(inspect_page(page))

    assert report.loaded is False
    assert "ERR_NAME_NOT_RESOLVED" in report.error
    assert report.elements == []


def test_inspect_pages_uses_settings(session, tmp_pages_yaml):
    settings = PageObjectSettings(base_url="https://staging.example.com")
    reports = asyncio.run(inspect_pages(session, load_pages(tmp_pages_yaml), settings))

    assert [r.page for r in reports] == ["SearchPage", "LoginFormPage"]
    assert session.visited == ["https://www.google.com", "https://staging.example.com/login"]
    login = reports[1]
    assert [(e.name, e.found) for e in login.elements] == [("username", False), ("remember", False)]


def _fake_launcher(session):
    @asynccontextmanager
    async def launch(settings):
        yield session

    return launch


def test_cli_exit_code_reflects_missing_elements(session, tmp_pages_yaml, tmp_path):
    argv = ["--config", str(tmp_path / "none.yaml"), "--pages-file", str(tmp_pages_yaml), "search"]
    with patch.object(cli, "launch_session", _fake_launcher(session)):
        with pytest.raises(SystemExit) as exc_info:
            cli.main(argv)
    assert exc_info.value.code == 1
    assert session.visited == ["https://www.google.com"]


def test_cli_unknown_page(session, tmp_pages_yaml, tmp_path):
    argv = ["--config", str(tmp_path / "none.yaml"), "--pages-file", str(tmp_pages_yaml), "checkout"]
    with patch.object(cli, "launch_session", _fake_launcher(session)):
        with pytest.raises(SystemExit) as exc_info:
            cli.main(argv)
    assert exc_info.value.code == 2
    assert session.visited == []


def test_lookup_errors_become_element_rows(session, tmp_pages_yaml):
    async def query(selector, *, timeout=5_000):
        if selector.startswith("input["):
            raise RuntimeError("Unexpected token in selector")
        return session.dom.get(selector)

    session.query = query
    session.title = AsyncMock(side_effect=RuntimeError("Target page has been closed"))
    page = load_pages(tmp_pages_yaml)["search"](session)

    report = asyncio.run(inspect_page(page))

    assert report.loaded is True
    assert report.title == ""
    lucky = report.elements[2]
    assert lucky.found is False
    assert "Unexpected token" in lucky.error
    assert [e.found for e in report.elements[:2]] == [True, True]


def test_cli_invalid_settings_yaml_exits_2(session, tmp_pages_yaml, tmp_path):
    cfg = tmp_path / "pageobjects.yaml"
    cfg.write_text("base_url: [unclosed\n")
    argv = ["--config", str(cfg), "--pages-file", str(tmp_pages_yaml)]
    with patch.object(cli, "launch_session", _fake_launcher(session)):
        with pytest.raises(SystemExit) as exc_info:
            cli.main(argv)
    assert exc_info.value.code == 2
    assert session.visited == []
