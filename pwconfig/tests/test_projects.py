# Where: pwconfig/tests/test_projects.py
# What: Unit tests for the engine x folder project matrix.
# Why: Ignore patterns must partition every folder's files between engines.
from __future__ import annotations

import sys
from pathlib import Path

import pytest

from pwconfig.models import RunMode
from pwconfig.projects import build_projects, executable_path
from pwconfig.settings import EnvSettings

ENGINES = ("chromium", "firefox", "webkit")
FOLDERS = ("library", "page")


def _build(settings: EnvSettings | None = None, **kwargs):
    return build_projects(
        ENGINES,
        FOLDERS,
        settings or EnvSettings(_env_file=None),
        test_dir=Path("/repo/tests"),
        **kwargs,
    )


def test_matrix_has_one_project_per_engine_and_folder():
    projects = _build()

    assert len(projects) == 6
    assert [(p.name, p.test_dir.name) for p in projects] == [
        ("chromium", "library"),
        ("chromium", "page"),
        ("firefox", "library"),
        ("firefox", "page"),
        ("webkit", "library"),
        ("webkit", "page"),
    ]
    for folder in FOLDERS:
        names = [p.name for p in projects if p.test_dir.name == folder]
        assert len(names) == len(set(names))


def test_chromium_project_ignores_other_engines():
    chromium = next(
        p for p in _build() if p.name == "chromium" and p.test_dir == Path("/repo/tests/library")
    )

    assert chromium.is_ignored("library/firefox/launcher.spec.ts")
    assert chromium.is_ignored("library/webkit-specific.spec.ts")
    assert not chromium.is_ignored("library/chromium/tracing.spec.ts")
    assert not chromium.is_ignored("library/browsercontext-basic.spec.ts")


@pytest.mark.parametrize(
    "path",
    [
        "library/chromium/oopif.spec.ts",
        "library/firefox/launcher.spec.ts",
        "page/webkit/page-mac.spec.ts",
    ],
)
def test_engine_specific_files_are_selected_by_exactly_one_project(path):
    folder = path.split("/")[0]
    selected = [
        p.name for p in _build() if p.test_dir.name == folder and not p.is_ignored(path)
    ]

    assert len(selected) == 1
    assert selected[0] in path


def test_project_options_follow_settings(monkeypatch):
    monkeypatch.setenv("PWTEST_VIDEO", "1")
    monkeypatch.setenv("PWTEST_TRACE", "1")
    monkeypatch.setenv("PWTEST_HEADED", "1")
    monkeypatch.setenv("PWTEST_CHANNEL", "chrome-beta")
    monkeypatch.setenv("DEVTOOLS", "1")
    monkeypatch.setenv("INSIDE_DOCKER", "1")

    project = _build(mode=RunMode.SERVICE)[0]

    assert project.use.mode is RunMode.SERVICE
    assert project.use.headless is False
    assert project.use.channel == "chrome-beta"
    assert project.use.video == "on"
    assert project.use.trace == "on"
    assert project.use.launch_options.devtools is True
    assert project.use.coverage_name == "chromium"
    assert project.metadata.platform == sys.platform
    assert project.metadata.docker is True
    assert project.metadata.headful is True
    assert project.metadata.mode is RunMode.SERVICE
    assert project.metadata.video is True
    assert project.metadata.trace is True
    assert (
        project.snapshot_path_template
        == "{testDir}/{testFileDir}/{testFileName}-snapshots/{arg}{-projectName}{ext}"
    )


def test_project_defaults_are_headless_without_capture():
    project = _build()[0]

    assert project.use.mode is RunMode.DEFAULT
    assert project.use.headless is True
    assert project.use.video is None
    assert project.use.trace is None
    assert project.use.launch_options.executable_path is None
    assert project.use.launch_options.devtools is False


def test_executable_override_is_per_engine(monkeypatch):
    monkeypatch.setenv("FFPATH", "/opt/firefox/firefox")
    settings = EnvSettings(_env_file=None)

    assert executable_path("firefox", settings) == "/opt/firefox/firefox"
    assert executable_path("chromium", settings) is None
    assert executable_path("unknown-engine", settings) is None

    by_name = {p.name: p.use.launch_options.executable_path for p in _build(settings)}
    assert by_name == {"chromium": None, "firefox": "/opt/firefox/firefox", "webkit": None}


def test_executable_diagnostic_logged_once_per_engine_in_coordinator(monkeypatch, caplog):
    caplog.set_level("INFO", logger="pwconfig.projects")
    monkeypatch.setenv("CRPATH", "/opt/chromium/chrome")

    _build(EnvSettings(_env_file=None))

    messages = [r.getMessage() for r in caplog.records if r.name == "pwconfig.projects"]
    assert messages == ["Using executable at /opt/chromium/chrome"]


def test_executable_diagnostic_silent_in_workers(monkeypatch, caplog):
    caplog.set_level("INFO", logger="pwconfig.projects")
    monkeypatch.setenv("CRPATH", "/opt/chromium/chrome")
    monkeypatch.setenv("TEST_WORKER_INDEX", "3")

    projects = _build(EnvSettings(_env_file=None))

    assert not [r for r in caplog.records if r.name == "pwconfig.projects"]
    assert projects[0].use.launch_options.executable_path == "/opt/chromium/chrome"
