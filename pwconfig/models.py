# Where: pwconfig/models.py
# What: Immutable descriptors produced by mode resolution and project matrix building.
# Why: Keep the runner-facing configuration explicit and free of shared mutable state.
from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Iterator


class RunMode(str, Enum):
    """Topology used to reach browser engines for the run."""

    DEFAULT = "default"
    SERVICE = "service"
    SERVICE_WITH_CAPABILITIES = "service-with-capabilities"
    GRID = "grid"


@dataclass(frozen=True)
class Capabilities:
    os: str
    run_id: str


@dataclass(frozen=True)
class ConnectOptions:
    ws_endpoint: str
    timeout: int | None = None
    headers: dict[str, str] | None = None
    expose_network: str | None = None
    capabilities: Capabilities | None = None


@dataclass(frozen=True)
class WebServer:
    """A local process the runner must start, or reuse, before tests run."""

    command: str
    url: str | None = None
    reuse_existing_server: bool = False
    stdout: str | None = None
    capacity: int | None = None


@dataclass(frozen=True)
class ModeResolution:
    connect_options: ConnectOptions | None = None
    web_servers: tuple[WebServer, ...] = ()
    env_overrides: dict[str, str] = field(default_factory=dict)

    def __iter__(self) -> Iterator[Any]:
        yield self.connect_options
        yield self.web_servers


@dataclass(frozen=True)
class Reporter:
    kind: str
    options: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class LaunchOptions:
    executable_path: str | None = None
    devtools: bool = False


@dataclass(frozen=True)
class ProjectUse:
    mode: RunMode
    browser_name: str
    headless: bool
    channel: str | None
    video: str | None
    trace: str | None
    launch_options: LaunchOptions
    coverage_name: str


@dataclass(frozen=True)
class ProjectMetadata:
    """Informational only; nothing in the resolver reads it back."""

    platform: str
    docker: bool
    headful: bool
    browser_name: str
    channel: str | None
    mode: RunMode
    video: bool
    trace: bool


@dataclass(frozen=True)
class Project:
    name: str
    test_dir: Path
    test_ignore: tuple[re.Pattern[str], ...]
    snapshot_path_template: str
    use: ProjectUse
    metadata: ProjectMetadata

    def is_ignored(self, path: str) -> bool:
        return any(pattern.search(path) for pattern in self.test_ignore)


@dataclass(frozen=True)
class ExpectOptions:
    timeout: int
    screenshot_comparator: str
    snapshot_comparator: str


@dataclass(frozen=True)
class GlobalConfig:
    test_dir: Path
    output_dir: Path
    expect: ExpectOptions
    max_failures: int
    timeout: int
    global_timeout: int
    workers: int | None
    fully_parallel: bool
    forbid_only: bool
    retries: int
    reporters: tuple[Reporter, ...]
    projects: tuple[Project, ...]
    connect_options: ConnectOptions | None = None
    web_servers: tuple[WebServer, ...] = ()
    env_overrides: dict[str, str] = field(default_factory=dict)
