# Where: pwconfig/projects.py
# What: Build one test project per (browser engine, suite folder) pair.
# Why: Each project must only pick up files that belong to its own engine.
from __future__ import annotations

import logging
import re
import sys
from pathlib import Path
from typing import Sequence

from pwconfig import constants
from pwconfig.models import (
    LaunchOptions,
    Project,
    ProjectMetadata,
    ProjectUse,
    RunMode,
)
from pwconfig.settings import EnvSettings

logger = logging.getLogger(__name__)


def executable_path(engine: str, settings: EnvSettings) -> str | None:
    env_name = constants.EXECUTABLE_PATH_ENV.get(engine)
    if env_name is None:
        return None
    return getattr(settings, env_name)


def ignore_patterns(engine: str, engines: Sequence[str]) -> tuple[re.Pattern[str], ...]:
    return tuple(re.compile(re.escape(other)) for other in engines if other != engine)


def build_projects(
    engines: Sequence[str],
    folders: Sequence[str],
    settings: EnvSettings,
    *,
    test_dir: Path,
    mode: RunMode | None = None,
) -> list[Project]:
    """
    Cross engines with suite folders, engine-major.

    Project names repeat across folders (every folder contributes a "chromium"),
    but stay unique within one folder.
    """
    if mode is None:
        mode = settings.mode
    projects: list[Project] = []
    for engine in engines:
        path = executable_path(engine, settings)
        if path and settings.is_coordinator:
            logger.info("Using executable at %s", path)
        test_ignore = ignore_patterns(engine, engines)
        use = ProjectUse(
            mode=mode,
            browser_name=engine,
            headless=not settings.headed,
            channel=settings.channel,
            video="on" if settings.video else None,
            trace="on" if settings.trace else None,
            launch_options=LaunchOptions(executable_path=path, devtools=settings.devtools),
            coverage_name=engine,
        )
        metadata = ProjectMetadata(
            platform=sys.platform,
            docker=settings.inside_docker,
            headful=settings.headed,
            browser_name=engine,
            channel=settings.channel,
            mode=mode,
            video=settings.video,
            trace=settings.trace,
        )
        for folder in folders:
            projects.append(
                Project(
                    name=engine,
                    test_dir=test_dir / folder,
                    test_ignore=test_ignore,
                    snapshot_path_template=constants.SNAPSHOT_PATH_TEMPLATE,
                    use=use,
                    metadata=metadata,
                )
            )
    return projects
