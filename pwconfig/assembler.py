# Where: pwconfig/assembler.py
# What: Compose settings, mode resolution, reporters and projects into one GlobalConfig.
# Why: Give the runner a single immutable value computed once at load time.
from __future__ import annotations

from pathlib import Path
from typing import Sequence

from pwconfig import constants
from pwconfig.models import ExpectOptions, GlobalConfig
from pwconfig.modes import Clock, resolve_mode, utc_now
from pwconfig.projects import build_projects
from pwconfig.reporters import select_reporters
from pwconfig.settings import EnvSettings


def build_config(
    settings: EnvSettings,
    *,
    root_dir: Path | None = None,
    engines: Sequence[str] = constants.DEFAULT_ENGINES,
    folders: Sequence[str] = constants.DEFAULT_FOLDERS,
    clock: Clock = utc_now,
) -> GlobalConfig:
    """
    Assemble the run configuration.

    Mode resolution runs first so its environment overrides are part of the
    result before anything downstream consumes them. The only non-deterministic
    input is the clock, used when no run identifier is supplied.
    """
    mode = settings.mode
    resolution = resolve_mode(mode, settings, clock=clock)

    root = (root_dir or Path.cwd()).resolve()
    test_dir = root / constants.TEST_DIR_NAME
    output_dir = root / constants.OUTPUT_DIR_NAME
    is_ci = settings.is_ci

    return GlobalConfig(
        test_dir=test_dir,
        output_dir=output_dir,
        expect=ExpectOptions(
            timeout=constants.EXPECT_TIMEOUT_MS,
            screenshot_comparator=constants.VISUAL_COMPARATOR,
            snapshot_comparator=constants.VISUAL_COMPARATOR,
        ),
        max_failures=constants.MAX_FAILURES,
        timeout=constants.VIDEO_TEST_TIMEOUT_MS if settings.video else constants.TEST_TIMEOUT_MS,
        global_timeout=constants.GLOBAL_TIMEOUT_MS,
        workers=constants.CI_WORKERS if is_ci else None,
        fully_parallel=not is_ci,
        forbid_only=is_ci,
        retries=constants.CI_RETRIES if is_ci else 0,
        reporters=tuple(select_reporters(is_ci, output_dir)),
        projects=tuple(
            build_projects(engines, folders, settings, test_dir=test_dir, mode=mode)
        ),
        connect_options=resolution.connect_options,
        web_servers=resolution.web_servers,
        env_overrides=dict(resolution.env_overrides),
    )
