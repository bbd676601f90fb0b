"""Resolve the configuration of a browser-automation test run."""

from pwconfig.assembler import build_config
from pwconfig.models import GlobalConfig, RunMode
from pwconfig.modes import parse_mode, resolve_mode
from pwconfig.projects import build_projects
from pwconfig.reporters import select_reporters
from pwconfig.settings import EnvSettings, load_settings

__all__ = [
    "EnvSettings",
    "GlobalConfig",
    "RunMode",
    "build_config",
    "build_projects",
    "load_settings",
    "parse_mode",
    "resolve_mode",
    "select_reporters",
]
