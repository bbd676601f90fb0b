# Where: pwconfig/settings.py
# What: Environment reader producing a typed, immutable settings snapshot.
# Why: Flags follow shell truthiness (set and non-empty means on) and never fail to parse.
from __future__ import annotations

from typing import Sequence

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from pwconfig import constants
from pwconfig.models import RunMode
from pwconfig.modes import parse_mode


class EnvSettings(BaseSettings):
    """
    Snapshot of the environment variables that shape a test run.

    Field names match the variable names. Reading never fails for any string
    value: unknown modes and malformed flags degrade instead of raising.
    """

    # Mode and topology
    PWTEST_MODE: str = Field(default=RunMode.DEFAULT.value, description="Run mode selector")
    PLAYWRIGHT_SERVICE_URL: str | None = Field(default=None, description="Service base URL")
    PLAYWRIGHT_SERVICE_ACCESS_KEY: str | None = Field(default=None, description="Service key")
    PLAYWRIGHT_SERVICE_OS: str | None = Field(default=None, description="Requested service OS tag")
    PLAYWRIGHT_SERVICE_RUN_ID: str | None = Field(default=None, description="Run id override")
    PLAYWRIGHT_GRID_URL: str | None = Field(default=None, description="External grid URL")
    PLAYWRIGHT_GRID_ACCESS_KEY: str | None = Field(default=None, description="Grid access key")

    # Browser launch
    PWTEST_CHANNEL: str | None = Field(default=None, description="Browser distribution channel")
    CRPATH: str | None = Field(default=None, description="Chromium executable override")
    FFPATH: str | None = Field(default=None, description="Firefox executable override")
    WKPATH: str | None = Field(default=None, description="WebKit executable override")
    DEVTOOLS: bool = Field(default=False, description="Open developer tools ('1' enables)")
    PWTEST_HEADED: bool = Field(default=False, description="Run browsers headed")

    # Capture
    PWTEST_VIDEO: bool = Field(default=False, description="Record video for every test")
    PWTEST_TRACE: bool = Field(default=False, description="Record traces for every test")

    # Execution context
    CI: bool = Field(default=False, description="Continuous-integration context")
    INSIDE_DOCKER: bool = Field(default=False, description="Running inside a container")
    TEST_WORKER_INDEX: str | None = Field(default=None, description="Set by the runner in workers")

    model_config = SettingsConfigDict(
        case_sensitive=True, extra="ignore", env_ignore_empty=True, frozen=True
    )

    @field_validator(
        "PWTEST_HEADED", "PWTEST_VIDEO", "PWTEST_TRACE", "CI", "INSIDE_DOCKER", mode="before"
    )
    @classmethod
    def _presence_flag(cls, value):
        if isinstance(value, str):
            return value != ""
        return bool(value)

    @field_validator("DEVTOOLS", mode="before")
    @classmethod
    def _devtools_flag(cls, value):
        if isinstance(value, str):
            return value == constants.DEVTOOLS_ENABLED
        return bool(value)

    @property
    def mode(self) -> RunMode:
        return parse_mode(self.PWTEST_MODE)

    @property
    def is_ci(self) -> bool:
        return self.CI

    @property
    def video(self) -> bool:
        return self.PWTEST_VIDEO

    @property
    def trace(self) -> bool:
        return self.PWTEST_TRACE

    @property
    def headed(self) -> bool:
        return self.PWTEST_HEADED

    @property
    def devtools(self) -> bool:
        return self.DEVTOOLS

    @property
    def inside_docker(self) -> bool:
        return self.INSIDE_DOCKER

    @property
    def channel(self) -> str | None:
        return self.PWTEST_CHANNEL

    @property
    def is_coordinator(self) -> bool:
        """True in the process that loads the config, False inside runner workers."""
        return self.TEST_WORKER_INDEX is None

    @property
    def service_os(self) -> str:
        return self.PLAYWRIGHT_SERVICE_OS or constants.DEFAULT_SERVICE_OS


def load_settings(argv: Sequence[str] | None = None) -> EnvSettings:
    """Read the current environment; ``--headed`` in argv also enables headed mode."""
    settings = EnvSettings()
    if argv is not None and constants.HEADED_FLAG in argv and not settings.headed:
        settings = settings.model_copy(update={"PWTEST_HEADED": True})
    return settings
