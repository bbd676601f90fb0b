# Where: pwconfig/modes.py
# What: Resolve the run mode into connect options and the local servers it needs.
# Why: Keep the topology decision in one pure function of the settings snapshot.
from __future__ import annotations

import json
import logging
import shlex
import urllib.parse
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Callable

from pwconfig import constants
from pwconfig.models import Capabilities, ConnectOptions, ModeResolution, RunMode, WebServer

if TYPE_CHECKING:
    from pwconfig.settings import EnvSettings

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]

_MODE_ALIASES = {
    "service2": RunMode.SERVICE_WITH_CAPABILITIES,
    "service-grid": RunMode.GRID,
}


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def parse_mode(value: str | None) -> RunMode:
    """Map a mode name onto RunMode; unknown or missing names fall back to default."""
    if value is None:
        return RunMode.DEFAULT
    try:
        return RunMode(value)
    except ValueError:
        pass
    return _MODE_ALIASES.get(value, RunMode.DEFAULT)


def format_run_id(moment: datetime) -> str:
    stamp = moment.astimezone(timezone.utc).isoformat(timespec="milliseconds")
    return stamp.replace("+00:00", "Z")


def resolve_mode(
    mode: RunMode,
    settings: EnvSettings,
    *,
    clock: Clock = utc_now,
) -> ModeResolution:
    resolver = _RESOLVERS[mode]
    return resolver(settings, clock)


def _resolve_default(settings: EnvSettings, clock: Clock) -> ModeResolution:
    return ModeResolution()


def _resolve_service(settings: EnvSettings, clock: Clock) -> ModeResolution:
    connect = ConnectOptions(ws_endpoint=f"{constants.LOCAL_WS_ENDPOINT}/")
    relay = WebServer(
        command=constants.RELAY_COMMAND,
        url=constants.LOCAL_HTTP_URL,
        reuse_existing_server=not settings.is_ci,
    )
    return ModeResolution(connect_options=connect, web_servers=(relay,))


def _resolve_service_with_capabilities(settings: EnvSettings, clock: Clock) -> ModeResolution:
    capabilities = Capabilities(
        os=settings.service_os,
        run_id=settings.PLAYWRIGHT_SERVICE_RUN_ID or format_run_id(clock()),
    )
    query = urllib.parse.urlencode(
        {
            "accessKey": settings.PLAYWRIGHT_SERVICE_ACCESS_KEY or "",
            "cap": json.dumps(
                {"os": capabilities.os, "runId": capabilities.run_id}, separators=(",", ":")
            ),
        }
    )
    base_url = settings.PLAYWRIGHT_SERVICE_URL or ""
    separator = "&" if "?" in base_url else "?"
    connect = ConnectOptions(
        ws_endpoint=f"{base_url}{separator}{query}",
        timeout=constants.SERVICE_CONNECT_TIMEOUT_MS,
        expose_network=constants.EXPOSE_LOOPBACK,
        capabilities=capabilities,
    )
    return ModeResolution(
        connect_options=connect,
        env_overrides={constants.ENV_VERSION_OVERRIDE: constants.VERSION_OVERRIDE},
    )


def _resolve_grid(settings: EnvSettings, clock: Clock) -> ModeResolution:
    access_key = settings.PLAYWRIGHT_GRID_ACCESS_KEY
    if not access_key:
        access_key = constants.DEFAULT_GRID_ACCESS_KEY
        if settings.is_coordinator:
            logger.warning(
                "%s is not set; using the placeholder grid access key",
                constants.ENV_GRID_ACCESS_KEY,
            )
    connect = ConnectOptions(
        ws_endpoint=settings.PLAYWRIGHT_GRID_URL or constants.LOCAL_WS_ENDPOINT,
        timeout=constants.GRID_CONNECT_TIMEOUT_MS,
        headers={constants.ACCESS_KEY_HEADER: access_key},
        expose_network=constants.EXPOSE_LOOPBACK,
    )
    if settings.PLAYWRIGHT_GRID_URL:
        return ModeResolution(connect_options=connect)
    return ModeResolution(connect_options=connect, web_servers=_local_grid(settings, access_key))


def _local_grid(settings: EnvSettings, access_key: str) -> tuple[WebServer, ...]:
    quoted_key = shlex.quote(access_key)
    coordinator = WebServer(
        command=(
            f"{constants.GRID_CLI} grid --port={constants.RELAY_PORT} --access-key={quoted_key}"
        ),
        url=f"{constants.LOCAL_HTTP_URL}/{urllib.parse.quote(access_key, safe='')}",
        reuse_existing_server=not settings.is_ci,
        stdout="pipe",
    )
    node_command = (
        f"{constants.GRID_CLI} node --grid=localhost:{constants.RELAY_PORT} "
        f"--access-key={quoted_key} --capacity={constants.GRID_NODE_CAPACITY}"
    )
    nodes = tuple(
        WebServer(command=node_command, capacity=constants.GRID_NODE_CAPACITY)
        for _ in range(constants.GRID_NODE_COUNT)
    )
    return (coordinator, *nodes)


_RESOLVERS: dict[RunMode, Callable[[EnvSettings, Clock], ModeResolution]] = {
    RunMode.DEFAULT: _resolve_default,
    RunMode.SERVICE: _resolve_service,
    RunMode.SERVICE_WITH_CAPABILITIES: _resolve_service_with_capabilities,
    RunMode.GRID: _resolve_grid,
}
