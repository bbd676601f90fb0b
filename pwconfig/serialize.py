# Where: pwconfig/serialize.py
# What: Render GlobalConfig as the runner-facing mapping (camelCase keys).
# Why: The runner consumes plain JSON/YAML; absent values must simply not appear.
from __future__ import annotations

import json
from typing import Any

import yaml

from pwconfig.models import (
    ConnectOptions,
    GlobalConfig,
    Project,
    Reporter,
    WebServer,
)

FORMAT_JSON = "json"
FORMAT_YAML = "yaml"
SUPPORTED_FORMATS = (FORMAT_JSON, FORMAT_YAML)


def _compact(data: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in data.items() if value is not None}


def reporter_to_list(reporter: Reporter) -> list[Any]:
    if reporter.options:
        return [reporter.kind, dict(reporter.options)]
    return [reporter.kind]


def connect_options_to_dict(options: ConnectOptions) -> dict[str, Any]:
    return _compact(
        {
            "wsEndpoint": options.ws_endpoint,
            "timeout": options.timeout,
            "headers": dict(options.headers) if options.headers else None,
            "exposeNetwork": options.expose_network,
        }
    )


def web_server_to_dict(server: WebServer) -> dict[str, Any]:
    data: dict[str, Any] = {"command": server.command}
    if server.stdout:
        data["stdout"] = server.stdout
    if server.url:
        data["url"] = server.url
        data["reuseExistingServer"] = server.reuse_existing_server
    return data


def project_to_dict(project: Project) -> dict[str, Any]:
    use = project.use
    meta = project.metadata
    return {
        "name": project.name,
        "testDir": str(project.test_dir),
        "testIgnore": [pattern.pattern for pattern in project.test_ignore],
        "snapshotPathTemplate": project.snapshot_path_template,
        "use": _compact(
            {
                "mode": use.mode.value,
                "browserName": use.browser_name,
                "headless": use.headless,
                "channel": use.channel,
                "video": use.video,
                "launchOptions": _compact(
                    {
                        "executablePath": use.launch_options.executable_path,
                        "devtools": use.launch_options.devtools,
                    }
                ),
                "trace": use.trace,
                "coverageName": use.coverage_name,
            }
        ),
        "metadata": _compact(
            {
                "platform": meta.platform,
                "docker": meta.docker,
                "headful": meta.headful,
                "browserName": meta.browser_name,
                "channel": meta.channel,
                "mode": meta.mode.value,
                "video": meta.video,
                "trace": meta.trace,
            }
        ),
    }


def config_to_dict(config: GlobalConfig) -> dict[str, Any]:
    use: dict[str, Any] = {}
    if config.connect_options is not None:
        use["connectOptions"] = connect_options_to_dict(config.connect_options)
    data = _compact(
        {
            "testDir": str(config.test_dir),
            "outputDir": str(config.output_dir),
            "expect": {
                "timeout": config.expect.timeout,
                "toHaveScreenshot": {"_comparator": config.expect.screenshot_comparator},
                "toMatchSnapshot": {"_comparator": config.expect.snapshot_comparator},
            },
            "maxFailures": config.max_failures,
            "timeout": config.timeout,
            "globalTimeout": config.global_timeout,
            "workers": config.workers,
            "fullyParallel": config.fully_parallel,
            "forbidOnly": config.forbid_only,
            "retries": config.retries,
            "reporter": [reporter_to_list(reporter) for reporter in config.reporters],
            "projects": [project_to_dict(project) for project in config.projects],
            "use": use,
        }
    )
    if config.web_servers:
        data["webServer"] = [web_server_to_dict(server) for server in config.web_servers]
    if config.env_overrides:
        data["env"] = dict(config.env_overrides)
    return data


def dump_config(config: GlobalConfig, fmt: str = FORMAT_JSON) -> str:
    data = config_to_dict(config)
    if fmt == FORMAT_JSON:
        return json.dumps(data, indent=2)
    if fmt == FORMAT_YAML:
        return yaml.safe_dump(data, sort_keys=False, allow_unicode=True)
    raise ValueError(f"unsupported output format: {fmt}")
