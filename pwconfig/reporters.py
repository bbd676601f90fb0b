# Where: pwconfig/reporters.py
# What: Pick the result reporters for the run.
# Why: CI shards merge dot, json and blob output in this exact order.
from __future__ import annotations

from pathlib import Path

from pwconfig import constants
from pwconfig.models import Reporter


def select_reporters(is_ci: bool, output_dir: Path) -> list[Reporter]:
    if is_ci:
        return [
            Reporter("dot"),
            Reporter("json", {"outputFile": str(output_dir / constants.REPORT_FILE_NAME)}),
            Reporter("blob"),
        ]
    return [Reporter("html", {"open": "on-failure"})]
