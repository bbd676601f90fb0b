# Where: pwconfig/tests/test_reporters.py
# What: Unit tests for reporter selection.
# Why: CI reporter order is relied on when merging shard results.
from pathlib import Path

from pwconfig.models import Reporter
from pwconfig.reporters import select_reporters


def test_ci_reporters_are_dot_json_blob_in_order():
    reporters = select_reporters(True, Path("/repo/test-results"))

    assert [r.kind for r in reporters] == ["dot", "json", "blob"]
    assert reporters[1].options == {"outputFile": "/repo/test-results/report.json"}


def test_local_reporter_is_html_opened_on_failure():
    reporters = select_reporters(False, Path("/repo/test-results"))

    assert reporters == [Reporter("html", {"open": "on-failure"})]
