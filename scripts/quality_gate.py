"""Run lint, format, type and test checks for easy-cols and report JSON.

Usage:
    python scripts/quality_gate.py              # every check
    python scripts/quality_gate.py --skip-tests # lint + types only
    python scripts/quality_gate.py --fix        # let ruff fix what it can first
"""

from __future__ import annotations

import argparse
import json
import re
import subprocess
import sys
import time
from collections.abc import Callable
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent

_RUFF_LOCATION_RE = re.compile(r"^\S+:\d+:\d+:")
_PYTEST_PASSED_RE = re.compile(r"(\d+)\s+passed")
_PYTEST_FAILED_RE = re.compile(r"(\d+)\s+failed")


def _run(*args: str) -> subprocess.CompletedProcess:
    return subprocess.run(
        [sys.executable, "-m", *args],
        capture_output=True,
        text=True,
        cwd=str(ROOT),
        timeout=300,
    )


def _check(args: list[str], counter: Callable[[subprocess.CompletedProcess], dict]) -> dict:
    """Run one tool and merge its status, timing and counters into a dict."""
    t0 = time.monotonic()
    r = _run(*args)
    result: dict = {"status": "pass" if r.returncode == 0 else "fail"}
    result.update(counter(r))
    result["duration_s"] = round(time.monotonic() - t0, 1)
    if r.returncode != 0:
        result["output"] = (r.stdout + r.stderr).strip()[-2000:]
    return result


def _count_ruff_errors(r: subprocess.CompletedProcess) -> dict:
    return {"errors": sum(1 for line in r.stdout.splitlines() if _RUFF_LOCATION_RE.match(line))}


def _count_reformat(r: subprocess.CompletedProcess) -> dict:
    lines = r.stdout.splitlines() + r.stderr.splitlines()
    return {"files_to_reformat": sum(1 for line in lines if line.startswith("Would reformat"))}


def _count_mypy_errors(r: subprocess.CompletedProcess) -> dict:
    return {"errors": sum(1 for line in r.stdout.splitlines() if ": error:" in line)}


def _count_tests(r: subprocess.CompletedProcess) -> dict:
    # Summary line looks like "3 failed, 120 passed in 0.4s"
    for line in reversed(r.stdout.strip().splitlines()):
        passed = _PYTEST_PASSED_RE.search(line)
        failed = _PYTEST_FAILED_RE.search(line)
        if passed or failed:
            return {
                "passed": int(passed.group(1)) if passed else 0,
                "failed": int(failed.group(1)) if failed else 0,
            }
    return {"passed": 0, "failed": 0}


def main() -> None:
    parser = argparse.ArgumentParser(description="Run easy-cols quality checks")
    parser.add_argument("--skip-tests", action="store_true", help="Skip pytest")
    parser.add_argument("--fix", action="store_true", help="Run ruff --fix before checking")
    args = parser.parse_args()

    t0 = time.monotonic()
    if args.fix:
        _run("ruff", "check", "--fix", ".")

    steps = [
        ("ruff_lint", ["ruff", "check", "."], _count_ruff_errors),
        ("ruff_format", ["ruff", "format", "--check", "."], _count_reformat),
        ("mypy", ["mypy", "easy_cols/"], _count_mypy_errors),
    ]
    if not args.skip_tests:
        pytest_cmd = ["pytest", "tests/", "-q", "--no-header", "--tb=short"]
        steps.append(("pytest", pytest_cmd, _count_tests))

    checks: dict[str, dict] = {}
    for name, cmd, counter in steps:
        print(f"Running {name}...", file=sys.stderr)
        checks[name] = _check(cmd, counter)
    if args.skip_tests:
        checks["pytest"] = {"status": "skip", "reason": "--skip-tests"}

    overall = "pass" if all(c["status"] in ("pass", "skip") for c in checks.values()) else "fail"
    print(
        json.dumps(
            {
                "overall": overall,
                "checks": checks,
                "total_duration_s": round(time.monotonic() - t0, 1),
            },
            indent=2,
        )
    )
    if overall == "fail":
        sys.exit(1)


if __name__ == "__main__":
    main()
