#!/usr/bin/env python
"""
CLI runner for the bottom-panel browser suite.

Run from a repository checkout: the suite, its fixture workspace and the
config file live beside the package, not inside it.

Usage:
    python -m bottombar.run_suite                                  # Run against config/workbench.yaml
    python -m bottombar.run_suite --base-url http://localhost:3000 # Point at another server
    python -m bottombar.run_suite --headed -k terminal             # Watch a subset run
    python -m bottombar.run_suite --check                          # Only check the server is up
"""

import argparse
import logging
import os
import sys

import pytest
import requests

from .config import PROJECT_ROOT, ConfigError, load_config

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

E2E_DIR = PROJECT_ROOT / "tests" / "e2e"


def check_workbench(base_url: str, timeout: float = 10.0) -> bool:
    """Return True if the workbench server answers at ``base_url``."""
    try:
        resp = requests.get(base_url, timeout=timeout)
    except requests.RequestException as e:
        logger.error(f"Workbench not reachable at {base_url}: {e}")
        return False
    if resp.status_code >= 400:
        logger.error(f"Workbench at {base_url} answered HTTP {resp.status_code}")
        return False
    return True


def export_overrides(args) -> None:
    """Pass CLI choices to the test session through BOTTOMBAR_* variables."""
    if args.base_url:
        os.environ["BOTTOMBAR_BASE_URL"] = args.base_url
    if args.workspace:
        os.environ["BOTTOMBAR_WORKSPACE"] = args.workspace
    if args.channel:
        os.environ["BOTTOMBAR_OUTPUT_CHANNEL"] = args.channel
    if args.headed:
        os.environ["BOTTOMBAR_HEADLESS"] = "false"


def build_pytest_args(args) -> list[str]:
    pytest_args = [str(E2E_DIR), "-m", "playwright"]
    if args.keyword:
        pytest_args += ["-k", args.keyword]
    if args.verbose:
        pytest_args.append("-v")
    return pytest_args


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Bottom panel browser suite runner",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--base-url", help="Workbench server URL")
    parser.add_argument("--workspace", help="Folder to open in the workbench")
    parser.add_argument("--channel", help="Output channel the Output view tests read")
    parser.add_argument("--headed", action="store_true", help="Show the browser window")
    parser.add_argument("-k", dest="keyword", help="Only run tests matching this expression")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose pytest output")
    parser.add_argument("--check", action="store_true", help="Only check that the workbench is reachable")

    args = parser.parse_args(argv)
    if not E2E_DIR.is_dir():
        logger.error(f"Browser suite not found at {E2E_DIR}; run from a repository checkout")
        return 2

    export_overrides(args)
    try:
        config = load_config()
    except ConfigError as e:
        logger.error(str(e))
        return 2

    if not check_workbench(config.base_url):
        return 2
    if args.check:
        print(f"Workbench reachable at {config.base_url}")
        return 0

    logger.info("Running %s against %s", E2E_DIR, config.workbench_url)
    return int(pytest.main(build_pytest_args(args)))


if __name__ == "__main__":
    sys.exit(main())
