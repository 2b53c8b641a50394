"""Workbench configuration.

Settings come from config/workbench.yaml and can be overridden per run
with BOTTOMBAR_* environment variables. The merged result is validated
against schemas/workbench.schema.json, so an override is held to the same
rules as the file.

Both files live in the repository checkout, next to the browser suite;
the package is not meant to run from an installed wheel.
"""

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path

import yaml
from jsonschema import ValidationError, validate

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parents[1]
CONFIG_PATH = PROJECT_ROOT / "config" / "workbench.yaml"
SCHEMA_PATH = PROJECT_ROOT / "schemas" / "workbench.schema.json"

# Deadline applied to a scenario that does not ask for more.
DEFAULT_SCENARIO_TIMEOUT_MS = 2000

_TRUE_VALUES = ("1", "true", "yes", "on")


class ConfigError(ValueError):
    """Raised when the workbench config file is malformed."""

    def __init__(self, path: Path, detail: str):
        self.path = path
        self.detail = detail
        super().__init__(f"Invalid workbench config {path}: {detail}")


@dataclass(frozen=True)
class WorkbenchConfig:
    base_url: str = "http://localhost:8000"
    workspace: str = "tests/e2e/resources"
    headless: bool = True
    viewport_width: int = 1920
    viewport_height: int = 1080
    poll_interval_ms: int = 100
    default_wait_ms: int = 5000
    default_scenario_ms: int = DEFAULT_SCENARIO_TIMEOUT_MS
    group_setup_ms: int = 30000
    output_channel: str = "Window"
    terminal_settle_ms: int = 2000

    @property
    def workspace_path(self) -> Path:
        path = Path(self.workspace)
        return path if path.is_absolute() else PROJECT_ROOT / path

    @property
    def workbench_url(self) -> str:
        """URL that opens the workbench on the fixture workspace folder."""
        return f"{self.base_url.rstrip('/')}/?folder={self.workspace_path.as_posix()}"


def _read_yaml(config_path: Path) -> dict:
    if not config_path.exists():
        logger.warning("No workbench config at %s, using defaults", config_path)
        return {}
    with open(config_path) as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ConfigError(config_path, "top level must be a mapping")
    return data


def _env_overrides(config_path: Path) -> dict:
    """BOTTOMBAR_* variables, shaped like the YAML file so the schema covers them."""
    overrides = {}

    def section(name: str) -> dict:
        return overrides.setdefault(name, {})

    if os.environ.get("BOTTOMBAR_BASE_URL"):
        section("workbench")["base_url"] = os.environ["BOTTOMBAR_BASE_URL"].strip()
    if os.environ.get("BOTTOMBAR_WORKSPACE"):
        section("workbench")["workspace"] = os.environ["BOTTOMBAR_WORKSPACE"].strip()
    if os.environ.get("BOTTOMBAR_HEADLESS"):
        section("workbench")["headless"] = os.environ["BOTTOMBAR_HEADLESS"].strip().lower() in _TRUE_VALUES
    if os.environ.get("BOTTOMBAR_OUTPUT_CHANNEL"):
        section("output")["channel"] = os.environ["BOTTOMBAR_OUTPUT_CHANNEL"].strip()
    if os.environ.get("BOTTOMBAR_POLL_INTERVAL_MS"):
        raw = os.environ["BOTTOMBAR_POLL_INTERVAL_MS"].strip()
        try:
            section("timeouts")["poll_interval_ms"] = int(raw)
        except ValueError as exc:
            raise ConfigError(config_path, f"BOTTOMBAR_POLL_INTERVAL_MS must be an integer, got {raw!r}") from exc

    if overrides:
        logger.debug("Environment overrides: %s", sorted(f"{s}.{k}" for s, v in overrides.items() for k in v))
    return overrides


def _merge(data: dict, overrides: dict) -> dict:
    merged = dict(data)
    for name, values in overrides.items():
        merged[name] = {**(merged.get(name) or {}), **values}
    return merged


def _validate(data: dict, config_path: Path) -> None:
    schema = json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))
    try:
        validate(instance=data, schema=schema)
    except ValidationError as exc:
        logger.error("%s failed schema validation: %s", config_path.name, exc.message)
        raise ConfigError(config_path, exc.message) from exc


def _from_mapping(data: dict) -> WorkbenchConfig:
    workbench = data.get("workbench", {})
    viewport = workbench.get("viewport", {})
    timeouts = data.get("timeouts", {})
    defaults = WorkbenchConfig()
    return WorkbenchConfig(
        base_url=workbench.get("base_url", defaults.base_url),
        workspace=workbench.get("workspace", defaults.workspace),
        headless=bool(workbench.get("headless", defaults.headless)),
        viewport_width=int(viewport.get("width", defaults.viewport_width)),
        viewport_height=int(viewport.get("height", defaults.viewport_height)),
        poll_interval_ms=int(timeouts.get("poll_interval_ms", defaults.poll_interval_ms)),
        default_wait_ms=int(timeouts.get("default_wait_ms", defaults.default_wait_ms)),
        default_scenario_ms=int(timeouts.get("default_scenario_ms", defaults.default_scenario_ms)),
        group_setup_ms=int(timeouts.get("group_setup_ms", defaults.group_setup_ms)),
        output_channel=data.get("output", {}).get("channel", defaults.output_channel),
        terminal_settle_ms=int(data.get("terminal", {}).get("settle_ms", defaults.terminal_settle_ms)),
    )


def load_config(config_path: Path = CONFIG_PATH) -> WorkbenchConfig:
    """
    Load the workbench config with environment overrides applied.

    The file and the overrides are merged first, then validated together.

    Raises:
        ConfigError: The merged config violates the schema, or an override
            could not be parsed.
    """
    data = _merge(_read_yaml(config_path), _env_overrides(config_path))
    _validate(data, config_path)
    return _from_mapping(data)
