from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from doubles_trainer.core.report import DEFAULT_TITLE

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent / "data" / "trainer.yaml"


@dataclass(frozen=True)
class TrainerConfig:
    window_title: str = "Darts Doubles Trainer"
    report_title: str = DEFAULT_TITLE
    report_extension: str = "pdf"
    report_directory: Path = Path("~")

    @property
    def export_dir(self) -> Path:
        return self.report_directory.expanduser()


def _string(raw: dict, key: str, default: str, source: str) -> str:
    value = raw.get(key, default)
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"{source}: '{key}' must be a non-empty string")
    return value.strip()


def load_config(path: Optional[Path] = None) -> TrainerConfig:
    """Load settings from YAML, falling back to defaults for missing keys.

    Without *path* the bundled ``data/trainer.yaml`` is used; if that file is
    absent the built-in defaults apply.
    """
    config_path = path if path is not None else DEFAULT_CONFIG_PATH
    if not config_path.exists():
        if path is not None:
            raise FileNotFoundError(f"Config file not found: {config_path}")
        logger.warning("Bundled config missing at %s, using defaults", config_path)
        return TrainerConfig()

    raw: Any = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    if raw is None:
        return TrainerConfig()
    if not isinstance(raw, dict):
        raise ValueError(f"{config_path.name}: expected a YAML mapping")

    report = raw.get("report", {}) or {}
    if not isinstance(report, dict):
        raise ValueError(f"{config_path.name}: 'report' must be a mapping")

    defaults = TrainerConfig()
    name = config_path.name
    config = TrainerConfig(
        window_title=_string(raw, "window_title", defaults.window_title, name),
        report_title=_string(report, "title", defaults.report_title, name),
        report_extension=_string(report, "extension", defaults.report_extension, name).lstrip("."),
        report_directory=Path(_string(report, "directory", str(defaults.report_directory), name)),
    )
    logger.info("Loaded config from %s", config_path)
    return config
