"""Registry file locations, optionally loaded from a YAML config file."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)

USER_CONFIG_PATH = Path.home() / ".config" / "ncs_accounts" / "config.yaml"


class RegistryConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    passwd_path: str = "/etc/passwd"
    shadow_path: str = "/etc/shadow"
    encoding: str = "utf-8"


def load_config(path: str | Path | None = None) -> RegistryConfig:
    """
    Load a RegistryConfig from YAML.

    Settings may sit at the top level or under an ``accounts:`` key. With no
    *path*, ``~/.config/ncs_accounts/config.yaml`` is used if it exists;
    otherwise defaults apply.
    """
    cfg_path = Path(path) if path else USER_CONFIG_PATH
    if not cfg_path.is_file():
        if path:
            logger.warning("Config file %s not found; using defaults", cfg_path)
        return RegistryConfig()

    with open(cfg_path, encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"Invalid config file: {cfg_path} (expected YAML mapping)")

    section = raw.get("accounts", raw)
    if not isinstance(section, dict):
        raise ValueError(f"Invalid config file: {cfg_path} ('accounts' must be a mapping)")

    logger.debug("Loaded config from %s: keys=%s", cfg_path, sorted(section))
    return RegistryConfig.model_validate(section)
