from __future__ import annotations

import json
import logging
from pathlib import Path

from store_browser.config.model import GlobalConfig
from store_browser.core.dataset_loader import is_remote_source
from store_browser.core.exceptions import ConfigError

logger = logging.getLogger(__name__)


def load_global_config(root: Path) -> GlobalConfig:
    """
    Load configuration from a directory.

    Expected structure:

        root/
            global.json

    Keys missing from global.json fall back to the GlobalConfig defaults;
    unknown keys are ignored. A relative local data_url / boundaries_url is
    resolved against 'root'.

    :param root: Directory containing 'global.json'.
    :return: A GlobalConfig instance.
    :raises FileNotFoundError: if global.json does not exist.
    :raises ConfigError: if global.json is not a JSON object or holds invalid values.
    """
    root = Path(root)
    logger.info("Loading global config", extra={"config_root": str(root)})

    global_path = root / "global.json"
    if not global_path.is_file():
        raise FileNotFoundError(f"File not found at {global_path}")

    with global_path.open() as f:
        try:
            raw_global = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"{global_path} is not valid JSON: {e}") from e

    if not isinstance(raw_global, dict):
        raise ConfigError(f"{global_path} must contain a JSON object")

    for key in ("data_url", "boundaries_url"):
        value = raw_global.get(key)
        if isinstance(value, str) and not is_remote_source(value) and not Path(value).is_absolute():
            raw_global[key] = str((root / value).resolve())

    return GlobalConfig.from_raw(raw_global)