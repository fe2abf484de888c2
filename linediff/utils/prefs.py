# linediff/utils/prefs.py

import json
import os
from pathlib import Path
from platformdirs import user_config_dir

from linediff.config import APP_NAME, APP_AUTHOR, PREFS_FILENAME
from linediff.utils.logger import logger

def _prefs_path() -> Path:
    override = os.environ.get("LINEDIFF_CONFIG_DIR")
    if override:
        cfg_dir = Path(override)
    else:
        cfg_dir = Path(user_config_dir(appname=APP_NAME, appauthor=APP_AUTHOR))
    cfg_dir.mkdir(parents=True, exist_ok=True)
    return cfg_dir / PREFS_FILENAME

def load_prefs() -> dict:
    try:
        p = _prefs_path()
        if p.exists():
            data = json.loads(p.read_text(encoding="utf-8"))
            return data if isinstance(data, dict) else {}
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load prefs: {e}")
    return {}

def save_prefs(data: dict) -> bool:
    try:
        p = _prefs_path()
        p.write_text(json.dumps(data, indent=2), encoding="utf-8")
        logger.info(f"Prefs saved to {p}")
        return True
    except OSError as e:
        logger.error(f"Failed to save prefs: {e}")
        return False
