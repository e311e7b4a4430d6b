# ciphercraft/config.py
"""
Simple settings persistence for CipherCraft.
Settings saved as JSON in $CIPHERCRAFT_HOME/config.json, %APPDATA%/CipherCraft/config.json (Windows)
or ~/.ciphercraft/config.json (fallback)
"""

import os
import json
import logging
from typing import Dict, Any, Optional

logger = logging.getLogger(__name__)

DEFAULTS: Dict[str, Any] = {
    "word_list_path": None,  # if None, the bundled word list is used
    "penalize_patterns": False,
    "log_level": "WARNING",
}

def _appdata_dir() -> str:
    home = os.getenv("CIPHERCRAFT_HOME")
    if home:
        return home
    appdata = os.getenv("APPDATA")
    if appdata:
        return os.path.join(appdata, "CipherCraft")
    return os.path.join(os.path.expanduser("~"), ".ciphercraft")

def config_path() -> str:
    return os.path.join(_appdata_dir(), "config.json")

def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    p = path or config_path()
    if not os.path.exists(p):
        return DEFAULTS.copy()
    try:
        with open(p, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("ignoring unreadable config %s: %s", p, e)
        return DEFAULTS.copy()
    if not isinstance(data, dict):
        logger.warning("ignoring config %s: expected a JSON object", p)
        return DEFAULTS.copy()
    # merge defaults
    out = DEFAULTS.copy()
    out.update(data)
    return out

def save_config(cfg: Dict[str, Any], path: Optional[str] = None) -> str:
    """
    Atomically write settings by writing to a temp file and renaming. Returns path used.
    """
    p = path or config_path()
    d = os.path.dirname(p)
    if d:
        os.makedirs(d, exist_ok=True)
    tmp = p + ".tmp"
    try:
        with open(tmp, "w", encoding="utf-8") as f:
            json.dump(cfg, f, ensure_ascii=False, indent=2)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp, p)
    except BaseException:
        # never leave a half-written temp file behind
        if os.path.exists(tmp):
            os.remove(tmp)
        raise
    return p
