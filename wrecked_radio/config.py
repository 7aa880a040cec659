# =============================================================================
# NAV INDEX (search these tags)
# [NAV-00] Imports / constants
# [NAV-10] Config loading / saving
# [NAV-99] End
# =============================================================================

# === [NAV-00] Imports / constants ============================================
from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, Optional

CONFIG_PATH = Path("data/roaming/wrecked_radio.json")
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
_DEFAULT_RADIO_CONFIG = {"log_level": "INFO", "log_dir": "data/roaming/logs"}


# === [NAV-10] Config loading / saving ========================================
def load_radio_config(path: Optional[Path] = None) -> Dict:
    path = Path(path) if path is not None else CONFIG_PATH
    if not path.exists():
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(_DEFAULT_RADIO_CONFIG, indent=2), encoding="utf-8")
        return _DEFAULT_RADIO_CONFIG.copy()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return _DEFAULT_RADIO_CONFIG.copy()
    if not isinstance(data, dict):
        return _DEFAULT_RADIO_CONFIG.copy()
    for key, value in _DEFAULT_RADIO_CONFIG.items():
        data.setdefault(key, value)
    if str(data.get("log_level")).upper() not in LOG_LEVELS:
        data["log_level"] = _DEFAULT_RADIO_CONFIG["log_level"]
    return data


def save_radio_config(data: Dict, path: Optional[Path] = None) -> None:
    path = Path(path) if path is not None else CONFIG_PATH
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")


# === [NAV-99] End ============================================================
