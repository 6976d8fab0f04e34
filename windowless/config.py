from __future__ import annotations

import json
import os
import shutil
import threading
from dataclasses import asdict, dataclass
from datetime import datetime
from pathlib import Path
from typing import Any, List, Optional

VERSION = "0.1.0"
SETTINGS_ENV_VAR = "WINDOWLESS_SETTINGS"
LOGGER_NAME = "windowless"

_LOAD_WARNINGS: List[str] = []
_LOAD_WARNINGS_LOCK = threading.Lock()

BROKEN_BACKUP_KEEP_COUNT = 10


def _push_load_warning(message: str) -> None:
    with _LOAD_WARNINGS_LOCK:
        _LOAD_WARNINGS.append(message)


def consume_load_warnings() -> List[str]:
    with _LOAD_WARNINGS_LOCK:
        out = list(_LOAD_WARNINGS)
        _LOAD_WARNINGS.clear()
        return out


def _coerce_bool(value: Any, default: bool) -> bool:
    return value if isinstance(value, bool) else default


def _clamped_int(value: Any, default: int, low: int, high: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        return default
    return min(max(value, low), high)


def _coerce_str(value: Any, default: str) -> str:
    return value if isinstance(value, str) else default


def _quarantine(path: str, reason: str) -> None:
    """Copy an unreadable settings file aside and keep the newest copies."""
    stamp = datetime.now().strftime("%Y%m%d-%H%M%S")
    backup_path = f"{path}.broken-{stamp}"
    try:
        shutil.copy2(path, backup_path)
    except OSError as exc:
        _push_load_warning(f"{path}: {reason}; could not back it up ({exc.__class__.__name__}). Using defaults.")
        return
    _push_load_warning(f"{path}: {reason}; saved a copy as {backup_path}. Using defaults.")

    base = Path(path)
    # The timestamp suffix sorts lexically, newest last.
    backups = sorted(base.parent.glob(f"{base.name}.broken-*"))
    for stale in backups[:-BROKEN_BACKUP_KEEP_COUNT]:
        try:
            stale.unlink()
        except OSError as exc:
            _push_load_warning(f"could not remove {stale.name} ({exc.__class__.__name__})")


def _read_settings_json(path: str) -> dict[str, Any] | None:
    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = json.load(f)
    except FileNotFoundError:
        return None
    except (OSError, ValueError) as exc:
        _quarantine(path, f"JSON parse failed ({exc.__class__.__name__})")
        return None
    if not isinstance(raw, dict):
        _quarantine(path, "top level is not an object")
        return None
    return raw


@dataclass
class TableSettings:
    log_level: str = "INFO"
    log_file: str = ""
    trace_resolver: bool = False
    dump_max_depth: int = 16

    @classmethod
    def load(cls, path: Optional[str] = None) -> "TableSettings":
        defaults = cls()
        path = path or os.environ.get(SETTINGS_ENV_VAR)
        if not path:
            return defaults
        raw = _read_settings_json(path)
        if raw is None:
            return defaults
        return cls(
            log_level=_coerce_str(raw.get("log_level"), defaults.log_level).upper(),
            log_file=_coerce_str(raw.get("log_file"), defaults.log_file),
            trace_resolver=_coerce_bool(raw.get("trace_resolver"), defaults.trace_resolver),
            dump_max_depth=_clamped_int(raw.get("dump_max_depth"), defaults.dump_max_depth, 1, 256),
        )

    def save(self, path: str) -> None:
        parent = os.path.dirname(path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(asdict(self), f, indent=2, ensure_ascii=False)

    @classmethod
    def default_json(cls) -> str:
        return json.dumps(asdict(cls()), indent=2, ensure_ascii=False)


__all__ = [
    "VERSION",
    "SETTINGS_ENV_VAR",
    "LOGGER_NAME",
    "TableSettings",
    "consume_load_warnings",
]
