from __future__ import annotations

import json
import math
import os
import sys
from datetime import datetime, timezone
from typing import Any


REDACT_KEYS = {"token", "auth", "authorization", "password", "secret", "api_key"}


def _redact(obj: Any) -> Any:
    if isinstance(obj, dict):
        return {k: ("<redacted>" if str(k).lower() in REDACT_KEYS else _redact(v)) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [_redact(v) for v in obj]
    if isinstance(obj, float) and not math.isfinite(obj):
        return None
    return obj


_LOG_DIR = os.environ.get("BFP_LOG_DIR", ".logs")
_MAX_BYTES = int(os.environ.get("BFP_LOG_MAX_BYTES", "1048576"))  # 1MB
_BACKUPS = int(os.environ.get("BFP_LOG_BACKUPS", "5"))


def log_path() -> str | None:
    if not _LOG_DIR:
        return None
    return os.path.join(_LOG_DIR, "events.log")


def _rotate(path: str) -> None:
    for i in range(_BACKUPS, 0, -1):
        older = f"{path}.{i}"
        newer = f"{path}.{i-1}" if i > 1 else path
        if os.path.exists(older):
            os.remove(older)
        if os.path.exists(newer):
            os.rename(newer, older)


def _write_file_line(line: str) -> None:
    path = log_path()
    if path is None:
        return
    try:
        os.makedirs(_LOG_DIR, exist_ok=True)
        if os.path.exists(path) and os.path.getsize(path) > _MAX_BYTES:
            _rotate(path)
        with open(path, "a", encoding="utf-8") as f:
            f.write(line + "\n")
    except OSError as exc:
        sys.stderr.write(f"bellman_paths: cannot write {path}: {exc}\n")


def log_event(event: str, **fields: Any) -> None:
    record = {
        "ts": datetime.now(timezone.utc).isoformat(),
        "event": event,
        **_redact(fields),
    }
    line = json.dumps(record, ensure_ascii=False)
    sys.stdout.write(line + "\n")
    sys.stdout.flush()
    _write_file_line(line)
