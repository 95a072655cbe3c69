"""Backup database.

Note: needs `mongodump` (MongoDB Database Tools) on PATH.
"""

from __future__ import annotations

import importlib
import subprocess
from datetime import datetime
from pathlib import Path

from config import get_settings_module


def main() -> None:
    settings = importlib.import_module(get_settings_module())

    out_dir = Path(__file__).resolve().parents[1] / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    archive = out_dir / f"{settings.MONGO_DB_NAME}_{ts}.archive.gz"

    cmd = [
        "mongodump",
        f"--uri={settings.MONGO_URI}",
        f"--db={settings.MONGO_DB_NAME}",
        f"--archive={archive}",
        "--gzip",
    ]

    try:
        subprocess.run(cmd, stderr=subprocess.PIPE, check=True)
        print(f"OK: Backup created: {archive}")
    except FileNotFoundError:
        raise SystemExit("`mongodump` not found. Install the MongoDB Database Tools first.")


if __name__ == "__main__":
    main()
