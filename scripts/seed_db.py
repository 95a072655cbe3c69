from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.ops_dashboard.ops_dashboard.container import build_container

DEMO_EMPLOYEES = [
    {"name": "Ramesh Patel", "address": "12 Station Road", "contact": "9800000001"},
    {"name": "Suresh Shah", "address": "4 Market Street", "contact": "9800000002"},
    {"name": "Mahesh Joshi", "address": "77 Lake View", "contact": "9800000003"},
]


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    container = build_container(settings=settings)

    existing = {(e.name, e.contact) for e in container.employees_repo.list_all()}
    created = 0
    for emp in DEMO_EMPLOYEES:
        if (emp["name"], emp["contact"]) in existing:
            continue
        # demo rows carry no images
        container.employees_repo.add({**emp, "photoUrl": "", "aadharPhotoUrl": ""})
        created += 1

    print(f"OK: Seeded {created} demo employees into {settings.MONGO_DB_NAME}")


if __name__ == "__main__":
    main()
