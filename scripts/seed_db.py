from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.attendance_tracker.attendance_tracker.database.bootstrap import ensure_bootstrap_admin
from src.attendance_tracker.attendance_tracker.main import container_from_settings


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    container = container_from_settings(settings)

    admin = dict(settings.BOOTSTRAP_ADMIN)
    created = ensure_bootstrap_admin(container.users_repo, admin)
    state = "created" if created else "already present"
    print(f"OK: bootstrap admin {admin['email']} {state} (backend={container.backend.value})")


if __name__ == "__main__":
    main()
