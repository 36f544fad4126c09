from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

from stackdesk.config import PROJECT_ROOT

APP_DIR_NAME = "stackdesk"


def get_app_state_dir(app_folder_name: str = ".app_state") -> Path:
    """Return a writable directory for app state (logs).

    Preference order:
    1) <PROJECT_ROOT>/.app_state if writable (running from a checkout)
    2) OS user data dir (~/.local/share/stackdesk, %APPDATA%\\stackdesk, ...)
    """
    proj_dir = PROJECT_ROOT / app_folder_name
    try:
        proj_dir.mkdir(parents=True, exist_ok=True)
        marker = proj_dir / ".write_test"
        marker.write_text("ok", encoding="utf-8")
        marker.unlink(missing_ok=True)
        return proj_dir
    except OSError:
        logging.getLogger(__name__).debug(
            "Project dir is not writable; falling back to user data dir", exc_info=True
        )
    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA") or Path.home() / "AppData" / "Roaming")
        return (base / APP_DIR_NAME).resolve()
    if sys.platform == "darwin":
        return (Path.home() / "Library" / "Application Support" / APP_DIR_NAME).resolve()
    xdg = os.environ.get("XDG_DATA_HOME")
    base = Path(xdg) if xdg else (Path.home() / ".local" / "share")
    return (base / APP_DIR_NAME).resolve()
