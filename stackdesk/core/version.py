"""Build/version metadata.

Usually run from source (python main.py). Packaged builds get their metadata from
environment variables injected at build time.
"""

from __future__ import annotations

import os


def get_build_info() -> dict[str, str]:
    """Return build metadata.

    - STACKDESK_VERSION: human readable version (e.g. "0.3.0" or "0.0.0-dev")
    - STACKDESK_GIT_SHA: short git sha
    - STACKDESK_BUILD_DATE: ISO date
    """
    return {
        "version": os.getenv("STACKDESK_VERSION", "0.1.0"),
        "git_sha": os.getenv("STACKDESK_GIT_SHA", "dev"),
        "build_date": os.getenv("STACKDESK_BUILD_DATE", ""),
    }


def get_version_string() -> str:
    info = get_build_info()
    ver = info["version"].strip() or "0.0.0-dev"
    sha = info["git_sha"].strip() or "dev"
    date = info["build_date"].strip()
    if date:
        return f"v{ver} ({sha}, {date})"
    return f"v{ver} ({sha})"
