"""Application configuration and constants.

Holds the project root, the default API origin, preference keys, tab ids and the
defaults used to prefill the create form. A few values can be overridden through
environment variables (see ``STACKDESK_*`` below).
"""

import os
from pathlib import Path

# Base paths
PROJECT_ROOT = Path(__file__).resolve().parent.parent

# Remote API
DEFAULT_API_BASE = os.getenv("STACKDESK_API_BASE", "http://127.0.0.1:8081")
API_KEY_HEADER = "X-API-KEY"

# target_port wire encoding: "list" = [{"container_port", "protocol"}], "int" = single integer
TARGET_PORT_ENCODING = os.getenv("STACKDESK_TARGET_PORT_ENCODING", "list").strip().lower()
MAX_TARGET_PORTS = 24

# Preferences (QSettings keys)
SETTINGS_ORGANIZATION = "StackDesk"
SETTINGS_APPLICATION = "StackDesk Control Panel"
SETTINGS_PATH = os.getenv("STACKDESK_SETTINGS_PATH", "")  # empty = platform default location
PREF_API_KEY = "connection/apiKey"
PREF_API_KEY_ENABLED = "connection/apiKeyEnabled"
PREF_API_BASE = "connection/apiBase"
PREF_ACTIVE_TAB = "ui/activeTab"

# Tabs (order matches the tab bar)
TAB_IDS = ("settings", "stacks", "create", "inspect", "system")
DEFAULT_TAB = "settings"

# Create form defaults
DEFAULT_TARGET_PORT = "80"
DEFAULT_POD_SPEC = """apiVersion: v1
kind: Pod
metadata:
  name: challenge
spec:
  containers:
    - name: app
      image: nginx:stable
      ports:
        - containerPort: 80
          protocol: TCP
      resources:
        requests:
          cpu: "100m"
          memory: "128Mi"
        limits:
          cpu: "100m"
          memory: "128Mi"
"""

# Console
CONSOLE_IDLE_TEXT = "ready"
