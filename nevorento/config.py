"""Runtime configuration defaults for the journal and debug log."""

from __future__ import annotations

import os

DB_PATH = os.environ.get("NEVORENTO_DB_PATH", "data/nevorento.db")
DEBUG_LOG_PATH = os.environ.get("NEVORENTO_DEBUG_LOG", "/tmp/nevorento-debug.log")
