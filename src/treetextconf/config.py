"""Local configuration for treetextconf."""

from __future__ import annotations

import os


DEFAULT_ENCODING = "utf-8"
DEFAULT_READ_CHUNK = 4096
DEFAULT_FETCH_TIMEOUT_S = 10.0
DEFAULT_USER_AGENT = "treetextconf/0.1"


def _optional_int(name: str) -> int | None:
    raw = os.getenv(name, "").strip()
    return int(raw) if raw else None


# Limits applied by the command line tool when no flag is given.
TREETEXTCONF_MAX_DEPTH = _optional_int("TREETEXTCONF_MAX_DEPTH")
TREETEXTCONF_MAX_SIZE = _optional_int("TREETEXTCONF_MAX_SIZE")
TREETEXTCONF_ENCODING = os.getenv("TREETEXTCONF_ENCODING", DEFAULT_ENCODING)
TREETEXTCONF_READ_CHUNK = int(os.getenv("TREETEXTCONF_READ_CHUNK", str(DEFAULT_READ_CHUNK)))
TREETEXTCONF_FETCH_TIMEOUT_S = float(os.getenv("TREETEXTCONF_FETCH_TIMEOUT_S", str(DEFAULT_FETCH_TIMEOUT_S)))
TREETEXTCONF_USER_AGENT = os.getenv("TREETEXTCONF_USER_AGENT", DEFAULT_USER_AGENT)
