"""
Bootstrap environment for Streamlit Cloud & local dev:
- Copy st.secrets into uppercase os.environ keys (nested tables -> PREFIX_CHILD)
- Load .env afterwards, never overriding values that are already set
"""

from __future__ import annotations

import os
import re
from typing import Any, Iterator, Mapping, Tuple

import streamlit as st
from dotenv import load_dotenv


def _env_key(key: str) -> str:
    return re.sub(r"[^A-Za-z0-9_]", "_", key.upper())


def _walk_secrets(prefix: str, value: Any) -> Iterator[Tuple[str, str]]:
    if isinstance(value, Mapping):
        for child_key, child_value in value.items():
            yield from _walk_secrets(f"{prefix}_{child_key}", child_value)
    else:
        yield _env_key(prefix), str(value)


def _secrets_as_dict() -> dict:
    # st.secrets raises outside the Streamlit runtime when no secrets.toml exists
    try:
        secrets = getattr(st, "secrets", None)
        if not secrets:
            return {}
        try:
            return secrets.to_dict()  # type: ignore[attr-defined]
        except AttributeError:
            return dict(secrets)
    except Exception:
        return {}


def export_secrets_to_env() -> int:
    """Copy secrets into os.environ without clobbering; return how many keys were new."""
    added = 0
    for key, value in _secrets_as_dict().items():
        for env_key, env_value in _walk_secrets(key, value):
            if env_key not in os.environ:
                os.environ[env_key] = env_value
                added += 1
    return added


def ensure_env() -> None:
    """Idempotent: make sure settings from secrets and .env are visible in os.environ."""
    export_secrets_to_env()
    # load_dotenv does not override existing env vars by default
    load_dotenv()
