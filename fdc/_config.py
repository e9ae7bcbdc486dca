"""Domyślne ustawienia CLI — konfiguracja przez zmienne środowiskowe."""

from __future__ import annotations

import os


def _split(value: str) -> list[str]:
    return [v.strip() for v in value.replace(";", ",").split(",") if v.strip()]


def env_dialect() -> str:
    return os.getenv("FDOC_DIALECT", "default")


def env_entry_tags() -> list[str]:
    return _split(os.getenv("FDOC_ENTRY_TAGS", "description"))


def env_required_tags() -> list[str]:
    return _split(os.getenv("FDOC_REQUIRED_TAGS", ""))


def env_comment_prefix() -> str:
    return os.getenv("FDOC_COMMENT_PREFIX", "!")


def env_output_dir() -> str:
    return os.getenv("FDOC_OUTPUT_DIR", ".")


def env_jobs() -> int:
    """FDOC_JOBS jako liczba wątków; wartość nieliczbowa lub < 1 → 1."""
    try:
        return max(1, int(os.getenv("FDOC_JOBS", "1")))
    except ValueError:
        return 1
