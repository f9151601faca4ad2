"""Application-wide metadata."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AppMetadata:
    """Global application metadata such as version and working directory."""

    version: str
    current_directory: str