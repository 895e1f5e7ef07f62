"""Configuration for the documentation generator."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_SOURCE = "index.css"
DEFAULT_OUTPUT = "docs/functions.md"
DEFAULT_SOURCE_LINK = "../index.css"


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").lower() in ("1", "true")


@dataclass
class Config:
    """Paths and options for one generator run."""

    source: Path = Path(DEFAULT_SOURCE)
    output: Path = Path(DEFAULT_OUTPUT)
    source_link: str = DEFAULT_SOURCE_LINK  # Heading links point here
    strict: bool = False  # Undocumented functions fail the run

    @classmethod
    def from_env(cls) -> Config:
        """Build a config from CSSDOCS_* environment variables."""
        return cls(
            source=Path(os.environ.get("CSSDOCS_SOURCE", DEFAULT_SOURCE)),
            output=Path(os.environ.get("CSSDOCS_OUTPUT", DEFAULT_OUTPUT)),
            source_link=os.environ.get("CSSDOCS_SOURCE_LINK", DEFAULT_SOURCE_LINK),
            strict=_env_flag("CSSDOCS_STRICT"),
        )
