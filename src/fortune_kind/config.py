"""
Module: config

Purpose:
    Configuration dataclass for locating fortune files. Built once at
    startup (usually from the environment) and passed down explicitly,
    so loading code never reads environment variables itself.

Key Classes:
    - FortuneConfig: Default fortune directories and delimiter

Dependencies:
    - dataclasses (std)
    - pathlib (std)

Used By:
    - controller: Source resolution
    - cli: Built from os.environ at startup
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from fortune_kind.core.models import Category
from fortune_kind.loading.parser import DEFAULT_DELIMITER

FORTUNE_DIR_ENV = "FORTUNE_DIR"
FORTUNE_OFF_DIR_ENV = "FORTUNE_OFF_DIR"

# Fortunes shipped inside the package
BUNDLED_DATA_DIR = Path(__file__).resolve().parent / "data"
BUNDLED_FORTUNE_DIR = BUNDLED_DATA_DIR / "fortunes"
BUNDLED_FORTUNE_OFF_DIR = BUNDLED_DATA_DIR / "off"


@dataclass(frozen=True)
class FortuneConfig:
    """
    Where to find fortunes when no explicit path is given (immutable).

    Attributes:
        fortune_dir: Root of standard fortunes
        fortune_off_dir: Root of unkind fortunes
        delimiter: Line token separating fortunes in a file

    Example:
        >>> config = FortuneConfig.from_env({"FORTUNE_DIR": "/usr/share/fortunes"})
        >>> config.fortune_dir
        PosixPath('/usr/share/fortunes')
    """

    fortune_dir: Path = BUNDLED_FORTUNE_DIR
    fortune_off_dir: Path = BUNDLED_FORTUNE_OFF_DIR
    delimiter: str = DEFAULT_DELIMITER

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if not self.delimiter or not self.delimiter.strip():
            raise ValueError("delimiter must not be blank")
        if "\n" in self.delimiter or "\r" in self.delimiter:
            raise ValueError(f"delimiter must be a single line: {self.delimiter!r}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> FortuneConfig:
        """
        Build configuration from environment variables.

        FORTUNE_DIR and FORTUNE_OFF_DIR override the bundled directories.
        Unset or empty variables fall back to the bundled data.

        Args:
            environ: Mapping to read from (defaults to os.environ)
        """
        env = os.environ if environ is None else environ
        return cls(
            fortune_dir=_path_from_env(env, FORTUNE_DIR_ENV, BUNDLED_FORTUNE_DIR),
            fortune_off_dir=_path_from_env(env, FORTUNE_OFF_DIR_ENV, BUNDLED_FORTUNE_OFF_DIR),
        )

    def root_for(self, category: Category) -> Path:
        """Default directory for a content category."""
        if category is Category.UNKIND:
            return self.fortune_off_dir
        return self.fortune_dir


def _path_from_env(env: Mapping[str, str], name: str, default: Path) -> Path:
    value = env.get(name, "").strip()
    return Path(value).expanduser() if value else default
