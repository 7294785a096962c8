"""Configuration settings for REF Truth."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


def _default_data_dir() -> Path:
    return Path.home() / ".reftruth"


@dataclass
class Settings:
    """Application settings for the CLI and API.

    The engine itself takes no settings; weights are passed explicitly.
    """

    data_dir: Path = field(default_factory=_default_data_dir)

    # API
    api_host: str = "127.0.0.1"
    api_port: int = 8000

    @property
    def probes_path(self) -> Path:
        return self.data_dir / "probes.json"

    @property
    def weights_path(self) -> Path:
        return self.data_dir / "weights.yaml"
