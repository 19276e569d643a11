"""Application configuration loaded from config.yaml."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

TRANSPORTS = ("sdk", "http")


@dataclass(frozen=True)
class LLMConfig:
    model: str = "claude-sonnet-4-20250514"
    transport: str = "sdk"
    resume_max_tokens: int = 4000
    letter_max_tokens: int = 1000
    temperature: float | None = None
    timeout: int = 120

    def __post_init__(self) -> None:
        if self.transport not in TRANSPORTS:
            raise ValueError(f"transport must be one of {TRANSPORTS}, got {self.transport!r}")
        if self.resume_max_tokens < 1:
            raise ValueError(f"resume_max_tokens must be >= 1, got {self.resume_max_tokens}")
        if self.letter_max_tokens < 1:
            raise ValueError(f"letter_max_tokens must be >= 1, got {self.letter_max_tokens}")
        if self.temperature is not None and not 0.0 <= self.temperature <= 1.0:
            raise ValueError(f"temperature must be between 0 and 1, got {self.temperature}")
        if self.timeout < 1:
            raise ValueError(f"timeout must be >= 1, got {self.timeout}")


@dataclass(frozen=True)
class TransformConfig:
    max_source_chars: int = 50_000

    def __post_init__(self) -> None:
        if self.max_source_chars < 1:
            raise ValueError(f"max_source_chars must be >= 1, got {self.max_source_chars}")


@dataclass(frozen=True)
class UsageConfig:
    enabled: bool = True
    db_path: str = "~/.clayface/usage.db"

    @property
    def resolved_db_path(self) -> Path:
        return Path(self.db_path).expanduser()


@dataclass(frozen=True)
class AppConfig:
    llm: LLMConfig = field(default_factory=LLMConfig)
    transform: TransformConfig = field(default_factory=TransformConfig)
    usage: UsageConfig = field(default_factory=UsageConfig)


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load config from YAML file, falling back to defaults."""
    if path is None:
        # Look for config.yaml relative to the project root
        candidates = [
            Path.cwd() / "config.yaml",
            Path(__file__).resolve().parent.parent.parent / "config.yaml",
        ]
        for c in candidates:
            if c.exists():
                path = c
                break

    raw: dict = {}
    if path is not None:
        p = Path(path)
        if p.exists():
            raw = yaml.safe_load(p.read_text()) or {}

    return AppConfig(
        llm=LLMConfig(**raw.get("llm", {})),
        transform=TransformConfig(**raw.get("transform", {})),
        usage=UsageConfig(**raw.get("usage", {})),
    )
