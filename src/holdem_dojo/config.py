"""Application configuration for holdem-dojo."""

import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Self


@dataclass
class AgentConfig:
    """Which seat the agent plays."""

    name: str = "user"


@dataclass
class LoggingConfig:
    """Log output settings."""

    level: str = "WARNING"


@dataclass
class Config:
    """Application configuration."""

    agent: AgentConfig = field(default_factory=AgentConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def load(cls) -> Self:
        """Load config from file, falling back to defaults."""
        config_paths = [
            Path.cwd() / "holdem-dojo.toml",
            Path.cwd() / ".holdem-dojo.toml",
            Path.home() / ".config" / "holdem-dojo" / "config.toml",
            Path.home() / ".holdem-dojo.toml",
        ]

        for path in config_paths:
            if path.exists():
                return cls.from_file(path)

        return cls()

    @classmethod
    def from_file(cls, path: Path) -> Self:
        """Load config from a TOML file."""
        with open(path, "rb") as f:
            data = tomllib.load(f)

        agent_data = data.get("agent", {})
        agent = AgentConfig(name=agent_data.get("name", "user"))

        logging_data = data.get("logging", {})
        logging = LoggingConfig(level=str(logging_data.get("level", "WARNING")).upper())

        return cls(agent=agent, logging=logging)


# Global config instance (loaded lazily)
_config: Config | None = None


def get_config() -> Config:
    """Get the global config instance."""
    global _config
    if _config is None:
        _config = Config.load()
    return _config
