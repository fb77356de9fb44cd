"""Configuration management for task lists."""

from dataclasses import dataclass, field
import os
from dotenv import load_dotenv

# Load .env file
load_dotenv()


@dataclass
class ListConfig:
    """Task list defaults."""
    # Name rendered in the header when a list is created without one
    default_name: str = "Todo List"


@dataclass
class Config:
    """Main configuration class."""
    lists: ListConfig = field(default_factory=ListConfig)
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        return cls(
            lists=ListConfig(
                default_name=os.getenv("TODOLIST_DEFAULT_NAME", "Todo List"),
            ),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )


# Global config instance
config = Config.from_env()
