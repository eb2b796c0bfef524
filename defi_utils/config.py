"""Configuration management for defi_utils."""

import os
from dataclasses import dataclass, field
from typing import Dict, Optional

from dotenv import load_dotenv

# Load environment variables from .env file if present
load_dotenv()


def parse_explorer_list(raw: Optional[str]) -> Dict[str, str]:
    """Parse a ``name=url,name=url`` list of extra explorer base URLs.

    Args:
        raw: Raw value of DEFI_EXTRA_EXPLORERS (None or empty for no extras)

    Returns:
        Mapping of lowercase network name to explorer base URL

    Raises:
        ValueError: If an entry is not of the form name=url
    """
    explorers: Dict[str, str] = {}
    if not raw:
        return explorers

    for entry in raw.split(","):
        entry = entry.strip()
        if not entry:
            continue
        if "=" not in entry:
            raise ValueError(f"Invalid explorer entry (expected name=url): {entry}")
        name, url = entry.split("=", 1)
        name = name.strip().lower()
        if not name:
            raise ValueError(f"Explorer entry has an empty network name: {entry}")
        explorers[name] = url.strip()
    return explorers


@dataclass
class Config:
    """Display defaults shared by the CLI."""

    log_level: str = "INFO"

    # Token amount display
    default_decimals: int = 18
    display_decimals: int = 4

    # Block explorers
    default_network: str = "polygon"
    extra_explorers: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        return cls(
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            default_decimals=int(os.getenv("DEFI_DEFAULT_DECIMALS", "18")),
            display_decimals=int(os.getenv("DEFI_DISPLAY_DECIMALS", "4")),
            default_network=os.getenv("DEFI_DEFAULT_NETWORK", "polygon").strip().lower(),
            extra_explorers=parse_explorer_list(os.getenv("DEFI_EXTRA_EXPLORERS")),
        )

    def validate(self) -> None:
        """Validate configuration values."""
        if self.default_decimals < 0:
            raise ValueError("default_decimals must be >= 0")
        if self.display_decimals < 0:
            raise ValueError("display_decimals must be >= 0")
        if not self.default_network:
            raise ValueError("default_network is required")
        for name, url in self.extra_explorers.items():
            if not url.startswith(("http://", "https://")):
                raise ValueError(f"Explorer URL for {name} must start with http:// or https://")
