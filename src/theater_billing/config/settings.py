"""
Centralized settings and path configuration for theater billing.
"""
from pathlib import Path
from dataclasses import dataclass
from typing import Optional


def get_project_root() -> Path:
    """Get the project root directory (where pyproject.toml lives)."""
    current = Path(__file__).resolve()
    for parent in current.parents:
        if (parent / 'pyproject.toml').exists():
            return parent
    # Fallback to 3 levels up from this file
    return Path(__file__).resolve().parent.parent.parent.parent


@dataclass
class Settings:
    """Application settings with sensible defaults."""

    # Project paths
    project_root: Path
    data_dir: Path

    # Input files
    plays_file: Path
    invoices_file: Path

    # Optional rate overrides (see engine.rates.load_rates)
    rates_file: Optional[Path] = None

    # Display
    currency_symbol: str = '$'

    @classmethod
    def load(cls, project_root: Optional[Path] = None, data_dir: Optional[Path] = None) -> 'Settings':
        """Load settings from the project structure."""
        root = project_root or get_project_root()
        data = data_dir or Path(__file__).resolve().parent.parent / 'data'

        rates_path = data / 'rates.json'

        return cls(
            project_root=root,
            data_dir=data,
            plays_file=data / 'plays.json',
            invoices_file=data / 'invoices.json',
            rates_file=rates_path if rates_path.exists() else None,
        )


# Default settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings.load()
    return _settings
