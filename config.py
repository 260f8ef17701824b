"""Configuration management for Bankbook.

Reads configuration from ~/.config/bankbook.toml and creates default config if needed.
"""

from pathlib import Path
from dataclasses import dataclass
from typing import Optional
import tomllib
import tomli_w


@dataclass
class Config:
    """Application configuration."""

    base_dir: Path
    store_path: Path
    strict_load: bool
    currency_symbol: str
    log_level: str
    log_dir: Path
    enable_reset: bool = False

    @classmethod
    def default(cls) -> "Config":
        """Create a Config with default values."""
        base_dir = Path.home() / "data" / "bankbook"
        return cls(
            base_dir=base_dir,
            store_path=Path("accounts.txt"),
            strict_load=False,
            currency_symbol="₹",
            log_level="INFO",
            log_dir=base_dir / "logs",
            enable_reset=False,
        )


def get_config_path() -> Path:
    """Get the path to the config file."""
    return Path.home() / ".config" / "bankbook.toml"


def load_config(config_path: Optional[Path] = None) -> Config:
    """Load configuration from file, creating default if it doesn't exist.

    Args:
        config_path: Optional override of the config file location.

    Returns:
        Config object with loaded or default values.
    """
    config_path = config_path or get_config_path()

    if not config_path.exists():
        config = Config.default()
        _write_config(config, config_path)
        return config

    with open(config_path, "rb") as f:
        data = tomllib.load(f)

    defaults = Config.default()
    base_dir = Path(data.get("base_dir", defaults.base_dir))

    storage_config = data.get("storage", {})
    store_path = Path(storage_config.get("path", defaults.store_path))
    strict_load = storage_config.get("strict", defaults.strict_load)

    display_config = data.get("display", {})
    currency_symbol = display_config.get("currency_symbol", defaults.currency_symbol)

    log_config = data.get("logging", {})
    log_level = log_config.get("level", defaults.log_level)
    log_dir = Path(log_config.get("log_dir", base_dir / "logs"))

    return Config(
        base_dir=base_dir,
        store_path=store_path,
        strict_load=strict_load,
        currency_symbol=currency_symbol,
        log_level=log_level,
        log_dir=log_dir,
        enable_reset=data.get("enable_reset", defaults.enable_reset),
    )


def _write_config(config: Config, config_path: Path) -> None:
    """Write config to the config file.

    Args:
        config: Config object to write.
        config_path: Destination path.
    """
    config_path.parent.mkdir(parents=True, exist_ok=True)

    data = {
        "base_dir": str(config.base_dir),
        "enable_reset": config.enable_reset,
        "storage": {
            "path": str(config.store_path),
            "strict": config.strict_load,
        },
        "display": {
            "currency_symbol": config.currency_symbol,
        },
        "logging": {
            "level": config.log_level,
            "log_dir": str(config.log_dir),
        },
    }

    with open(config_path, "wb") as f:
        tomli_w.dump(data, f)
