"""Configuration helpers for the outfit recommender service."""

from dataclasses import dataclass
from pathlib import Path
import os
from typing import Optional

DEFAULT_SERVICE_NAME = "outfit-recommender"
_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class StylistConfig:
    """Configuration values for the recommender service.

    Scoring constants (the 60 point threshold and the accessory cap) are not
    configurable; only the surrounding service behaviour is.
    """

    service_name: str = DEFAULT_SERVICE_NAME
    default_result_limit: int = 6
    max_result_limit: int = 10
    use_mock_garments: bool = True
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8080
    environment: Optional[str] = None

    def __post_init__(self) -> None:
        if self.max_result_limit < 1:
            raise ValueError("max_result_limit must be at least 1")
        if not 1 <= self.default_result_limit <= self.max_result_limit:
            raise ValueError(
                f"default_result_limit must be between 1 and {self.max_result_limit}, "
                f"got {self.default_result_limit}"
            )

    @classmethod
    def from_env(cls) -> "StylistConfig":
        """Build a config from environment variables or an environment YAML file.

        Environment specific YAML lives in ``config/environments/<env>.yaml`` by
        default and is overridden key by key with environment variables.
        """

        env_name = os.getenv("APP_ENV")
        config_path = os.getenv("APP_CONFIG_PATH")
        config_dir = Path(os.getenv("STYLIST_CONFIG_DIR", "config/environments"))
        yaml_config: dict = {}

        if config_path:
            path = Path(config_path)
        elif env_name:
            path = config_dir / f"{env_name}.yaml"
        else:
            path = None

        if path and path.exists():
            yaml_config = cls._load_yaml_config(path)

        def get_value(key: str, default: Optional[str] = None) -> Optional[str]:
            env_key = key.upper()
            return os.getenv(env_key, yaml_config.get(key, default))

        return cls(
            service_name=str(get_value("service_name", DEFAULT_SERVICE_NAME)),
            default_result_limit=int(get_value("default_result_limit", "6")),
            max_result_limit=int(get_value("max_result_limit", "10")),
            use_mock_garments=str(get_value("use_mock_garments", "true")).strip().lower() in _TRUTHY,
            log_level=str(get_value("log_level", "INFO")).upper(),
            host=str(get_value("host", "0.0.0.0")),
            port=int(get_value("port", "8080")),
            environment=env_name or yaml_config.get("environment"),
        )

    @staticmethod
    def _load_yaml_config(path: Path) -> dict:
        """Parse a minimal ``key: value`` config file without external dependencies."""

        config: dict[str, str] = {}
        for line in path.read_text().splitlines():
            stripped = line.strip()
            if not stripped or stripped.startswith("#"):
                continue
            if ":" not in stripped:
                continue
            key, raw_value = stripped.split(":", 1)
            value = raw_value.strip()
            if (value.startswith("\"") and value.endswith("\"")) or (
                value.startswith("'") and value.endswith("'")
            ):
                value = value[1:-1]
            config[key.strip()] = value
        return config
