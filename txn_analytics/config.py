"""Configuration management for txn-analytics."""

from dataclasses import dataclass, field
from pathlib import Path

from txn_analytics.exceptions import ConfigurationError
from txn_analytics.logging import LOG_FORMATS


@dataclass
class InputConfig:
    """Transaction source configuration."""

    transactions_file: Path = field(default_factory=lambda: Path("data/transactions.json"))


@dataclass
class OutputConfig:
    """Output configuration."""

    json_output_dir: Path = field(default_factory=lambda: Path("results"))
    pretty_json: bool = False


@dataclass
class QueryConfig:
    """Arguments for the name-parameterised queries."""

    sender_full_name: str = "Tom Shelby"
    client_full_name: str = "Billy Kimber"


@dataclass
class AnalyticsConfig:
    """Main configuration for txn-analytics."""

    input: InputConfig = field(default_factory=InputConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    queries: QueryConfig = field(default_factory=QueryConfig)
    log_level: str = "INFO"
    log_format: str = "standard"

    def __post_init__(self) -> None:
        if self.log_format not in LOG_FORMATS:
            raise ConfigurationError(
                f"Unknown log format {self.log_format!r}, expected one of {LOG_FORMATS}"
            )

    @classmethod
    def from_env(cls) -> "AnalyticsConfig":
        """Create config from environment variables."""
        import os

        defaults = QueryConfig()

        return cls(
            input=InputConfig(
                transactions_file=Path(os.getenv("TRANSACTIONS_FILE", "data/transactions.json")),
            ),
            output=OutputConfig(
                json_output_dir=Path(os.getenv("OUTPUT_DIR", "results")),
                pretty_json=os.getenv("PRETTY_JSON", "false").lower() == "true",
            ),
            queries=QueryConfig(
                sender_full_name=os.getenv("SENDER_FULL_NAME", defaults.sender_full_name),
                client_full_name=os.getenv("CLIENT_FULL_NAME", defaults.client_full_name),
            ),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
        )
