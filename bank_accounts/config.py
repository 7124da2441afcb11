"""Configuration management for bank-accounts."""

from dataclasses import dataclass, field

from bank_accounts.exceptions import ConfigurationError

LOG_FORMATS = ("standard", "json")


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "WARNING"
    format_type: str = "standard"


@dataclass
class BankAccountsConfig:
    """Main configuration for bank-accounts."""

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    seed: int | None = None
    locale: str = "en_US"

    @classmethod
    def from_env(cls) -> "BankAccountsConfig":
        """Create config from environment variables."""
        import os

        format_type = os.getenv("LOG_FORMAT", "standard").lower()
        if format_type not in LOG_FORMATS:
            raise ConfigurationError(
                f"LOG_FORMAT must be one of {', '.join(LOG_FORMATS)}, got {format_type!r}"
            )

        logging_config = LoggingConfig(
            level=os.getenv("LOG_LEVEL", "WARNING"),
            format_type=format_type,
        )

        seed_str = os.getenv("SEED")
        try:
            seed = int(seed_str) if seed_str else None
        except ValueError as e:
            raise ConfigurationError(f"SEED must be an integer, got {seed_str!r}") from e

        return cls(
            logging=logging_config,
            seed=seed,
            locale=os.getenv("FAKER_LOCALE", "en_US"),
        )
