"""Configuration management for coop-core."""

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Any

from coop_core.exceptions import ConfigurationError


@dataclass
class KafkaConfig:
    """Kafka producer configuration for the transaction event stream."""

    bootstrap_servers: str = "localhost:9092"
    acks: str = "all"
    batch_size: int = 16384
    linger_ms: int = 5
    compression: str = "snappy"
    retries: int = 3
    topic: str = "coop.transactions"

    def to_dict(self) -> dict[str, Any]:
        """Convert to confluent-kafka config dict."""
        return {
            "bootstrap.servers": self.bootstrap_servers,
            "acks": self.acks,
            "batch.size": self.batch_size,
            "linger.ms": self.linger_ms,
            "compression.type": self.compression,
            "retries": self.retries,
        }


@dataclass
class ReportConfig:
    """Report rendering configuration."""

    balance_threshold: Decimal = Decimal("500000")
    pretty: bool = True
    max_records: int | None = None


@dataclass
class SeedConfig:
    """Sample data seeding configuration."""

    num_members: int = 0
    accounts_per_member: tuple[int, int] = (1, 2)
    locale: str = "es_CO"
    include_demo_members: bool = True


@dataclass
class CoopConfig:
    """Main configuration for coop-core."""

    name: str = "Cooperativa Demo"
    tax_id: str = "900123456-7"
    kafka: KafkaConfig = field(default_factory=KafkaConfig)
    report: ReportConfig = field(default_factory=ReportConfig)
    seed_data: SeedConfig = field(default_factory=SeedConfig)
    seed: int | None = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "CoopConfig":
        """Create config from environment variables."""
        import os

        kafka = KafkaConfig(
            bootstrap_servers=os.getenv("KAFKA_BOOTSTRAP_SERVERS", "localhost:9092"),
            acks=os.getenv("KAFKA_ACKS", "all"),
            topic=os.getenv("KAFKA_TOPIC", "coop.transactions"),
        )

        report = ReportConfig(
            balance_threshold=_env_decimal("REPORT_THRESHOLD", "500000"),
        )

        seed_data = SeedConfig(
            num_members=_env_int("SEED_MEMBERS", "0"),
            locale=os.getenv("FAKER_LOCALE", "es_CO"),
        )

        return cls(
            name=os.getenv("COOP_NAME", "Cooperativa Demo"),
            tax_id=os.getenv("COOP_TAX_ID", "900123456-7"),
            kafka=kafka,
            report=report,
            seed_data=seed_data,
            seed=_env_int("SEED", "") if os.getenv("SEED") else None,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )


def _env_int(name: str, default: str) -> int:
    import os

    raw = os.getenv(name, default)
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from exc


def _env_decimal(name: str, default: str) -> Decimal:
    import os

    raw = os.getenv(name, default)
    try:
        value = Decimal(raw)
    except InvalidOperation as exc:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}") from exc
    if not value.is_finite():
        raise ConfigurationError(f"{name} must be a finite number, got {raw!r}")
    return value
