"""Kafka sink for streaming executed transactions as events."""

import json
import logging
import uuid
from dataclasses import dataclass
from typing import Any

from confluent_kafka import KafkaException, Producer

from coop_core.config import KafkaConfig
from coop_core.exceptions import SinkError
from coop_core.models import Event, TransactionRecord
from coop_core.sinks.serialization import to_dict

logger = logging.getLogger(__name__)

EVENT_SOURCE = "coop-core"


@dataclass
class ProducerStats:
    """Track producer delivery statistics."""

    sent: int = 0
    delivered: int = 0
    failed: int = 0

    @property
    def success_rate(self) -> float:
        """Calculate success rate."""
        total = self.delivered + self.failed
        return self.delivered / total if total > 0 else 0.0


class KafkaSink:
    """Publish records to Kafka topics as JSON."""

    # Record field used as message key, so one account's events stay ordered
    KEY_FIELD = "account_number"

    def __init__(self, config: KafkaConfig | str) -> None:
        """Initialize Kafka sink.

        Parameters
        ----------
        config : KafkaConfig | str
            Producer configuration or bootstrap servers string.
        """
        if isinstance(config, str):
            config = KafkaConfig(bootstrap_servers=config)

        self.config = config
        self.producer = Producer(config.to_dict())
        self.stats = ProducerStats()

    def _delivery_callback(self, err: Any, msg: Any) -> None:
        """Handle delivery reports."""
        if err:
            self.stats.failed += 1
            logger.error("Delivery failed: %s", err)
        else:
            self.stats.delivered += 1
            logger.debug("Delivered to %s[%d]@%d", msg.topic(), msg.partition(), msg.offset())

    def _get_key(self, record: Any) -> str | None:
        """Extract the message key from a record, if it has one."""
        if isinstance(record, dict):
            return record.get(self.KEY_FIELD)
        return getattr(record, self.KEY_FIELD, None)

    def send(self, topic: str, record: Any, key: str | None = None) -> None:
        """Send a single record to a Kafka topic."""
        value = json.dumps(to_dict(record), ensure_ascii=False, default=str).encode("utf-8")

        if key is None:
            key = self._get_key(record)

        try:
            self.producer.produce(
                topic=topic,
                key=key.encode("utf-8") if key else None,
                value=value,
                callback=self._delivery_callback,
            )
        except (BufferError, KafkaException) as exc:
            raise SinkError(f"Failed to produce to {topic}: {exc}") from exc

        self.stats.sent += 1
        self.producer.poll(0)

    def send_transaction(self, record: TransactionRecord, topic: str | None = None) -> Event:
        """Publish an executed transaction wrapped in an event envelope.

        Returns
        -------
        Event
            The envelope that was sent.
        """
        event = Event(
            event_id=uuid.uuid4().hex,
            event_type=f"transaction.{record.transaction_type.value.lower()}",
            event_time=record.executed_at,
            source=EVENT_SOURCE,
            subject=record.account_number,
            data=to_dict(record),
        )
        self.send(topic or self.config.topic, event, key=record.account_number)
        return event

    def write_batch(self, topic: str, records: list[Any]) -> None:
        """Write a batch of records to a Kafka topic."""
        logger.info("Writing batch to %s: %d records", topic, len(records))

        for record in records:
            self.send(topic, record)

        self.flush()
        logger.info("Batch complete: sent=%d, delivered=%d, failed=%d",
                    self.stats.sent, self.stats.delivered, self.stats.failed)

    def flush(self, timeout: float = 30.0) -> None:
        """Flush pending messages."""
        self.producer.flush(timeout)

    def close(self) -> None:
        """Flush and close the producer."""
        self.flush()
        logger.info(
            "Kafka sink closed: sent=%d, delivered=%d, failed=%d",
            self.stats.sent,
            self.stats.delivered,
            self.stats.failed,
        )
