"""Output sinks for reports and transaction events."""

from coop_core.sinks.console import ConsoleSink
from coop_core.sinks.kafka import KafkaSink

__all__ = ["ConsoleSink", "KafkaSink"]
