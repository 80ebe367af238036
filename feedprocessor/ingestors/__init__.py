"""Feed ingestors for the BaseStation feed processor."""

from .basestation import BaseStationIngestor, IngestStats, MessageSink

__all__ = ["BaseStationIngestor", "IngestStats", "MessageSink"]
