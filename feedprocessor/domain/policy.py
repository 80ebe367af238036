"""Allow-list of the message types the decoder should turn into entities."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Iterable

from feedprocessor.config import settings
from feedprocessor.domain.message_types import MessageType, StatusMessageType


def _parse_names(raw: Iterable[str], enum_type: type) -> frozenset:
    members = set()
    for name in raw:
        cleaned = name.strip().upper()
        if not cleaned:
            continue
        try:
            members.add(enum_type(cleaned))
        except ValueError as exc:
            raise ValueError(
                f"Unknown {enum_type.__name__} in allow-list: {name!r}"
            ) from exc
    return frozenset(members)


@dataclass(frozen=True)
class MessageTypePolicy:
    """Which message and status types are expected on the feed."""

    message_types: frozenset[MessageType]
    status_message_types: frozenset[StatusMessageType]

    @classmethod
    def from_names(
        cls, message_types: Iterable[str], status_message_types: Iterable[str]
    ) -> "MessageTypePolicy":
        return cls(
            message_types=_parse_names(message_types, MessageType),
            status_message_types=_parse_names(status_message_types, StatusMessageType),
        )

    @classmethod
    def from_settings(cls) -> "MessageTypePolicy":
        return cls.from_names(
            settings.expected_message_types.split(","),
            settings.expected_status_types.split(","),
        )

    def is_expected_message_type(self, message_type: MessageType) -> bool:
        return message_type in self.message_types

    def is_expected_status_message_type(
        self, status_message_type: StatusMessageType
    ) -> bool:
        return status_message_type in self.status_message_types


@lru_cache(maxsize=1)
def default_policy() -> MessageTypePolicy:
    """Return the policy configured from settings, built once per process."""

    return MessageTypePolicy.from_settings()


__all__ = ["MessageTypePolicy", "default_policy"]
