"""Builders that assemble immutable BaseStation message entities.

Each builder takes the fields a message cannot exist without in its
constructor; optional fields are supplied through chained setters and
``build()`` returns a frozen snapshot. The builders do no value validation
of their own; pydantic checks the field types when the entity is created.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Generic, TypeVar

from feedprocessor.domain.message_types import StatusMessageType, TransmissionType
from feedprocessor.models.geo import GeoPosition
from feedprocessor.models.messages import (
    BaseStationMessage,
    IdMessage,
    NewAircraftMessage,
    StatusMessage,
    TransmissionMessage,
)

MessageT = TypeVar("MessageT", bound=BaseStationMessage)


class _MessageBuilder(Generic[MessageT]):
    message_class: type[MessageT]

    def __init__(
        self,
        icao_address: str,
        creation_timestamp: datetime,
        reception_timestamp: datetime,
    ) -> None:
        self._fields: dict[str, Any] = {
            "icao_address": icao_address,
            "creation_timestamp": creation_timestamp,
            "reception_timestamp": reception_timestamp,
        }

    def _set(self, name: str, value: Any):
        self._fields[name] = value
        return self

    def build(self) -> MessageT:
        return self.message_class(**self._fields)


class NewAircraftMessageBuilder(_MessageBuilder[NewAircraftMessage]):
    message_class = NewAircraftMessage


class IdMessageBuilder(_MessageBuilder[IdMessage]):
    message_class = IdMessage

    def call_sign(self, value: str | None) -> "IdMessageBuilder":
        return self._set("call_sign", value)


class TransmissionMessageBuilder(_MessageBuilder[TransmissionMessage]):
    message_class = TransmissionMessage

    def __init__(
        self,
        icao_address: str,
        creation_timestamp: datetime,
        reception_timestamp: datetime,
        transmission_type: TransmissionType,
    ) -> None:
        super().__init__(icao_address, creation_timestamp, reception_timestamp)
        self._fields["transmission_type"] = transmission_type

    def call_sign(self, value: str | None) -> "TransmissionMessageBuilder":
        return self._set("call_sign", value)

    def altitude(self, value: float | None) -> "TransmissionMessageBuilder":
        return self._set("altitude", value)

    def ground_speed(self, value: float | None) -> "TransmissionMessageBuilder":
        return self._set("ground_speed", value)

    def track(self, value: float | None) -> "TransmissionMessageBuilder":
        return self._set("track", value)

    def position(self, value: GeoPosition | None) -> "TransmissionMessageBuilder":
        return self._set("position", value)

    def vertical_rate(self, value: int | None) -> "TransmissionMessageBuilder":
        return self._set("vertical_rate", value)

    def squawk(self, value: int | None) -> "TransmissionMessageBuilder":
        return self._set("squawk", value)

    def alert(self, value: bool | None) -> "TransmissionMessageBuilder":
        return self._set("alert", value)

    def emergency(self, value: bool | None) -> "TransmissionMessageBuilder":
        return self._set("emergency", value)

    def ident_active(self, value: bool | None) -> "TransmissionMessageBuilder":
        return self._set("ident_active", value)

    def on_ground(self, value: bool | None) -> "TransmissionMessageBuilder":
        return self._set("on_ground", value)


class StatusMessageBuilder(_MessageBuilder[StatusMessage]):
    message_class = StatusMessage

    def __init__(
        self,
        icao_address: str,
        creation_timestamp: datetime,
        reception_timestamp: datetime,
        status_message_type: StatusMessageType,
    ) -> None:
        super().__init__(icao_address, creation_timestamp, reception_timestamp)
        self._fields["status_message_type"] = status_message_type


__all__ = [
    "IdMessageBuilder",
    "NewAircraftMessageBuilder",
    "StatusMessageBuilder",
    "TransmissionMessageBuilder",
]
