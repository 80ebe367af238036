"""Immutable message entities decoded from the BaseStation feed."""

from __future__ import annotations

from typing import Literal, Optional, Union

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field, model_validator

from feedprocessor.domain.message_types import (
    TRANSMISSION_FIELDS,
    MessageType,
    StatusMessageType,
    TransmissionType,
)
from feedprocessor.models.geo import GeoPosition


class BaseStationMessage(BaseModel):
    """Fields shared by every message on the feed."""

    icao_address: str = Field(..., description="ICAO 24-bit address as hex")
    creation_timestamp: AwareDatetime = Field(
        ..., description="When the message was generated (UTC)"
    )
    reception_timestamp: AwareDatetime = Field(
        ..., description="When the message was logged by the receiver (UTC)"
    )

    model_config = ConfigDict(frozen=True, extra="forbid")


class NewAircraftMessage(BaseStationMessage):
    """An aircraft seen for the first time."""

    message_type: Literal[MessageType.AIR] = MessageType.AIR


class IdMessage(BaseStationMessage):
    """A call sign assigned to, or changed for, an aircraft."""

    message_type: Literal[MessageType.ID] = MessageType.ID
    call_sign: Optional[str] = Field(default=None, description="Aircraft call sign")


class TransmissionMessage(BaseStationMessage):
    """Data transmitted by an aircraft; populated fields depend on the type."""

    message_type: Literal[MessageType.MSG] = MessageType.MSG
    transmission_type: TransmissionType = Field(
        ..., description="Transmission subtype (1-8)"
    )
    call_sign: Optional[str] = Field(default=None, description="Aircraft call sign")
    altitude: Optional[float] = Field(
        default=None, description="Mode C altitude in feet"
    )
    ground_speed: Optional[float] = Field(
        default=None, description="Speed over ground in knots"
    )
    track: Optional[float] = Field(
        default=None, description="Track over ground in degrees"
    )
    position: Optional[GeoPosition] = Field(
        default=None, description="Aircraft position"
    )
    vertical_rate: Optional[int] = Field(
        default=None, description="Vertical rate in feet per minute"
    )
    squawk: Optional[int] = Field(
        default=None, description="Assigned Mode A squawk code"
    )
    alert: Optional[bool] = Field(default=None, description="Squawk has changed")
    emergency: Optional[bool] = Field(
        default=None, description="Emergency code has been set"
    )
    ident_active: Optional[bool] = Field(
        default=None, description="Transponder ident has been activated"
    )
    on_ground: Optional[bool] = Field(
        default=None, description="Ground squat switch is active"
    )

    @model_validator(mode="after")
    def check_field_layout(self) -> "TransmissionMessage":
        allowed = TRANSMISSION_FIELDS[self.transmission_type]
        unexpected = sorted(
            name
            for name in self.optional_field_names()
            if name not in allowed and getattr(self, name) is not None
        )
        if unexpected:
            raise ValueError(
                f"Fields {unexpected} are not carried by transmission type "
                f"{int(self.transmission_type)}"
            )
        return self

    @classmethod
    def optional_field_names(cls) -> tuple[str, ...]:
        return tuple(
            name
            for name in cls.model_fields
            if name not in BaseStationMessage.model_fields
            and name not in {"message_type", "transmission_type"}
        )

    def populated_fields(self) -> frozenset[str]:
        """Names of the optional fields that carry a value."""

        return frozenset(
            name for name in self.optional_field_names() if getattr(self, name) is not None
        )


class StatusMessage(BaseStationMessage):
    """A change in the status of an aircraft."""

    message_type: Literal[MessageType.STA] = MessageType.STA
    status_message_type: StatusMessageType = Field(
        ..., description="Kind of status change"
    )


AnyBaseStationMessage = Union[
    NewAircraftMessage, IdMessage, TransmissionMessage, StatusMessage
]

__all__ = [
    "AnyBaseStationMessage",
    "BaseStationMessage",
    "IdMessage",
    "NewAircraftMessage",
    "StatusMessage",
    "TransmissionMessage",
]
