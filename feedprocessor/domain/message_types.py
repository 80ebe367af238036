"""Message type enumerations for the BaseStation socket protocol.

Based on information from
http://woodair.net/sbs/Article/Barebones42_Socket_Data.htm
"""

from __future__ import annotations

from enum import Enum, IntEnum


class MessageType(str, Enum):
    """Message types generated by BaseStation, keyed by their leading token."""

    SEL = "SEL"
    ID = "ID"
    AIR = "AIR"
    STA = "STA"
    CLK = "CLK"
    MSG = "MSG"

    @property
    def token_count(self) -> int:
        """Minimum number of comma-separated tokens a line of this type carries."""

        return _TOKEN_COUNTS[self]


_TOKEN_COUNTS: dict[MessageType, int] = {
    MessageType.SEL: 11,
    MessageType.ID: 11,
    MessageType.AIR: 10,
    MessageType.STA: 11,
    MessageType.CLK: 10,
    MessageType.MSG: 22,
}


class StatusMessageType(str, Enum):
    """Subtypes of a ``STA`` (status change) message."""

    PL = "PL"  # Position lost
    SL = "SL"  # Signal lost
    RM = "RM"  # Remove
    AD = "AD"  # Delete
    OK = "OK"  # OK/reset


class TransmissionType(IntEnum):
    """Subtypes of a ``MSG`` (transmission) message."""

    ES_IDENTIFICATION = 1
    ES_SURFACE_POSITION = 2
    ES_AIRBORNE_POSITION = 3
    ES_AIRBORNE_VELOCITY = 4
    SURVEILLANCE_ALTITUDE = 5
    SURVEILLANCE_IDENTIFICATION = 6
    AIR_TO_AIR = 7
    ALL_CALL_REPLY = 8


# Optional TransmissionMessage fields carried by each transmission type.
TRANSMISSION_FIELDS: dict[TransmissionType, frozenset[str]] = {
    TransmissionType.ES_IDENTIFICATION: frozenset({"call_sign"}),
    TransmissionType.ES_SURFACE_POSITION: frozenset(
        {"altitude", "ground_speed", "track", "position", "on_ground"}
    ),
    TransmissionType.ES_AIRBORNE_POSITION: frozenset(
        {"altitude", "position", "alert", "emergency", "ident_active", "on_ground"}
    ),
    TransmissionType.ES_AIRBORNE_VELOCITY: frozenset(
        {"ground_speed", "track", "vertical_rate"}
    ),
    TransmissionType.SURVEILLANCE_ALTITUDE: frozenset(
        {"altitude", "alert", "ident_active", "on_ground"}
    ),
    TransmissionType.SURVEILLANCE_IDENTIFICATION: frozenset(
        {"altitude", "squawk", "alert", "emergency", "ident_active", "on_ground"}
    ),
    TransmissionType.AIR_TO_AIR: frozenset({"altitude", "on_ground"}),
    TransmissionType.ALL_CALL_REPLY: frozenset({"on_ground"}),
}

__all__ = [
    "MessageType",
    "StatusMessageType",
    "TRANSMISSION_FIELDS",
    "TransmissionType",
]
