"""Pydantic models for decoded BaseStation messages."""

from .geo import WGS84, CoordinateReferenceSystem, GeoPosition
from .messages import (
    AnyBaseStationMessage,
    BaseStationMessage,
    IdMessage,
    NewAircraftMessage,
    StatusMessage,
    TransmissionMessage,
)

__all__ = [
    "AnyBaseStationMessage",
    "BaseStationMessage",
    "CoordinateReferenceSystem",
    "GeoPosition",
    "IdMessage",
    "NewAircraftMessage",
    "StatusMessage",
    "TransmissionMessage",
    "WGS84",
]
