"""Domain enumerations and policy for the BaseStation feed."""

from .message_types import (
    TRANSMISSION_FIELDS,
    MessageType,
    StatusMessageType,
    TransmissionType,
)
from .policy import MessageTypePolicy, default_policy

__all__ = [
    "MessageType",
    "MessageTypePolicy",
    "StatusMessageType",
    "TRANSMISSION_FIELDS",
    "TransmissionType",
    "default_policy",
]
