"""Decode BaseStation (SBS-1) CSV lines into message entities.

Every line shares a fixed layout for its leading tokens::

    0 message type      4 ICAO address      6,7 creation date, time
    1 transmission type                     8,9 reception date, time

Tokens from index 10 onwards depend on the message type and, for ``MSG``
lines, on the transmission type.

Malformed input is handled in three tiers. A line whose shared fields are
corrupt (too few tokens, missing or unparsable timestamps) raises
``MessageFormatError``. A well-formed line carrying a type the decoder does not
expect is logged as an error and skipped by returning ``None``. A malformed
optional value only leaves that field unset on the returned message.
"""

from __future__ import annotations

import logging
from typing import Sequence

from feedprocessor.basestation.builders import (
    IdMessageBuilder,
    NewAircraftMessageBuilder,
    StatusMessageBuilder,
    TransmissionMessageBuilder,
)
from feedprocessor.basestation.errors import MessageFormatError
from feedprocessor.basestation.tokens import (
    parse_timestamp,
    token_as_boolean,
    token_as_float,
    token_as_short,
    token_as_text,
    tokens_as_position,
)
from feedprocessor.domain.message_types import (
    MessageType,
    StatusMessageType,
    TransmissionType,
)
from feedprocessor.domain.policy import MessageTypePolicy, default_policy
from feedprocessor.models.messages import BaseStationMessage, TransmissionMessage

logger = logging.getLogger("feedprocessor.basestation.decoder")


def split_tokens(line: str) -> list[str]:
    """Split a feed line on commas, trimming whitespace around each token."""

    cleaned = line.strip()
    if not cleaned:
        return []
    return [token.strip() for token in cleaned.split(",")]


def classify_message_type(
    token: str,
    policy: MessageTypePolicy,
    log: logging.Logger = logger,
) -> MessageType | None:
    """Resolve the leading token, or log and return ``None`` if unexpected."""

    try:
        message_type = MessageType(token)
    except ValueError:
        log.error("Unexpected message type: '%s'", token)
        return None

    if not policy.is_expected_message_type(message_type):
        log.error("Unexpected message type: '%s'", message_type.value)
        return None

    return message_type


def classify_status_message_type(
    token: str,
    policy: MessageTypePolicy,
    log: logging.Logger = logger,
) -> StatusMessageType | None:
    """Resolve a ``STA`` subtype token, or log and return ``None``."""

    try:
        status_message_type = StatusMessageType(token)
    except ValueError:
        log.error("Unexpected status message type: '%s'", token)
        return None

    if not policy.is_expected_status_message_type(status_message_type):
        log.error("Unexpected status message type: '%s'", status_message_type.value)
        return None

    return status_message_type


def classify_transmission_type(
    token: str, log: logging.Logger = logger
) -> TransmissionType | None:
    """Resolve a ``MSG`` subtype token; log and return ``None`` unless 1-8."""

    value = token_as_short(token)
    if value is None:
        log.error("Unable to parse transmission type: '%s'", token)
        return None

    try:
        return TransmissionType(value)
    except ValueError:
        log.error("Unexpected transmission message type received: '%s'", value)
        return None


def check_token_count(tokens: Sequence[str], message_type: MessageType) -> None:
    """Raise ``MessageFormatError`` when a line is too short for its type."""

    required = message_type.token_count
    if len(tokens) < required:
        raise MessageFormatError(
            f"Expected {required} tokens but found {len(tokens)}"
        )


def _assemble_transmission(
    builder: TransmissionMessageBuilder,
    transmission_type: TransmissionType,
    tokens: Sequence[str],
) -> TransmissionMessage:
    if transmission_type is TransmissionType.ES_IDENTIFICATION:
        builder.call_sign(token_as_text(tokens[10]))
    elif transmission_type is TransmissionType.ES_SURFACE_POSITION:
        (
            builder.altitude(token_as_float(tokens[11]))
            .ground_speed(token_as_float(tokens[12]))
            .track(token_as_float(tokens[13]))
            .position(tokens_as_position(tokens[15], tokens[14]))
            .on_ground(token_as_boolean(tokens[21]))
        )
    elif transmission_type is TransmissionType.ES_AIRBORNE_POSITION:
        (
            builder.altitude(token_as_float(tokens[11]))
            .position(tokens_as_position(tokens[15], tokens[14]))
            .alert(token_as_boolean(tokens[18]))
            .emergency(token_as_boolean(tokens[19]))
            .ident_active(token_as_boolean(tokens[20]))
            .on_ground(token_as_boolean(tokens[21]))
        )
    elif transmission_type is TransmissionType.ES_AIRBORNE_VELOCITY:
        (
            builder.ground_speed(token_as_float(tokens[12]))
            .track(token_as_float(tokens[13]))
            .vertical_rate(token_as_short(tokens[16]))
        )
    elif transmission_type is TransmissionType.SURVEILLANCE_ALTITUDE:
        (
            builder.altitude(token_as_float(tokens[11]))
            .alert(token_as_boolean(tokens[18]))
            .ident_active(token_as_boolean(tokens[20]))
            .on_ground(token_as_boolean(tokens[21]))
        )
    elif transmission_type is TransmissionType.SURVEILLANCE_IDENTIFICATION:
        (
            builder.altitude(token_as_float(tokens[11]))
            .squawk(token_as_short(tokens[17]))
            .alert(token_as_boolean(tokens[18]))
            .emergency(token_as_boolean(tokens[19]))
            .ident_active(token_as_boolean(tokens[20]))
            .on_ground(token_as_boolean(tokens[21]))
        )
    elif transmission_type is TransmissionType.AIR_TO_AIR:
        (
            builder.altitude(token_as_float(tokens[11]))
            .on_ground(token_as_boolean(tokens[21]))
        )
    elif transmission_type is TransmissionType.ALL_CALL_REPLY:
        builder.on_ground(token_as_boolean(tokens[21]))

    return builder.build()


def assemble_message(
    tokens: Sequence[str],
    message_type: MessageType,
    policy: MessageTypePolicy,
    log: logging.Logger = logger,
) -> BaseStationMessage | None:
    """Build the entity for an already classified line.

    Raises ``MessageFormatError`` when the line is too short for its type or
    either timestamp is missing or unparsable.
    """

    check_token_count(tokens, message_type)

    icao_address = tokens[4]
    creation_timestamp = parse_timestamp(tokens[6], tokens[7])
    reception_timestamp = parse_timestamp(tokens[8], tokens[9])

    if message_type is MessageType.AIR:
        return NewAircraftMessageBuilder(
            icao_address, creation_timestamp, reception_timestamp
        ).build()

    if message_type is MessageType.ID:
        return (
            IdMessageBuilder(icao_address, creation_timestamp, reception_timestamp)
            .call_sign(token_as_text(tokens[10]))
            .build()
        )

    if message_type is MessageType.MSG:
        transmission_type = classify_transmission_type(tokens[1], log)
        if transmission_type is None:
            return None
        builder = TransmissionMessageBuilder(
            icao_address, creation_timestamp, reception_timestamp, transmission_type
        )
        return _assemble_transmission(builder, transmission_type, tokens)

    if message_type is MessageType.STA:
        status_message_type = classify_status_message_type(tokens[10], policy, log)
        if status_message_type is None:
            return None
        return StatusMessageBuilder(
            icao_address, creation_timestamp, reception_timestamp, status_message_type
        ).build()

    log.error("Unexpected message type received: '%s'", message_type.value)
    return None


def decode_message(
    line: str,
    policy: MessageTypePolicy | None = None,
    log: logging.Logger | None = None,
) -> BaseStationMessage | None:
    """Decode one feed line, returning ``None`` when the line is skipped.

    ``policy`` defaults to the allow-list configured in settings and ``log``
    to this module's logger.
    """

    policy = policy or default_policy()
    log = log or logger

    tokens = split_tokens(line)
    if not tokens:
        log.warning("Message token array has zero length")
        return None

    message_type = classify_message_type(tokens[0], policy, log)
    if message_type is None:
        return None

    return assemble_message(tokens, message_type, policy, log)


__all__ = [
    "assemble_message",
    "check_token_count",
    "classify_message_type",
    "classify_status_message_type",
    "classify_transmission_type",
    "decode_message",
    "split_tokens",
]
