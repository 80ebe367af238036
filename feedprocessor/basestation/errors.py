"""Errors raised while decoding BaseStation feed lines."""

from __future__ import annotations


class MessageFormatError(ValueError):
    """A feed line is structurally corrupt and cannot be decoded."""


__all__ = ["MessageFormatError"]
