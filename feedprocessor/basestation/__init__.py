"""BaseStation (SBS-1) line protocol decoding."""

from .decoder import decode_message
from .errors import MessageFormatError

__all__ = ["MessageFormatError", "decode_message"]
