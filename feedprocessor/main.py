"""Command line entry point: decode a captured BaseStation feed to JSON lines.

Usage examples:
    sbs-decode capture.sbs
    nc localhost 30003 | sbs-decode --stop-on-error
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import TextIO

from feedprocessor.basestation.errors import MessageFormatError
from feedprocessor.config import configure_logging
from feedprocessor.ingestors import BaseStationIngestor
from feedprocessor.models.messages import BaseStationMessage

logger = logging.getLogger("feedprocessor")


def _stream_line_source(stream: TextIO):
    async def source():
        # Blocking reads run in a worker thread
        while True:
            line = await asyncio.to_thread(stream.readline)
            if not line:
                break
            yield line

    return source


def _json_sink(out: TextIO):
    async def sink(message: BaseStationMessage) -> None:
        out.write(message.model_dump_json())
        out.write("\n")

    return sink


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Decode BaseStation (SBS-1) feed lines into JSON documents"
    )
    parser.add_argument(
        "path",
        nargs="?",
        default="-",
        help="File of feed lines to decode; '-' reads standard input",
    )
    parser.add_argument(
        "--stop-on-error",
        action="store_true",
        default=None,
        help="Stop at the first structurally malformed line",
    )
    parser.add_argument("--log-level", default=None, help="Override the log level")
    return parser


def main(argv: list[str] | None = None, out: TextIO | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)
    out = out or sys.stdout

    if args.path == "-":
        stream = sys.stdin
    else:
        try:
            stream = open(args.path, encoding="utf-8")
        except OSError as exc:
            parser.error(f"cannot read {args.path}: {exc.strerror}")
    try:
        ingestor = BaseStationIngestor(
            line_source=_stream_line_source(stream),
            sink=_json_sink(out),
            stop_on_error=args.stop_on_error,
        )
        asyncio.run(ingestor.run())
    except MessageFormatError:
        logger.error("Decoding stopped after %s lines", ingestor.stats.total)
        return 1
    finally:
        if stream is not sys.stdin:
            stream.close()

    return 0


def run() -> None:
    raise SystemExit(main())


if __name__ == "__main__":
    run()
