"""
vtc Command Line
================

Entry point for the `vtc` command.

Commands:
    image-kitty   - Transmit and display an image, or query support
    notification  - Print an OSC 99 desktop notification

The CLI is only a configuration resolver: it turns raw arguments into the
validated option models and hands them to the encoders. Escape frames go to
stdout; logs and error messages go to stderr.

Exit Codes:
    0 - success
    1 - the image could not be prepared or the file could not be read
    2 - usage error, invalid option values or an unusable config file
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from vtc import __version__
from vtc.config import Settings, load_config, setup_logging
from vtc.errors import ConfigError, VtcError
from vtc.graphics import TransmissionPipeline, build_query
from vtc.models import (
    GraphicsAction,
    NotificationOptions,
    QueryOptions,
    TransmitOptions,
    WireFormat,
)
from vtc.notification import build_notification
from vtc.output import OutputSink


logger = logging.getLogger(__name__)


# =============================================================================
# Argument Parsing
# =============================================================================

def _global_options(default) -> argparse.ArgumentParser:
    """Options accepted both before and after the subcommand."""
    options = argparse.ArgumentParser(add_help=False)
    options.add_argument("--config", default=default, help="Path to a vtc.yaml config file")
    options.add_argument("--log-level", default=default, help="Override the log level")
    return options


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vtc",
        description="Terminal escape sequence encoders",
        parents=[_global_options(None)],
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    # SUPPRESS keeps a value given before the subcommand from being reset
    shared = _global_options(argparse.SUPPRESS)
    commands = parser.add_subparsers(dest="command")

    image = commands.add_parser(
        "image-kitty",
        parents=[shared],
        help="Display an image using the Kitty Graphics Protocol (APC sequences)",
    )
    image.set_defaults(command_parser=image)
    image.add_argument("file", nargs="?", help="Path to the image file")
    image.add_argument(
        "-a", "--action",
        choices=[action.value for action in GraphicsAction],
        default=None,
        help="Graphics action (default: transmit-display)",
    )
    image.add_argument(
        "-f", "--format",
        choices=[fmt.value for fmt in WireFormat],
        default=None,
        help="Image format (default: png)",
    )
    image.add_argument("-c", "--chunk-size", type=int, help="Max base64 characters per chunk (default: 4096)")
    image.add_argument("-W", "--width", type=int, help="Image width in pixels (required for raw rgb/rgba)")
    image.add_argument("-H", "--height", type=int, help="Image height in pixels (required for raw rgb/rgba)")
    image.add_argument("--columns", type=int, help="Display width in terminal columns")
    image.add_argument("--rows", type=int, help="Display height in terminal rows")
    image.add_argument("-i", "--image-id", type=int, help="Image ID")
    image.add_argument("-p", "--placement-id", type=int, help="Placement ID")
    image.add_argument(
        "-q", "--quiet",
        type=int,
        choices=[0, 1, 2],
        help="Quiet mode: 1=suppress OK, 2=suppress all",
    )
    image.add_argument("--no-move", action="store_true", help="Do not move cursor after displaying image")
    image.add_argument("--source-x", type=int, help="Source rectangle left edge in pixels")
    image.add_argument("--source-y", type=int, help="Source rectangle top edge in pixels")
    image.add_argument("--source-width", type=int, help="Source rectangle width in pixels")
    image.add_argument("--source-height", type=int, help="Source rectangle height in pixels")
    image.add_argument("--offset-x", type=int, help="Pixel offset within the first cell (X)")
    image.add_argument("--offset-y", type=int, help="Pixel offset within the first cell (Y)")

    note = commands.add_parser(
        "notification",
        parents=[shared],
        help="Print OSC 99 notification escape sequence",
    )
    note.set_defaults(command_parser=note)
    note.add_argument("message", nargs="*", help="Title and optional body text")
    note.add_argument("-a", "--actions", help="Actions on activation")
    note.add_argument("-c", "--close", type=int, choices=[0, 1], help="Report close events")
    note.add_argument("-d", "--complete", type=int, choices=[0, 1], help="Chunk completion flag")
    note.add_argument("-e", "--base64", type=int, choices=[0, 1], help="Payload is base64")
    note.add_argument("-f", "--app", help="Application name")
    note.add_argument("-g", "--icon-cache", help="Icon cache id")
    note.add_argument("-i", "--identifier", help="Notification id")
    note.add_argument("-n", "--icon-name", action="append", default=[], help="Icon name (repeatable)")
    note.add_argument("-o", "--occasion", help="Occasion")
    note.add_argument("-p", "--payload-type", help="Payload type")
    note.add_argument("-s", "--sound", help="Sound name")
    note.add_argument("-t", "--type", action="append", default=[], help="Notification type (repeatable)")
    note.add_argument("-u", "--urgency", type=int, choices=[0, 1, 2], help="Urgency")
    note.add_argument("-w", "--expire", type=int, help="Auto-expire ms")

    return parser


# =============================================================================
# Option Resolution
# =============================================================================

def resolve_transmit_options(args: argparse.Namespace, config: Settings) -> TransmitOptions:
    """Build validated TransmitOptions from parsed arguments and settings."""
    return TransmitOptions(
        format=args.format if args.format is not None else config.graphics.default_format,
        chunk_size=args.chunk_size if args.chunk_size is not None else config.graphics.chunk_size,
        width=args.width,
        height=args.height,
        columns=args.columns,
        rows=args.rows,
        image_id=args.image_id,
        placement_id=args.placement_id,
        quiet=args.quiet,
        no_move=args.no_move,
        source_x=args.source_x,
        source_y=args.source_y,
        source_width=args.source_width,
        source_height=args.source_height,
        offset_x=args.offset_x,
        offset_y=args.offset_y,
    )


def resolve_notification_options(args: argparse.Namespace) -> NotificationOptions:
    """Build validated NotificationOptions from parsed arguments."""
    return NotificationOptions(
        actions=args.actions,
        close=args.close,
        complete=args.complete,
        base64=args.base64,
        app=args.app,
        icon_cache=args.icon_cache,
        identifier=args.identifier,
        icon_names=args.icon_name,
        occasion=args.occasion,
        payload_type=args.payload_type,
        sound=args.sound,
        types=args.type,
        urgency=args.urgency,
        expire_ms=args.expire,
    )


# =============================================================================
# Commands
# =============================================================================

def run_image_kitty(
    args: argparse.Namespace,
    config: Settings,
    sink: OutputSink,
) -> int:
    if args.action == GraphicsAction.QUERY.value:
        options = QueryOptions(image_id=args.image_id, quiet=args.quiet)
        sink.write(build_query(
            options.image_id,
            options.quiet,
            default_image_id=config.graphics.query_image_id,
        ))
        return 0

    if not args.file:
        if args.action is None:
            args.command_parser.print_help()
            return 0
        args.command_parser.error("File argument is required for transmit-display action")

    options = resolve_transmit_options(args, config)
    data = Path(args.file).read_bytes()

    pipeline = TransmissionPipeline()
    written = pipeline.transmit(data, options, sink)
    logger.info(f"Transmitted {args.file} ({len(data)} bytes, {written} chars)")
    return 0


def run_notification(args: argparse.Namespace, sink: OutputSink) -> int:
    options = resolve_notification_options(args)
    sink.write_lines(build_notification(args.message, options))
    return 0


# =============================================================================
# Main Entry Point
# =============================================================================

def main(argv: Optional[List[str]] = None, sink: Optional[OutputSink] = None) -> int:
    """
    Run the CLI.

    Args:
        argv: Arguments without the program name (sys.argv[1:] when None)
        sink: Output boundary (stdout when None)

    Returns:
        Process exit code
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config, required=args.config is not None)
    except (ConfigError, ValidationError) as e:
        setup_logging(Settings())
        logger.error(f"Invalid configuration: {e}")
        return 2

    if args.log_level:
        config = config.model_copy(
            update={"logging": config.logging.model_copy(update={"level": args.log_level})}
        )
    setup_logging(config)

    sink = sink or OutputSink()

    if args.command is None:
        parser.print_help()
        return 0

    try:
        if args.command == "image-kitty":
            return run_image_kitty(args, config, sink)
        return run_notification(args, sink)
    except ValidationError as e:
        logger.error(f"Invalid options: {e}")
        return 2
    except (VtcError, OSError) as e:
        logger.error(f"{args.command} failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
