"""
Command-line interface for steamacf.

Sub-commands:
  json FILE            convert a .acf/.vdf document to JSON
  get FILE KEY...      print the value at a key path
  list [APP...]        list installed Steam apps from registry.vdf
"""

import argparse
import io
import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Optional, TextIO

from . import __version__
from .core.emitter import pipe_to_json, write_value_json
from .core.navigator import Navigator
from .core.tokenizer import Tokenizer
from .security.exceptions import AcfError, ParseError, PathNotFound, StreamError
from .steam.paths import registry_path, steam_dir
from .steam.registry import AppNotFound, load_registry
from .utils.config import ReaderConfig, WriterConfig

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FORMAT_ERROR = 1
EXIT_USAGE = 2
EXIT_PATH_NOT_FOUND = 3
EXIT_IO_ERROR = 4


def _writer_config(args: argparse.Namespace) -> WriterConfig:
    if args.compact:
        return WriterConfig.minified()
    return WriterConfig.pretty(args.indent)


@contextmanager
def _text_out(stdout: TextIO, encoding: str) -> Iterator[TextIO]:
    """Write through the binary side of stdout so literals keep their bytes."""
    buffer = getattr(stdout, "buffer", None)
    if buffer is None:
        yield stdout
        return

    stdout.flush()
    out = io.TextIOWrapper(buffer, encoding=encoding, write_through=True)
    try:
        yield out
    finally:
        out.flush()
        out.detach()


def cmd_json(args: argparse.Namespace, stdout: TextIO) -> int:
    config = ReaderConfig()
    with open(args.file, "rb") as stream, _text_out(stdout, config.encoding) as out:
        pipe_to_json(Tokenizer(stream, config), out, _writer_config(args))
        out.write("\n")
    return EXIT_OK


def cmd_get(args: argparse.Namespace, stdout: TextIO) -> int:
    config = ReaderConfig()
    with open(args.file, "rb") as stream, _text_out(stdout, config.encoding) as out:
        navigator = Navigator(Tokenizer(stream, config))
        navigator.select_path(args.keys)
        write_value_json(navigator, out, _writer_config(args))
        out.write("\n")
    return EXIT_OK


def cmd_list(args: argparse.Namespace, stdout: TextIO) -> int:
    config = ReaderConfig()
    path = registry_path(steam_dir(args.steam_dir))
    registry = load_registry(path, config)

    apps = dict(registry)
    if args.apps:
        selected = {}
        for app in args.apps:
            app_id = registry.resolve(app)
            if app_id is None:
                raise AppNotFound(app)
            selected[app_id] = registry[app_id]
        apps = selected
    if args.match:
        matched = dict(registry.find(args.match))
        apps = {app_id: name for app_id, name in apps.items() if app_id in matched}

    with _text_out(stdout, config.encoding) as out:
        for app_id in sorted(apps, key=_app_sort_key):
            name = apps[app_id]
            out.write(f"{app_id}\t{name if name is not None else '-'}\n")
    return EXIT_OK


def _app_sort_key(app_id: str) -> tuple[int, str]:
    """Numeric ids in numeric order, anything else after them."""
    if app_id.isdigit():
        return (int(app_id), "")
    return (sys.maxsize, app_id)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="steamacf",
        description="Read Steam .acf/.vdf key-value files",
    )
    parser.add_argument("--version", action="version", version=__version__)
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    format_args = argparse.ArgumentParser(add_help=False)
    format_args.add_argument(
        "-c",
        "--compact",
        action="store_true",
        help="compact instead of pretty-printed output",
    )
    format_args.add_argument(
        "-i",
        "--indent",
        type=int,
        default=2,
        help="spaces per indentation step (default: 2)",
    )

    json_parser = subparsers.add_parser(
        "json", parents=[format_args], help="convert a document to JSON"
    )
    json_parser.add_argument("file", help="path to the .acf/.vdf file")
    json_parser.set_defaults(func=cmd_json)

    get_parser = subparsers.add_parser(
        "get", parents=[format_args], help="print the value at a key path"
    )
    get_parser.add_argument("file", help="path to the .acf/.vdf file")
    get_parser.add_argument("keys", nargs="+", help="keys from the root down")
    get_parser.set_defaults(func=cmd_get)

    list_parser = subparsers.add_parser("list", help="list Steam apps")
    list_parser.add_argument(
        "apps", nargs="*", metavar="APP", help="app ids or names to show (default: all)"
    )
    list_parser.add_argument(
        "-s", "--steam-dir", help="Steam directory (default: $STEAM_DIR or ~/.steam)"
    )
    list_parser.add_argument(
        "-m", "--match", help="case-insensitive regular expression on app names"
    )
    list_parser.set_defaults(func=cmd_list)

    return parser


def _report(error: Exception, stderr: TextIO) -> None:
    kind = error.kind if isinstance(error, AcfError) else type(error).__name__
    print(f"steamacf: {kind}: {error}", file=stderr)


def main(
    argv: Optional[list[str]] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> int:
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=stderr,
    )

    if getattr(args, "indent", 0) < 0:
        parser.error("--indent must not be negative")

    try:
        return args.func(args, stdout)
    except (PathNotFound, AppNotFound) as e:
        _report(e, stderr)
        return EXIT_PATH_NOT_FOUND
    except (ParseError, StreamError) as e:
        _report(e, stderr)
        return EXIT_FORMAT_ERROR
    except AcfError as e:
        _report(e, stderr)
        return EXIT_USAGE
    except OSError as e:
        _report(e, stderr)
        return EXIT_IO_ERROR
