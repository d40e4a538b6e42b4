"""dungeonweave CLI entry point.

Provides subcommands for generating a dungeon layout on the terminal and for
running the JSON API server. Accepts configuration via flags and environment
variables, with optional .env loading.

Run `python run.py --help` for details.
"""

import argparse
import json
import os
import sys
from textwrap import dedent

from colorama import Fore, Style
from colorama import init as _color_init
from dotenv import load_dotenv

_color_init()
# Disable colors if output is not a real terminal (e.g., during pytest capture)
try:
    _COLOR_ENABLED = sys.stdout.isatty()
except (AttributeError, ValueError):  # pragma: no cover - detached stdout
    _COLOR_ENABLED = False


def _load_version() -> str:
    path = os.path.join(os.path.dirname(os.path.abspath(__file__)), "VERSION")
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read().strip()
    except OSError:
        return "0.1.0"


__version__ = _load_version()


def parse_args(argv: list[str]) -> argparse.Namespace:
    description = """
    dungeonweave - procedural dungeon layouts

    Generate room-and-corridor dungeons blended with organic noise terrain, either
    straight to the terminal or through the JSON API server. Configuration can be
    provided via CLI flags or DUNGEON_* environment variables. If both are present,
    CLI flags take precedence.
    """

    epilog = dedent(
        """
        Environment variables:
          HOST            Bind address for the API server (default: 0.0.0.0)
          PORT            Port for the API server (default: 5000)
          DUNGEON_WIDTH / DUNGEON_HEIGHT / DUNGEON_SEED / DUNGEON_ORGANIC
                          Generation defaults

        Examples:
          # Print a medium dungeon with a fixed seed
          python run.py generate --preset medium --seed 1234

          # Structured rooms only, as JSON
          python run.py generate --no-organic --json --out layout.json

          # Run the API server on a custom port
          python run.py server --port 8080
        """
    )

    parser = argparse.ArgumentParser(
        prog="dungeonweave",
        description=dedent(description),
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )

    parser.add_argument(
        "--env-file",
        dest="env_file",
        help="Path to a .env file to load before processing flags",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"dungeonweave {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command")

    # generate subcommand
    gen_parser = subparsers.add_parser(
        "generate",
        help="Generate a dungeon and print it",
        formatter_class=argparse.RawTextHelpFormatter,
        description="Generate one dungeon layout and print it as ASCII or JSON",
    )
    gen_parser.add_argument("--preset", choices=["small", "medium", "large"], default=None, help="Level size preset")
    gen_parser.add_argument("--seed", type=int, default=None, help="Fixed seed (default: random)")
    gen_parser.add_argument("--width", type=int, default=None, help="Level width in cells")
    gen_parser.add_argument("--height", type=int, default=None, help="Level height in cells")
    gen_parser.add_argument("--min-rooms", dest="min_rooms", type=int, default=None)
    gen_parser.add_argument("--max-rooms", dest="max_rooms", type=int, default=None)
    gen_parser.add_argument(
        "--no-organic",
        dest="organic",
        action="store_false",
        default=None,
        help="Disable the noise / random-walk blending pass",
    )
    gen_parser.add_argument("--json", dest="as_json", action="store_true", help="Emit the layout as JSON")
    gen_parser.add_argument("--out", default=None, help="Write output to this file instead of stdout")
    gen_parser.set_defaults(command="generate")

    # server subcommand
    server_parser = subparsers.add_parser(
        "server",
        help="Run the JSON API server",
        formatter_class=argparse.RawTextHelpFormatter,
        description="Run the Flask development server exposing /api/dungeon/*",
    )
    server_parser.add_argument(
        "--host",
        default=None,
        help="Host interface to bind (default: env HOST or 0.0.0.0)",
    )
    server_parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to listen on (default: env PORT or 5000)",
    )
    server_parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable Flask debug mode with verbose error pages",
    )
    server_parser.set_defaults(command="server")

    # If no subcommand provided, default to generate
    if len(argv) == 0:
        argv = ["generate"]

    return parser.parse_args(argv)


def build_config(args: argparse.Namespace):
    from dungeonweave.dungeon import DungeonConfig

    overrides = {}
    if args.seed is not None:
        overrides["seed"] = args.seed
        overrides["use_random_seed"] = False
    if args.width is not None:
        overrides["level_width"] = args.width
    if args.height is not None:
        overrides["level_height"] = args.height
    if args.min_rooms is not None:
        overrides["min_rooms"] = args.min_rooms
    if args.max_rooms is not None:
        overrides["max_rooms"] = args.max_rooms
    if args.organic is not None:
        overrides["use_organic_generation"] = args.organic
    if args.preset:
        return DungeonConfig.preset(args.preset, **overrides)
    return DungeonConfig.from_env().copy(**overrides)


def colorize(ascii_map: str) -> str:
    if not _COLOR_ENABLED:
        return ascii_map
    palette = {
        "#": Fore.WHITE + Style.DIM,
        ".": Fore.GREEN,
        ",": Fore.YELLOW,
    }
    out = []
    for ch in ascii_map:
        color = palette.get(ch)
        out.append(f"{color}{ch}{Style.RESET_ALL}" if color else ch)
    return "".join(out)


def run_generate(args: argparse.Namespace) -> int:
    from dungeonweave.dungeon import ConfigError, GenerationExhausted, generate

    try:
        cfg = build_config(args).validate()
        layout = generate(cfg)
    except ConfigError as exc:
        print(f"[ERROR] Invalid configuration: {exc}", file=sys.stderr)
        return 2
    except GenerationExhausted as exc:
        print(f"[ERROR] {exc}", file=sys.stderr)
        return 1

    if args.as_json:
        text = json.dumps(layout.to_dict(), indent=2)
    else:
        header = f"seed={layout.seed} rooms={len(layout.rooms)} corridors={len(layout.corridors)} attempts={layout.attempts}"
        text = header + "\n" + layout.to_ascii()
    if args.out:
        with open(args.out, "w", encoding="utf-8") as f:
            f.write(text + "\n")
        print(f"[INFO] Wrote layout to {args.out}")
    else:
        print(text if args.as_json else colorize(text))
    return 0


def main(argv: list[str]) -> int:
    args = parse_args(argv)
    # Load .env if requested, else the default .env if present (no error if missing)
    if getattr(args, "env_file", None):
        load_dotenv(args.env_file)
    else:
        load_dotenv()

    mode = (getattr(args, "command", None) or "generate").lower()
    if mode == "generate":
        return run_generate(args)

    host = getattr(args, "host", None) or os.getenv("HOST", "0.0.0.0")
    port = int(getattr(args, "port", None) or os.getenv("PORT", "5000"))

    def label(text: str) -> str:
        return f"{Fore.YELLOW}{text}{Style.RESET_ALL}" if _COLOR_ENABLED else text

    def value(val) -> str:
        return f"{Fore.GREEN}{val}{Style.RESET_ALL}" if _COLOR_ENABLED else str(val)

    divider = (Fore.MAGENTA + "=" * 40 + Style.RESET_ALL) if _COLOR_ENABLED else "=" * 40
    print(
        "\n".join(
            [
                divider,
                "  dungeonweave API server",
                divider,
                f"  {label('Host:'):12} {value(host)}",
                f"  {label('Port:'):12} {value(port)}",
                f"  {label('Version:'):12} {value(__version__)}",
                divider,
                "",
            ]
        )
    )
    from dungeonweave.logging_utils import log

    log.info(event="startup", mode=mode, host=host, port=port)

    # Import server entrypoint only after environment is ready
    from dungeonweave.server import start_server

    start_server(host=host, port=port, debug=bool(getattr(args, "debug", False)))
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
