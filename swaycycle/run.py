import argparse
import asyncio
import logging
import sys

from swaycycle import __version__
from swaycycle.cycle import cycle
from swaycycle.errors import SwayCycleError
from swaycycle.logs import setup_logging
from swaycycle.source import open_source

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="swaycycle",
        description="Cycle focus through all visible windows on a sway workspace.",
        epilog="Bind it to a key, e.g. bindsym $mod+Tab exec swaycycle",
    )
    parser.add_argument(
        "-n", "--no-switch", action="store_true", help="do not switch windows"
    )
    parser.add_argument(
        "-p", "--prev", action="store_true", help="cycle backward instead of forward"
    )
    parser.add_argument("-d", "--debug", action="store_true", help="enable debugging")
    parser.add_argument(
        "-D",
        "--dump",
        action="store_true",
        help="dump the sway tree (needs -d as well)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="enable verbose logging"
    )
    parser.add_argument(
        "-l", "--logfile", metavar="PATH", help="write output to logfile"
    )
    parser.add_argument(
        "-s",
        "--socket",
        metavar="PATH",
        help="sway socket to use instead of $SWAYSOCK or $I3SOCK",
    )
    parser.add_argument(
        "--swaymsg",
        action="store_true",
        help="talk to sway through the swaymsg program instead of the socket",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"This is swaycycle version v{__version__}",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = create_parser().parse_args(argv)

    try:
        setup_logging(debug=args.debug, verbose=args.verbose, logfile=args.logfile)
    except OSError as e:
        print(f"Failed to open logfile {args.logfile}: {e}", file=sys.stderr)
        return 1

    source = open_source(socket_path=args.socket, use_swaymsg=args.swaymsg)
    try:
        asyncio.run(
            cycle(
                source,
                backward=args.prev,
                switch=not args.no_switch,
                dump_tree=args.debug and args.dump,
            )
        )
    except SwayCycleError as e:
        logger.error("%s", e)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
