"""Entry point for the namewheel CLI."""

import argparse
import sys
from dataclasses import replace

from namewheel.app import WheelApp
from namewheel.config import get_wheel_config
from namewheel.entries import parse_entries
from namewheel.errors import CRASH_LOG_FILE, log_exception, setup_logging

# Set up file logging to ~/namewheel.log
setup_logging()


def _parse_sequence(value: str) -> list[int]:
    try:
        return [int(part) for part in value.split(",") if part.strip()]
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"expected comma-separated indices, got {value!r}"
        )


def main():
    parser = argparse.ArgumentParser(description="Spin a wheel of names")
    parser.add_argument("names", nargs="*", help="Entries to put on the wheel")
    parser.add_argument(
        "--file", "-f", type=str, help="Read entries from a file, one per line"
    )
    parser.add_argument("--target", "-t", type=str, help="Label the wheel should land on")
    parser.add_argument(
        "--sequence",
        "-s",
        type=_parse_sequence,
        help="Comma-separated entry indices to land on, one per spin",
    )
    parser.add_argument("--spin-time", type=float, help="Spin duration in seconds")
    parser.add_argument("--slow", action="store_true", help="Accelerate slowly")
    parser.add_argument("--dark", action="store_true", help="Dark wheel background")
    parser.add_argument(
        "--exact", action="store_true", help="Stop on the target, not just near it"
    )
    args = parser.parse_args()

    lines = list(args.names)
    if args.file:
        try:
            with open(args.file) as f:
                lines.extend(f.read().splitlines())
        except OSError as e:
            print(log_exception(e, "Could not read entries"), file=sys.stderr)
            sys.exit(1)
    entries = parse_entries(lines)
    if not entries:
        parser.error("no entries given")

    config = get_wheel_config()
    overrides = {}
    if args.spin_time is not None:
        overrides["spin_time"] = args.spin_time
    if args.slow:
        overrides["slow_spin"] = True
    if args.dark:
        overrides["dark_mode"] = True
    if args.exact:
        overrides["exact_landing"] = True
    if overrides:
        config = replace(config, **overrides)

    # Set terminal window title
    sys.stdout.write("\033]0;Wheel of names\007")
    sys.stdout.flush()

    try:
        app = WheelApp(entries, config, target=args.target, sequence=args.sequence)
        app.run()
    except (KeyboardInterrupt, SystemExit):
        pass
    except Exception:
        import traceback

        with open(CRASH_LOG_FILE, "w") as f:
            traceback.print_exc(file=f)
        raise


if __name__ == "__main__":
    main()
