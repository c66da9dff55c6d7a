# object_tracker/main.py

import argparse
import logging
import sys
from pathlib import Path

from object_tracker import __version__
from object_tracker.exceptions import ConfigurationError, InputFormatError
from object_tracker.trackers import ObjectTracker, batch_estimate
from object_tracker.utils import (
    ConfigLoader,
    format_position,
    read_session,
    setup_logging,
)


def main(argv=None):
    """Replay bounding-box measurements through one tracker per object"""
    parser = argparse.ArgumentParser(
        description=f"Object Tracker: bounding-box Kalman tracking v{__version__}",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Input format:
    <number of objects>,<time steps>
    <x_top>,<y_top>,<x_bot>,<y_bot>     (initial box, once per object)
    <x_top>,<y_top>,<x_bot>,<y_bot>     (measurement, per object and step)

Examples:
    # Read measurements from a file
    object-tracker --input session.txt

    # Pipe measurements and write positions to a file
    cat session.txt | object-tracker --output positions.csv
        """,
    )

    parser.add_argument("--input", type=str, help="Input file (default: stdin)")
    parser.add_argument("--output", type=str, help="Output file (default: stdout)")
    parser.add_argument("--config", type=str, help="YAML or JSON tracker configuration")

    # Logging
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    parser.add_argument("--log-file", type=str, help="Path to log file")

    args = parser.parse_args(argv)

    if args.input and not Path(args.input).exists():
        print(f"❌ Error: Input file not found: {args.input}")
        return 1

    log_level = logging.DEBUG if args.verbose else logging.WARNING
    setup_logging(log_file=args.log_file, level=log_level)
    logger = logging.getLogger(__name__)

    try:
        config = ConfigLoader.create_tracker_config(args.config)

        if args.input:
            with open(args.input, "r") as f:
                initial, steps = read_session(f)
        else:
            initial, steps = read_session(sys.stdin)
    except (ConfigurationError, InputFormatError, FileNotFoundError) as e:
        print(f"❌ Error: {e}")
        return 1

    logger.info(f"Tracking {len(initial)} objects over {len(steps)} time steps")

    trackers = [ObjectTracker.from_config(bbox, config) for bbox in initial]

    lines = []
    rejected = 0
    for step, boxes in enumerate(steps):
        positions, flags = batch_estimate(trackers, boxes)
        rejected += flags.count(False)
        for x_pos, y_pos in positions:
            lines.append(format_position(x_pos, y_pos))
        logger.debug(f"Step {step}: {positions.tolist()}")

    if rejected:
        logger.warning(f"{rejected} measurements were rejected")

    output = "\n".join(lines) + "\n" if lines else ""
    if args.output:
        with open(args.output, "w") as f:
            f.write(output)
        logger.info(f"Saved positions to {args.output}")
    else:
        sys.stdout.write(output)

    return 0


if __name__ == "__main__":
    sys.exit(main())
