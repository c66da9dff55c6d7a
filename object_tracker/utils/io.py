# object_tracker/utils/io.py

"""I/O utilities for the line-oriented tracking protocol"""

import logging
from typing import Iterable, Iterator, List, Optional, Tuple

from ..core import BoundingBox
from ..exceptions import InputFormatError


def setup_logging(log_file: Optional[str] = None,
                  level: int = logging.INFO) -> None:
    """
    Setup logging configuration

    Args:
        log_file: Optional log file path
        level: Logging level
    """
    handlers = [logging.StreamHandler()]

    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers
    )


def parse_header(line: str) -> Tuple[int, int]:
    """
    Parse the '<number of objects>,<time steps>' header line

    Returns:
        Tuple of (number of objects, number of time steps)
    """
    parts = line.strip().split(",")
    if len(parts) != 2:
        raise InputFormatError(f"Invalid header line: {line!r}")

    try:
        num_objects, time_steps = int(parts[0]), int(parts[1])
    except ValueError as e:
        raise InputFormatError(f"Invalid header line: {line!r}") from e

    if num_objects <= 0 or time_steps <= 0:
        raise InputFormatError(
            "Number of objects and time steps must be non zero, "
            f"got {num_objects},{time_steps}"
        )

    return num_objects, time_steps


def parse_bbox(line: str) -> BoundingBox:
    """Parse a '<x_top>,<y_top>,<x_bot>,<y_bot>' line"""
    try:
        return BoundingBox.from_csv_line(line)
    except ValueError as e:
        raise InputFormatError(str(e)) from e


def _content_lines(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        if line.strip():
            yield line


def read_session(lines: Iterable[str]) -> Tuple[List[BoundingBox], List[List[BoundingBox]]]:
    """
    Read a complete tracking session

    The header is followed by one initial box per object, then one
    measurement box per object for every time step. Blank lines are ignored.

    Args:
        lines: Input lines

    Returns:
        Initial boxes and, per time step, the measured boxes in object order
    """
    stream = _content_lines(lines)

    try:
        num_objects, time_steps = parse_header(next(stream))
        initial = [parse_bbox(next(stream)) for _ in range(num_objects)]
        steps = [
            [parse_bbox(next(stream)) for _ in range(num_objects)]
            for _ in range(time_steps)
        ]
    except StopIteration:
        raise InputFormatError("Input ended before all boxes were read") from None

    logging.debug(f"Read {num_objects} objects over {time_steps} time steps")
    return initial, steps


def format_position(x: float, y: float) -> str:
    """Position output line"""
    return f"{x:f},{y:f}"
