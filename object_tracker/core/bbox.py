"""Bounding box data structure"""

from dataclasses import dataclass
from typing import Any, Dict, List, Tuple

import numpy as np


@dataclass
class BoundingBox:
    """Axis-aligned bounding box given by two opposite corners"""

    x_top: float
    y_top: float
    x_bot: float
    y_bot: float

    @property
    def center(self) -> np.ndarray:
        """Get center point of bounding box"""
        return np.array(
            [(self.x_top + self.x_bot) / 2.0, (self.y_top + self.y_bot) / 2.0]
        )

    @property
    def tlbr(self) -> np.ndarray:
        """Get corners as [x_top, y_top, x_bot, y_bot]"""
        return np.array([self.x_top, self.y_top, self.x_bot, self.y_bot])

    def measurement(self) -> Tuple[List[List[float]], List[List[float]]]:
        """Center of the box as a pair of 1x1 position measurements (x, y)"""
        cx, cy = self.center
        return [[float(cx)]], [[float(cy)]]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation"""
        return {
            "x_top": self.x_top,
            "y_top": self.y_top,
            "x_bot": self.x_bot,
            "y_bot": self.y_bot,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BoundingBox":
        """Create from dictionary representation"""
        return cls(**data)

    @classmethod
    def from_csv_line(cls, line: str) -> "BoundingBox":
        """Create from a '<x_top>,<y_top>,<x_bot>,<y_bot>' line"""
        parts = line.strip().split(",")
        if len(parts) != 4:
            raise ValueError(f"Invalid bounding box line: {line!r}")

        return cls(
            x_top=float(parts[0]),
            y_top=float(parts[1]),
            x_bot=float(parts[2]),
            y_bot=float(parts[3]),
        )
