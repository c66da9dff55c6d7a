"""Basic tracking example"""

import numpy as np

from object_tracker import BoundingBox, ObjectTracker


def main():
    """Track a box drifting right through noisy detections"""

    rng = np.random.default_rng(0)

    # Create tracker from the first detection
    tracker = ObjectTracker.from_bbox(BoundingBox(0, 0, 10, 10))

    for step in range(50):
        # Simulated detection, moving 0.2 units per step with pixel noise
        cx = 5.0 + 0.2 * step + rng.normal(0.0, 1.0)
        cy = 5.0 + rng.normal(0.0, 1.0)
        bbox = BoundingBox(cx - 5, cy - 5, cx + 5, cy + 5)

        x_measure, y_measure = bbox.measurement()
        if not tracker.estimate(x_measure, y_measure):
            print(f"Step {step}: measurement rejected")
            continue

        x_pos, y_pos = tracker.get_position()
        print(f"Step {step}: measured ({cx:.2f}, {cy:.2f}) estimated ({x_pos:.2f}, {y_pos:.2f})")


if __name__ == "__main__":
    main()
