"""
Pytest configuration file
"""

import pytest
import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


@pytest.fixture
def sample_bbox():
    """Provide a 10x10 box centered on (5, 5)"""
    from object_tracker.core import BoundingBox

    return BoundingBox(x_top=0.0, y_top=0.0, x_bot=10.0, y_bot=10.0)


@pytest.fixture
def default_model():
    """Provide the process-wide discrete model"""
    from object_tracker.filters.model import default_model

    return default_model()


@pytest.fixture
def default_noise():
    """Provide the process-wide noise covariances"""
    from object_tracker.filters.model import default_noise

    return default_noise()


@pytest.fixture
def zero_noise():
    """Provide noise covariances that are all zero"""
    from object_tracker.filters.model import NoiseModel

    return NoiseModel.from_variances(0.0, 0.0, 0.0)


@pytest.fixture
def session_file(tmp_path):
    """Provide a two-object, three-step input session"""
    path = tmp_path / "session.txt"
    path.write_text(
        "2,3\n"
        "0,0,10,10\n"
        "20,20,30,30\n"
        "0,0,10,10\n"
        "21,21,31,31\n"
        "0,0,10,10\n"
        "22,22,32,32\n"
        "0,0,10,10\n"
        "23,23,33,33\n"
    )
    return path
