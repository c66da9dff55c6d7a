"""Version information for Object Tracker"""

__version__ = "1.0.0"
