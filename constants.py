"""
Global constants used throughout the project
"""

# Transitive closure repeats its carrier sweep until nothing is added.
# Set to False to run exactly one sweep.
FIXED_POINT_CLOSURE = True

LOG_FORMAT = "%(levelname)s | %(message)s"

DEBUG = False
