"""
Configuration constants for pathgraph.

Tunable defaults live here. Values that users may want to change without
touching code are read from environment variables.
"""

import os

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level used by the demo script (DEBUG, INFO, WARNING, ERROR).
# The library itself never installs handlers.
LOG_LEVEL = os.environ.get("PATHGRAPH_LOG_LEVEL", "WARNING")

# =============================================================================
# History Configuration
# =============================================================================

# Whether new Graph instances record their mutations by default
HISTORY_ENABLED = os.environ.get("PATHGRAPH_HISTORY", "1").strip().lower() not in {
    "0",
    "false",
    "no",
    "off",
}

# =============================================================================
# Text Format Configuration
# =============================================================================

TEXT_ENCODING = "utf-8"

# Lines starting with any of these are ignored by the text reader
TEXT_COMMENT_PREFIXES = ("#", "//")

# Record tags
VERTEX_TAG = "v"
EDGE_TAG = "e"
