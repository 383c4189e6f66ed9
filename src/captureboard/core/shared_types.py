"""
Type definitions used across layers
"""

from enum import StrEnum

# --- NOTE: These are the names used at the boundaries (API / DB). The rule engine has its own enums in captureboard/rules.
# --- Conversion between the two happens by member name, so keep the names in sync.


class Color(StrEnum):
    NONE = "none"
    BLACK = "black"
    WHITE = "white"


class ActionName(StrEnum):
    NONE = "none"
    MOVED = "moved"
    KILLED = "killed"
    STANDBY = "standby"
