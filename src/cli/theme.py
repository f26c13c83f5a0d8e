"""CLI theme configuration - all colors in one place.

Modify these values to customize the terminal color scheme.
Colors use Rich markup syntax (e.g., "green", "bold red", "dim italic").
"""


class Theme:
    """Terminal color theme for the wing CLI."""

    # -------------------------------------------------------------------------
    # Error messages
    # -------------------------------------------------------------------------
    ERROR_BOLD = "bold red"

    # -------------------------------------------------------------------------
    # Banner and labels
    # -------------------------------------------------------------------------
    BRAND = "bright_yellow"
    LABEL = "bright_green"
    COMMAND = "cyan"
    PROGRAM = "bright_cyan"
    EXIT_CODE = "bright_red"

    # -------------------------------------------------------------------------
    # Timestamps
    # -------------------------------------------------------------------------
    STARTED = "cyan"
    FINISHED = "bright_cyan"

    # -------------------------------------------------------------------------
    # Duration units, largest first
    # -------------------------------------------------------------------------
    DURATION_UNITS = {
        "d": "red",
        "h": "magenta",
        "m": "yellow",
        "s": "green",
        "ms": "cyan",
        "µs": "blue",
        "ns": "purple",
    }
    DURATION_ZERO = "green"


# Default theme instance - import this in other modules
theme = Theme()
