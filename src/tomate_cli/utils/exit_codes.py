"""
Exit codes for Tomate CLI.

Commands exit with one of these so scripts wrapping the timer can tell
a bad invocation apart from a runtime failure.
"""

# Success, including a prompt the user declined
SUCCESS = 0

# Config or metrics file could not be written
ERROR_GENERAL = 1

# Unknown key, non-numeric or out-of-range value
ERROR_INVALID_ARGS = 2
