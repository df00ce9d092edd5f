"""Process exit codes for the segstore CLI."""

SUCCESS = 0
USAGE_ERROR = 2
CONFIGURATION_ERROR = 3
WIRING_ERROR = 4
