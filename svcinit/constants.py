"""Shared constants for svcinit dot-directories and artefact locations."""

SVCINIT_HOME_EXT = ".svcinit"  # user-level state/config directory suffix

SVCINIT_HOME_ENV = "SVCINIT_HOME"

CONFIG_FILE_NAME = "config.json"

LOG_FILE_NAME = "svcinit.log"
