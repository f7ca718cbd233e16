"""svcinit - install and control a program as an init-system service."""

__version__ = "0.1.0"
