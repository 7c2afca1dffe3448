"""Control client for the mbox flash-bridge daemon over D-Bus."""

NAME = "MBOX Control"
VERSION = 1
SUBVERSION = 0

__version__ = f"{VERSION}.{SUBVERSION}"
