"""Locate the PNOR flash partition in the kernel's MTD listing."""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

PROC_MTD = Path("/proc/mtd")


def is_pnor_part(line: str) -> bool:
    return "pnor" in line.lower()


def find_pnor_device(path: str | Path = PROC_MTD) -> str | None:
    """Return ``/dev/<name>`` for the first partition whose line mentions pnor.

    Example listing line: ``mtd4: 02000000 00010000 "pnor"`` gives
    ``/dev/mtd4``.

    Returns:
        The device path, or None if the listing can't be read, has no
        match, or a line is cut short before its newline.
    """
    try:
        with open(path, "r", errors="replace") as f:
            for line in f:
                # A line without its newline was not read in full
                if not line.endswith("\n"):
                    return None
                if is_pnor_part(line):
                    name, sep, _ = line.partition(":")
                    if not sep:
                        return None
                    return f"/dev/{name}"
    except OSError as e:
        logger.debug("Can't read %s: %s", path, e)
    return None
