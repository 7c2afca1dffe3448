"""Multi-byte scalar access in host byte order.

Values are copied with the host's native endianness and no alignment, so a
write followed by a read on the same machine returns the original value.
Nothing here converts byte order between hosts.
"""

from __future__ import annotations

import struct

_U16 = struct.Struct("=H")
_U32 = struct.Struct("=I")


def get_u16(buf: bytes, offset: int = 0) -> int:
    return _U16.unpack_from(buf, offset)[0]


def put_u16(buf: bytearray, value: int, offset: int = 0) -> None:
    _U16.pack_into(buf, offset, value)


def get_u32(buf: bytes, offset: int = 0) -> int:
    return _U32.unpack_from(buf, offset)[0]


def put_u32(buf: bytearray, value: int, offset: int = 0) -> None:
    _U32.pack_into(buf, offset, value)
