"""Unique identifiers built from a counter, a timestamp, the process and the host."""

from __future__ import annotations

import itertools
import os
import socket
import threading
import time
import zlib
from dataclasses import dataclass


@dataclass(frozen=True)
class Uid:
    """An identifier; two are equal when every field matches."""

    counter: int
    timestamp: int
    pid: int
    ip: int


BAD_UID = Uid(0, 0, 0, 0)

_counter = itertools.count(1)
_lock = threading.Lock()
_HOST_ID = zlib.crc32(socket.gethostname().encode())


def generate() -> Uid:
    """Return a new identifier, distinct from every other made in this process."""
    with _lock:
        serial = next(_counter)
    return Uid(serial, int(time.time()), os.getpid(), _HOST_ID)