"""Small system queries: directory listing, host names, address lookup, options."""

from __future__ import annotations

import enum
import os
import platform
import socket
import stat
import sys
from dataclasses import dataclass
from itertools import takewhile
from typing import NamedTuple


class EntryType(enum.IntEnum):
    """Directory entry kinds, numbered as in ``struct dirent``."""

    UNKNOWN = 0
    FIFO = 1
    CHR = 2
    DIR = 4
    BLK = 6
    REG = 8
    LNK = 10
    SOCK = 12


@dataclass(frozen=True)
class DirEntry:
    name: str
    inode: int
    type: EntryType


_MODE_TYPES = (
    (stat.S_ISDIR, EntryType.DIR),
    (stat.S_ISREG, EntryType.REG),
    (stat.S_ISLNK, EntryType.LNK),
    (stat.S_ISFIFO, EntryType.FIFO),
    (stat.S_ISCHR, EntryType.CHR),
    (stat.S_ISBLK, EntryType.BLK),
    (stat.S_ISSOCK, EntryType.SOCK),
)


def _type_of_mode(mode: int) -> EntryType:
    return next((kind for test, kind in _MODE_TYPES if test(mode)), EntryType.UNKNOWN)


def list_directory(path) -> list[DirEntry]:
    """Return the entries of ``path``, including ``.`` and ``..``."""
    entries = [
        DirEntry(".", os.stat(path).st_ino, EntryType.DIR),
        DirEntry("..", os.stat(os.path.join(path, os.pardir)).st_ino, EntryType.DIR),
    ]
    with os.scandir(path) as iterator:
        for entry in iterator:
            try:
                kind = _type_of_mode(entry.stat(follow_symlinks=False).st_mode)
            except OSError:
                kind = EntryType.UNKNOWN
            entries.append(DirEntry(entry.name, entry.inode(), kind))
    return entries


def ls_main(argv=None) -> int:
    """List the directory named by the first argument, one block per entry."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print("Usage: ls <directory_path>", file=sys.stderr)
        return 1
    try:
        entries = list_directory(args[0])
    except OSError as exc:
        print(f"opendir: {exc.strerror or exc}", file=sys.stderr)
        return 1
    for entry in entries:
        print(f"Name {entry.name}")
        print(f"Inode: {entry.inode}")
        print(f"Type: {int(entry.type)}\n")
    return 0


class SystemNames(NamedTuple):
    sysname: str
    nodename: str


def system_names() -> SystemNames:
    """Return the operating-system name and the network node name."""
    info = platform.uname()
    return SystemNames(info.system, info.node)


def resolve_ipv4(host: str = "localhost") -> list[str]:
    """Return the IPv4 TCP addresses that ``host`` resolves to, in resolver order."""
    results = socket.getaddrinfo(
        host,
        None,
        socket.AF_INET,
        socket.SOCK_STREAM,
        socket.IPPROTO_TCP,
        socket.AI_ADDRCONFIG,
    )
    return [sockaddr[0] for _family, _type, _proto, _name, sockaddr in results]


def leading_options(argv) -> list[str]:
    """Return the arguments before the first one that does not start with ``-``.

    ``argv`` holds the arguments without the program name.
    """
    return list(takewhile(lambda arg: arg.startswith("-"), argv))