"""Print runs of printable characters found in binary files."""

from __future__ import annotations

import sys
from functools import partial
from typing import Iterable, Iterator

MIN_STR_LEN = 4
CHUNK_SIZE = 1024


def _is_print(byte: int) -> bool:
    return 0x20 <= byte <= 0x7E


def _scan(chunks: Iterable[bytes], min_len: int) -> Iterator[str]:
    """Yield output text for ``chunks``; the run count carries across chunks.

    Every printable byte is echoed; a newline follows a run only when the
    run reached ``min_len`` characters.
    """
    count = 0
    for chunk in chunks:
        out = bytearray()
        for byte in chunk:
            if _is_print(byte):
                out.append(byte)
                count += 1
            else:
                if count >= min_len:
                    out.extend(b"\n")
                count = 0
        if out:
            yield out.decode("ascii")
    if count >= min_len:
        yield "\n"


def extract_strings(data: bytes, min_len: int = MIN_STR_LEN) -> str:
    """Return the text that scanning ``data`` for printable runs produces."""
    return "".join(_scan([data], min_len))


def print_strings(filename) -> None:
    """Scan the file ``filename`` and write its printable runs to stdout."""
    with open(filename, "rb") as handle:
        for piece in _scan(iter(partial(handle.read, CHUNK_SIZE), b""), MIN_STR_LEN):
            sys.stdout.write(piece)
    sys.stdout.flush()


def main(argv=None) -> int:
    """Print the printable runs of each file named on the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print("Usage: strings <file>...", file=sys.stderr)
        return 1
    for filename in args:
        try:
            print_strings(filename)
        except OSError as exc:
            print(f"fopen: {exc.strerror or exc}", file=sys.stderr)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())