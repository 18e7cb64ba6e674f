"""Read the body behind a URL in fixed-size portions into any writable stream."""

from __future__ import annotations

import argparse
import io
import sys
import urllib.error
import urllib.request
from typing import Any, BinaryIO, Sequence, TypeVar

W = TypeVar("W")


class BlockingStream:
    """A blocking stream over the data at a URL.

    Opening fails with ``RuntimeError`` when the URL cannot be retrieved.
    """

    def __init__(self, url: str) -> None:
        try:
            self._native: BinaryIO | None = urllib.request.urlopen(url)
        except (urllib.error.URLError, ValueError, OSError) as exc:
            raise RuntimeError(str(exc)) from exc

    def read(self, size: int) -> bytes:
        """Read up to ``size`` bytes; an empty result means the data is exhausted."""
        if self._native is None:
            raise ValueError("read from a closed stream")
        if size <= 0:
            raise ValueError("read size must be positive")
        return self._native.read(size)

    def close(self) -> None:
        """Release the underlying connection; closing twice is harmless."""
        native, self._native = self._native, None
        if native is not None:
            native.close()

    @property
    def closed(self) -> bool:
        """Whether the stream has been released."""
        return self._native is None

    def __enter__(self) -> BlockingStream:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()


class UrlStream:
    """Copies the data at a URL into another stream."""

    def __init__(self, url: str) -> None:
        self._impl = BlockingStream(url)

    def read_into(self, out: W, buffer_size: int = 1024) -> W:
        """Write all remaining data to ``out`` in portions of ``buffer_size`` bytes."""
        with self._impl as stream:
            while chunk := stream.read(buffer_size):
                out.write(chunk)  # type: ignore[attr-defined]
        return out


def main(argv: Sequence[str] | None = None) -> int:
    """Print one page and save another to a file."""
    parser = argparse.ArgumentParser(description="Download web pages.")
    parser.add_argument("--show", default="https://isocpp.org/about", help="URL to print")
    parser.add_argument("--save", default="https://ja.cppreference.com/", help="URL to save")
    parser.add_argument(
        "--output", default="japanese_web_page.html", help="file the saved page goes to"
    )
    args = parser.parse_args(argv)

    try:
        buffer = UrlStream(args.show).read_into(io.BytesIO())
        sys.stdout.write(buffer.getvalue().decode("utf-8", errors="replace") + "\n")
        with open(args.output, "wb") as f:
            UrlStream(args.save).read_into(f)
    except (RuntimeError, OSError) as exc:
        sys.stdout.write(f"{exc}\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())