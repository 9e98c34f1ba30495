"""Key-addressed SVG stores.

Entries live at `<root>/<pack>/<name>-<key>.svg`. The same layout is used for
the local cache and for the offline icon directory; only the root differs.
"""

from __future__ import annotations

import contextlib
import os
import tempfile
from pathlib import Path

from typing_extensions import Protocol, override

from ._errors import StoreIOError
from ._url import is_safe_segment


def entry_relpath(pack: str, name: str, key: str) -> Path:
    return Path(pack) / f"{name}-{key}.svg"


class IconStore(Protocol):
    """Anything that can look up and store SVG text by (pack, name, key)."""

    def lookup(self, pack: str, name: str, key: str) -> str | None: ...

    def store(self, pack: str, name: str, key: str, text: str) -> None: ...


class DirectoryStore(IconStore):
    """Store backed by a directory on disk.

    Writes go to a temporary file next to the destination, which is then
    renamed into place; concurrent readers see either the old entry, the new
    entry, or no entry, but never a partially written file.
    """

    def __init__(self, root: Path | str) -> None:
        self.root = Path(root)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self.root)!r})"

    def path_for(self, pack: str, name: str, key: str) -> Path:
        for segment in (pack, name, key):
            if not is_safe_segment(segment):
                raise StoreIOError(
                    self.root, f"{segment!r} can't be used in a store path"
                )
        return self.root / entry_relpath(pack, name, key)

    @override
    def lookup(self, pack: str, name: str, key: str) -> str | None:
        path = self.path_for(pack, name, key)
        try:
            # `newline=""` keeps the text byte-for-byte identical to what was stored.
            with open(path, encoding="utf-8", newline="") as f:
                return f.read()
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as e:
            raise StoreIOError(path, f"failed to read: {e}") from e

    @override
    def store(self, pack: str, name: str, key: str, text: str) -> None:
        path = self.path_for(pack, name, key)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StoreIOError(path.parent, f"failed to create directory: {e}") from e

        tmp_name: str | None = None
        published = False
        try:
            with tempfile.NamedTemporaryFile(
                mode="w",
                encoding="utf-8",
                newline="",
                dir=path.parent,
                prefix=f".{path.name}.",
                suffix=".tmp",
                delete=False,
            ) as f:
                tmp_name = f.name
                f.write(text)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, path)
            published = True
        except (OSError, UnicodeError) as e:
            raise StoreIOError(path, f"failed to write: {e}") from e
        finally:
            if not published and tmp_name is not None:
                # Best effort: the write error is what the caller needs to see.
                with contextlib.suppress(OSError):
                    os.remove(tmp_name)


class MemoryStore(IconStore):
    """In-process store. Mostly useful for tests, or to share results between
    resolvers without touching the filesystem."""

    def __init__(self) -> None:
        self.entries: dict[tuple[str, str, str], str] = {}

    def __len__(self) -> int:
        return len(self.entries)

    @override
    def lookup(self, pack: str, name: str, key: str) -> str | None:
        return self.entries.get((pack, name, key))

    @override
    def store(self, pack: str, name: str, key: str, text: str) -> None:
        self.entries[(pack, name, key)] = text
