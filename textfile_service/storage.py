"""
Filesystem operations on the text files kept in the storage root.

Every function takes a path already produced by :func:`names.resolve`
and turns ``OSError`` into the service's own error types.
"""
import logging
import os
from typing import List

from .errors import InternalError, NotFoundError
from .names import EXTENSION

log = logging.getLogger(__name__)


def _classify(exc: OSError, action: str, name: str) -> Exception:
    if isinstance(exc, FileNotFoundError):
        log.warning("%s failed, %s does not exist", action, name)
        return NotFoundError(f"File {name} does not exist")
    log.error("%s failed for %s: %s", action, name, exc)
    return InternalError(f"Cannot {action.lower()} file {name}")


def list_files(root: str) -> List[str]:
    try:
        with os.scandir(root) as entries:
            files = [
                e.name for e in entries
                if e.name.endswith(EXTENSION) and e.is_file()
            ]
    except OSError as exc:
        log.error("Cannot list %s: %s", root, exc)
        raise InternalError("Cannot list files") from exc
    log.debug("Listed %d files", len(files))
    return files


def create_file(path: str, data: str = "") -> None:
    name = os.path.basename(path)
    try:
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(data)
    except OSError as exc:
        # a missing root is a server fault here, not a missing target
        log.error("Create failed for %s: %s", name, exc)
        raise InternalError(f"Cannot create file {name}") from exc
    log.info("Created %s (%d chars)", name, len(data))


def read_file(path: str) -> str:
    name = os.path.basename(path)
    try:
        with open(path, "r", encoding="utf-8", newline="") as f:
            content = f.read()
    except OSError as exc:
        raise _classify(exc, "Read", name) from exc
    except UnicodeDecodeError as exc:
        log.error("Read failed for %s: %s", name, exc)
        raise InternalError(f"Cannot read file {name}") from exc
    log.debug("Read %s (%d chars)", name, len(content))
    return content


def append_file(path: str, data: str) -> None:
    name = os.path.basename(path)
    # not atomic with the write below; a concurrent delete may slip in between
    if not os.path.exists(path):
        log.warning("Append failed, %s does not exist", name)
        raise NotFoundError(f"File {name} does not exist")
    try:
        with open(path, "a", encoding="utf-8", newline="") as f:
            f.write(data)
    except OSError as exc:
        raise _classify(exc, "Append", name) from exc
    log.info("Appended %d chars to %s", len(data), name)


def delete_file(path: str) -> None:
    name = os.path.basename(path)
    try:
        os.remove(path)
    except OSError as exc:
        raise _classify(exc, "Delete", name) from exc
    log.info("Deleted %s", name)
