import os
import re
from typing import Optional

from werkzeug.utils import secure_filename

from .errors import ValidationError

EXTENSION = ".txt"
MAX_NAME_BYTES = 255     # NAME_MAX on common filesystems

_SEPARATORS = re.compile(r"[\\/]")
_DOT_RUNS = re.compile(r"\.{2,}")


def sanitize(raw_name) -> Optional[str]:
    """
    Return a filename stripped of any path components and unsafe
    characters, or None when nothing usable is left.
    """
    if not isinstance(raw_name, str):
        return None
    # keep only the last segment, whichever separator the client used
    candidate = _SEPARATORS.split(raw_name.strip())[-1]
    # ".txt" alone names no file, only the extension
    if candidate.startswith(".") and candidate.lstrip(".").lower() == EXTENSION[1:]:
        return None
    # collapse dot runs so no ".." survives inside the name either
    safe = _DOT_RUNS.sub(".", secure_filename(candidate))
    if not safe or safe == ".":
        return None
    if len(canonical_name(safe).encode("utf-8")) > MAX_NAME_BYTES:
        return None
    return safe


def canonical_name(safe_name: str) -> str:
    stem, _ = os.path.splitext(safe_name)
    return (stem or safe_name) + EXTENSION


def resolve(safe_name: str, root: str) -> str:
    """
    Join a sanitized name to the storage root with the ``.txt`` suffix.

    The parent of the resulting path is checked against the root before
    anything touches the disk.
    """
    root = os.path.abspath(root)
    path = os.path.abspath(os.path.join(root, canonical_name(safe_name)))
    if os.path.dirname(path) != root:
        raise ValidationError("Invalid file name")
    return path


def path_for(raw_name, root: str) -> str:
    """Validate a client-supplied filename and return its on-disk path."""
    if raw_name is None:
        raise ValidationError("Missing filename parameter")
    safe = sanitize(raw_name)
    if safe is None:
        raise ValidationError("Invalid filename parameter")
    return resolve(safe, root)
