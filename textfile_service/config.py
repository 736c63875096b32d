import os

STORAGE_DIR = os.environ.get("FILES_DIR", "storage")      # directory managed by the service
BASE_URL = os.environ.get("TEXTFILE_BASE_URL", "/textfile-api")
HOST = os.environ.get("TEXTFILE_HOST", "127.0.0.1")
PORT = int(os.environ.get("PORT", "3000"))
LOG_LEVEL = os.environ.get("TEXTFILE_LOG_LEVEL", "INFO")


def normalize_base_url(base_url: str) -> str:
    """Return ``base_url`` with exactly one leading slash, none trailing,
    lowercased to match the request paths seen by the views."""
    return "/" + base_url.strip().strip("/").lower()
