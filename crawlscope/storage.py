"""Storage of crawl output: line files, error records and saved responses."""

from __future__ import annotations

import hashlib
import json
import os
import re
import shutil
from dataclasses import dataclass
from datetime import datetime, timezone
from urllib.parse import urlsplit

INDEX_FILE = "index.txt"
DEFAULT_RESPONSE_DIR = "crawlscope_response"
_ZERO_TIME = "0001-01-01T00:00:00Z"


class FileWriter:
    """Buffered writer that puts each record on its own line of a new file."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = path
        self._file = open(path, "wb")  # noqa: SIM115

    def write(self, data: bytes | str) -> None:
        """Write one record followed by a newline."""
        if isinstance(data, str):
            data = data.encode("utf-8")
        self._file.write(data)
        self._file.write(b"\n")

    def close(self) -> None:
        """Flush everything to disk and close the file."""
        if self._file.closed:
            return
        self._file.flush()
        try:
            os.fsync(self._file.fileno())
        except OSError:
            pass
        self._file.close()

    def __enter__(self) -> FileWriter:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()


def _rfc3339(timestamp: datetime | None) -> str:
    if timestamp is None:
        return _ZERO_TIME
    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=timezone.utc)
    text = timestamp.strftime("%Y-%m-%dT%H:%M:%S")
    if timestamp.microsecond:
        text += "." + f"{timestamp.microsecond:06d}".rstrip("0")
    offset = timestamp.utcoffset()
    if not offset:
        return text + "Z"
    minutes = int(offset.total_seconds() // 60)
    sign = "+" if minutes >= 0 else "-"
    minutes = abs(minutes)
    return f"{text}{sign}{minutes // 60:02d}:{minutes % 60:02d}"


@dataclass
class ErrorRecord:
    """A failed request, as written to the error log."""

    timestamp: datetime | None = None
    endpoint: str = ""
    source: str = ""
    error: str = ""

    def to_json(self) -> str:
        """Return the record as compact JSON, leaving out empty text fields."""
        data = {"timestamp": _rfc3339(self.timestamp)}
        for key in ("endpoint", "source", "error"):
            value = getattr(self, key)
            if value:
                data[key] = value
        return json.dumps(data, separators=(",", ":"), ensure_ascii=False)


def response_hash(url: str) -> str:
    """Return the hex SHA-1 digest naming the stored response of ``url``."""
    return hashlib.sha1(url.encode("utf-8")).hexdigest()


def response_host(url: str) -> str:
    """Return the host (with port) of ``url``; raises ValueError if unparsable."""
    return urlsplit(url).netloc.rpartition("@")[2]


def response_file_name(folder: str | os.PathLike[str], domain: str, url: str) -> str:
    """Return the path of the stored response of ``url``, creating its host directory."""
    host_dir = os.path.join(folder, domain)
    os.makedirs(host_dir, exist_ok=True)
    return os.path.join(host_dir, response_hash(url) + ".txt")


def format_stored_response(url: str, raw_request: str, raw_response: str) -> str:
    """Return the text stored for one request/response exchange."""
    return f"{url}\n\n\n{raw_request}\n\n{raw_response}"


def create_dir_name_no_clobber(directory: str) -> str:
    """Return ``directory``, or a numbered sibling name if it already exists."""
    if not os.path.isdir(directory):
        return directory
    parent, name = os.path.split(os.path.normpath(directory))
    parent = parent or "."
    try:
        entries = list(os.scandir(parent))
    except OSError:
        return name
    pattern = re.compile(rf"^{re.escape(name)}(\d+)$")
    highest = 0
    for entry in entries:
        if entry.is_dir() and (match := pattern.match(entry.name)):
            highest = max(highest, int(match.group(1)))
    return os.path.normpath(os.path.join(parent, f"{name}{highest + 1}"))


def remove_dirs_with_suffix(directory: str) -> None:
    """Remove ``directory`` and its numbered siblings."""
    parent, name = os.path.split(os.path.normpath(directory))
    parent = parent or "."
    try:
        entries = list(os.scandir(parent))
    except OSError:
        return
    pattern = re.compile(rf"^{re.escape(name)}(\d*)$")
    for entry in entries:
        if entry.is_dir() and pattern.match(entry.name):
            shutil.rmtree(os.path.join(parent, entry.name), ignore_errors=True)


def update_index(folder: str | os.PathLike[str], url: str, status: str) -> None:
    """Append a line for ``url`` to the existing index file of ``folder``."""
    descriptor = os.open(os.path.join(folder, INDEX_FILE), os.O_APPEND | os.O_WRONLY)
    with os.fdopen(descriptor, "a", encoding="utf-8") as index:
        domain = response_host(url)
        index.write(f"{response_file_name(folder, domain, url)} {url} ({status})\n")