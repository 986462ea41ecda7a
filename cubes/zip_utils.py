"""Storing single files in zip archives and reading them back."""

from __future__ import annotations

import os
import time
import zipfile
from enum import Enum
from pathlib import Path

_EXTERNAL_ATTRIBUTES = 32


class ZipMethod(Enum):
    """Whether to start a new archive or add to an existing one."""

    CREATE = "create"
    APPEND = "append"


def zip_bytes(
    data: bytes,
    name: str,
    dst_path: str | os.PathLike[str],
    method: ZipMethod = ZipMethod.CREATE,
) -> None:
    """Store ``data`` as member ``name`` of the archive at ``dst_path``.

    CREATE replaces any existing file; APPEND requires an existing archive.
    """
    dst = Path(dst_path)
    if method is ZipMethod.APPEND:
        if not dst.exists():
            raise FileNotFoundError(f"archive does not exist: {dst}")
        if not zipfile.is_zipfile(dst):
            raise zipfile.BadZipFile(f"not a zip archive: {dst}")
        mode = "a"
    else:
        mode = "w"

    info = zipfile.ZipInfo(name, date_time=time.localtime()[:6])
    info.compress_type = zipfile.ZIP_DEFLATED
    info.external_attr = _EXTERNAL_ATTRIBUTES
    with zipfile.ZipFile(dst, mode) as archive:
        archive.writestr(info, bytes(data))


def zip_file(
    src_path: str | os.PathLike[str],
    dst_path: str | os.PathLike[str],
    method: ZipMethod = ZipMethod.CREATE,
) -> None:
    """Store the file at ``src_path`` in the archive under its base name."""
    src = Path(src_path)
    zip_bytes(src.read_bytes(), src.name, dst_path, method)


def zipped_file_names(zip_path: str | os.PathLike[str]) -> list[str]:
    """Return the member names in archive order; empty if the archive cannot be read."""
    try:
        with zipfile.ZipFile(zip_path) as archive:
            return [info.filename for info in archive.infolist()]
    except (OSError, zipfile.BadZipFile):
        return []


def unzip_file(zip_path: str | os.PathLike[str], name: str) -> bytes:
    """Return the contents of the first member called ``name``; KeyError if absent."""
    with zipfile.ZipFile(zip_path) as archive:
        for info in archive.infolist():
            if info.filename == name:
                return archive.read(info)
    raise KeyError(name)