"""Scoped transient image files — one uniquely named file per request."""
import logging
import os
import tempfile
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from starlette.concurrency import run_in_threadpool

from photo_describer.constants import (
    MSG_ERR_SAVE_FAILED,
    MSG_TEMP_CREATED,
    MSG_TEMP_REMOVE_FAILED,
    MSG_TEMP_REMOVED,
    TEMP_FILE_PREFIX,
    TEMP_FILE_SUFFIX,
)
from photo_describer.errors import StorageWriteFailure

logger = logging.getLogger(__name__)


def _remove(path: Path) -> None:
    try:
        path.unlink(missing_ok=True)
        logger.debug(MSG_TEMP_REMOVED, path)
    except OSError:
        logger.warning(MSG_TEMP_REMOVE_FAILED, path)


def _write(data: bytes, directory: Optional[str]) -> Path:
    # mkstemp creates with O_EXCL and a random suffix, so concurrent requests never share a name.
    try:
        fd, name = tempfile.mkstemp(prefix=TEMP_FILE_PREFIX, suffix=TEMP_FILE_SUFFIX, dir=directory)
    except OSError as exc:
        raise StorageWriteFailure(MSG_ERR_SAVE_FAILED) from exc

    path = Path(name)
    try:
        with os.fdopen(fd, "wb") as fh:
            fh.write(data)
    except OSError as exc:
        _remove(path)
        raise StorageWriteFailure(MSG_ERR_SAVE_FAILED) from exc
    return path


@asynccontextmanager
async def transient_image(data: bytes, directory: Optional[str] = None) -> AsyncIterator[Path]:
    """Write data to a fresh temp file, yield its path, and delete it on every exit path.

    Raises StorageWriteFailure when the file cannot be created or written;
    nothing is left on disk in that case.
    """
    path = await run_in_threadpool(_write, data, directory)
    logger.debug(MSG_TEMP_CREATED, path)
    try:
        yield path
    finally:
        await run_in_threadpool(_remove, path)
