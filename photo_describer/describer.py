"""DescriptionService — turns an image file into a folded Latvian description."""
import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from starlette.concurrency import run_in_threadpool

from photo_describer.constants import MSG_DESCRIBE_FAIL, MSG_DESCRIBE_OK
from photo_describer.errors import DescriptionError, ErrorKind, SourceNotFound
from photo_describer.folding import fold_diacritics
from photo_describer.vision.client import VisionClient

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DescriptionResult:
    text: Optional[str] = None
    error: Optional[str] = None
    kind: Optional[ErrorKind] = None

    @classmethod
    def success(cls, text: str) -> "DescriptionResult":
        return cls(text=text)

    @classmethod
    def failure(cls, exc: DescriptionError) -> "DescriptionResult":
        return cls(error=exc.message, kind=exc.kind)

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_json(self) -> dict[str, str]:
        match self.error:
            case None:
                return {"text": self.text or ""}
            case message:
                return {"error": message}


class DescriptionService:
    """Reads an image from disk, asks the vision backend about it and folds the answer."""

    def __init__(self, vision_client: VisionClient) -> None:
        self._vision_client = vision_client

    async def aclose(self) -> None:
        await self._vision_client.aclose()

    async def describe(self, image_path: Path) -> DescriptionResult:
        start = time.monotonic()
        try:
            image_bytes = await run_in_threadpool(_read_image, image_path)
            text = await self._vision_client.describe(image_bytes)
        except DescriptionError as exc:
            logger.warning(MSG_DESCRIBE_FAIL, time.monotonic() - start, exc.message)
            return DescriptionResult.failure(exc)

        logger.info(MSG_DESCRIBE_OK, time.monotonic() - start)
        return DescriptionResult.success(fold_diacritics(text.strip()))


def _read_image(image_path: Path) -> bytes:
    match image_path.is_file():
        case True:
            return image_path.read_bytes()
        case False:
            raise SourceNotFound()
