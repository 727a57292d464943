"""VisionClient — abstract base for image description backends."""
from abc import ABC, abstractmethod


class VisionClient(ABC):
    @abstractmethod
    async def describe(self, image_bytes: bytes) -> str:
        """Describe image bytes and return the stripped text. Raises DescriptionError on failure."""
        ...

    async def aclose(self) -> None:
        """Release pooled connections. Backends without any keep the default."""
        return None
