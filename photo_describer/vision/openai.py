"""OpenAIVisionClient — OpenAI chat-completions vision backend."""
import base64
import json
from typing import Optional

from openai import APIConnectionError, APIStatusError, AsyncOpenAI

from photo_describer.constants import (
    DEFAULT_VISION_MAX_TOKENS,
    DEFAULT_VISION_MODEL,
    DEFAULT_VISION_TIMEOUT,
    IMAGE_DESCRIPTION_PROMPT,
    IMAGE_MIME_TYPE,
    VISION_MAX_RETRIES,
)
from photo_describer.errors import ResponseParseFailure, TransportFailure, UpstreamStatusFailure
from photo_describer.vision.client import VisionClient


def _transport_reason(exc: APIConnectionError) -> str:
    """Prefer the underlying httpx message (TLS, DNS, timeout) over the SDK's generic one."""
    cause = str(exc.__cause__ or "")
    return cause or str(exc)


def extract_content(body: str) -> str:
    """Pull choices[0].message.content out of a raw completion body."""
    try:
        content = json.loads(body)["choices"][0]["message"]["content"]
    except (ValueError, KeyError, IndexError, TypeError) as exc:
        raise ResponseParseFailure() from exc

    match content:
        case str():
            return content.strip()
        case _:
            raise ResponseParseFailure()


def build_messages(image_bytes: bytes) -> list[dict]:
    image_data = base64.standard_b64encode(image_bytes).decode()
    return [
        {
            "role": "user",
            "content": [
                {"type": "text", "text": IMAGE_DESCRIPTION_PROMPT},
                {
                    "type": "image_url",
                    "image_url": {"url": f"data:{IMAGE_MIME_TYPE};base64,{image_data}"},
                },
            ],
        }
    ]


class OpenAIVisionClient(VisionClient):

    def __init__(
        self,
        api_key: str,
        *,
        model: str = DEFAULT_VISION_MODEL,
        timeout: float = DEFAULT_VISION_TIMEOUT,
        max_tokens: int = DEFAULT_VISION_MAX_TOKENS,
        base_url: Optional[str] = None,
    ) -> None:
        self._model = model
        self._max_tokens = max_tokens
        # Shared by every request; released by aclose().
        self._client = AsyncOpenAI(
            api_key=api_key,
            base_url=base_url,
            timeout=timeout,
            max_retries=VISION_MAX_RETRIES,
        )

    async def aclose(self) -> None:
        await self._client.close()

    async def describe(self, image_bytes: bytes) -> str:
        try:
            raw = await self._client.chat.completions.with_raw_response.create(
                model=self._model,
                messages=build_messages(image_bytes),
                max_tokens=self._max_tokens,
            )
        except APIStatusError as exc:
            raise UpstreamStatusFailure(exc.status_code) from exc
        except APIConnectionError as exc:
            raise TransportFailure(_transport_reason(exc)) from exc

        match raw.status_code:
            case 200:
                return extract_content(raw.text)
            case code:
                raise UpstreamStatusFailure(code)
