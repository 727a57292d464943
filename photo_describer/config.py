from dataclasses import dataclass
from typing import Optional
import os
from dotenv import load_dotenv

from photo_describer.constants import (
    DEFAULT_ENDPOINT_PATH,
    DEFAULT_HOST,
    DEFAULT_PORT,
    DEFAULT_VISION_MAX_TOKENS,
    DEFAULT_VISION_MODEL,
    DEFAULT_VISION_TIMEOUT,
)


@dataclass(frozen=True)
class Config:
    openai_api_key: str
    openai_base_url: Optional[str] = None
    vision_model: str = DEFAULT_VISION_MODEL
    vision_timeout: float = DEFAULT_VISION_TIMEOUT
    vision_max_tokens: int = DEFAULT_VISION_MAX_TOKENS
    temp_dir: Optional[str] = None
    endpoint_path: str = DEFAULT_ENDPOINT_PATH
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Config":
        load_dotenv()

        api_key = os.getenv("OPENAI_API_KEY")
        base_url = os.getenv("OPENAI_BASE_URL") or None
        model = os.getenv("VISION_MODEL") or DEFAULT_VISION_MODEL
        timeout = os.getenv("VISION_TIMEOUT", str(DEFAULT_VISION_TIMEOUT))
        max_tokens = os.getenv("VISION_MAX_TOKENS", str(DEFAULT_VISION_MAX_TOKENS))
        temp_dir = os.getenv("TEMP_DIR") or None
        endpoint_path = os.getenv("ENDPOINT_PATH") or DEFAULT_ENDPOINT_PATH
        host = os.getenv("HOST", DEFAULT_HOST)
        port = os.getenv("PORT", str(DEFAULT_PORT))
        log_level = os.getenv("LOG_LEVEL", "INFO")

        return cls._validate(
            openai_api_key=api_key,
            openai_base_url=base_url,
            vision_model=model,
            vision_timeout=float(timeout),
            vision_max_tokens=int(max_tokens),
            temp_dir=temp_dir,
            endpoint_path=endpoint_path,
            host=host,
            port=int(port),
            log_level=log_level,
        )

    @staticmethod
    def _validate(
        openai_api_key: Optional[str],
        openai_base_url: Optional[str],
        vision_model: str,
        vision_timeout: float,
        vision_max_tokens: int,
        temp_dir: Optional[str],
        endpoint_path: str,
        host: str,
        port: int,
        log_level: str,
    ) -> "Config":
        match openai_api_key:
            case None | "":
                raise ValueError("OPENAI_API_KEY must be set in .env")
            case _:
                pass

        match vision_timeout:
            case t if t <= 0:
                raise ValueError("VISION_TIMEOUT must be positive")
            case _:
                pass

        match endpoint_path:
            case p if not p.startswith("/"):
                raise ValueError("ENDPOINT_PATH must start with '/'")
            case _:
                pass

        return Config(
            openai_api_key=openai_api_key,
            openai_base_url=openai_base_url,
            vision_model=vision_model,
            vision_timeout=vision_timeout,
            vision_max_tokens=vision_max_tokens,
            temp_dir=temp_dir,
            endpoint_path=endpoint_path,
            host=host,
            port=port,
            log_level=log_level,
        )
