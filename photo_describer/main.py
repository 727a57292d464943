"""Entry point — wires Config → OpenAIVisionClient → DescriptionService → FastAPI."""
import logging

import uvicorn
from fastapi import FastAPI
from rich.logging import RichHandler

from photo_describer.config import Config
from photo_describer.constants import MSG_SERVER_STARTING
from photo_describer.describer import DescriptionService
from photo_describer.server import create_app
from photo_describer.vision.openai import OpenAIVisionClient


def _setup_logging(level: str) -> None:
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    list(map(root.removeHandler, root.handlers[:]))
    root.addHandler(RichHandler(rich_tracebacks=True))


def build_app(config: Config) -> FastAPI:
    vision = OpenAIVisionClient(
        config.openai_api_key,
        model=config.vision_model,
        timeout=config.vision_timeout,
        max_tokens=config.vision_max_tokens,
        base_url=config.openai_base_url,
    )
    return create_app(config, DescriptionService(vision))


def main() -> None:
    config = Config.from_env()
    _setup_logging(config.log_level)

    logger = logging.getLogger(__name__)
    logger.info(MSG_SERVER_STARTING, config.host, config.port, config.endpoint_path)

    # log_config=None keeps uvicorn's loggers on the root RichHandler.
    uvicorn.run(build_app(config), host=config.host, port=config.port, log_config=None)


if __name__ == "__main__":
    main()
