from dataclasses import dataclass
from logging import getLogger
from os import getenv
from typing import Optional

from dotenv import load_dotenv

logger = getLogger(__name__)

DEFAULT_MAX_INPUT_LENGTH = 2048


@dataclass(frozen=True)
class ParserConfig:
    max_input_length: int = DEFAULT_MAX_INPUT_LENGTH

    @classmethod
    def from_env(cls) -> "ParserConfig":
        """Build a config from the environment (and a `.env` file, if any).

        Reads GITLOCATOR_MAX_INPUT_LENGTH. Missing, malformed or non-positive
        values fall back to the default.
        """
        load_dotenv()

        raw = getenv("GITLOCATOR_MAX_INPUT_LENGTH")
        if raw is None:
            return cls()

        try:
            max_input_length = int(raw.strip())
        except ValueError:
            logger.warning(
                "Ignoring GITLOCATOR_MAX_INPUT_LENGTH=%r, not an integer.", raw
            )
            return cls()

        if max_input_length <= 0:
            logger.warning(
                "Ignoring GITLOCATOR_MAX_INPUT_LENGTH=%r, must be positive.", raw
            )
            return cls()

        return cls(max_input_length=max_input_length)


DEFAULT_CONFIG = ParserConfig()


def resolve_config(config: Optional[ParserConfig]) -> ParserConfig:
    return DEFAULT_CONFIG if config is None else config
