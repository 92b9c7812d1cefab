import os
from enum import Enum
from typing import Optional


class StrEnum(str, Enum):
    def __str__(self) -> str:
        # https://stackoverflow.com/a/74440069
        return str.__str__(self)


class GotifyEnvVar(StrEnum):
    URL = "GOTIFY_URL"
    TOKEN = "GOTIFY_TOKEN"
    LOG_LEVEL = "GOTIFY_LOG_LEVEL"

    def get(self) -> Optional[str]:
        return os.environ.get(self.value)
