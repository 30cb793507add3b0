"""Configuration for the frame engine."""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from .errors import ConfigurationError

# Load environment variables
load_dotenv()

# Timeline
DEFAULT_FPS = int(os.getenv("FRAME_ENGINE_FPS", "30"))

# Canvas used by the debug preview
DEFAULT_WIDTH = int(os.getenv("FRAME_ENGINE_WIDTH", "1080"))
DEFAULT_HEIGHT = int(os.getenv("FRAME_ENGINE_HEIGHT", "1080"))

# Output
PREVIEW_DIR = Path(os.getenv("FRAME_ENGINE_PREVIEW_DIR", "output/preview"))
LOG_LEVEL = os.getenv("FRAME_ENGINE_LOG_LEVEL", "INFO")


@dataclass(frozen=True)
class EngineConfig:
    """Static render settings shared by every scene."""
    fps: int = DEFAULT_FPS
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    preview_dir: Path = PREVIEW_DIR
    log_level: str = LOG_LEVEL

    def __post_init__(self):
        if self.fps <= 0:
            raise ConfigurationError(f"fps must be positive, got {self.fps}")
        if self.width <= 0 or self.height <= 0:
            raise ConfigurationError(
                f"canvas size must be positive, got {self.width}x{self.height}"
            )

    @classmethod
    def from_env(cls) -> "EngineConfig":
        """Build a config from the current environment (re-reading .env)."""
        load_dotenv()
        return cls(
            fps=int(os.getenv("FRAME_ENGINE_FPS", str(DEFAULT_FPS))),
            width=int(os.getenv("FRAME_ENGINE_WIDTH", str(DEFAULT_WIDTH))),
            height=int(os.getenv("FRAME_ENGINE_HEIGHT", str(DEFAULT_HEIGHT))),
            preview_dir=Path(os.getenv("FRAME_ENGINE_PREVIEW_DIR", str(PREVIEW_DIR))),
            log_level=os.getenv("FRAME_ENGINE_LOG_LEVEL", LOG_LEVEL),
        )
