from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

import pygame

from .config import CaptureConfig

logger = logging.getLogger(__name__)


def run_code(now: Optional[datetime] = None) -> str:
    return (now or datetime.now()).strftime("%Y%m%d-%H%M%S")


def capture_directory(root: Path, sketch_name: str, now: Optional[datetime] = None) -> Path:
    return Path(root) / sketch_name / run_code(now)


def captured_frame_path(directory: Path, frame: int, extension: str = "png") -> Path:
    # Frame index zero-padded to three digits.
    return Path(directory) / f"{frame:03d}.{extension}"


class FrameCapture:
    """Writes rendered frames into one run-dated directory."""

    def __init__(self, config: CaptureConfig, sketch_name: str, now: Optional[datetime] = None):
        self.directory = capture_directory(config.root, sketch_name, now)
        self.extension = config.extension

    def save(self, surface: pygame.Surface, frame: int) -> Optional[Path]:
        path = captured_frame_path(self.directory, frame, self.extension)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            pygame.image.save(surface, str(path))
        except (OSError, pygame.error) as exc:
            logger.error("Could not capture frame %d to %s: %s", frame, path, exc)
            return None
        logger.info("Captured frame %d to %s", frame, path)
        return path
