from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path

import pygame

from trailsketch.capture import FrameCapture, capture_directory, captured_frame_path, run_code
from trailsketch.config import CaptureConfig

NOW = datetime(2024, 1, 2, 3, 4, 5)


def test_frame_paths_are_zero_padded_in_run_dated_directory():
    directory = capture_directory(Path("captures"), "walkers", NOW)

    assert run_code(NOW) == "20240102-030405"
    assert directory == Path("captures/walkers/20240102-030405")
    assert captured_frame_path(directory, 7) == directory / "007.png"
    assert captured_frame_path(directory, 1234, "bmp") == directory / "1234.bmp"


def test_save_writes_frame(tmp_path):
    capture = FrameCapture(CaptureConfig(root=tmp_path), "walkers", NOW)
    surface = pygame.Surface((8, 8))
    surface.fill((255, 0, 0))

    path = capture.save(surface, 3)

    assert path == tmp_path / "walkers" / "20240102-030405" / "003.png"
    assert path.is_file()


def test_save_failure_is_logged_not_raised(tmp_path, caplog):
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("")
    capture = FrameCapture(CaptureConfig(root=blocker), "walkers", NOW)

    with caplog.at_level(logging.ERROR, logger="trailsketch.capture"):
        path = capture.save(pygame.Surface((4, 4)), 0)

    assert path is None
    assert "Could not capture frame 0" in caplog.text
