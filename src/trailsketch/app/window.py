from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional, Protocol, Sequence, Union

import pygame

from ..capture import FrameCapture
from ..config import BOUNDARY_MODES, SKETCH_MODES, SketchConfig
from ..sim.core.controller import SimulationController
from ..sim.core.domain import Domain
from ..strips import StripsModel
from .render import Painter

logger = logging.getLogger(__name__)


class Sketch(Protocol):
    name: str

    def tick(self) -> object: ...

    def reset(self) -> object: ...

    def request_capture(self) -> None: ...

    def consume_capture(self) -> bool: ...

    def toggle_debug(self) -> bool: ...

    def draw(self, painter: Painter) -> None: ...


def build_sketch(config: SketchConfig) -> Union[SimulationController, StripsModel]:
    if config.mode == "strips":
        return StripsModel(config)
    return SimulationController(config)


def dispatch_key(sketch: Sketch, key: int) -> bool:
    """Apply a released key to the sketch. Returns False when the host should quit."""
    if key == pygame.K_SPACE:
        sketch.reset()
    elif key == pygame.K_s:
        sketch.request_capture()
    elif key == pygame.K_d:
        enabled = sketch.toggle_debug()
        logger.info("Debug annotations %s", "on" if enabled else "off")
    elif key == pygame.K_ESCAPE:
        return False
    return True


class SketchHost:
    def __init__(self, config: SketchConfig, sketch: Sketch):
        self.config = config
        self.sketch = sketch
        self.frame = 0
        pygame.init()
        domain = Domain.from_config(config.domain)
        self.screen = pygame.display.set_mode((int(domain.width), int(domain.height)))
        pygame.display.set_caption(f"trailsketch - {sketch.name}")
        self.clock = pygame.time.Clock()
        self.painter = Painter(self.screen, domain, pygame.font.SysFont(None, 24))
        self.capture = FrameCapture(config.capture, sketch.name)
        logger.info("Opened %dx%d window for %s sketch", domain.width, domain.height, sketch.name)

    def handle_events(self) -> bool:
        running = True
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYUP:
                running = dispatch_key(self.sketch, event.key) and running
        return running

    def render(self) -> None:
        self.painter.clear()
        self.sketch.draw(self.painter)
        pygame.display.flip()
        if self.sketch.consume_capture():
            self.capture.save(self.screen, self.frame)

    def run(self, max_frames: Optional[int] = None) -> None:
        try:
            while self.handle_events():
                self.sketch.tick()
                self.render()
                self.frame += 1
                if max_frames is not None and self.frame >= max_frames:
                    break
                self.clock.tick(self.config.fps)
        finally:
            pygame.quit()
            logger.info("Closed sketch after %d frames", self.frame)


def load_sketch_config(args: argparse.Namespace) -> SketchConfig:
    config = SketchConfig.from_yaml(args.config) if args.config else SketchConfig()
    if args.mode is not None:
        config.mode = args.mode
    if args.seed is not None:
        config.seed = args.seed
    if args.boundary is not None:
        config.dynamics.boundary_mode = args.boundary
    if args.debug:
        config.debug = True
    return config.validate()


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generative walker and strip sketches")
    parser.add_argument("--config", type=Path, default=None, help="YAML configuration file")
    parser.add_argument("--mode", choices=SKETCH_MODES, default=None)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument(
        "--boundary",
        choices=BOUNDARY_MODES,
        default=None,
        help="reflect bounces walkers off the edges; repel steers them away continuously.",
    )
    parser.add_argument("--debug", action="store_true", help="Start with debug annotations on.")
    parser.add_argument("--frames", type=int, default=None, help="Stop after this many frames.")
    parser.add_argument("--log-level", default="INFO")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    config = load_sketch_config(args)
    host = SketchHost(config, build_sketch(config))
    host.run(max_frames=args.frames)


if __name__ == "__main__":
    main()
