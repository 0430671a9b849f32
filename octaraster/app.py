"""Command that renders a scene in the background until enter is pressed."""

from __future__ import annotations

import argparse
import threading
import time

from octaraster.renderer import Renderer, RenderLab

DEFAULT_FRAME_INTERVAL = 0.032


class RenderLoop:
    """Renders frames at a fixed interval until stopped."""

    def __init__(self, renderer: Renderer, frame_interval: float = DEFAULT_FRAME_INTERVAL) -> None:
        if frame_interval < 0:
            raise ValueError(f"frame interval must not be negative, got {frame_interval}")
        self.renderer = renderer
        self.frame_interval = frame_interval
        self.frames = 0
        self._stopped = threading.Event()

    def run(self) -> int:
        """Render until :meth:`stop` is called; return the number of frames drawn."""
        while not self._stopped.is_set():
            started = time.monotonic()
            self.renderer.frame()
            self.frames += 1
            remaining = self.frame_interval - (time.monotonic() - started)
            self._stopped.wait(max(0.0, remaining))
        return self.frames

    def stop(self) -> None:
        """Ask the loop to finish after the frame in progress."""
        self._stopped.set()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="octaraster",
                                     description="Render a wireframe scene until enter is pressed.")
    parser.add_argument("--lab", type=int, choices=[lab.value for lab in RenderLab],
                        default=RenderLab.WEEK_TWO_OPTIONAL.value, help="scene to build")
    parser.add_argument("--width", type=int, default=None, help="surface width in pixels")
    parser.add_argument("--height", type=int, default=None, help="surface height in pixels")
    args = parser.parse_args(argv)

    renderer = Renderer(RenderLab(args.lab), args.width, args.height)
    loop = RenderLoop(renderer)
    worker = threading.Thread(target=loop.run, daemon=True)
    worker.start()
    print("Press enter to kill app")
    try:
        input()
    except EOFError:
        pass
    loop.stop()
    worker.join()
    print("Update loop is exiting")
    return 0