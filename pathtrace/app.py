"""Interactive window that renders the scene in horizontal bands."""

from __future__ import annotations

import argparse
import concurrent.futures
import threading
import time
from concurrent.futures import Future
from typing import List, Optional, Sequence, Tuple

import pygame

from pathtrace.display import Display
from pathtrace.raytracer import RayTracer
from pathtrace.threadpool import ThreadPool

_REFRESH_SECONDS = 0.1
_FRAME_RATE = 60


def row_bands(height: int, thread_count: int) -> List[Tuple[int, int]]:
    """Split rows ``[0, height)`` into bands from the bottom up, one per worker plus a remainder."""
    if thread_count < 1:
        raise ValueError("thread_count must be at least 1")
    band = max(1, height // thread_count)
    bands = []
    y_max = height
    y_min = y_max - band
    while y_min > 0:
        bands.append((y_min, y_max))
        y_max -= band
        y_min -= band
    if y_max >= 0:
        bands.append((0, y_max))
    return bands


class MainWindow:
    """Owns the display, framebuffer and render jobs behind the window."""

    def __init__(self, width: int = 800, height: int = 600, threaded: bool = True) -> None:
        self.threaded = threaded
        self.display = Display(width, height)
        self.framebuffer = bytearray(self.display.width * self.display.height * 4)
        self.max_depth = 1000
        self.samples_per_pixel = 50
        self._abort = threading.Event()
        self._pool: Optional[ThreadPool] = None
        self._futures: List[Future] = []
        self._needs_render = True

    @property
    def finished(self) -> bool:
        """True when no render job is still running."""
        return all(future.done() for future in self._futures)

    def _get_pool(self) -> ThreadPool:
        if self._pool is None:
            self._pool = ThreadPool()
        return self._pool

    def _wait(self) -> None:
        if self._futures:
            concurrent.futures.wait(self._futures)

    def start_render(self) -> List[Future]:
        """Start rendering the whole image; returns the futures of the band jobs."""
        tracer = RayTracer(self.max_depth, self.samples_per_pixel)
        self._futures = []
        self._needs_render = False
        if self.threaded:
            pool = self._get_pool()
            for y_min, y_max in row_bands(self.display.height, pool.thread_count):
                self._futures.append(
                    pool.submit(
                        tracer.render, self.framebuffer, self.display, y_min, y_max, self._abort
                    )
                )
        else:
            tracer.render(self.framebuffer, self.display, 0, self.display.height, self._abort)
        return list(self._futures)

    def resize(self, width: int, height: int) -> None:
        """Stop current jobs, reallocate a blank framebuffer and schedule a new render."""
        self._abort.set()
        self._wait()
        self.display = Display(width, height)
        self.framebuffer = bytearray(self.display.width * self.display.height * 4)
        self._abort.clear()
        self._needs_render = True

    def close(self) -> None:
        """Abort outstanding jobs and stop the worker pool."""
        self._abort.set()
        self._wait()
        if self._pool is not None:
            self._pool.shutdown()
            self._pool = None

    def run(self) -> None:
        """Open the window and show the image as it renders until the window is closed."""
        pygame.init()
        try:
            screen = pygame.display.set_mode(
                (self.display.width, self.display.height), pygame.RESIZABLE
            )
            pygame.display.set_caption("RayTracer")
            clock = pygame.time.Clock()
            image = None
            shown_final = False
            last_refresh = time.monotonic()
            running = True
            while running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        running = False
                    elif event.type == pygame.VIDEORESIZE:
                        self.resize(event.w, event.h)
                        screen = pygame.display.get_surface()
                        image = None
                if not running:
                    break
                if self._needs_render:
                    self.start_render()
                    shown_final = False

                now = time.monotonic()
                done = self.finished
                if image is None or (done and not shown_final) or now - last_refresh >= _REFRESH_SECONDS:
                    last_refresh = now
                    shown_final = done
                    image = pygame.image.frombuffer(
                        bytes(self.framebuffer),
                        (self.display.width, self.display.height),
                        "RGBA",
                    )

                screen.fill((0, 0, 0))
                screen.blit(image, (0, 0))
                pygame.display.flip()
                clock.tick(_FRAME_RATE)
        finally:
            self.close()
            pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="pathtrace", description="Render the demo scene in a window.")
    parser.add_argument("--width", type=int, default=800)
    parser.add_argument("--height", type=int, default=600)
    parser.add_argument("--single-thread", action="store_true", help="render on the main thread")
    args = parser.parse_args(argv)
    if args.width < 1 or args.height < 1:
        parser.error("width and height must be positive")
    MainWindow(args.width, args.height, threaded=not args.single_thread).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())