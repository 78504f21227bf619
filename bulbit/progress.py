"""Progress of a tiled render."""

from __future__ import annotations

import sys
import threading
from typing import Any, Optional, TextIO

from bulbit.async_job import AsyncJob


class RenderingProgress:
    """Counts finished tiles of a render and lets callers wait for it to end."""

    def __init__(self, resolution: tuple[int, int], tile_size: int, film: Any = None) -> None:
        if tile_size <= 0:
            raise ValueError(f"tile size must be positive, got {tile_size}")
        width, height = resolution
        self.resolution = (int(width), int(height))
        self.tile_size = tile_size
        num_tiles_x = (self.resolution[0] + tile_size - 1) // tile_size
        num_tiles_y = (self.resolution[1] + tile_size - 1) // tile_size
        self.tile_count = num_tiles_x * num_tiles_y
        self.film = film
        self.job: Optional[AsyncJob] = None
        self._tiles_done = 0
        self._lock = threading.Lock()
        self._done = threading.Event()

    def mark_tile_done(self) -> int:
        """Record one more finished tile and return the new count."""
        with self._lock:
            self._tiles_done += 1
            return self._tiles_done

    def finish(self) -> None:
        """Mark the render as complete."""
        self._done.set()

    def is_done(self) -> bool:
        return self._done.is_set()

    def num_tiles_done(self) -> int:
        with self._lock:
            return self._tiles_done

    def wait(self) -> Any:
        """Block until the render job (or the render) has finished and return the film."""
        if self.job is not None:
            self.job.wait()
        else:
            self._done.wait()
        return self.film

    def wait_and_log_progress(self, stream: Optional[TextIO] = None) -> Any:
        """Report progress to ``stream`` until the render is done, then return the film."""
        out = sys.stdout if stream is None else stream
        while not self.is_done():
            t = self.num_tiles_done()
            p = 100.0 * t / self.tile_count if self.tile_count else 100.0
            out.write(f"\rRendering.. {p:.2f}% [{t}/{self.tile_count}]")
            out.flush()
            self._done.wait(0.05)
        return self.film