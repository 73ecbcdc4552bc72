"""Background render worker publishing grid snapshots."""

import threading
import time
from dataclasses import dataclass
from typing import Callable

import structlog

from .generation.config import RenderConfig
from .generation.declaration import MapDeclaration
from .generation.generator import render_config
from .state import MapInstance

logger = structlog.get_logger()


@dataclass
class WorkerConfig:
    """Configuration for render worker timing."""

    min_frame_ms: int = 16


# Type alias for per-frame callbacks, invoked on the worker thread
FrameCallback = Callable[[MapInstance], None]


class RenderWorker:
    """
    Re-renders a declaration on a dedicated thread and publishes the latest
    grid into a slot guarded by a lock.

    Status updates (seed and geometry for the next frame) go through a
    single-slot mailbox: the worker takes and clears it at the start of each
    frame, keeping the previous status if nothing is pending. A second update
    before the worker takes the first replaces it.

    Usage:
        worker = RenderWorker(declaration, RenderConfig(seed=0))
        worker.start()

        # From any thread:
        worker.set_new_status(RenderConfig(seed=1))
        grid = worker.get_current_snapshot()

        worker.stop()
        worker.join()
    """

    def __init__(
        self,
        declaration: MapDeclaration,
        status: RenderConfig | None = None,
        config: WorkerConfig | None = None,
        on_frame: FrameCallback | None = None,
    ):
        self.declaration = declaration
        self.config = config or WorkerConfig()
        self.on_frame = on_frame

        self._lock = threading.Lock()
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None
        self._running = False

        # Guarded by _lock
        self._status = status or RenderConfig()
        self._pending_status: RenderConfig | None = None
        self._current: MapInstance | None = None
        self._frames = 0

        self._error: BaseException | None = None

    @property
    def is_running(self) -> bool:
        """Whether the worker thread is active."""
        return self._running

    @property
    def frames_rendered(self) -> int:
        """Number of frames published so far."""
        with self._lock:
            return self._frames

    @property
    def current_status(self) -> RenderConfig:
        """Status used for the most recent frame."""
        with self._lock:
            return self._status

    def start(self) -> None:
        """Launch the worker thread.

        Raises:
            RuntimeError: If the worker is already running.
        """
        if self._thread is not None and self._thread.is_alive():
            raise RuntimeError("Render worker already running")

        self._running = True
        self._stop_event.clear()
        self._error = None
        self._thread = threading.Thread(
            target=self._run, name="render-worker", daemon=True
        )
        self._thread.start()

    def stop(self) -> None:
        """Signal the worker to stop after its current frame."""
        self._running = False
        self._stop_event.set()

    def join(self, timeout: float | None = None) -> None:
        """Wait for the worker thread to exit.

        Raises:
            Exception: Whatever error stopped the worker, if any.
        """
        if self._thread is not None:
            self._thread.join(timeout)
        if self._error is not None:
            raise self._error

    def set_new_status(self, status: RenderConfig) -> None:
        """Deposit the status for the next frame, replacing any pending one."""
        with self._lock:
            self._pending_status = status

    def get_current_snapshot(self) -> MapInstance | None:
        """Latest published grid, or None before the first frame.

        Grids are immutable, so the returned instance is safe to read while
        the worker keeps rendering.
        """
        with self._lock:
            return self._current

    def _take_status(self) -> RenderConfig:
        """Take and clear the pending status, falling back to the previous one."""
        with self._lock:
            if self._pending_status is not None:
                self._status = self._pending_status
                self._pending_status = None
                logger.debug("status_taken", seed=self._status.seed)
            return self._status

    def _run(self) -> None:
        """Worker thread body."""
        logger.info("render_worker_started", min_frame_ms=self.config.min_frame_ms)

        try:
            while self._running:
                frame_start = time.monotonic()

                status = self._take_status()
                pending = render_config(self.declaration, status)

                with self._lock:
                    self._current = pending
                    self._frames += 1
                    frame_id = self._frames

                if self.on_frame:
                    self.on_frame(pending)

                elapsed_ms = (time.monotonic() - frame_start) * 1000
                logger.debug(
                    "frame_rendered",
                    frame_id=frame_id,
                    seed=status.seed,
                    duration_ms=elapsed_ms,
                )

                # Floor sleep so cheap renders don't spin
                remaining_ms = self.config.min_frame_ms - elapsed_ms
                if remaining_ms > 0:
                    self._stop_event.wait(timeout=remaining_ms / 1000)

        except Exception as e:
            logger.error("render_worker_failed", error=str(e))
            self._error = e

        finally:
            self._running = False
            logger.info("render_worker_stopped", frames=self._frames)
