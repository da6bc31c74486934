"""
Alumni page image carousel.

A fixed sequence of slides with exactly one active at a time. A background
ticker advances the active slide on a repeating interval until the carousel
is stopped (page teardown).
"""

import threading
import logging

logger = logging.getLogger(__name__)

SLIDES = [
    {"id": 1, "image": "images/slider1.svg"},
    {"id": 2, "image": "images/slider2.svg"},
    {"id": 3, "image": "images/slider3.svg"},
    {"id": 4, "image": "images/slider4.svg"},
    {"id": 5, "image": "images/slider5.svg"},
]


class Carousel:
    """
    Cycles through SLIDES every `interval` seconds once started.

    `on_change` is called with the new index after every advance. After
    `stop()` returns no further tick is applied.
    """

    def __init__(self, interval=3.0, slides=None, on_change=None):
        self.interval = interval
        self.slides = list(slides) if slides is not None else list(SLIDES)
        self.on_change = on_change
        self._index = 0
        self._lock = threading.Lock()
        self._stop_event = threading.Event()
        self._thread = None

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.stop()
        return False

    @property
    def index(self):
        return self._index

    @property
    def active_slide(self):
        return self.slides[self._index]

    @property
    def running(self):
        return self._thread is not None and self._thread.is_alive()

    def advance(self):
        """Move to the next slide, wrapping after the last one."""
        with self._lock:
            self._index = (self._index + 1) % len(self.slides)
            index = self._index
        if self.on_change:
            self.on_change(index)
        return index

    def index_after(self, elapsed):
        """Active index `elapsed` seconds after the rotation started at slide 0."""
        if elapsed <= 0:
            return 0
        return int(elapsed // self.interval) % len(self.slides)

    def start(self):
        if self.running:
            return
        self._stop_event.clear()
        self._thread = threading.Thread(
            target=self._run,
            daemon=True,
            name="CarouselTicker"
        )
        self._thread.start()
        logger.debug(f"Carousel started (every {self.interval}s)")

    def stop(self):
        self._stop_event.set()
        thread = self._thread
        if thread and thread.is_alive() and thread is not threading.current_thread():
            thread.join(timeout=2)
            if thread.is_alive():
                logger.warning("Carousel ticker did not stop cleanly")
        self._thread = None

    def _run(self):
        while not self._stop_event.is_set():
            self._stop_event.wait(self.interval)
            if self._stop_event.is_set():
                break
            self.advance()
        logger.debug("Carousel ticker stopped")
