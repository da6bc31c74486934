"""
Alumni Directory

Search, course filter, sort and incremental reveal over the static alumni
list. The filtered/sorted sequence is derived from the view state and cached
until the search term or the selected course changes.

Sort order:
    1. Batch year, newest first (largest 4-digit run in Batch, 0 if none)
    2. Records with an image before records without, for equal years
    3. Dataset order
"""

import logging
from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Optional, Sequence

from alumni_data import AlumniRecord

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 25


# ============================================================
# FILTER / SORT PIPELINE
# ============================================================

def matches_search(record: AlumniRecord, search_term: str) -> bool:
    """Case-insensitive substring match on Name. A blank term matches everything."""
    if not search_term or not search_term.strip():
        return True
    if not record.Name:
        return False
    return search_term.lower() in record.Name.lower()


def matches_course(record: AlumniRecord, selected_course: str) -> bool:
    """Exact case-insensitive match on the trimmed Course. Empty selection matches everything."""
    if not selected_course:
        return True
    if not record.Course:
        return False
    return record.Course.strip().lower() == selected_course.lower()


def sort_key(record: AlumniRecord):
    return (-record.year, 0 if record.has_image else 1)


def filter_and_sort(records: Sequence[AlumniRecord], search_term: str = "",
                    selected_course: str = "") -> List[AlumniRecord]:
    results = [
        r for r in records
        if matches_search(r, search_term) and matches_course(r, selected_course)
    ]
    # sorted() is stable, so equal keys keep dataset order
    return sorted(results, key=sort_key)


# ============================================================
# VIEW STATE
# ============================================================

@dataclass
class DirectoryViewState:
    search_term: str = ""
    selected_course: str = ""
    visible_count: int = DEFAULT_PAGE_SIZE
    carousel_index: int = 0
    carousel_started_at: float = 0.0
    search_focused: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, raw: Optional[Dict[str, Any]],
                  page_size: int = DEFAULT_PAGE_SIZE) -> "DirectoryViewState":
        """Restore state saved with to_dict(); malformed values fall back to defaults."""
        state = cls(visible_count=page_size)
        if not isinstance(raw, dict):
            return state

        if isinstance(raw.get("search_term"), str):
            state.search_term = raw["search_term"]
        if isinstance(raw.get("selected_course"), str):
            state.selected_course = raw["selected_course"]

        visible = raw.get("visible_count")
        if isinstance(visible, int) and not isinstance(visible, bool):
            state.visible_count = max(page_size, visible)

        index = raw.get("carousel_index")
        if isinstance(index, int) and not isinstance(index, bool) and index >= 0:
            state.carousel_index = index

        started = raw.get("carousel_started_at")
        if isinstance(started, (int, float)) and not isinstance(started, bool) and started > 0:
            state.carousel_started_at = float(started)

        state.search_focused = bool(raw.get("search_focused", False))
        return state


# ============================================================
# DIRECTORY
# ============================================================

class AlumniDirectory:
    """
    Owns the record list and the view state of the alumni page.

    `carousel` is optional; when given, its ticks are written to
    `state.carousel_index` and it is stopped by close().
    """

    def __init__(self, records: Sequence[AlumniRecord], page_size: int = DEFAULT_PAGE_SIZE,
                 state: Optional[DirectoryViewState] = None, carousel=None):
        self.records = list(records)
        self.page_size = page_size
        self.state = state if state is not None else DirectoryViewState(visible_count=page_size)
        self.carousel = carousel
        self._closed = False
        self._cache_key = None
        self._cache: List[AlumniRecord] = []

        if self.carousel is not None:
            self.carousel.on_change = self._on_carousel_change

    def __enter__(self):
        if self.carousel is not None:
            self.carousel.start()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False

    # ---------------- filters ----------------

    def set_search_term(self, term: Optional[str]):
        term = term or ""
        if term == self.state.search_term:
            return
        self.state.search_term = term
        self.state.visible_count = self.page_size

    def set_course(self, course: Optional[str]):
        course = course or ""
        if course == self.state.selected_course:
            return
        self.state.selected_course = course
        self.state.visible_count = self.page_size

    def submit_search(self):
        """Form submit only drops focus; filtering already follows the typed text."""
        self.state.search_focused = False

    def reset(self):
        self.state.search_term = ""
        self.state.selected_course = ""
        self.state.visible_count = self.page_size
        self.state.search_focused = True
        logger.debug("Directory filters reset")

    # ---------------- derived view ----------------

    @property
    def results(self) -> List[AlumniRecord]:
        key = (self.state.search_term, self.state.selected_course)
        if key != self._cache_key:
            self._cache = filter_and_sort(self.records, *key)
            self._cache_key = key
        return self._cache

    @property
    def filtered_count(self) -> int:
        return len(self.results)

    @property
    def visible_results(self) -> List[AlumniRecord]:
        return self.results[:self.state.visible_count]

    @property
    def has_more(self) -> bool:
        """Whether the load-more sentinel should be rendered."""
        return self.state.visible_count < self.filtered_count

    def reveal_more(self) -> List[AlumniRecord]:
        """
        Handle the sentinel becoming visible: show the next page of results.

        Returns the newly revealed records (empty when nothing is left or the
        directory has been closed).
        """
        if self._closed or not self.has_more:
            return []
        start = self.state.visible_count
        self.state.visible_count = min(start + self.page_size, self.filtered_count)
        return self.results[start:self.state.visible_count]

    def empty_message(self) -> Optional[str]:
        if self.results:
            return None
        if not self.records:
            return "No alumni data available."
        if self.state.search_term:
            return f'No alumni found matching "{self.state.search_term}".'
        if self.state.selected_course:
            return f'No alumni found for course "{self.state.selected_course}".'
        return "No alumni data available."

    # ---------------- carousel / teardown ----------------

    def _on_carousel_change(self, index: int):
        if not self._closed:
            self.state.carousel_index = index

    def sync_carousel(self, now: float) -> int:
        """
        Bring `carousel_index` up to date for a visitor who is not running the ticker.

        The first call starts the rotation clock at `now`; later calls derive
        the active slide from the time elapsed since then.
        """
        if self.carousel is None or self._closed:
            return self.state.carousel_index
        if not self.state.carousel_started_at:
            self.state.carousel_started_at = now
        self.state.carousel_index = self.carousel.index_after(now - self.state.carousel_started_at)
        return self.state.carousel_index

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self):
        if self._closed:
            return
        if self.carousel is not None:
            self.carousel.stop()
        self._closed = True
