import threading
import time

from carousel import Carousel, SLIDES


def test_five_fixed_slides():
    assert len(SLIDES) == 5
    assert Carousel().active_slide == SLIDES[0]


def test_advance_wraps_around():
    carousel = Carousel()
    seen = [carousel.advance() for _ in range(6)]
    assert seen == [1, 2, 3, 4, 0, 1]


def test_on_change_receives_new_index():
    calls = []
    carousel = Carousel(on_change=calls.append)
    carousel.advance()
    carousel.advance()
    assert calls == [1, 2]


def test_timer_advances_and_stop_cancels():
    ticked = threading.Event()
    carousel = Carousel(interval=0.01, on_change=lambda _i: ticked.set())

    carousel.start()
    assert carousel.running
    assert ticked.wait(timeout=2)
    carousel.stop()

    assert not carousel.running
    stopped_at = carousel.index
    time.sleep(0.05)
    assert carousel.index == stopped_at


def test_start_is_idempotent():
    carousel = Carousel(interval=10)
    carousel.start()
    thread = carousel._thread
    carousel.start()
    assert carousel._thread is thread
    carousel.stop()


def test_context_manager_stops_timer():
    with Carousel(interval=10) as carousel:
        assert carousel.running
    assert not carousel.running


def test_index_after_elapsed_time():
    carousel = Carousel(interval=3.0)
    assert carousel.index_after(-1) == 0
    assert carousel.index_after(0) == 0
    assert carousel.index_after(2.9) == 0
    assert carousel.index_after(3.0) == 1
    assert carousel.index_after(14.9) == 4
    assert carousel.index_after(15.0) == 0
