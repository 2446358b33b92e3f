import pytest

from viengine.events import EventDispatcher, KeyPressedEvent
from viengine.keycodes import EKeyCode
from viengine.window import HeadlessWindow, WindowData


class _Config:
    width = 320
    height = 200


def test_init_records_size_and_opens():
    window = HeadlessWindow()
    assert window.init(_Config(), EventDispatcher()) is True
    assert (window.data.width, window.data.height) == (320, 200)
    assert window.is_open


def test_close_sets_should_close():
    window = HeadlessWindow()
    window.init(_Config(), EventDispatcher())
    assert window.should_close() is False
    window.close()
    assert window.should_close() is True


def test_posted_events_reach_dispatcher_on_poll():
    dispatcher = EventDispatcher()
    seen = []
    dispatcher.add_event_listener(KeyPressedEvent, lambda e: seen.append(e) or False)
    window = HeadlessWindow()
    window.init(_Config(), dispatcher)
    event = KeyPressedEvent(EKeyCode.A.value)
    window.post_event(event)
    assert seen == []
    window.poll_events()
    assert seen == [event]
    window.poll_events()
    assert seen == [event]


def test_post_rejects_non_events():
    with pytest.raises(TypeError):
        HeadlessWindow().post_event("key")


def test_clock_and_swap_buffers():
    window = HeadlessWindow(clock=lambda: 2.5)
    window.init(_Config(), EventDispatcher())
    assert window.time_seconds() == 2.5
    window.swap_buffers()
    window.swap_buffers()
    assert window.frames_presented == 2


def test_input_state_comes_from_data():
    window = HeadlessWindow()
    assert window.input_state is window.data.input
    assert isinstance(WindowData().width, int)