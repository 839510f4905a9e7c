import pygame
import pytest

from frostbloom.scenes.pointer_input import PointerInput


def ev(etype, **kw):
    return pygame.event.Event(etype, **kw)


@pytest.fixture()
def pointer():
    return PointerInput(canvas_size=(400, 200))


def test_mouse_press_move_release(pointer):
    (down,) = pointer.handle_event(ev(pygame.MOUSEBUTTONDOWN, pos=(10, 20), button=1))
    assert down.kind == "start"
    assert down.pos == (10.0, 20.0)

    (move,) = pointer.handle_event(ev(pygame.MOUSEMOTION, pos=(15, 25), rel=(5, 5), buttons=(1, 0, 0)))
    assert move.kind == "move"
    assert move.pos == (15.0, 25.0)

    (up,) = pointer.handle_event(ev(pygame.MOUSEBUTTONUP, pos=(15, 25), button=1))
    assert up.kind == "end"
    assert up.pos is None


def test_other_mouse_buttons_are_ignored(pointer):
    assert pointer.handle_event(ev(pygame.MOUSEBUTTONDOWN, pos=(1, 1), button=3)) == []
    assert pointer.handle_event(ev(pygame.MOUSEBUTTONUP, pos=(1, 1), button=3)) == []


def test_leaving_the_window_ends_the_stroke(pointer):
    (cmd,) = pointer.handle_event(ev(pygame.WINDOWLEAVE))
    assert cmd.kind == "end"


def test_touch_synthesized_mouse_events_are_dropped(pointer):
    assert pointer.handle_event(ev(pygame.MOUSEBUTTONDOWN, pos=(1, 1), button=1, touch=True)) == []


def test_finger_coordinates_scale_to_canvas(pointer):
    (down,) = pointer.handle_event(ev(pygame.FINGERDOWN, x=0.5, y=0.25, finger_id=3, touch_id=0))
    assert down.kind == "start"
    assert down.pos == pytest.approx((200.0, 50.0))

    (move,) = pointer.handle_event(ev(pygame.FINGERMOTION, x=0.75, y=0.5, finger_id=3, touch_id=0))
    assert move.pos == pytest.approx((300.0, 100.0))

    (up,) = pointer.handle_event(ev(pygame.FINGERUP, x=0.75, y=0.5, finger_id=3, touch_id=0))
    assert up.kind == "end"
    assert pointer.finger_id is None


def test_only_the_first_finger_is_followed(pointer):
    pointer.handle_event(ev(pygame.FINGERDOWN, x=0.1, y=0.1, finger_id=1, touch_id=0))
    assert pointer.handle_event(ev(pygame.FINGERDOWN, x=0.9, y=0.9, finger_id=2, touch_id=0)) == []
    assert pointer.handle_event(ev(pygame.FINGERMOTION, x=0.8, y=0.8, finger_id=2, touch_id=0)) == []
    assert pointer.handle_event(ev(pygame.FINGERUP, x=0.8, y=0.8, finger_id=2, touch_id=0)) == []
    assert pointer.finger_id == 1


def test_canvas_size_can_change(pointer):
    pointer.set_canvas_size(100, 100)
    (down,) = pointer.handle_event(ev(pygame.FINGERDOWN, x=0.5, y=0.5, finger_id=0, touch_id=0))
    assert down.pos == pytest.approx((50.0, 50.0))


def test_unrelated_events_produce_nothing(pointer):
    assert pointer.handle_event(ev(pygame.KEYDOWN, key=pygame.K_a, mod=0)) == []
