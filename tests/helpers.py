import itertools

from planner.models import PointerAction, PointerButton, PointerEvent


def counting_ids():
    counter = itertools.count(1)
    return lambda prefix: f"{prefix}_{next(counter)}"


def press(x, y, button=PointerButton.PRIMARY):
    return PointerEvent(action=PointerAction.DOWN, x=x, y=y, button=button)


def move(x, y):
    return PointerEvent(action=PointerAction.MOVE, x=x, y=y)


def release(x, y):
    return PointerEvent(action=PointerAction.UP, x=x, y=y)


def leave(x, y):
    return PointerEvent(action=PointerAction.LEAVE, x=x, y=y)
