from swaycycle.visibility import Window


def find_next(windows: list[Window]) -> int:
    """
    The id of the window after the focused one, wrapping around to the first.
    0 if no window has focus.
    """
    seen_focused = False
    for window in windows:
        if window.focused:
            seen_focused = True
            continue
        if seen_focused:
            return window.id

    if seen_focused:
        return windows[0].id
    return 0


def find_prev(windows: list[Window]) -> int:
    if not windows:
        return 0

    prev = windows[-1].id
    for window in windows:
        if window.focused:
            return prev
        prev = window.id
    return 0
