"""
Navigation state machine over the content sequence.

``reduce_navigation`` is a pure reducer: it never mutates its input and never
touches rendering. The controller decides what to display from the result.
"""

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class NavigationState:
    current_step: int = 0
    total_steps: int = 0
    completed: bool = False  # terminal "course complete" display

    @property
    def is_first(self) -> bool:
        return self.current_step == 0

    @property
    def is_last(self) -> bool:
        return self.current_step >= self.total_steps - 1

    @property
    def progress_percent(self) -> float:
        if self.total_steps <= 0:
            return 0.0
        return (self.current_step + 1) / self.total_steps * 100


class NavigationEvent:
    """Marker base for navigation events."""


@dataclass(frozen=True)
class Next(NavigationEvent):
    pass


@dataclass(frozen=True)
class Previous(NavigationEvent):
    pass


@dataclass(frozen=True)
class JumpToStart(NavigationEvent):
    pass


@dataclass(frozen=True)
class JumpToEnd(NavigationEvent):
    pass


@dataclass(frozen=True)
class Restart(NavigationEvent):
    """The "Start Over" action on the completion screen."""


KEY_BINDINGS = {
    'ArrowRight': Next,
    'ArrowLeft': Previous,
    'Home': JumpToStart,
    'End': JumpToEnd,
}


def start_navigation(total_steps: int, current_step: int = 0) -> NavigationState:
    if total_steps < 1:
        raise ValueError('total_steps must be at least 1')
    if not 0 <= current_step < total_steps:
        raise ValueError(f'current_step {current_step} outside [0, {total_steps})')
    return NavigationState(current_step=current_step, total_steps=total_steps)


def reduce_navigation(state: NavigationState, event: NavigationEvent) -> NavigationState:
    """Apply one navigation event and return the new state."""
    last = state.total_steps - 1

    if isinstance(event, Next):
        if state.current_step < last:
            return replace(state, current_step=state.current_step + 1, completed=False)
        return replace(state, completed=True)

    if isinstance(event, Previous):
        if state.current_step > 0:
            return replace(state, current_step=state.current_step - 1, completed=False)
        return state

    if isinstance(event, (JumpToStart, Restart)):
        return replace(state, current_step=0, completed=False)

    if isinstance(event, JumpToEnd):
        return replace(state, current_step=last, completed=False)

    raise TypeError(f'Unknown navigation event: {event!r}')
