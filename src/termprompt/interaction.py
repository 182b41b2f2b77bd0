"""The contract every prompt implements, and the loop that drives it."""

from __future__ import annotations

from typing import Any, Optional

from .keys import Event, Key
from .logging_setup import get_logger
from .state import CANCELLED, Active, Cancel, Error, State, Submit, is_terminal
from .terminal import TerminalSession


logger = get_logger("interaction")


class PromptInteraction:
    '''
    A prompt is a state machine over Active / Error / Submit / Cancel.

    Subclasses implement `on` (one key event -> next state) and `render`
    (state -> frame). Both are pure with respect to the terminal: all I/O
    happens in `run`.
    '''

    def on(self, event: Event) -> State:
        raise NotImplementedError

    def render(self, state: State) -> str:
        raise NotImplementedError

    def handle(self, event: Event) -> State:
        if event in (Key.ESCAPE, Key.INTERRUPT):
            return Cancel()
        return self.on(event)

    def run(self, session=None) -> Any:
        '''
        Runs the prompt until it is submitted or cancelled. Returns the
        submitted value, or CANCELLED. Terminal failures propagate.
        '''
        session = session if session is not None else TerminalSession()
        name = type(self).__name__
        state: State = Active()
        logger.debug("%s started", name, extra={"event": "prompt_started", "prompt": name})

        try:
            with session:
                session.draw(self.render(state))
                while not is_terminal(state):
                    state = self.handle(session.read_key())
                    session.draw(self.render(state))
        except (OSError, EOFError):
            logger.error("%s aborted by a terminal failure", name, exc_info=True,
                         extra={"event": "terminal_failure", "prompt": name})
            raise

        if isinstance(state, Cancel):
            logger.debug("%s cancelled", name, extra={"event": "prompt_cancelled", "prompt": name})
            return CANCELLED
        logger.debug("%s submitted", name, extra={"event": "prompt_submitted", "prompt": name})
        return state.value


def submit_or_error(value: Any, error: Optional[str]) -> State:
    return Error(error) if error is not None else Submit(value)
