"""Exceptions raised by termprompt."""


class TermpromptError(Exception):
    pass


class TerminalError(TermpromptError, OSError):
    """The terminal can't be used for input or output anymore."""


class PromptConfigError(TermpromptError, ValueError):
    """A prompt was built with settings it can't run with."""
