"""Errors raised by the navigation and authentication core."""


class UnknownScreenError(ValueError):
    pass


class InvalidSessionStateError(ValueError):
    pass


class FlowStateError(RuntimeError):
    """A transition was requested from a state that cannot accept it."""
    pass
