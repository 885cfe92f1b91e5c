from enum import Enum


class AuthState(str, Enum):
    """
    What the renderer knows about the viewer.

    PENDING means the gate has not resolved yet; gated content renders
    nothing in that state rather than guessing.
    """
    AUTHENTICATED = "authenticated"
    ANONYMOUS = "anonymous"
    PENDING = "pending"

    @property
    def is_resolved(self) -> bool:
        return self is not AuthState.PENDING
