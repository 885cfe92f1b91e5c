from flask import g
from flask_jwt_extended import verify_jwt_in_request
from flask_jwt_extended.exceptions import JWTExtendedException
from jwt.exceptions import PyJWTError
from modular_pages.domain.auth_state import AuthState


def resolve_auth_state():
    """
    Viewer's auth state from an optional bearer token.

    A missing, malformed or expired token means ANONYMOUS; the request
    itself is never rejected here.
    """
    try:
        jwt_data = verify_jwt_in_request(optional=True)
    except (JWTExtendedException, PyJWTError):
        return AuthState.ANONYMOUS

    return AuthState.AUTHENTICATED if jwt_data else AuthState.ANONYMOUS


def auth_middleware(app):
    @app.before_request
    def load_auth_state():
        g.auth_state = resolve_auth_state()
