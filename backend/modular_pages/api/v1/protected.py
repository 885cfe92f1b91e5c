from flask import jsonify, g
from flask_jwt_extended import jwt_required, get_jwt_identity, get_jwt
from modular_pages.domain.auth_state import AuthState
from . import v1_bp


@v1_bp.route("/auth/me", methods=["GET"])
@jwt_required()
def me():
    return jsonify({
        "user_id": get_jwt_identity(),
        "role": get_jwt().get("role"),
        "auth_state": g.get("auth_state", AuthState.PENDING).value,
    }), 200
