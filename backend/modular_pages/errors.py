from flask import jsonify
from werkzeug.exceptions import NotFound
from modular_pages.domain.invariants.exceptions import InvariantViolation

def register_error_handlers(app):
    @app.errorhandler(InvariantViolation)
    def handle_invariant_violation(error):
        response = jsonify({
            "error": "InvariantViolation",
            "message": str(error)
        })
        response.status_code = 400
        return response

    @app.errorhandler(NotFound)
    def handle_not_found(error):
        response = jsonify({
            "error": "NotFound",
            "message": error.description
        })
        response.status_code = 404
        return response
