from flask import current_app, jsonify
from storefront.builder.exceptions import BuilderError, PersistenceError
from storefront.domain.invariants.exceptions import InvariantViolation
from storefront.domain.lifecycle.design import IllegalTransition


def _error_response(name, message, status_code):
    response = jsonify({
        "error": name,
        "message": message
    })
    response.status_code = status_code
    return response


def register_error_handlers(app):
    @app.errorhandler(InvariantViolation)
    def handle_invariant_violation(error):
        return _error_response("InvariantViolation", str(error), 400)

    @app.errorhandler(IllegalTransition)
    def handle_illegal_transition(error):
        return _error_response("IllegalTransition", str(error), 400)

    @app.errorhandler(BuilderError)
    def handle_builder_error(error):
        current_app.logger.info("Rejected builder operation: %s", error)
        return _error_response(error.__class__.__name__, str(error), error.status_code)

    @app.errorhandler(PersistenceError)
    def handle_persistence_error(error):
        return _error_response("PersistenceError", str(error), 503)
