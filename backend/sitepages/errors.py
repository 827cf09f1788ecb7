from flask import jsonify
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException
from sitepages.extensions import db, jwt
from sitepages.domain.exceptions import CmsError


def error_response(message, status_code):
    response = jsonify({
        "success": False,
        "message": message
    })
    response.status_code = status_code
    return response


def register_error_handlers(app):
    @app.errorhandler(CmsError)
    def handle_cms_error(error):
        return error_response(error.message, error.status_code)

    @app.errorhandler(HTTPException)
    def handle_http_exception(error):
        return error_response(error.description, error.code)

    @app.errorhandler(SQLAlchemyError)
    def handle_database_error(error):
        db.session.rollback()
        app.logger.exception("Database error: %s", error)
        return error_response("Internal server error", 500)

    @jwt.unauthorized_loader
    def handle_missing_token(reason):
        return error_response(reason, 401)

    @jwt.invalid_token_loader
    def handle_invalid_token(reason):
        return error_response(reason, 401)

    @jwt.expired_token_loader
    def handle_expired_token(jwt_header, jwt_payload):
        return error_response("Token has expired", 401)
