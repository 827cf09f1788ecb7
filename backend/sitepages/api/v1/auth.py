from flask import request, jsonify
from flask_jwt_extended import create_access_token
from sitepages.extensions import db
from sitepages.models.base import utcnow
from sitepages.models.user import User
from . import v1_bp


@v1_bp.route("/auth/login", methods=["POST"])
def login():
    data = request.get_json(silent=True)
    if not data:
        return jsonify({"success": False, "message": "Invalid request body"}), 400

    email = data.get("email")
    password = data.get("password")

    if not email or not password:
        return jsonify({
            "success": False,
            "message": "Please provide an email and password"
        }), 400

    user = User.query.filter_by(email=email.strip().lower()).first()

    if not user or not user.is_active or not user.check_password(password):
        return jsonify({"success": False, "message": "Invalid credentials"}), 401

    user.last_login = utcnow()
    db.session.commit()

    access_token = create_access_token(
        identity=user.id,
        additional_claims={"role": user.role}
    )

    return jsonify({
        "success": True,
        "token": access_token,
        "data": {
            "id": user.id,
            "name": user.name,
            "email": user.email,
            "role": user.role,
            "lastLogin": user.last_login.isoformat(),
        }
    }), 200
