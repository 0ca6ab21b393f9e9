from fittrack.extensions import db
from fittrack.models.user import User
from fittrack.utils.auth import create_token, check_password_hash, hash_password
from fittrack.utils.http import ok, error, json_body

MIN_PASSWORD_LENGTH = 8


def _auth_payload(user: User):
    return {"token": create_token(user.id), "user": user.to_dict()}


def login_handler():
    data = json_body()
    email = (data.get("email") or "").strip().lower()
    password = data.get("password") or ""
    if not email or not password:
        return error("VALIDATION_ERROR", "email and password required", 400)

    user = User.query.filter_by(email=email).first()
    if not user or not user.password or not check_password_hash(user.password, password):
        return error("INVALID_CREDENTIALS", "Email or password incorrect", 401)

    return ok(_auth_payload(user))


def register_handler():
    data = json_body()
    name = (data.get("name") or "").strip()
    email = (data.get("email") or "").strip().lower()
    password = data.get("password") or ""
    if not email or not password:
        return error("VALIDATION_ERROR", "email and password required", 400)
    if len(password) < MIN_PASSWORD_LENGTH:
        return error("VALIDATION_ERROR", f"password must be at least {MIN_PASSWORD_LENGTH} characters", 400)
    if User.query.filter_by(email=email).first():
        return error("EMAIL_IN_USE", "email already registered", 409)

    user = User(name=name or None, email=email, password=hash_password(password))
    db.session.add(user)
    db.session.commit()
    return ok(_auth_payload(user), 201)


def logout_handler():
    """
    Tokens are stateless; the client discards its copy. This endpoint only
    confirms the logout.
    """
    return ok({"message": "Logged out successfully"})
