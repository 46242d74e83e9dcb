from flask import (
    Blueprint,
    render_template,
    redirect,
    url_for,
    flash,
    request,
    jsonify,
)
from flask_login import login_user, logout_user, login_required, current_user
from urllib.parse import urlparse
import logging

from extensions import db
from models import User

# Set up logging
logger = logging.getLogger(__name__)

bp = Blueprint("auth", __name__, url_prefix="/auth")


@bp.route("/register", methods=["GET", "POST"])
def register():
    """Register a new user."""
    if current_user.is_authenticated:
        return redirect(url_for("main.index"))

    if request.method == "POST":
        email = request.form.get("email")
        password = request.form.get("password")
        name = request.form.get("name")

        if not email or not password or not name:
            flash("Email, password, and name are required.", "error")
            return render_template("auth/register.html")

        # Check if user already exists
        existing_user = User.query.filter_by(email=email).first()
        if existing_user:
            flash("Email already registered.", "error")
            return render_template("auth/register.html")

        user = User(email=email, name=name)
        user.set_password(password)

        db.session.add(user)
        db.session.commit()
        logger.info(f"Registered new user {user.id}")

        flash("Registration successful! Please log in.", "success")
        return redirect(url_for("auth.login"))

    return render_template("auth/register.html")


@bp.route("/login", methods=["GET", "POST"])
def login():
    """Log in an existing user with form fields or a JSON body."""
    if current_user.is_authenticated:
        if request.is_json:
            return jsonify({"id": current_user.id, "email": current_user.email})
        return redirect(url_for("main.index"))

    if request.method == "POST":
        if request.is_json:
            data = request.get_json(silent=True) or {}
            email = data.get("email")
            password = data.get("password")
            remember_me = bool(data.get("remember_me"))
        else:
            email = request.form.get("email")
            password = request.form.get("password")
            remember_me = bool(request.form.get("remember_me"))

        if not email or not password:
            if request.is_json:
                return jsonify({"error": "Email and password are required."}), 400
            flash("Email and password are required.", "error")
            return render_template("auth/login.html")

        # Validate user credentials
        user = User.query.filter_by(email=email).first()
        if not user or not user.check_password(password):
            logger.warning(f"Failed login attempt for {email}")
            if request.is_json:
                return jsonify({"error": "Invalid email or password."}), 401
            flash("Invalid email or password.", "error")
            return render_template("auth/login.html")

        login_user(user, remember=remember_me)

        if request.is_json:
            return jsonify({"id": user.id, "email": user.email})

        next_page = request.args.get("next")
        if not next_page or urlparse(next_page).netloc != "":
            next_page = url_for("main.index")

        return redirect(next_page)

    # For GET requests, pass the 'next' parameter to the template
    next_url_for_template = request.args.get("next")
    return render_template("auth/login.html", next_url=next_url_for_template)


@bp.route("/logout")
@login_required
def logout():
    """Log out the current user."""
    logout_user()
    return redirect(url_for("auth.login"))
