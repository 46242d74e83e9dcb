import click
from flask.cli import with_appcontext
from extensions import db
from models import User


@click.command("create-user")
@click.option("--email", prompt=True, help="Email address of the user")
@click.option("--name", prompt=True, help="Full name of the user")
@click.option(
    "--password",
    prompt=True,
    hide_input=True,
    confirmation_prompt=True,
    help="Password for the new user",
)
@with_appcontext
def create_user(email, name, password):
    """Create a new user who can sign in and generate posts."""
    if User.query.filter_by(email=email).first():
        click.echo(f"User {email} already exists.")
        return

    if not name or not password:
        click.echo("Name and password are required to create a new user.")
        return

    user = User(email=email, name=name)
    user.set_password(password)
    db.session.add(user)
    db.session.commit()
    click.echo(f"New user {email} created successfully.")
