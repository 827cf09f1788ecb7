import json
import os

import click
from flask import current_app

from sitepages.extensions import db
from sitepages.models.page import Page
from sitepages.models.user import User
from sitepages.application.cms.create_page import create_page

CLI_ACTOR = "cli"


def load_seed_pages(path=None):
    path = path or os.path.join(current_app.root_path, "seeds", "pages.json")
    with open(path, encoding="utf-8") as fh:
        return json.load(fh)


def seed_pages(pages, *, reset=False):
    """
    Create the given pages, skipping slugs that already exist.

    With ``reset`` every existing page is deleted first.
    Returns the slugs that were created.
    """
    if reset:
        deleted = Page.query.delete()
        db.session.commit()
        current_app.logger.info("Deleted %d existing pages", deleted)

    created = []
    for data in pages:
        if Page.query.filter_by(slug=data["slug"]).first():
            current_app.logger.info("Skipping existing page %s", data["slug"])
            continue
        page = create_page(actor_id=CLI_ACTOR, data=data)
        created.append(page.slug)

    return created


def register_commands(app):
    @app.cli.command("init-db")
    def init_db_command():
        """Create all tables (use `flask db upgrade` once migrations exist)."""
        db.create_all()
        click.echo("Database tables created")

    @app.cli.command("seed-pages")
    @click.option("--reset", is_flag=True, help="Delete all pages before seeding.")
    @click.option(
        "--file",
        "path",
        type=click.Path(exists=True, dir_okay=False),
        default=None,
        help="JSON file with a list of pages; defaults to the bundled seeds.",
    )
    def seed_pages_command(reset, path):
        """Load the default site pages."""
        created = seed_pages(load_seed_pages(path), reset=reset)
        click.echo(f"Created {len(created)} pages: {', '.join(created) or '-'}")

    @app.cli.command("create-admin")
    @click.option("--email", default=None, help="Defaults to ADMIN_EMAIL.")
    @click.option("--name", default="Admin User")
    @click.option("--password", default=None, help="Defaults to ADMIN_PASSWORD, else prompts.")
    def create_admin_command(email, name, password):
        """Create the admin account used to log into the dashboard."""
        email = (email or current_app.config["ADMIN_EMAIL"]).strip().lower()
        password = password or current_app.config.get("ADMIN_PASSWORD")
        if not password:
            password = click.prompt("Password", hide_input=True, confirmation_prompt=True)

        if User.query.filter_by(email=email).first():
            click.echo(f"Admin user {email} already exists")
            return

        user = User()
        user.email = email
        user.name = name
        user.role = "admin"
        user.is_active = True
        user.set_password(password)

        db.session.add(user)
        db.session.commit()
        current_app.logger.info("Created admin user %s", email)
        click.echo(f"Admin user {email} created")
