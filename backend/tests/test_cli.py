from sitepages.cli import load_seed_pages
from sitepages.models.page import Page
from sitepages.models.user import User


def test_seed_pages(app):
    runner = app.test_cli_runner()

    result = runner.invoke(args=["seed-pages"])

    assert result.exit_code == 0, result.output
    slugs = {page["slug"] for page in load_seed_pages()}
    assert {page.slug for page in Page.query.all()} == slugs

    again = runner.invoke(args=["seed-pages"])
    assert "Created 0 pages" in again.output


def test_seed_pages_reset(app, make_page):
    make_page(slug="old-page", title="Old")

    result = app.test_cli_runner().invoke(args=["seed-pages", "--reset"])

    assert result.exit_code == 0, result.output
    assert Page.query.filter_by(slug="old-page").first() is None


def test_seeded_pages_validate_and_resolve(app):
    from sitepages.application.cms.resolve_page import resolve_page
    from sitepages.rendering.renderers import render_page

    app.test_cli_runner().invoke(args=["seed-pages"])

    rendered = render_page(resolve_page("faq"))
    assert all(section["component"] != "unknown" for section in rendered["sections"])


def test_create_admin(app):
    runner = app.test_cli_runner()

    result = runner.invoke(
        args=["create-admin", "--email", "Owner@Example.com", "--password", "pw-123456"]
    )

    assert result.exit_code == 0, result.output
    user = User.query.filter_by(email="owner@example.com").one()
    assert user.role == "admin"
    assert user.check_password("pw-123456")

    again = runner.invoke(
        args=["create-admin", "--email", "owner@example.com", "--password", "pw-123456"]
    )
    assert "already exists" in again.output
