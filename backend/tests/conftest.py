import pytest

from sitepages import create_app
from sitepages.extensions import db
from sitepages.models.user import User

ADMIN_EMAIL = "admin@example.com"
ADMIN_PASSWORD = "s3cret-pass"


@pytest.fixture
def app():
    app = create_app("testing")
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin_user(app):
    user = User()
    user.email = ADMIN_EMAIL
    user.name = "Admin"
    user.role = "admin"
    user.is_active = True
    user.set_password(ADMIN_PASSWORD)
    db.session.add(user)
    db.session.commit()
    return user


@pytest.fixture
def auth_headers(client, admin_user):
    response = client.post(
        "/api/v1/auth/login",
        json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD},
    )
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.get_json()['token']}"}


@pytest.fixture
def make_page(app):
    from sitepages.application.cms.create_page import create_page

    def _make_page(**overrides):
        data = {"slug": "about", "title": "About"}
        data.update(overrides)
        return create_page(actor_id="tester", data=data)

    return _make_page
