import pytest
from flask_jwt_extended import create_access_token

from storefront import create_app
from storefront.extensions import db
from storefront.gateway import InMemoryDesignGateway
from storefront.models.seller import Seller


class FakeTimer:
    """Stand-in for threading.Timer that only fires when told to."""

    created = []

    def __init__(self, interval, function, args=None):
        self.interval = interval
        self.function = function
        self.args = args or ()
        self.daemon = False
        self.started = False
        self.cancelled = False
        FakeTimer.created.append(self)

    def start(self):
        self.started = True

    def cancel(self):
        self.cancelled = True

    def fire(self):
        self.function(*self.args)


@pytest.fixture
def fake_timers():
    FakeTimer.created = []
    yield FakeTimer
    FakeTimer.created = []


@pytest.fixture
def gateway():
    return InMemoryDesignGateway()


@pytest.fixture
def app():
    app = create_app("testing")
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()
    app.extensions["builder_sessions"].close_all()


@pytest.fixture
def client(app):
    return app.test_client()


def _make_seller(name, slug, is_active=True):
    seller = Seller()
    seller.name = name
    seller.slug = slug
    seller.is_active = is_active
    db.session.add(seller)
    db.session.commit()
    return seller.id


@pytest.fixture
def seller_id(app):
    return _make_seller("Acme Goods", "acme-goods")


@pytest.fixture
def other_seller_id(app):
    return _make_seller("Other Shop", "other-shop")


def auth_headers(seller_id, role="seller"):
    token = create_access_token(identity=seller_id, additional_claims={"role": role})
    return {
        "Authorization": f"Bearer {token}",
        "X-Seller-ID": seller_id,
    }


@pytest.fixture
def headers(seller_id):
    return auth_headers(seller_id)


@pytest.fixture
def admin_headers(seller_id):
    return auth_headers(seller_id, role="admin")
