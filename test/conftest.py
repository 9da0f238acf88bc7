import pytest

from .. import create_app
from ..extensions import db


##################################
#单元测试创建运行环境（内存 SQLite，每个用例独立建表）
@pytest.fixture()
def app():
    app = create_app("testing")
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


class FakeHasher:
    """可预测的哈希器，避免在服务层测试里付出真实哈希的开销"""

    def hash(self, password):
        return f"hashed:{password}"

    def verify(self, password, password_hash):
        return password_hash == f"hashed:{password}"


class FakeSanitizer:
    def __init__(self):
        self.calls = []

    def clean(self, value):
        self.calls.append(value)
        return (value or "").replace("<", "&lt;").replace(">", "&gt;")


@pytest.fixture()
def fake_hasher():
    return FakeHasher()


@pytest.fixture()
def fake_sanitizer():
    return FakeSanitizer()


@pytest.fixture()
def seeded_user(app):
    from ..repositories import user_repo
    return user_repo.insert_user(
        user_name="dunder",
        password_hash="hashed:Passw0rd!",
        full_name="Dunder Mifflin",
        nickname="dm",
    )
##################################
