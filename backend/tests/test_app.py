import pytest
from fastapi.testclient import TestClient

from outreach.config import settings
from outreach.main import app
from outreach.models.user import User


class TestHealth:
    def test_health(self, client):
        r = client.get("/health")
        assert r.status_code == 200
        assert r.json()["status"] == "ok"


class TestLifespan:
    def test_startup_builds_store_and_seeds_admin(self, tmp_path, monkeypatch):
        monkeypatch.setattr(settings, "database_url", f"sqlite:///{tmp_path / 'startup.db'}")
        app.state.store = None
        with TestClient(app) as c:
            assert c.get("/api/jobs").json()["total"] == 0
            db = app.state.store.session()
            try:
                assert db.query(User).filter(User.username == settings.admin_username).count() == 1
            finally:
                db.close()
        assert app.state.store is None

    def test_startup_fails_fast_without_store(self, tmp_path, monkeypatch):
        missing_dir = tmp_path / "does-not-exist" / "db.sqlite"
        monkeypatch.setattr(settings, "database_url", f"sqlite:///{missing_dir}")
        app.state.store = None
        with pytest.raises(Exception):
            with TestClient(app):
                pass
        app.state.store = None
