from fastapi.testclient import TestClient

from orderstamp.main import app


def test_health():
    client = TestClient(app)
    assert client.get("/v1/health").json() == {"status": "ok"}


def test_version():
    client = TestClient(app)
    assert client.get("/v1/version").json() == {"version": "1.0.0"}


def test_version_matches_package():
    import orderstamp

    client = TestClient(app)
    assert client.get("/v1/version").json()["version"] == orderstamp.__version__
