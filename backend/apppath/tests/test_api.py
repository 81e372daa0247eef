"""
API integration tests using FastAPI TestClient.
"""

import pytest
from fastapi.testclient import TestClient

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from apppath.api.server import app, get_directories
from apppath.config import DirectoriesConfig


@pytest.fixture
def directories(tmp_path):
    """Application directories inside a temp dir."""
    install = tmp_path / "install"
    storage = tmp_path / "storage"
    (install / "res").mkdir(parents=True)
    storage.mkdir()
    (install / "res" / "x.json").write_text('{"a": 1}', encoding="utf-8")
    (install / "res" / "y.txt").write_text("y", encoding="utf-8")
    (storage / "latin1.txt").write_bytes(b"\xff\xfe")
    return DirectoriesConfig(installation_dir=str(install), storage_dir=str(storage))


@pytest.fixture
def client(directories):
    """Create a test client mapping virtual schemes onto the temp dir."""
    app.dependency_overrides[get_directories] = lambda: directories
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestHealthEndpoint:
    """Tests for /health endpoint."""

    def test_health_check(self, client):
        """Test health check returns OK."""
        response = client.get("/health")
        assert response.status_code == 200

        data = response.json()
        assert data["status"] == "ok"
        assert data["data"]["backend"] == "fastapi"
        assert data["data"]["platform"] in ("posix", "windows")


class TestPathEndpoints:
    """Tests for /paths/* endpoints."""

    def test_normalize_posix(self, client):
        response = client.post(
            "/paths/normalize", json={"path": "a/./b/../c", "platform": "posix"}
        )
        assert response.status_code == 200

        data = response.json()
        assert data["status"] == "ok"
        assert data["data"] == {"path": "a/c", "platform": "posix"}

    def test_normalize_windows(self, client):
        response = client.post(
            "/paths/normalize", json={"path": "a/./b/../c", "platform": "windows"}
        )
        data = response.json()
        assert data["data"]["path"] == "a\\c"

    def test_unknown_platform(self, client):
        response = client.post(
            "/paths/normalize", json={"path": "a", "platform": "vms"}
        )
        assert response.status_code == 200

        data = response.json()
        assert data["status"] == "error"
        assert data["error_code"] == "INVALID_INPUT"

    def test_missing_field_rejected(self, client):
        response = client.post("/paths/normalize", json={"platform": "posix"})
        assert response.status_code == 422

    def test_resolve(self, client):
        response = client.post(
            "/paths/resolve",
            json={"paths": ["/a/b", "../../../x"], "platform": "posix"}
        )
        data = response.json()
        assert data["status"] == "ok"
        assert data["data"]["path"] == "/x"

    def test_resolve_with_cwd(self, client):
        response = client.post(
            "/paths/resolve",
            json={"paths": ["foo"], "platform": "windows", "cwd": "D:\\work"}
        )
        assert response.json()["data"]["path"] == "D:\\work\\foo"

    def test_relative(self, client):
        response = client.post(
            "/paths/relative",
            json={"from_path": "/a/b/c", "to_path": "/a/d", "platform": "posix"}
        )
        data = response.json()
        assert data["status"] == "ok"
        assert data["data"]["path"] == "../../d"

    def test_relative_with_empty_cwd(self, client):
        response = client.post(
            "/paths/relative",
            json={"from_path": "a", "to_path": "b", "platform": "posix", "cwd": ""}
        )
        assert response.json()["data"]["path"] == "../b"

    def test_relative_windows(self, client):
        response = client.post(
            "/paths/relative",
            json={
                "from_path": "C:\\orandea\\test\\aaa",
                "to_path": "C:\\orandea\\impl\\bbb",
                "platform": "windows"
            }
        )
        assert response.json()["data"]["path"] == "..\\..\\impl\\bbb"

    def test_path_info(self, client, directories):
        response = client.get("/paths/info", params={"url": "app://res/x.json"})
        data = response.json()
        assert data["status"] == "ok"

        info = data["data"]
        assert info["url"] == "app://res/x.json"
        assert info["scheme"] == "app"
        assert info["path"] == "/res/x.json"
        assert info["name"] == "x.json"
        assert info["extension"] == ".json"
        assert info["parent"] == "app://res"
        assert Path(info["native_path"]) == Path(directories.installation_dir) / "res" / "x.json"

    def test_path_info_root(self, client):
        response = client.get("/paths/info", params={"url": "app-storage://"})
        info = response.json()["data"]
        assert info["url"] == "app-storage://"
        assert info["parent"] is None


class TestFileEndpoints:
    """Tests for /files/* endpoints."""

    def test_read(self, client):
        response = client.get("/files/read", params={"url": "app://res/x.json"})
        data = response.json()
        assert data["status"] == "ok"
        assert data["data"]["text"] == '{"a": 1}'

    def test_read_missing(self, client):
        response = client.get("/files/read", params={"url": "app://res/nope.json"})
        data = response.json()
        assert data["status"] == "error"
        assert data["error_code"] == "NOT_FOUND"

    def test_read_not_utf8(self, client):
        response = client.get("/files/read", params={"url": "app-storage://latin1.txt"})
        data = response.json()
        assert data["status"] == "error"
        assert data["error_code"] == "INVALID_INPUT"

    def test_list(self, client):
        response = client.get("/files/list", params={"url": "app://res"})
        data = response.json()
        assert data["status"] == "ok"
        assert data["data"]["url"] == "app://res"

        names = [entry.rsplit("/", 1)[-1] for entry in data["data"]["entries"]]
        assert names == ["x.json", "y.txt"]
        assert all(entry.startswith("file:") for entry in data["data"]["entries"])

    def test_list_missing(self, client):
        response = client.get("/files/list", params={"url": "app://missing"})
        data = response.json()
        assert data["status"] == "error"
        assert data["error_code"] == "NOT_FOUND"

    def test_info_file(self, client):
        response = client.get("/files/info", params={"url": "app://res/y.txt"})
        info = response.json()["data"]
        assert info["exists"] is True
        assert info["is_file"] is True
        assert info["is_directory"] is False
        assert info["size"] == 1
        assert info["modified"] is not None

    def test_info_directory(self, client):
        response = client.get("/files/info", params={"url": "app://res"})
        info = response.json()["data"]
        assert info["is_directory"] is True
        assert info["is_file"] is False

    def test_info_missing(self, client):
        response = client.get("/files/info", params={"url": "app-storage://nope"})
        data = response.json()
        assert data["status"] == "ok"
        assert data["data"]["exists"] is False
        assert data["data"]["size"] is None


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
