"""
Tests for the FastAPI web application.
"""

import tempfile
from datetime import datetime
from pathlib import Path
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from gitlocalstats.app import app
from gitlocalstats.config import CalendarWindow
from gitlocalstats.history_calculator import HistoryResult, RepoFailure, new_histogram


@pytest.fixture
def client():
    """Create a test client for the FastAPI app."""
    return TestClient(app)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir).resolve()


@pytest.fixture
def list_path(temp_dir):
    """Point the persisted repository list at a temporary file."""
    path = temp_dir / ".gitlocalstats"
    with patch("gitlocalstats.config.REPO_LIST_FILE", str(path)):
        with patch("gitlocalstats.config.WINDOW_DAYS", None):
            with patch("gitlocalstats.config.EXCLUDED_DIRS", None):
                yield path


class TestHealthEndpoint:
    """Tests for the /health endpoint."""

    def test_health_returns_ok(self, client):
        """Health endpoint should return status ok."""
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}


class TestReposEndpoints:
    """Tests for the repository list endpoints."""

    def test_empty_list(self, client, list_path):
        response = client.get("/api/repos")

        assert response.status_code == 200
        assert response.json() == {"repos": []}

    def test_lists_stored_repos(self, client, list_path):
        list_path.write_text("/a\n/b\n")

        response = client.get("/api/repos")

        assert response.json() == {"repos": ["/a", "/b"]}

    def test_scan_adds_repositories(self, client, list_path, temp_dir):
        (temp_dir / "work" / "repo" / ".git").mkdir(parents=True)

        response = client.post("/api/repos/scan", json={"folder": str(temp_dir / "work")})

        assert response.status_code == 200
        data = response.json()
        assert data["found"] == [str(temp_dir / "work" / "repo")]
        assert data["added"] == 1
        assert list_path.read_text() == f"{temp_dir / 'work' / 'repo'}\n"

    def test_scan_missing_folder_is_bad_request(self, client, list_path, temp_dir):
        response = client.post("/api/repos/scan", json={"folder": str(temp_dir / "nope")})

        assert response.status_code == 400
        assert "Failed to read folder" in response.json()["detail"]

    def test_scan_requires_folder(self, client, list_path):
        response = client.post("/api/repos/scan", json={"folder": ""})

        assert response.status_code == 422


class TestCalendarEndpoint:
    """Tests for the /api/calendar endpoint."""

    @patch("gitlocalstats.app.calculate_history")
    def test_calendar_structure(self, mock_calculate, client, list_path):
        histogram = new_histogram(CalendarWindow())
        histogram[4] = 2
        mock_calculate.return_value = HistoryResult(
            histogram=histogram,
            now=datetime(2026, 1, 21, 12, 0),
            offset=4,
            window=CalendarWindow(),
            failures=[RepoFailure(path="/broken", message="Not a git repository")],
        )

        response = client.get("/api/calendar", params={"email": "me@example.com"})

        assert response.status_code == 200
        data = response.json()
        assert data["email"] == "me@example.com"
        assert data["window"] == {"days": 183, "weeks": 26, "end": "2026-01-21"}
        assert data["offset"] == 4
        assert data["total"] == 2
        assert data["today"] == {"week": 0, "day": 4}
        assert len(data["columns"]) == 26
        assert data["columns"]["0"] == [0, 0, 0, 0, 2, 0, 0]
        assert data["failures"] == [{"path": "/broken", "message": "Not a git repository"}]

    def test_calendar_with_no_repos(self, client, list_path):
        response = client.get("/api/calendar", params={"email": "me@example.com"})

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 0
        assert data["failures"] == []

    def test_calendar_requires_email(self, client, list_path):
        response = client.get("/api/calendar")

        assert response.status_code == 422

    def test_calendar_config_error(self, client, list_path):
        with patch("gitlocalstats.config.WINDOW_DAYS", "many"):
            response = client.get("/api/calendar", params={"email": "me@example.com"})

        assert response.status_code == 500
        assert "Configuration error" in response.json()["detail"]
