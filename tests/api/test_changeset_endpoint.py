from unittest.mock import Mock, patch

import pytest
from fastapi.testclient import TestClient

from src.apps.api.router import get_resolver
from src.config.settings import Settings
from src.main import app
from src.models import InitialCommitError, RevisionNotFoundError, StaticDiffProvider
from src.services import ChangeSetResolver

SAMPLE_PATHS = [
    "apps/whoami/src/index.html",
    "apps/app2/Dockerfile",
    "images/gha-runner/entrypoint.sh",
]


class FailingProvider:
    """Diff provider that raises the given error."""

    repo_name = "platform"

    def __init__(self, error):
        self.error = error

    def get_changed_files(self, old_rev, new_rev="HEAD"):
        raise self.error

    def close(self):
        pass


@pytest.fixture
def client():
    app.dependency_overrides[get_resolver] = lambda: ChangeSetResolver(
        StaticDiffProvider(SAMPLE_PATHS)
    )
    yield TestClient(app)
    app.dependency_overrides.clear()


def override_with_error(error):
    app.dependency_overrides[get_resolver] = lambda: ChangeSetResolver(
        FailingProvider(error)
    )


def test_health_check(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_changeset_health_check(client):
    response = client.get("/api/changeset/health")
    assert response.status_code == 200
    assert response.json() == {"status": "changeset endpoints available"}


def test_resolve(client):
    response = client.post(
        "/api/changeset/resolve",
        json={"old_rev": "abc123", "new_rev": "def456", "path_filter": "apps"},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["modules"] == ["apps/app2", "apps/whoami"]
    assert data["path_filter"] == "apps"
    assert data["matched_files"] == 2


def test_resolve_no_matches(client):
    response = client.post(
        "/api/changeset/resolve", json={"path_filter": "charts"}
    )
    assert response.status_code == 200
    assert response.json()["modules"] == []


def test_resolve_empty_new_rev(client):
    response = client.post("/api/changeset/resolve", json={"new_rev": "  "})
    assert response.status_code == 400


def test_resolve_unknown_revision(client):
    override_with_error(RevisionNotFoundError("nope"))
    response = client.post("/api/changeset/resolve", json={"old_rev": "nope"})
    assert response.status_code == 404
    assert "Unknown revision: nope" in response.json()["detail"]


def test_resolve_initial_commit(client):
    override_with_error(InitialCommitError("abc123"))
    response = client.post("/api/changeset/resolve", json={})
    assert response.status_code == 400


def test_get_resolver_closes_provider():
    provider = Mock()
    with patch("src.apps.api.router.create_resolver_from_settings") as mock_factory:
        mock_factory.return_value = ChangeSetResolver(provider)
        dependency = get_resolver(Settings())

        resolver = next(dependency)
        assert resolver.diff_provider is provider
        provider.close.assert_not_called()

        with pytest.raises(StopIteration):
            next(dependency)

    provider.close.assert_called_once()
