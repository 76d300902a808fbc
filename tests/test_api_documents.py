"""HTTP tests for /documents and /health."""

from studio.core.config import Settings
from studio.main import create_app
from fastapi.testclient import TestClient


class TestDocumentsApi:

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "ok"
        assert body["nodes"] == 8
        assert body["persistence"] is False

    def test_get_forest(self, client):
        response = client.get("/documents/")
        assert response.status_code == 200
        body = response.json()
        assert [node["id"] for node in body["documents"]] == ["draft", "research", "outline"]
        assert body["documents"][0]["children"][0]["parent_id"] == "draft"
        assert body["documents"][2]["children"] is None

    def test_filtered_forest(self, client):
        body = client.get("/documents/", params={"q": "chapter"}).json()
        assert body["query"] == "chapter"
        assert [node["name"] for node in body["documents"]] == ["Draft"]
        assert len(body["documents"][0]["children"]) == 3

    def test_get_document(self, client):
        response = client.get("/documents/characters")
        assert response.status_code == 200
        assert response.json()["name"] == "Character Profiles"

    def test_get_missing_document(self, client):
        response = client.get("/documents/missing")
        assert response.status_code == 404
        assert response.json()["detail"] == "Document not found"

    def test_stats(self, client):
        body = client.get("/documents/stats").json()
        assert body == {"document_count": 6, "folder_count": 2, "total_word_count": 3180}

    def test_create_and_update(self, client):
        response = client.post("/documents/", json={"name": "  Chapter 4  ", "parent_id": "draft"})
        assert response.status_code == 201
        created = response.json()
        assert created["name"] == "Chapter 4"
        assert created["kind"] == "document"
        assert created["parent_id"] == "draft"

        response = client.patch(
            f"/documents/{created['id']}",
            json={"content": "<p>Rain</p>", "word_count": 1},
        )
        assert response.status_code == 200
        updated = response.json()
        assert updated["content"] == "<p>Rain</p>"
        assert updated["name"] == "Chapter 4"
        assert updated["word_count"] == 1

    def test_create_under_document_is_rejected(self, client):
        response = client.post("/documents/", json={"name": "Nested", "parent_id": "outline"})
        assert response.status_code == 400
        assert response.json()["detail"] == "Documents cannot have children"

    def test_create_with_blank_name_is_rejected(self, client):
        response = client.post("/documents/", json={"name": "   "})
        assert response.status_code == 422

    def test_update_missing_document(self, client):
        response = client.patch("/documents/missing", json={"name": "X"})
        assert response.status_code == 404

    def test_update_rejects_negative_word_count(self, client):
        response = client.patch("/documents/outline", json={"word_count": -3})
        assert response.status_code == 422

    def test_delete_folder(self, client):
        response = client.delete("/documents/research")
        assert response.status_code == 204
        assert client.get("/documents/characters").status_code == 404
        assert client.delete("/documents/research").status_code == 404

    def test_move(self, client):
        response = client.post("/documents/outline/move", json={"new_parent_id": "research"})
        assert response.status_code == 200
        assert response.json()["parent_id"] == "research"

        response = client.post("/documents/outline/move", json={})
        assert response.json()["parent_id"] is None

    def test_move_into_own_subtree(self, client):
        client.post("/documents/", json={"name": "Act I", "kind": "folder", "parent_id": "draft"})
        act = client.get("/documents/", params={"q": "act i"}).json()["documents"][0]["children"][0]

        before = client.get("/documents/").json()
        response = client.post("/documents/draft/move", json={"new_parent_id": act["id"]})
        assert response.status_code == 400
        assert client.get("/documents/").json() == before

    def test_move_to_missing_target(self, client):
        response = client.post("/documents/outline/move", json={"new_parent_id": "nowhere"})
        assert response.status_code == 404

    def test_snapshot_without_persistence(self, client):
        response = client.post("/documents/snapshot")
        assert response.status_code == 503


def test_unseeded_app_starts_empty():
    app = create_app(Settings(seed_sample_project=False, database_url=None, generation_delay_seconds=0))
    with TestClient(app) as client:
        assert client.get("/documents/").json() == {"documents": [], "total": 0, "query": None}
        assert client.get("/documents/stats").json()["folder_count"] == 0
