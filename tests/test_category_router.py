from sqlalchemy.exc import OperationalError

from inventory.crud.category_crud import CategoryRepository

BASE_URL = "/api/v1/categories"


def metadata_of(response):
    return response.json()["metadata"][0]


def items_of(response):
    return response.json()["categoryResponse"]["category"]


class TestCategoryRoutes:
    """HTTP surface of the category API."""

    def test_list_empty(self, client):
        response = client.get(BASE_URL)

        assert response.status_code == 200
        assert metadata_of(response) == {"type": "OK", "code": "00", "message": "Categories found"}
        assert items_of(response) == []

    def test_list(self, client, tools):
        response = client.get(BASE_URL)

        assert response.status_code == 200
        assert items_of(response) == [{"id": tools.id, "name": "Tools", "description": "Hand tools"}]

    def test_get_not_found(self, client):
        response = client.get(f"{BASE_URL}/77")

        assert response.status_code == 404
        assert metadata_of(response) == {
            "type": "NOT_FOUND",
            "code": "01",
            "message": "Category not found with ID: 77",
        }
        assert items_of(response) == []

    def test_create(self, client, repository):
        response = client.post(BASE_URL, json={"name": "Garden", "description": "Outdoor"})

        assert response.status_code == 201
        assert metadata_of(response)["message"] == "Category saved successfully"
        created = items_of(response)[0]
        assert created["name"] == "Garden"
        assert repository.find_by_id(created["id"]).description == "Outdoor"

    def test_create_ignores_client_id(self, client, repository):
        response = client.post(BASE_URL, json={"id": 500, "name": "Garden"})

        created = items_of(response)[0]
        assert response.status_code == 201
        assert created["id"] != 500
        assert repository.find_by_id(500) is None

    def test_create_requires_name(self, client, repository):
        response = client.post(BASE_URL, json={"description": "No name"})

        assert response.status_code == 422
        assert repository.find_all() == []

    def test_update_not_found(self, client):
        response = client.put(f"{BASE_URL}/9", json={"name": "X", "description": "Y"})

        assert response.status_code == 404
        assert metadata_of(response)["code"] == "01"

    def test_delete_not_found(self, client):
        response = client.delete(f"{BASE_URL}/9")

        assert response.status_code == 404
        assert metadata_of(response)["type"] == "NOT_FOUND"

    def test_delete_all(self, client, repository, tools):
        client.post(BASE_URL, json={"name": "Paint"})

        response = client.delete(BASE_URL)

        assert response.status_code == 200
        assert metadata_of(response)["message"] == "All categories deleted successfully"
        assert items_of(response) == []
        assert repository.find_all() == []

    def test_tools_lifecycle(self, client, repository, tools):
        tools_id = tools.id

        response = client.get(f"{BASE_URL}/{tools_id}")
        assert response.status_code == 200
        assert [item["id"] for item in items_of(response)] == [tools_id]

        response = client.put(
            f"{BASE_URL}/{tools_id}",
            json={"name": "Tools Pro", "description": "Updated"},
        )
        assert response.status_code == 200
        assert items_of(response)[0] == {"id": tools_id, "name": "Tools Pro", "description": "Updated"}
        assert repository.find_by_id(tools_id).name == "Tools Pro"

        response = client.delete(f"{BASE_URL}/{tools_id}")
        assert response.status_code == 200
        assert metadata_of(response)["message"] == "Category deleted successfully"

        response = client.get(f"{BASE_URL}/{tools_id}")
        assert response.status_code == 404
        assert repository.exists_by_id(tools_id) is False

    def test_update_ignores_body_id(self, client, repository, tools):
        response = client.put(f"{BASE_URL}/{tools.id}", json={"id": 321, "name": "Renamed"})

        assert response.status_code == 200
        assert items_of(response)[0]["id"] == tools.id
        assert repository.find_by_id(321) is None

    def test_db_failure_returns_500(self, client, tools, monkeypatch):
        def boom(self):
            raise OperationalError("SELECT", {}, Exception("server has gone away"))

        monkeypatch.setattr(CategoryRepository, "find_all", boom)

        response = client.get(BASE_URL)

        assert response.status_code == 500
        assert metadata_of(response) == {
            "type": "ERROR",
            "code": "-1",
            "message": "Database error while retrieving categories",
        }
        assert "gone away" not in response.text

    def test_out_of_range_id_returns_error_envelope(self, client):
        response = client.get(f"{BASE_URL}/{2 ** 64}")

        assert response.status_code == 500
        assert response.headers["content-type"] == "application/json"
        assert metadata_of(response) == {
            "type": "ERROR",
            "code": "-1",
            "message": f"Database error while searching category with ID: {2 ** 64}",
        }
        assert "Traceback" not in response.text

    def test_unexpected_failure_returns_error_envelope(self, client, monkeypatch):
        def boom(self):
            raise RuntimeError("driver exploded")

        monkeypatch.setattr(CategoryRepository, "delete_all", boom)

        response = client.delete(BASE_URL)

        assert response.status_code == 500
        assert metadata_of(response)["code"] == "-1"
        assert "exploded" not in response.text

    def test_db_failure_on_delete_keeps_records(self, client, db_session, repository, tools, monkeypatch):
        def failing_commit():
            raise OperationalError("COMMIT", {}, Exception("lock wait timeout"))

        monkeypatch.setattr(db_session, "commit", failing_commit)

        response = client.delete(f"{BASE_URL}/{tools.id}")
        monkeypatch.undo()

        assert response.status_code == 500
        assert metadata_of(response)["code"] == "-1"
        assert repository.exists_by_id(tools.id) is True
