import json as jsonlib
from urllib.parse import urlsplit

import pytest

from notes_api import create_app
from notes_api.config import Settings
from notes_client.api import NotesApiClient
from notes_client.controller import NotesController


@pytest.fixture
def client(tmp_path):
    settings = Settings()
    settings.database_url = f"sqlite:///{tmp_path / 'notes.db'}"
    app = create_app(settings)
    app.config["TESTING"] = True
    return app.test_client()


def _create(client, title="T", content="C"):
    response = client.post("/notes", json={"title": title, "content": content})
    assert response.status_code == 201
    return response.get_json()


def test_health(client):
    assert client.get("/health").get_json() == {"status": "ok"}


def test_create_returns_server_id(client):
    note = _create(client, "First", "Body")

    assert isinstance(note["id"], int)
    assert (note["title"], note["content"]) == ("First", "Body")


def test_list_is_newest_first(client):
    first = _create(client, "one")
    second = _create(client, "two")

    notes = client.get("/notes").get_json()

    assert [n["id"] for n in notes] == [second["id"], first["id"]]


def test_empty_title_is_accepted_by_server(client):
    note = _create(client, "", "")

    assert note["title"] == ""


def test_long_title_is_rejected(client):
    response = client.post("/notes", json={"title": "x" * 121, "content": ""})

    assert response.status_code == 400
    assert response.get_json()["error"] == "invalid-request"


def test_get_missing_note(client):
    response = client.get("/notes/12345")

    assert response.status_code == 404
    assert response.get_json() == {"error": "not-found"}


def test_update_changes_fields(client):
    note = _create(client, "old", "keep")

    response = client.put(f"/notes/{note['id']}", json={"title": "new"})

    assert response.status_code == 200
    updated = response.get_json()
    assert (updated["title"], updated["content"]) == ("new", "keep")
    assert client.get(f"/notes/{note['id']}").get_json()["title"] == "new"


def test_update_missing_note(client):
    response = client.put("/notes/777", json={"title": "x", "content": ""})

    assert response.status_code == 404


def test_delete_removes_note(client):
    note = _create(client)

    response = client.delete(f"/notes/{note['id']}")

    assert response.status_code == 200
    assert client.get(f"/notes/{note['id']}").status_code == 404
    assert client.delete(f"/notes/{note['id']}").status_code == 404


class _FlaskResponse:
    def __init__(self, response, url):
        self.status_code = response.status_code
        self.content = response.get_data()
        self.text = response.get_data(as_text=True)
        self.url = url

    def json(self):
        return jsonlib.loads(self.text)


class _FlaskSession:
    """Routes NotesApiClient requests into the Flask test client."""

    def __init__(self, client):
        self.client = client

    def request(self, method, url, json=None, headers=None, timeout=None):
        response = self.client.open(urlsplit(url).path, method=method, json=json)
        return _FlaskResponse(response, url)


def test_controller_round_trip_against_dev_api(client):
    api = NotesApiClient(base_url="http://localhost:5000", session=_FlaskSession(client))
    controller = NotesController(api, confirm_delete=lambda note: True)
    controller.start()
    assert controller.state.notes == []

    controller.begin_create()
    controller.update_draft(title="Shopping", content="milk")
    assert controller.save()
    created_id = controller.state.selected_id

    controller.begin_edit()
    controller.update_draft(content="milk, eggs")
    assert controller.save()

    controller.load_all()
    state = controller.state
    assert [n.id for n in state.notes] == [created_id]
    assert state.notes[0].content == "milk, eggs"

    assert controller.delete()
    assert controller.state.notes == []
    assert controller.state.selected_id is None
