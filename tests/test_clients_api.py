"""
Client endpoints: CRUD, competitor URLs and the automation trigger.
"""

from uuid import uuid4

import asyncpg
import pytest

from clients import repository
from core import webhook


class TestListAndGet:

    def test_list_clients(self, client, monkeypatch, returns, client_row):
        monkeypatch.setattr(repository, "list_clients", returns([client_row]))
        response = client.get("/api/clients")
        assert response.status_code == 200
        data = response.json()
        assert len(data) == 1
        assert data[0]["website"] == "https://acme.example"

    def test_list_clients_db_error(self, client, monkeypatch, raises):
        monkeypatch.setattr(repository, "list_clients", raises(asyncpg.PostgresError("connection lost")))
        response = client.get("/api/clients")
        assert response.status_code == 500
        assert response.json() == {"error": "Failed to fetch clients", "details": "connection lost"}

    def test_get_missing_client_is_404(self, client, monkeypatch, returns):
        monkeypatch.setattr(repository, "get_client", returns(None))
        response = client.get(f"/api/clients/{uuid4()}")
        assert response.status_code == 404
        assert response.json()["error"] == "Client not found"

    def test_get_client(self, client, monkeypatch, returns, client_row):
        monkeypatch.setattr(repository, "get_client", returns(client_row))
        response = client.get(f"/api/clients/{client_row['id']}")
        assert response.status_code == 200
        assert response.json()["id"] == str(client_row["id"])

    def test_malformed_id_is_404(self, client, monkeypatch, returns):
        lookup = returns(None)
        monkeypatch.setattr(repository, "get_client", lookup)
        response = client.get("/api/clients/does-not-exist")
        assert response.status_code == 404
        assert response.json() == {"error": "Client not found", "details": None}
        assert lookup.calls == []

    def test_lookup_receives_parsed_uuid(self, client, monkeypatch, returns, client_row):
        lookup = returns(client_row)
        monkeypatch.setattr(repository, "get_client", lookup)
        client.get(f"/api/clients/{client_row['id']}")
        (called_id,), _ = lookup.calls[0]
        assert called_id == client_row["id"]


class TestCreate:

    @pytest.mark.parametrize("body", [
        {"website": "https://acme.example"},
        {"name": "Acme"},
        {"name": "  ", "website": "https://acme.example"},
        {},
    ])
    def test_name_and_website_required(self, client, monkeypatch, returns, body):
        create = returns({})
        monkeypatch.setattr(repository, "create_client", create)
        response = client.post("/api/clients", json=body)
        assert response.status_code == 400
        assert response.json()["error"] == "Name and website are required"
        assert create.calls == []

    def test_duplicate_website_is_409(self, client, monkeypatch, raises):
        exc = asyncpg.UniqueViolationError('duplicate key value violates unique constraint "clients_website_key"')
        monkeypatch.setattr(repository, "create_client", raises(exc))
        response = client.post("/api/clients", json={"name": "Acme", "website": "https://acme.example"})
        assert response.status_code == 409
        assert response.json()["error"] == "Client already exists"

    def test_other_db_error_is_500(self, client, monkeypatch, raises):
        monkeypatch.setattr(repository, "create_client", raises(asyncpg.PostgresError("boom")))
        response = client.post("/api/clients", json={"name": "Acme", "website": "https://acme.example"})
        assert response.status_code == 500
        assert response.json()["error"] == "Failed to create client"

    def test_create_defaults_status_to_active(self, client, monkeypatch, returns, client_row):
        create = returns(client_row)
        monkeypatch.setattr(repository, "create_client", create)
        response = client.post("/api/clients", json={"name": " Acme Bakery ", "website": "https://acme.example"})
        assert response.status_code == 201
        _, kwargs = create.calls[0]
        assert kwargs == {
            "name": "Acme Bakery",
            "website": "https://acme.example",
            "status": "active",
            "n8n_webhook_url": None,
        }

    def test_rejects_unknown_status(self, client):
        response = client.post(
            "/api/clients",
            json={"name": "Acme", "website": "https://acme.example", "status": "archived"},
        )
        assert response.status_code == 400

    def test_rejects_invalid_webhook_url(self, client):
        response = client.post(
            "/api/clients",
            json={"name": "Acme", "website": "https://acme.example", "n8n_webhook_url": "not a url"},
        )
        assert response.status_code == 400
        assert response.json()["error"] == "Please enter a valid webhook URL"


class TestUpdateAndDelete:

    def test_update_clears_webhook_when_absent(self, client, monkeypatch, returns, client_row):
        update = returns({**client_row, "status": "paused", "n8n_webhook_url": None})
        monkeypatch.setattr(repository, "update_client", update)
        response = client.put(f"/api/clients/{client_row['id']}", json={"status": "paused"})
        assert response.status_code == 200
        _, kwargs = update.calls[0]
        assert kwargs == {"status": "paused", "n8n_webhook_url": None}

    def test_update_missing_client_is_404(self, client, monkeypatch, returns):
        monkeypatch.setattr(repository, "update_client", returns(None))
        response = client.put(f"/api/clients/{uuid4()}", json={"status": "active"})
        assert response.status_code == 404

    def test_update_db_error_is_400(self, client, monkeypatch, raises):
        monkeypatch.setattr(repository, "update_client", raises(asyncpg.PostgresError("bad")))
        response = client.put(f"/api/clients/{uuid4()}", json={"status": "active"})
        assert response.status_code == 400
        assert response.json()["error"] == "Failed to update client"

    def test_delete(self, client, monkeypatch, returns):
        monkeypatch.setattr(repository, "delete_client", returns(True))
        response = client.delete(f"/api/clients/{uuid4()}")
        assert response.status_code == 204
        assert response.content == b""

    def test_delete_missing_is_404(self, client, monkeypatch, returns):
        monkeypatch.setattr(repository, "delete_client", returns(False))
        response = client.delete(f"/api/clients/{uuid4()}")
        assert response.status_code == 404


class TestCompetitorUrls:

    def test_saves_trimmed_non_empty_urls(self, client, monkeypatch, returns, client_row):
        update = returns(client_row)
        monkeypatch.setattr(repository, "update_competitor_urls", update)
        response = client.put(
            f"/api/clients/{client_row['id']}/competitor-urls",
            json={
                "competitor_instagram_urls": [" https://www.instagram.com/rival/ ", ""],
                "competitor_tiktok_urls": ["https://www.tiktok.com/@rival"],
            },
        )
        assert response.status_code == 200
        _, kwargs = update.calls[0]
        assert kwargs == {
            "instagram_urls": ["https://www.instagram.com/rival/"],
            "tiktok_urls": ["https://www.tiktok.com/@rival"],
        }

    def test_rejects_wrong_platform_host(self, client):
        response = client.put(
            f"/api/clients/{uuid4()}/competitor-urls",
            json={"competitor_instagram_urls": ["https://www.tiktok.com/@rival"]},
        )
        assert response.status_code == 400
        assert "instagram.com" in response.json()["error"]

    def test_rejects_more_than_five(self, client):
        urls = [f"https://www.tiktok.com/@rival{i}" for i in range(6)]
        response = client.put(
            f"/api/clients/{uuid4()}/competitor-urls",
            json={"competitor_tiktok_urls": urls},
        )
        assert response.status_code == 400
        assert response.json()["error"] == "Maximum 5 TikTok URLs allowed"


class TestTriggerAutomation:

    @pytest.fixture
    def outbound(self, monkeypatch, returns):
        post = returns(None)
        monkeypatch.setattr(webhook, "post_json", post)
        return post

    def test_paused_client_is_400_without_outbound_call(
        self, client, monkeypatch, returns, client_row, outbound
    ):
        monkeypatch.setattr(repository, "get_client", returns({**client_row, "status": "paused"}))
        response = client.post(f"/api/clients/{client_row['id']}/trigger-automation")
        assert response.status_code == 400
        assert response.json()["error"] == "Client must be active to trigger automation"
        assert outbound.calls == []

    def test_missing_webhook_is_400_without_outbound_call(
        self, client, monkeypatch, returns, client_row, outbound
    ):
        monkeypatch.setattr(repository, "get_client", returns({**client_row, "n8n_webhook_url": None}))
        response = client.post(f"/api/clients/{client_row['id']}/trigger-automation")
        assert response.status_code == 400
        assert response.json()["error"] == "Client does not have a webhook URL configured"
        assert outbound.calls == []

    def test_missing_client_is_404(self, client, monkeypatch, returns, outbound):
        monkeypatch.setattr(repository, "get_client", returns(None))
        response = client.post(f"/api/clients/{uuid4()}/trigger-automation")
        assert response.status_code == 404
        assert outbound.calls == []

    def test_malformed_id_is_404(self, client, outbound):
        response = client.post("/api/clients/does-not-exist/trigger-automation")
        assert response.status_code == 404
        assert response.json()["error"] == "Client not found"
        assert outbound.calls == []

    def test_posts_payload(self, client, monkeypatch, returns, client_row, outbound):
        monkeypatch.setattr(repository, "get_client", returns(client_row))
        response = client.post(f"/api/clients/{client_row['id']}/trigger-automation")
        assert response.status_code == 200
        assert response.json() == {"status": "triggered"}

        (url, payload), _ = outbound.calls[0]
        assert url == client_row["n8n_webhook_url"]
        assert payload["client_id"] == str(client_row["id"])
        assert payload["name"] == client_row["name"]
        assert payload["website"] == client_row["website"]
        assert payload["triggered_at"].endswith("+00:00")

    def test_webhook_failure_is_502(self, client, monkeypatch, returns, raises, client_row):
        monkeypatch.setattr(repository, "get_client", returns(client_row))
        monkeypatch.setattr(
            webhook,
            "post_json",
            raises(webhook.WebhookError("Webhook responded with 500: No body")),
        )
        response = client.post(f"/api/clients/{client_row['id']}/trigger-automation")
        assert response.status_code == 502
        assert response.json() == {
            "error": "Failed to trigger automation",
            "details": "Webhook responded with 500: No body",
        }
