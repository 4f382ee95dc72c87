from uuid import uuid4

import asyncpg

from content_ideas import repository


def _idea(**overrides):
    row = {
        "id": uuid4(),
        "client_id": uuid4(),
        "content_ideas": '[{"headline": "Five loaves"}]',
        "research_context": '{"trends": ["sourdough"]}',
        "metadata": "{not json",
        "created_at": "2026-03-01T09:00:00+00:00",
    }
    row.update(overrides)
    return row


def test_joined_fetch_normalizes_fields(client, monkeypatch, returns, raises):
    scrape = {"id": str(uuid4()), "status": "completed"}
    monkeypatch.setattr(repository, "list_with_relations", returns([_idea(scrape=scrape, intelligence=None)]))
    monkeypatch.setattr(repository, "list_for_client", raises(AssertionError("fallback not expected")))

    response = client.get(f"/api/clients/{uuid4()}/content-ideas")
    assert response.status_code == 200
    idea = response.json()[0]
    assert idea["content_ideas"] == [{"headline": "Five loaves"}]
    assert idea["research_context"] == {"trends": ["sourdough"]}
    assert idea["metadata"] == "{not json"
    assert idea["scrape"] == scrape
    assert idea["intelligence"] is None


def test_falls_back_when_join_fails(client, monkeypatch, returns, raises):
    monkeypatch.setattr(
        repository,
        "list_with_relations",
        raises(asyncpg.UndefinedColumnError('column ci.intelligence_id does not exist')),
    )
    monkeypatch.setattr(repository, "list_for_client", returns([_idea()]))

    response = client.get(f"/api/clients/{uuid4()}/content-ideas")
    assert response.status_code == 200
    idea = response.json()[0]
    assert "scrape" not in idea
    assert idea["content_ideas"] == [{"headline": "Five loaves"}]


def test_both_queries_failing_is_500(client, monkeypatch, raises):
    monkeypatch.setattr(repository, "list_with_relations", raises(asyncpg.PostgresError("join")))
    monkeypatch.setattr(repository, "list_for_client", raises(asyncpg.PostgresError("base")))

    response = client.get(f"/api/clients/{uuid4()}/content-ideas")
    assert response.status_code == 500
    assert response.json() == {"error": "Failed to fetch content ideas", "details": "base"}
