from poster.models import TextSummary
from poster.services.summary_service import build_summary_prompt, search_parameters


def test_prompt_variants_name_the_word_count():
    both = build_summary_prompt("https://example.com", "extra", 200)
    website = build_summary_prompt("https://example.com", None, 200)
    text = build_summary_prompt(None, "Body text", None)

    assert "https://example.com" in both and "extra" in both and "200 words" in both
    assert "https://example.com" in website and "200 words" in website
    assert text.endswith("Body text")
    assert "150 words" in text


def test_search_mode_follows_website():
    assert search_parameters("https://example.com")["mode"] == "on"
    assert search_parameters(None) == {"mode": "auto", "return_citations": True, "sources": [{"type": "web"}]}


async def test_text_only_summary(client, alice, project, fake_xai):
    _, headers = alice

    response = await client.post(
        "/api/text-summaries",
        json={"projectId": project["id"], "textToSummarize": "Long article body", "targetWordCount": 50},
        headers=headers,
    )

    assert response.status_code == 200
    body = response.json()
    assert body["website"] is None
    assert body["summary"] == "A short summary."
    assert body["name"] == "Fresh Title"
    summary_call = fake_xai.chat_calls[-1]
    assert summary_call["model"] == "text-model"
    assert summary_call["extra_body"]["search_parameters"]["mode"] == "auto"


async def test_website_summary_forces_search(client, alice, project, fake_xai):
    _, headers = alice

    response = await client.post(
        "/api/text-summaries", json={"projectId": project["id"], "website": "https://example.com"}, headers=headers
    )

    assert response.status_code == 200
    assert fake_xai.chat_calls[-1]["extra_body"]["search_parameters"]["mode"] == "on"


async def test_requires_website_or_text(client, alice, project):
    _, headers = alice

    response = await client.post(
        "/api/text-summaries", json={"projectId": project["id"], "website": "  "}, headers=headers
    )

    assert response.status_code == 400
    assert response.json() == {"error": "Either website or text to summarize must be provided"}


async def test_requires_project(client, alice):
    _, headers = alice

    response = await client.post("/api/text-summaries", json={"textToSummarize": "x"}, headers=headers)

    assert response.status_code == 400
    assert response.json() == {"error": "Project ID is required"}


async def test_upstream_failure_keeps_record_without_summary(client, alice, project, fake_xai):
    _, headers = alice
    fake_xai.fail_chat = True

    response = await client.post(
        "/api/text-summaries", json={"projectId": project["id"], "textToSummarize": "Body"}, headers=headers
    )

    assert response.status_code == 500
    assert response.json() == {"error": "xAI is down"}
    record = await TextSummary.get(project_id=project["id"])
    assert record.summary is None


async def test_empty_completion_stores_failure_text(client, alice, project, fake_xai):
    _, headers = alice
    fake_xai.summary = None

    response = await client.post(
        "/api/text-summaries", json={"projectId": project["id"], "textToSummarize": "Body"}, headers=headers
    )

    assert response.json()["summary"] == "Failed to generate summary"


async def test_list_update_and_delete(client, alice, bob, project, fake_xai):
    _, headers = alice
    _, bob_headers = bob
    created = (
        await client.post(
            "/api/text-summaries", json={"projectId": project["id"], "textToSummarize": "Body"}, headers=headers
        )
    ).json()

    listed = await client.get(f"/api/text-summaries?projectId={project['id']}", headers=headers)
    assert [s["id"] for s in listed.json()] == [created["id"]]

    fake_xai.summary = "Updated summary."
    updated = await client.put(
        f"/api/text-summaries/{created['id']}",
        json={"website": "https://example.com", "targetWordCount": 80},
        headers=headers,
    )
    assert updated.status_code == 200
    assert updated.json()["summary"] == "Updated summary."
    assert updated.json()["website"] == "https://example.com"
    assert updated.json()["textToSummarize"] is None

    forbidden = await client.delete(f"/api/text-summaries/{created['id']}", headers=bob_headers)
    assert forbidden.status_code == 403

    deleted = await client.delete(f"/api/text-summaries/{created['id']}", headers=headers)
    assert deleted.json() == {"success": True}
    assert await TextSummary.all().count() == 0


async def test_list_requires_project_id(client, alice):
    _, headers = alice

    response = await client.get("/api/text-summaries", headers=headers)

    assert response.status_code == 400


async def test_cannot_create_in_foreign_project(client, alice, bob, project, fake_xai):
    _, bob_headers = bob

    response = await client.post(
        "/api/text-summaries", json={"projectId": project["id"], "textToSummarize": "Body"}, headers=bob_headers
    )

    assert response.status_code == 403
    assert await TextSummary.all().count() == 0
    assert fake_xai.chat_calls == []
