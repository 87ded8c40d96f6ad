import pytest

from poster.models import GeneratedImage, ImageGenerationRequest


async def create(client, headers, project, prompt="a red fox", n=3):
    return await client.post(
        "/api/image-generations",
        json={"projectId": project["id"], "prompt": prompt, "numberOfImages": n},
        headers=headers,
    )


async def test_creates_one_row_per_image(client, alice, project, fake_xai):
    _, headers = alice

    response = await create(client, headers, project, n=3)

    assert response.status_code == 200
    body = response.json()
    assert body["name"] == "Fresh Title"
    assert body["numberOfImages"] == 3
    assert len(body["generatedImages"]) == 3
    assert body["generatedImages"][0]["imageGenerationRequestId"] == body["id"]
    assert fake_xai.image_calls == [{"prompt": "a red fox", "n": 3}]


@pytest.mark.parametrize("n", [0, 11])
async def test_image_count_out_of_range(client, alice, project, fake_xai, n):
    _, headers = alice

    response = await create(client, headers, project, n=n)

    assert response.status_code == 400
    assert response.json() == {"error": "Number of images must be between 1 and 10"}
    assert fake_xai.image_calls == []


async def test_prompt_is_required(client, alice, project):
    _, headers = alice

    response = await create(client, headers, project, prompt="   ")

    assert response.status_code == 400
    assert response.json() == {"error": "Prompt is required"}


async def test_upstream_failure_creates_no_images(client, alice, project, fake_xai):
    _, headers = alice
    fake_xai.fail_images = True

    response = await create(client, headers, project)

    assert response.status_code == 500
    assert await GeneratedImage.all().count() == 0


async def test_update_with_same_prompt_keeps_name(client, alice, project, fake_xai):
    _, headers = alice
    created = (await create(client, headers, project, n=2)).json()
    fake_xai.title = "Other Title"

    response = await client.put(
        f"/api/image-generations/{created['id']}", json={"prompt": "a red fox", "numberOfImages": 1}, headers=headers
    )

    assert response.status_code == 200
    assert response.json()["name"] == "Fresh Title"
    assert len(response.json()["generatedImages"]) == 1
    assert await GeneratedImage.all().count() == 1


async def test_update_with_new_prompt_renames(client, alice, project, fake_xai):
    _, headers = alice
    created = (await create(client, headers, project, n=1)).json()
    fake_xai.title = "Blue Whale"

    response = await client.put(
        f"/api/image-generations/{created['id']}", json={"prompt": "a blue whale", "numberOfImages": 2}, headers=headers
    )

    assert response.json()["name"] == "Blue Whale"
    assert response.json()["prompt"] == "a blue whale"
    assert len(response.json()["generatedImages"]) == 2


async def test_failed_update_keeps_previous_images(client, alice, project, fake_xai):
    _, headers = alice
    created = (await create(client, headers, project, n=2)).json()
    fake_xai.fail_images = True

    response = await client.put(
        f"/api/image-generations/{created['id']}", json={"prompt": "a red fox", "numberOfImages": 4}, headers=headers
    )

    assert response.status_code == 500
    assert await GeneratedImage.filter(image_generation_request_id=created["id"]).count() == 2
    stored = await ImageGenerationRequest.get(id=created["id"])
    assert stored.number_of_images == 2


async def test_other_user_cannot_update_or_delete(client, alice, bob, project, fake_xai):
    _, headers = alice
    _, bob_headers = bob
    created = (await create(client, headers, project, n=1)).json()

    update = await client.put(
        f"/api/image-generations/{created['id']}", json={"prompt": "mine now", "numberOfImages": 1}, headers=bob_headers
    )
    delete = await client.delete(f"/api/image-generations/{created['id']}", headers=bob_headers)

    assert update.status_code == 403
    assert delete.status_code == 403
    assert len(fake_xai.image_calls) == 1
    assert (await ImageGenerationRequest.get(id=created["id"])).prompt == "a red fox"


async def test_list_and_delete(client, alice, project):
    _, headers = alice
    created = (await create(client, headers, project, n=2)).json()

    listed = await client.get(f"/api/image-generations?projectId={project['id']}", headers=headers)
    assert [r["id"] for r in listed.json()] == [created["id"]]
    assert len(listed.json()[0]["generatedImages"]) == 2

    deleted = await client.delete(f"/api/image-generations/{created['id']}", headers=headers)
    assert deleted.json() == {"success": True}
    assert await GeneratedImage.all().count() == 0

    missing = await client.delete(f"/api/image-generations/{created['id']}", headers=headers)
    assert missing.status_code == 404


async def test_cannot_create_in_foreign_project(client, alice, bob, project, fake_xai):
    _, bob_headers = bob

    response = await create(client, bob_headers, project)

    assert response.status_code == 403
    assert response.json() == {"error": "Forbidden"}
    assert await ImageGenerationRequest.all().count() == 0
    assert fake_xai.image_calls == []
