from typing import Any, Dict, List, Optional

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from poster.app import create_app
from poster.core.db import close_db, init_db
from poster.schemas.user import UserCreate
from poster.services.auth_service import AuthService
from poster.services.blob_service import get_blob_client
from poster.services.leonardo_service import LeonardoError, get_leonardo_client
from poster.services.naming_service import TITLE_SYSTEM_PROMPT
from poster.services.reference_service import ReferenceDataService
from poster.services.xai_service import XAIError, get_xai_client


class FakeXAI:
    naming_model = "naming-model"
    text_model = "text-model"

    def __init__(self) -> None:
        self.chat_calls: List[Dict[str, Any]] = []
        self.image_calls: List[Dict[str, Any]] = []
        self.title = "Fresh Title"
        self.summary: Optional[str] = "A short summary."
        self.fail_chat = False
        self.fail_naming = False
        self.fail_images = False

    async def chat(self, system_prompt, user_content, *, model=None, extra_body=None):
        self.chat_calls.append(
            {"system": system_prompt, "user": user_content, "model": model, "extra_body": extra_body}
        )
        if system_prompt == TITLE_SYSTEM_PROMPT:
            if self.fail_naming:
                raise XAIError("Naming model unavailable")
            return self.title
        if self.fail_chat:
            raise XAIError("xAI is down")
        return self.summary

    async def generate_images(self, prompt, n):
        self.image_calls.append({"prompt": prompt, "n": n})
        if self.fail_images:
            raise XAIError("Image generation failed: upstream error")
        return [f"https://img.example/{len(self.image_calls)}/{i}.png" for i in range(n)]


class FakeLeonardo:
    def __init__(self) -> None:
        self.uploads: List[str] = []
        self.payloads: List[Dict[str, Any]] = []
        self.fail = False

    async def upload_init_image(self, filename, content, content_type=None):
        self.uploads.append(filename)
        return f"init-{len(self.uploads)}"

    async def generate(self, payload):
        self.payloads.append(payload)
        if self.fail:
            raise LeonardoError("Image generation failed")
        return [
            {"url": f"https://leo.example/{len(self.payloads)}/{i}.jpg"} for i in range(payload["num_images"])
        ]


class FakeBlob:
    def __init__(self) -> None:
        self.keys: List[str] = []

    async def put(self, pathname, content, content_type=None):
        self.keys.append(pathname)
        return f"https://blob.example/{pathname}"


@pytest_asyncio.fixture
async def db():
    await init_db("sqlite://:memory:")
    await ReferenceDataService.initialize_defaults()
    yield
    await close_db()


@pytest.fixture
def fake_xai():
    return FakeXAI()


@pytest.fixture
def fake_leonardo():
    return FakeLeonardo()


@pytest.fixture
def fake_blob():
    return FakeBlob()


@pytest.fixture
def app(db, fake_xai, fake_leonardo, fake_blob):
    app = create_app(init_database=False)
    app.dependency_overrides[get_xai_client] = lambda: fake_xai
    app.dependency_overrides[get_leonardo_client] = lambda: fake_leonardo
    app.dependency_overrides[get_blob_client] = lambda: fake_blob
    return app


@pytest_asyncio.fixture
async def client(app):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client


async def make_user(username: str):
    user = await AuthService.create_user(UserCreate(username=username, password="secret123"))
    token = AuthService.create_access_token(user.id)
    return user, {"Authorization": f"Bearer {token}"}


@pytest_asyncio.fixture
async def alice(db):
    return await make_user("alice")


@pytest_asyncio.fixture
async def bob(db):
    return await make_user("bob")


@pytest_asyncio.fixture
async def project(client, alice):
    _, headers = alice
    response = await client.post("/api/projects", json={"name": "Launch", "description": "Spring launch"}, headers=headers)
    assert response.status_code == 200
    return response.json()
