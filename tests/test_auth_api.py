from poster.models import User


async def test_register_login_and_me(client, db):
    register = await client.post(
        "/api/auth/register",
        json={"username": "carol", "password": "secret123", "name": "Carol", "email": "carol@example.com"},
    )
    assert register.status_code == 200
    assert register.json()["username"] == "carol"
    assert "passwordHash" not in register.json()

    login = await client.post("/api/auth/login", json={"username": "carol", "password": "secret123"})
    assert login.status_code == 200
    token = login.json()
    assert token["tokenType"] == "bearer"

    me = await client.get("/api/auth/me", headers={"Authorization": f"Bearer {token['accessToken']}"})
    assert me.status_code == 200
    assert me.json()["email"] == "carol@example.com"
    assert me.json()["lastLogin"] is not None


async def test_duplicate_username(client, alice):
    response = await client.post("/api/auth/register", json={"username": "alice", "password": "another1"})

    assert response.status_code == 400
    assert response.json() == {"error": "Username already exists"}


async def test_wrong_password(client, alice):
    response = await client.post("/api/auth/login", json={"username": "alice", "password": "wrong-password"})

    assert response.status_code == 401
    assert response.json() == {"error": "Incorrect username or password"}


async def test_inactive_user_token_is_rejected(client, alice):
    user, headers = alice
    await User.filter(id=user.id).update(is_active=False)

    response = await client.get("/api/auth/me", headers=headers)

    assert response.status_code == 401


async def test_password_is_hashed(alice):
    user, _ = alice
    stored = await User.get(id=user.id)

    assert stored.password_hash != "secret123"
    assert stored.verify_password("secret123")
