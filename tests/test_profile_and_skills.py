from __future__ import annotations

from skillgap.database import SessionLocal
from skillgap.models.user_skill import UserSkillSet


def _register_and_login(client, email: str, password: str = "SecretPass123") -> dict[str, str]:
    r = client.post("/auth/register", json={"email": email, "password": password, "name": "Profile User"})
    assert r.status_code == 201
    r = client.post("/auth/login", json={"email": email, "password": password})
    assert r.status_code == 200
    return {"Authorization": f"Bearer {r.json()['access_token']}"}


def test_profile_get_and_partial_update(client) -> None:
    headers = _register_and_login(client, "profile@example.com")

    resp = client.get("/users/me/profile", headers=headers)
    assert resp.status_code == 200
    assert resp.json() == {
        "email": "profile@example.com",
        "name": "Profile User",
        "education": {"level": None, "institution": None, "fieldOfStudy": None, "graduationYear": None},
    }

    resp = client.put("/users/me/profile", json={"education": {"level": "Master", "institution": "Tech"}}, headers=headers)
    assert resp.status_code == 200
    body = resp.json()
    assert body["name"] == "Profile User"
    assert body["education"]["level"] == "Master"

    resp = client.put("/users/me/profile", json={"name": "Renamed"}, headers=headers)
    assert resp.json()["name"] == "Renamed"
    assert resp.json()["education"]["institution"] == "Tech"

    assert client.put("/users/me/profile", json={"name": ""}, headers=headers).status_code == 422


def test_skills_are_created_lazily(client) -> None:
    headers = _register_and_login(client, "lazy@example.com")

    resp = client.get("/users/me/skills", headers=headers)
    assert resp.status_code == 200
    assert resp.json() == {"skills": [], "interests": []}

    db = SessionLocal()
    try:
        assert db.query(UserSkillSet).count() == 1
    finally:
        db.close()


def test_saving_skills_derives_scores_and_replaces_everything(client) -> None:
    headers = _register_and_login(client, "skills@example.com")

    payload = {
        "skills": [
            {"skillName": "Python", "proficiencyLevel": "Advanced"},
            {"skillName": "SQL", "proficiencyLevel": "Beginner"},
        ],
        "interests": ["data", "  ", "ai"],
    }
    resp = client.post("/users/me/skills", json=payload, headers=headers)
    assert resp.status_code == 200
    body = resp.json()
    assert [(s["skillName"], s["proficiencyScore"]) for s in body["skills"]] == [("Python", 75), ("SQL", 25)]
    assert all(s["addedDate"] for s in body["skills"])
    assert body["interests"] == ["data", "ai"]

    resp = client.post(
        "/users/me/skills",
        json={"skills": [{"skillName": "Docker", "proficiencyLevel": "Expert"}]},
        headers=headers,
    )
    assert resp.status_code == 200
    assert [s["skillName"] for s in resp.json()["skills"]] == ["Docker"]
    assert resp.json()["interests"] == []

    again = client.get("/users/me/skills", headers=headers).json()
    assert again["skills"][0]["proficiencyScore"] == 100


def test_saving_skills_rejects_unknown_levels(client) -> None:
    headers = _register_and_login(client, "levels@example.com")
    resp = client.post(
        "/users/me/skills",
        json={"skills": [{"skillName": "Python", "proficiencyLevel": "Guru"}]},
        headers=headers,
    )
    assert resp.status_code == 422


def test_saving_skills_rejects_unencodable_text(client) -> None:
    headers = {**_register_and_login(client, "surrogate@example.com"), "Content-Type": "application/json"}

    bad_skill = b'{"skills": [{"skillName": "SQL\\udfff", "proficiencyLevel": "Beginner"}]}'
    assert client.post("/users/me/skills", content=bad_skill, headers=headers).status_code == 422

    bad_interest = b'{"skills": [], "interests": ["\\ud83d data"]}'
    assert client.post("/users/me/skills", content=bad_interest, headers=headers).status_code == 422

    assert client.get("/users/me/skills", headers=headers).json() == {"skills": [], "interests": []}
