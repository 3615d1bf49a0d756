PROFILE = {
    "name": "John Doe",
    "email": "john.doe@example.com",
    "education": "BSc Computer Science",
    "github_link": "https://github.com/johndoe",
}


class TestProfile:
    def test_missing_profile(self, client):
        assert client.get("/api/profile").status_code == 404
        assert client.put("/api/profile", json={"name": "x"}).status_code == 404

    def test_create_profile(self, client):
        r = client.post("/api/profile", json=PROFILE)
        assert r.status_code == 201
        data = r.json()
        assert data["name"] == "John Doe"
        assert data["skills"] == []
        assert data["work_experience"] == []

    def test_name_and_email_required(self, client):
        assert client.post("/api/profile", json={"name": "John"}).status_code == 422

    def test_only_one_profile(self, client):
        client.post("/api/profile", json=PROFILE)
        r = client.post("/api/profile", json={**PROFILE, "email": "other@example.com"})
        assert r.status_code == 409

    def test_update_profile(self, client):
        client.post("/api/profile", json=PROFILE)
        r = client.put("/api/profile", json={"education": "MSc Data Science"})
        assert r.status_code == 200
        assert r.json()["education"] == "MSc Data Science"
        assert r.json()["email"] == PROFILE["email"]

    def test_profile_includes_skills_and_work(self, client, seed):
        client.post("/api/profile", json=PROFILE)
        mysql = seed.skill("MySQL", proficiency_level="intermediate")
        git = seed.skill("Git", proficiency_level="expert")
        seed.work("StartupXYZ", "Frontend Developer", start_date="2020-06-01")
        seed.work("Tech Solutions Inc.", "Senior Developer", start_date="2022-01-01")

        r = client.post("/api/profile/skills", json={"skill_ids": [mysql.id, git.id]})
        assert r.status_code == 200

        data = client.get("/api/profile").json()
        assert [s["name"] for s in data["skills"]] == ["Git", "MySQL"]
        assert [w["company"] for w in data["work_experience"]] == [
            "Tech Solutions Inc.",
            "StartupXYZ",
        ]

    def test_set_skills_replaces_previous(self, client, seed):
        client.post("/api/profile", json=PROFILE)
        a = seed.skill("A")
        b = seed.skill("B")
        client.post("/api/profile/skills", json={"skill_ids": [a.id]})
        r = client.post("/api/profile/skills", json={"skill_ids": [b.id]})
        assert [s["name"] for s in r.json()["skills"]] == ["B"]

    def test_set_skills_requires_ids(self, client):
        client.post("/api/profile", json=PROFILE)
        assert client.post("/api/profile/skills", json={"skill_ids": []}).status_code == 422
        r = client.post("/api/profile/skills", json={"skill_ids": ["missing"]})
        assert r.status_code == 404

    def test_update_rejects_null_required_fields(self, client):
        client.post("/api/profile", json=PROFILE)
        for field in ("name", "email"):
            r = client.put("/api/profile", json={field: None})
            assert r.status_code == 422
        assert client.get("/api/profile").json()["name"] == "John Doe"

    def test_update_allows_clearing_optional_fields(self, client):
        client.post("/api/profile", json=PROFILE)
        r = client.put("/api/profile", json={"github_link": None})
        assert r.status_code == 200
        assert r.json()["github_link"] is None
