class TestProjectsCRUD:
    def _skill(self, client, name, **extra):
        return client.post("/api/skills", json={"name": name, **extra}).json()["id"]

    def test_create_project(self, client):
        react = self._skill(client, "React", category="Frontend")
        r = client.post("/api/projects", json={
            "title": "E-Commerce Platform",
            "description": "Full-stack shop",
            "github_link": "https://github.com/johndoe/ecommerce",
            "skill_ids": [react, react],
        })
        assert r.status_code == 201
        data = r.json()
        assert data["title"] == "E-Commerce Platform"
        assert data["github_link"] == "https://github.com/johndoe/ecommerce"
        assert [s["name"] for s in data["skills"]] == ["React"]

    def test_title_and_description_required(self, client):
        assert client.post("/api/projects", json={"title": "No description"}).status_code == 422
        r = client.post("/api/projects", json={"title": "", "description": "x"})
        assert r.status_code == 422

    def test_unknown_skill_rejected(self, client):
        r = client.post("/api/projects", json={
            "title": "Broken", "description": "x", "skill_ids": ["nope"],
        })
        assert r.status_code == 404
        assert client.get("/api/projects").json() == []

    def test_list_projects_newest_first_with_skill_names(self, client, seed):
        python = seed.skill("Python")
        docker = seed.skill("Docker")
        seed.project("Old", "first", skills=[python])
        seed.project("New", "second", skills=[python, docker])

        r = client.get("/api/projects")
        assert r.status_code == 200
        data = r.json()
        assert [p["title"] for p in data] == ["New", "Old"]
        assert data[0]["skills"] == ["Docker", "Python"]

    def test_filter_by_skill(self, client, seed):
        react = seed.skill("React Native")
        seed.project("Mobile", "app", skills=[react])
        seed.project("Untagged", "app")

        data = client.get("/api/projects?skill=react").json()
        assert [p["title"] for p in data] == ["Mobile"]

    def test_get_project(self, client):
        project_id = client.post("/api/projects", json={
            "title": "Task Manager", "description": "Kanban",
        }).json()["id"]

        r = client.get(f"/api/projects/{project_id}")
        assert r.status_code == 200
        assert r.json()["title"] == "Task Manager"
        assert r.json()["skills"] == []

    def test_update_project(self, client):
        python = self._skill(client, "Python")
        docker = self._skill(client, "Docker")
        project_id = client.post("/api/projects", json={
            "title": "Old Title", "description": "x", "skill_ids": [python],
        }).json()["id"]

        r = client.put(f"/api/projects/{project_id}", json={"title": "New Title"})
        assert r.status_code == 200
        assert r.json()["title"] == "New Title"
        assert [s["name"] for s in r.json()["skills"]] == ["Python"]

        r = client.put(f"/api/projects/{project_id}", json={"skill_ids": [docker]})
        assert [s["name"] for s in r.json()["skills"]] == ["Docker"]

        r = client.put(f"/api/projects/{project_id}", json={"skill_ids": []})
        assert r.json()["skills"] == []

    def test_delete_project(self, client):
        project_id = client.post("/api/projects", json={
            "title": "To Delete", "description": "x",
        }).json()["id"]

        r = client.delete(f"/api/projects/{project_id}")
        assert r.status_code == 200

        assert client.get(f"/api/projects/{project_id}").status_code == 404

    def test_missing_project(self, client):
        assert client.get("/api/projects/missing").status_code == 404
        assert client.put("/api/projects/missing", json={"title": "x"}).status_code == 404
        assert client.delete("/api/projects/missing").status_code == 404

    def test_update_rejects_null_title_or_description(self, client):
        project_id = client.post("/api/projects", json={
            "title": "Kept", "description": "x",
        }).json()["id"]
        for field in ("title", "description"):
            r = client.put(f"/api/projects/{project_id}", json={field: None})
            assert r.status_code == 422
        assert client.get(f"/api/projects/{project_id}").json()["title"] == "Kept"
