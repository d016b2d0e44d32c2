def test_create_portfolio(client, auth_headers, portfolio_data, template_ids):
    payload = {**portfolio_data, "templateId": template_ids["Minimalist"]}
    res = client.post("/portfolios", json=payload, headers=auth_headers)

    assert res.status_code == 201
    body = res.json()
    assert body["success"] is True
    data = body["data"]
    assert data["name"] == "Ada's Portfolio"
    assert data["template_id"] == template_ids["Minimalist"]
    assert data["personal_info"]["first_name"] == "Ada"
    assert data["personal_info"]["social_links"][0]["platform"] == "GitHub"
    assert data["skills"][3] == {"name": "Mentoring", "proficiency": 4, "category": None}
    assert data["education"][1]["end_date"] is None


def test_create_accepts_snake_case(client, auth_headers):
    payload = {"name": "Snake", "personal_info": {"first_name": "Sam", "last_name": "Case"}}
    res = client.post("/portfolios", json=payload, headers=auth_headers)
    assert res.status_code == 201
    assert res.json()["data"]["personal_info"]["last_name"] == "Case"


def test_create_defaults_color_scheme(client, auth_headers):
    res = client.post("/portfolios", json={"name": "Plain"}, headers=auth_headers)
    assert res.status_code == 201
    assert res.json()["data"]["color_scheme"]["primary"] == "#3b82f6"


def test_create_requires_name(client, auth_headers):
    res = client.post("/portfolios", json={"name": ""}, headers=auth_headers)
    assert res.status_code == 422


def test_create_rejects_bad_proficiency(client, auth_headers):
    payload = {"name": "X", "skills": [{"name": "Python", "proficiency": 0}]}
    res = client.post("/portfolios", json=payload, headers=auth_headers)
    assert res.status_code == 422


def test_create_unknown_template_404(client, auth_headers, portfolio_data):
    res = client.post("/portfolios", json={**portfolio_data, "templateId": 999}, headers=auth_headers)
    assert res.status_code == 404
    assert res.json()["detail"] == "Template not found"


def test_list_portfolios(client, auth_headers, create_portfolio):
    first = create_portfolio()
    second = create_portfolio(name="Second")

    res = client.get("/portfolios", headers=auth_headers)
    assert res.status_code == 200
    ids = {p["portfolio_id"] for p in res.json()["data"]["portfolios"]}
    assert ids == {first, second}


def test_list_is_scoped_to_user(client, other_auth_headers, create_portfolio):
    create_portfolio()
    res = client.get("/portfolios", headers=other_auth_headers)
    assert res.json()["data"]["portfolios"] == []


def test_get_portfolio(client, auth_headers, create_portfolio):
    pid = create_portfolio()
    res = client.get(f"/portfolios/{pid}", headers=auth_headers)

    assert res.status_code == 200
    data = res.json()["data"]
    assert data["portfolio_id"] == pid
    assert data["projects"][0]["technologies"] == ["Analytical Engine", "Punch cards"]


def test_get_other_users_portfolio_404(client, other_auth_headers, create_portfolio):
    pid = create_portfolio()
    res = client.get(f"/portfolios/{pid}", headers=other_auth_headers)
    assert res.status_code == 404


def test_get_corrupt_portfolio_500(client, auth_headers, create_portfolio, seed_conn):
    pid = create_portfolio()
    seed_conn.execute("UPDATE portfolios SET projects_json = 'oops' WHERE portfolio_id = ?", (pid,))
    seed_conn.commit()

    res = client.get(f"/portfolios/{pid}", headers=auth_headers)
    assert res.status_code == 500
    assert res.json()["detail"] == "Portfolio data is corrupted"


def test_put_portfolio(client, auth_headers, create_portfolio, portfolio_data, template_ids):
    pid = create_portfolio()
    payload = {**portfolio_data, "name": "Updated", "skills": [], "templateId": template_ids["Developer"]}

    res = client.put(f"/portfolios/{pid}", json=payload, headers=auth_headers)

    assert res.status_code == 200
    data = res.json()["data"]
    assert data["name"] == "Updated"
    assert data["skills"] == []
    assert data["template_id"] == template_ids["Developer"]


def test_put_missing_portfolio_404(client, auth_headers, portfolio_data):
    res = client.put("/portfolios/4242", json=portfolio_data, headers=auth_headers)
    assert res.status_code == 404


def test_delete_portfolio(client, auth_headers, create_portfolio):
    pid = create_portfolio()

    res = client.delete(f"/portfolios/{pid}", headers=auth_headers)
    assert res.status_code == 200
    assert res.json()["data"] == {"deleted_count": 1}

    assert client.get(f"/portfolios/{pid}", headers=auth_headers).status_code == 404
    assert client.delete(f"/portfolios/{pid}", headers=auth_headers).status_code == 404
