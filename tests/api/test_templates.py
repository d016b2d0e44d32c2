def _names(res):
    return [t["name"] for t in res.json()["data"]["templates"]]


def test_list_templates(client):
    res = client.get("/templates")
    assert res.status_code == 200
    body = res.json()
    assert body["success"] is True
    assert set(_names(res)) == {"Minimalist", "Developer", "Professional", "Creative"}


def test_list_templates_pricing(client):
    free = client.get("/templates", params={"pricing": "free"})
    premium = client.get("/templates", params={"pricing": "premium"})

    assert set(_names(free)) == {"Minimalist", "Developer"}
    assert set(_names(premium)) == {"Professional", "Creative"}
    assert all(t["is_premium"] for t in premium.json()["data"]["templates"])


def test_list_templates_category_and_sort(client):
    assert _names(client.get("/templates", params={"category": "creative"})) == ["Creative"]
    assert _names(client.get("/templates", params={"sort_by": "popular"}))[0] == "Minimalist"
    assert _names(client.get("/templates", params={"sort_by": "name"}))[0] == "Creative"


def test_list_templates_rejects_unknown_sort(client):
    assert client.get("/templates", params={"sort_by": "random"}).status_code == 422


def test_get_template(client, template_ids):
    res = client.get(f"/templates/{template_ids['Professional']}")
    assert res.status_code == 200
    data = res.json()["data"]
    assert data["name"] == "Professional"
    assert data["is_premium"] is True
    assert data["price"] == 1999


def test_get_template_404(client):
    assert client.get("/templates/9999").status_code == 404
