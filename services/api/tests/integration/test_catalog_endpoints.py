from __future__ import annotations


def test_list_products(client):
    resp = client.get("/v1/products")
    assert resp.status_code == 200
    data = resp.json()["data"]
    assert len(data["products"]) == 6
    assert len(data["stores"]) == 8
    assert data["products"][0]["storeId"] == 1
    assert data["products"][0]["productUrl"].startswith("https://")


def test_recommend_products_unfiltered(client):
    resp = client.post("/v1/products", json={})
    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["totalResults"] == 6
    assert len(data["recommendations"]) == 6
    assert all(60 <= p["score"] < 100 for p in data["recommendations"])


def test_recommend_products_honours_filters(client):
    resp = client.post("/v1/products", json={"category": "dress", "season": "summer"})
    data = resp.json()["data"]
    assert [p["id"] for p in data["recommendations"]] == [3, 6]
    assert data["totalResults"] == 2

    resp = client.post("/v1/products", json={"storeId": 3})
    assert [p["name"] for p in resp.json()["data"]["recommendations"]] == ["Gray Wool Sweater"]


def test_recommend_products_no_match_is_empty(client):
    resp = client.post("/v1/products", json={"category": "hat"})
    assert resp.status_code == 200
    assert resp.json()["data"] == {"recommendations": [], "totalResults": 0}


def test_list_stores(client):
    resp = client.get("/v1/stores")
    assert resp.status_code == 200
    stores = resp.json()["data"]["stores"]
    assert [s["name"] for s in stores] == ["Zara", "H&M", "Uniqlo", "Mango"]
    assert stores[0]["priceRange"] == "mid-range"


def test_recommend_stores(client):
    resp = client.post("/v1/stores", json={"style": "minimalist"})
    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["totalResults"] == 4
    assert len(data["recommendations"]) == 4
    assert all(70 <= s["score"] < 100 for s in data["recommendations"])
    assert data["recommendations"][0]["storeUrl"] == "https://www.zara.com"
