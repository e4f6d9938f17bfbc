"""JSON API routes."""


class TestTaxEstimate:
    def test_estimate(self, client):
        response = client.post("/api/tax/estimate", json={"income": 50_000})
        assert response.status_code == 200
        body = response.json()
        assert body["tax_year"] == "2024/25"
        assert body["employment_type"] == "employed"
        assert body["net_income"] == 39_519.6
        assert [b["name"] for b in body["bands"]] == ["basic"]

    def test_explicit_tax_year(self, client):
        response = client.post("/api/tax/estimate", params={"tax_year": "2025/26"}, json={"income": 20_000})
        assert response.json()["tax_year"] == "2025/26"

    def test_unknown_tax_year(self, client):
        response = client.post("/api/tax/estimate", params={"tax_year": "1999/00"}, json={"income": 20_000})
        assert response.status_code == 400
        assert "1999/00" in response.json()["detail"]

    def test_negative_income_is_422(self, client):
        assert client.post("/api/tax/estimate", json={"income": -1}).status_code == 422


class TestLocations:
    def test_resolve(self, client):
        response = client.get("/api/locations/resolve/england/london/croydon")
        assert response.status_code == 200
        body = response.json()
        assert body["nation"]["slug"] == "england"
        assert body["region"]["slug"] == "london"
        assert body["county"] is None
        assert body["city"]["type"] == "borough"

    def test_resolve_unknown_is_json_404(self, client):
        response = client.get("/api/locations/resolve/atlantis")
        assert response.status_code == 404
        assert response.json() == {"detail": "Location 'atlantis' not found"}

    def test_paths(self, client):
        body = client.get("/api/locations/paths").json()
        assert body["count"] == 112
        assert "england/london/croydon" in body["paths"]
        assert "wales/south-glamorgan/cardiff" in body["paths"]


def test_health(client):
    assert client.get("/api/health").json() == {"status": "ok", "locations": 112}
