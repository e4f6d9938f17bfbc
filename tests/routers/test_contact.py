"""Contact form route: HTML form posts and JSON submissions."""
import logging

VALID = {
    "name": "Jane Smith",
    "email": "jane@example.co.uk",
    "phone": "07700 900123",
    "service": "payroll",
    "message": "We need help with payroll for 12 staff.",
    "consent": "true",
}


class TestContactForm:
    def test_form_lists_services(self, client):
        text = client.get("/contact").text
        assert '<form method="post" action="/contact">' in text
        assert '<option value="company-secretarial"' in text

    def test_service_preselected_from_query(self, client):
        assert '<option value="vat" selected>' in client.get("/contact?service=vat").text

    def test_valid_form_post(self, client, caplog):
        with caplog.at_level(logging.INFO, logger="maco.contact"):
            response = client.post(
                "/contact",
                data=VALID,
                headers={"user-agent": "pytest-agent", "x-forwarded-for": "203.0.113.5, 10.0.0.1"},
            )
        assert response.status_code == 200
        assert "Thank you for your message" in response.text
        assert "Contact form submission" in caplog.text
        assert "203.0.113.5" in caplog.text
        assert "pytest-agent" in caplog.text

    def test_missing_message(self, client):
        response = client.post("/contact", data={**VALID, "message": ""})
        assert response.status_code == 400
        assert "Missing required fields: message" in response.text
        assert 'value="Jane Smith"' in response.text

    def test_invalid_email(self, client):
        response = client.post("/contact", data={**VALID, "email": "jane@example"})
        assert response.status_code == 400
        assert "Invalid email address" in response.text


class TestContactJson:
    def test_valid(self, client):
        response = client.post("/contact", json=VALID)
        assert response.status_code == 200
        assert response.json()["message"].startswith("Thank you")

    def test_missing_fields(self, client):
        response = client.post("/contact", json={"email": "a@b.com"})
        assert response.status_code == 400
        assert response.json() == {"error": "Missing required fields: name, message"}

    def test_invalid_email(self, client):
        response = client.post("/contact", json={**VALID, "email": "not an email"})
        assert response.status_code == 400
        assert response.json() == {"error": "Invalid email address"}

    def test_non_object_body(self, client):
        response = client.post("/contact", json=["a", "b"])
        assert response.status_code == 400
        assert response.json() == {"error": "Expected a JSON object"}

    def test_malformed_json(self, client):
        response = client.post(
            "/contact",
            content=b"{not json",
            headers={"content-type": "application/json"},
        )
        assert response.status_code == 400
        assert response.json() == {"error": "Invalid submission"}
