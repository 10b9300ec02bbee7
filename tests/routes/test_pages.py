"""
Page route tests
Every path except /generate serves the preview page
"""
import pytest


class TestIndexPage:

    @pytest.mark.parametrize("path", ["/", "/index.html", "/anything/else", "/generate/extra"])
    def test_get_serves_html(self, client, path):
        response = client.get(path)

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert "Dummy Data Generator" in response.text

    def test_page_contains_form_fields(self, client):
        response = client.get("/")

        for name in ("format", "fields", "subModules", "arraySize", "fieldType"):
            assert f'name="{name}"' in response.text
        assert 'fetch("/generate"' in response.text

    def test_post_to_other_path_serves_html(self, client):
        response = client.post("/submit", data={"fields": "2"})

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")

    def test_get_generate_serves_html(self, client):
        """Only POST /generate produces data"""
        response = client.get("/generate")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")

    def test_missing_template_falls_back(self, client, tmp_path, monkeypatch):
        from dummygen.core.settings import settings

        monkeypatch.setattr(settings, "TEMPLATES_DIR", str(tmp_path))
        response = client.get("/")

        assert response.status_code == 200
        assert "POST form fields to /generate" in response.text
