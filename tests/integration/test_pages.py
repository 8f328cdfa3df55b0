"""
Integration tests for static file serving from the website directory.
"""
import shutil

import pytest


@pytest.mark.integration
class TestStaticPages:

    def test_index(self, client):
        """Test that / serves index.html from the website directory."""
        response = client.get("/")

        assert response.status_code == 200
        assert response.data == b"<h1>cart</h1>"
        assert response.mimetype == "text/html"

    def test_asset(self, client):
        """Test that a top-level asset is served."""
        response = client.get("/app.js")

        assert response.status_code == 200
        assert b"console.log" in response.data

    def test_nested_asset(self, client):
        """Test that assets in subdirectories are served with their mimetype."""
        response = client.get("/css/site.css")

        assert response.status_code == 200
        assert response.mimetype == "text/css"

    def test_directory_serves_its_index(self, client):
        """Test that a directory path serves its index.html."""
        response = client.get("/css/")

        assert response.status_code == 200
        assert response.data == b"<p>css index</p>"

    def test_missing_file_is_404(self, client):
        """Test that a missing asset gets a JSON 404."""
        response = client.get("/nope.html")

        assert response.status_code == 404
        assert response.get_json() == {"error": "Not Found", "status": 404}

    def test_path_traversal_is_404(self, client, tmp_path):
        """Test that paths escaping the website directory are not served."""
        (tmp_path / "secret.txt").write_text("secret", encoding="utf-8")

        response = client.get("/../secret.txt")

        assert response.status_code == 404

    def test_missing_website_dir_is_404(self, client, website_dir):
        """Test that a missing website directory gives 404 instead of an error."""
        shutil.rmtree(website_dir)

        assert client.get("/").status_code == 404

    def test_static_responses_carry_cors_headers(self, client):
        """Test that static responses carry CORS headers."""
        response = client.get("/app.js", headers={"Origin": "http://shop.example"})

        assert response.headers["Access-Control-Allow-Origin"] == "*"
