"""
Notes API — Middleware Tests
=============================

What:  Tests for request ids, request logging and the static-asset fallback.
How:   Requests go through a full create_app() instance; log output is
       captured with pytest's caplog.
"""

import logging

import pytest


class TestRequestID:

    @pytest.mark.asyncio
    async def test_generated_request_id(self, test_client):
        response = await test_client.get("/api/notes")
        assert len(response.headers["X-Request-ID"]) == 8

    @pytest.mark.asyncio
    async def test_client_request_id_is_echoed(self, test_client):
        response = await test_client.get("/api/notes", headers={"X-Request-ID": "trace-123"})
        assert response.headers["X-Request-ID"] == "trace-123"

    @pytest.mark.asyncio
    async def test_request_id_on_error_responses(self, test_client):
        response = await test_client.get("/nope", headers={"X-Request-ID": "abc"})
        assert response.status_code == 404
        assert response.headers["X-Request-ID"] == "abc"


class TestRequestLogging:

    @pytest.mark.asyncio
    async def test_logs_method_path_and_body(self, test_client, caplog):
        caplog.set_level(logging.INFO, logger="notes_api.access")

        await test_client.post("/api/notes", json={"content": "logged", "important": True})

        messages = [r.getMessage() for r in caplog.records if r.name == "notes_api.access"]
        assert "Method: POST" in messages
        assert "Path:   /api/notes" in messages
        assert "Body:   {'content': 'logged', 'important': True}" in messages
        assert "---" in messages

    @pytest.mark.asyncio
    async def test_get_logs_empty_body(self, test_client, caplog):
        caplog.set_level(logging.INFO, logger="notes_api.access")

        await test_client.get("/api/notes")

        messages = [r.getMessage() for r in caplog.records if r.name == "notes_api.access"]
        assert "Body:   {}" in messages

    @pytest.mark.asyncio
    async def test_access_line_level_follows_status(self, test_client, caplog):
        caplog.set_level(logging.INFO, logger="notes_api.access")

        await test_client.get("/unknown/path")

        access = [r for r in caplog.records if getattr(r, "status", None) == 404]
        assert len(access) == 1
        assert access[0].levelno == logging.WARNING
        assert access[0].path == "/unknown/path"

    @pytest.mark.asyncio
    async def test_body_still_reaches_handler(self, test_client):
        """Reading the body for the log must not starve the route."""
        response = await test_client.post("/api/notes", json={"content": "still here"})
        assert response.status_code == 200
        assert response.json()["content"] == "still here"


class TestStaticFiles:

    @pytest.mark.asyncio
    async def test_serves_file_from_assets_dir(self, test_client, static_dir):
        (static_dir / "app.js").write_text("console.log('hi')")

        response = await test_client.get("/app.js")
        assert response.status_code == 200
        assert response.text == "console.log('hi')"

    @pytest.mark.asyncio
    async def test_index_html_wins_over_root_route(self, test_client, static_dir):
        (static_dir / "index.html").write_text("<html>front-end</html>")

        response = await test_client.get("/")
        assert response.status_code == 200
        assert response.text == "<html>front-end</html>"

    @pytest.mark.asyncio
    async def test_nested_asset(self, test_client, static_dir):
        (static_dir / "assets").mkdir()
        (static_dir / "assets" / "style.css").write_text("body {}")

        response = await test_client.get("/assets/style.css")
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/css")

    @pytest.mark.asyncio
    async def test_missing_file_falls_through_to_routes(self, test_client):
        response = await test_client.get("/api/notes")
        assert response.status_code == 200
        assert len(response.json()) == 3

    @pytest.mark.asyncio
    async def test_post_is_never_served_statically(self, test_client, static_dir):
        (static_dir / "upload").write_text("static")

        response = await test_client.post("/upload", json={})
        assert response.status_code == 404
        assert response.json() == {"error": "unknown endpoint"}

    @pytest.mark.asyncio
    async def test_nul_byte_path_falls_through(self, test_client, static_dir):
        (static_dir / "index.html").write_text("<html></html>")

        response = await test_client.get("/a%00b")
        assert response.status_code == 404
        assert response.json() == {"error": "unknown endpoint"}

    def test_lookup_nul_byte_is_a_miss(self, test_app, static_dir):
        from notes_api.middleware.static_files import StaticFilesMiddleware

        middleware = StaticFilesMiddleware(test_app, directory=str(static_dir))
        assert middleware.lookup("/a\x00b") is None

    @pytest.mark.asyncio
    async def test_head_on_static_file(self, test_client, static_dir):
        (static_dir / "app.js").write_text("console.log(1)")

        response = await test_client.head("/app.js")
        assert response.status_code == 200
        assert "javascript" in response.headers["content-type"]

    def test_lookup_rejects_paths_outside_assets_dir(self, test_app, static_dir, tmp_path):
        from notes_api.middleware.static_files import StaticFilesMiddleware

        (tmp_path / "secret.txt").write_text("top secret")
        middleware = StaticFilesMiddleware(test_app, directory=str(static_dir))

        assert middleware.lookup("/../secret.txt") is None
        assert middleware.lookup("/missing.txt") is None

    def test_missing_assets_dir_serves_nothing(self, test_app, tmp_path):
        from notes_api.middleware.static_files import StaticFilesMiddleware

        middleware = StaticFilesMiddleware(test_app, directory=str(tmp_path / "absent"))
        assert middleware.lookup("/index.html") is None
