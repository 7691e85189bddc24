"""Endpoint-level security header tests."""


class TestSecurityHeaders:
    def test_csp_header_present(self, client) -> None:
        resp = client.get("/")
        csp = resp.headers["Content-Security-Policy"]
        assert "default-src 'self'" in csp
        assert "frame-ancestors 'none'" in csp

    def test_x_frame_options(self, client) -> None:
        resp = client.get("/pokemon")
        assert resp.headers.get("X-Frame-Options") == "DENY"

    def test_x_content_type_options(self, client) -> None:
        resp = client.get("/pokemon/999")
        assert resp.headers.get("X-Content-Type-Options") == "nosniff"

    def test_headers_on_redirect(self, client) -> None:
        resp = client.post("/change-language", follow_redirects=False)
        assert resp.headers.get("Referrer-Policy") == "strict-origin-when-cross-origin"


class TestStaticFiles:
    def test_stylesheet_served(self, client) -> None:
        resp = client.get("/static/style.css")
        assert resp.status_code == 200
        assert "text/css" in resp.headers["content-type"]
