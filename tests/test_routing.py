# =============================================================================
# tests/test_routing.py - Routing and Request Context Tests
# =============================================================================
# Plain text routes that echo query, form, header, cookie and path values.
# =============================================================================


class TestHelloWorld:
    """GET /"""

    def test_root_returns_hello_world(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.text == "Hello World"
        assert response.headers["content-type"].startswith("text/plain")


class TestHello:
    """GET/POST /hello"""

    def test_query_name(self, client):
        """Name taken from the query string."""
        response = client.get("/hello?name=Brian")

        assert response.status_code == 200
        assert response.text == "Hello Brian"

    def test_defaults_to_guest(self, client):
        response = client.get("/hello")

        assert response.status_code == 200
        assert response.text == "Hello Guest"

    def test_form_body_on_get(self, client):
        """A form body is read even on GET."""
        response = client.request(
            "GET",
            "/hello",
            content="name=Brian",
            headers={"Content-Type": "application/x-www-form-urlencoded"},
        )

        assert response.status_code == 200
        assert response.text == "Hello Brian"

    def test_form_body_on_post(self, client):
        response = client.post("/hello", data={"name": "Brian"})

        assert response.status_code == 200
        assert response.text == "Hello Brian"

    def test_query_wins_over_form(self, client):
        response = client.post("/hello?name=Query", data={"name": "Form"})

        assert response.text == "Hello Query"

    def test_multipart_form_field(self, client):
        response = client.post(
            "/hello",
            data={"name": "Brian"},
            files={"ignored": ("a.txt", b"x", "text/plain")},
        )

        assert response.status_code == 200
        assert response.text == "Hello Brian"


class TestRequestContext:
    """GET /request"""

    def test_header_and_cookie(self, client):
        response = client.get(
            "/request",
            headers={"firstname": "Brian", "Cookie": "lastname=Anashari"},
        )

        assert response.status_code == 200
        assert response.text == "Hello Brian Anashari"

    def test_missing_values_are_empty(self, client):
        response = client.get("/request")

        assert response.status_code == 200
        assert response.text == "Hello  "


class TestRouteParameters:
    """GET /users/{userId}/orders/{orderId}"""

    def test_path_parameters(self, client):
        response = client.get("/users/2/orders/5")

        assert response.status_code == 200
        assert response.text == "User: 2 with order: 5"

    def test_non_numeric_parameters(self, client):
        response = client.get("/users/brian/orders/abc-1")

        assert response.text == "User: brian with order: abc-1"

    def test_missing_segment_is_not_found(self, client):
        response = client.get("/users/2/orders")

        assert response.status_code == 404
