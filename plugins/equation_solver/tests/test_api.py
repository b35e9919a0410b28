from app import create_app


def _client(**settings):
    app = create_app("TestingConfig")
    if settings:
        app.config["PLUGIN_SETTINGS"]["equation_solver"] = settings
    return app.test_client()


def test_linear_endpoint():
    client = _client()
    resp = client.post(
        "/api/equation_solver/linear",
        json={"system": [[2, 1, 5], [1, 3, 10]]},
    )
    assert resp.status_code == 200
    data = resp.get_json()["data"]
    assert data["formatted"] == ["1.0000", "3.0000"]


def test_linear_endpoint_reports_singular_system():
    client = _client()
    resp = client.post(
        "/api/equation_solver/linear",
        json={"system": [[1, 2, 3], [2, 4, 6]]},
    )
    assert resp.status_code == 422
    assert resp.get_json()["error"]["code"] == "equation.singular_system"


def test_linear_endpoint_rejects_wrong_shape():
    client = _client()
    resp = client.post(
        "/api/equation_solver/linear",
        json={"system": [[1, 2], [3, 4]]},
    )
    assert resp.status_code == 400
    assert resp.get_json()["error"]["code"] == "equation.invalid_system"


def test_linear_endpoint_honours_unknown_limit():
    client = _client(max_unknowns=1)
    resp = client.post(
        "/api/equation_solver/linear",
        json={"system": [[1, 0, 1], [0, 1, 1]]},
    )
    assert resp.status_code == 413
    assert resp.get_json()["error"]["code"] == "equation.too_large"


def test_quadratic_endpoint():
    client = _client()
    resp = client.post("/api/equation_solver/quadratic", json={"a": 1, "b": 0, "c": 1})
    assert resp.status_code == 200
    data = resp.get_json()["data"]
    assert data["kind"] == "complex"
    assert data["labels"] == ["0.0000 + 1.0000i", "0.0000 - 1.0000i"]


def test_polynomial_endpoint_unsupported_degree_is_not_an_error():
    client = _client()
    resp = client.post(
        "/api/equation_solver/polynomial", json={"coefficients": [1, 0, 0, 1]}
    )
    assert resp.status_code == 200
    data = resp.get_json()["data"]
    assert data["status"] == "unsupported_degree"
    assert data["roots"] == []


def test_polynomial_endpoint_rejects_zero_leading_coefficient():
    client = _client()
    resp = client.post(
        "/api/equation_solver/polynomial", json={"coefficients": [0, 1, 2]}
    )
    assert resp.status_code == 400
    assert resp.get_json()["error"]["code"] == "equation.invalid_leading_coefficient"


def test_polynomial_endpoint_validates_payload():
    client = _client()
    resp = client.post("/api/equation_solver/polynomial", json={"coefficients": [1]})
    assert resp.status_code == 400
    data = resp.get_json()
    assert data["success"] is False
    assert data["error"]["code"] == "equation.invalid_request"


def test_overflow_is_reported_instead_of_infinity():
    client = _client()
    resp = client.post("/api/equation_solver/quadratic", json={"a": 1e200, "b": 1e200, "c": 1})
    assert resp.status_code == 422
    assert resp.get_json()["error"]["code"] == "equation.overflow"

    resp = client.post("/api/equation_solver/linear", json={"system": [[1e-5, 1e308]]})
    assert resp.status_code == 422
    assert "Infinity" not in resp.get_data(as_text=True)


def test_non_finite_json_numbers_are_rejected():
    client = _client()
    resp = client.post(
        "/api/equation_solver/quadratic",
        data='{"a": Infinity, "b": 0, "c": 1}',
        content_type="application/json",
    )
    assert resp.status_code == 400
    assert resp.get_json()["error"]["code"] == "equation.invalid_request"
