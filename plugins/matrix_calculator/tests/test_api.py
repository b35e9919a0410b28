from app import create_app


def _client(**settings):
    app = create_app("TestingConfig")
    if settings:
        app.config["PLUGIN_SETTINGS"]["matrix_calculator"] = settings
    return app.test_client()


def test_compute_multiply_endpoint():
    client = _client()
    resp = client.post(
        "/api/matrix_calculator/compute",
        json={"operation": "multiply", "a": [[1, 2], [3, 4]], "b": [[5], [6]]},
    )
    assert resp.status_code == 200
    data = resp.get_json()
    assert data["success"] is True
    assert data["data"]["matrix"] == [[17.0], [39.0]]


def test_compute_determinant_endpoint():
    client = _client()
    resp = client.post(
        "/api/matrix_calculator/compute",
        json={"operation": "determinant", "a": [[2, 0], [0, 3]]},
    )
    assert resp.status_code == 200
    assert resp.get_json()["data"]["determinant"] == 6.0


def test_dimension_mismatch_is_unprocessable():
    client = _client()
    resp = client.post(
        "/api/matrix_calculator/compute",
        json={"operation": "add", "a": [[1, 2]], "b": [[1], [2]]},
    )
    assert resp.status_code == 422
    error = resp.get_json()["error"]
    assert error["code"] == "matrix.dimension_mismatch"


def test_singular_inverse_is_reported():
    client = _client()
    resp = client.post(
        "/api/matrix_calculator/compute",
        json={"operation": "inverse", "a": [[1, 2], [2, 4]]},
    )
    assert resp.status_code == 422
    assert resp.get_json()["error"]["code"] == "matrix.not_invertible"


def test_ragged_rows_are_rejected():
    client = _client()
    resp = client.post(
        "/api/matrix_calculator/compute",
        json={"operation": "transpose", "a": [[1, 2], [3]]},
    )
    assert resp.status_code == 400
    assert resp.get_json()["error"]["code"] == "matrix.invalid_shape"


def test_unknown_operation_fails_validation():
    client = _client()
    resp = client.post(
        "/api/matrix_calculator/compute",
        json={"operation": "power", "a": [[1]]},
    )
    assert resp.status_code == 400
    assert resp.get_json()["error"]["code"] == "matrix.invalid_request"


def test_size_limit_comes_from_settings():
    client = _client(max_dimension=2)
    resp = client.post(
        "/api/matrix_calculator/compute",
        json={"operation": "determinant", "a": [[1, 0, 0], [0, 1, 0], [0, 0, 1]]},
    )
    assert resp.status_code == 413
    error = resp.get_json()["error"]
    assert error["code"] == "matrix.too_large"
    assert error["details"] == {"max_dimension": 2}


def test_overflow_is_unprocessable_json():
    client = _client()
    resp = client.post(
        "/api/matrix_calculator/compute",
        json={"operation": "add", "a": [[1e308]], "b": [[1e308]]},
    )
    assert resp.status_code == 422
    assert resp.get_json()["error"]["code"] == "matrix.overflow"
    assert "Infinity" not in resp.get_data(as_text=True)
