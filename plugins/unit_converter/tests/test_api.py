from app import create_app


def _client():
    app = create_app("TestingConfig")
    return app.test_client()


def test_categories_endpoint_lists_units():
    client = _client()
    response = client.get("/api/unit_converter/categories")
    assert response.status_code == 200
    payload = response.get_json()
    assert payload["success"] is True
    keys = [entry["key"] for entry in payload["data"]["categories"]]
    assert keys[0] == "length" and "data" in keys
    assert payload["data"]["categories"][2]["title"] == "Temperature"
    assert payload["data"]["categories"][0]["base_unit"] == "meter"


def test_units_endpoint():
    client = _client()
    response = client.get("/api/unit_converter/units/weight")
    assert response.status_code == 200
    names = [unit["name"] for unit in response.get_json()["data"]["units"]]
    assert names[0] == "Kilogram"

    response = client.get("/api/unit_converter/units/distance")
    assert response.status_code == 400
    assert response.get_json()["error"]["code"] == "unit.invalid_category"


def test_convert_endpoint_success():
    client = _client()
    response = client.post(
        "/api/unit_converter/convert",
        json={"value": 1, "from_unit": "m", "to_unit": "cm", "category": "length"},
    )
    assert response.status_code == 200
    payload = response.get_json()
    assert payload["success"] is True
    assert payload["data"]["value"] == 100
    assert payload["data"]["formatted"] == "100"


def test_convert_endpoint_temperature_precision():
    client = _client()
    response = client.post(
        "/api/unit_converter/convert",
        json={
            "value": "37",
            "from_unit": "Celsius",
            "to_unit": "Fahrenheit",
            "category": "temperature",
            "decimals": 1,
        },
    )
    assert response.status_code == 200
    assert response.get_json()["data"]["formatted"] == "98.6"


def test_convert_endpoint_rejects_bad_unit():
    client = _client()
    response = client.post(
        "/api/unit_converter/convert",
        json={"value": 1, "from_unit": "parsec", "to_unit": "m", "category": "length"},
    )
    assert response.status_code == 400
    payload = response.get_json()
    assert payload["success"] is False
    assert payload["error"]["code"] == "unit.not_found"


def test_convert_endpoint_rejects_bad_value():
    client = _client()
    response = client.post(
        "/api/unit_converter/convert",
        json={"value": "ten", "from_unit": "m", "to_unit": "cm", "category": "length"},
    )
    assert response.status_code == 400
    assert response.get_json()["error"]["code"] == "unit.invalid_value"


def test_convert_endpoint_requires_category():
    client = _client()
    response = client.post(
        "/api/unit_converter/convert",
        json={"value": 1, "from_unit": "m", "to_unit": "cm"},
    )
    assert response.status_code == 400
    assert response.get_json()["error"]["code"] == "unit.invalid_request"


def test_convert_endpoint_reports_overflow():
    client = _client()
    response = client.post(
        "/api/unit_converter/convert",
        json={"value": 1e308, "from_unit": "TB", "to_unit": "bit", "category": "data"},
    )
    assert response.status_code == 422
    assert response.get_json()["error"]["code"] == "unit.overflow"
    assert "Infinity" not in response.get_data(as_text=True)
