from app import create_app


def test_home_lists_plugins():
    app = create_app("TestingConfig")
    client = app.test_client()
    response = client.get("/")
    assert response.status_code == 200
    payload = response.get_json()
    assert payload["success"] is True
    titles = [item["title"] for item in payload["data"]["plugins"]]
    assert "Matrix Calculator" in titles
    assert "Unit Converter" in titles
    assert titles == sorted(titles, key=str.lower)
    assert response.headers.get("Content-Security-Policy")
    assert response.headers.get("X-Request-ID")


def test_unknown_route_returns_json_envelope():
    client = create_app("TestingConfig").test_client()
    response = client.get("/api/does_not_exist")
    assert response.status_code == 404
    payload = response.get_json()
    assert payload["success"] is False
    assert payload["error"]["code"] == "not_found"


def test_wrong_method_is_reported_as_http_error():
    client = create_app("TestingConfig").test_client()
    response = client.get("/api/matrix_calculator/compute")
    assert response.status_code == 405
    assert response.get_json()["error"]["code"] == "http.405"


def test_disabled_plugins_are_not_registered(tmp_path, monkeypatch):
    config_file = tmp_path / "config.yml"
    config_file.write_text(
        "site:\n"
        "  title: Lab Calculators\n"
        "  disabled_plugins: [statistics_calculator]\n"
        "plugins:\n"
        "  unit_converter:\n"
        "    summary: Custom summary\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("CALC_SERVER_CONFIG", str(config_file))
    app = create_app("TestingConfig")
    client = app.test_client()

    payload = client.get("/").get_json()["data"]
    assert payload["title"] == "Lab Calculators"
    blueprints = {item["blueprint"]: item for item in payload["plugins"]}
    assert "statistics_calculator" not in blueprints
    assert blueprints["unit_converter"]["summary"] == "Custom summary"

    response = client.post("/api/statistics_calculator/analyze", json={"data": "1 2"})
    assert response.status_code == 404


def test_json_keys_keep_insertion_order():
    app = create_app("TestingConfig")
    assert app.json.sort_keys is False
    body = app.test_client().get("/").get_data(as_text=True)
    assert body.index('"success"') < body.index('"data"')
    assert body.index('"title"') < body.index('"plugins"')
