import config


def test_root_route_exists(client):
    """
    Basic smoke test: does the server respond at '/'?
    """
    resp = client.get("/")
    assert resp.status_code == 200


def test_default_settings_are_loaded():
    """Settings fall back to sane defaults when .env does not override them"""
    assert config.PAGE_SIZE > 0
    assert config.CAROUSEL_INTERVAL > 0
    assert config.SECRET_KEY
    assert config.COURSE_OPTIONS == ["MCA", "PhD", "B.Tech", "M.Tech"]


def test_bundled_dataset_is_loaded(client):
    resp = client.get("/api/alumni?limit=1")
    assert resp.status_code == 200
    assert resp.get_json()["total"] > 0


def test_invalid_numeric_env_falls_back(monkeypatch):
    monkeypatch.setenv("PAGE_SIZE", "lots")
    assert config._int_env("PAGE_SIZE", 25) == 25

    monkeypatch.setenv("PAGE_SIZE", "-3")
    assert config._int_env("PAGE_SIZE", 25) == 25

    monkeypatch.setenv("CAROUSEL_INTERVAL", "1.5")
    assert config._float_env("CAROUSEL_INTERVAL", 3.0) == 1.5

    monkeypatch.delenv("CAROUSEL_INTERVAL")
    assert config._float_env("CAROUSEL_INTERVAL", 3.0) == 3.0
