import pytest

from passforge.charsets import AMBIGUOUS_CHARS
from pfweb.api import app


@pytest.fixture
def client():
    app.config["TESTING"] = True
    return app.test_client()


def test_home(client):
    assert client.get("/").status_code == 200


def test_generate_defaults(client):
    resp = client.post("/generate", json={})
    assert resp.status_code == 200
    data = resp.get_json()
    assert len(data["password"]) == 16
    assert data["passwords"] == [data["password"]]
    assert data["strength"]["label"] == "Very Strong"
    assert data["entropy_bits"] > 0


def test_generate_options(client):
    resp = client.post("/generate", json={
        "length": 12, "symbols": False, "exclude_ambiguous": True, "count": 4,
    })
    data = resp.get_json()
    assert len(data["passwords"]) == 4
    for pw in data["passwords"]:
        assert len(pw) == 12
        assert pw.isalnum()
        assert not any(c in AMBIGUOUS_CHARS for c in pw)


def test_generate_invalid(client):
    resp = client.post("/generate", json={"upper": False, "lower": False, "digits": False, "special": False})
    assert resp.status_code == 400
    assert "error" in resp.get_json()


def test_generate_bad_length(client):
    assert client.post("/generate", json={"length": "twelve"}).status_code == 400


def test_generate_exhausted(client, monkeypatch):
    from passforge.errors import GenerationFailedError
    import pfweb.api

    def boom(config, count):
        raise GenerationFailedError(1000)

    monkeypatch.setattr(pfweb.api, "generate_many", boom)
    assert client.post("/generate", json={}).status_code == 503


def test_score(client):
    data = client.post("/score", json={"password": "abcd1234"}).get_json()
    assert data["score"] == 50
    assert data["label"] == "Medium"


def test_score_rejects_non_string(client):
    assert client.post("/score", json={"password": 5}).status_code == 400


@pytest.mark.parametrize("body", [[16], "abc", 12])
def test_generate_rejects_non_object_body(client, body):
    resp = client.post("/generate", json=body)
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "request body must be a JSON object"


@pytest.mark.parametrize("body", [["pw"], "abc"])
def test_score_rejects_non_object_body(client, body):
    resp = client.post("/score", json=body)
    assert resp.status_code == 400
    assert "error" in resp.get_json()


@pytest.mark.parametrize("field", ["upper", "lower", "digits", "special", "symbols", "exclude_ambiguous"])
def test_generate_rejects_string_flags(client, field):
    resp = client.post("/generate", json={field: "false"})
    assert resp.status_code == 400
    assert field.replace("symbols", "special") in resp.get_json()["error"]
