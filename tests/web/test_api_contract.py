from __future__ import annotations

from fastapi.testclient import TestClient

from sort_trace.config import ServiceConfig
from sort_trace.web.main import create_app


def _client(**overrides) -> TestClient:
    return TestClient(create_app(ServiceConfig(**overrides)))


def test_health() -> None:
    res = _client().get("/health")
    assert res.status_code == 200
    assert res.json() == {"status": "ok"}


def test_algorithm_listing_contract() -> None:
    res = _client().get("/algorithms")
    assert res.status_code == 200
    assert res.json() == {
        "algorithms": [
            {"key": "bubble", "name": "Bubble Sort"},
            {"key": "selection", "name": "Selection Sort"},
            {"key": "insertion", "name": "Insertion Sort"},
            {"key": "merge", "name": "Merge Sort"},
        ]
    }


def test_listing_follows_configured_order() -> None:
    res = _client(algorithms=("merge", "bubble")).get("/algorithms")
    assert [a["key"] for a in res.json()["algorithms"]] == ["merge", "bubble"]


def test_run_contract_json_body() -> None:
    res = _client().post("/run?algorithm=bubble", content="[1,2,3]")
    assert res.status_code == 200
    assert res.json() == {
        "algorithmKey": "bubble",
        "algorithmName": "Bubble Sort",
        "initial": [1, 2, 3],
        "sorted": [1, 2, 3],
        "steps": [
            {"type": "COMPARE", "i": 0, "j": 1},
            {"type": "COMPARE", "i": 1, "j": 2},
            {"type": "DONE"},
        ],
    }


def test_run_accepts_csv_and_json_array_alike() -> None:
    client = _client()
    as_json = client.post("/run?algorithm=selection", json=[5, 1, 4, 2, 8])
    as_csv = client.post("/run?algorithm=selection", content="5,1,4,2,8")
    assert as_json.status_code == 200
    assert as_json.json() == as_csv.json()
    data = as_json.json()
    assert data["sorted"] == [1, 2, 4, 5, 8]
    assert [s for s in data["steps"] if s["type"] == "SWAP"] == [
        {"type": "SWAP", "i": 0, "j": 1},
        {"type": "SWAP", "i": 1, "j": 3},
    ]


def test_set_steps_only_carry_index_and_value() -> None:
    data = _client().post("/run?algorithm=merge", content="[2,1]").json()
    assert data["steps"] == [
        {"type": "SET", "index": 0, "value": 1},
        {"type": "SET", "index": 1, "value": 2},
        {"type": "DONE"},
    ]


def test_run_defaults_to_configured_algorithm() -> None:
    res = _client(default_algorithm="insertion").post("/run", content="2,1")
    assert res.status_code == 200
    assert res.json()["algorithmKey"] == "insertion"


def test_run_unknown_algorithm_is_client_error() -> None:
    res = _client().post("/run?algorithm=quick", content="[2,1]")
    assert res.status_code == 400
    assert res.json() == {"error": "Unknown algorithm"}


def test_run_invalid_array_is_client_error() -> None:
    client = _client()
    for body in ["[1,2", "1,b,3", ""]:
        res = client.post("/run?algorithm=bubble", content=body)
        assert res.status_code == 400
        assert res.json() == {"error": "Invalid array"}


def test_run_size_cap() -> None:
    res = _client(max_array_length=3).post("/run?algorithm=bubble", content="[4,3,2,1]")
    assert res.status_code == 400
    assert "Array too large" in res.json()["error"]


def test_run_rejects_get() -> None:
    res = _client().get("/run")
    assert res.status_code == 405


def test_generate_contract() -> None:
    res = _client().get("/generate?count=5&max=10&seed=4")
    assert res.status_code == 200
    values = res.json()
    assert len(values) == 5
    assert len(set(values)) == 5
    assert all(1 <= v <= 10 for v in values)
    again = _client().get("/generate?count=5&max=10&seed=4").json()
    assert again == values


def test_generate_rejects_bad_parameters() -> None:
    client = _client(max_generate_count=50)
    for query in ["count=0&max=5", "count=6&max=5", "count=x&max=5", "max=5", "count=51&max=100"]:
        res = client.get(f"/generate?{query}")
        assert res.status_code == 400, query
        assert "error" in res.json()


def test_cors_preflight() -> None:
    res = _client().options(
        "/run",
        headers={
            "Origin": "http://localhost:5173",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "Content-Type",
        },
    )
    assert res.status_code == 200
    assert res.headers["access-control-allow-origin"] == "*"


def test_generate_cost_does_not_scale_with_max() -> None:
    res = _client().get(f"/generate?count=2&max={10**12}&seed=1")
    assert res.status_code == 200
    values = res.json()
    assert len(set(values)) == 2
    assert all(1 <= v <= 10**12 for v in values)


def test_generate_parameters_use_the_error_body() -> None:
    client = _client()
    for query in ["count=1_0&max=50", "count=%D9%A3&max=50", "count=2&max=10&seed=abc", "count=2&max=10&seed=1.5"]:
        res = client.get(f"/generate?{query}")
        assert res.status_code == 400, query
        assert set(res.json()) == {"error"}
