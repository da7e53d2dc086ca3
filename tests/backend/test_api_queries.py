from tests.backend.record_helpers import record_number


def test_list_queries_returns_full_dataset_newest_first(client_ctx):
    client = client_ctx["client"]
    store = client_ctx["store"]

    response = client.get("/api/queries")
    assert response.status_code == 200

    payload = response.get_json()
    assert payload["ok"] is True
    assert len(payload["queries"]) == len(store) == 28
    assert [q["id"] for q in payload["queries"]] == [r.id for r in store.all()]
    assert set(payload["queries"][0]) == {"id", "type", "query", "threat", "source", "timestamp"}


def test_run_query_prepends_record_with_next_id(client_ctx):
    client = client_ctx["client"]
    store = client_ctx["store"]
    prior_max = max(record_number(r.id) for r in store.all())

    response = client.post("/api/query", json={"type": "ip", "q": "10.0.0.1"})
    assert response.status_code == 200

    payload = response.get_json()
    assert payload["ok"] is True
    result = payload["result"]
    assert result["type"] == "IP"
    assert result["query"] == "10.0.0.1"
    assert record_number(result["id"]) == prior_max + 1
    assert result["timestamp"] == "2025-11-03 14:05:09"

    listed = client.get("/api/queries").get_json()["queries"]
    assert listed[0] == result
    assert len(listed) == 29


def test_run_query_missing_q_is_rejected_without_side_effects(client_ctx):
    client = client_ctx["client"]
    store = client_ctx["store"]
    size_before = len(store)
    next_before = store.next_id

    response = client.post("/api/query", json={"type": "ip"})
    assert response.status_code == 400
    assert response.get_json() == {"ok": False, "error": "Missing query or type"}
    assert len(store) == size_before
    assert store.next_id == next_before


def test_run_query_rejects_empty_and_non_json_bodies(client_ctx):
    client = client_ctx["client"]
    store = client_ctx["store"]

    assert client.post("/api/query", json={"type": "", "q": "x"}).status_code == 400
    assert client.post("/api/query", json={"q": "example.com"}).status_code == 400
    assert client.post("/api/query", data="not json", content_type="text/plain").status_code == 400
    assert client.post("/api/query", json=["ip", "1.1.1.1"]).status_code == 400
    assert len(store) == 28
    assert store.next_id == 29


def test_run_query_accepts_arbitrary_type(client_ctx):
    client = client_ctx["client"]

    response = client.post("/api/query", json={"type": "hash", "q": "d41d8cd98f00b204e9800998ecf8427e"})
    assert response.status_code == 200
    assert response.get_json()["result"]["type"] == "HASH"


def test_successive_queries_get_consecutive_ids(client_ctx):
    client = client_ctx["client"]

    ids = []
    for value in ("a.com", "b.com", "c.com"):
        res = client.post("/api/query", json={"type": "domain", "q": value})
        ids.append(record_number(res.get_json()["result"]["id"]))
    client.post("/api/query", json={"type": "domain"})
    res = client.post("/api/query", json={"type": "domain", "q": "d.com"})
    ids.append(record_number(res.get_json()["result"]["id"]))

    assert ids == [29, 30, 31, 32]


def test_stats_endpoint_matches_dataset(client_ctx):
    client = client_ctx["client"]
    store = client_ctx["store"]

    stats = client.get("/api/stats").get_json()["stats"]
    assert stats["total"] == len(store)
    assert stats["highRisk"] == sum(1 for r in store.all() if r.threat == "High")
    assert stats["uniqueSources"] == len({r.source for r in store.all()})


def test_unknown_api_path_returns_json_404(client_ctx):
    client = client_ctx["client"]

    response = client.get("/api/nope")
    assert response.status_code == 404
    assert response.get_json()["ok"] is False


def test_non_api_paths_fall_back_to_dashboard(client_ctx):
    client = client_ctx["client"]

    for path in ("/", "/query", "/some/deep/link"):
        response = client.get(path)
        assert response.status_code == 200
        assert b"api-status-grid" in response.data


def test_cors_header_present(client_ctx):
    client = client_ctx["client"]

    response = client.get("/api/queries", headers={"Origin": "http://example.test"})
    assert response.headers.get("Access-Control-Allow-Origin") == "*"
