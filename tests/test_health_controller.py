def test_healthz_is_public(client) -> None:
    resp = client.get("/healthz")
    assert resp.status_code == 200
    assert resp.get_json() == {"status": "ok"}


def test_responses_echo_request_id(client) -> None:
    resp = client.get("/healthz", headers={"X-Request-ID": "req-123"})
    assert resp.headers["X-Request-ID"] == "req-123"


def test_request_id_is_generated_when_missing(client) -> None:
    resp = client.get("/healthz")
    assert resp.headers.get("X-Request-ID")


def test_swagger_document_lists_finance_routes(client) -> None:
    resp = client.get("/docs/swagger/")
    assert resp.status_code == 200

    paths = resp.get_json()["paths"]
    assert "/transaction-categories" in paths
    assert "/transaction-categories/all" in paths
    assert "/transaction-subcategories/category/{category_id}" in paths
    assert "/financial-goals/{goal_id}/progress" in paths
    assert "/transactions/{entity_id}" in paths
    assert "/transactions/{entity_id}/reconcile" in paths


def test_healthz_answers_after_docs_are_built(client) -> None:
    assert client.get("/docs/swagger/").status_code == 200

    resp = client.get("/healthz")

    assert resp.status_code == 200
    assert resp.is_json
