from __future__ import annotations

from typing import Any, Dict

import pytest


def _post(client, headers: Dict[str, str], url: str, payload: Dict[str, Any]) -> Dict[str, Any]:
    response = client.post(url, json=payload, headers=headers)
    assert response.status_code == 201, response.get_json()
    return response.get_json()["data"]


@pytest.fixture
def references(client, auth_headers) -> Dict[str, int]:
    food = _post(client, auth_headers, "/transaction-categories", {"name": "Food"})
    home = _post(client, auth_headers, "/transaction-categories", {"name": "Home"})
    market = _post(
        client,
        auth_headers,
        "/transaction-subcategories",
        {"name": "Market", "categoryId": food["id"]},
    )
    ana = _post(client, auth_headers, "/transaction-responsibles", {"name": "Ana"})
    bruno = _post(client, auth_headers, "/transaction-responsibles", {"name": "Bruno"})
    return {
        "food": food["id"],
        "home": home["id"],
        "market": market["id"],
        "ana": ana["id"],
        "bruno": bruno["id"],
    }


def _transaction_payload(references: Dict[str, int], **overrides: Any) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        "type": "expense",
        "subtype": "VARIABLE",
        "source": "CREDIT_CARD",
        "description": "Weekly groceries",
        "amount": "100.00",
        "date": "2026-03-10T12:00:00",
        "categoryId": references["food"],
        "subcategoryId": references["market"],
        "responsibilities": [
            {"responsibleId": references["ana"], "percentage": "60"},
            {"responsibleId": references["bruno"], "percentage": "40"},
        ],
    }
    payload.update(overrides)
    return payload


def test_transaction_create_splits_amount_between_responsibles(
    client, auth_headers, references
) -> None:
    response = client.post(
        "/transactions", json=_transaction_payload(references), headers=auth_headers
    )

    assert response.status_code == 201
    data = response.get_json()["data"]
    assert data["userId"] == 1
    assert data["type"] == "EXPENSE"
    assert data["amount"] == "100.00"
    assert data["reconciled"] is False
    shares = {
        item["responsibleName"]: item["calculatedAmount"]
        for item in data["responsibilities"]
    }
    assert shares == {"Ana": "60.00", "Bruno": "40.00"}


def test_transaction_percentages_must_sum_to_one_hundred(
    client, auth_headers, references
) -> None:
    payload = _transaction_payload(
        references,
        responsibilities=[
            {"responsibleId": references["ana"], "percentage": "60"},
            {"responsibleId": references["bruno"], "percentage": "30"},
        ],
    )

    response = client.post("/transactions", json=payload, headers=auth_headers)

    assert response.status_code == 400
    errors = response.get_json()["validationErrors"]
    assert errors[0]["field"] == "responsibilities"
    assert errors[0]["message"] == "Total percentage must equal 100, got 90"


def test_transaction_rejects_unknown_and_duplicate_responsibles(
    client, auth_headers, references
) -> None:
    payload = _transaction_payload(
        references,
        responsibilities=[
            {"responsibleId": references["ana"], "percentage": "50"},
            {"responsibleId": references["ana"], "percentage": "25"},
            {"responsibleId": 999, "percentage": "25"},
        ],
    )

    response = client.post("/transactions", json=payload, headers=auth_headers)

    assert response.status_code == 400
    fields = [error["field"] for error in response.get_json()["validationErrors"]]
    assert fields == [
        "responsibilities.1.responsibleId",
        "responsibilities.2.responsibleId",
    ]


def test_transaction_subcategory_must_belong_to_category(
    client, auth_headers, references
) -> None:
    payload = _transaction_payload(references, categoryId=references["home"])

    response = client.post("/transactions", json=payload, headers=auth_headers)

    assert response.status_code == 400
    assert response.get_json()["validationErrors"][0]["field"] == "subcategoryId"


def test_transaction_schema_errors_use_wire_names(
    client, auth_headers, references
) -> None:
    payload = _transaction_payload(
        references, amount="10.123", type="TRANSFER", responsibilities=[]
    )

    response = client.post("/transactions", json=payload, headers=auth_headers)

    assert response.status_code == 400
    body = response.get_json()
    assert body["message"] == "Invalid transaction data"
    fields = {error["field"] for error in body["validationErrors"]}
    assert fields == {"amount", "type", "responsibilities"}


def test_transactions_are_private_to_their_owner(
    client, auth_headers, other_user_headers, references
) -> None:
    created = _post(client, auth_headers, "/transactions", _transaction_payload(references))
    url = f"/transactions/{created['id']}"

    assert client.get(url, headers=other_user_headers).status_code == 404
    assert (
        client.put(url, json={"description": "mine"}, headers=other_user_headers)
    ).status_code == 404
    assert client.delete(url, headers=other_user_headers).status_code == 404

    other_list = client.get("/transactions", headers=other_user_headers).get_json()
    assert other_list["data"]["totalElements"] == 0

    own_list = client.get("/transactions", headers=auth_headers).get_json()
    assert own_list["data"]["totalElements"] == 1


def test_transaction_update_recalculates_shares(
    client, auth_headers, references
) -> None:
    created = _post(client, auth_headers, "/transactions", _transaction_payload(references))

    response = client.put(
        f"/transactions/{created['id']}",
        json={"amount": "250.00", "reconciled": True},
        headers=auth_headers,
    )

    assert response.status_code == 200
    data = response.get_json()["data"]
    assert data["amount"] == "250.00"
    assert data["reconciled"] is True
    assert data["description"] == "Weekly groceries"
    assert sorted(item["calculatedAmount"] for item in data["responsibilities"]) == [
        "100.00",
        "150.00",
    ]


def test_transaction_list_filters_and_search(client, auth_headers, references) -> None:
    _post(client, auth_headers, "/transactions", _transaction_payload(references))
    _post(
        client,
        auth_headers,
        "/transactions",
        _transaction_payload(
            references,
            type="INCOME",
            subtype="FIXED",
            source="PIX",
            description="Salary",
            amount="5000.00",
            subcategoryId=None,
        ),
    )

    income = client.get("/transactions?type=INCOME", headers=auth_headers).get_json()
    search = client.get("/transactions?search=GROCER", headers=auth_headers).get_json()

    assert [item["description"] for item in income["data"]["content"]] == ["Salary"]
    assert [item["description"] for item in search["data"]["content"]] == [
        "Weekly groceries"
    ]


def test_transaction_delete_then_missing(client, auth_headers, references) -> None:
    created = _post(client, auth_headers, "/transactions", _transaction_payload(references))
    url = f"/transactions/{created['id']}"

    first = client.delete(url, headers=auth_headers)
    second = client.delete(url, headers=auth_headers)

    assert first.status_code == 200
    assert first.get_json()["data"] is None
    assert second.status_code == 404
    assert str(created["id"]) in second.get_json()["message"]


def test_transaction_amount_above_column_limit_is_rejected(
    client, auth_headers, references
) -> None:
    response = client.post(
        "/transactions",
        json=_transaction_payload(references, amount="10000000000.00"),
        headers=auth_headers,
    )

    assert response.status_code == 400
    fields = {error["field"] for error in response.get_json()["validationErrors"]}
    assert fields == {"amount"}


def test_transaction_filters_use_column_types(client, auth_headers, references) -> None:
    created = _post(client, auth_headers, "/transactions", _transaction_payload(references))

    by_category = client.get(
        f"/transactions?categoryId={references['food']}", headers=auth_headers
    ).get_json()["data"]
    other_category = client.get(
        f"/transactions?categoryId={references['home']}", headers=auth_headers
    ).get_json()["data"]
    unreconciled = client.get(
        "/transactions?reconciled=false", headers=auth_headers
    ).get_json()["data"]
    bad_value = client.get("/transactions?categoryId=abc", headers=auth_headers)

    assert [item["id"] for item in by_category["content"]] == [created["id"]]
    assert other_category["totalElements"] == 0
    assert unreconciled["totalElements"] == 1
    assert bad_value.status_code == 400


def test_transaction_reconcile(client, auth_headers, references) -> None:
    created = _post(client, auth_headers, "/transactions", _transaction_payload(references))
    url = f"/transactions/{created['id']}/reconcile"

    reconciled = client.put(url, json={}, headers=auth_headers)
    assert reconciled.status_code == 200
    body = reconciled.get_json()
    assert body["message"] == "Transaction reconciled successfully"
    assert body["data"]["reconciled"] is True
    assert body["data"]["id"] == created["id"]

    undone = client.put(url, json={"reconciled": False}, headers=auth_headers)
    assert undone.get_json()["data"]["reconciled"] is False

    invalid = client.put(url, json={"reconciled": "maybe"}, headers=auth_headers)
    assert invalid.status_code == 400
    assert invalid.get_json()["validationErrors"][0]["field"] == "reconciled"


def test_transaction_reconcile_is_scoped_to_owner(
    client, auth_headers, other_user_headers, references
) -> None:
    created = _post(client, auth_headers, "/transactions", _transaction_payload(references))
    url = f"/transactions/{created['id']}/reconcile"

    foreign = client.put(url, json={}, headers=other_user_headers)
    anonymous = client.put(url, json={})

    assert foreign.status_code == 404
    assert anonymous.status_code == 401
    assert client.get(
        f"/transactions/{created['id']}", headers=auth_headers
    ).get_json()["data"]["reconciled"] is False
