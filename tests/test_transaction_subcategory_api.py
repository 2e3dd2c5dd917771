from __future__ import annotations

from typing import Any, Dict


def _create(client, headers: Dict[str, str], url: str, payload: Dict[str, Any]) -> Dict[str, Any]:
    response = client.post(url, json=payload, headers=headers)
    assert response.status_code == 201, response.get_json()
    return response.get_json()["data"]


def test_subcategory_names_are_unique_per_category(client, auth_headers) -> None:
    food = _create(client, auth_headers, "/transaction-categories", {"name": "Food"})
    home = _create(client, auth_headers, "/transaction-categories", {"name": "Home"})

    first = _create(
        client,
        auth_headers,
        "/transaction-subcategories",
        {"name": "Market", "categoryId": food["id"]},
    )
    assert first["categoryId"] == food["id"]
    assert first["categoryName"] == "Food"
    assert first["isActive"] is True

    duplicate = client.post(
        "/transaction-subcategories",
        json={"name": "market", "categoryId": food["id"]},
        headers=auth_headers,
    )
    assert duplicate.status_code == 409

    other_category = client.post(
        "/transaction-subcategories",
        json={"name": "Market", "categoryId": home["id"]},
        headers=auth_headers,
    )
    assert other_category.status_code == 201


def test_subcategory_requires_existing_category(client, auth_headers) -> None:
    response = client.post(
        "/transaction-subcategories",
        json={"name": "Orphan", "categoryId": 999},
        headers=auth_headers,
    )

    assert response.status_code == 400
    errors = response.get_json()["validationErrors"]
    assert errors == [
        {
            "field": "categoryId",
            "message": "Transaction category not found",
            "rejectedValue": 999,
        }
    ]


def test_subcategories_by_category_lists_active_ordered_by_name(
    client, auth_headers
) -> None:
    food = _create(client, auth_headers, "/transaction-categories", {"name": "Food"})
    home = _create(client, auth_headers, "/transaction-categories", {"name": "Home"})
    url = "/transaction-subcategories"
    _create(client, auth_headers, url, {"name": "Restaurant", "categoryId": food["id"]})
    _create(client, auth_headers, url, {"name": "Bakery", "categoryId": food["id"]})
    _create(
        client,
        auth_headers,
        url,
        {"name": "Archived", "categoryId": food["id"], "isActive": False},
    )
    _create(client, auth_headers, url, {"name": "Rent", "categoryId": home["id"]})

    response = client.get(f"{url}/category/{food['id']}", headers=auth_headers)

    assert response.status_code == 200
    assert [item["name"] for item in response.get_json()["data"]] == [
        "Bakery",
        "Restaurant",
    ]


def test_subcategory_list_filters_by_category(client, auth_headers) -> None:
    food = _create(client, auth_headers, "/transaction-categories", {"name": "Food"})
    home = _create(client, auth_headers, "/transaction-categories", {"name": "Home"})
    url = "/transaction-subcategories"
    _create(client, auth_headers, url, {"name": "Bakery", "categoryId": food["id"]})
    _create(client, auth_headers, url, {"name": "Rent", "categoryId": home["id"]})

    data = client.get(
        f"{url}?categoryId={home['id']}", headers=auth_headers
    ).get_json()["data"]

    assert [item["name"] for item in data["content"]] == ["Rent"]
    assert data["totalElements"] == 1


def test_subcategory_update_keeps_unsent_fields(client, auth_headers) -> None:
    food = _create(client, auth_headers, "/transaction-categories", {"name": "Food"})
    created = _create(
        client,
        auth_headers,
        "/transaction-subcategories",
        {"name": "Bakery", "description": "Bread", "categoryId": food["id"]},
    )

    response = client.put(
        f"/transaction-subcategories/{created['id']}",
        json={"isActive": False},
        headers=auth_headers,
    )

    assert response.status_code == 200
    data = response.get_json()["data"]
    assert data["isActive"] is False
    assert data["name"] == "Bakery"
    assert data["description"] == "Bread"
