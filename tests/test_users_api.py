USER_PAYLOAD = {
    "Name": "Alice Smith",
    "Email": "alice@example.com",
    "Phone_No": "555-0100",
    "Address": "1 Main St",
    "Age": 34,
    "Investment_Goals": "Retirement",
    "Risk_Appetite": "High",
}


def test_create_and_read_user(client) -> None:
    response = client.post("/api/users", json=USER_PAYLOAD)
    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "User created successfully"

    user = client.get(f"/api/users/{body['id']}").json()
    assert user["User_ID"] == body["id"]
    assert user["Name"] == "Alice Smith"
    assert user["Risk_Appetite"] == "High"


def test_list_users(client, make_user) -> None:
    make_user(name="Alice")
    make_user(name="Bob")
    names = [user["Name"] for user in client.get("/api/users").json()]
    assert names == ["Alice", "Bob"]


def test_missing_user_is_404_with_message(client) -> None:
    response = client.get("/api/users/42")
    assert response.status_code == 404
    assert response.json() == {"message": "User not found"}


def test_update_replaces_user(client, make_user) -> None:
    user = make_user(name="Alice")
    payload = dict(USER_PAYLOAD, Name="Alice Jones", Risk_Appetite="Low", Phone_No=None)

    response = client.put(f"/api/users/{user.user_id}", json=payload)
    assert response.json() == {"message": "User updated successfully"}

    updated = client.get(f"/api/users/{user.user_id}").json()
    assert updated["Name"] == "Alice Jones"
    assert updated["Risk_Appetite"] == "Low"
    assert updated["Phone_No"] is None


def test_delete_user_and_nonexistent_delete_succeeds(client, make_user) -> None:
    user = make_user()
    assert client.delete(f"/api/users/{user.user_id}").json() == {"message": "User deleted successfully"}
    assert client.get(f"/api/users/{user.user_id}").status_code == 404

    response = client.delete("/api/users/999")
    assert response.status_code == 200
    assert response.json() == {"message": "User deleted successfully"}


def test_create_user_validates_payload(client) -> None:
    missing_email = {k: v for k, v in USER_PAYLOAD.items() if k != "Email"}
    assert client.post("/api/users", json=missing_email).status_code == 422
    assert client.post("/api/users", json=dict(USER_PAYLOAD, Risk_Appetite="Extreme")).status_code == 422
    assert client.post("/api/users", json=dict(USER_PAYLOAD, Age=-1)).status_code == 422


def test_duplicate_email_is_database_error(client) -> None:
    assert client.post("/api/users", json=USER_PAYLOAD).status_code == 200
    response = client.post("/api/users", json=USER_PAYLOAD)
    assert response.status_code == 500
    assert "UNIQUE" in response.json()["error"]


def test_delete_user_owning_portfolios_is_rejected(client, make_user, make_portfolio) -> None:
    user = make_user()
    make_portfolio(user, current_value=100.0)

    response = client.delete(f"/api/users/{user.user_id}")
    assert response.status_code == 500
    assert "FOREIGN KEY" in response.json()["error"]

    assert client.get(f"/api/users/{user.user_id}").status_code == 200
    stats = client.get("/api/advanced/dashboard-stats").json()
    assert stats["totalUsers"] == 1
    assert stats["totalPortfolios"] == 1


def test_user_id_past_integer_range_is_422(client) -> None:
    response = client.get("/api/users/99999999999999999999")
    assert response.status_code == 422
    assert response.headers["content-type"] == "application/json"
