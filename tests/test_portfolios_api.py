from invest_tracker.models.enums import RiskLevel


def test_create_portfolio_defaults_current_value(client, make_user) -> None:
    user = make_user()
    response = client.post(
        "/api/portfolios",
        json={"User_ID": user.user_id, "Portfolio_Name": "Core", "Risk_Level": "Low", "Strategy": "Index"},
    )
    assert response.status_code == 200
    portfolio_id = response.json()["id"]

    portfolio = client.get(f"/api/portfolios/{portfolio_id}").json()
    assert portfolio["Current_Value"] == 0
    assert portfolio["Portfolio_Name"] == "Core"
    assert portfolio["Creation_Date"] is not None


def test_create_portfolio_requires_fields(client, make_user) -> None:
    user = make_user()
    response = client.post("/api/portfolios", json={"User_ID": user.user_id, "Risk_Level": "Low"})
    assert response.status_code == 422


def test_list_portfolios_includes_owner_name(client, make_user, make_portfolio) -> None:
    make_portfolio(make_user(name="Carol"), name="Dividends")
    portfolios = client.get("/api/portfolios").json()
    assert len(portfolios) == 1
    assert portfolios[0]["User_Name"] == "Carol"
    assert portfolios[0]["Portfolio_Name"] == "Dividends"


def test_missing_portfolio_is_404(client) -> None:
    response = client.get("/api/portfolios/7")
    assert response.status_code == 404
    assert response.json() == {"message": "Portfolio not found"}


def test_update_and_delete_portfolio(client, make_user, make_portfolio) -> None:
    portfolio = make_portfolio(make_user(), strategy="Momentum")
    response = client.put(
        f"/api/portfolios/{portfolio.portfolio_id}",
        json={"Portfolio_Name": "Renamed", "Risk_Level": "High", "Current_Value": 2500},
    )
    assert response.json() == {"message": "Portfolio updated successfully"}

    updated = client.get(f"/api/portfolios/{portfolio.portfolio_id}").json()
    assert updated["Portfolio_Name"] == "Renamed"
    assert updated["Risk_Level"] == "High"
    assert updated["Current_Value"] == 2500
    assert updated["Strategy"] is None

    assert client.delete(f"/api/portfolios/{portfolio.portfolio_id}").json() == {"message": "Portfolio deleted successfully"}
    assert client.get(f"/api/portfolios/{portfolio.portfolio_id}").status_code == 404
    assert client.delete("/api/portfolios/12345").status_code == 200


def test_total_investment_and_roi(client, make_user, make_portfolio, make_asset, make_transaction) -> None:
    portfolio = make_portfolio(make_user(), current_value=1200.0)
    make_transaction(portfolio, make_asset(), 1000.0)

    total = client.get(f"/api/portfolios/{portfolio.portfolio_id}/total-investment").json()
    assert total == {"Total_Investment": 1000.0}

    roi = client.get(f"/api/portfolios/{portfolio.portfolio_id}/roi").json()
    assert roi == {"Total_Investment": 1000.0, "Current_Value": 1200.0, "ROI": 20.0}


def test_roi_without_buys_is_zero(client, make_user, make_portfolio) -> None:
    portfolio = make_portfolio(make_user(), current_value=500.0)
    roi = client.get(f"/api/portfolios/{portfolio.portfolio_id}/roi").json()
    assert roi == {"Total_Investment": 0.0, "Current_Value": 500.0, "ROI": 0.0}


def test_portfolio_risk(client, make_user, make_portfolio) -> None:
    portfolio = make_portfolio(make_user(risk_appetite=RiskLevel.Low))
    assert client.get(f"/api/portfolios/{portfolio.portfolio_id}/risk").json() == {"Risk_Appetite": "Low"}
    assert client.get("/api/portfolios/999/risk").json() == {"Risk_Appetite": None}


def test_create_portfolio_for_unknown_user_is_rejected(client) -> None:
    response = client.post(
        "/api/portfolios",
        json={"User_ID": 777, "Portfolio_Name": "Orphan", "Risk_Level": "Low"},
    )
    assert response.status_code == 500
    assert "FOREIGN KEY" in response.json()["error"]
    assert client.get("/api/advanced/dashboard-stats").json()["totalPortfolios"] == 0


def test_portfolio_ids_out_of_range_are_422(client) -> None:
    assert client.get("/api/portfolios/0").status_code == 422
    assert client.get(f"/api/portfolios/{2**63}/roi").status_code == 422
    assert client.delete(f"/api/portfolios/{2**64}").status_code == 422
