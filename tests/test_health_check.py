class TestHealthCheck:
    def test_health_check_returns_200(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert "timestamp" in data

    def test_orders_health_returns_fixed_message(self, api_client):
        response = api_client.get("/api/orders/health/")
        assert response.status_code == 200
        assert response.json() == "Order Service Running"
