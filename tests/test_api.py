"""
Tests for the analysis and tool API endpoints.
"""

from financial_analysis.utils import stable_hash

LOAN = {"principal": 10000, "annualRate": 0.06, "termMonths": 24}
LEASE = {"principal": 50000, "annualRate": 0.05, "termMonths": 60, "residualValue": 10000}


class TestHealth:
    """Test health endpoint."""

    def test_health(self, client):
        """Test the health check reports healthy."""
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestAnalysisEndpoints:
    """Test /api/analyze endpoints."""

    def test_amortization(self, client):
        """Test a loan schedule is returned with camelCase fields."""
        response = client.post("/api/analyze/amortization", json=LOAN)
        assert response.status_code == 200

        data = response.json()
        assert set(data) == {"monthlyPayment", "totalPayments", "totalInterest", "schedule"}
        assert data["monthlyPayment"] == 443.21
        assert len(data["schedule"]) == 24
        assert data["schedule"][-1]["balance"] == 0

    def test_lease(self, client):
        """Test a lease schedule ends at the residual value."""
        response = client.post("/api/analyze/lease", json=LEASE)
        assert response.status_code == 200
        assert response.json()["schedule"][-1]["balance"] == 10000

    def test_tiny_rate(self, client):
        """Test a near-zero rate is computed rather than failing."""
        response = client.post(
            "/api/analyze/amortization", json={**LOAN, "annualRate": 1e-40}
        )
        assert response.status_code == 200
        assert response.json()["monthlyPayment"] == 416.67

    def test_principal_above_ceiling_rejected(self, client):
        """Test a principal near the float limit is a 400, not a server error."""
        response = client.post(
            "/api/analyze/amortization",
            json={"principal": 1.7e308, "annualRate": 1, "termMonths": 1},
        )
        assert response.status_code == 400
        assert response.json()["issues"][0]["path"] == ["principal"]

    def test_etag_is_stable_hash(self, client):
        """Test the ETag header hashes the response body."""
        response = client.post("/api/analyze/amortization", json=LOAN)
        assert response.headers["etag"] == f'"{stable_hash(response.json())}"'

    def test_validation_error_lists_issues(self, client):
        """Test every failing field is reported with path, message and code."""
        response = client.post(
            "/api/analyze/amortization",
            json={"principal": -1, "annualRate": 1.5, "termMonths": 24},
        )
        assert response.status_code == 400

        issues = response.json()["issues"]
        paths = [issue["path"] for issue in issues]
        assert ["principal"] in paths
        assert ["annualRate"] in paths
        for issue in issues:
            assert issue["message"]
            assert issue["code"]

    def test_non_integer_term_rejected(self, client):
        """Test fractional months are rejected."""
        response = client.post("/api/analyze/lease", json={**LEASE, "termMonths": 12.5})
        assert response.status_code == 400
        assert response.json()["issues"][0]["path"] == ["termMonths"]

    def test_non_json_body_rejected(self, client):
        """Test a non-JSON content type is a 415."""
        response = client.post(
            "/api/analyze/amortization",
            content="principal=10000",
            headers={"content-type": "text/plain"},
        )
        assert response.status_code == 415

    def test_malformed_json_rejected(self, client):
        """Test an unparseable JSON body is a 400."""
        response = client.post(
            "/api/analyze/amortization",
            content="{not json",
            headers={"content-type": "application/json"},
        )
        assert response.status_code == 400


class TestMcpEndpoint:
    """Test the JSON-RPC tool endpoint."""

    def rpc(self, client, method, params=None, request_id=1):
        body = {"jsonrpc": "2.0", "id": request_id, "method": method}
        if params is not None:
            body["params"] = params
        response = client.post("/api/mcp", json=body)
        assert response.status_code == 200
        return response.json()

    def test_initialize(self, client):
        """Test the handshake echoes the request id and server info."""
        data = self.rpc(client, "initialize")
        assert data["id"] == 1
        assert data["result"]["serverInfo"]["name"] == "financial-analysis-mcp"

    def test_tools_list(self, client):
        """Test both tools are listed."""
        data = self.rpc(client, "tools/list", request_id="abc")
        assert data["id"] == "abc"
        assert len(data["result"]["tools"]) == 2

    def test_tools_call(self, client):
        """Test a tool call returns the analysis result."""
        data = self.rpc(
            client, "tools/call", {"name": "analyze_amortization", "arguments": LOAN}
        )
        assert data["result"]["monthlyPayment"] == 443.21

    def test_unknown_method(self, client):
        """Test an unsupported method maps to method-not-found."""
        data = self.rpc(client, "prompts/list")
        assert data["error"]["code"] == -32601

    def test_unknown_tool(self, client):
        """Test an unknown tool maps to invalid params."""
        data = self.rpc(client, "tools/call", {"name": "nope", "arguments": {}})
        assert data["error"]["code"] == -32602

    def test_invalid_arguments(self, client):
        """Test rejected arguments carry the field issues."""
        data = self.rpc(
            client,
            "tools/call",
            {"name": "analyze_lease", "arguments": {**LEASE, "residualValue": -5}},
        )
        assert data["error"]["code"] == -32602
        assert data["error"]["data"][0]["path"] == ["residualValue"]

    def test_invalid_request(self, client):
        """Test a non-object body is an invalid request."""
        response = client.post("/api/mcp", json=["not", "an", "object"])
        assert response.json()["error"]["code"] == -32600

    def test_parse_error(self, client):
        """Test malformed JSON is a parse error."""
        response = client.post(
            "/api/mcp", content="{", headers={"content-type": "application/json"}
        )
        assert response.json()["error"]["code"] == -32700
