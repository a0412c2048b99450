"""E2E tests for the Dependency Graph API endpoints."""

import pytest
from httpx import AsyncClient


class TestHealthEndpoints:
    """Test health check endpoints."""

    @pytest.mark.asyncio
    async def test_health_endpoint(self, async_client: AsyncClient):
        """Test liveness probe endpoint."""
        response = await async_client.get("/api/v1/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert "version" in data

    @pytest.mark.asyncio
    async def test_root_endpoint(self, async_client: AsyncClient):
        response = await async_client.get("/")

        assert response.status_code == 200
        assert response.json()["status"] == "operational"
        assert "X-Correlation-ID" in response.headers


class TestAnalyzeEndpoint:
    """Test POST /api/v1/dependency-graph/analyze."""

    @pytest.mark.asyncio
    async def test_analyze_full_graph(self, async_client: AsyncClient, account_components):
        response = await async_client.post(
            "/api/v1/dependency-graph/analyze",
            json={"components": account_components},
        )

        assert response.status_code == 200
        data = response.json()
        assert [node["id"] for node in data["nodes"]] == [
            "c:AccountCard",
            "c:AccountTabs",
            "c:Legacy",
            "vf:AccountPage",
            "apex:AccountController",
        ]
        assert data["roots"] == ["vf:AccountPage"]
        assert data["orphans"] == ["c:Legacy"]
        assert data["circular_groups"] == [["c:AccountCard", "c:AccountTabs"]]
        assert data["statistics"]["total_edges"] == 5
        assert data["statistics"]["circular_dependencies"] == 1
        assert data["warnings"] == []

    @pytest.mark.asyncio
    async def test_analyze_edge_metadata(self, async_client: AsyncClient, account_components):
        response = await async_client.post(
            "/api/v1/dependency-graph/analyze",
            json={"components": account_components},
        )

        edges = response.json()["edges"]
        controller_edge = edges[1]
        assert controller_edge["from_id"] == "vf:AccountPage"
        assert controller_edge["kind"] == "controller"
        assert controller_edge["expression"] == 'controller="AccountController"'
        assert controller_edge["bidirectional"] is False
        assert edges[2]["bidirectional"] is True

    @pytest.mark.asyncio
    async def test_analyze_include_base_components(
        self, async_client: AsyncClient, account_components
    ):
        response = await async_client.post(
            "/api/v1/dependency-graph/analyze",
            json={"components": account_components, "include_base_components": True},
        )

        data = response.json()
        assert "lightning:tabset" in [node["id"] for node in data["nodes"]]
        assert data["statistics"]["kind_counts"]["lwc"] == 1

    @pytest.mark.asyncio
    async def test_analyze_focus(self, async_client: AsyncClient, account_components):
        response = await async_client.post(
            "/api/v1/dependency-graph/analyze",
            json={
                "components": account_components,
                "focus": "accounttabs",
                "direction": "downstream",
            },
        )

        assert response.status_code == 200
        data = response.json()
        assert data["focus"] == "c:AccountTabs"
        assert {node["id"] for node in data["nodes"]} == {
            "c:AccountTabs",
            "c:AccountCard",
            "apex:AccountController",
        }

    @pytest.mark.asyncio
    async def test_analyze_focus_not_found(self, async_client: AsyncClient, account_components):
        response = await async_client.post(
            "/api/v1/dependency-graph/analyze",
            json={"components": account_components, "focus": "AcountCard"},
        )

        assert response.status_code == 404
        assert response.headers["content-type"].startswith("application/problem+json")
        data = response.json()
        assert data["title"] == "Not Found"
        assert data["detail"] == "Component 'AcountCard' not found"
        assert "c:AccountCard" in data["suggestions"]
        assert "correlation_id" in data

    @pytest.mark.asyncio
    async def test_analyze_circular_only_without_orphans(
        self, async_client: AsyncClient, account_components
    ):
        response = await async_client.post(
            "/api/v1/dependency-graph/analyze",
            json={
                "components": account_components,
                "circular_only": True,
                "show_orphans": False,
            },
        )

        data = response.json()
        assert {node["id"] for node in data["nodes"]} == {"c:AccountCard", "c:AccountTabs"}
        assert data["statistics"]["orphaned_components"] == 0

    @pytest.mark.asyncio
    async def test_analyze_malformed_dependency_reported(self, async_client: AsyncClient):
        response = await async_client.post(
            "/api/v1/dependency-graph/analyze",
            json={
                "components": [
                    {
                        "id": "c:A",
                        "name": "A",
                        "kind": "aura",
                        "dependencies": [{"target": "c:B", "kind": "mystery"}],
                    }
                ]
            },
        )

        assert response.status_code == 200
        data = response.json()
        assert data["orphans"] == ["c:A"]
        assert data["warnings"] == [
            "Skipped dependency 'c:B' of c:A: unknown dependency kind 'mystery'"
        ]

    @pytest.mark.asyncio
    async def test_analyze_invalid_component_kind(self, async_client: AsyncClient):
        response = await async_client.post(
            "/api/v1/dependency-graph/analyze",
            json={"components": [{"id": "flow:X", "name": "X", "kind": "flow"}]},
        )

        assert response.status_code == 400
        data = response.json()
        assert data["title"] == "Bad Request"
        assert "component kind must be one of" in data["detail"]

    @pytest.mark.asyncio
    async def test_analyze_invalid_direction(self, async_client: AsyncClient):
        response = await async_client.post(
            "/api/v1/dependency-graph/analyze",
            json={"components": [], "direction": "sideways"},
        )

        assert response.status_code == 422
        assert response.json()["title"] == "Unprocessable Entity"

    @pytest.mark.asyncio
    async def test_analyze_empty(self, async_client: AsyncClient):
        response = await async_client.post(
            "/api/v1/dependency-graph/analyze", json={"components": []}
        )

        assert response.status_code == 200
        assert response.json()["statistics"]["total_nodes"] == 0


class TestConversionOrderEndpoint:
    """Test POST /api/v1/dependency-graph/conversion-order."""

    @pytest.mark.asyncio
    async def test_conversion_order(self, async_client: AsyncClient, account_components):
        response = await async_client.post(
            "/api/v1/dependency-graph/conversion-order",
            json={"components": account_components},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["total_components"] == 4
        assert data["estimated_waves"] == 1
        wave = data["waves"][0]
        assert wave["components"] == [
            "c:AccountCard",
            "c:AccountTabs",
            "c:Legacy",
            "vf:AccountPage",
        ]
        assert wave["requires_coordination"] is True
        assert wave["estimated_hours"] == 16.0
        assert data["circular_dependencies"] == [["c:AccountCard", "c:AccountTabs"]]
        assert data["recommendations"][-1].startswith("1 Apex controllers detected")

    @pytest.mark.asyncio
    async def test_conversion_order_scenario_a(self, async_client: AsyncClient):
        response = await async_client.post(
            "/api/v1/dependency-graph/conversion-order",
            json={
                "components": [
                    {"id": "c:X", "name": "X", "kind": "aura"},
                    {
                        "id": "c:Y",
                        "name": "Y",
                        "kind": "aura",
                        "dependencies": [{"target": "c:X", "kind": "component"}],
                    },
                ]
            },
        )

        data = response.json()
        assert [wave["components"] for wave in data["waves"]] == [["c:X"], ["c:Y"]]
        assert data["waves"][1]["blocked_by"] == ["c:X"]
        assert data["ordered_components"] == ["c:X", "c:Y"]
        assert data["circular_dependencies"] == []

    @pytest.mark.asyncio
    async def test_conversion_order_nothing_to_convert(self, async_client: AsyncClient):
        response = await async_client.post(
            "/api/v1/dependency-graph/conversion-order",
            json={"components": [{"id": "apex:Ctrl", "name": "Ctrl", "kind": "apex"}]},
        )

        data = response.json()
        assert data["waves"] == []
        assert data["recommendations"] == [
            "No Aura or Visualforce components found to convert."
        ]

    @pytest.mark.asyncio
    async def test_conversion_order_focus_not_found(
        self, async_client: AsyncClient, account_components
    ):
        response = await async_client.post(
            "/api/v1/dependency-graph/conversion-order",
            json={"components": account_components, "focus": "Missing"},
        )

        assert response.status_code == 404


class TestConversionReadinessEndpoint:
    """Test POST /api/v1/dependency-graph/conversion-readiness."""

    @pytest.mark.asyncio
    async def test_blocked(self, async_client: AsyncClient, account_components):
        response = await async_client.post(
            "/api/v1/dependency-graph/conversion-readiness",
            json={"components": account_components, "component_id": "AccountPage"},
        )

        assert response.status_code == 200
        assert response.json() == {
            "component_id": "vf:AccountPage",
            "can_convert": False,
            "blocked_by": ["c:AccountCard"],
        }

    @pytest.mark.asyncio
    async def test_ready(self, async_client: AsyncClient, account_components):
        response = await async_client.post(
            "/api/v1/dependency-graph/conversion-readiness",
            json={
                "components": account_components,
                "component_id": "vf:AccountPage",
                "already_converted": ["c:AccountCard"],
            },
        )

        assert response.json()["can_convert"] is True

    @pytest.mark.asyncio
    async def test_unknown_component(self, async_client: AsyncClient, account_components):
        response = await async_client.post(
            "/api/v1/dependency-graph/conversion-readiness",
            json={"components": account_components, "component_id": "Nope"},
        )

        assert response.status_code == 404
        assert response.json()["detail"] == "Component 'Nope' not found"
