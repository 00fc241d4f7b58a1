"""Integration tests for the public website endpoints against an in-memory database."""

from httpx import AsyncClient


class TestPrinciplesEndpoints:
    """GET /api/principles and friends."""

    async def test_list_only_active_in_order(self, client: AsyncClient, make_principle) -> None:
        await make_principle(title="Second", sort_order=2)
        await make_principle(title="First", sort_order=1, icon="icons/shield.svg")
        await make_principle(title="Hidden", sort_order=0, is_active=False)

        resp = await client.get("/api/principles")
        assert resp.status_code == 200
        body = resp.json()
        assert body["success"] is True
        assert body["message"] == "Principles retrieved successfully"
        assert body["meta"]["total"] == 2
        assert "timestamp" in body["meta"]
        assert [p["title"] for p in body["data"]] == ["First", "Second"]
        assert body["data"][0]["icon"] == "https://example.test/storage/icons/shield.svg"

    async def test_empty_list(self, client: AsyncClient) -> None:
        resp = await client.get("/api/principles")
        assert resp.status_code == 200
        assert resp.json()["data"] == []
        assert resp.json()["meta"]["total"] == 0

    async def test_trashed_excluded(self, client: AsyncClient, make_principle) -> None:
        principle = await make_principle(title="Trashed")
        resp = await client.delete(f"/api/admin/principles/{principle.id}")
        assert resp.status_code == 204

        resp = await client.get("/api/principles")
        assert resp.json()["data"] == []

    async def test_get_one(self, client: AsyncClient, make_principle) -> None:
        principle = await make_principle(subtitle="Always")
        resp = await client.get(f"/api/principles/{principle.id}")
        assert resp.status_code == 200
        assert resp.json()["message"] == "Principle retrieved successfully"
        data = resp.json()["data"]
        assert data["title"] == "Prioritize Trust"
        assert data["subtitle"] == "Always"
        assert data["image"] is None

    async def test_get_inactive_is_404(self, client: AsyncClient, make_principle) -> None:
        principle = await make_principle(is_active=False)
        resp = await client.get(f"/api/principles/{principle.id}")
        assert resp.status_code == 404
        assert resp.json() == {"success": False, "message": "Principle not found or inactive"}

    async def test_get_missing_is_404(self, client: AsyncClient) -> None:
        resp = await client.get("/api/principles/9999")
        assert resp.status_code == 404
        assert resp.json()["success"] is False

    async def test_stats(self, client: AsyncClient, make_principle) -> None:
        await make_principle(title="A")
        await make_principle(title="B", is_active=False)
        resp = await client.get("/api/principles/stats/overview")
        assert resp.status_code == 200
        assert resp.json()["message"] == "Statistics retrieved successfully"
        assert resp.json()["data"] == {"total": 2, "active": 1, "inactive": 1}


class TestCacheBehaviour:
    """Cache-aside reads and write invalidation as seen over HTTP."""

    async def test_direct_insert_stays_stale_until_a_write(self, client: AsyncClient, make_principle) -> None:
        assert (await client.get("/api/principles")).json()["data"] == []

        # Bypasses the services, so the cached list is not evicted.
        await make_principle(title="Inserted directly")
        assert (await client.get("/api/principles")).json()["data"] == []

        resp = await client.post(
            "/api/admin/principles",
            json={"title": "Created via admin", "description": "Visible at once."},
        )
        assert resp.status_code == 201
        titles = [p["title"] for p in (await client.get("/api/principles")).json()["data"]]
        assert titles == ["Inserted directly", "Created via admin"]

    async def test_toggle_member_updates_list_and_stats(self, client: AsyncClient, make_member) -> None:
        first = await make_member(name="First", sort_order=1)
        await make_member(name="Second", sort_order=2)
        assert len((await client.get("/api/team")).json()["data"]) == 2
        assert (await client.get("/api/team/stats/overview")).json()["data"]["active"] == 2

        resp = await client.post(f"/api/admin/team/{first.id}/toggle-active")
        assert resp.status_code == 200
        assert resp.json()["is_active"] is False

        listed = (await client.get("/api/team")).json()
        stats = (await client.get("/api/team/stats/overview")).json()["data"]
        assert [m["name"] for m in listed["data"]] == ["Second"]
        assert listed["count"] == 1
        assert stats == {"total": 2, "active": 1, "inactive": 1, "percentage_active": 50.0}


class TestTeamEndpoints:
    """GET /api/team and friends."""

    async def test_list(self, client: AsyncClient, make_member) -> None:
        await make_member(name="Angga Setiawan", sort_order=0)
        await make_member(name="Inactive", is_active=False)

        resp = await client.get("/api/team")
        assert resp.status_code == 200
        body = resp.json()
        assert body["message"] == "Team members retrieved successfully"
        assert body["count"] == 1
        assert body["data"][0]["image"] == "https://example.test/storage/team-members/shayna-liza.jpg"

    async def test_stats_rounding(self, client: AsyncClient, make_member) -> None:
        await make_member(name="A")
        await make_member(name="B")
        await make_member(name="C", is_active=False)
        body = (await client.get("/api/team/stats/overview")).json()
        assert body["message"] == "Team statistics retrieved successfully"
        assert body["data"]["percentage_active"] == 66.67

    async def test_stats_empty(self, client: AsyncClient) -> None:
        data = (await client.get("/api/team/stats/overview")).json()["data"]
        assert data == {"total": 0, "active": 0, "inactive": 0, "percentage_active": 0}

    async def test_get_one_with_timestamps(self, client: AsyncClient, make_member) -> None:
        member = await make_member()
        body = (await client.get(f"/api/team/{member.id}")).json()
        assert body["message"] == "Team member retrieved successfully"
        data = body["data"]
        assert data["name"] == "Shayna Liza"
        assert data["location"] == "Bali, Indonesia"
        assert "created_at" in data

    async def test_get_inactive_is_404(self, client: AsyncClient, make_member) -> None:
        member = await make_member(is_active=False)
        resp = await client.get(f"/api/team/{member.id}")
        assert resp.status_code == 404
        assert resp.json() == {
            "success": False,
            "message": "Team member not found or is inactive",
            "error": "The requested team member does not exist or is not currently active",
        }


class TestAwardsEndpoints:
    """GET /api/awards and /api/awards/featured."""

    async def test_sorted_by_sort_order(self, client: AsyncClient, make_award) -> None:
        await make_award(title="Ten", sort_order=10)
        await make_award(title="One", sort_order=1)
        await make_award(title="Five", sort_order=5)

        data = (await client.get("/api/awards")).json()["data"]
        assert [a["title"] for a in data] == ["One", "Five", "Ten"]
        assert set(data[0]) == {"id", "title", "location", "featured"}

    async def test_ties_newest_first(self, client: AsyncClient, make_award) -> None:
        await make_award(title="Older", sort_order=3)
        await make_award(title="Newer", sort_order=3)
        data = (await client.get("/api/awards")).json()["data"]
        assert [a["title"] for a in data] == ["Newer", "Older"]

    async def test_featured(self, client: AsyncClient, make_award) -> None:
        await make_award(title="Featured", featured=True)
        await make_award(title="Inactive featured", featured=True, is_active=False)
        await make_award(title="Plain")

        resp = await client.get("/api/awards/featured")
        assert resp.status_code == 200
        assert [a["title"] for a in resp.json()["data"]] == ["Featured"]
