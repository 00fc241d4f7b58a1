"""Integration tests for the admin management endpoints."""

from httpx import AsyncClient


class TestAdminPrinciples:
    """CRUD, trash and bulk actions on /api/admin/principles."""

    async def test_create_appends_last(self, client: AsyncClient, make_principle) -> None:
        await make_principle(title="Existing", sort_order=4)
        resp = await client.post(
            "/api/admin/principles",
            json={"title": "Eco Friendly Concept", "description": "Green.", "icon": "Leaf"},
        )
        assert resp.status_code == 201
        body = resp.json()
        assert body["sort_order"] == 5
        assert body["is_active"] is True
        assert body["deleted_at"] is None

    async def test_create_duplicate_title_is_409(self, client: AsyncClient, make_principle) -> None:
        await make_principle(title="Taken")
        resp = await client.post("/api/admin/principles", json={"title": "Taken", "description": "Again."})
        assert resp.status_code == 409
        assert "already exists" in resp.json()["detail"]

    async def test_create_missing_description_is_422(self, client: AsyncClient) -> None:
        resp = await client.post("/api/admin/principles", json={"title": "No body"})
        assert resp.status_code == 422

    async def test_patch_partial(self, client: AsyncClient, make_principle) -> None:
        principle = await make_principle(subtitle="Old subtitle")
        resp = await client.patch(f"/api/admin/principles/{principle.id}", json={"subtitle": None})
        assert resp.status_code == 200
        assert resp.json()["subtitle"] is None
        assert resp.json()["title"] == "Prioritize Trust"

    async def test_patch_missing_is_404(self, client: AsyncClient) -> None:
        resp = await client.patch("/api/admin/principles/9999", json={"title": "Nope"})
        assert resp.status_code == 404

    async def test_patch_duplicate_title_is_409(self, client: AsyncClient, make_principle) -> None:
        await make_principle(title="Taken")
        other = await make_principle(title="Other")
        other_id = other.id
        resp = await client.patch(f"/api/admin/principles/{other_id}", json={"title": "Taken"})
        assert resp.status_code == 409

    async def test_soft_delete_restore_and_force(self, client: AsyncClient, make_principle) -> None:
        principle = await make_principle()
        principle_id = principle.id

        assert (await client.delete(f"/api/admin/principles/{principle_id}")).status_code == 204
        trashed = (await client.get("/api/admin/principles", params={"trashed": "only"})).json()
        assert [p["id"] for p in trashed["items"]] == [principle_id]
        assert (await client.get("/api/admin/principles")).json()["pagination"]["total"] == 0

        resp = await client.post(f"/api/admin/principles/{principle_id}/restore")
        assert resp.status_code == 200
        assert resp.json()["deleted_at"] is None

        resp = await client.post(f"/api/admin/principles/{principle_id}/restore")
        assert resp.status_code == 409

        assert (await client.delete(f"/api/admin/principles/{principle_id}/force")).status_code == 204
        assert (await client.get(f"/api/admin/principles/{principle_id}")).status_code == 404

    async def test_force_delete_live_principle_is_404(self, client: AsyncClient, make_principle) -> None:
        principle = await make_principle()
        principle_id = principle.id

        resp = await client.delete(f"/api/admin/principles/{principle_id}/force")
        assert resp.status_code == 404
        assert resp.json()["detail"] == f"Trashed principle {principle_id} not found"
        assert (await client.get(f"/api/admin/principles/{principle_id}")).status_code == 200

    async def test_list_filters_and_pagination(self, client: AsyncClient, make_principle) -> None:
        for i in range(3):
            await make_principle(title=f"Active {i}", sort_order=i)
        await make_principle(title="Dormant", sort_order=9, is_active=False)

        resp = await client.get("/api/admin/principles", params={"page_size": 2})
        body = resp.json()
        assert body["pagination"] == {"total": 4, "page": 1, "page_size": 2, "total_pages": 2}
        assert [p["title"] for p in body["items"]] == ["Active 0", "Active 1"]

        inactive = (await client.get("/api/admin/principles", params={"is_active": False})).json()
        assert [p["title"] for p in inactive["items"]] == ["Dormant"]

        newest_order = (await client.get("/api/admin/principles", params={"direction": "desc"})).json()
        assert newest_order["items"][0]["title"] == "Dormant"

    async def test_page_size_capped(self, client: AsyncClient) -> None:
        resp = await client.get("/api/admin/principles", params={"page_size": 500})
        assert resp.status_code == 422

    async def test_bulk_actions(self, client: AsyncClient, make_principle) -> None:
        a = await make_principle(title="A")
        b = await make_principle(title="B")
        ids = [a.id, b.id]

        resp = await client.post("/api/admin/principles/bulk/deactivate", json={"ids": ids})
        assert resp.json() == {"affected": 2}
        resp = await client.post("/api/admin/principles/bulk/delete", json={"ids": ids})
        assert resp.json() == {"affected": 2}
        resp = await client.post("/api/admin/principles/bulk/restore", json={"ids": [a.id]})
        assert resp.json() == {"affected": 1}
        resp = await client.post("/api/admin/principles/bulk/force-delete", json={"ids": ids})
        assert resp.json() == {"affected": 1}
        assert (await client.get(f"/api/admin/principles/{ids[0]}")).status_code == 200
        assert (await client.get(f"/api/admin/principles/{ids[1]}")).status_code == 404

    async def test_bulk_requires_ids(self, client: AsyncClient) -> None:
        resp = await client.post("/api/admin/principles/bulk/activate", json={"ids": []})
        assert resp.status_code == 422


class TestAdminTeam:
    """CRUD and bulk actions on /api/admin/team."""

    async def test_create_and_get(self, client: AsyncClient) -> None:
        resp = await client.post(
            "/api/admin/team",
            json={"name": "Alex Morgan", "position": "Full Stack Developer", "image": "team-members/alex.jpg"},
        )
        assert resp.status_code == 201
        member_id = resp.json()["id"]
        assert resp.json()["sort_order"] == 0

        resp = await client.get(f"/api/admin/team/{member_id}")
        assert resp.status_code == 200
        assert resp.json()["image"] == "team-members/alex.jpg"

    async def test_create_without_image_is_422(self, client: AsyncClient) -> None:
        resp = await client.post("/api/admin/team", json={"name": "No Face", "position": "Ghost"})
        assert resp.status_code == 422

    async def test_admin_sees_inactive(self, client: AsyncClient, make_member) -> None:
        await make_member(name="Hidden", is_active=False)
        body = (await client.get("/api/admin/team")).json()
        assert [m["name"] for m in body["items"]] == ["Hidden"]

    async def test_delete_is_permanent(self, client: AsyncClient, make_member) -> None:
        member = await make_member()
        member_id = member.id
        assert (await client.delete(f"/api/admin/team/{member_id}")).status_code == 204
        assert (await client.get(f"/api/admin/team/{member_id}")).status_code == 404
        assert (await client.delete(f"/api/admin/team/{member_id}")).status_code == 404

    async def test_reorder(self, client: AsyncClient, make_member) -> None:
        a = await make_member(name="A", sort_order=3)
        b = await make_member(name="B", sort_order=4)
        c = await make_member(name="C", sort_order=5)

        resp = await client.put("/api/admin/team/order", json={"ids": [c.id, a.id, b.id]})
        assert resp.status_code == 200
        assert [(m["name"], m["sort_order"]) for m in resp.json()] == [("C", 3), ("A", 4), ("B", 5)]

        names = [m["name"] for m in (await client.get("/api/team")).json()["data"]]
        assert names == ["C", "A", "B"]

    async def test_reorder_unknown_id_is_404(self, client: AsyncClient, make_member) -> None:
        member = await make_member()
        resp = await client.put("/api/admin/team/order", json={"ids": [member.id, 9999]})
        assert resp.status_code == 404

    async def test_reorder_duplicates_is_422(self, client: AsyncClient, make_member) -> None:
        member = await make_member()
        resp = await client.put("/api/admin/team/order", json={"ids": [member.id, member.id]})
        assert resp.status_code == 422

    async def test_bulk_activate(self, client: AsyncClient, make_member) -> None:
        a = await make_member(name="A", is_active=False)
        b = await make_member(name="B", is_active=False)
        resp = await client.post("/api/admin/team/bulk/activate", json={"ids": [a.id, b.id, 9999]})
        assert resp.json() == {"affected": 2}
        assert (await client.get("/api/team")).json()["count"] == 2


class TestAdminAwards:
    """CRUD, toggles and bulk actions on /api/admin/awards."""

    async def test_create_appends_last(self, client: AsyncClient, make_award) -> None:
        await make_award(title="Existing", sort_order=7)
        resp = await client.post("/api/admin/awards", json={"title": "New", "location": "Zurich, 2022"})
        assert resp.status_code == 201
        assert resp.json()["sort_order"] == 8
        assert resp.json()["featured"] is False

    async def test_toggle_featured_shows_on_site(self, client: AsyncClient, make_award) -> None:
        award = await make_award()
        assert (await client.get("/api/awards/featured")).json()["data"] == []

        resp = await client.post(f"/api/admin/awards/{award.id}/toggle-featured")
        assert resp.status_code == 200
        assert resp.json()["featured"] is True

        featured = (await client.get("/api/awards/featured")).json()["data"]
        assert [a["title"] for a in featured] == ["Teamwork and Solidarity"]

    async def test_toggle_missing_is_404(self, client: AsyncClient) -> None:
        resp = await client.post("/api/admin/awards/9999/toggle-active")
        assert resp.status_code == 404

    async def test_patch_duplicate_is_409(self, client: AsyncClient, make_award) -> None:
        await make_award(title="Taken")
        other = await make_award(title="Other")
        other_id = other.id
        resp = await client.patch(f"/api/admin/awards/{other_id}", json={"title": "Taken"})
        assert resp.status_code == 409
        assert resp.json()["detail"] == "Update would create a duplicate award title"

    async def test_list_filter_featured(self, client: AsyncClient, make_award) -> None:
        await make_award(title="Featured", featured=True)
        await make_award(title="Plain")
        body = (await client.get("/api/admin/awards", params={"featured": True})).json()
        assert [a["title"] for a in body["items"]] == ["Featured"]

    async def test_bulk_delete(self, client: AsyncClient, make_award) -> None:
        a = await make_award(title="A")
        await make_award(title="B")
        resp = await client.post("/api/admin/awards/bulk/delete", json={"ids": [a.id]})
        assert resp.json() == {"affected": 1}
        assert [x["title"] for x in (await client.get("/api/awards")).json()["data"]] == ["B"]


class TestDashboard:
    """GET /api/admin/dashboard."""

    async def test_dashboard(self, client: AsyncClient, make_principle, make_member, make_award) -> None:
        await make_principle()
        await make_member()
        await make_award(featured=True)

        resp = await client.get("/api/admin/dashboard")
        assert resp.status_code == 200
        body = resp.json()
        assert body["principles"] == {"total": 1, "active": 1, "inactive": 0, "trashed": 0}
        assert body["team"]["recently_added"] == 1
        assert body["awards"] == {"total": 1, "active": 1, "featured": 1}
        assert [a["title"] for a in body["latest_awards"]] == ["Teamwork and Solidarity"]


class TestReadOnlyPolicy:
    """Admin writes are refused under the read_only policy."""

    async def test_reads_allowed_writes_forbidden(self, client: AsyncClient, settings, make_award) -> None:
        settings.admin_policy = "read_only"
        award = await make_award()

        assert (await client.get("/api/admin/awards")).status_code == 200
        assert (await client.get("/api/admin/dashboard")).status_code == 200

        resp = await client.post("/api/admin/awards", json={"title": "New", "location": "Bali, 2020"})
        assert resp.status_code == 403
        assert resp.json()["detail"] == "Not permitted to create awards"
        assert (await client.delete(f"/api/admin/awards/{award.id}")).status_code == 403
        assert (await client.put("/api/admin/principles/order", json={"ids": [1]})).status_code == 403
