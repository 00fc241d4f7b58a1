"""Admin endpoints turn unexpected service failures into a logged 500."""

from unittest.mock import AsyncMock, patch

import pytest
from httpx import AsyncClient
from loguru import logger


@pytest.fixture
def error_logs():
    messages: list[str] = []
    handler_id = logger.add(messages.append, format="{message}", level="ERROR")
    yield messages
    logger.remove(handler_id)


@pytest.mark.parametrize(
    ("target", "method", "path", "detail"),
    [
        (
            "principle_service.set_active_many",
            "POST",
            "/api/admin/principles/bulk/activate",
            "Internal server error bulk-activating principles.",
        ),
        (
            "principle_service.force_delete_many",
            "POST",
            "/api/admin/principles/bulk/force-delete",
            "Internal server error bulk force-deleting principles.",
        ),
        (
            "principle_service.restore_principle",
            "POST",
            "/api/admin/principles/1/restore",
            "Internal server error restoring principle.",
        ),
        (
            "principle_service.get_principle",
            "GET",
            "/api/admin/principles/1",
            "Internal server error fetching principle.",
        ),
        (
            "team_service.toggle_active",
            "POST",
            "/api/admin/team/1/toggle-active",
            "Internal server error toggling team member.",
        ),
        (
            "team_service.reorder_members",
            "PUT",
            "/api/admin/team/order",
            "Internal server error reordering team members.",
        ),
        (
            "award_service.delete_many",
            "POST",
            "/api/admin/awards/bulk/delete",
            "Internal server error bulk-deleting awards.",
        ),
        (
            "award_service.toggle_featured",
            "POST",
            "/api/admin/awards/1/toggle-featured",
            "Internal server error toggling featured flag on award.",
        ),
        (
            "award_service.delete_award",
            "DELETE",
            "/api/admin/awards/1",
            "Internal server error deleting award.",
        ),
    ],
)
async def test_unexpected_error_is_logged_500(
    client: AsyncClient,
    error_logs: list[str],
    target: str,
    method: str,
    path: str,
    detail: str,
) -> None:
    failure = RuntimeError("database went away")
    json_body = {"ids": [1, 2]} if method in ("POST", "PUT") else None
    with patch(f"showcase_api.services.{target}", new_callable=AsyncMock, side_effect=failure):
        resp = await client.request(method, path, json=json_body)
    assert resp.status_code == 500
    assert resp.json() == {"detail": detail}
    assert any("database went away" in m for m in error_logs)
