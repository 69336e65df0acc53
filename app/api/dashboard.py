"""Today dashboard routes.

GET /dashboard/today serves the page shell (loading state); its script pulls
GET /dashboard/today/tasks (HTML fragment: error, empty or populated) and posts
to /dashboard/tasks/{task_id}/complete. All platform access uses the anon key.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from app.api.v1.dependencies import get_today_dashboard_service
from app.application.use_cases.tasks import TodayDashboardService
from app.middleware import PAGE_CONTENT_SECURITY_POLICY
from app.pages import render_today_page, render_today_panel

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("/today", response_class=HTMLResponse)
async def today_page(
    service: Annotated[TodayDashboardService, Depends(get_today_dashboard_service)],
) -> HTMLResponse:
    """Dashboard document; tasks load client-side."""
    return HTMLResponse(
        content=render_today_page(service.tz),
        headers={"Content-Security-Policy": PAGE_CONTENT_SECURITY_POLICY},
    )


@router.get("/today/tasks", response_class=HTMLResponse)
async def today_tasks_fragment(
    service: Annotated[TodayDashboardService, Depends(get_today_dashboard_service)],
) -> HTMLResponse:
    """Task panel for today. Fetch failures render the error state (still 200)."""
    view = await service.load_view()
    return HTMLResponse(content=render_today_panel(view, service.tz))


@router.post("/tasks/{task_id}/complete")
async def complete_task(
    task_id: str,
    service: Annotated[TodayDashboardService, Depends(get_today_dashboard_service)],
) -> dict[str, object]:
    """Mark one task completed. Failures answer {"success": false, "error"} via the handlers."""
    await service.mark_complete(task_id)
    return {"success": True, "task_id": task_id}
