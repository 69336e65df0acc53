"""Today dashboard page: shell, task panel fragment, and the page script.

The shell renders the loading state; its script fetches the panel fragment
(/dashboard/today/tasks) and swaps it in. The panel is one of the error,
empty or populated states. Mark-complete posts to
/dashboard/tasks/{id}/complete, then refetches the panel; failures raise a
blocking alert and leave the row in place.
"""

from datetime import datetime, tzinfo
from html import escape

from app.application.dtos.task import TaskResult
from app.application.use_cases.tasks import DashboardState, TodayView
from app.pages.layout import render_page

PAGE_TITLE = "Today's Tasks"
PAGE_DESCRIPTION = (
    "View and manage tasks due today. Mark tasks as complete and track your progress."
)

TYPE_BADGE_CLASSES = {
    "call": "badge-blue",
    "email": "badge-green",
    "review": "badge-purple",
}
STATUS_BADGE_CLASSES = {
    "pending": "badge-yellow",
    "in_progress": "badge-blue",
    "completed": "badge-green",
}
DEFAULT_BADGE_CLASS = "badge-gray"

APPLICATION_ID_PREFIX_LENGTH = 8

_TODAY_CSS = """
.center { display: flex; justify-content: center; align-items: center; padding: 3rem 0; }
.spinner {
    width: 3rem; height: 3rem;
    border-radius: 9999px;
    border-bottom: 2px solid #2563eb;
    animation: spin 1s linear infinite;
}
@keyframes spin { to { transform: rotate(360deg); } }
.error-box {
    background: #fef2f2; border: 1px solid #fecaca; border-radius: 0.5rem;
    padding: 1rem; margin-bottom: 1.5rem; color: #991b1b;
}
.error-box button {
    margin-top: 0.5rem; background: none; border: none; padding: 0;
    color: #dc2626; font-size: 0.875rem; font-weight: 500; cursor: pointer;
}
.empty { padding: 3rem; text-align: center; }
.empty h3 { margin-top: 1rem; font-size: 1.125rem; font-weight: 500; }
.empty p { margin-top: 0.5rem; color: #6b7280; }
.empty .check { font-size: 2.5rem; color: #9ca3af; }
.table-wrap { overflow-x: auto; }
table { min-width: 100%; border-collapse: collapse; }
th {
    padding: 0.75rem 1.5rem; text-align: left; font-size: 0.75rem; font-weight: 500;
    color: #6b7280; text-transform: uppercase; letter-spacing: 0.05em; background: #f9fafb;
}
th.right, td.right { text-align: right; }
td { padding: 1rem 1.5rem; border-top: 1px solid #e5e7eb; font-size: 0.875rem; white-space: nowrap; }
td.description { white-space: normal; color: #4b5563; }
tr:hover td { background: #f9fafb; }
.badge {
    display: inline-flex; align-items: center; padding: 0.125rem 0.625rem;
    border-radius: 9999px; font-size: 0.75rem; font-weight: 500;
}
.badge-blue { background: #dbeafe; color: #1e40af; }
.badge-green { background: #dcfce7; color: #166534; }
.badge-purple { background: #f3e8ff; color: #6b21a8; }
.badge-yellow { background: #fef9c3; color: #854d0e; }
.badge-gray { background: #f3f4f6; color: #1f2937; }
.count { margin-top: 1rem; font-size: 0.875rem; color: #4b5563; text-align: center; }
"""

# Plain string (not an f-string): braces are JavaScript.
_TODAY_SCRIPT = """
(function () {
    var panel = document.getElementById('tasks-panel');
    var loadingHtml = panel.innerHTML;

    function showError(message) {
        panel.innerHTML = '';
        var box = document.createElement('div');
        box.className = 'error-box';
        var text = document.createElement('p');
        text.textContent = 'Error: ' + message;
        var retry = document.createElement('button');
        retry.type = 'button';
        retry.setAttribute('data-action', 'retry');
        retry.textContent = 'Try again';
        box.appendChild(text);
        box.appendChild(retry);
        panel.appendChild(box);
    }

    async function loadTasks(showSpinner) {
        if (showSpinner) panel.innerHTML = loadingHtml;
        try {
            var resp = await fetch('/dashboard/today/tasks', { headers: { 'Accept': 'text/html' } });
            if (!resp.ok) throw new Error('Failed to fetch tasks');
            panel.innerHTML = await resp.text();
        } catch (err) {
            showError(err.message || 'Failed to fetch tasks');
        }
    }

    async function markComplete(taskId) {
        var buttons = panel.querySelectorAll('button[data-action="complete"]');
        buttons.forEach(function (b) { b.disabled = true; b.textContent = 'Updating...'; });
        try {
            var resp = await fetch('/dashboard/tasks/' + encodeURIComponent(taskId) + '/complete', { method: 'POST' });
            var body = await resp.json().catch(function () { return {}; });
            if (!resp.ok || !body.success) throw new Error(body.error || 'Failed to update task');
            await loadTasks(false);
        } catch (err) {
            alert(err.message || 'Failed to update task');
            buttons.forEach(function (b) { b.disabled = false; b.textContent = 'Mark Complete'; });
        }
    }

    panel.addEventListener('click', function (event) {
        var target = event.target.closest('button[data-action]');
        if (!target) return;
        if (target.getAttribute('data-action') === 'retry') loadTasks(true);
        if (target.getAttribute('data-action') === 'complete') markComplete(target.getAttribute('data-task-id'));
    });

    loadTasks(false);
})();
"""


def type_badge_class(task_type: str) -> str:
    return TYPE_BADGE_CLASSES.get(task_type, DEFAULT_BADGE_CLASS)


def status_badge_class(status: str) -> str:
    return STATUS_BADGE_CLASSES.get(status, DEFAULT_BADGE_CLASS)


def truncate_application_id(application_id: str) -> str:
    """First eight characters followed by an ellipsis."""
    return f"{application_id[:APPLICATION_ID_PREFIX_LENGTH]}..."


def format_due_time(due_at: datetime, tz: tzinfo) -> str:
    """Local wall-clock time, e.g. "09:30 AM"."""
    return due_at.astimezone(tz).strftime("%I:%M %p")


def _render_row(task: TaskResult, tz: tzinfo) -> str:
    task_id = escape(task.id)
    description = escape(task.description) if task.description else "-"
    return f"""
                <tr>
                    <td><span class="badge {type_badge_class(task.type)}">{escape(task.type)}</span></td>
                    <td><code>{escape(truncate_application_id(task.application_id))}</code></td>
                    <td>{format_due_time(task.due_at, tz)}</td>
                    <td><span class="badge {status_badge_class(task.status)}">{escape(task.status)}</span></td>
                    <td class="description">{description}</td>
                    <td class="right">
                        <button type="button" class="btn" data-action="complete" data-task-id="{task_id}">Mark Complete</button>
                    </td>
                </tr>"""


def _render_table(tasks: list[TaskResult], tz: tzinfo) -> str:
    rows = "".join(_render_row(task, tz) for task in tasks)
    noun = "task" if len(tasks) == 1 else "tasks"
    return f"""
<div class="card">
    <div class="table-wrap">
        <table>
            <thead>
                <tr>
                    <th>Type</th>
                    <th>Application ID</th>
                    <th>Due At</th>
                    <th>Status</th>
                    <th>Description</th>
                    <th class="right">Action</th>
                </tr>
            </thead>
            <tbody>{rows}
            </tbody>
        </table>
    </div>
</div>
<div class="count">Showing {len(tasks)} {noun} due today</div>"""


def render_today_panel(view: TodayView, tz: tzinfo) -> str:
    """Render exactly one of the loading, error, empty or populated states."""
    if view.state is DashboardState.LOADING:
        return '<div class="center" role="status" aria-label="Loading"><div class="spinner"></div></div>'
    if view.state is DashboardState.ERROR:
        message = escape(view.error or "Failed to fetch tasks")
        return f"""
<div class="error-box">
    <p>Error: {message}</p>
    <button type="button" data-action="retry">Try again</button>
</div>"""
    if view.state is DashboardState.EMPTY:
        return """
<div class="card empty">
    <div class="check" aria-hidden="true">&#10003;</div>
    <h3>No tasks due today</h3>
    <p>You're all caught up! Enjoy your day.</p>
</div>"""
    return _render_table(view.tasks, tz)


def render_today_page(tz: tzinfo) -> str:
    """Return the dashboard document in its loading state."""
    body = f"""
        <header class="header">
            <h1>{PAGE_TITLE}</h1>
            <p class="subtitle">Tasks due today that need attention</p>
        </header>
        <div id="tasks-panel">{render_today_panel(TodayView(DashboardState.LOADING), tz)}</div>
"""
    return render_page(
        PAGE_TITLE,
        body,
        description=PAGE_DESCRIPTION,
        extra_css=_TODAY_CSS,
        script=_TODAY_SCRIPT,
    )
