"""Root landing page with links to the dashboard and API docs."""

from html import escape

from app.pages.layout import render_page

_ROOT_CSS = """
.card { padding: 1.5rem 1.75rem; margin-bottom: 1.25rem; max-width: 40rem; }
.card h2 {
    font-size: 0.75rem;
    font-weight: 600;
    text-transform: uppercase;
    letter-spacing: 0.08em;
    color: #6b7280;
    margin: 0 0 1rem 0;
}
.card p { color: #4b5563; line-height: 1.55; }
.links { display: flex; flex-wrap: wrap; gap: 0.75rem; margin-top: 1rem; }
"""


def render_root_page(app_name: str) -> str:
    """Return HTML for the root landing page."""
    name = escape(app_name)
    body = f"""
        <header class="header">
            <h1>{name}</h1>
            <p class="subtitle">Follow-up tasks for applications.</p>
        </header>
        <section class="card" aria-labelledby="dashboard-heading">
            <h2 id="dashboard-heading">Dashboard</h2>
            <p>See what is due today and mark tasks complete.</p>
            <div class="links">
                <a href="/dashboard/today" class="btn">Today's tasks</a>
            </div>
        </section>
        <section class="card" aria-labelledby="api-heading">
            <h2 id="api-heading">API</h2>
            <p>Create a task with <code>POST /functions/v1/create-task</code> and a JSON body
            of <code>application_id</code>, <code>task_type</code> and <code>due_at</code>.</p>
            <div class="links">
                <a href="/docs" class="btn">Open API docs (Swagger)</a>
                <a href="/redoc" class="btn secondary">ReDoc</a>
            </div>
        </section>
"""
    return render_page(app_name, body, extra_css=_ROOT_CSS)
