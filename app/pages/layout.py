"""Shared HTML shell and stylesheet for server-rendered pages."""

from html import escape

_BASE_CSS = """
* { box-sizing: border-box; }
body {
    font-family: system-ui, -apple-system, 'Segoe UI', sans-serif;
    margin: 0;
    min-height: 100vh;
    background: #f9fafb;
    color: #111827;
}
.wrap { max-width: 80rem; margin: 0 auto; padding: 2rem 1rem; }
h1 { font-size: 1.875rem; font-weight: 700; margin: 0; }
.subtitle { margin-top: 0.5rem; color: #4b5563; }
.header { margin-bottom: 2rem; }
.card {
    background: #fff;
    border: 1px solid #e5e7eb;
    border-radius: 0.5rem;
    box-shadow: 0 1px 2px rgba(0, 0, 0, 0.05);
}
code {
    font-family: ui-monospace, 'JetBrains Mono', monospace;
    font-size: 0.75rem;
    color: #4b5563;
    background: #f3f4f6;
    padding: 0.25rem 0.5rem;
    border-radius: 0.25rem;
}
a.btn, button.btn {
    display: inline-block;
    padding: 0.375rem 0.75rem;
    border: 1px solid transparent;
    border-radius: 0.375rem;
    font-size: 0.875rem;
    font-weight: 500;
    color: #fff;
    background: #2563eb;
    text-decoration: none;
    cursor: pointer;
}
a.btn:hover, button.btn:hover { background: #1d4ed8; }
button.btn:disabled { opacity: 0.5; cursor: not-allowed; }
a.btn.secondary { background: #fff; color: #1f2937; border-color: #d1d5db; }
"""


def render_page(
    title: str,
    body: str,
    *,
    description: str | None = None,
    extra_css: str = "",
    script: str = "",
) -> str:
    """Wrap body HTML in a full document with the shared stylesheet.

    title and description are escaped; body, extra_css and script are inserted as-is.
    """
    meta = ""
    if description:
        desc = escape(description)
        meta = (
            f'<meta name="description" content="{desc}">\n'
            f'    <meta property="og:title" content="{escape(title)}">\n'
            f'    <meta property="og:description" content="{desc}">'
        )
    script_tag = f"<script>{script}</script>" if script else ""
    return f"""
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{escape(title)}</title>
    {meta}
    <style>{_BASE_CSS}{extra_css}</style>
</head>
<body>
    <div class="wrap">
{body}
    </div>
    {script_tag}
</body>
</html>
""".strip()
