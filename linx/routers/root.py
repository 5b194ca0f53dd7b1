from html import escape
from urllib.parse import quote

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from linx.core.config import settings
from linx.core.mars import CURIOSITY_LANDING

router = APIRouter(tags=["About"])

EXAMPLE_DATES = (
    "2026-02-09T21:42:00+01:00",
    "2026-02-09T20:42:00Z",
    "2026-02-09",
)


def render_about_page(app_name: str) -> str:
    examples = "\n".join(
        f'      <li><a href="/weather?date={escape(quote(d, safe=""))}"><code>/weather?date={escape(d)}</code></a></li>'
        for d in EXAMPLE_DATES
    )
    name = escape(app_name)
    return f"""<!DOCTYPE html>
<html lang="en">
  <head>
    <meta charset="utf-8">
    <title>{name}: Mars weather</title>
  </head>
  <body>
    <h1>{name}</h1>
    <p>
      Mars weather lookup by Earth date. A date is converted to the number of sols
      elapsed since the Curiosity landing ({CURIOSITY_LANDING.isoformat()}) and the
      REMS report stored for that sol is returned as JSON.
    </p>
    <h2>Endpoints</h2>
    <ul>
      <li><code>GET /weather?date=...</code>: weather for a date or date-time (defaults to now)</li>
      <li><code>GET /sols</code>, <code>GET /sols/{{sol}}</code>: stored reports</li>
      <li><code>POST /ingestion/sols</code>: import a REMS feed document</li>
      <li><code>GET /health</code>, <code>GET /health/db</code>: service status</li>
      <li><a href="/docs"><code>/docs</code></a>: OpenAPI documentation</li>
    </ul>
    <h2>Examples</h2>
    <ul>
{examples}
    </ul>
  </body>
</html>
"""


@router.get(
    "/",
    response_class=HTMLResponse,
    summary="About this API",
    description="Human-readable description of the service and its endpoints.",
)
def about() -> HTMLResponse:
    return HTMLResponse(render_about_page(settings.app_name))
