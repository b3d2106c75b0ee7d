"""Admin API endpoints with simple token auth."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Header, HTTPException, Request, status
from fastapi.responses import HTMLResponse

from artzyful.api.models import AdminUpdateRequest  # noqa: TC001

if TYPE_CHECKING:
    from artzyful.containers import AppContainer

router = APIRouter(prefix="/api/admin", tags=["admin"])


def _get_admin_token(request: Request) -> str:
    container: AppContainer = request.app.state.container
    return container.settings.admin_token


async def require_admin(
    x_admin_token: str | None = Header(default=None),
    admin_token: str = Depends(_get_admin_token),
) -> None:
    """Ensure requests include a valid admin token."""
    if not x_admin_token or x_admin_token != admin_token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)


@router.get("/health", dependencies=[Depends(require_admin)])
async def admin_health() -> dict[str, str]:
    """Admin health check endpoint."""
    return {"status": "ok"}


@router.get("/prompts", dependencies=[Depends(require_admin)])
async def get_prompts(request: Request) -> dict[str, object]:
    """Return style prompts and site content."""
    container: AppContainer = request.app.state.container
    return {
        "prompts": container.catalog_service.get_prompts(),
        "siteContent": container.catalog_service.get_site_content(),
    }


@router.post("/prompts", dependencies=[Depends(require_admin)])
async def update_prompts(
    body: AdminUpdateRequest, request: Request
) -> dict[str, object]:
    """Overwrite style prompts and/or site content."""
    container: AppContainer = request.app.state.container
    container.catalog_service.update(
        prompts=body.prompts, site_content=body.site_content
    )
    return {"success": True}


@router.get("/ui", response_class=HTMLResponse)
async def admin_ui() -> HTMLResponse:
    """Minimal prompt editor that consumes the admin API."""
    return HTMLResponse(_ADMIN_UI_HTML)


_ADMIN_UI_HTML = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>Artzyful Admin</title>
    <style>
      body { font-family: ui-sans-serif, system-ui, sans-serif; margin: 2rem; }
      .row { margin-bottom: 1rem; }
      input { padding: 0.4rem 0.6rem; width: 320px; }
      textarea { width: 100%; height: 22rem; font-family: ui-monospace, monospace; }
      button { padding: 0.4rem 0.8rem; margin-right: 0.5rem; }
    </style>
  </head>
  <body>
    <h1>Artzyful Admin</h1>
    <div class="row">
      <label>Admin token</label><br />
      <input id="token" type="password" placeholder="X-Admin-Token" />
    </div>
    <div class="row">
      <button onclick="load()">Load</button>
      <button onclick="save()">Save</button>
      <span id="status">Ready.</span>
    </div>
    <textarea id="editor"></textarea>
    <script>
      function headers() {
        return {
          'Content-Type': 'application/json',
          'X-Admin-Token': document.getElementById('token').value
        };
      }
      async function load() {
        const status = document.getElementById('status');
        const res = await fetch('/api/admin/prompts', { headers: headers() });
        if (!res.ok) { status.textContent = 'Error: ' + res.status; return; }
        const data = await res.json();
        document.getElementById('editor').value = JSON.stringify(data, null, 2);
        status.textContent = 'Loaded.';
      }
      async function save() {
        const status = document.getElementById('status');
        let body;
        try {
          body = JSON.parse(document.getElementById('editor').value);
        } catch (err) {
          status.textContent = 'Invalid JSON';
          return;
        }
        const res = await fetch('/api/admin/prompts', {
          method: 'POST', headers: headers(), body: JSON.stringify(body)
        });
        status.textContent = res.ok ? 'Saved.' : 'Error: ' + res.status;
      }
    </script>
  </body>
</html>
"""
