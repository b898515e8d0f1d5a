# =============================================================================
# app/routers/pages.py - Gated Page Endpoints
# =============================================================================
# Placeholder payloads for the pages behind the session gate. The frontend
# renders the real pages; these only give the gate something to pass to.
# =============================================================================

from fastapi import APIRouter

router = APIRouter()


@router.get("/login")
async def login_page() -> dict:
    return {"page": "login"}


@router.get("/signup")
async def signup_page() -> dict:
    return {"page": "signup"}


@router.get("/dashboard")
async def dashboard_page() -> dict:
    return {"page": "dashboard"}


@router.get("/dashboard/{section:path}")
async def dashboard_section_page(section: str) -> dict:
    return {"page": "dashboard", "section": section}
