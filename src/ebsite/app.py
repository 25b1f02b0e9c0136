# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

import logging
import sqlite3
from typing import Any, Optional

from fastapi import APIRouter, FastAPI, Request
from fastapi.responses import JSONResponse

from ebsite.auth.errors import AuthError, AuthenticationFailure, ConfigurationError
from ebsite.auth.session import (
    check_access_code,
    clear_session_cookie,
    mint_session,
    set_session_cookie,
)
from ebsite.config import Settings
from ebsite.core.errors import NotFound
from ebsite.infra.db import init_db
from ebsite.infra.kv_store import KeyValueStore
from ebsite.permissions import auth_error_response, is_authenticated, session_guard, settings_for
from ebsite.schemas import (
    CommentIn,
    CommentPatch,
    LeadIn,
    LeadUpdate,
    ProfileIn,
    PropertyIn,
)
from ebsite.services import lead_service, profile_service, property_service, testimonial_service

logger = logging.getLogger(__name__)

router = APIRouter()

OK = {"success": True}


def _db(request: Request) -> str:
    return settings_for(request).db_path


def _kv(request: Request) -> KeyValueStore:
    return request.app.state.kv


# --- Session ---------------------------------------------------------------


async def _login_candidate(request: Request) -> Any:
    """`password` from a JSON object body. Anything else yields None (a plain mismatch)."""
    try:
        data = await request.json()
    except ValueError:
        return None
    return data.get("password") if isinstance(data, dict) else None


@router.post("/api/admin/login")
async def login(request: Request):
    settings = settings_for(request)
    candidate = await _login_candidate(request)
    try:
        check_access_code(settings, candidate)
    except ConfigurationError as e:
        logger.error("Login refused: ADMIN_CODE or SESSION_SECRET not configured")
        return auth_error_response(e)
    except AuthenticationFailure as e:
        logger.warning("Login failed from %s", request.client.host if request.client else "?")
        return auth_error_response(e)

    resp = JSONResponse(OK)
    set_session_cookie(resp, mint_session(settings))
    logger.info("Admin session issued")
    return resp


@router.post("/api/admin/logout")
def logout():
    resp = JSONResponse(OK)
    clear_session_cookie(resp)
    return resp


@router.get("/api/admin/me")
def me(request: Request):
    if is_authenticated(request):
        return {"authenticated": True}
    return JSONResponse({"authenticated": False}, status_code=401)


# --- Properties ------------------------------------------------------------


@router.get("/api/properties")
def public_properties(request: Request):
    return property_service.list_properties(path=_db(request), published_only=True)


@router.get("/api/admin/properties")
def admin_properties(request: Request):
    return property_service.list_properties(path=_db(request), published_only=False)


@router.post("/api/admin/properties", status_code=201)
def create_property(request: Request, body: PropertyIn):
    new_id = property_service.save_property(path=_db(request), data=body.model_dump())
    return {"success": True, "id": new_id}


@router.get("/api/admin/properties/{property_id}")
def read_property(request: Request, property_id: str):
    return property_service.get_property(path=_db(request), property_id=property_id)


@router.put("/api/admin/properties/{property_id}")
def edit_property(request: Request, property_id: str, body: PropertyIn):
    property_service.update_property(path=_db(request), property_id=property_id, data=body.model_dump())
    return OK


@router.delete("/api/admin/properties/{property_id}")
def remove_property(request: Request, property_id: str):
    property_service.delete_property(path=_db(request), property_id=property_id)
    return OK


# --- Leads -----------------------------------------------------------------


@router.post("/api/leads", status_code=201)
def create_lead(request: Request, body: LeadIn):
    try:
        lead_id = lead_service.create_lead(path=_db(request), data=body.model_dump())
    except ValueError as e:
        return JSONResponse({"error": str(e)}, status_code=400)
    return {"success": True, "id": lead_id}


@router.get("/api/admin/leads")
def admin_leads(request: Request):
    return lead_service.list_leads(path=_db(request))


@router.put("/api/admin/leads/{lead_id}")
def edit_lead(request: Request, lead_id: str, body: LeadUpdate):
    lead_service.update_lead(path=_db(request), lead_id=lead_id, fields=body.model_dump(exclude_unset=True))
    return OK


@router.delete("/api/admin/leads/{lead_id}")
def remove_lead(request: Request, lead_id: str):
    lead_service.delete_lead(path=_db(request), lead_id=lead_id)
    return OK


# --- Testimonials ----------------------------------------------------------


@router.get("/api/testimonials")
def public_testimonials(request: Request):
    return testimonial_service.list_public(store=_kv(request))


@router.post("/api/testimonials", status_code=201)
def submit_testimonial(request: Request, body: CommentIn):
    try:
        comment_id = testimonial_service.submit(store=_kv(request), data=body.model_dump())
    except ValueError as e:
        return JSONResponse({"error": str(e)}, status_code=400)
    return {"success": True, "id": comment_id}


@router.get("/api/admin/testimonials")
def admin_testimonials(request: Request):
    return testimonial_service.list_all(store=_kv(request))


@router.patch("/api/admin/testimonials/{comment_id}")
def moderate_testimonial(request: Request, comment_id: str, body: CommentPatch):
    testimonial_service.set_approved(store=_kv(request), comment_id=comment_id, approved=body.approved)
    return OK


@router.delete("/api/admin/testimonials/{comment_id}")
def remove_testimonial(request: Request, comment_id: str):
    testimonial_service.soft_delete(store=_kv(request), comment_id=comment_id)
    return OK


# --- Profile ---------------------------------------------------------------


@router.get("/api/profile")
def public_profile(request: Request):
    return profile_service.get_profile(path=_db(request))


@router.put("/api/admin/profile")
def edit_profile(request: Request, body: ProfileIn):
    profile_service.update_profile(path=_db(request), data=body.model_dump())
    return OK


# --- App factory -----------------------------------------------------------


async def _not_found(request: Request, exc: NotFound):
    return JSONResponse({"error": "No encontrado"}, status_code=404)


async def _storage_error(request: Request, exc: sqlite3.Error):
    logger.exception("Storage error on %s %s", request.method, request.url.path)
    return JSONResponse({"error": str(exc)}, status_code=500)


async def _auth_error(request: Request, exc: AuthError):
    return auth_error_response(exc)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the API. Settings are read from the environment when not given."""
    settings = settings or Settings.from_env()
    if not settings.session_secret or not settings.admin_code:
        logger.warning("SESSION_SECRET/ADMIN_CODE not set: admin endpoints will answer 500")

    init_db(settings.db_path, profile_seed_path=settings.profile_seed_path)

    app = FastAPI(title="eb-inmobiliaria")
    app.state.settings = settings
    app.state.kv = KeyValueStore(settings.db_path)

    app.middleware("http")(session_guard)
    app.add_exception_handler(NotFound, _not_found)
    app.add_exception_handler(sqlite3.Error, _storage_error)
    app.add_exception_handler(AuthError, _auth_error)
    app.include_router(router)
    return app
