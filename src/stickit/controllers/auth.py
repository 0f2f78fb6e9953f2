"""Login, logout and registration."""

import logging

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import RedirectResponse
from sqlalchemy.orm import Session

from ..auth import get_current_session, get_db
from ..config import settings
from ..rate_limit import limiter
from ..services import users
from ..sessions import UserSession, sessions
from .rendering import render

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/login")
def login_form(request: Request):
    return render(request, "login.html")


@router.post("/login")
@limiter.limit(settings.auth_rate_limit)
def login(
    request: Request,
    email: str = Form(""),
    password: str = Form(""),
    db: Session = Depends(get_db),
):
    """Validate credentials, start a session and open the dashboard."""
    user = users.login(db, email, password)
    token = sessions.create(user.username)
    response = RedirectResponse("/dashboard", status_code=303)
    response.set_cookie(settings.session_cookie_name, token, httponly=True, samesite="lax")
    return response


@router.get("/logout")
def logout(session: UserSession = Depends(get_current_session)):
    sessions.destroy(session.token)
    logger.info("logged out %s", session.username)
    response = RedirectResponse("/", status_code=303)
    response.delete_cookie(settings.session_cookie_name)
    return response


@router.get("/register")
def register_form(request: Request):
    return render(request, "register.html")


@router.post("/register")
@limiter.limit(settings.auth_rate_limit)
def register(
    request: Request,
    username: str = Form(""),
    email: str = Form(""),
    password: str = Form(""),
    db: Session = Depends(get_db),
):
    """Create an account and send the user to the login form."""
    users.create_user(db, username, email, password)
    return RedirectResponse("/login", status_code=303)
