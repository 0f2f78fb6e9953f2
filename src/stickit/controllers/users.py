"""User profile pages and account management."""

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import RedirectResponse
from sqlalchemy.orm import Session

from ..auth import get_current_user, get_db
from ..config import settings
from ..errors import PermissionDeniedError
from ..models import User
from ..rate_limit import limiter
from ..services import users
from ..sessions import sessions
from .rendering import render, show_message

router = APIRouter()


@router.post("/user")
@limiter.limit(settings.auth_rate_limit)
def new_user(
    request: Request,
    username: str = Form(""),
    email: str = Form(""),
    password: str = Form(""),
    icon: str = Form(""),
    db: Session = Depends(get_db),
):
    user = users.create_user(db, username, email, password, icon)
    return show_message(request, f"User: {user.username} was created successfully!")


@router.get("/users")
def show_all_users(
    request: Request,
    db: Session = Depends(get_db),
    current: User = Depends(get_current_user),
):
    return render(request, "users.html", users=users.find_all(db))


@router.get("/user/update")
def update_form(request: Request, current: User = Depends(get_current_user)):
    return render(request, "update_user.html", user=current)


@router.post("/user/update")
def update_user(
    request: Request,
    email: str = Form(""),
    username: str = Form(""),
    password: str = Form(""),
    icon: str = Form(""),
    db: Session = Depends(get_db),
    current: User = Depends(get_current_user),
):
    """Change the logged-in user's username, password and icon."""
    if email != current.email:
        raise PermissionDeniedError("Users can only update their own account")
    old_username = current.username
    user = users.update_user(db, email, username, password, icon)
    sessions.rename_user(old_username, user.username)
    return show_message(request, f"User: {user.username} was updated successfully!")


@router.get("/user/delete/{email}")
def destroy_user(
    email: str,
    db: Session = Depends(get_db),
    current: User = Depends(get_current_user),
):
    if email != current.email:
        raise PermissionDeniedError("Users can only delete their own account")
    username = current.username
    users.delete_user(db, email)
    sessions.destroy_user(username)
    response = RedirectResponse("/home", status_code=303)
    response.delete_cookie(settings.session_cookie_name)
    return response


@router.get("/user/{username}")
def show_user(
    request: Request,
    username: str,
    db: Session = Depends(get_db),
    current: User = Depends(get_current_user),
):
    user = users.find_by_username(db, username)
    return render(
        request,
        "user_profile.html",
        profile=user,
        is_owner=user.id == current.id,
    )
