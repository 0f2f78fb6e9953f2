"""Template rendering shared by all controllers."""

from pathlib import Path

from fastapi import Request
from fastapi.templating import Jinja2Templates

from ..config import settings
from ..sessions import sessions

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

LOGGED_IN_NAV_BAR = [
    {"id": "manage-post-it", "title": "Dashboard", "path": "/dashboard"},
    {"id": "add-post-it", "title": "Add Post-it", "path": "/postit"},
    {"id": "read-all-post-it", "title": "All Post-its", "path": "/postits"},
    {"id": "read-completed-post-it", "title": "Completed Post-its", "path": "/complete"},
    {"id": "manage-categories", "title": "Categories", "path": "/categories"},
    {"id": "add-categories", "title": "Add Category", "path": "/category"},
]

LOGGED_OUT_NAV_BAR = [{"id": "about-us", "title": "About us", "path": "/"}]


def user_nav_bar(username: str | None):
    if username is None:
        return [
            {"title": "Login", "path": "/login"},
            {"title": "Sign Up", "path": "/register"},
        ]
    return [
        {"title": "Logout", "path": "/logout"},
        {"title": f"Profile: {username}", "path": f"/user/{username}"},
    ]


def render(request: Request, template: str, status_code: int = 200, **context):
    """Render ``template`` with navigation for the logged-in user, if any."""
    session = sessions.check(request.cookies.get(settings.session_cookie_name))
    username = session.username if session else None
    context.setdefault("username", username)
    context.setdefault("nav_bar", LOGGED_IN_NAV_BAR if username else LOGGED_OUT_NAV_BAR)
    context.setdefault("user_nav_bar", user_nav_bar(username))
    context.setdefault("title", settings.api_title)
    return templates.TemplateResponse(request, template, context, status_code=status_code)


def show_message(request: Request, message: str, **data):
    """Render the success page with a message."""
    return render(request, "success.html", message=message, **data)


def show_error(request: Request, message: str, status_code: int):
    """Render the error page with a message and status code."""
    return render(request, "error.html", status_code=status_code, message=message, status=status_code)
