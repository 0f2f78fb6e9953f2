"""Home page and weekday dashboard."""

from fastapi import APIRouter, Depends, Form, Request
from sqlalchemy.orm import Session

from ..auth import get_current_user, get_db
from ..models import User
from ..services import post_its
from ..services.post_its import WEEKDAYS, current_weekday
from .rendering import render

router = APIRouter()


@router.get("/")
@router.get("/home")
def show_home(request: Request):
    return render(request, "home.html")


def _dashboard(request: Request, db: Session, user: User, day: str | None):
    day = post_its.normalize_weekday(day) or current_weekday()
    return render(
        request,
        "dashboard.html",
        weekdays=WEEKDAYS,
        current_day=day,
        today=current_weekday(),
        post_its=post_its.find_by_weekday_and_user_id(db, day, user.id),
    )


@router.get("/dashboard")
def show_dashboard(
    request: Request,
    day: str | None = None,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """Incomplete post-its for one day, defaulting to today."""
    return _dashboard(request, db, user, day)


@router.post("/home")
def choose_dashboard_day(
    request: Request,
    choice: str = Form(""),
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    return _dashboard(request, db, user, choice)
