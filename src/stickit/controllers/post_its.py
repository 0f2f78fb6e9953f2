"""Post-it pages: add, list, update, complete and delete."""

from fastapi import APIRouter, Depends, Form, Request
from sqlalchemy.orm import Session

from ..auth import get_current_user, get_db
from ..models import User
from ..services import categories, post_its
from ..services.post_its import WEEKDAYS
from .rendering import render, show_message

router = APIRouter()


@router.get("/postit")
def add_post_it_form(
    request: Request,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    return render(
        request,
        "add_post_it.html",
        categories=categories.find_all_by_user_id(db, user.id),
        weekdays=WEEKDAYS,
        today=post_its.current_weekday(),
    )


@router.post("/postit")
def new_post_it(
    request: Request,
    title: str = Form(""),
    description: str = Form(""),
    category: str = Form(""),
    weekday: str = Form(""),
    pinned: str = Form(""),
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """Create a post-it in the category chosen by title."""
    found = categories.find_by_title(db, user.id, category)
    post_it = post_its.create_post_it(
        db, user.id, found.id, title, description, pinned == "on", weekday
    )
    return show_message(request, f"Post-it: {post_it.title} created successfully!")


@router.get("/postit/show")
def show_post_it(
    request: Request,
    title: str = "",
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    post_it = post_its.find_by_title(db, user.id, title)
    return render(
        request,
        "post_its.html",
        post_its=[post_it],
        message=f"Post-it: {post_it.title} found successfully!",
    )


@router.get("/postits")
def show_all_post_its(
    request: Request,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    return render(
        request,
        "post_its.html",
        post_its=post_its.find_all_by_user_id(db, user.id),
        message="All post-its",
    )


@router.get("/complete")
def show_all_completed_post_its(
    request: Request,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    return render(
        request,
        "post_its.html",
        post_its=post_its.find_all_completed(db, user.id),
        message="Completed post-its",
        completed=True,
    )


@router.get("/update/{post_id}")
def update_post_it_form(
    request: Request,
    post_id: int,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    return render(
        request,
        "update_post_it.html",
        post_it=post_its.find_by_id(db, post_id, user.id),
        categories=categories.find_all_by_user_id(db, user.id),
        weekdays=WEEKDAYS,
    )


@router.post("/postit/update")
def update_post_it(
    request: Request,
    post_id: int = Form(...),
    description: str = Form(""),
    weekday: str = Form(""),
    category: str = Form(""),
    pinned: str = Form(""),
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    post_it = post_its.update_post_it(
        db, user.id, post_id, description, weekday, category, pinned == "on"
    )
    return show_message(request, f"Post-it: {post_it.title} updated successfully!")


@router.post("/postit/delete")
def destroy_post_it_by_title(
    request: Request,
    title: str = Form(""),
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    post_its.delete_post_it(db, user.id, title)
    return show_message(request, f"Post-it with title: {title} was deleted successfully!")


@router.post("/postit/delete/{post_id}")
def destroy_post_it(
    request: Request,
    post_id: int,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    post_its.delete_post_it_by_id(db, user.id, post_id)
    return show_message(request, "Post-it removed.")


@router.post("/postit/complete/{post_id}")
def mark_post_it_as_completed(
    request: Request,
    post_id: int,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    post_its.set_completed(db, user.id, post_id)
    return show_message(request, "Good job! You completed your task!")
