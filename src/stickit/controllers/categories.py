"""Category pages: add, list, find, update and delete."""

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import RedirectResponse
from sqlalchemy.orm import Session

from ..auth import get_current_user, get_db
from ..models import User
from ..services import categories, colors
from .rendering import render, show_message

router = APIRouter()


@router.get("/category")
def show_forms(
    request: Request,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """Form for adding a category, listing only the colors still free."""
    return render(
        request,
        "add_category.html",
        message="Adding Category",
        colors=colors.get_available_colors(db),
    )


@router.post("/categoryform")
def new_category(
    request: Request,
    name: str = Form(""),
    description: str = Form(""),
    color: str = Form(""),
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    category = categories.create_category(db, user.id, name, description, color)
    return show_message(request, f"Category: {category.title} was created successfully!")


@router.get("/categories")
def show_all_categories(
    request: Request,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    return render(
        request,
        "categories.html",
        categories=categories.find_all_by_user_id(db, user.id),
    )


@router.get("/category/show")
def show_category(
    request: Request,
    title: str = "",
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    category = categories.find_by_title(db, user.id, title)
    return render(
        request,
        "categories.html",
        categories=[category],
        message=f"Category: {category.title} was found successfully!",
    )


@router.post("/category/update")
def update_category(
    request: Request,
    title: str = Form(""),
    description: str = Form(""),
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    category = categories.update_category(db, user.id, title, description)
    return show_message(request, f"Category: {category.title} was updated successfully!")


@router.post("/category/delete")
def destroy_category(
    request: Request,
    title: str = Form(""),
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    categories.delete_category(db, user.id, title)
    return show_message(request, f"Category with title: {title} was deleted successfully!")


@router.post("/category/delete/{category_id}")
def delete_selected(
    category_id: int,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    categories.delete_category_by_id(db, user.id, category_id)
    return RedirectResponse("/categories", status_code=303)
