# =============================================================================
# app/routers/pages.py - Brochure Site Pages
# =============================================================================
# Server-rendered pages of the shop's website:
# - GET  /          - Home: brands with their catalogs, categories, reasons
# - GET  /about     - Company story, values, achievements
# - GET  /products  - Product gallery with category filter
# - GET  /contact   - Contact details and enquiry form
# - POST /contact   - Submit an enquiry
# =============================================================================

import logging

from fastapi import APIRouter, Form, Request
from pydantic import ValidationError

from app.dependencies import RegistryDep
from app.templating import templates
from core import content
from core.models.contact import ContactMessage

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/")
async def home(request: Request, registry: RegistryDep):
    """Home page with one card per catalog."""
    return templates.TemplateResponse(
        request,
        "home.html",
        {
            "catalogs": registry.entries(),
            "categories": content.CATEGORIES,
            "reasons": content.REASONS,
        },
    )


@router.get("/about")
async def about(request: Request):
    return templates.TemplateResponse(
        request,
        "about.html",
        {
            "values": content.VALUES,
            "achievements": content.ACHIEVEMENTS,
        },
    )


@router.get("/products")
async def products(request: Request, category: str | None = None):
    """
    Product gallery.

    Args:
        category: Only show products in this category (all when omitted
            or unknown)
    """
    categories = content.product_categories()
    items = content.PRODUCTS
    if category in categories:
        items = [p for p in items if p["category"] == category]
    else:
        category = None

    return templates.TemplateResponse(
        request,
        "products.html",
        {
            "products": items,
            "categories": categories,
            "selected_category": category,
        },
    )


@router.get("/contact")
async def contact(request: Request, subject: str | None = None):
    """Contact page; `subject` pre-fills the form (used by product enquiries)."""
    form = {"subject": subject} if subject else {}
    return templates.TemplateResponse(
        request,
        "contact.html",
        {"form": form, "errors": {}, "submitted": False},
    )


@router.post("/contact")
async def submit_contact(
    request: Request,
    name: str = Form(""),
    email: str = Form(""),
    phone: str = Form(""),
    subject: str = Form(""),
    message: str = Form(""),
):
    """
    Accept an enquiry from the contact form.

    Invalid submissions re-render the form with per-field errors and a 400.
    """
    form = {
        "name": name,
        "email": email,
        "phone": phone,
        "subject": subject,
        "message": message,
    }

    try:
        enquiry = ContactMessage(**form)
    except ValidationError as e:
        errors = {str(err["loc"][0]): err["msg"] for err in e.errors()}
        logger.info(f"Rejected contact form submission: {sorted(errors)}")
        return templates.TemplateResponse(
            request,
            "contact.html",
            {"form": form, "errors": errors, "submitted": False},
            status_code=400,
        )

    logger.info(
        f"Contact enquiry from {enquiry.name} <{enquiry.email}>: "
        f"{enquiry.subject or 'No subject'}"
    )
    return templates.TemplateResponse(
        request,
        "contact.html",
        {"form": {}, "errors": {}, "submitted": True, "enquiry": enquiry},
    )
