# =============================================================================
# tests/test_pages.py - Site Page Tests
# =============================================================================
# Tests for the rendered pages, the contact form, the catalog viewer and
# catalog downloads.
#
# Run with: pytest tests/test_pages.py -v
# =============================================================================

import logging

import httpx
import pytest
from pydantic import ValidationError

from core.models import ContactMessage

from tests.conftest import CONFIGURED_URLS, HTML_BYTES, PDF_BYTES, pdf_response


# =============================================================================
# Pages
# =============================================================================

class TestPages:
    """Tests for GET pages."""

    def test_home_lists_catalogs(self, api_client):
        response = api_client().get("/")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        html = response.text
        for brand in ["Roff", "Cera", "Nirali", "Karoma", "Steellera", "Jaquar", "Blues"]:
            assert brand in html
        assert "/catalogs/cera.pdf/view" in html
        assert "Large file, download may take a while" in html
        assert "Why Choose L P Sanitary?" in html

    def test_about(self, api_client):
        html = api_client().get("/about").text

        assert "Quality Excellence" in html
        assert "50,000+" in html
        assert "99.5%" in html

    def test_products_all(self, api_client):
        html = api_client().get("/products").text

        assert "Premium Wall Hung Toilet" in html
        assert "Double Bowl Kitchen Sink" in html

    def test_products_filtered(self, api_client):
        html = api_client().get("/products", params={"category": "Kitchen Sinks"}).text

        assert "Stainless Steel Kitchen Sink" in html
        assert "Premium Wall Hung Toilet" not in html

    def test_products_unknown_category_shows_all(self, api_client):
        html = api_client().get("/products", params={"category": "Garden"}).text
        assert "Premium Wall Hung Toilet" in html

    def test_contact_details(self, api_client):
        html = api_client().get("/contact").text

        assert "+91 9016430575" in html
        assert "+91 9426877975" in html
        assert "lpsanitary111@gmail.com" in html
        assert "Monday - Saturday" in html

    def test_contact_subject_prefill(self, api_client):
        html = api_client().get("/contact", params={"subject": "Enquiry: Corner Basin"}).text
        assert 'value="Enquiry: Corner Basin"' in html


# =============================================================================
# Contact Form
# =============================================================================

class TestContactMessage:
    """Tests for the ContactMessage model."""

    def test_optional_fields_blank_to_none(self):
        message = ContactMessage(name=" Asha ", email="asha@example.com", phone="", subject="  ", message="Hi")

        assert message.name == "Asha"
        assert message.phone is None
        assert message.subject is None

    def test_invalid_email(self):
        with pytest.raises(ValidationError):
            ContactMessage(name="Asha", email="not-an-email", message="Hi")

    def test_invalid_phone(self):
        with pytest.raises(ValidationError):
            ContactMessage(name="Asha", email="asha@example.com", phone="call me", message="Hi")


class TestContactForm:
    """Tests for POST /contact."""

    def test_valid_submission(self, api_client, caplog):
        caplog.set_level(logging.INFO)

        response = api_client().post("/contact", data={
            "name": "Asha Patel",
            "email": "asha@example.com",
            "phone": "+91 98765 43210",
            "subject": "Quote",
            "message": "Please share prices for the Jaquar range.",
        })

        assert response.status_code == 200
        assert "Thank you, Asha Patel!" in response.text
        assert "Contact enquiry from Asha Patel <asha@example.com>: Quote" in caplog.text

    def test_invalid_submission_rerenders(self, api_client):
        response = api_client().post("/contact", data={
            "name": "Asha Patel",
            "email": "nope",
            "message": "",
        })

        assert response.status_code == 400
        assert "Please correct the highlighted fields." in response.text
        # entered values are kept
        assert 'value="Asha Patel"' in response.text


# =============================================================================
# Viewer and Download
# =============================================================================

class TestViewer:
    """Tests for GET /catalogs/{filename}/view."""

    def test_drive_catalog_embeds_preview(self, api_client):
        html = api_client().get("/catalogs/cera.pdf/view").text

        assert '<iframe src="https://drive.google.com/file/d/' in html
        assert "Open in New Tab" in html
        assert 'href="/catalogs/cera.pdf/download"' in html
        assert 'download="Cera-Catalog.pdf"' in html

    def test_cloudinary_catalog_embeds_proxy(self, api_client):
        html = api_client("hybrid", **CONFIGURED_URLS).get("/catalogs/cera.pdf/view").text
        assert '<iframe src="/api/cloud-pdf/cera.pdf#toolbar=1&amp;navpanes=1' in html

    def test_unknown_catalog(self, api_client):
        assert api_client().get("/catalogs/unknown.pdf/view").status_code == 404


class TestDownload:
    """Tests for GET /catalogs/{filename}/download."""

    def test_local_copy_as_attachment(self, api_client, requests_seen):
        response = api_client().get("/catalogs/cera.pdf/download")

        assert response.status_code == 200
        assert response.content == PDF_BYTES
        assert response.headers["content-disposition"] == 'attachment; filename="Cera-Catalog.pdf"'
        assert response.headers["x-pdf-source"] == "local"
        assert requests_seen == []

    def test_proxied_from_storage(self, api_client):
        response = api_client(handler=lambda request: pdf_response()).get("/catalogs/Nirali.pdf/download")

        assert response.status_code == 200
        assert response.headers["content-disposition"] == 'attachment; filename="Nirali-Catalog.pdf"'
        assert response.headers["x-pdf-source"] == "cloud-storage"

    def test_redirects_when_proxy_fails(self, api_client):
        client = api_client(handler=lambda request: httpx.Response(200, content=HTML_BYTES))

        response = client.get("/catalogs/Nirali.pdf/download", follow_redirects=False)

        assert response.status_code == 307
        assert response.headers["location"].startswith("https://drive.google.com/uc?export=download&id=")
