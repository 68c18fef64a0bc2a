"""Tests for domain exceptions (error_code, message, details, errors)."""

from app.domain.entities import Category, Genre
from app.domain.exceptions import (
    CatalogException,
    DomainException,
    NotFoundException,
    SqlNotConfiguredException,
)
from app.domain.validation import Error


def test_catalog_exception_default_error_code() -> None:
    """Base CatalogException uses class name as error_code when not provided."""
    exc = CatalogException("Something failed")
    assert exc.message == "Something failed"
    assert exc.error_code == "CatalogException"
    assert exc.details == {}
    assert exc.to_dict() == {
        "error": "CatalogException",
        "message": "Something failed",
        "details": {},
    }


def test_domain_exception_with_error() -> None:
    exc = DomainException.with_error(Error("Invalid sort field: foo"))
    assert exc.message == "Invalid sort field: foo"
    assert exc.errors == [Error("Invalid sort field: foo")]
    assert exc.error_code == "DOMAIN_ERROR"


def test_domain_exception_with_errors_uses_first_message() -> None:
    exc = DomainException.with_errors([Error("a"), Error("b")])
    assert exc.message == "a"
    assert [e.message for e in exc.errors] == ["a", "b"]


def test_not_found_message_and_details() -> None:
    """NotFoundException formats '<Kind> with ID <id> not found'."""
    exc = NotFoundException.of(Category, "123")
    assert exc.message == "Category with ID 123 not found"
    assert str(exc) == "Category with ID 123 not found"
    assert exc.kind == "Category"
    assert exc.resource_id == "123"
    assert exc.error_code == "RESOURCE_NOT_FOUND"
    assert exc.details == {"resource_type": "Category", "resource_id": "123"}
    assert isinstance(exc, DomainException)


def test_not_found_for_genre() -> None:
    assert NotFoundException.of(Genre, "g1").message == "Genre with ID g1 not found"


def test_sql_not_configured() -> None:
    exc = SqlNotConfiguredException()
    assert exc.error_code == "SERVICE_UNAVAILABLE"
    assert "not configured" in exc.message
