"""Tests for the Category and Genre aggregates."""

from app.domain.entities import Category, Genre
from app.domain.pagination import Pagination
from app.domain.validation import Notification


class TestCategory:
    def test_new_active_category(self) -> None:
        c = Category.new_category("Filmes", "A categoria mais assistida", True)
        assert c.id
        assert c.name == "Filmes"
        assert c.active is True
        assert c.deleted_at is None
        assert c.created_at == c.updated_at
        assert c.created_at.tzinfo is not None

    def test_new_inactive_category_is_soft_deleted(self) -> None:
        c = Category.new_category("Filmes", None, False)
        assert c.active is False
        assert c.deleted_at is not None

    def test_ids_are_unique(self) -> None:
        a = Category.new_category("a", None, True)
        b = Category.new_category("a", None, True)
        assert a.id != b.id

    def test_construction_does_not_validate(self) -> None:
        c = Category.new_category(None, None, True)
        n = Notification.create()
        c.validate(n)
        assert [e.message for e in n.errors] == ["'name' should not be null"]

    def test_deactivate_sets_deleted_at_once(self) -> None:
        c = Category.new_category("Filmes", None, True)
        previous_updated = c.updated_at
        c.deactivate()
        first = c.deleted_at
        assert first is not None
        assert first >= previous_updated
        c.deactivate()
        assert c.deleted_at == first

    def test_activate_clears_deleted_at(self) -> None:
        c = Category.new_category("Filmes", None, False)
        c.activate()
        assert c.active is True
        assert c.deleted_at is None

    def test_update_replaces_fields(self) -> None:
        c = Category.new_category("Film", None, True)
        created_at = c.created_at
        result = c.update("Filmes", "desc", False)
        assert result is c
        assert c.name == "Filmes"
        assert c.description == "desc"
        assert c.active is False
        assert c.deleted_at is not None
        assert c.created_at == created_at
        assert c.updated_at >= created_at

    def test_update_to_active_clears_deleted_at(self) -> None:
        c = Category.new_category("Filmes", None, False)
        c.update("Filmes", None, True)
        assert c.deleted_at is None


class TestGenre:
    def test_new_genre_has_no_categories(self) -> None:
        g = Genre.new_genre("Ação", True)
        assert g.categories == []
        assert g.deleted_at is None

    def test_add_category_ignores_none_and_duplicates(self) -> None:
        g = Genre.new_genre("Ação", True)
        g.add_category("c1").add_category(None).add_category("c1").add_category("c2")
        assert g.categories == ["c1", "c2"]

    def test_add_categories(self) -> None:
        g = Genre.new_genre("Ação", True)
        g.add_categories(["c1", None, "c2", "c1"])
        assert g.categories == ["c1", "c2"]

    def test_remove_category(self) -> None:
        g = Genre.new_genre("Ação", True).add_categories(["c1", "c2"])
        g.remove_category("c1")
        g.remove_category("unknown")
        g.remove_category(None)
        assert g.categories == ["c2"]

    def test_update_replaces_categories(self) -> None:
        g = Genre.new_genre("Ação", True).add_categories(["c1", "c2"])
        g.update("Aventura", False, ["c3"])
        assert g.name == "Aventura"
        assert g.categories == ["c3"]
        assert g.active is False
        assert g.deleted_at is not None

    def test_update_with_none_clears_categories(self) -> None:
        g = Genre.new_genre("Ação", True).add_categories(["c1"])
        g.update("Ação", True, None)
        assert g.categories == []

    def test_validate_blank_name(self) -> None:
        n = Notification.create()
        Genre.new_genre(" ", True).validate(n)
        assert [e.message for e in n.errors] == ["'name' should not be empty"]


def test_pagination_map_keeps_envelope() -> None:
    page = Pagination(current_page=2, per_page=3, total=7, items=[1, 2])
    mapped = page.map(str)
    assert mapped == Pagination(current_page=2, per_page=3, total=7, items=["1", "2"])
