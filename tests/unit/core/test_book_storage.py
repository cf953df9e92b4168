"""Storage contract tests, run against every backend via the ``storage`` fixture."""

import pytest
from sqlalchemy import func
from sqlmodel import Session, select

from src.catalog.core.services import DbSessionService
from src.catalog.core.storage.book_storage import (
    BookStorage,
    InMemoryBookStorage,
    contains_ignore_case,
)
from src.catalog.entities.book.entity import Book
from src.catalog.entities.book.repository import BookRepository
from src.catalog.runtime.config.config_data import ConfigData, DatabaseConfig


def _ids(books: list[Book]) -> list[int | None]:
    return [book.id for book in books]


@pytest.fixture
def seeded(storage: BookStorage) -> list[Book]:
    return [
        storage.save(Book(title="Java Programming", author="John Doe")),
        storage.save(Book(title="Python Basics", author="Jane Smith")),
        storage.save(Book(title="Advanced Java", author="John Doe")),
    ]


class TestSave:
    def test_save_assigns_id(self, storage: BookStorage):
        saved = storage.save(Book(title="New Book", author="New Author"))

        assert saved.id is not None
        assert saved.title == "New Book"
        assert saved.author == "New Author"

    def test_save_does_not_mutate_argument(self, storage: BookStorage):
        book = Book(title="New Book", author="New Author")

        storage.save(book)

        assert book.id is None

    def test_save_assigns_distinct_ids(self, storage: BookStorage):
        first = storage.save(Book(title="Same", author="Same"))
        second = storage.save(Book(title="Same", author="Same"))

        assert first.id != second.id
        assert first != second

    def test_save_with_id_replaces_record(self, storage: BookStorage):
        saved = storage.save(Book(title="Old", author="Old Author"))

        replaced = storage.save(Book(id=saved.id, title="New", author="New Author"))

        assert replaced == Book(id=saved.id, title="New", author="New Author")
        assert storage.find_by_id(saved.id) == replaced
        assert len(storage.find_all()) == 1

    def test_ids_are_not_reused_after_delete(self, storage: BookStorage):
        first = storage.save(Book(title="First", author="A"))
        second = storage.save(Book(title="Second", author="B"))
        storage.delete_by_id(second.id)

        third = storage.save(Book(title="Third", author="C"))

        assert third.id not in (first.id, second.id)


class TestLookup:
    def test_find_by_id(self, storage: BookStorage, seeded: list[Book]):
        assert storage.find_by_id(seeded[1].id) == seeded[1]

    def test_find_by_id_missing(self, storage: BookStorage):
        assert storage.find_by_id(999) is None

    def test_find_all_in_id_order(self, storage: BookStorage, seeded: list[Book]):
        assert storage.find_all() == seeded

    def test_find_all_empty(self, storage: BookStorage):
        assert storage.find_all() == []

    def test_exists_by_id(self, storage: BookStorage, seeded: list[Book]):
        assert storage.exists_by_id(seeded[0].id) is True
        assert storage.exists_by_id(999) is False

    def test_delete_by_id(self, storage: BookStorage, seeded: list[Book]):
        storage.delete_by_id(seeded[0].id)

        assert storage.find_by_id(seeded[0].id) is None
        assert storage.exists_by_id(seeded[0].id) is False
        assert storage.find_all() == seeded[1:]

    def test_delete_missing_id_is_noop(self, storage: BookStorage, seeded: list[Book]):
        storage.delete_by_id(999)

        assert storage.find_all() == seeded

    def test_is_available(self, storage: BookStorage):
        assert storage.is_available() is True


class TestSubstringSearch:
    @pytest.mark.parametrize("fragment", ["java", "JAVA", "Java", "jAvA"])
    def test_title_search_ignores_case(
        self, storage: BookStorage, seeded: list[Book], fragment: str
    ):
        result = storage.find_by_title_containing(fragment)

        assert _ids(result) == [seeded[0].id, seeded[2].id]

    def test_title_search_matches_inner_fragment(
        self, storage: BookStorage, seeded: list[Book]
    ):
        assert storage.find_by_title_containing("thon bas") == [seeded[1]]

    def test_title_search_does_not_look_at_author(
        self, storage: BookStorage, seeded: list[Book]
    ):
        assert storage.find_by_title_containing("John") == []

    def test_author_search(self, storage: BookStorage, seeded: list[Book]):
        result = storage.find_by_author_containing("john")

        assert _ids(result) == [seeded[0].id, seeded[2].id]

    def test_author_search_does_not_look_at_title(
        self, storage: BookStorage, seeded: list[Book]
    ):
        assert storage.find_by_author_containing("Java") == []

    def test_title_or_author_search(self, storage: BookStorage, seeded: list[Book]):
        assert _ids(storage.find_by_title_or_author_containing("Java")) == [
            seeded[0].id,
            seeded[2].id,
        ]
        assert _ids(storage.find_by_title_or_author_containing("smith")) == [
            seeded[1].id
        ]

    def test_title_or_author_search_returns_each_record_once(
        self, storage: BookStorage
    ):
        book = storage.save(Book(title="Doe's Diary", author="John Doe"))

        assert storage.find_by_title_or_author_containing("doe") == [book]

    def test_search_without_match(self, storage: BookStorage, seeded: list[Book]):
        assert storage.find_by_title_containing("Rust") == []
        assert storage.find_by_author_containing("Nobody") == []
        assert storage.find_by_title_or_author_containing("zzz") == []

    def test_empty_fragment_matches_everything(
        self, storage: BookStorage, seeded: list[Book]
    ):
        assert storage.find_by_title_or_author_containing("") == seeded

    @pytest.mark.parametrize("fragment", ["émile", "ÉMILE", "ЛЕВ", "толстой", "STRASSE"])
    def test_search_folds_non_ascii_case(self, storage: BookStorage, fragment: str):
        book = storage.save(Book(title="Émile straße", author="Лев Толстой"))
        storage.save(Book(title="Plain Title", author="Someone"))

        assert storage.find_by_title_or_author_containing(fragment) == [book]

    @pytest.mark.parametrize("fragment", ["%", "_", "100%", "a_b"])
    def test_like_wildcards_match_literally(self, storage: BookStorage, fragment: str):
        literal = storage.save(Book(title="100% Pure a_b", author="Anon"))
        storage.save(Book(title="Plain Title", author="Someone"))

        assert storage.find_by_title_containing(fragment) == [literal]


class TestInMemoryBookStorage:
    def test_returned_books_are_copies(self, memory_storage: InMemoryBookStorage):
        saved = memory_storage.save(Book(title="Original", author="Author"))

        fetched = memory_storage.find_by_id(saved.id)
        fetched.title = "Changed"

        assert memory_storage.find_by_id(saved.id).title == "Original"

    def test_clear_keeps_id_counter(self, memory_storage: InMemoryBookStorage):
        first = memory_storage.save(Book(title="First", author="A"))
        memory_storage.clear()

        second = memory_storage.save(Book(title="Second", author="B"))

        assert memory_storage.find_all() == [second]
        assert second.id > first.id

    def test_explicit_id_advances_counter(self, memory_storage: InMemoryBookStorage):
        memory_storage.save(Book(id=10, title="Imported", author="A"))

        assert memory_storage.save(Book(title="Next", author="B")).id == 11


class TestBookRepository:
    def test_writes_are_committed(self, session: Session):
        repository = BookRepository(session)
        saved = repository.save(Book(title="Committed", author="Author"))

        session.expire_all()

        assert BookRepository(session).find_by_id(saved.id) == saved

    def test_database_service_engine_folds_unicode(self):
        database_service = DbSessionService(
            ConfigData(database=DatabaseConfig(url="sqlite://"))
        )
        try:
            with database_service.session_scope() as session:
                folded = session.exec(select(func.lower("ÉMILE STRASSE Лев"))).one()
        finally:
            database_service.dispose()

        assert folded == "émile strasse лев"


@pytest.mark.parametrize(
    "value, fragment, expected",
    [
        ("Java Programming", "java", True),
        ("Java Programming", "PROGRAM", True),
        ("Java Programming", "", True),
        ("Java Programming", "python", False),
        ("Die Straße", "STRASSE", True),
        ("Лев Толстой", "лев", True),
    ],
)
def test_contains_ignore_case(value: str, fragment: str, expected: bool):
    assert contains_ignore_case(value, fragment) is expected
