import pytest

from citatnik.entity import MissingQuotesError, Quote, QuoteNotFoundError
from citatnik.repository import MemoryQuoteRepo
from citatnik.usecase import QuoteService


@pytest.fixture
def service():
    return QuoteService(MemoryQuoteRepo())


def test_add_assigns_id(service):
    added = service.add(Quote(author="A", text="Q1"))
    assert added.id == "1"
    assert service.get_all() == [added]


def test_get_by_author_filters(service):
    service.add(Quote(author="A", text="Q1"))
    service.add(Quote(author="B", text="Q2"))
    result = service.get_by_author("B")
    assert [q.text for q in result] == ["Q2"]


def test_get_random_returns_stored_quote(service):
    added = service.add(Quote(author="A", text="Q1"))
    assert service.get_random() == added


def test_get_random_empty_raises(service):
    with pytest.raises(MissingQuotesError):
        service.get_random()


def test_delete_then_missing(service):
    added = service.add(Quote(author="A", text="Q1"))
    service.delete_by_id(added.id)
    assert service.get_all() == []
    with pytest.raises(QuoteNotFoundError):
        service.delete_by_id(added.id)


def test_services_over_separate_repos_are_independent():
    first = QuoteService(MemoryQuoteRepo())
    second = QuoteService(MemoryQuoteRepo())
    first.add(Quote(author="A", text="Q1"))
    assert second.get_all() == []
    assert len(first.get_all()) == 1