import threading

import pytest

from citatnik.entity import MissingQuotesError, Quote, QuoteNotFoundError
from citatnik.repository import MemoryQuoteRepo, QuoteRepo


@pytest.fixture
def repo():
    return MemoryQuoteRepo()


def test_create_and_get_all(repo):
    q1 = repo.create(Quote(author="A", text="Q1"))
    q2 = repo.create(Quote(author="B", text="Q2"))
    q3 = repo.create(Quote(author="A", text="Q3"))

    assert q1.id and q2.id and q3.id
    assert q1.id != q2.id
    assert q2.id != q3.id

    everything = repo.get_all()
    assert len(everything) == 3
    assert {q.id for q in everything} == {q1.id, q2.id, q3.id}


def test_ids_are_sequential_from_one(repo):
    ids = [repo.create(Quote(author="A", text=str(n))).id for n in range(3)]
    assert ids == ["1", "2", "3"]


def test_create_keeps_author_and_text(repo):
    created = repo.create(Quote(author="A", text="Q1"))
    assert (created.author, created.text) == ("A", "Q1")


def test_get_by_author(repo):
    repo.create(Quote(author="X", text="Q1"))
    repo.create(Quote(author="Y", text="Q2"))
    q3 = repo.create(Quote(author="X", text="Q3"))

    result = repo.get_by_author("X")
    assert len(result) == 2
    assert all(q.author == "X" for q in result)
    assert q3.id in {q.id for q in result}


def test_get_by_author_unknown_is_empty(repo):
    repo.create(Quote(author="X", text="Q1"))
    assert repo.get_by_author("Z") == []


def test_delete_by_id(repo):
    quote = repo.create(Quote(author="D", text="ToDelete"))
    repo.delete_by_id(quote.id)
    assert quote.id not in {q.id for q in repo.get_all()}

    with pytest.raises(QuoteNotFoundError):
        repo.delete_by_id("nonexistent")


def test_deleted_id_is_not_reused(repo):
    first = repo.create(Quote(author="D", text="a"))
    repo.delete_by_id(first.id)
    second = repo.create(Quote(author="D", text="b"))
    assert second.id != first.id


def test_get_random_empty(repo):
    with pytest.raises(MissingQuotesError):
        repo.get_random()


def test_get_random_non_empty(repo):
    quote = repo.create(Quote(author="R", text="OnlyOne"))
    assert repo.get_random().id == quote.id

    second = repo.create(Quote(author="R", text="Second"))
    assert repo.get_random().id in {quote.id, second.id}


def test_concurrent_creates_give_unique_ids(repo):
    def worker():
        for n in range(50):
            repo.create(Quote(author="T", text=str(n)))

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    ids = [q.id for q in repo.get_all()]
    assert len(ids) == 200
    assert len(set(ids)) == 200


def test_contract_is_abstract():
    with pytest.raises(TypeError):
        QuoteRepo()