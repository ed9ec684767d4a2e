import dataclasses

import pytest

from citatnik.entity import MissingQuotesError, Quote, QuoteError, QuoteNotFoundError


def test_quote_id_defaults_to_empty():
    quote = Quote(author="A", text="Q1")
    assert quote.id == ""
    assert (quote.author, quote.text) == ("A", "Q1")


def test_quote_is_immutable():
    quote = Quote(author="A", text="Q1")
    with pytest.raises(dataclasses.FrozenInstanceError):
        quote.author = "B"
    assert quote.author == "A"


def test_quote_replace_keeps_other_fields():
    quote = Quote(author="A", text="Q1")
    updated = dataclasses.replace(quote, id="7")
    assert updated == Quote(author="A", text="Q1", id="7")
    assert quote.id == ""


def test_missing_quotes_message():
    assert str(MissingQuotesError()) == "quotes are missing"


def test_not_found_message():
    assert str(QuoteNotFoundError()) == "quote not found"


@pytest.mark.parametrize(
    ("error_type", "message"),
    [
        (MissingQuotesError, "quotes are missing"),
        (QuoteNotFoundError, "quote not found"),
    ],
)
def test_errors_share_base(error_type, message):
    error = error_type()
    assert isinstance(error, QuoteError)
    assert str(error) == message


def test_custom_message_overrides_default():
    assert str(QuoteNotFoundError("gone")) == "gone"