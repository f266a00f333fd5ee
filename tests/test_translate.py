"""Request translation: market variants, description/close-time conversion, query encoding."""

import pytest

from manifoldmcp.errors import InvalidParamsError
from manifoldmcp.models.params import (
    CreateMarketParams,
    GetBetsParams,
    GetMarketParams,
    PlaceBetParams,
    SearchMarketsParams,
    validate_params,
)
from manifoldmcp.tools import translate
from manifoldmcp.tools.translate import to_epoch_ms, to_rich_text

BASE = {"question": "Who wins the 2028 election?", "liquidityTier": 1000}


def market(**fields):
    params = validate_params(CreateMarketParams, {**BASE, **fields})
    return translate.create_market(params)


def market_error(**fields) -> InvalidParamsError:
    with pytest.raises(InvalidParamsError) as exc:
        market(**fields)
    return exc.value


def test_multiple_choice_requires_non_empty_answers():
    err = market_error(outcomeType="MULTIPLE_CHOICE", answers=[])
    assert err.fields == ["answers"]
    assert "MULTIPLE_CHOICE" in err.message
    err = market_error(outcomeType="MULTIPLE_CHOICE")
    assert err.fields == ["answers"]


def test_multiple_choice_single_answer_accepted_with_default_mode():
    request = market(outcomeType="MULTIPLE_CHOICE", answers=["Alice"])
    assert request.body["answers"] == ["Alice"]
    assert request.body["addAnswersMode"] == "DISABLED"


def test_multiple_choice_keeps_caller_answer_mode():
    request = market(outcomeType="MULTIPLE_CHOICE", answers=["A", "B"], addAnswersMode="ANYONE")
    assert request.body["addAnswersMode"] == "ANYONE"


def test_poll_needs_two_answers():
    err = market_error(outcomeType="POLL", answers=["Only one"])
    assert err.fields == ["answers"]
    assert "at least 2" in err.message
    request = market(outcomeType="POLL", answers=["Yes", "No"], voterVisibility="everyone")
    assert request.body["answers"] == ["Yes", "No"]
    assert request.body["voterVisibility"] == "everyone"
    assert "addAnswersMode" not in request.body


def test_multi_numeric_names_missing_fields():
    err = market_error(outcomeType="MULTI_NUMERIC", answers=["0-10", "10-20"])
    assert sorted(err.fields) == ["midpoints", "shouldAnswersSumToOne", "unit"]
    assert "unit: required for MULTI_NUMERIC markets" in err.message


def test_multi_numeric_complete():
    request = market(
        outcomeType="MULTI_NUMERIC",
        answers=["0-10", "10-20"],
        midpoints=[5, 15],
        shouldAnswersSumToOne=True,
        unit="degrees",
        timezone="UTC",
    )
    body = request.body
    assert body["midpoints"] == [5, 15]
    assert body["unit"] == "degrees"
    assert body["addAnswersMode"] == "DISABLED"
    assert "timezone" not in body


def test_multi_numeric_rejects_open_answers_and_too_many_buckets():
    fields = dict(midpoints=[1], shouldAnswersSumToOne=True, unit="m")
    err = market_error(outcomeType="MULTI_NUMERIC", answers=["a"], addAnswersMode="ANYONE", **fields)
    assert err.fields == ["addAnswersMode"]
    err = market_error(outcomeType="MULTI_NUMERIC", answers=[str(i) for i in range(13)], **fields)
    assert err.fields == ["answers"]


def test_date_market_requires_timezone_not_unit():
    fields = dict(answers=["2026", "2027"], midpoints=[1.0, 2.0], shouldAnswersSumToOne=False)
    err = market_error(outcomeType="DATE", unit="years", **fields)
    assert err.fields == ["timezone"]
    request = market(outcomeType="DATE", timezone="America/New_York", **fields)
    assert request.body["timezone"] == "America/New_York"
    assert request.body["shouldAnswersSumToOne"] is False


def test_binary_drops_other_variant_fields():
    request = market(outcomeType="BINARY", initialProb=30, answers=["x"], unit="kg")
    assert request.method == "POST"
    assert request.path == "/v0/market"
    assert request.authenticated
    assert request.error_from_body
    assert request.body == {
        "outcomeType": "BINARY",
        "question": BASE["question"],
        "liquidityTier": 1000,
        "visibility": "public",
        "initialProb": 30,
    }


def test_plain_description_wrapped_in_document():
    request = market(outcomeType="STONK", description="Resolves to the official count.")
    assert request.body["description"] == {
        "type": "doc",
        "content": [
            {"type": "paragraph", "content": [{"type": "text", "text": "Resolves to the official count."}]}
        ],
    }


def test_structured_description_passed_through():
    doc = {
        "type": "doc",
        "content": [{"type": "heading", "attrs": {"level": 2}, "content": [{"type": "text", "text": "Hi"}]}],
    }
    request = market(outcomeType="BINARY", description=doc)
    assert request.body["description"] == doc


def test_close_time_iso_string_to_epoch_ms():
    request = market(outcomeType="BINARY", closeTime="2025-01-01T00:00:00Z")
    assert request.body["closeTime"] == 1735689600000
    assert isinstance(request.body["closeTime"], int)


def test_close_time_number_passed_through():
    request = market(outcomeType="BINARY", closeTime=1735689600123)
    assert request.body["closeTime"] == 1735689600123


def test_close_time_invalid_string():
    err = market_error(outcomeType="BINARY", closeTime="next tuesday")
    assert err.fields == ["closeTime"]


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("2025-01-01T00:00:00Z", 1735689600000),
        ("2025-01-01T00:00:00.250+00:00", 1735689600250),
        ("2025-01-01T02:00:00+02:00", 1735689600000),
        ("2025-01-01", 1735689600000),
    ],
)
def test_to_epoch_ms(value, expected):
    assert to_epoch_ms(value) == expected


def test_to_rich_text_single_paragraph():
    doc = to_rich_text("hello")
    assert doc["content"][0]["content"] == [{"type": "text", "text": "hello"}]


def test_bet_listing_repeats_contract_ids_in_order():
    params = validate_params(GetBetsParams, {"contractId": ["c3", "c1", "c2"], "userId": "u1"})
    request = translate.get_bets(params)
    assert request.method == "GET"
    assert not request.authenticated
    assert [v for k, v in request.params if k == "contractId"] == ["c3", "c1", "c2"]
    assert ("userId", "u1") in request.params
    assert ("limit", "1000") in request.params


def test_bet_listing_renders_numbers_and_booleans():
    params = validate_params(
        GetBetsParams,
        {"contractId": "c1", "beforeTime": 1700000000000, "minAmount": 2.5, "filterRedemptions": False},
    )
    request = translate.get_bets(params)
    assert request.params == [
        ("contractId", "c1"),
        ("limit", "1000"),
        ("beforeTime", "1700000000000"),
        ("minAmount", "2.5"),
        ("filterRedemptions", "false"),
    ]


def test_search_omits_absent_filters():
    request = translate.search_markets(validate_params(SearchMarketsParams, {"term": "ai", "sort": "liquidity"}))
    assert request.path == "/v0/search-markets"
    assert request.params == [("term", "ai"), ("sort", "liquidity")]
    assert translate.search_markets(validate_params(SearchMarketsParams, {})).params == []


def test_path_segments_are_escaped():
    request = translate.get_market(validate_params(GetMarketParams, {"marketId": "a/b c"}))
    assert request.path == "/v0/market/a%2Fb%20c"


def test_place_bet_body_omits_missing_limit():
    params = validate_params(PlaceBetParams, {"marketId": "m1", "amount": 25, "outcome": "NO"})
    assert translate.place_bet(params).body == {"contractId": "m1", "amount": 25, "outcome": "NO"}
    params = validate_params(PlaceBetParams, {"marketId": "m1", "amount": 25, "outcome": "NO", "limitProb": 0.4})
    assert translate.place_bet(params).body["limitProb"] == 0.4
