"""Tool parameter validation: ranges, enums, required fields, strictness."""

import math

import pytest

from manifoldmcp.errors import InvalidParamsError
from manifoldmcp.models.params import (
    AddBountyParams,
    CreateMarketParams,
    GetBetsParams,
    PlaceBetParams,
    RemoveLiquidityParams,
    SearchMarketsParams,
    SendManaParams,
    required_wire_fields,
    validate_params,
)
from manifoldmcp.tools.operations import OPERATIONS
from toolcases import MINIMAL_CALLS

BET = {"marketId": "m1", "amount": 10, "outcome": "YES"}


@pytest.mark.parametrize(
    ("name", "field"),
    [
        (name, field)
        for name, op in OPERATIONS.items()
        for field in sorted(required_wire_fields(op.params_model))
    ],
)
def test_missing_required_field_is_named(name, field):
    args = dict(MINIMAL_CALLS[name][0])
    del args[field]
    with pytest.raises(InvalidParamsError) as exc:
        validate_params(OPERATIONS[name].params_model, args)
    assert exc.value.fields == [field]
    assert f"{field}: Field required" in exc.value.message


@pytest.mark.parametrize("amount", [0, -1, -0.01])
def test_bet_amount_must_be_positive(amount):
    with pytest.raises(InvalidParamsError) as exc:
        validate_params(PlaceBetParams, {**BET, "amount": amount})
    assert exc.value.fields == ["amount"]


def test_bet_amount_boundary_accepted():
    params = validate_params(PlaceBetParams, {**BET, "amount": 0.01})
    assert params.amount == 0.01


@pytest.mark.parametrize("prob", [0.01, 0.99, 0.5])
def test_limit_prob_bounds_inclusive(prob):
    assert validate_params(PlaceBetParams, {**BET, "limitProb": prob}).limit_prob == prob


@pytest.mark.parametrize("prob", [0.009999, 0.990001, 0, 1])
def test_limit_prob_out_of_range(prob):
    with pytest.raises(InvalidParamsError) as exc:
        validate_params(PlaceBetParams, {**BET, "limitProb": prob})
    assert exc.value.fields == ["limitProb"]


def test_outcome_enum_and_strict_numbers():
    with pytest.raises(InvalidParamsError) as exc:
        validate_params(PlaceBetParams, {"marketId": "m1", "amount": "10", "outcome": "MAYBE"})
    assert sorted(exc.value.fields) == ["amount", "outcome"]
    assert exc.value.message.startswith("Invalid parameters: ")


def test_unknown_fields_ignored_outside_bet_listing():
    params = validate_params(PlaceBetParams, {**BET, "comment": "ignored"})
    assert "comment" not in params.to_body()


@pytest.mark.parametrize(("limit", "ok"), [(0, False), (1, True), (100, True), (101, False)])
def test_search_limit_range(limit, ok):
    if ok:
        assert validate_params(SearchMarketsParams, {"limit": limit}).limit == limit
    else:
        with pytest.raises(InvalidParamsError):
            validate_params(SearchMarketsParams, {"limit": limit})


def test_bet_listing_defaults_and_coercion():
    params = validate_params(GetBetsParams, {})
    assert params.limit == 1000
    params = validate_params(
        GetBetsParams, {"limit": "50", "beforeTime": "1700000000000", "filterRedemptions": "true"}
    )
    assert params.limit == 50
    assert params.before_time == 1700000000000
    assert params.filter_redemptions is True


@pytest.mark.parametrize("limit", [-1, 10001])
def test_bet_listing_limit_range(limit):
    with pytest.raises(InvalidParamsError) as exc:
        validate_params(GetBetsParams, {"limit": limit})
    assert exc.value.fields == ["limit"]


def test_bet_listing_rejects_unknown_fields():
    with pytest.raises(InvalidParamsError) as exc:
        validate_params(GetBetsParams, {"userId": "u1", "marketId": "m1"})
    assert exc.value.fields == ["marketId"]


def test_bet_listing_min_amount_positive():
    with pytest.raises(InvalidParamsError):
        validate_params(GetBetsParams, {"minAmount": 0})


@pytest.mark.parametrize(("amount", "ok"), [(9.99, False), (10, True), (250, True)])
def test_mana_transfer_minimum(amount, ok):
    args = {"toIds": ["u1", "u2"], "amount": amount}
    if ok:
        assert validate_params(SendManaParams, args).amount == amount
    else:
        with pytest.raises(InvalidParamsError):
            validate_params(SendManaParams, args)


@pytest.mark.parametrize("model", [AddBountyParams, RemoveLiquidityParams])
@pytest.mark.parametrize("amount", [math.nan, math.inf, -math.inf, 0])
def test_bounty_and_liquidity_amounts_finite_positive(model, amount):
    with pytest.raises(InvalidParamsError) as exc:
        validate_params(model, {"contractId": "m1", "amount": amount})
    assert exc.value.fields == ["amount"]


@pytest.mark.parametrize(("prob", "ok"), [(0.5, False), (1, True), (99, True), (99.5, False)])
def test_initial_prob_range(prob, ok):
    args = {**MINIMAL_CALLS["create_market"][0], "initialProb": prob}
    if ok:
        assert validate_params(CreateMarketParams, args).initial_prob == prob
    else:
        with pytest.raises(InvalidParamsError):
            validate_params(CreateMarketParams, args)


def test_create_market_generic_rules():
    args = {
        "outcomeType": "SCALAR",
        "question": "x" * 121,
        "liquidityTier": 50,
        "answers": ["ok", "   "],
    }
    with pytest.raises(InvalidParamsError) as exc:
        validate_params(CreateMarketParams, args)
    fields = exc.value.fields
    assert "outcomeType" in fields
    assert "question" in fields
    assert "liquidityTier" in fields
    assert "answers.1" in fields


def test_create_market_answers_trimmed_and_visibility_defaulted():
    args = {**MINIMAL_CALLS["create_market"][0], "answers": ["  Yes ", "No"]}
    params = validate_params(CreateMarketParams, args)
    assert params.answers == ["Yes", "No"]
    assert params.visibility == "public"


def test_structured_description_must_be_document():
    args = {**MINIMAL_CALLS["create_market"][0], "description": {"type": "paragraph"}}
    with pytest.raises(InvalidParamsError) as exc:
        validate_params(CreateMarketParams, args)
    assert exc.value.fields[0].startswith("description")
