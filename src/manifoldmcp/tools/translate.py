"""Request translation - validated tool params to outbound Manifold API requests.

Rules that a static schema cannot express live here: per-outcome-type required
fields for market creation, rich-text wrapping of plain descriptions, ISO
close times to epoch milliseconds, and query-string encoding of list filters.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any
from urllib.parse import quote

from manifoldmcp.errors import InvalidParamsError
from manifoldmcp.models.envelope import OutboundRequest
from manifoldmcp.models.params import (
    MAX_ANSWERS,
    MAX_MULTI_NUMERIC_ANSWERS,
    AddAnswerParams,
    AddBountyParams,
    AddLiquidityParams,
    AwardBountyParams,
    CancelBetParams,
    CloseMarketParams,
    CreateMarketParams,
    FollowMarketParams,
    GetBetsParams,
    GetMarketParams,
    GetUserParams,
    PlaceBetParams,
    ReactParams,
    RemoveLiquidityParams,
    SearchMarketsParams,
    SellSharesParams,
    SendManaParams,
    ToolParams,
)

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_MAX_SAFE_INTEGER = 2**53 - 1


def _path(template: str, *segments: str) -> str:
    return template.format(*(quote(s, safe="") for s in segments))


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _query(params: ToolParams) -> list[tuple[str, str]]:
    """Encode set fields in declaration order; list values become repeated keys."""
    pairs: list[tuple[str, str]] = []
    for name, field in type(params).model_fields.items():
        value = getattr(params, name)
        if value is None:
            continue
        values = value if isinstance(value, list) else [value]
        pairs.extend((field.alias or name, _query_value(v)) for v in values)
    return pairs


def _post(path: str, body: dict[str, Any] | None = None, **kwargs: Any) -> OutboundRequest:
    return OutboundRequest(method="POST", path=path, body=body, authenticated=True, **kwargs)


def to_rich_text(text: str) -> dict[str, Any]:
    """Wrap plain text in a single-paragraph rich-text document."""
    return {
        "type": "doc",
        "content": [{"type": "paragraph", "content": [{"type": "text", "text": text}]}],
    }


def to_epoch_ms(value: str) -> int:
    """ISO 8601 date/time string to epoch milliseconds. Naive values are UTC."""
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError as exc:
        raise InvalidParamsError.from_issues([("closeTime", f"invalid date string {value!r}")]) from exc
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return (parsed - _EPOCH) // timedelta(milliseconds=1)


# --- Market creation ---
@dataclass(frozen=True)
class MarketVariant:
    """Fields an outcome type requires/accepts beyond the generic creation fields."""

    required: tuple[str, ...] = ()
    optional: tuple[str, ...] = ()
    min_answers: int = 0
    max_answers: int = MAX_ANSWERS
    add_answers_modes: tuple[str, ...] = ()  # first entry is the default; empty = not sent


_BINARY = MarketVariant(optional=("initial_prob",))

MARKET_VARIANTS: dict[str, MarketVariant] = {
    "BINARY": _BINARY,
    "STONK": _BINARY,
    "MULTIPLE_CHOICE": MarketVariant(
        required=("answers",),
        optional=("answer_short_texts", "answer_image_urls", "should_answers_sum_to_one"),
        min_answers=1,
        add_answers_modes=("DISABLED", "ONLY_CREATOR", "ANYONE"),
    ),
    "MULTI_NUMERIC": MarketVariant(
        required=("answers", "midpoints", "should_answers_sum_to_one", "unit"),
        max_answers=MAX_MULTI_NUMERIC_ANSWERS,
        add_answers_modes=("DISABLED",),
    ),
    "DATE": MarketVariant(
        required=("answers", "midpoints", "should_answers_sum_to_one", "timezone"),
        max_answers=MAX_MULTI_NUMERIC_ANSWERS,
        add_answers_modes=("DISABLED",),
    ),
    "POLL": MarketVariant(
        required=("answers",),
        optional=("voter_visibility",),
        min_answers=2,
    ),
}

_GENERIC_MARKET_FIELDS = (
    "outcome_type",
    "question",
    "description",
    "description_html",
    "description_markdown",
    "description_json",
    "close_time",
    "visibility",
    "utc_offset",
    "extra_liquidity",
    "liquidity_tier",
)


def _alias(name: str) -> str:
    return CreateMarketParams.model_fields[name].alias or name


def check_market_variant(params: CreateMarketParams) -> MarketVariant:
    """Second validation pass: variant-specific fields for the chosen outcome type."""
    kind = params.outcome_type
    variant = MARKET_VARIANTS[kind]
    issues: list[tuple[str, str]] = []
    for name in variant.required:
        value = getattr(params, name)
        if value is None or value == "":
            issues.append((_alias(name), f"required for {kind} markets"))
    answers = params.answers
    if answers is not None:
        if len(answers) < variant.min_answers:
            noun = "answer" if variant.min_answers == 1 else "answers"
            issues.append(("answers", f"at least {variant.min_answers} {noun} required for {kind} markets"))
        elif len(answers) > variant.max_answers:
            issues.append(("answers", f"at most {variant.max_answers} answers allowed for {kind} markets"))
    if "midpoints" in variant.required and params.midpoints:
        for i, point in enumerate(params.midpoints):
            if abs(point) > _MAX_SAFE_INTEGER:
                issues.append((f"midpoints.{i}", "must be within the safe integer range"))
    if params.add_answers_mode is not None and variant.add_answers_modes:
        if params.add_answers_mode not in variant.add_answers_modes:
            allowed = ", ".join(variant.add_answers_modes)
            issues.append(("addAnswersMode", f"must be one of {allowed} for {kind} markets"))
    if issues:
        raise InvalidParamsError.from_issues(issues)
    return variant


def create_market(params: CreateMarketParams) -> OutboundRequest:
    variant = check_market_variant(params)
    body = params.to_body(*_GENERIC_MARKET_FIELDS, *variant.required, *variant.optional)
    if variant.add_answers_modes:
        body["addAnswersMode"] = params.add_answers_mode or variant.add_answers_modes[0]
    if isinstance(params.description, str):
        body["description"] = to_rich_text(params.description)
    if isinstance(params.close_time, str):
        body["closeTime"] = to_epoch_ms(params.close_time)
    return _post("/v0/market", body, error_from_body=True)


def search_markets(params: SearchMarketsParams) -> OutboundRequest:
    return OutboundRequest(path="/v0/search-markets", params=_query(params))


def get_market(params: GetMarketParams) -> OutboundRequest:
    return OutboundRequest(path=_path("/v0/market/{}", params.market_id))


def get_user(params: GetUserParams) -> OutboundRequest:
    return OutboundRequest(path=_path("/v0/user/{}", params.username))


def get_bets(params: GetBetsParams) -> OutboundRequest:
    return OutboundRequest(path="/v0/bets", params=_query(params))


# --- Trading ---
def place_bet(params: PlaceBetParams) -> OutboundRequest:
    body = {"contractId": params.market_id, **params.to_body("amount", "outcome", "limit_prob")}
    return _post("/v0/bet", body)


def cancel_bet(params: CancelBetParams) -> OutboundRequest:
    return _post(_path("/v0/bet/cancel/{}", params.bet_id))


def sell_shares(params: SellSharesParams) -> OutboundRequest:
    return _post(_path("/v0/market/{}/sell", params.market_id), params.to_body("outcome", "shares"))


def add_liquidity(params: AddLiquidityParams) -> OutboundRequest:
    return _post(_path("/v0/market/{}/add-liquidity", params.market_id), params.to_body("amount"))


def remove_liquidity(params: RemoveLiquidityParams) -> OutboundRequest:
    return _post(_path("/v0/market/{}/remove-liquidity", params.contract_id), params.to_body("amount"))


def close_market(params: CloseMarketParams) -> OutboundRequest:
    return _post(_path("/v0/market/{}/close", params.contract_id), params.to_body("close_time"))


def add_answer(params: AddAnswerParams) -> OutboundRequest:
    return _post(_path("/v0/market/{}/answer", params.contract_id), params.to_body("text"))


def follow_market(params: FollowMarketParams) -> OutboundRequest:
    return _post("/v0/follow-contract", params.to_body("contract_id", "follow"))


def add_bounty(params: AddBountyParams) -> OutboundRequest:
    return _post(_path("/v0/market/{}/add-bounty", params.contract_id), params.to_body("amount"))


def award_bounty(params: AwardBountyParams) -> OutboundRequest:
    return _post(
        _path("/v0/market/{}/award-bounty", params.contract_id),
        params.to_body("comment_id", "amount"),
    )


# --- Social ---
def react(params: ReactParams) -> OutboundRequest:
    return _post("/v0/react", params.to_body())


def send_mana(params: SendManaParams) -> OutboundRequest:
    return _post("/v0/managram", params.to_body())
