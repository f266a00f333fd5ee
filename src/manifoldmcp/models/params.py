"""Parameter models for every tool (schema registry).

Each model validates the raw argument mapping a caller sends with a tool call.
Wire names are camelCase (``marketId``, ``limitProb``); attributes are snake_case.
Numbers are strict (no string coercion) except on ``GetBetsParams``, which
mirrors the query-string semantics of the bets endpoint. NaN and infinities are
rejected everywhere.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, TypeVar

from pydantic import BaseModel, ConfigDict, Field, StringConstraints, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from manifoldmcp.errors import InvalidParamsError

MAX_ANSWERS = 100
MAX_MULTI_NUMERIC_ANSWERS = 12
NON_POINTS_BETS_LIMIT = 10_000
MIN_MANAGRAM_AMOUNT = 10

OutcomeType = Literal["BINARY", "STONK", "MULTIPLE_CHOICE", "MULTI_NUMERIC", "DATE", "POLL"]
BinaryOutcome = Literal["YES", "NO"]
AddAnswersMode = Literal["DISABLED", "ONLY_CREATOR", "ANYONE"]

AnswerText = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
PositiveAmount = Annotated[float, Field(gt=0)]


class ToolParams(BaseModel):
    """Base for tool argument models. Unknown fields are ignored."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        strict=True,
        allow_inf_nan=False,
        extra="ignore",
    )

    def to_body(self, *fields: str) -> dict[str, Any]:
        """Dump the given attributes (all when none given) by wire name, dropping None."""
        include = set(fields) if fields else None
        return self.model_dump(by_alias=True, exclude_none=True, include=include)


# --- Markets ---
class CreateMarketParams(ToolParams):
    """Generic market creation fields plus the union of all variant fields.

    Variant-specific requirements (which of ``answers``, ``midpoints``, ``unit``...
    must be present for a given ``outcomeType``) are checked after this model
    validates, when the request is translated.
    """

    outcome_type: OutcomeType
    question: str = Field(..., min_length=1, max_length=120)
    description: str | dict[str, Any] | None = None
    description_html: str | None = None
    description_markdown: str | None = None
    description_json: str | None = None
    close_time: str | int | float | None = None  # ISO string or epoch ms
    visibility: Literal["public", "unlisted"] = "public"
    utc_offset: float | None = None
    extra_liquidity: float | None = Field(None, ge=1)
    liquidity_tier: Literal[100, 1000, 10000, 100000]
    # BINARY / STONK
    initial_prob: float | None = Field(None, ge=1, le=99)
    # MULTIPLE_CHOICE / POLL / MULTI_NUMERIC / DATE
    answers: list[AnswerText] | None = Field(None, max_length=MAX_ANSWERS)
    answer_short_texts: list[AnswerText] | None = Field(None, max_length=MAX_ANSWERS)
    answer_image_urls: list[AnswerText] | None = Field(None, max_length=MAX_ANSWERS)
    add_answers_mode: AddAnswersMode | None = None
    should_answers_sum_to_one: bool | None = None
    # MULTI_NUMERIC / DATE
    midpoints: list[float] | None = Field(None, max_length=MAX_MULTI_NUMERIC_ANSWERS)
    unit: str | None = None
    timezone: str | None = None
    # POLL
    voter_visibility: Literal["creator", "everyone"] | None = None

    @field_validator("description")
    @classmethod
    def _check_document(cls, value: Any) -> Any:
        if isinstance(value, dict):
            if value.get("type") != "doc" or not isinstance(value.get("content"), list):
                raise ValueError('structured description must look like {"type": "doc", "content": [...]}')
        return value


class SearchMarketsParams(ToolParams):
    term: str | None = None
    limit: int | None = Field(None, ge=1, le=100)
    filter: Literal["all", "open", "closed", "resolved"] | None = None
    sort: Literal["newest", "score", "liquidity"] | None = None


class GetMarketParams(ToolParams):
    market_id: str


class GetUserParams(ToolParams):
    username: str


class CloseMarketParams(ToolParams):
    contract_id: str
    close_time: int | None = Field(None, ge=0)


class AddAnswerParams(ToolParams):
    contract_id: str
    text: str = Field(..., min_length=1)


class FollowMarketParams(ToolParams):
    contract_id: str
    follow: bool


# --- Bets ---
class GetBetsParams(ToolParams):
    """Bet listing filters.

    Unrecognized fields are rejected. Values are coerced the way query strings are
    (``"50"`` for ``limit``, ``"true"`` for booleans).
    """

    model_config = ConfigDict(extra="forbid", strict=False)

    id: str | None = None
    user_id: str | None = None
    username: str | None = None
    contract_id: str | list[str] | None = None
    contract_slug: str | None = None
    answer_id: str | None = None
    limit: int = Field(1000, ge=0, le=NON_POINTS_BETS_LIMIT)
    before: str | None = None
    after: str | None = None
    before_time: float | None = None
    after_time: float | None = None
    order: Literal["asc", "desc"] | None = None
    kinds: Literal["open-limit"] | None = None
    min_amount: float | None = Field(None, gt=0)
    filter_redemptions: bool | None = None
    include_zero_share_redemptions: bool | None = None
    count: bool | None = None


class PlaceBetParams(ToolParams):
    market_id: str
    amount: PositiveAmount
    outcome: BinaryOutcome
    limit_prob: float | None = Field(None, ge=0.01, le=0.99)


class CancelBetParams(ToolParams):
    bet_id: str


class SellSharesParams(ToolParams):
    market_id: str
    outcome: BinaryOutcome | None = None
    shares: float | None = None


# --- Liquidity & bounties ---
class AddLiquidityParams(ToolParams):
    market_id: str
    amount: PositiveAmount


class RemoveLiquidityParams(ToolParams):
    contract_id: str
    amount: PositiveAmount


class AddBountyParams(ToolParams):
    contract_id: str
    amount: PositiveAmount


class AwardBountyParams(ToolParams):
    contract_id: str
    comment_id: str
    amount: PositiveAmount


# --- Social ---
class ReactParams(ToolParams):
    content_id: str
    content_type: Literal["comment", "contract"]
    remove: bool | None = None
    reaction_type: Literal["like", "dislike"] = "like"


class SendManaParams(ToolParams):
    to_ids: list[str]
    amount: float = Field(..., ge=MIN_MANAGRAM_AMOUNT)
    message: str | None = None


P = TypeVar("P", bound=ToolParams)


def validate_params(model: type[P], arguments: dict[str, Any] | None) -> P:
    """Validate raw tool arguments, reporting every offending field as InvalidParamsError."""
    try:
        return model.model_validate(arguments or {})
    except ValidationError as exc:
        raise InvalidParamsError.from_validation_error(exc) from exc


def wire_fields(model: type[ToolParams]) -> set[str]:
    """Wire (camelCase) names of every field the model accepts."""
    return {field.alias or name for name, field in model.model_fields.items()}


def required_wire_fields(model: type[ToolParams]) -> set[str]:
    return {field.alias or name for name, field in model.model_fields.items() if field.is_required()}
