"""Tool catalog - names, descriptions and JSON input schemas for discovery.

Every property listed here must be accepted by the matching parameter model in
``manifoldmcp.models.params`` and vice versa, with the same JSON type, bounds
and enum values as the model's own JSON Schema (checked in tests).
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel

from manifoldmcp.models.params import (
    MAX_ANSWERS,
    MAX_MULTI_NUMERIC_ANSWERS,
    MIN_MANAGRAM_AMOUNT,
    NON_POINTS_BETS_LIMIT,
)


class ToolDescriptor(BaseModel):
    name: str
    description: str
    input_schema: dict[str, Any]


def _schema(properties: dict[str, Any], required: list[str] | None = None) -> dict[str, Any]:
    return {"type": "object", "properties": properties, "required": required or []}


_STR = {"type": "string"}
_YES_NO = {"type": "string", "enum": ["YES", "NO"]}


def _str(description: str) -> dict[str, Any]:
    return {**_STR, "description": description}


def _num(description: str, **bounds: Any) -> dict[str, Any]:
    return {"type": "number", **bounds, "description": description}


def _int(description: str, **bounds: Any) -> dict[str, Any]:
    return {"type": "integer", **bounds, "description": description}


def _bool(description: str) -> dict[str, Any]:
    return {"type": "boolean", "description": description}


def _strings(description: str, **bounds: Any) -> dict[str, Any]:
    return {"type": "array", "items": _STR, **bounds, "description": description}


CREATE_MARKET = ToolDescriptor(
    name="create_market",
    description="Create a new prediction market",
    input_schema=_schema(
        {
            "outcomeType": {
                "type": "string",
                "enum": ["BINARY", "STONK", "MULTIPLE_CHOICE", "MULTI_NUMERIC", "DATE", "POLL"],
                "description": "Type of market to create",
            },
            "question": {
                "type": "string",
                "minLength": 1,
                "maxLength": 120,
                "description": "The headline question for the market (max 120 chars)",
            },
            "description": {
                "oneOf": [
                    _STR,
                    {
                        "type": "object",
                        "properties": {"type": {"const": "doc"}, "content": {"type": "array"}},
                        "required": ["type", "content"],
                    },
                ],
                "description": "Optional description, plain text or a rich-text document",
            },
            "descriptionHtml": _str("Optional HTML description"),
            "descriptionMarkdown": _str("Optional Markdown description"),
            "descriptionJson": _str("Optional JSON description"),
            "closeTime": {
                "oneOf": [{"type": "string"}, {"type": "number"}],
                "description": "Optional. ISO date string or epoch milliseconds when the market closes",
            },
            "visibility": {
                "type": "string",
                "enum": ["public", "unlisted"],
                "description": "Optional. Market visibility. Defaults to public.",
            },
            "utcOffset": _num("Optional. Creator's UTC offset in minutes"),
            "extraLiquidity": _num("Optional. Extra liquidity to add (min 1)", minimum=1),
            "liquidityTier": {
                "type": "integer",
                "enum": [100, 1000, 10000, 100000],
                "description": "Liquidity tier - determines initial market liquidity",
            },
            "initialProb": _num(
                "Optional for BINARY/STONK markets. Initial probability (1-99)", minimum=1, maximum=99
            ),
            "answers": _strings(
                "Required for MULTIPLE_CHOICE/POLL/MULTI_NUMERIC/DATE markets. Array of answers",
                maxItems=MAX_ANSWERS,
            ),
            "answerShortTexts": _strings(
                "Optional for MULTIPLE_CHOICE markets. Short text for answers", maxItems=MAX_ANSWERS
            ),
            "answerImageUrls": _strings(
                "Optional for MULTIPLE_CHOICE markets. Image URLs for answers", maxItems=MAX_ANSWERS
            ),
            "addAnswersMode": {
                "type": "string",
                "enum": ["DISABLED", "ONLY_CREATOR", "ANYONE"],
                "description": "Optional for MULTIPLE_CHOICE markets. Who can add answers (default DISABLED)",
            },
            "shouldAnswersSumToOne": _bool(
                "MULTIPLE_CHOICE (optional), MULTI_NUMERIC/DATE (required). Whether probabilities sum to 100%"
            ),
            "midpoints": {
                "type": "array",
                "items": {"type": "number"},
                "maxItems": MAX_MULTI_NUMERIC_ANSWERS,
                "description": "Required for MULTI_NUMERIC/DATE markets. Array of midpoint values",
            },
            "unit": _str("Required for MULTI_NUMERIC markets. Unit of measurement"),
            "timezone": _str("Required for DATE markets. Timezone"),
            "voterVisibility": {
                "type": "string",
                "enum": ["creator", "everyone"],
                "description": "Optional for POLL markets. Who can see voters",
            },
        },
        ["outcomeType", "question", "liquidityTier"],
    ),
)

SEARCH_MARKETS = ToolDescriptor(
    name="search_markets",
    description="Search for prediction markets with optional filters",
    input_schema=_schema(
        {
            "term": _str("Search query"),
            "limit": _int("Max number of results (1-100)", minimum=1, maximum=100),
            "filter": {"type": "string", "enum": ["all", "open", "closed", "resolved"]},
            "sort": {"type": "string", "enum": ["newest", "score", "liquidity"]},
        }
    ),
)

GET_MARKET = ToolDescriptor(
    name="get_market",
    description="Get detailed information about a specific market",
    input_schema=_schema({"marketId": _str("Market ID")}, ["marketId"]),
)

GET_USER = ToolDescriptor(
    name="get_user",
    description="Get user information by username",
    input_schema=_schema({"username": _str("Username")}, ["username"]),
)

GET_BETS = ToolDescriptor(
    name="get_bets",
    description="Get bets from markets or for users with various filtering options",
    input_schema={
        **_schema(
            {
                "id": _str("Optional. Bet ID to filter by"),
                "userId": _str("Optional. User ID to filter by"),
                "username": _str("Optional. Username to filter by"),
                "contractId": {
                    "oneOf": [_STR, {"type": "array", "items": _STR}],
                    "description": "Optional. Contract ID(s) to filter by",
                },
                "contractSlug": _str("Optional. Contract slug to filter by"),
                "answerId": _str("Optional. Answer ID to filter by"),
                "limit": _int(
                    "Optional. Number of bets to return (default: 1000)",
                    minimum=0,
                    maximum=NON_POINTS_BETS_LIMIT,
                ),
                "before": _str("Optional. Get bets before this bet ID"),
                "after": _str("Optional. Get bets after this bet ID"),
                "beforeTime": _num("Optional. Get bets before this timestamp"),
                "afterTime": _num("Optional. Get bets after this timestamp"),
                "order": {
                    "type": "string",
                    "enum": ["asc", "desc"],
                    "description": "Optional. Sort order by creation time",
                },
                "kinds": {"type": "string", "enum": ["open-limit"], "description": "Optional. Filter by bet kind"},
                "minAmount": _num("Optional. Minimum bet amount", exclusiveMinimum=0),
                "filterRedemptions": _bool("Optional. Filter redemptions"),
                "includeZeroShareRedemptions": _bool("Optional. Include zero share redemptions"),
                "count": _bool("Optional. Return only the number of matching bets"),
            }
        ),
        "additionalProperties": False,
    },
)

PLACE_BET = ToolDescriptor(
    name="place_bet",
    description="Place a bet on a market",
    input_schema=_schema(
        {
            "marketId": _str("Market ID"),
            "amount": _num("Amount to bet in mana", exclusiveMinimum=0),
            "outcome": _YES_NO,
            "limitProb": _num("Optional limit order probability (0.01-0.99)", minimum=0.01, maximum=0.99),
        },
        ["marketId", "amount", "outcome"],
    ),
)

CANCEL_BET = ToolDescriptor(
    name="cancel_bet",
    description="Cancel a limit order bet",
    input_schema=_schema({"betId": _str("Bet ID to cancel")}, ["betId"]),
)

SELL_SHARES = ToolDescriptor(
    name="sell_shares",
    description="Sell shares in a market",
    input_schema=_schema(
        {
            "marketId": _str("Market ID"),
            "outcome": {**_YES_NO, "description": "Which type of shares to sell (defaults to what you have)"},
            "shares": _num("How many shares to sell (defaults to all)"),
        },
        ["marketId"],
    ),
)

ADD_LIQUIDITY = ToolDescriptor(
    name="add_liquidity",
    description="Add mana to market liquidity pool",
    input_schema=_schema(
        {"marketId": _str("Market ID"), "amount": _num("Amount of mana to add", exclusiveMinimum=0)},
        ["marketId", "amount"],
    ),
)

REMOVE_LIQUIDITY = ToolDescriptor(
    name="remove_liquidity",
    description="Remove liquidity from market pool",
    input_schema=_schema(
        {
            "contractId": _str("Market ID"),
            "amount": _num("Amount of liquidity to remove", exclusiveMinimum=0),
        },
        ["contractId", "amount"],
    ),
)

CLOSE_MARKET = ToolDescriptor(
    name="close_market",
    description="Close a market for trading",
    input_schema=_schema(
        {
            "contractId": _str("Market ID"),
            "closeTime": {
                "type": "integer",
                "minimum": 0,
                "description": "Optional. Unix timestamp in milliseconds when market will close",
            },
        },
        ["contractId"],
    ),
)

ADD_ANSWER = ToolDescriptor(
    name="add_answer",
    description="Add a new answer to a multiple choice market",
    input_schema=_schema(
        {"contractId": _str("Market ID"), "text": {**_str("Answer text"), "minLength": 1}},
        ["contractId", "text"],
    ),
)

FOLLOW_MARKET = ToolDescriptor(
    name="follow_market",
    description="Follow or unfollow a market",
    input_schema=_schema(
        {"contractId": _str("Market ID"), "follow": _bool("True to follow, false to unfollow")},
        ["contractId", "follow"],
    ),
)

ADD_BOUNTY = ToolDescriptor(
    name="add_bounty",
    description="Add mana to the bounty of a bountied question",
    input_schema=_schema(
        {"contractId": _str("Market ID"), "amount": _num("Amount of mana to add", exclusiveMinimum=0)},
        ["contractId", "amount"],
    ),
)

AWARD_BOUNTY = ToolDescriptor(
    name="award_bounty",
    description="Award part of a bounty to a comment",
    input_schema=_schema(
        {
            "contractId": _str("Market ID"),
            "commentId": _str("ID of the comment to reward"),
            "amount": _num("Amount of mana to award", exclusiveMinimum=0),
        },
        ["contractId", "commentId", "amount"],
    ),
)

REACT = ToolDescriptor(
    name="react",
    description="React to a market or comment",
    input_schema=_schema(
        {
            "contentId": _str("ID of market or comment"),
            "contentType": {
                "type": "string",
                "enum": ["comment", "contract"],
                "description": "Type of content to react to",
            },
            "remove": _bool("Optional. True to remove reaction"),
            "reactionType": {
                "type": "string",
                "enum": ["like", "dislike"],
                "description": "Type of reaction (default like)",
            },
        },
        ["contentId", "contentType"],
    ),
)

SEND_MANA = ToolDescriptor(
    name="send_mana",
    description="Send mana to other users",
    input_schema=_schema(
        {
            "toIds": _strings("Array of user IDs to send mana to"),
            "amount": _num(f"Amount of mana to send (min {MIN_MANAGRAM_AMOUNT})", minimum=MIN_MANAGRAM_AMOUNT),
            "message": _str("Optional message to include"),
        },
        ["toIds", "amount"],
    ),
)

CATALOG: tuple[ToolDescriptor, ...] = (
    CREATE_MARKET,
    SEARCH_MARKETS,
    GET_MARKET,
    GET_USER,
    GET_BETS,
    PLACE_BET,
    CANCEL_BET,
    SELL_SHARES,
    ADD_LIQUIDITY,
    CLOSE_MARKET,
    ADD_ANSWER,
    FOLLOW_MARKET,
    REMOVE_LIQUIDITY,
    ADD_BOUNTY,
    AWARD_BOUNTY,
    REACT,
    SEND_MANA,
)


def list_tools() -> list[ToolDescriptor]:
    """All tool descriptors in a stable order."""
    return list(CATALOG)
