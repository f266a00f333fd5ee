"""Tool parameter models (Pydantic) and per-call value objects."""

from manifoldmcp.models.envelope import OutboundRequest, TextBlock, ToolFailure, ToolResult
from manifoldmcp.models.params import (
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
    validate_params,
)

__all__ = [
    "OutboundRequest",
    "TextBlock",
    "ToolFailure",
    "ToolResult",
    "ToolParams",
    "CreateMarketParams",
    "SearchMarketsParams",
    "GetMarketParams",
    "GetUserParams",
    "GetBetsParams",
    "PlaceBetParams",
    "CancelBetParams",
    "SellSharesParams",
    "AddLiquidityParams",
    "RemoveLiquidityParams",
    "CloseMarketParams",
    "AddAnswerParams",
    "FollowMarketParams",
    "AddBountyParams",
    "AwardBountyParams",
    "ReactParams",
    "SendManaParams",
    "validate_params",
]
