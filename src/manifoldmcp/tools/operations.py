"""Operation registry - ties each tool name to its params model, translator and renderer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from manifoldmcp.models import params as p
from manifoldmcp.models.envelope import OutboundRequest
from manifoldmcp.tools import catalog
from manifoldmcp.tools import translate as t
from manifoldmcp.tools.format import Renderer, choose, confirmation, field_sentence, pretty_json


@dataclass(frozen=True)
class Operation:
    descriptor: catalog.ToolDescriptor
    params_model: type[p.ToolParams]
    translate: Callable[..., OutboundRequest]
    render: Renderer

    @property
    def name(self) -> str:
        return self.descriptor.name

    @property
    def mutating(self) -> bool:
        return self.name not in READ_ONLY


READ_ONLY = frozenset({"search_markets", "get_market", "get_user", "get_bets"})

OPERATIONS: dict[str, Operation] = {
    op.name: op
    for op in (
        Operation(
            catalog.CREATE_MARKET,
            p.CreateMarketParams,
            t.create_market,
            field_sentence("Created market: {}", "url"),
        ),
        Operation(catalog.SEARCH_MARKETS, p.SearchMarketsParams, t.search_markets, pretty_json),
        Operation(catalog.GET_MARKET, p.GetMarketParams, t.get_market, pretty_json),
        Operation(catalog.GET_USER, p.GetUserParams, t.get_user, pretty_json),
        Operation(catalog.GET_BETS, p.GetBetsParams, t.get_bets, pretty_json),
        Operation(catalog.PLACE_BET, p.PlaceBetParams, t.place_bet, pretty_json),
        Operation(
            catalog.CANCEL_BET, p.CancelBetParams, t.cancel_bet, confirmation("Bet cancelled successfully")
        ),
        Operation(catalog.SELL_SHARES, p.SellSharesParams, t.sell_shares, pretty_json),
        Operation(
            catalog.ADD_LIQUIDITY,
            p.AddLiquidityParams,
            t.add_liquidity,
            confirmation("Liquidity added successfully"),
        ),
        Operation(
            catalog.CLOSE_MARKET,
            p.CloseMarketParams,
            t.close_market,
            confirmation("Market closed successfully"),
        ),
        Operation(
            catalog.ADD_ANSWER,
            p.AddAnswerParams,
            t.add_answer,
            field_sentence("Answer added with ID: {}", "newAnswerId"),
        ),
        Operation(
            catalog.FOLLOW_MARKET,
            p.FollowMarketParams,
            t.follow_market,
            choose("follow", "Now following market", "Unfollowed market"),
        ),
        Operation(
            catalog.REMOVE_LIQUIDITY,
            p.RemoveLiquidityParams,
            t.remove_liquidity,
            confirmation("Liquidity removed successfully"),
        ),
        Operation(
            catalog.ADD_BOUNTY, p.AddBountyParams, t.add_bounty, confirmation("Bounty added successfully")
        ),
        Operation(
            catalog.AWARD_BOUNTY,
            p.AwardBountyParams,
            t.award_bounty,
            confirmation("Bounty awarded successfully"),
        ),
        Operation(catalog.REACT, p.ReactParams, t.react, choose("remove", "Reaction removed", "Reaction added")),
        Operation(catalog.SEND_MANA, p.SendManaParams, t.send_mana, confirmation("Mana sent successfully")),
    )
}
