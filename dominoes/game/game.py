"""
Main game engine and state management.
"""

import logging
import random
from dataclasses import replace
from typing import TYPE_CHECKING, Dict, FrozenSet, List, Optional, Sequence, Tuple

from dominoes.exceptions import InvalidActionError, ValidationError
from dominoes.game.actions import Action, ActionType
from dominoes.game.chain import Chain
from dominoes.game.config import GameConfig
from dominoes.game.eventlog import EventLog, EventType
from dominoes.game.hands import Hand, Stock
from dominoes.game.outcomes import DrawResult, OpponentOutcome, Outcome, PlayResult
from dominoes.game.tiles import Side, Tile, double_six_set, tile_str

if TYPE_CHECKING:
    from dominoes.agents.base import Agent

logger = logging.getLogger(__name__)


class GameState:
    """
    Represents the complete state of a dominoes game.
    This is the main interface for the game engine.

    All mutation goes through the methods below; the chain, hands and stock
    are only handed out as tuples or counts.
    """

    def __init__(self, config: Optional[GameConfig] = None, opponent: Optional["Agent"] = None):
        self._init_common(config or GameConfig(), opponent)

        self._stock = Stock(double_six_set(), self.rng)
        self._hands[Side.PLAYER] = Hand(Side.PLAYER, self._stock.deal(self.config.hand_size))
        self._hands[Side.OPPONENT] = Hand(Side.OPPONENT, self._stock.deal(self.config.hand_size))
        self._universe = frozenset(t.key for t in double_six_set())

        self.event_log.log(
            EventType.GAME_START,
            seed=self.config.seed,
            hand_size=self.config.hand_size,
        )
        self._log_deal()

    def _init_common(self, config: GameConfig, opponent: Optional["Agent"]) -> None:
        from dominoes.agents.first_fit import FirstFitAgent

        self.config = config
        self.rng = random.Random(config.seed)
        self.event_log = EventLog()
        self.opponent_agent = opponent or FirstFitAgent(Side.OPPONENT)

        self._chain = Chain()
        self._hands: Dict[Side, Hand] = {}
        self._stock = Stock([], self.rng, shuffle=False)
        self._universe: FrozenSet[Tuple[int, int]] = frozenset()

        self.to_move = Side.PLAYER
        self.turn_number = 0
        self.game_over = False
        self.winner: Optional[Side] = None
        self.last_outcome: Optional[Outcome] = None

    @classmethod
    def from_position(
        cls,
        *,
        chain: Sequence[Tile] = (),
        player_hand: Sequence[Tile] = (),
        opponent_hand: Sequence[Tile] = (),
        stock: Sequence[Tile] = (),
        config: Optional[GameConfig] = None,
        opponent: Optional["Agent"] = None,
        to_move: Side = Side.PLAYER,
    ) -> "GameState":
        """
        Build a game from an arranged position instead of a shuffled deal.

        Chain tiles are taken as oriented and must connect; the stock is kept
        in the given order. The tiles need not cover the whole set, but no
        tile may appear twice.
        """
        game = cls.__new__(cls)
        game._init_common(config or GameConfig(), opponent)

        keys = [t.key for t in (*chain, *player_hand, *opponent_hand, *stock)]
        if len(keys) != len(set(keys)):
            raise ValidationError("Arranged position repeats a tile")

        for tile in chain:
            if game._chain.is_empty():
                game._chain.first_play(tile)
            elif tile.left == game._chain.endpoints()[1]:
                game._chain.append_right(tile)
            else:
                raise ValidationError(f"Chain tile {tile} does not connect")

        game._hands[Side.PLAYER] = Hand(Side.PLAYER, player_hand)
        game._hands[Side.OPPONENT] = Hand(Side.OPPONENT, opponent_hand)
        game._stock = Stock(stock, game.rng, shuffle=False)
        game._universe = frozenset(keys)
        game.to_move = to_move

        game.event_log.log(EventType.GAME_START, seed=game.config.seed, arranged=True)
        game._log_deal()
        return game

    def _log_deal(self) -> None:
        self.event_log.log(
            EventType.DEAL,
            player_hand=len(self._hands[Side.PLAYER]),
            opponent_hand=len(self._hands[Side.OPPONENT]),
            stock=len(self._stock),
        )

    # Read-only views

    @property
    def chain(self) -> Tuple[Tile, ...]:
        """Played tiles, left end first."""
        return self._chain.tiles

    @property
    def endpoints(self) -> Optional[Tuple[int, int]]:
        return self._chain.endpoints()

    def hand(self, side: Side) -> Tuple[Tile, ...]:
        return self._hands[side].tiles

    @property
    def stock_size(self) -> int:
        return len(self._stock)

    # Move validation

    def can_play(self, tile: Tile) -> bool:
        """True if the tile matches either chain end, or the chain is empty."""
        return self._chain.accepts(tile)

    def playable_indices(self, side: Side) -> List[int]:
        return [i for i, tile in enumerate(self._hands[side]) if self.can_play(tile)]

    def has_legal_move(self, side: Side) -> bool:
        return any(self.can_play(tile) for tile in self._hands[side])

    def is_stalemate(self) -> bool:
        """Neither side can play and the stock is empty."""
        return (
            self._stock.is_empty()
            and not self.has_legal_move(Side.PLAYER)
            and not self.has_legal_move(Side.OPPONENT)
        )

    def legal_plays(self, side: Side) -> List[Action]:
        return [Action(ActionType.PLAY_TILE, hand_index=i) for i in self.playable_indices(side)]

    # Moves

    def play_from_hand(self, side: Side, hand_index: int) -> PlayResult:
        """
        Play the tile at `hand_index` from `side`'s hand onto the chain.

        Leaves the state untouched unless the result is OK. A successful play
        passes the turn to the other side.
        """
        if self.game_over:
            return self._finish(PlayResult(Outcome.GAME_OVER, side))

        hand = self._hands[side]
        if isinstance(hand_index, bool) or not isinstance(hand_index, int) or not 0 <= hand_index < len(hand):
            return self._finish(PlayResult(Outcome.BAD_INDEX, side))

        tile = hand[hand_index]
        if not self.can_play(tile):
            self.event_log.log(
                EventType.ILLEGAL_MOVE,
                side=side,
                tile=tile_str(tile),
                endpoints=self.endpoints,
            )
            return self._finish(PlayResult(Outcome.ILLEGAL_MOVE, side, tile=tile))

        hand.pop(hand_index)
        placed, end = self._chain.place(tile)
        self.turn_number += 1
        self.to_move = side.other

        self.event_log.log(
            EventType.PLAY,
            side=side,
            tile=tile_str(placed),
            end=end,
            hand_index=hand_index,
            endpoints=self.endpoints,
        )

        if self.config.end_on_empty_hand and hand.is_empty():
            self.game_over = True
            self.winner = side
            self.event_log.log(EventType.GAME_END, side=side, reason="empty_hand")
            logger.info("%s emptied their hand after %d plays", side.value, self.turn_number)

        return self._finish(PlayResult(Outcome.OK, side, tile=placed, end=end))

    def opponent_turn(self) -> OpponentOutcome:
        """
        Drive the opponent for one turn.

        The opponent agent picks among the playable tiles; with nothing to
        play it draws one tile at a time and rescans, until it plays or the
        stock runs out. Control always returns to the player.
        """
        if self.game_over:
            return self._finish(OpponentOutcome(Outcome.GAME_OVER))

        side = Side.OPPONENT
        draws = 0
        while True:
            plays = self.legal_plays(side)
            if plays:
                action = self.opponent_agent.choose_action(self, plays)
                if action is None or action.hand_index is None:
                    raise InvalidActionError(f"{self.opponent_agent!r} returned no play")
                result = self.play_from_hand(side, action.hand_index)
                if not result.ok:
                    raise InvalidActionError(
                        f"{self.opponent_agent!r} chose an unplayable tile: {result.outcome.value}"
                    )
                self.to_move = Side.PLAYER
                return self._finish(
                    OpponentOutcome(Outcome.OPPONENT_PLAYED, tile=result.tile, end=result.end, draws=draws)
                )

            tile = self._stock.draw()
            if tile is None:
                self.event_log.log(EventType.OPPONENT_NO_MOVE, side=side, draws=draws)
                self.to_move = Side.PLAYER
                return self._finish(OpponentOutcome(Outcome.OPPONENT_NO_MOVE, draws=draws))

            self._hands[side].add(tile)
            draws += 1
            self.event_log.log(EventType.DRAW, side=side, tile=tile_str(tile), stock=len(self._stock))

    def player_play(self, hand_index: int) -> PlayResult:
        """
        Player intent: play a tile, then give the opponent exactly one turn.

        The opponent's outcome is attached to the returned result.
        """
        result = self.play_from_hand(Side.PLAYER, hand_index)
        if not result.ok or self.game_over:
            return result

        opponent = self.opponent_turn()
        return replace(result, opponent=opponent)

    def request_draw(self, side: Side) -> DrawResult:
        """
        Draw for `side` if it cannot play.

        With an empty stock and neither side able to play, the hands are
        pooled and re-dealt. Drawing never changes whose turn it is.
        """
        if self.game_over:
            return self._finish(DrawResult(Outcome.GAME_OVER, side))

        if self.has_legal_move(side):
            return self._finish(DrawResult(Outcome.HAS_LEGAL_MOVE, side))

        tile = self._stock.draw()
        if tile is not None:
            self._hands[side].add(tile)
            self.event_log.log(EventType.DRAW, side=side, tile=tile_str(tile), stock=len(self._stock))
            return self._finish(DrawResult(Outcome.DREW, side, tile=tile))

        if not self.has_legal_move(side.other):
            self._redistribute()
            return self._finish(DrawResult(Outcome.REDISTRIBUTED, side))

        self.event_log.log(EventType.DEADLOCK, side=side)
        logger.debug("%s cannot play or draw while %s can play", side.value, side.other.value)
        return self._finish(DrawResult(Outcome.DEADLOCK_UNRESOLVED, side))

    def _redistribute(self) -> None:
        """Pool both hands and the stock, shuffle, and deal again."""
        pool = (
            self._hands[Side.PLAYER].take_all()
            + self._hands[Side.OPPONENT].take_all()
            + self._stock.deal(len(self._stock))
        )
        self._stock.refill(pool)
        for side in (Side.PLAYER, Side.OPPONENT):
            for tile in self._stock.deal(self.config.hand_size):
                self._hands[side].add(tile)

        self.event_log.log(
            EventType.REDISTRIBUTE,
            pool=len(pool),
            player_hand=len(self._hands[Side.PLAYER]),
            opponent_hand=len(self._hands[Side.OPPONENT]),
            stock=len(self._stock),
        )
        logger.info("Stalemate: redistributed %d tiles", len(pool))

    def _finish(self, result):
        self.last_outcome = result.outcome
        return result

    # Invariants

    def check_invariants(self) -> None:
        """
        Raise ValidationError if tiles were lost, duplicated or mis-chained.

        Dealt games must cover the 28-tile set exactly; arranged positions
        must still hold the tiles they started with.
        """
        keys = [t.key for t in self._chain]
        for side in (Side.PLAYER, Side.OPPONENT):
            keys.extend(t.key for t in self._hands[side])
        keys.extend(t.key for t in self._stock.tiles)

        if len(keys) != len(set(keys)):
            raise ValidationError("Tile appears in more than one place")
        if set(keys) != self._universe:
            raise ValidationError(f"Tiles lost or invented: {len(keys)} held, {len(self._universe)} expected")
        if not self._chain.is_connected():
            raise ValidationError(f"Chain does not connect: {self._chain!r}")

    def __repr__(self) -> str:
        return (
            f"GameState(turn={self.turn_number}, to_move={self.to_move.value}, "
            f"chain={len(self._chain)}, stock={len(self._stock)})"
        )


def create_game(config: Optional[GameConfig] = None, opponent: Optional["Agent"] = None) -> GameState:
    """
    Create a new game with the given configuration.

    Args:
        config: Game configuration; defaults to an unseeded standard game.
        opponent: Agent driving the opponent; defaults to first-fit.

    Returns:
        Initialized GameState
    """
    return GameState(config, opponent)
