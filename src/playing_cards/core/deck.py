"""Deck implementation."""
import logging
import random
from typing import Iterable, Optional, Union

from playing_cards.config import get_config
from playing_cards.display import render_deck

from .card import Card, ranks, suits
from .containers import CardContainer
from .exceptions import CardNotFound, DeckUnderflow

logger = logging.getLogger(__name__)

# Shared by every deck built without an rng
_default_rng: Optional[random.Random] = None


def default_rng() -> random.Random:
    """
    The process-wide random source for decks without their own.

    Seeded once from the SHUFFLE_SEED setting on first use, so a seeded
    process deals the same sequence of shuffles on every run while its
    successive decks still differ.
    """
    global _default_rng
    if _default_rng is None:
        _default_rng = random.Random(get_config().SHUFFLE_SEED)
    return _default_rng


def reseed(seed: Optional[int] = None) -> None:
    """Replace the process-wide random source with one seeded by ``seed``."""
    global _default_rng
    _default_rng = random.Random(seed)
    logger.debug(f"Reseeded default shuffle source with {seed}")


def full_deck() -> list[Card]:
    """
    All 52 standard cards.

    Suits follow ``suits()`` order (clubs, spades, hearts, diamonds) and
    ranks run ace to king within each suit, so the result is always the
    same list.
    """
    return [Card(rank, suit) for suit in suits() for rank in ranks()]


def ordered_deck(rng: Optional[random.Random] = None) -> 'Deck':
    """An unshuffled full deck, in ``full_deck()`` order."""
    return Deck(full_deck(), rng=rng)


class Deck(CardContainer):
    """
    A deck of playing cards.

    The top of the deck is the end of ``cards``: pops and deals take cards
    from there. A deck is not thread-safe; share one only behind an
    external lock.

    Attributes:
        cards: List of cards in the deck, bottom first
    """

    def __init__(
        self,
        cards: Optional[Iterable[Card]] = None,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize a new deck.

        Args:
            cards: Cards to hold, bottom first; a full deck if omitted
            rng: Random source used by shuffle; the shared
                 ``default_rng()`` if omitted
        """
        self.cards: list[Card] = full_deck() if cards is None else list(cards)
        self._rng = rng if rng is not None else default_rng()

    def shuffle(self) -> None:
        """Put the cards in a uniformly random order, in place."""
        self._rng.shuffle(self.cards)
        logger.debug(f"Shuffled deck of {len(self.cards)} cards")

    def pop(self, item: Union[int, Card] = 1) -> Union[list[Card], Card]:
        """
        Remove cards from the deck.

        ``pop(n)`` removes the top ``n`` cards and returns them top card
        first. ``pop(card)`` removes that card and returns it.

        Raises:
            DeckUnderflow: If n is larger than the deck
            CardNotFound: If card is not in the deck
        """
        if isinstance(item, Card):
            return self.remove_card(item)
        return self.deal_cards(item)

    def deal_card(self) -> Card:
        """
        Deal the top card.

        Raises:
            DeckUnderflow: If the deck is empty
        """
        return self.deal_cards(1)[0]

    def deal_cards(self, count: int) -> list[Card]:
        """
        Deal multiple cards from the top of the deck.

        Args:
            count: Number of cards to deal

        Returns:
            The dealt cards, top card first

        Raises:
            TypeError: If count is not an integer
            ValueError: If count is negative
            DeckUnderflow: If count exceeds the cards left; the deck is
                           left untouched
        """
        if not isinstance(count, int) or isinstance(count, bool):
            raise TypeError(
                f"Card count must be an integer or a Card, not {type(count).__name__}"
            )
        if count < 0:
            raise ValueError(f"Cannot deal a negative number of cards: {count}")
        available = len(self.cards)
        if count > available:
            raise DeckUnderflow(count, available)

        start = available - count
        dealt = self.cards[start:][::-1]
        del self.cards[start:]
        logger.debug(f"Dealt {[str(c) for c in dealt]}, {len(self.cards)} left")
        return dealt

    # CardContainer implementation
    def add_card(self, card: Card) -> None:
        """Add a card to the top of the deck."""
        self.cards.append(card)

    def add_cards(self, cards: Iterable[Card]) -> None:
        """Add multiple cards to the top of the deck."""
        self.cards.extend(cards)

    def remove_card(self, card: Card) -> Card:
        """
        Remove a specific card from the deck.

        If the deck holds duplicates, the one nearest the bottom goes.

        Raises:
            CardNotFound: If card not in deck
        """
        try:
            self.cards.remove(card)
        except ValueError:
            raise CardNotFound(card) from None
        logger.debug(f"Removed {card} from deck, {len(self.cards)} left")
        return card

    def remove_cards(self, cards: Iterable[Card]) -> list[Card]:
        """
        Remove specific cards from the deck, all or nothing.

        Raises:
            CardNotFound: If any card is missing; the deck is left untouched
        """
        cards = list(cards)
        remaining = self.cards.copy()
        for card in cards:
            try:
                remaining.remove(card)
            except ValueError:
                raise CardNotFound(card) from None
        self.cards[:] = remaining
        logger.debug(f"Removed {[str(c) for c in cards]} from deck")
        return cards

    def get_cards(self) -> list[Card]:
        """Get all cards in the deck."""
        return self.cards.copy()

    def clear(self) -> None:
        """Remove all cards from the deck."""
        self.cards.clear()

    @property
    def size(self) -> int:
        """Number of cards in the deck."""
        return len(self.cards)

    def __str__(self) -> str:
        return render_deck(self)

    def __repr__(self) -> str:
        return f"Deck(size={len(self.cards)})"
