"""Playing cards: packed card values and a mutable deck."""

from playing_cards.core.card import (
    Card, Color, Suit, CLUBS, DIAMONDS, HEARTS, SPADES, ranks, suits
)
from playing_cards.core.containers import CardContainer
from playing_cards.core.deck import (
    Deck, default_rng, full_deck, ordered_deck, reseed
)
from playing_cards.core.exceptions import (
    CardNotFound, DeckUnderflow, InvalidRank, InvalidSuit,
    PlayingCardsError, UnknownColor
)
from playing_cards.display import render, render_card, render_deck

__version__ = "0.1.0"
__all__ = [
    "Card",
    "Color",
    "Suit",
    "CLUBS",
    "DIAMONDS",
    "HEARTS",
    "SPADES",
    "ranks",
    "suits",
    "CardContainer",
    "Deck",
    "full_deck",
    "ordered_deck",
    "default_rng",
    "reseed",
    "CardNotFound",
    "DeckUnderflow",
    "InvalidRank",
    "InvalidSuit",
    "PlayingCardsError",
    "UnknownColor",
    "render",
    "render_card",
    "render_deck",
]
