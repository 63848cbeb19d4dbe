"""Errors raised by card, suit and deck operations."""


class PlayingCardsError(Exception):
    """Base class for all playing card errors."""
    pass


class InvalidSuit(PlayingCardsError, ValueError):
    """Suit ordinal outside 0-3."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"invalid suit number: {value!r}")


class InvalidRank(PlayingCardsError, ValueError):
    """Rank outside 1-13 when building a standard card."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"invalid card rank: {value!r}")


class UnknownColor(PlayingCardsError):
    """Suit has no color."""

    def __init__(self, suit: object):
        self.suit = suit
        super().__init__(f"suit {suit!r} doesn't have a color")


class DeckUnderflow(PlayingCardsError):
    """More cards requested than the deck holds."""

    def __init__(self, requested: int, available: int):
        self.requested = requested
        self.available = available
        super().__init__(
            f"cannot pop {requested} cards from a deck of {available}"
        )


class CardNotFound(PlayingCardsError, ValueError):
    """Card to remove is not in the deck."""

    def __init__(self, card: object):
        self.card = card
        super().__init__(f"Card {card} not in deck")
