"""Text rendering of cards and decks."""
from typing import Iterable, Optional, Union

from playing_cards.config import get_config
from playing_cards.core.card import Card


def render_card(card: Card) -> str:
    """Display a card as rank symbol plus suit glyph, e.g. 'T♡'."""
    return str(card)


def render_deck(cards: Iterable[Card], per_row: Optional[int] = None) -> str:
    """
    Display cards space separated, ``per_row`` cards to a line.

    Rows default to the CARDS_PER_ROW setting (13, one suit of an ordered
    deck per line).
    """
    if per_row is None:
        per_row = get_config().CARDS_PER_ROW
    if per_row < 1:
        raise ValueError(f"per_row must be positive, got {per_row}")

    symbols = [render_card(c) for c in cards]
    rows = [" ".join(symbols[i:i + per_row]) for i in range(0, len(symbols), per_row)]
    return "\n".join(rows)


def render(obj: Union[Card, Iterable[Card]]) -> str:
    """Display a single card, or a deck or any other sequence of cards."""
    if isinstance(obj, Card):
        return render_card(obj)
    if isinstance(obj, (str, bytes)):
        raise TypeError(f"Cannot render {type(obj).__name__} as cards")
    try:
        cards = list(obj)
    except TypeError:
        raise TypeError(f"Cannot render {type(obj).__name__} as cards") from None
    if not all(isinstance(c, Card) for c in cards):
        raise TypeError("Can only render sequences of Card")
    return render_deck(cards)
