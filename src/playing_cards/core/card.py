"""Card related classes and utilities.

Cards are packed into a single 6-bit integer:

- bits 0-3 hold the rank (0 to 15)
- bits 4-5 hold the suit ordinal (0 to 3)

Ranks are assigned as follows:

- numbered cards (2 to 10) have rank equal to their number
- jacks, queens and kings have ranks 11, 12 and 13
- there are low and high aces with ranks 1 and 14
- there are low and high jokers with ranks 0 and 15

There are 64 possible card values, 0x00 through 0x3f. Standard cards built
through ``Card(rank, suit)`` only ever use ranks 1 to 13.
"""
from enum import Enum
from typing import Tuple, Union

from .exceptions import InvalidRank, InvalidSuit, UnknownColor

RANK_MASK = 0x0F
SUIT_MASK = 0x30
SUIT_SHIFT = 4

JOKER_GLYPH = '\U0001F0CF'


class Color(Enum):
    """Card colors."""
    BLACK = 'black'
    RED = 'red'

    def __str__(self) -> str:
        return self.value


class Suit(Enum):
    """
    Card suits, encoded as a 2-bit ordinal.

    Suits compare by ordinal only; there is no ordering between them.
    """
    CLUBS = 0
    DIAMONDS = 1
    HEARTS = 2
    SPADES = 3

    @classmethod
    def _missing_(cls, value):
        raise InvalidSuit(value)

    @property
    def ordinal(self) -> int:
        """The 0-3 value stored in a card's suit bits."""
        return self.value

    @property
    def color(self) -> Color:
        """Black for clubs and spades, red for diamonds and hearts."""
        if self in (Suit.CLUBS, Suit.SPADES):
            return Color.BLACK
        elif self in (Suit.DIAMONDS, Suit.HEARTS):
            return Color.RED
        raise UnknownColor(self)

    @property
    def glyph(self) -> str:
        """Unicode suit symbol: ♣ ♢ ♡ ♠."""
        return chr(0x2663 - self.value)

    @property
    def bits(self) -> int:
        """Mask over the 16 card values of this suit in a 64-bit card set."""
        return 0xFFFF << (16 * self.value)

    def __rmul__(self, rank: int) -> 'Card':
        """Allow building cards as ``3 * HEARTS``."""
        if not isinstance(rank, int):
            return NotImplemented
        return Card(rank, self)

    def __str__(self) -> str:
        return self.glyph


def rank_symbol(rank: int) -> str:
    """Display symbol for a rank: A, 2-9, T, J, Q, K, or a joker."""
    if 2 <= rank <= 9:
        return str(rank)
    if rank == 1 or rank == 14:
        return 'A'
    if 10 <= rank <= 13:
        return 'TJQK'[rank - 10]
    return JOKER_GLYPH


class Card:
    """
    Represents a playing card as a packed rank/suit value.

    Cards are immutable and compare equal when their packed values match.
    There is deliberately no ordering between cards: aces can play low or
    high, so callers compare ``low_value`` or ``high_value`` themselves.

    Args:
        rank: 1 (ace) to 13 (king)
        suit: a Suit, or its 0-3 ordinal

    Raises:
        InvalidRank: If rank is outside 1-13
        InvalidSuit: If suit is not a valid suit ordinal
    """

    __slots__ = ('_value',)

    def __init__(self, rank: int, suit: Union[Suit, int]):
        if not isinstance(rank, int) or isinstance(rank, bool) or not 1 <= rank <= 13:
            raise InvalidRank(rank)
        if not isinstance(suit, Suit) and (not isinstance(suit, int) or isinstance(suit, bool)):
            raise InvalidSuit(suit)
        suit = Suit(suit)
        object.__setattr__(self, '_value', (suit.ordinal << SUIT_SHIFT) | rank)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (Card, (self.rank, self.suit))

    @property
    def value(self) -> int:
        """The packed 6-bit value."""
        return self._value

    @property
    def rank(self) -> int:
        return self._value & RANK_MASK

    @property
    def suit(self) -> Suit:
        return Suit((self._value & SUIT_MASK) >> SUIT_SHIFT)

    @property
    def low_value(self) -> int:
        """Rank with aces low, e.g. ace -> 1, five -> 5."""
        return self.rank

    @property
    def high_value(self) -> int:
        """Rank with aces high, e.g. ace -> 14, five -> 5."""
        rank = self.rank
        return 14 if rank == 1 else rank

    @property
    def color(self) -> Color:
        return self.suit.color

    @property
    def bit(self) -> int:
        """One-hot mask of this card in a 64-bit card set."""
        return 1 << self._value

    def __eq__(self, other: object) -> bool:
        """Cards are equal if their packed values match."""
        if not isinstance(other, Card):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __str__(self) -> str:
        """String representation in format 'A♠' for Ace of spades."""
        return f"{rank_symbol(self.rank)}{self.suit.glyph}"

    def __repr__(self) -> str:
        return f"Card({self.rank}, Suit.{self.suit.name})"


CLUBS = Suit.CLUBS
DIAMONDS = Suit.DIAMONDS
HEARTS = Suit.HEARTS
SPADES = Suit.SPADES

TC, JC, QC, KC, AC = (Card(r, CLUBS) for r in (10, 11, 12, 13, 1))
TD, JD, QD, KD, AD = (Card(r, DIAMONDS) for r in (10, 11, 12, 13, 1))
TH, JH, QH, KH, AH = (Card(r, HEARTS) for r in (10, 11, 12, 13, 1))
TS, JS, QS, KS, AS = (Card(r, SPADES) for r in (10, 11, 12, 13, 1))


def ranks() -> range:
    """Ranks of a standard deck, ace (1) to king (13)."""
    return range(1, 14)


def suits() -> Tuple[Suit, ...]:
    """All suits, in the order full decks are built."""
    return (CLUBS, SPADES, HEARTS, DIAMONDS)
