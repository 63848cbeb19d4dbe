"""Interfaces for card containers."""

from abc import ABC, abstractmethod
from typing import Iterable, Iterator

from .card import Card


class CardContainer(ABC):
    """
    Interface for any ordered collection of cards.

    Subclasses provide storage; ``len()``, iteration and ``in`` are derived
    from ``size`` and ``get_cards``.
    """

    @abstractmethod
    def add_card(self, card: Card) -> None:
        """Add a single card on top of the container."""
        pass

    @abstractmethod
    def add_cards(self, cards: Iterable[Card]) -> None:
        """Add multiple cards, the last one ending on top."""
        pass

    @abstractmethod
    def remove_card(self, card: Card) -> Card:
        """
        Remove and return a specific card.

        Raises:
            CardNotFound: If card not in container
        """
        pass

    @abstractmethod
    def remove_cards(self, cards: Iterable[Card]) -> list[Card]:
        """
        Remove and return specific cards.

        Raises:
            CardNotFound: If any card not in container; nothing is removed
        """
        pass

    @abstractmethod
    def get_cards(self) -> list[Card]:
        """Copy of the cards, bottom first."""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Remove all cards from the container."""
        pass

    @property
    @abstractmethod
    def size(self) -> int:
        """Number of cards in the container."""
        pass

    def __len__(self) -> int:
        return self.size

    def __iter__(self) -> Iterator[Card]:
        """Iterate over a snapshot of the current order."""
        return iter(self.get_cards())

    def __contains__(self, card: object) -> bool:
        return card in self.get_cards()
