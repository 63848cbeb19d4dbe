"""Tests for deck implementation."""
import itertools
import random

import pytest
from playing_cards.core import deck as deck_module
from playing_cards.core.card import Card, Suit, AS, KS, KD, AC, QH, ranks
from playing_cards.core.deck import Deck, full_deck, ordered_deck
from playing_cards.core.exceptions import CardNotFound, DeckUnderflow


@pytest.fixture(autouse=True)
def restore_default_rng(monkeypatch):
    """Keep reseeding from leaking between tests."""
    monkeypatch.setattr(deck_module, "_default_rng", deck_module._default_rng)


def test_full_deck_contents():
    """Test the full deck has every card exactly once."""
    cards = full_deck()
    assert len(cards) == 52
    assert len(set(cards)) == 52
    assert {(c.rank, c.suit) for c in cards} == {
        (r, s) for r in ranks() for s in Suit
    }


def test_full_deck_order_is_fixed():
    """Test full decks enumerate by suit, then ace to king."""
    cards = full_deck()
    assert cards == full_deck()
    assert cards[0] == AC
    assert cards[12] == Card(13, Suit.CLUBS)
    assert cards[13] == Card(1, Suit.SPADES)
    assert cards[-1] == KD


def test_ordered_deck():
    """Test ordered decks wrap the full deck in order."""
    deck = ordered_deck()
    assert len(deck) == 52
    assert deck.size == 52
    assert list(deck) == full_deck()


def test_default_deck_is_full():
    """Test deck creation without cards."""
    assert Deck().get_cards() == full_deck()
    assert Deck([]).size == 0


def test_deck_copies_given_cards():
    """Test the deck does not share the caller's list."""
    cards = [AS, KS]
    deck = Deck(cards)
    deck.pop()
    assert cards == [AS, KS]


def test_pop_one():
    """Test popping takes from the top (end) of the deck."""
    deck = ordered_deck()
    assert deck.pop() == [KD]
    assert len(deck) == 51


def test_pop_many():
    """Test popping several cards."""
    deck = ordered_deck()
    popped = deck.pop(5)
    assert len(popped) == 5
    assert len(deck) == 47
    remaining = list(deck)
    assert not any(card in remaining for card in popped)
    assert popped == full_deck()[-5:][::-1]


def test_pop_zero():
    """Test popping no cards."""
    deck = ordered_deck()
    assert deck.pop(0) == []
    assert len(deck) == 52


def test_pop_whole_deck():
    """Test popping every card."""
    deck = ordered_deck()
    assert len(deck.pop(52)) == 52
    assert len(deck) == 0


def test_pop_underflow():
    """Test popping more cards than the deck contains."""
    deck = ordered_deck()
    with pytest.raises(DeckUnderflow) as exc_info:
        deck.pop(53)
    assert exc_info.value.requested == 53
    assert exc_info.value.available == 52
    assert deck.get_cards() == full_deck()


def test_pop_negative():
    """Test a negative count is rejected without changes."""
    deck = ordered_deck()
    with pytest.raises(ValueError):
        deck.pop(-1)
    assert len(deck) == 52


@pytest.mark.parametrize("count", [2.5, True, "3", None])
def test_pop_non_integer_count(count):
    """Test only integer counts or cards can be popped."""
    deck = ordered_deck()
    with pytest.raises(TypeError, match="integer or a Card"):
        deck.pop(count)
    assert deck.get_cards() == full_deck()


def test_deal_card_empty_deck():
    """Test dealing from an empty deck."""
    deck = Deck([])
    with pytest.raises(DeckUnderflow):
        deck.deal_card()


def test_pop_specific_card():
    """Test removing a card by identity once."""
    deck = ordered_deck()
    assert deck.pop(AS) == AS
    assert len(deck) == 51
    assert AS not in deck

    with pytest.raises(CardNotFound) as exc_info:
        deck.pop(AS)
    assert exc_info.value.card == AS
    assert len(deck) == 51


def test_card_not_found_is_value_error():
    """Test missing cards keep the ValueError container contract."""
    deck = Deck([])
    with pytest.raises(ValueError, match="A♠"):
        deck.remove_card(AS)


def test_pop_duplicate_removes_first():
    """Test only the bottom-most duplicate is removed."""
    deck = Deck([AS, KS, AS])
    deck.pop(AS)
    assert deck.get_cards() == [KS, AS]


def test_shuffle_preserves_cards():
    """Test shuffling keeps the same cards."""
    deck = ordered_deck(rng=random.Random(1))
    deck.shuffle()
    assert len(deck) == 52
    assert sorted(c.value for c in deck) == sorted(c.value for c in full_deck())
    assert deck.get_cards() != full_deck()


def test_shuffle_reaches_every_permutation():
    """Test 10,000 shuffles of 4 cards produce all 24 orders."""
    cards = [AS, KS, QH, AC]
    deck = Deck(cards, rng=random.Random(2024))
    seen = set()
    for _ in range(10_000):
        deck.shuffle()
        assert sorted(c.value for c in deck) == sorted(c.value for c in cards)
        seen.add(tuple(deck))
    assert seen == set(itertools.permutations(cards))


def test_shuffle_with_same_seed_is_reproducible():
    """Test injected random sources make shuffles deterministic."""
    deck1 = ordered_deck(rng=random.Random(42))
    deck2 = ordered_deck(rng=random.Random(42))
    deck1.shuffle()
    deck2.shuffle()
    assert deck1.get_cards() == deck2.get_cards()


def shuffle_two_default_decks():
    deck1, deck2 = Deck(), Deck()
    deck1.shuffle()
    deck2.shuffle()
    return deck1.get_cards(), deck2.get_cards()


def test_default_decks_share_seeded_source():
    """Test seeded default decks differ from each other but repeat per seed."""
    deck_module.reseed(5)
    first_run = shuffle_two_default_decks()
    assert first_run[0] != first_run[1]

    deck_module.reseed(5)
    assert shuffle_two_default_decks() == first_run


def test_default_source_seeded_from_config(monkeypatch):
    """Test the shared source takes its seed from the configuration."""
    monkeypatch.setenv("PLAYING_CARDS_ENV", "testing")
    monkeypatch.setattr(deck_module, "_default_rng", None)
    first_run = shuffle_two_default_decks()
    assert deck_module.default_rng() is deck_module.default_rng()

    monkeypatch.setattr(deck_module, "_default_rng", None)
    second_run = shuffle_two_default_decks()
    assert first_run == second_run
    assert first_run[0] != first_run[1]


def test_injected_rng_bypasses_shared_source():
    """Test decks given an rng leave the shared source alone."""
    deck_module.reseed(9)
    expected = random.Random(9).random()
    ordered_deck(rng=random.Random(1)).shuffle()
    assert deck_module.default_rng().random() == expected


def test_shuffling_empty_deck():
    """Test shuffling an empty deck."""
    deck = Deck([])
    deck.shuffle()
    assert deck.size == 0


def test_iteration_is_a_snapshot():
    """Test pops during iteration do not affect the running iterator."""
    deck = ordered_deck()
    seen = []
    for card in deck:
        seen.append(card)
        if len(deck) > 40:
            deck.pop()
    assert seen == full_deck()
    assert len(deck) == 40


def test_adding_duplicate_cards():
    """Test adding the same card multiple times."""
    deck = Deck([])
    deck.add_card(KS)
    deck.add_card(KS)
    assert deck.size == 2
    assert deck.get_cards().count(KS) == 2


def test_add_remove_multiple_cards():
    """Test adding and removing multiple cards."""
    deck = Deck([])
    cards_to_add = [Card(2, Suit.HEARTS), Card(3, Suit.CLUBS), Card(4, Suit.SPADES)]

    deck.add_cards(cards_to_add)
    assert deck.size == 3
    assert deck.pop() == [Card(4, Suit.SPADES)]
    deck.add_card(Card(4, Suit.SPADES))

    removed_cards = deck.remove_cards(cards_to_add)
    assert deck.size == 0
    assert removed_cards == cards_to_add


def test_remove_cards_is_all_or_nothing():
    """Test a missing card leaves the deck unchanged."""
    deck = ordered_deck()
    with pytest.raises(CardNotFound) as exc_info:
        deck.remove_cards([AS, KS, AS])
    assert exc_info.value.card == AS
    assert deck.get_cards() == full_deck()


def test_get_cards_returns_copy():
    """Test callers cannot mutate the deck through get_cards."""
    deck = ordered_deck()
    deck.get_cards().clear()
    assert len(deck) == 52


def test_clearing_deck():
    """Test clearing all cards from deck."""
    deck = ordered_deck()
    deck.clear()
    assert deck.size == 0
    assert deck.get_cards() == []


def test_deck_repr():
    """Test debug representation."""
    assert repr(ordered_deck()) == "Deck(size=52)"
