"""A small deck of playing cards that can be shuffled and dealt from."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

SUITS = ("Hearts", "Spades", "Diamonds")
VALUES = ("Ace", "Two", "Three")


def _standard_cards() -> list[str]:
    return [f"{value} of {suit}" for suit in SUITS for value in VALUES]


@dataclass
class Deck:
    """An ordered list of card names; dealing takes from the end."""

    cards: list[str] = field(default_factory=_standard_cards)

    def shuffle(self, rng: random.Random | None = None) -> None:
        """Shuffle the cards in place."""
        (rng or random).shuffle(self.cards)

    def deal(self, num_cards: int) -> list[str]:
        """Remove and return the last ``num_cards`` cards."""
        if num_cards < 0 or num_cards > len(self.cards):
            raise ValueError(
                f"cannot deal {num_cards} cards from a deck of {len(self.cards)}"
            )
        split = len(self.cards) - num_cards
        hand = self.cards[split:]
        del self.cards[split:]
        return hand


def _pretty_cards(cards: list[str], indent: str = "") -> str:
    if not cards:
        return "[]"
    body = "".join(f'{indent}    "{card}",\n' for card in cards)
    return f"[\n{body}{indent}]"


def main(argv: list[str] | None = None) -> int:
    deck = Deck()
    deck.shuffle()
    print(f"Heres your deck: Deck {{\n    cards: {_pretty_cards(deck.cards, '    ')},\n}}")
    hand = deck.deal(3)
    print(f"Heres your hand: {_pretty_cards(hand)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())