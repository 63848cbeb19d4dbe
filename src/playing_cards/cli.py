"""Command-line interface for shuffling and dealing cards."""

import logging
import random
import sys

import click

from playing_cards.config import get_config
from playing_cards.core.deck import Deck, ordered_deck
from playing_cards.core.exceptions import DeckUnderflow
from playing_cards.display import render_deck

logger = logging.getLogger(__name__)


def setup_logging(level: str) -> None:
    """Set up logging for the command-line tools."""
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout)
        ],
        force=True
    )


def make_deck(seed, shuffle: bool) -> Deck:
    """Build an ordered deck, shuffled unless asked otherwise.

    A seed of None shuffles from system entropy.
    """
    rng = random.Random(seed)
    deck = ordered_deck(rng=rng)
    if shuffle:
        deck.shuffle()
    return deck


@click.group()
@click.option('--config', 'config_name', default=None, help='Configuration to use')
@click.option('--verbose', is_flag=True, help='Log deck operations')
@click.pass_context
def cli(ctx, config_name, verbose):
    """Playing cards deck tools."""
    cfg = get_config(config_name)
    ctx.obj = cfg
    setup_logging('DEBUG' if verbose else cfg.LOG_LEVEL)
    logger.debug(f"Using {cfg.__name__}")


@cli.command()
@click.option('--shuffle', is_flag=True, help='Shuffle before showing')
@click.option('--seed', type=int, default=None, help='Seed for the shuffle')
@click.pass_obj
def show(cfg, shuffle, seed):
    """Print a full deck."""
    if seed is None:
        seed = cfg.SHUFFLE_SEED
    deck = make_deck(seed, shuffle)
    click.echo(render_deck(deck, per_row=cfg.CARDS_PER_ROW))


@cli.command()
@click.argument('count', type=int)
@click.option('--seed', type=int, default=None, help='Seed for the shuffle')
@click.option('--ordered', is_flag=True, help='Deal from an unshuffled deck')
@click.pass_obj
def deal(cfg, count, seed, ordered):
    """Deal COUNT cards from a shuffled deck."""
    if seed is None:
        seed = cfg.SHUFFLE_SEED
    deck = make_deck(seed, not ordered)
    try:
        cards = deck.pop(count)
    except (DeckUnderflow, ValueError) as e:
        raise click.ClickException(str(e))

    click.echo(render_deck(cards, per_row=cfg.CARDS_PER_ROW))
    click.echo(f"{len(deck)} cards left in deck")


if __name__ == '__main__':
    cli()
