"""Canonical card meanings keyed by card name.

Majors are listed individually. Minor meanings are composed from a rank theme
and a suit domain so every ``"<Rank> of <Suit>"`` name has an entry.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from auradeck_backend.utils.cards import RANKS, SUITS, minor_name


@dataclass(frozen=True)
class CardMeaning:
    keywords: tuple[str, ...]
    upright: str
    reversed: str


# fmt: off
MAJOR_MEANINGS: dict[str, CardMeaning] = {
    "The Fool": CardMeaning(
        ("beginnings", "spontaneity", "faith"),
        "A leap into the unknown with an open heart",
        "Hesitation at the edge, or a leap taken without looking",
    ),
    "The Magician": CardMeaning(
        ("will", "skill", "manifestation"),
        "Every tool is already on the table and ready to use",
        "Scattered talent and intentions that never reach the hand",
    ),
    "The High Priestess": CardMeaning(
        ("intuition", "mystery", "inner voice"),
        "Quiet knowing that arrives before the reasons do",
        "Ignoring the inner voice in favour of outside noise",
    ),
    "The Empress": CardMeaning(
        ("abundance", "nurture", "creativity"),
        "Growth that comes from care, patience and the senses",
        "Creative drought and care given everywhere but inward",
    ),
    "The Emperor": CardMeaning(
        ("structure", "authority", "stability"),
        "Building a frame strong enough to hold what you love",
        "Rigidity, control for its own sake, or a missing backbone",
    ),
    "The Hierophant": CardMeaning(
        ("tradition", "teaching", "belonging"),
        "Wisdom handed down through ritual and community",
        "Outgrowing inherited rules and writing your own",
    ),
    "The Lovers": CardMeaning(
        ("union", "choice", "alignment"),
        "A choice made from the heart that unites values and action",
        "Misaligned values and a choice postponed",
    ),
    "The Chariot": CardMeaning(
        ("momentum", "determination", "direction"),
        "Opposing forces harnessed and driven toward one goal",
        "Pulled in two directions with the reins slipping",
    ),
    "Strength": CardMeaning(
        ("courage", "compassion", "patience"),
        "Gentle power that tames what force cannot",
        "Self-doubt and raw instinct running unchecked",
    ),
    "The Hermit": CardMeaning(
        ("solitude", "reflection", "guidance"),
        "Withdrawing to find the lantern that lights the path",
        "Isolation that has stopped being useful",
    ),
    "Wheel of Fortune": CardMeaning(
        ("cycles", "fate", "turning point"),
        "The wheel turns and a new season begins",
        "Resisting change that is already under way",
    ),
    "Justice": CardMeaning(
        ("truth", "fairness", "accountability"),
        "Clear sight, honest scales and consequences accepted",
        "Avoided responsibility and a verdict tilted by bias",
    ),
    "The Hanged Man": CardMeaning(
        ("surrender", "pause", "new perspective"),
        "Letting go long enough to see the world upside down",
        "Stalling and sacrifice that leads nowhere",
    ),
    "Death": CardMeaning(
        ("endings", "transformation", "release"),
        "A chapter closes so that the next can begin",
        "Clinging to what has already ended",
    ),
    "Temperance": CardMeaning(
        ("balance", "moderation", "alchemy"),
        "Blending opposites patiently into something whole",
        "Excess and impatience upsetting the mixture",
    ),
    "The Devil": CardMeaning(
        ("attachment", "shadow", "desire"),
        "Naming the chains that are looser than they look",
        "Breaking free of a pattern that once felt binding",
    ),
    "The Tower": CardMeaning(
        ("upheaval", "revelation", "awakening"),
        "Sudden clarity that brings down a false structure",
        "Delaying a collapse that would set you free",
    ),
    "The Star": CardMeaning(
        ("hope", "renewal", "inspiration"),
        "Calm waters after the storm and a guiding light above",
        "Faith dimmed and inspiration waiting to be refilled",
    ),
    "The Moon": CardMeaning(
        ("dreams", "illusion", "subconscious"),
        "Walking by moonlight where instinct knows the way",
        "Confusion lifting as hidden fears come to the surface",
    ),
    "The Sun": CardMeaning(
        ("joy", "vitality", "clarity"),
        "Warmth, success and the freedom to be seen",
        "Joy clouded over or confidence tipping into ego",
    ),
    "Judgement": CardMeaning(
        ("calling", "reckoning", "rebirth"),
        "Answering the call to rise into a fuller self",
        "Self-criticism drowning out the call",
    ),
    "The World": CardMeaning(
        ("completion", "integration", "wholeness"),
        "A cycle fulfilled and every part in its place",
        "Loose ends that keep the circle from closing",
    ),
}

RANK_THEMES: dict[str, tuple[str, str, str]] = {
    "Ace": ("seed", "A fresh seed of {domain} offered freely", "A seed of {domain} left unplanted"),
    "Two": ("choice", "Weighing two paths of {domain}", "Indecision that keeps {domain} on hold"),
    "Three": ("growth", "First growth and shared {domain}", "{domain} stalled by a missing partner"),
    "Four": ("foundation", "A stable foundation for {domain}", "{domain} held so tightly it cannot move"),
    "Five": ("conflict", "Friction that tests {domain}", "Moving past the struggle over {domain}"),
    "Six": ("harmony", "Generosity and balance in {domain}", "An uneven exchange of {domain}"),
    "Seven": ("perseverance", "Holding your ground for {domain}", "Weariness in the defence of {domain}"),
    "Eight": ("movement", "Swift progress in {domain}", "{domain} scattered by haste"),
    "Nine": ("resilience", "Near the summit of {domain}", "Anxiety guarding {domain} too closely"),
    "Ten": ("culmination", "The full weight and harvest of {domain}", "A burden of {domain} ready to be set down"),
    "Page": ("curiosity", "A curious message about {domain}", "Immature handling of {domain}"),
    "Knight": ("pursuit", "Bold pursuit of {domain}", "Reckless chasing of {domain}"),
    "Queen": ("mastery within", "Inner mastery of {domain}", "{domain} turned inward into doubt"),
    "King": ("mastery without", "Leadership through {domain}", "Control of {domain} that hardens into rule"),
}

SUIT_DOMAINS: dict[str, tuple[str, str]] = {
    "Wands": ("passion", "creative fire"),
    "Cups": ("emotion", "feeling and connection"),
    "Swords": ("intellect", "thought and truth"),
    "Pentacles": ("material", "work and resources"),
}
# fmt: on


def _minor_meaning(suit: str, rank: str) -> CardMeaning:
    rank_keyword, upright, reversed_ = RANK_THEMES[rank]
    suit_keyword, domain = SUIT_DOMAINS[suit]
    upright_text = upright.format(domain=domain)
    reversed_text = reversed_.format(domain=domain)
    return CardMeaning(
        keywords=(rank_keyword, suit_keyword),
        upright=upright_text[0].upper() + upright_text[1:],
        reversed=reversed_text[0].upper() + reversed_text[1:],
    )


def build_meanings() -> Mapping[str, CardMeaning]:
    meanings = dict(MAJOR_MEANINGS)
    for suit in SUITS:
        for rank in RANKS:
            meanings[minor_name(suit, rank)] = _minor_meaning(suit, rank)
    return MappingProxyType(meanings)


CANONICAL_MEANINGS = build_meanings()
