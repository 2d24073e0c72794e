from __future__ import annotations

from auradeck_backend.engine.attributes import derive_attributes
from auradeck_backend.engine.models import Arcana, CardSlot
from auradeck_backend.engine.prompts import STYLE_CLAUSE, compose_prompt, prompt_title


def test_major_title_has_no_suffix() -> None:
    slot = CardSlot(arcana=Arcana.MAJOR, canonical_index=0)
    assert prompt_title("The Fool", slot) == "The Fool"


def test_minor_title_carries_rank_and_suit() -> None:
    slot = CardSlot(arcana=Arcana.MINOR, canonical_index=11, suit="Cups", rank="Three")
    assert prompt_title("Three of Cups", slot) == "Minor Arcana 12 (Three of Cups)"


def test_prompt_includes_every_attribute() -> None:
    attributes = derive_attributes(200)
    slot = CardSlot(arcana=Arcana.MAJOR, canonical_index=17)
    prompt = compose_prompt("The Star", slot, attributes, "find my voice")

    assert prompt.startswith("The Star: ")
    assert f"{attributes.element} element" in prompt
    assert f"{attributes.tone} mood" in prompt
    assert f"hsl({attributes.hue}, {attributes.saturation}%, {attributes.lightness}%)" in prompt
    for sigil in attributes.sigils:
        assert sigil in prompt
    assert '"find my voice"' in prompt
    assert prompt.endswith(STYLE_CLAUSE + ".")
