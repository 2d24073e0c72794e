from __future__ import annotations

from auradeck_backend.engine.models import Arcana, CardAttributes, CardSlot


STYLE_CLAUSE = (
    "ornate full-bleed tarot illustration, luminous aura gradients, "
    "fine gold linework, symmetrical composition, no text or lettering"
)


def prompt_title(name: str, slot: CardSlot) -> str:
    if slot.arcana is Arcana.MAJOR:
        return name
    return f"Minor Arcana {slot.canonical_index + 1:02d} ({slot.rank} of {slot.suit})"


def compose_prompt(
    name: str,
    slot: CardSlot,
    attributes: CardAttributes,
    intention: str,
) -> str:
    hue, saturation, lightness = attributes.hsl
    return (
        f"{prompt_title(name, slot)}: {attributes.element} element, "
        f"{attributes.tone} mood, palette hsl({hue}, {saturation}%, {lightness}%), "
        f"sigils of {', '.join(attributes.sigils)}, "
        f"channeling the intention \"{intention}\". {STYLE_CLAUSE}."
    )
