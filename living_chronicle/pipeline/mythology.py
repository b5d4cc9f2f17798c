"""Mythological backstory for chronicles with no lore-worthy events."""

from living_chronicle.seeding import derive_seed, pick
from living_chronicle.templates import render_template

LEGENDS: tuple[str, ...] = (
    "In the time before memory, when the world was young and magic flowed like rivers through the "
    "land, the ancestors of {{{civ}}} were chosen by the Star-Touched Gods to be guardians of "
    "ancient secrets. They built their first cities from crystallized starlight and learned to "
    "speak the True Language that could command the elements themselves.",
    "Legend speaks of the Founding Prophecy of {{{civ}}}, inscribed on tablets of living stone by "
    "beings of pure light. It foretold that this people would become the bridge between the mortal "
    "realm and the divine planes, destined to face trials that would forge them into something "
    "beyond ordinary mortals.",
    "The First Kings of {{{civ}}} were said to be born from the union of celestial beings and "
    "mortal heroes, their bloodline carrying the power to reshape reality with their will alone. "
    "They ruled from floating palaces that moved with the constellations, and their voices could "
    "heal the wounded earth or call down storms of liquid starfire.",
    "Ancient texts tell of the Great Awakening, when the sleeping dragons beneath {{{civ}}} stirred "
    "and offered their wisdom to the people above. In exchange for protection of the sacred groves, "
    "these wyrms taught the mortals the arts of prophecy, alchemy, and the crafting of weapons that "
    "could cut through the fabric of time itself.",
    "The mythology of {{{civ}}} speaks of the Eternal Library, a repository of all knowledge that "
    "exists simultaneously in every moment of time. Their greatest scholars were said to walk its "
    "infinite halls, returning to the mortal world with eyes that burned with the fire of pure "
    "understanding.",
    "In the age of wonders, the people of {{{civ}}} discovered the Singing Stones, crystalline "
    "formations that resonated with the music of the spheres. Those who learned to harmonize with "
    "these stones could heal any wound, see across vast distances, and commune with the spirits "
    "of their ancestors.",
    "The creation myth of {{{civ}}} tells of the Weaver of Fates, a cosmic entity who spun their "
    "destiny from threads of liquid moonlight and crystallized dreams. The wisest among them "
    "learned to read these threads, becoming oracles whose prophecies shaped the course of "
    "history itself.",
)


def generate_mythology(civ_name: str) -> str:
    """Pick and render one founding legend for the civilization."""
    legend = pick(LEGENDS, derive_seed(0, 0.0, f"mythology:{civ_name}"))
    return render_template(legend, {"civ": civ_name})
