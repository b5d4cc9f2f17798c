"""Event narration: one paragraph of chronicle prose per lore-worthy event.

A paragraph is built from four parts:
  1. An opening: "In the year N, " for the first event of a chapter,
     otherwise a time transition.
  2. An epic context sentence chosen from the event's context family.
  3. The event's own description, lower-cased, after "The chronicles record
     that". When the event directly follows a rendered causal link the link
     already frames it, so the description stands as a sentence of its own.
  4. For events with significance above 2.0, a consequence sentence from the
     pool for the event type.

Context families are looked up in this order: exact (type, category) entry,
category entry, (type, None) entry, generic family. Every choice among
phrasings is seeded from the event itself, so the same event always reads
the same way.
"""

from __future__ import annotations

from living_chronicle.models import CausalLink, HistoricalEvent
from living_chronicle.seeding import derive_seed, pick
from living_chronicle.templates import render_template

CONSEQUENCE_THRESHOLD = 2.0
RECORD_PHRASE = "The chronicles record that"

TIME_TRANSITIONS: tuple[str, ...] = (
    "Soon after, ",
    "In time, ",
    "As the seasons passed, ",
    "Not long thereafter, ",
    "In those days, ",
    "Meanwhile, ",
)

# Keyed by (type, category); category None matches any category of that type.
TYPE_CONTEXTS: dict[tuple[str, str | None], tuple[str, ...]] = {
    ("Military", "Conflict"): (
        "As tensions reached a breaking point across the borderlands, the war drums of {{{civ}}} "
        "echoed through valleys and mountains. Ancient prophecies spoke of this moment, when steel "
        "would meet steel and the fate of nations would hang in the balance.",
        "The military commanders of {{{civ}}} had spent months preparing for this inevitable clash. "
        "Supply lines were secured, alliances tested, and weapons blessed by the gods of war.",
        "Diplomatic efforts had failed, and the people of {{{civ}}} knew that only through strength "
        "of arms could their sovereignty be preserved. Veterans sharpened their blades while young "
        "recruits said farewell to their families.",
        "The strategic importance of the contested territories could not be ignored by the military "
        "leadership of {{{civ}}}. Control of these lands would decide the balance of power for "
        "generations to come.",
        "Intelligence reports had warned the generals of {{{civ}}} that their enemies were "
        "mobilizing. Swift action was required to protect their people.",
    ),
    ("Military", "Coalition"): (
        "The diplomatic halls of {{{civ}}} buzzed with activity as envoys from distant lands arrived "
        "bearing proposals of mutual cooperation. Wise leaders knew that isolation meant vulnerability.",
        "Strategic necessity drove the leaders of {{{civ}}} to seek new partnerships. The changing "
        "political landscape demanded fresh alliances against common threats.",
        "After careful deliberation, the council of {{{civ}}} recognized that their goals aligned "
        "with those of potential allies. Shared interests in prosperity and security formed the "
        "foundation for lasting cooperation.",
        "The geopolitical situation had evolved to a point where {{{civ}}} could no longer stand "
        "alone. Pragmatic leadership recognized that strength came through unity.",
        "Intelligence networks had revealed opportunities for {{{civ}}} to forge beneficial "
        "relationships with other powers. The time was right to turn tentative contacts into "
        "formal agreements.",
    ),
    ("Cultural", None): (
        "A cultural renaissance was brewing in {{{civ}}} as artists, scholars, and craftsmen pushed "
        "the boundaries of their disciplines.",
        "The intellectual climate of {{{civ}}} had reached a tipping point where innovation and "
        "creativity flourished, enriched by exchanges with distant peoples.",
        "Social movements within {{{civ}}} were driving changes in artistic expression and cultural "
        "values. The old ways were being questioned and new traditions were taking root.",
        "Educational institutions in {{{civ}}} had begun producing a new generation of thinkers and "
        "creators. Knowledge was becoming more accessible to the common people.",
        "Cultural festivals and gatherings in {{{civ}}} had evolved into platforms for sharing "
        "revolutionary ideas and artistic innovations.",
    ),
    ("Religious", None): (
        "Religious fervor had been building in {{{civ}}} as spiritual leaders proclaimed visions and "
        "prophecies that resonated deeply with the faithful.",
        "Theological debates in {{{civ}}} had reached a crescendo as different interpretations of "
        "sacred texts divided communities.",
        "Pilgrims from distant lands had begun arriving in {{{civ}}}, drawn by reports of miraculous "
        "events and holy manifestations.",
        "The priesthood of {{{civ}}} had been experiencing unprecedented unity in their spiritual "
        "practices, leading to powerful collective ceremonies.",
        "Ancient religious sites in {{{civ}}} had become focal points of renewed devotion as "
        "forgotten aspects of the faith's origins came to light.",
    ),
    ("Economic", None): (
        "Economic pressures had been mounting in {{{civ}}} as trade routes shifted and resource "
        "demands evolved.",
        "Innovation in commerce and industry was transforming the economic landscape of {{{civ}}}. "
        "New methods of production and distribution were emerging.",
        "The merchant guilds of {{{civ}}} had been negotiating complex agreements that would "
        "reshape regional trade networks.",
        "Resource discoveries and technological advances in {{{civ}}} were creating unprecedented "
        "opportunities for wealth and expansion.",
        "Market fluctuations and trade disruptions had forced the economic leaders of {{{civ}}} to "
        "develop new strategies for maintaining prosperity.",
    ),
    ("Diplomatic", None): (
        "The diplomatic corps of {{{civ}}} had been engaged in delicate negotiations as regional "
        "tensions required careful management.",
        "Intelligence networks had provided {{{civ}}} with crucial information about shifting "
        "alliances and potential conflicts.",
        "Cultural exchanges and trade relationships had created opportunities for {{{civ}}} to "
        "strengthen ties with allies and neutral parties alike.",
        "The geopolitical landscape was evolving rapidly, and the diplomatic leadership of "
        "{{{civ}}} recognized the need for a forward-thinking foreign policy.",
        "Previous diplomatic successes had established {{{civ}}} as a trusted mediator in regional "
        "disputes.",
    ),
    ("Social", "Collapse"): (
        "Social tensions had been building in {{{civ}}} as traditional structures struggled to adapt "
        "to changing circumstances. The old order was showing signs of strain.",
        "Economic hardships and political uncertainties had created unrest among the population of "
        "{{{civ}}}. Calls for reform echoed through the streets.",
        "Natural disasters and external pressures had tested the resilience of {{{civ}}}'s social "
        "institutions. Communities were forced to adapt or face collapse.",
        "Generational conflicts and changing values had created deep divisions within {{{civ}}}. "
        "The social fabric was stretched to its breaking point.",
        "Leadership failures and institutional corruption had eroded public trust in {{{civ}}}. "
        "The people demanded accountability and change.",
    ),
    ("Social", None): (
        "Social reform movements in {{{civ}}} had gained momentum as citizens organized to improve "
        "living conditions for all.",
        "Community leaders in {{{civ}}} had been working to strengthen social bonds and build more "
        "inclusive institutions.",
        "Educational initiatives and social programs in {{{civ}}} were beginning to show results in "
        "quality of life and social cohesion.",
        "Cultural celebrations and civic ceremonies in {{{civ}}} had evolved to better reflect the "
        "values and aspirations of the people.",
        "Grassroots organizations in {{{civ}}} had emerged to address local challenges and create "
        "networks of mutual support.",
    ),
}

# Dramatic categories carry their own families whatever the event type.
CATEGORY_CONTEXTS: dict[str, tuple[str, ...]] = {
    "Hero": (
        "With {{{civ}}} facing military defeats and economic collapse, the people desperately "
        "needed strong leadership. From the ranks of the common soldiers emerged a figure who "
        "would change everything.",
        "The old rulers of {{{civ}}} had failed spectacularly, leaving the nation vulnerable to "
        "enemies and internal strife. It was then that an extraordinary individual stepped forward.",
        "Morale in {{{civ}}} had reached its lowest point after a series of devastating losses. "
        "The population was ready to follow anyone who could restore their pride.",
        "Political chaos gripped {{{civ}}} as competing factions tore the nation apart. In this "
        "power vacuum, a charismatic leader united the people under a single banner.",
    ),
    "Coalition": (
        "Intelligence reports revealed that {{{civ}}} had grown too powerful for any single nation "
        "to challenge alone. Former enemies met in secret and agreed to put aside their differences.",
        "Trade routes were being strangled and smaller nations faced annexation. Desperate "
        "ambassadors arrived with urgent proposals: unite now or fall one by one to {{{civ}}}.",
        "The neighbors of {{{civ}}} calculated the grim mathematics of war. Individually, they would "
        "be crushed; together, they might have a chance.",
        "Border skirmishes had escalated into full conquest campaigns. With {{{civ}}} claiming "
        "territory after territory, neighboring powers feared the birth of a superpower.",
    ),
    "HolyWar": (
        "Religious fervor in {{{civ}}} had reached a fever pitch as competing interpretations of "
        "divine will could no longer coexist peacefully. Sacred texts became battle cries.",
        "The faithful of {{{civ}}} believed they fought not just for territory or resources, but "
        "for the very soul of their civilization and the favor of the divine.",
        "Priests of {{{civ}}} blessed weapons and soldiers while prophets proclaimed that the gods "
        "themselves would judge the righteous through trial by combat.",
        "What began as theological debate in {{{civ}}} had escalated beyond the ability of mortal "
        "diplomacy to resolve.",
    ),
    "Betrayal": (
        "The alliance with {{{civ}}} had been profitable for years, with shared trade routes and "
        "mutual defense pacts. But behind closed doors, secret negotiations were already underway.",
        "The lands of {{{civ}}} held resources and territories that were simply too valuable to "
        "ignore. The temptation proved stronger than any oath of friendship.",
        "Economic pressures forced a terrible choice: honor the alliance with {{{civ}}} and face "
        "slow decline, or strike first and seize their assets.",
        "Intercepted messages between {{{civ}}} and their allies revealed plans that threatened "
        "vital interests. The decision was made to act before being betrayed first.",
    ),
    "Collapse": (
        "The mighty edifice of {{{civ}}} had been built over centuries, but even the grandest "
        "civilizations are not immune to the forces of decline and fall.",
        "Warning signs had appeared for years, but pride and denial blinded the leaders of "
        "{{{civ}}} to the approaching catastrophe.",
        "Like a great tree that appears strong until the final storm reveals its rotted roots, the "
        "foundations of {{{civ}}} crumbled beneath pressures too great to bear.",
        "The end came to {{{civ}}} not with dramatic battles, but with the slow unraveling of "
        "systems that had once seemed unshakeable.",
    ),
    "Golden": (
        "The stars aligned in perfect harmony as {{{civ}}} entered an era of unprecedented "
        "prosperity and achievement.",
        "Peace, prosperity, and progress converged in {{{civ}}} like rivers joining into a mighty "
        "flood of advancement.",
        "Future historians would mark this as the moment when {{{civ}}} reached the pinnacle of "
        "their civilization.",
        "Wise leadership, abundant resources, and favorable circumstances allowed {{{civ}}} to "
        "flourish beyond all expectations.",
    ),
    "Disaster": (
        "The forces of nature, indifferent to human ambition, prepared to remind {{{civ}}} of "
        "their place in the cosmic order.",
        "No amount of preparation could have readied {{{civ}}} for the catastrophe that was about "
        "to test their will to survive.",
        "The earth itself seemed to rebel as forces beyond mortal control unleashed devastation "
        "upon {{{civ}}} and all they had built.",
        "In moments like these, the fragility of civilization becomes starkly apparent, as "
        "{{{civ}}} faced powers that dwarf human understanding.",
    ),
    "Revolution": (
        "The seeds of change had been planted long ago in {{{civ}}}, and now they bloomed into a "
        "revolution that would transform everything.",
        "Old grievances and new ideas combined in {{{civ}}} like fire and gunpowder, reshaping the "
        "political landscape forever.",
        "The voice of the people, long suppressed, finally found its strength in {{{civ}}} as "
        "citizens rose up to claim their destiny.",
        "Revolutionary fervor swept through {{{civ}}} like wildfire, consuming the old order.",
    ),
    "Cascade": (
        "Like dominoes falling in sequence, the crisis in {{{civ}}} triggered a chain reaction that "
        "would spread far beyond their borders.",
        "When {{{civ}}} stumbled, the shockwaves were felt by every nation that had dealings with "
        "them.",
        "What began as a local problem in {{{civ}}} quickly revealed the fragile web of "
        "dependencies that linked all civilizations together.",
        "The collapse of one pillar of regional stability caused others to buckle and fall, as "
        "{{{civ}}} learned the true cost of interconnection.",
    ),
    "Spiritual": (
        "A great awakening was stirring in the hearts of the people of {{{civ}}} as religious "
        "revelations transformed their understanding of the divine.",
        "The boundary between the mortal realm and the sacred seemed to thin in {{{civ}}} as "
        "prophetic visions became increasingly common.",
        "Religious leaders in {{{civ}}} reported unprecedented experiences of divine communion, "
        "leading to a spiritual renaissance.",
        "The faithful of {{{civ}}} found themselves at the center of a spiritual transformation "
        "that would influence religious thought for generations.",
    ),
    "Discovery": (
        "The scholars and inventors of {{{civ}}} stood on the brink of a breakthrough that would "
        "revolutionize their understanding of the world.",
        "Years of research and experimentation in {{{civ}}} were about to bear fruit.",
        "The accumulated knowledge of {{{civ}}} had reached a critical mass where new insights "
        "became not just possible, but inevitable.",
        "Innovation and inspiration converged in {{{civ}}} as brilliant minds unlocked secrets "
        "hidden since the dawn of civilization.",
    ),
}

GENERIC_CONTEXTS: tuple[str, ...] = (
    "The winds of change were blowing through {{{civ}}} as circumstances aligned to create new "
    "possibilities and challenges.",
    "Historical forces had been building momentum in {{{civ}}}, setting the stage for developments "
    "that would influence the course of their future.",
    "The leadership of {{{civ}}} had been preparing for significant changes as they recognized the "
    "need to adapt to evolving circumstances.",
    "Social, economic, and political factors in {{{civ}}} had converged to create a moment that "
    "would require decisive action.",
    "The people of {{{civ}}} stood at a crossroads where their choices would determine the path "
    "forward for their civilization.",
)

CONSEQUENCES: dict[str, tuple[str, ...]] = {
    "Military": (
        "This military action shifted the balance of power in the region, affecting trade "
        "relationships and diplomatic standings with neighboring civilizations.",
        "The outcome influenced resource allocation and strategic planning for years to come, as "
        "casualties and territorial changes reshaped political landscapes.",
        "Victory or defeat in this conflict would determine the civilization's military reputation "
        "and influence future alliance negotiations.",
    ),
    "Economic": (
        "The economic impact rippled through trade networks, affecting prosperity and resource "
        "availability across multiple civilizations.",
        "Market fluctuations triggered by this event influenced diplomatic and military decisions "
        "as civilizations adapted to new economic realities.",
        "Wealth distribution patterns were permanently altered, creating new opportunities for some "
        "while challenging others.",
    ),
    "Diplomatic": (
        "This diplomatic development altered alliance structures and established new precedents "
        "for international relations.",
        "Trust and reputation effects from this diplomacy shaped interactions for generations, "
        "influencing future negotiations and partnerships.",
        "The agreement created ripple effects that would influence trade relationships, military "
        "cooperation, and cultural exchanges.",
    ),
    "Cultural": (
        "Cultural innovations spread beyond borders, influencing artistic traditions and "
        "intellectual developments in neighboring civilizations.",
        "The cultural shift created new forms of identity and social organization that would "
        "define the civilization's character for centuries.",
        "These achievements raised the civilization's prestige and attracted scholars, artists, "
        "and traders from distant lands.",
    ),
    "Religious": (
        "Religious changes influenced moral frameworks and social structures, affecting everything "
        "from law-making to international relations.",
        "Spiritual developments created new forms of unity or division within the population, "
        "influencing political stability.",
        "The religious transformation attracted pilgrims and missionaries, creating new cultural "
        "and economic connections with other civilizations.",
    ),
}

DEFAULT_CONSEQUENCES: tuple[str, ...] = (
    "The long-term effects of this event influenced the civilization's development and its "
    "relationships with neighbors.",
    "This development created ripple effects that would influence future decisions, "
    "opportunities, and challenges.",
    "The consequences became woven into the fabric of the civilization's ongoing story, shaping "
    "its character and destiny.",
)


def context_family(event: HistoricalEvent) -> tuple[str, ...]:
    return (
        TYPE_CONTEXTS.get((event.type, event.category))
        or CATEGORY_CONTEXTS.get(event.category)
        or TYPE_CONTEXTS.get((event.type, None))
        or GENERIC_CONTEXTS
    )


def opening(event: HistoricalEvent, is_chapter_opening: bool) -> str:
    if is_chapter_opening:
        return f"In the year {event.year}, "
    seed = derive_seed(event.year, event.significance, f"transition:{event.id}")
    return pick(TIME_TRANSITIONS, seed)


def epic_context(event: HistoricalEvent, civ_name: str) -> str:
    template = pick(context_family(event), derive_seed(event.year, event.significance, "context"))
    return render_template(template, {"civ": civ_name})


def consequence(event: HistoricalEvent) -> str:
    pool = CONSEQUENCES.get(event.type, DEFAULT_CONSEQUENCES)
    return pick(pool, derive_seed(event.year, event.significance, "consequence"))


def _sentence(text: str) -> str:
    text = text.strip()
    if text and text[-1] not in ".!?":
        text += "."
    return text


def record_clause(event: HistoricalEvent, framed_by_link: bool) -> str:
    """The event's own description, introduced unless a link already framed it."""
    description = _sentence(event.description or event.title)
    if not description:
        return ""
    if framed_by_link:
        return description[0].upper() + description[1:]
    return f"{RECORD_PHRASE} {description.lower()}"


def render_event(
    event: HistoricalEvent,
    is_chapter_opening: bool,
    civ_name: str,
    *,
    preceding_link: CausalLink | None = None,
) -> str:
    """Render one event as a paragraph of chronicle prose."""
    context = epic_context(event, civ_name)
    parts = [opening(event, is_chapter_opening) + context[0].lower() + context[1:]]

    framed = preceding_link is not None and bool(preceding_link.text)
    record = record_clause(event, framed)
    if record:
        parts.append(record)

    if event.significance > CONSEQUENCE_THRESHOLD:
        parts.append(consequence(event))
    return " ".join(parts)
