"""
Tag rule tables for Patchnotes.

All heuristic lookup tables used by tag cleaning, exclusion and casing
reconciliation live in a single immutable TagRules value. It is built once
per process and passed explicitly to the components that need it.
"""

from functools import cached_property
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


DEFAULT_META_QUALIFIERS = [
    "[with weekly restarts]",
    "[with weekly maintenance]",
    "[with weekly realm maintenance]",
    "[with weekly maintenance in each region]",
]

DEFAULT_SUFFIX_REPAIRS = {
    "Tuskar": "Tuskarr",
}

DEFAULT_ARTICLES = ["The ", "THE "]

DEFAULT_DIFFICULTY_SUFFIXES = [
    " (Raidfinder)",
    " (Normal)",
    " (Heroic)",
    " (Mythic)",
]

DEFAULT_QUOTE_REPLACEMENTS = {
    "â€™": "'",
}

DEFAULT_ALIASES = {
    "Aberrus the Shadowed Crucible": ["Aberrus"],
    "Aberrus, the Shadowed Crucible": ["Aberrus"],
    "Amirdrassil the Dreams Hope": ["Amirdrassil"],
    "Amirdrassil, the Dreams Hope": ["Amirdrassil"],
    "Alegeth'ar Academy": ["Algeth'ar Academy"],
    "Alegeth'ar Acadmey": ["Algeth'ar Academy"],
    "Asaad, Caliph of Zephyrs": ["Asaad"],
    "Azure Vaults": ["Azure Vault"],
    "Brakenhide Hollow": ["Brackenhide Hollow"],
    "Chargath": ["Chargath, Bane of Scales"],
    "Class": ["Classes"],
    "Discipline, Shadow": ["Discipline", "Shadow"],
    "Dungeons and Raids": ["Dungeons and Raids"],  # don't split on "and"
    "Dungeons": ["Dungeons and Raids"],
    "Enhancement, Elemental": ["Enhancement", "Elemental"],
    "Erkheart Stormvein": ["Erkhart Stormvein"],
    "Hackclaw's War-Band": ["Hackclaw's Warband"],
    "Kassara": ["Kazzara"],
    "Mining/Herbalism": ["Mining", "Herbalism"],
    "Ner'Zul": ["Ner'zhul"],
    "Player versus Player": ["PvP"],
    "Rashok": ["Rashok, the Elder"],
    "Sentinel Talondrus": ["Sentinel Talondras"],
    "Thaldrazsus": ["Thaldraszus"],
    "Uldaman, Legacy of Tyr": ["Uldaman: Legacy of Tyr"],
    "Wrath of the Lich King": ["WotLK"],
    # Metadata lines that end up classified as tags
    "Developers' notes": [],
    "Developers' Notes": [],
}

DEFAULT_AND_SEPARATORS = [" and ", " AND "]

DEFAULT_CASING_OVERRIDES = {
    "A SINGLE WING": "A Single Wing",
    "BLACKSMITHING": "Blacksmithing",
    "CHALLENGE COURSE": "Challenge Course",
    "CHROMIE TIME": "Chromie Time",
    "COOKING": "Cooking",
    "CROSS-REALM TRADING": "Cross-Realm Trading",
    "EDIT MODE": "Edit Mode",
    "FREEHOLD": "Freehold",
    "NEW CAMPAIGN CHAPTERS": "Campaign",
    "NEW RECIPES": "New Recipes",
    "NO LIMITS": "No Limits",
    "OPTIONS": "Options",
    "PING SYSTEM": "Ping System",
    "PLAYER VERSUS PLAYER": "PvP",
    "PUBLIC OBJECTIVES": "Public Objectives",
    "RATED SOLO SHUFFLE": "Solo Shuffle",
    "REAL TIME CHAT MODERATION": "Real Time Chat Moderation",
    "REFORGING TYR PART 3": "Reforging Tyr Part 3",
    "RESEARCHERS UNDER FIRE PUBLIC EVENT": "Researchers Under Fire",
    "SNIFFENSEEKING": "Sniffenseeking",
    "TAILORING": "Tailoring",
    "TRACKING APPEARANCES": "Tracking Appearances",
    "ULDAMAN": "Uldaman",
    "USER INTERFACE": "User Interface",
    "ACCESSIBILITY": "Accessibility",
    "VORTEX PINNACLE": "Vortex Pinnacle",
    "UPGRADE SYSTEM": "Upgrade System",
    "TALENTS UI": "Talents UI",
    "MACROS": "Macros",
    "MISFIT DRAGONS": "Misfit Dragons",
    "GREAT VAULT": "Great Vault",
    "REFORGING TYR PART 4": "Reforging Tyr",
    "AMIRDRASSIL, THE DREAMS HOPE RAID REWARDS": "Amirdrassil",
    "AMIRDRASSIL, THE DREAMS HOPE": "Amirdrassil",
    "AMIRDRASSIL THE DREAMS HOPE": "Amirdrassil",
    "REVIVAL CATALYST": "Revival Catalyst",
    "DRAGONFLIGHT EPILOGUE QUESTS": "Quests",
}

# Changes for other game modes are published alongside retail ones
DEFAULT_EXCLUDED_TAGS = ["WotLK", "Classic"]


class TagRules(BaseModel):
    """
    Immutable set of tag heuristics.

    Every table defaults to the historical values; individual tables can be
    replaced from the ``tags`` section of the configuration file.
    """

    model_config = ConfigDict(frozen=True)

    meta_qualifiers: List[str] = Field(
        default_factory=lambda: list(DEFAULT_META_QUALIFIERS),
        description="Trailing qualifiers moved from the tag into the change text"
    )

    suffix_repairs: Dict[str, str] = Field(
        default_factory=lambda: dict(DEFAULT_SUFFIX_REPAIRS),
        description="Misspelled word endings and their repaired form"
    )

    articles: List[str] = Field(
        default_factory=lambda: list(DEFAULT_ARTICLES),
        description="Leading articles stripped from tags"
    )

    difficulty_suffixes: List[str] = Field(
        default_factory=lambda: list(DEFAULT_DIFFICULTY_SUFFIXES),
        description="Difficulty or mode suffixes stripped from tags"
    )

    quote_replacements: Dict[str, str] = Field(
        default_factory=lambda: dict(DEFAULT_QUOTE_REPLACEMENTS),
        description="Mis-encoded quote sequences and their replacement"
    )

    aliases: Dict[str, List[str]] = Field(
        default_factory=lambda: {k: list(v) for k, v in DEFAULT_ALIASES.items()},
        description="Cleaned heading text mapped to zero, one or two canonical tags"
    )

    and_separators: List[str] = Field(
        default_factory=lambda: list(DEFAULT_AND_SEPARATORS),
        description="Separators that split a heading into two tags"
    )

    casing_overrides: Dict[str, str] = Field(
        default_factory=lambda: dict(DEFAULT_CASING_OVERRIDES),
        description="Upper-case tag mapped to its canonical spelling; empty drops the tag"
    )

    excluded_tags: List[str] = Field(
        default_factory=lambda: list(DEFAULT_EXCLUDED_TAGS),
        description="Substrings marking tag paths whose changes are skipped"
    )

    @cached_property
    def alias_index(self) -> Dict[str, List[str]]:
        """Alias table keyed by upper-cased heading text."""
        return {key.upper(): value for key, value in self.aliases.items()}

    def lookup_alias(self, text: str) -> Optional[List[str]]:
        """Find the canonical tags for ``text``, ignoring case."""
        replacements = self.alias_index.get(text.upper())
        return list(replacements) if replacements is not None else None

    def is_excluded(self, tags: List[str]) -> bool:
        """Whether any tag contains one of the excluded substrings."""
        return any(marker in tag for tag in tags for marker in self.excluded_tags)

    @classmethod
    def from_config(cls, config: Any) -> "TagRules":
        """
        Build the rules from the ``tags`` section of a ConfigManager.

        Args:
            config: Configuration manager providing ``get_section``

        Returns:
            TagRules with configured tables replacing the defaults
        """
        section = config.get_section("tags") or {}
        return cls(**{key: value for key, value in section.items() if key in cls.model_fields})
