"""Partitioning of ranked services into labelled display sections."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

from ..domain import Group, RankedService

logger = logging.getLogger(__name__)

SEARCH_RESULTS = "SearchResults"

# Declaration order is the display order outside of search mode.
SECTION_ORDER: Tuple[str, ...] = (
    "All",
    "Rajshahi Police",
    "Rajshahi Fire",
    "Rajshahi Ambulance",
    "Rajshahi Hospital",
    "Rajshahi Blood",
    "Rajshahi Bank",
    "Rajshahi Education",
    "Govt.",
    "Electricity",
    "Help",
    "Fire",
    "NGO",
    "Travel",
    "Utility",
)

CATEGORY_ALIASES: Dict[str, str] = {
    "Rajshahi Clinic": "Rajshahi Hospital",
    "Rajshahi Health": "Rajshahi Hospital",
    "Rajshahi Private": "Rajshahi Hospital",
}

CATCH_ALL_SECTIONS: Dict[str, str] = {
    "Rajshahi Govt.": "Govt.",
    "Utility": "Utility",
}

# Resolution stages, tried first to last.
CATEGORY_RESOLUTION: Tuple[Tuple[str, Dict[str, str]], ...] = (
    ("alias", CATEGORY_ALIASES),
    ("direct", {section: section for section in SECTION_ORDER}),
    ("catch_all", CATCH_ALL_SECTIONS),
)

SECTION_TITLES: Dict[str, str] = {
    "All": "জাতীয় জরুরি হটলাইন ",
    "Fire": "জাতীয় ফায়ার সার্ভিস সেবা",
    "Govt.": "অন্যান্য সরকারি সেবা",
    "Help": "নারী ও শিশু সহায়তা ও আইনি পরামর্শ",
    "Electricity": "বিদ্যুৎ সেবা",
    "Utility": "পাবলিক ইউটিলিটি (গ্যাস/পানি)",
    "Rajshahi Police": "রাজশাহী পুলিশ (থানা, ওসি ও র‍্যাব)",
    "Rajshahi Fire": "রাজশাহী ফায়ার সার্ভিস",
    "Rajshahi Ambulance": "রাজশাহী অ্যাম্বুলেন্স সার্ভিস",
    "Rajshahi Hospital": "রাজশাহী স্বাস্থ্যসেবা, হাসপাতাল ও ক্লিনিক",
    "Rajshahi Blood": "রাজশাহী ব্লাড ব্যাংক",
    "Rajshahi Bank": "রাজশাহী ব্যাংক (প্রধান শাখা)",
    "Rajshahi Education": "রাজশাহী শিক্ষা বোর্ড ও প্রতিষ্ঠান",
    "Travel": "ভ্রমণ সহায়তা (রেলওয়ে)",
    "NGO": "এনজিও সহায়তা ",
}

SEARCH_TITLE = "সার্চ রেজাল্ট ({count}টি)"
NEAREST_FIRST_SUFFIX = " (নিকটতম সার্ভিস সবার আগে)"

# Applied in order to the category with the "Rajshahi " prefix removed.
BADGE_REPLACEMENTS: Tuple[Tuple[str, str], ...] = (
    ("Police", "পুলিশ"),
    ("Fire", "ফায়ার"),
    ("Ambulance", "অ্যাম্বুলেন্স"),
    ("Hospital", "হাসপাতাল"),
    ("Clinic", "ক্লিনিক"),
    ("Blood", "ব্লাড"),
    ("Bank", "ব্যাংক"),
    ("Education", "শিক্ষা"),
    ("Govt.", "সরকারি"),
    ("Utility", "ইউটিলিটি"),
)


@dataclass
class GroupingResult:
    """Grouped sections plus the ids of entries no section accepted."""

    groups: List[Group]
    dropped_ids: List[int] = field(default_factory=list)


def resolve_section(category: str) -> Optional[str]:
    """Return the display section for a raw category, or None if unmapped."""
    for _stage, table in CATEGORY_RESOLUTION:
        section = table.get(category)
        if section is not None:
            return section
    return None


def section_title(group: Group) -> str:
    """Fixed-string display title for a group."""
    if group.category == SEARCH_RESULTS:
        title = SEARCH_TITLE.format(count=len(group.services))
        if group.nearest_first:
            title += NEAREST_FIRST_SUFFIX
        return title
    return SECTION_TITLES.get(group.category, group.category)


def badge_text(category: str) -> str:
    """Short Bangla badge shown on a card."""
    text = category.replace("Rajshahi ", "")
    for english, bangla in BADGE_REPLACEMENTS:
        text = text.replace(english, bangla)
    return text


def distance_label(ranked: RankedService) -> Optional[str]:
    """``(3.2 km)`` for a known distance, None otherwise."""
    if not ranked.has_distance:
        return None
    return f"({ranked.distance:.1f} km)"


class CategoryGrouper:
    """Groups ranked services into sections for rendering."""

    def group(
        self,
        ranked_services: Sequence[RankedService],
        search_active: bool,
    ) -> GroupingResult:
        """
        Partition ranked services.

        In search mode every service lands in a single ``SearchResults`` group
        in ranking order. Otherwise services are placed by `resolve_section`
        and sections follow `SECTION_ORDER`; entries whose category resolves
        to nothing are dropped and reported in ``dropped_ids``.
        """
        if search_active:
            if not ranked_services:
                return GroupingResult(groups=[])
            nearest_first = ranked_services[0].has_distance
            return GroupingResult(
                groups=[Group(SEARCH_RESULTS, list(ranked_services), nearest_first)]
            )

        sections: Dict[str, List[RankedService]] = {name: [] for name in SECTION_ORDER}
        dropped: List[int] = []

        for ranked in ranked_services:
            section = resolve_section(ranked.service.category)
            if section is None:
                dropped.append(ranked.service.id)
                continue
            sections[section].append(ranked)

        if dropped:
            logger.debug("Dropped %s services with unmapped categories: %s", len(dropped), dropped)

        groups = [
            Group(name, members)
            for name, members in sections.items()
            if members
        ]
        return GroupingResult(groups=groups, dropped_ids=dropped)
