"""
The fixed roster of five parties and the matching of model output onto it.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Mapping, Optional, Sequence

from nepal_pulse.models import Language, Party

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RosterEntry:
    name: str
    name_np: str
    full_name: str
    full_name_np: str
    symbol: str
    color: str
    image_url: str

    def localized_name(self, language: Language) -> str:
        return self.name_np if language == Language.NP else self.name

    def localized_full_name(self, language: Language) -> str:
        return self.full_name_np if language == Language.NP else self.full_name


ROSTER: Sequence[RosterEntry] = (
    RosterEntry(
        name="Nepali Congress",
        name_np="नेपाली कांग्रेस",
        full_name="Nepali Congress",
        full_name_np="नेपाली कांग्रेस",
        symbol="🌳",
        color="bg-green-600",
        image_url="https://picsum.photos/id/1018/400/300",
    ),
    RosterEntry(
        name="CPN (UML)",
        name_np="नेकपा (एमाले)",
        full_name="Communist Party of Nepal (Unified Marxist–Leninist)",
        full_name_np="नेपाल कम्युनिष्ट पार्टी (एकीकृत मार्क्सवादी-लेनिनवादी)",
        symbol="☀️",
        color="bg-red-600",
        image_url="https://picsum.photos/id/1015/400/300",
    ),
    RosterEntry(
        name="Maoist Centre",
        name_np="माओवादी केन्द्र",
        full_name="CPN (Maoist Centre)",
        full_name_np="नेकपा (माओवादी केन्द्र)",
        symbol="☭",
        color="bg-red-800",
        image_url="https://picsum.photos/id/1033/400/300",
    ),
    RosterEntry(
        name="RSP",
        name_np="रास्वपा",
        full_name="Rastriya Swatantra Party",
        full_name_np="राष्ट्रिय स्वतन्त्र पार्टी",
        symbol="🔔",
        color="bg-blue-500",
        image_url="https://picsum.photos/id/1025/400/300",
    ),
    RosterEntry(
        name="RPP",
        name_np="राप्रपा",
        full_name="Rastriya Prajatantra Party",
        full_name_np="राष्ट्रिय प्रजातन्त्र पार्टी",
        symbol="🚜",
        color="bg-yellow-500",
        image_url="https://picsum.photos/id/1040/400/300",
    ),
)


def roster_names() -> List[str]:
    return [entry.name for entry in ROSTER]


def match_insight_key(name: str, keys: Sequence[str]) -> Optional[str]:
    """
    Return the first key that contains ``name`` or is contained in it.

    Containment is ambiguous when names share a prefix ("RSP" vs "RSP Nepal");
    the first key in text order wins.
    """
    for key in keys:
        if name in key or key in name:
            return key
    return None


def build_parties(
    language: Language,
    insights: Mapping[str, Mapping[str, str]],
    *,
    default_description: str,
    default_stance: str,
    leader: str,
) -> List[Party]:
    """
    Lay ``insights`` over the roster. Always returns exactly one Party per
    roster entry; unmatched entries get the supplied placeholders and extra
    names in ``insights`` are ignored.
    """
    keys = list(insights.keys())
    parties: List[Party] = []
    for index, entry in enumerate(ROSTER):
        key = match_insight_key(entry.name, keys)
        if key is None:
            logger.debug("No insight matched roster entry %s", entry.name)
            description, stance = default_description, default_stance
        else:
            description = insights[key].get("description", "")
            stance = insights[key].get("stance", "")
        parties.append(
            Party(
                id=f"party-{index}",
                name=entry.localized_name(language),
                full_name=entry.localized_full_name(language),
                leader=leader,
                symbol=entry.symbol,
                description=description,
                recent_stance=stance,
                color=entry.color,
                image_url=entry.image_url,
            )
        )
    return parties

