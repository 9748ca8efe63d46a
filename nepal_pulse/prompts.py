"""
Prompt templates sent upstream by the relay, one per content type.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from nepal_pulse.models import ContentType, Language
from nepal_pulse.roster import roster_names


@dataclass(frozen=True)
class PromptSpec:
    contents: str
    use_search: bool


def _news_prompt(language: Language) -> PromptSpec:
    directive = (
        "IMPORTANT: Provide the output strictly in Nepali language (Devanagari script). "
        "Translate all headlines, summaries, and the hot topic."
        if language == Language.NP
        else "Provide the output in English."
    )
    contents = f"""Find the absolute latest news (last 24-48 hours) regarding the political situation and upcoming elections in Nepal.
Focus on major parties ({", ".join(roster_names())}).
Also, identify ONE major "Hot Topic" or controversy currently trending.

{directive}

Format the output strictly as follows:
HOT_TOPIC: [The hot topic summary]
---
HEADLINE: [News Title 1]
SUMMARY: [Brief summary of news 1]
SOURCE: [Source Name]
---
HEADLINE: [News Title 2]
SUMMARY: [Brief summary of news 2]
SOURCE: [Source Name]

(Provide 5 news items)"""
    return PromptSpec(contents=contents, use_search=True)


def _party_prompt(language: Language) -> PromptSpec:
    directive = (
        "Write the DESC and STANCE in Nepali language (Devanagari script)."
        if language == Language.NP
        else "Write the DESC and STANCE in English."
    )
    contents = f"""For each of these political parties in Nepal: {", ".join(roster_names())}.
Provide a 1-sentence description of their core ideology and a 1-sentence summary of their very latest stance or activity regarding the upcoming election.

{directive}

Format:
PARTY: [Name in English]
DESC: [Ideology]
STANCE: [Latest Stance]
---"""
    return PromptSpec(contents=contents, use_search=True)


def _horoscope_prompt(language: Language, today: date) -> PromptSpec:
    directive = (
        "Provide the names of the signs in Nepali (Mesh, Brish, Mithun, Karkat, Simha, Kanya, Tula, "
        "Brishchik, Dhanu, Makar, Kumbha, Meen) and the prediction in Nepali."
        if language == Language.NP
        else "Provide the names in English (Aries, Taurus, etc.) and prediction in English."
    )
    contents = f"""Generate a brief daily horoscope for today ({today.strftime("%a %b %d %Y")}) for all 12 zodiac signs.
{directive}

Format strictly as:
SIGN: [Sign Name]
PREDICTION: [One sentence prediction]
ICON: [Emoji]
---"""
    return PromptSpec(contents=contents, use_search=False)


def build_prompt(content_type: ContentType, language: Language, today: Optional[date] = None) -> PromptSpec:
    if content_type == ContentType.NEWS:
        return _news_prompt(language)
    if content_type == ContentType.PARTIES:
        return _party_prompt(language)
    return _horoscope_prompt(language, today or date.today())
