"""
Localized substitute content for every failure path of the resolver, plus the
demo feed served when no relay is deployed.
"""
from __future__ import annotations

from datetime import datetime
from typing import Dict, List

from nepal_pulse.models import HoroscopeItem, Language, NewsItem, Party
from nepal_pulse.roster import build_parties

STRINGS: Dict[Language, Dict[str, str]] = {
    Language.EN: {
        "default_hot_topic": "Election Updates",
        "offline_hot_topic": "Connection Issue",
        "error_hot_topic": "Service Unavailable",
        "mock_hot_topic": "Parties finalize candidate lists ahead of the polls",
        "no_internet_title": "No Internet Connection",
        "no_internet_summary": "Unable to fetch live news at this moment. Please check your connection.",
        "server_error_title": "Service Unavailable",
        "server_error_summary": "The news service is temporarily unavailable. Please try again later.",
        "system_source": "System",
        "party_default_description": "Major political force in Nepal.",
        "party_default_stance": "Preparing for upcoming elections.",
        "party_offline_description": "Details unavailable offline.",
        "party_offline_stance": "Check back later.",
        "leader_pending": "Loading...",
        "leader_unknown": "Unknown",
    },
    Language.NP: {
        "default_hot_topic": "निर्वाचन अपडेट",
        "offline_hot_topic": "जडान समस्या",
        "error_hot_topic": "सेवा उपलब्ध छैन",
        "mock_hot_topic": "निर्वाचनअघि दलहरूले उम्मेदवार सूची टुंगो लगाउँदै",
        "no_internet_title": "इन्टरनेट जडान छैन",
        "no_internet_summary": "यस समयमा प्रत्यक्ष समाचार ल्याउन असमर्थ। कृपया आफ्नो इन्टरनेट जाँच गर्नुहोस्।",
        "server_error_title": "सेवा उपलब्ध छैन",
        "server_error_summary": "समाचार सेवा अस्थायी रूपमा उपलब्ध छैन। कृपया पछि पुन: प्रयास गर्नुहोस्।",
        "system_source": "प्रणाली",
        "party_default_description": "नेपालको प्रमुख राजनीतिक शक्ति।",
        "party_default_stance": "आगामी निर्वाचनको तयारी गर्दै।",
        "party_offline_description": "विवरण उपलब्ध छैन।",
        "party_offline_stance": "पछि पुन: जाँच गर्नुहोस्।",
        "leader_pending": "लोड हुँदै...",
        "leader_unknown": "अज्ञात",
    },
}

_MOCK_NEWS: Dict[Language, List[Dict[str, str]]] = {
    Language.EN: [
        {
            "title": "Election Commission publishes final voter roll",
            "summary": "The commission says the updated roll adds first-time voters across all seven provinces.",
            "source": "Demo Desk",
        },
        {
            "title": "Major parties open talks on electoral alliances",
            "summary": "Leaders met in Kathmandu to discuss seat-sharing arrangements for the upcoming polls.",
            "source": "Demo Desk",
        },
        {
            "title": "Code of conduct takes effect nationwide",
            "summary": "Government announcements of new projects are restricted until voting concludes.",
            "source": "Demo Desk",
        },
    ],
    Language.NP: [
        {
            "title": "निर्वाचन आयोगद्वारा अन्तिम मतदाता नामावली प्रकाशित",
            "summary": "अद्यावधिक नामावलीमा सातै प्रदेशका पहिलो पटकका मतदाता थपिएको आयोगले जनाएको छ।",
            "source": "डेमो डेस्क",
        },
        {
            "title": "प्रमुख दलहरूबीच चुनावी गठबन्धनबारे वार्ता सुरु",
            "summary": "आगामी निर्वाचनका लागि सिट बाँडफाँटबारे काठमाडौंमा नेताहरूको भेटवार्ता भयो।",
            "source": "डेमो डेस्क",
        },
        {
            "title": "देशभर आचारसंहिता लागू",
            "summary": "मतदान नसकिएसम्म सरकारले नयाँ आयोजना घोषणा गर्न पाउने छैन।",
            "source": "डेमो डेस्क",
        },
    ],
}

_MOCK_PARTIES: Dict[Language, Dict[str, Dict[str, str]]] = {
    Language.EN: {
        "Nepali Congress": {
            "description": "Centrist social-democratic party rooted in the 1950s democracy movement.",
            "stance": "Negotiating alliance terms while fielding candidates nationwide.",
        },
        "CPN (UML)": {
            "description": "Left party built on the doctrine of People's Multiparty Democracy.",
            "stance": "Campaigning on infrastructure delivery and national pride projects.",
        },
        "Maoist Centre": {
            "description": "Left party that entered peaceful politics after the 2006 peace accord.",
            "stance": "Pushing for a broad left alliance ahead of the vote.",
        },
        "RSP": {
            "description": "Anti-establishment party focused on good governance and anti-corruption.",
            "stance": "Targeting young urban voters with a reform agenda.",
        },
        "RPP": {
            "description": "Conservative party advocating a constitutional monarchy and Hindu state.",
            "stance": "Rallying support for restoring the monarchy.",
        },
    },
    Language.NP: {
        "Nepali Congress": {
            "description": "प्रजातान्त्रिक आन्दोलनमा जरा गाडेको मध्यमार्गी समाजवादी दल।",
            "stance": "देशभर उम्मेदवार उठाउँदै गठबन्धनका सर्तबारे वार्ता गर्दै।",
        },
        "CPN (UML)": {
            "description": "जनताको बहुदलीय जनवादको सिद्धान्तमा आधारित वामपन्थी दल।",
            "stance": "पूर्वाधार र राष्ट्रिय गौरवका आयोजनाको एजेन्डामा प्रचार गर्दै।",
        },
        "Maoist Centre": {
            "description": "शान्ति सम्झौतापछि शान्तिपूर्ण राजनीतिमा आएको वामपन्थी दल।",
            "stance": "निर्वाचनअघि व्यापक वाम गठबन्धनका लागि दबाब दिँदै।",
        },
        "RSP": {
            "description": "सुशासन र भ्रष्टाचार विरोधमा केन्द्रित वैकल्पिक दल।",
            "stance": "सुधारको एजेन्डासहित सहरी युवा मतदातालाई लक्षित गर्दै।",
        },
        "RPP": {
            "description": "संवैधानिक राजतन्त्र र हिन्दु राष्ट्रको पक्षधर रुढिवादी दल।",
            "stance": "राजतन्त्र पुनर्स्थापनाका लागि समर्थन जुटाउँदै।",
        },
    },
}

_ZODIAC_EN = (
    "Aries", "Taurus", "Gemini", "Cancer", "Leo", "Virgo",
    "Libra", "Scorpio", "Sagittarius", "Capricorn", "Aquarius", "Pisces",
)
_ZODIAC_NP = (
    "मेष", "वृष", "मिथुन", "कर्कट", "सिंह", "कन्या",
    "तुला", "वृश्चिक", "धनु", "मकर", "कुम्भ", "मीन",
)
_ZODIAC_ICONS = ("♈", "♉", "♊", "♋", "♌", "♍", "♎", "♏", "♐", "♑", "♒", "♓")

_MOCK_PREDICTIONS: Dict[Language, tuple] = {
    Language.EN: (
        "A steady day; finish what you started before taking on anything new.",
        "Good news from a friend lifts your mood this afternoon.",
        "Take time to listen before you decide on money matters.",
        "Family support helps you through a busy schedule.",
    ),
    Language.NP: (
        "स्थिर दिन; नयाँ काम थाल्नुअघि सुरु गरेका काम सक्नुहोस्।",
        "साथीबाट आएको शुभ समाचारले दिउँसो मन प्रसन्न बनाउनेछ।",
        "आर्थिक निर्णय गर्नुअघि अरूको कुरा ध्यान दिएर सुन्नुहोस्।",
        "व्यस्त दिनमा परिवारको साथले सहयोग पुग्नेछ।",
    ),
}


def text(language: Language, key: str) -> str:
    return STRINGS[language][key]


def default_hot_topic(language: Language) -> str:
    return text(language, "default_hot_topic")


def _system_item(language: Language, title_key: str, summary_key: str, now: datetime) -> NewsItem:
    return NewsItem(
        id="system-1",
        title=text(language, title_key),
        summary=text(language, summary_key),
        source=text(language, "system_source"),
        timestamp=now.strftime("%H:%M"),
    )


def offline_news(language: Language, now: datetime) -> List[NewsItem]:
    return [_system_item(language, "no_internet_title", "no_internet_summary", now)]


def error_news(language: Language, now: datetime) -> List[NewsItem]:
    return [_system_item(language, "server_error_title", "server_error_summary", now)]


def mock_news(language: Language, now: datetime) -> List[NewsItem]:
    stamp = now.strftime("%H:%M")
    return [
        NewsItem(
            id=f"mock-{index}",
            title=row["title"],
            summary=row["summary"],
            source=row["source"],
            timestamp=stamp,
        )
        for index, row in enumerate(_MOCK_NEWS[language])
    ]


def unavailable_parties(language: Language) -> List[Party]:
    return build_parties(
        language,
        {},
        default_description=text(language, "party_offline_description"),
        default_stance=text(language, "party_offline_stance"),
        leader=text(language, "leader_unknown"),
    )


def mock_parties(language: Language) -> List[Party]:
    return build_parties(
        language,
        _MOCK_PARTIES[language],
        default_description=text(language, "party_default_description"),
        default_stance=text(language, "party_default_stance"),
        leader=text(language, "leader_pending"),
    )


def mock_horoscope(language: Language) -> List[HoroscopeItem]:
    names = _ZODIAC_NP if language == Language.NP else _ZODIAC_EN
    predictions = _MOCK_PREDICTIONS[language]
    return [
        HoroscopeItem(sign=name, prediction=predictions[index % len(predictions)], icon=_ZODIAC_ICONS[index])
        for index, name in enumerate(names)
    ]
