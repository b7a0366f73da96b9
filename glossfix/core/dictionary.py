"""Frequency-weighted word dictionary and affix tables.

The dictionary maps lowercase words to ranking scores used by the
segmenters. Scores are not probabilities; a higher score simply makes a
word a more attractive segmentation choice.

Each listed word carries a frequency weight, and its score is that weight
times the square of its length. Squaring keeps scores superadditive: the
pieces of a listed word score far less together than the word itself, so
the DP segmenter never trades a long listed word for a chain of shorter
words and catch-all chunks spelling the same letters.
"""

import functools
import re
from collections.abc import Mapping
from types import MappingProxyType

from loguru import logger
from wordfreq import top_n_list

from glossfix.utils.constants import Constants
from glossfix.utils.helpers import cached_zipf_frequency

_WORD_RE = re.compile(r"^[a-z]+$")

# weight -> whitespace separated words; a word listed twice keeps its highest weight
_WORD_TIERS: dict[int, str] = {
    12: """
        confidentiality authentication authorization vulnerabilities
        cybersecurity cryptography organizations communications
        infrastructure
    """,
    11: """
        ransomware information organization individual individuals
        perpetrator perpetrators techniques technique generating encrypted
        vulnerability encryption availability intrusion detection
        prevention management government development community
        experience everything themselves education application
        applications credential credentials keylogger passwords password
        firewall firewalls important different something including
        cybercrime malicious recovered attackers financial operations
        operating students knowledge definition definitions procedure
        procedures protection principle principles integrity incident
        incidents response responses security software hardware computer
        computers internet network networks database databases exploits
        documents document personal sensitive privileges privilege
        spreading distributed
    """,
    10: """
        the of and to a in is it that for
        attack attacks service services data system systems
        on with as be are was by at this from or an not have has
        business critical denial malware phishing threat threats
    """,
    9: """
        i he she we they you but his her their its which will can would
        there what all were been one so if about more when who them some
        these also than other into only may should could must such each
        ransom victim victims access control users user account accounts
        server servers virus worm trojan botnet spyware adware exploit
        breach breaches attacker hacker hackers payload risk cyber crime
        online money revenue method methods group common presence disrupt
        do does did how why where then now just like over after before
        most many much very well even back any our out up down new first
        last long great little own same right still because through
        between both under while during without against within across
        however therefore another
    """,
    8: """
        make made take taken come came know knew think thought see saw
        look used use using get got give given find found work works
        working allow allows allowed stop stops stopped focused asked
        earning paid pay pays demand demands files file key keys code
        codes web email emails link links click message messages
        time year years day days way world life part place case point
        number fact week month company program question problem area
        state school student family group power hour line end member law
        city name team idea body level office door health person history
        party result change reason research moment force offer policy
        process market sense plan course effect class report role rate
        price field study book word job issue side kind head house
        typical possible several certain available general specific
        public private secure safe strong weak known unknown simple
        large small high low early late major minor main full free open
        local global digital physical logical legal illegal
        means mean meant include includes included require requires
        required provide provides provided protect protects protected
        prevent prevents prevented detect detects detected respond
        responds recover recovers identify identifies identified
        gain gains gained target targets targeted spread spreads
        able age air art boy car child children country death die door
        eye face father foot friend game girl guy hand heart home human
        kid kill love man men mind mother music nation night room war
        water wife woman women
    """,
}

PREFIXES: frozenset[str] = frozenset(
    {
        "anti",
        "auto",
        "co",
        "counter",
        "cyber",
        "de",
        "dis",
        "en",
        "ex",
        "im",
        "in",
        "inter",
        "micro",
        "mis",
        "multi",
        "non",
        "over",
        "pre",
        "pro",
        "re",
        "semi",
        "sub",
        "super",
        "trans",
        "un",
        "under",
    }
)

SUFFIXES: frozenset[str] = frozenset(
    {
        "able",
        "al",
        "ed",
        "er",
        "ers",
        "es",
        "ful",
        "ible",
        "ing",
        "ings",
        "ism",
        "ist",
        "ists",
        "ity",
        "ive",
        "less",
        "ly",
        "ment",
        "ments",
        "ness",
        "ous",
        "s",
        "tion",
        "tions",
        "ware",
    }
)


def _parse_tiers(tiers: dict[int, str]) -> dict[str, int]:
    """Flatten the tier table into a word -> weight mapping.

    Raises:
        ValueError: If a word is not lowercase alphabetic or a weight is not positive
    """
    words: dict[str, int] = {}
    for weight, block in tiers.items():
        if weight <= 0:
            raise ValueError(f"Dictionary weights must be positive, got {weight}")
        for word in block.split():
            if not _WORD_RE.match(word):
                raise ValueError(f"Dictionary word must be lowercase letters only: {word!r}")
            words[word] = max(weight, words.get(word, 0))
    return words


def length_scaled_score(word: str, weight: int) -> int:
    """Score a listed word: its frequency weight times its length squared."""
    return weight * len(word) ** 2


def _zipf_to_weight(word: str) -> int:
    """Turn a wordfreq Zipf value (0-8) into a positive frequency weight."""
    return max(1, round(cached_zipf_frequency(word) * Constants.ZIPF_WEIGHT_MULTIPLIER))


@functools.lru_cache(maxsize=None)
def get_dictionary(top_n: int = 0) -> Mapping[str, int]:
    """Return the read-only word dictionary.

    Built once per ``top_n`` value and shared afterwards. With ``top_n`` > 0
    the compiled-in table is extended with the most frequent English words
    from wordfreq, weighted by Zipf frequency; compiled-in words keep their
    compiled-in weights.

    Args:
        top_n: Number of wordfreq words to add (0 = compiled-in table only)

    Returns:
        Immutable mapping from lowercase word to length-scaled score
    """
    weights = _parse_tiers(_WORD_TIERS)

    if top_n > 0:
        added = 0
        for word in top_n_list("en", top_n):
            if word in weights or not _WORD_RE.match(word):
                continue
            # single letters other than "a"/"i" are never words
            if len(word) == 1 and word not in Constants.SINGLE_LETTER_WORDS:
                continue
            weights[word] = _zipf_to_weight(word)
            added += 1
        logger.debug(f"Added {added} wordfreq words to the dictionary (top_n={top_n})")

    return MappingProxyType(
        {word: length_scaled_score(word, weight) for word, weight in weights.items()}
    )
