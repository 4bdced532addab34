"""
Lexical Resource Tables
=======================
Closed word lists and phrase maps that drive the word-class heuristics
and the style rules.

The tables are immutable. Customization goes through update_lexicon(),
which builds a new LexiconTables and swaps it in; a scan that already
holds a reference keeps reading the tables it started with.

Usage:
    from grammar.lexicon import get_lexicon, update_lexicon

    update_lexicon(nouns={'widget'}, concise={'in close proximity to': 'near'})
    'widget' in get_lexicon().nouns  # True
"""

import json
import threading
from dataclasses import dataclass, fields, replace
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Iterable, Mapping, Optional, Union

from config_logging import get_logger, ConfigurationError

__version__ = "1.1.0"

logger = get_logger('grammar.lexicon')


# =============================================================================
# DEFAULT TABLES
# =============================================================================

COMMON_NOUNS = (
    'partner', 'own', 'car', 'house', 'dog', 'cat', 'book', 'person', 'people',
    'friend', 'day', 'time', 'thing', 'way', 'man', 'woman', 'child', 'work',
    'life', 'world', 'school', 'home', 'family', 'year', 'place', 'city',
    'country', 'name', 'problem', 'question', 'answer', 'idea', 'job', 'word',
    'number', 'part', 'hand', 'eye', 'head', 'body', 'face', 'door', 'window',
    'room', 'food', 'water', 'money', 'love', 'mind', 'heart', 'soul', 'spirit',
    'son', 'daughter', 'mother', 'father', 'brother', 'sister', 'process',
    'system', 'method', 'approach', 'strategy', 'plan', 'project', 'task',
    'activity', 'event', 'service', 'product', 'item', 'element', 'component',
    'feature', 'function', 'tool', 'device', 'machine', 'equipment', 'material',
    'substance', 'resource', 'asset', 'property', 'document', 'file', 'record',
    'account', 'report', 'article', 'story', 'chapter', 'section', 'page',
    'line', 'point', 'detail', 'fact', 'information', 'data', 'knowledge',
    'skill', 'ability', 'talent', 'experience', 'background', 'history',
    'culture', 'tradition', 'custom', 'habit', 'routine', 'pattern', 'behavior',
    'action', 'movement', 'change', 'development', 'growth', 'progress',
    'improvement', 'increase', 'decrease', 'reduction', 'addition',
    'subtraction', 'multiplication', 'division', 'calculation', 'computation',
    'analysis', 'study', 'research', 'investigation', 'examination',
    'inspection', 'review', 'evaluation', 'assessment', 'judgment', 'decision',
    'choice', 'option', 'alternative', 'possibility', 'opportunity', 'chance',
    'risk', 'danger', 'threat', 'challenge', 'difficulty', 'issue', 'concern',
    'matter', 'subject', 'topic', 'theme', 'focus', 'attention', 'interest',
    'care', 'worry', 'anxiety', 'fear', 'hope', 'dream', 'goal', 'objective',
    'target', 'aim', 'purpose', 'intention', 'motivation', 'reason', 'cause',
    'effect', 'result', 'outcome', 'consequence', 'impact', 'influence',
    'power', 'strength', 'force', 'energy', 'effort', 'labor', 'duty',
    'responsibility', 'obligation', 'requirement', 'need', 'demand', 'request',
    'inquiry', 'query', 'statement', 'declaration', 'announcement', 'message',
    'communication', 'conversation', 'discussion', 'debate', 'argument',
    'disagreement', 'conflict', 'dispute', 'controversy', 'difference',
    'similarity', 'comparison', 'contrast', 'relationship', 'connection',
    'link', 'bond', 'tie', 'association', 'partnership', 'collaboration',
    'cooperation', 'team', 'group', 'organization', 'company', 'business',
    'enterprise', 'industry', 'sector', 'field', 'area', 'domain', 'realm',
    'sphere', 'universe', 'space', 'environment', 'atmosphere', 'surroundings',
    'setting', 'location', 'position', 'spot', 'site', 'venue', 'arena',
    'stage', 'platform', 'base', 'foundation', 'ground', 'floor', 'surface',
    'level', 'layer', 'stratum', 'tier', 'rank', 'grade', 'class', 'category',
    'type', 'kind', 'sort', 'variety', 'form', 'shape', 'structure',
    'framework', 'design', 'model', 'example', 'instance', 'case', 'sample',
    'specimen',
    # Everyday concrete nouns
    'color', 'colour', 'tail', 'phone', 'computer', 'table', 'chair', 'bed',
    'desk', 'bag', 'shoe', 'shirt', 'hat', 'coat', 'key', 'box', 'letter',
    'email', 'office', 'store', 'shop', 'street', 'road', 'town',
    'garden', 'kitchen', 'bike', 'bus', 'train', 'plane', 'boat', 'ticket',
    'parent', 'kid', 'baby', 'boss', 'teacher', 'student', 'doctor', 'client',
    'customer', 'neighbor', 'neighbour', 'owner', 'manager', 'member',
    'opinion', 'advice', 'help', 'support', 'order', 'price', 'cost', 'value',
    'size', 'weight', 'speed', 'website', 'app', 'software', 'code',
    'game', 'music', 'song', 'movie', 'picture', 'photo', 'paper',
    'pen', 'lunch', 'dinner', 'breakfast', 'meal', 'coffee', 'tea',
    'voice', 'hair', 'arm', 'leg', 'foot', 'back', 'birthday', 'party',
    'vacation', 'holiday', 'weekend', 'morning', 'evening', 'night',
)

# Present participles that are ordinarily nouns ("their booking")
ING_EXCEPTIONS = (
    'booking', 'meeting', 'training', 'building', 'painting', 'hearing',
    'understanding', 'feeling', 'recording', 'reading', 'following',
    'planning', 'offering', 'writing', 'finding', 'beginning', 'funding',
    'dressing', 'setting', 'housing', 'manufacturing', 'learning', 'teaching',
    'processing', 'printing', 'engineering', 'advertising', 'marketing',
    'packaging', 'handling',
)

# Words that take "an" despite a leading consonant letter (silent h)
AN_EXCEPTIONS = (
    'hour', 'hours', 'hourly', 'hourglass', 'heir', 'heirs', 'heiress',
    'heirloom', 'honor', 'honors', 'honorable', 'honorary', 'honour',
    'honourable', 'honest', 'honestly', 'honesty',
)

VERB_SUFFIXES = ('ing', 'ed', 'es', 's')

COPULAS = ('is', 'are', 'was', 'were')

# Words after "their" that signal "they're"
THEIR_VERB_CUES = ('going', 'coming', 'doing', 'saying', 'looking')

# Words after "they're" that confirm the contraction
THEYRE_CORRECT_NEXT = (
    'going', 'coming', 'doing', 'saying', 'looking', 'happy', 'sad', 'good',
    'bad',
)

# Words after "it's" that confirm the contraction
ITS_CORRECT_NEXT = (
    'good', 'bad', 'nice', 'fine', 'okay', 'ok', 'a', 'the', 'not', 'very',
)

YOURE_CORRECT_NEXT = (
    'going', 'coming', 'doing', 'saying', 'looking', 'happy', 'sad', 'good',
    'bad', 'nice',
)

# Bare infinitives accepted after "to"
CORRECT_TO = (
    'go', 'be', 'do', 'have', 'get', 'make', 'see', 'know', 'think', 'take',
    'come', 'give', 'find', 'tell', 'work', 'call', 'try', 'ask', 'need',
    'want', 'use', 'say', 'let', 'help', 'keep', 'turn', 'move', 'play', 'run',
    'show', 'hear', 'bring', 'write', 'provide', 'sit', 'stand', 'lose', 'pay',
    'meet', 'include', 'continue', 'set', 'learn', 'change', 'lead',
    'understand', 'watch', 'follow', 'stop', 'create', 'speak', 'read',
    'allow', 'add', 'spend', 'grow', 'open', 'walk', 'win', 'offer',
    'remember', 'love', 'consider', 'appear', 'buy', 'wait', 'serve', 'die',
    'send', 'build', 'stay', 'fall', 'cut', 'reach', 'kill', 'raise', 'pass',
    'sell', 'decide', 'return', 'explain', 'develop', 'carry', 'break',
    'receive', 'agree', 'support', 'hit', 'produce', 'eat', 'cover', 'catch',
    'draw', 'choose',
)

# Determiners and object pronouns that make "to" a preposition
TO_PREPOSITIONAL_OBJECTS = (
    'the', 'a', 'an', 'this', 'that', 'these', 'those', 'my', 'your', 'his',
    'her', 'its', 'our', 'their', 'me', 'you', 'him', 'it', 'us', 'them',
    'some', 'any', 'every', 'each', 'all', 'both', 'no', 'another', 'other',
    'what', 'which', 'whom', 'where', 'here', 'there', 'now',
)

# Degree and quality words accepted after "too"
CORRECT_TOO = (
    'much', 'many', 'little', 'few', 'big', 'small', 'good', 'bad', 'fast',
    'slow', 'early', 'late', 'long', 'short', 'high', 'low', 'hot', 'cold',
    'easy', 'hard', 'nice', 'sad', 'happy',
)

LARGE_NUMBERS = ('hundred', 'thousand', 'million')

CONTRACTIONS = {
    'dont': "don't",
    'cant': "can't",
    'wont': "won't",
    'isnt': "isn't",
    'arent': "aren't",
    'wasnt': "wasn't",
    'werent': "weren't",
    'hasnt': "hasn't",
    'havent': "haven't",
    'shouldnt': "shouldn't",
    'couldnt': "couldn't",
    'wouldnt': "wouldn't",
}

HYPHENS = {
    'end to end': "end-to-end",
    'state of the art': "state-of-the-art",
    'up to date': "up-to-date",
    'well known': "well-known",
    'long term': "long-term",
    'short term': "short-term",
    'real time': "real-time",
    'high quality': "high-quality",
    'low cost': "low-cost",
    'full time': "full-time",
    'part time': "part-time",
    'hands on': "hands-on",
    'one on one': "one-on-one",
    'face to face': "face-to-face",
    'day to day': "day-to-day",
    'word for word': "word-for-word",
    'side by side': "side-by-side",
    'back to back': "back-to-back",
    'well being': "well-being",
    'self esteem': "self-esteem",
    'long standing': "long-standing",
    'wide ranging': "wide-ranging",
    'far reaching': "far-reaching",
    'close knit': "close-knit",
    'high end': "high-end",
    'low end': "low-end",
    'middle aged': "middle-aged",
    'old fashioned': "old-fashioned",
    'new found': "new-found",
    'well rounded': "well-rounded",
    'well informed': "well-informed",
    'well established': "well-established",
    'well deserved': "well-deserved",
    'well designed': "well-designed",
    'well written': "well-written",
    'well made': "well-made",
    'well maintained': "well-maintained",
    'well documented': "well-documented",
    'well received': "well-received",
    'well thought': "well-thought",
    'well planned': "well-planned",
    'well organized': "well-organized",
    'well structured': "well-structured",
    'well balanced': "well-balanced",
    'well educated': "well-educated",
    'well trained': "well-trained",
    'well equipped': "well-equipped",
    'well prepared': "well-prepared",
    'well executed': "well-executed",
    'well managed': "well-managed",
    'well funded': "well-funded",
    'well supported': "well-supported",
    'well liked': "well-liked",
    'well respected': "well-respected",
    'well regarded': "well-regarded",
    'well understood': "well-understood",
    'well defined': "well-defined",
    'well developed': "well-developed",
    'well tested': "well-tested",
    'well proven': "well-proven",
    'well researched': "well-researched",
    'well studied': "well-studied",
    'well publicized': "well-publicized",
    'well advertised': "well-advertised",
    'well marketed': "well-marketed",
    'well positioned': "well-positioned",
    'well placed': "well-placed",
    'well timed': "well-timed",
    'well coordinated': "well-coordinated",
    'well integrated': "well-integrated",
    'well connected': "well-connected",
    'well synchronized': "well-synchronized",
    'well aligned': "well-aligned",
    'well matched': "well-matched",
    'well suited': "well-suited",
    'well adapted': "well-adapted",
    'well adjusted': "well-adjusted",
}

# Verbose phrase -> concise replacement ("" means delete the phrase)
CONCISE = {
    'as a whole the': "the",
    'in order to': "to",
    'due to the fact that': "because",
    'at this point in time': "now",
    'in the event that': "if",
    'for the purpose of': "to",
    'in the case of': "for",
    'with regard to': "regarding",
    'a large number of': "many",
    'a small number of': "few",
    'in the near future': "soon",
    'at the present time': "now",
    'as a result of': "because of",
    'in spite of the fact that': "although",
    'on account of the fact that': "because",
    'in the absence of': "without",
    'in the presence of': "with",
    'in the course of': "during",
    'with respect to': "regarding",
    'it is important to note that': "note that",
    'it should be noted that': "note that",
    'there is no doubt that': "certainly",
    'it is clear that': "clearly",
    'it is evident that': "evidently",
    'in terms of': "",
    'for all intents and purposes': "essentially",
    'in the final analysis': "finally",
}


# =============================================================================
# TABLE CONTAINER
# =============================================================================

@dataclass(frozen=True)
class LexiconTables:
    """Immutable snapshot of every lexical table."""
    nouns: FrozenSet[str]
    verb_suffixes: tuple
    ing_exceptions: FrozenSet[str]
    an_exceptions: FrozenSet[str]
    copulas: FrozenSet[str]
    their_verb_cues: FrozenSet[str]
    theyre_correct_next: FrozenSet[str]
    its_correct_next: FrozenSet[str]
    youre_correct_next: FrozenSet[str]
    correct_to: FrozenSet[str]
    to_prepositional_objects: FrozenSet[str]
    correct_too: FrozenSet[str]
    large_numbers: FrozenSet[str]
    contractions: Mapping[str, str]
    hyphens: Mapping[str, str]
    concise: Mapping[str, str]

    @classmethod
    def defaults(cls) -> 'LexiconTables':
        """Build the stock tables."""
        return cls(
            nouns=_word_set(COMMON_NOUNS),
            verb_suffixes=VERB_SUFFIXES,
            ing_exceptions=_word_set(ING_EXCEPTIONS),
            an_exceptions=_word_set(AN_EXCEPTIONS),
            copulas=_word_set(COPULAS),
            their_verb_cues=_word_set(THEIR_VERB_CUES),
            theyre_correct_next=_word_set(THEYRE_CORRECT_NEXT),
            its_correct_next=_word_set(ITS_CORRECT_NEXT),
            youre_correct_next=_word_set(YOURE_CORRECT_NEXT),
            correct_to=_word_set(CORRECT_TO),
            to_prepositional_objects=_word_set(TO_PREPOSITIONAL_OBJECTS),
            correct_too=_word_set(CORRECT_TOO),
            large_numbers=_word_set(LARGE_NUMBERS),
            contractions=_phrase_map(CONTRACTIONS),
            hyphens=_phrase_map(HYPHENS),
            concise=_phrase_map(CONCISE),
        )

    @classmethod
    def table_names(cls) -> tuple:
        return tuple(f.name for f in fields(cls))

    def merged(self, **overrides: Any) -> 'LexiconTables':
        """
        Return a copy with overrides merged in.

        Set tables are unioned with the given words; mapping tables are
        dict-merged (override values win). verb_suffixes is replaced
        outright since its order matters.
        """
        changes = {}
        for name, value in overrides.items():
            if name not in self.table_names():
                raise ConfigurationError(f"Unknown lexicon table: {name}", source=name)
            current = getattr(self, name)
            if name == 'verb_suffixes':
                if isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
                    raise ConfigurationError(f"Table '{name}' expects a list of suffixes", source=name)
                changes[name] = tuple(str(s).lower() for s in value)
            elif isinstance(current, frozenset):
                if isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
                    raise ConfigurationError(f"Table '{name}' expects a list of words", source=name)
                changes[name] = current | _word_set(value)
            else:
                if not isinstance(value, Mapping):
                    raise ConfigurationError(f"Table '{name}' expects a phrase mapping", source=name)
                merged_map = dict(current)
                merged_map.update(_phrase_map(value))
                changes[name] = MappingProxyType(merged_map)
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        result = {}
        for name in self.table_names():
            value = getattr(self, name)
            if isinstance(value, frozenset):
                result[name] = sorted(value)
            elif isinstance(value, tuple):
                result[name] = list(value)
            else:
                result[name] = dict(value)
        return result


def _word_set(words: Iterable[str]) -> FrozenSet[str]:
    return frozenset(str(w).strip().lower() for w in words if str(w).strip())


def _phrase_map(mapping: Mapping[str, str]) -> Mapping[str, str]:
    return MappingProxyType({
        ' '.join(str(k).lower().split()): str(v) for k, v in mapping.items() if str(k).strip()
    })


# =============================================================================
# LIFECYCLE
# =============================================================================

_lexicon: Optional[LexiconTables] = None
_lock = threading.Lock()


def get_lexicon() -> LexiconTables:
    """
    Get the current tables.

    On first use the stock tables are loaded and, when
    lexicon.override_file is configured, that file is merged over them.
    A broken override file is logged and skipped.
    """
    global _lexicon
    if _lexicon is None:
        with _lock:
            if _lexicon is None:
                _lexicon = _initial_tables()
    return _lexicon


def _initial_tables() -> LexiconTables:
    from . import config as grammar_config

    tables = LexiconTables.defaults()
    override_file = grammar_config.get_config().lexicon.override_file
    if not override_file:
        return tables

    try:
        tables = tables.merged(**_read_overrides(Path(override_file)))
        logger.info("Lexicon overrides loaded", path=str(override_file))
    except ConfigurationError as e:
        logger.warning(f"Ignoring lexicon override file: {e.message}", path=str(override_file))
    return tables


def _read_overrides(path: Path) -> Dict[str, Any]:
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except FileNotFoundError:
        raise ConfigurationError(f"Lexicon file not found: {path}", source=str(path))
    except (json.JSONDecodeError, OSError) as e:
        raise ConfigurationError(f"Invalid lexicon file {path}: {e}", source=str(path))

    if not isinstance(data, dict):
        raise ConfigurationError("Lexicon file must contain a JSON object", source=str(path))
    return data


def update_lexicon(**overrides: Any) -> LexiconTables:
    """
    Merge overrides into the current tables.

    Must be called between checks; an in-flight check keeps the
    snapshot it started with.

    Raises:
        ConfigurationError: unknown table name or wrongly shaped value
    """
    global _lexicon
    current = get_lexicon()
    with _lock:
        try:
            _lexicon = current.merged(**overrides)
        except ConfigurationError as e:
            logger.warning(f"Rejected lexicon override: {e.message}")
            raise
    logger.info("Lexicon updated", tables=sorted(overrides))
    return _lexicon


def load_lexicon_file(path: Union[str, Path]) -> LexiconTables:
    """
    Apply a JSON file of table overrides.

    The file holds one key per table, e.g.
    {"nouns": ["widget"], "concise": {"in close proximity to": "near"}}
    """
    return update_lexicon(**_read_overrides(Path(path)))


def reset_lexicon() -> LexiconTables:
    """Restore the stock tables (override files are not re-applied)."""
    global _lexicon
    with _lock:
        _lexicon = LexiconTables.defaults()
    return _lexicon
