"""
Static Bulgarian Phonetic Tables

Letter classes, obstruent voicing pairs and IPA mappings used by every
stage of the transcription pipeline. All tables are immutable; callers that
need different clitics or loan-word prefixes pass them through
TranscriptionConfig instead of editing this module.
"""

from types import MappingProxyType
from typing import FrozenSet, Mapping, Tuple


# Internal single-grapheme stand-ins for the two affricate digraphs.
# Borrowed from the Cyrillic letters that spell these sounds in
# Serbian/Macedonian, so the pipeline can treat "дж"/"дз" as one segment.
DZH = "\u045f"  # џ, stands for дж
DZE = "\u0455"  # ѕ, stands for дз

# Semivowel written in place of a word-initial "у" in English loan words
LOAN_SEMIVOWEL = "w"

# 'ю' and 'я' are glide+vowel sequences but act as syllable nuclei
VOWELS: FrozenSet[str] = frozenset("аиеояъую")

# Never take part in voicing assimilation at word boundaries
SONORANTS: FrozenSet[str] = frozenset("мнлрйь")

# Obstruent voicing pairs (voiced, voiceless). 'х' has no voiced partner.
OBSTRUENT_PAIRS: Tuple[Tuple[str, str], ...] = (
    ("д", "т"),
    ("з", "с"),
    ("б", "п"),
    ("г", "к"),
    ("в", "ф"),
    ("ж", "ш"),
    (DZH, "ч"),
    (DZE, "ц"),
)
UNPAIRED_VOICELESS = "х"

VOICED_TO_VOICELESS: Mapping[str, str] = MappingProxyType(dict(OBSTRUENT_PAIRS))
VOICELESS_TO_VOICED: Mapping[str, str] = MappingProxyType(
    {voiceless: voiced for voiced, voiceless in OBSTRUENT_PAIRS}
)

# Vowels whose quality changes when unstressed: letter -> (stressed, unstressed)
REDUCIBLE_VOWELS: Mapping[str, Tuple[str, str]] = MappingProxyType({
    "а": ("a", "ɐ"),
    "о": ("ɔ", "o"),
    "у": ("u", "o"),
    "ъ": ("ɤ", "ɐ"),
    "ю": ("ju", "jo"),
    "я": ("ja", "jɐ"),
})

# Letters with two contextual realisations: letter -> (flag set, flag unset)
CONTEXTUAL_CONSONANTS: Mapping[str, Tuple[str, str]] = MappingProxyType({
    "л": ("l", "ɫ"),   # plain before и/е, velarized elsewhere
    "н": ("ŋ", "n"),   # velar nasal before к/г
})

# Affricates: letter -> (with tie bar, without tie bar)
AFFRICATES: Mapping[str, Tuple[str, str]] = MappingProxyType({
    "ц": ("t͡s", "ts"),
    "ч": ("t͡ʃ", "tʃ"),
    DZH: ("d͡ʒ", "dʒ"),
    DZE: ("d͡z", "dz"),
})

# Everything else maps one-to-one
PLAIN_LETTERS: Mapping[str, str] = MappingProxyType({
    "б": "b",
    "в": "v",
    "г": "g",
    "д": "d",
    "е": "ɛ",
    "ж": "ʒ",
    "з": "z",
    "и": "i",
    "й": "j",
    "к": "k",
    "м": "m",
    "п": "p",
    "р": "r",
    "с": "s",
    "т": "t",
    "ф": "f",
    "х": "x",
    "ш": "ʃ",
    "щ": "ʃt",
    "ь": "j",
})

# Letters after which 'л' keeps its plain (non-velarized) quality
FRONT_VOWELS: FrozenSet[str] = frozenset("ие")

# Letters before which 'н' becomes the velar nasal
VELAR_STOPS: FrozenSet[str] = frozenset("кг")

PRIMARY_STRESS = "ˈ"
SECONDARY_STRESS = "ˌ"

# Pronouns, auxiliary verb forms, prepositions and conjunctions that are
# pronounced without stress next to a content word
DEFAULT_CLITICS: FrozenSet[str] = frozenset({
    "му", "те", "ти", "ги", "им", "си", "се", "го", "я", "и",
    "съм", "е", "сме", "сте", "са", "бях", "бе", "ме", "ми", "й", "ни", "ви", "хем",
    "без", "в", "вдън", "во", "връз", "всред", "във", "въз", "не", "че", "ту",
    "до", "за", "зад", "из", "край", "към", "на", "над", "низ", "о", "от", "под", "пред",
    "през", "при", "с", "след", "сред", "със", "у", "чрез", "а", "ако", "ала", "ама",
    "ами", "да", "дето", "или", "като", "нито", "но", "па", "пък", "та", "то", "ща",
})

# Prepositions that still devoice before a vowel ("в ада" -> [f ...])
DEVOICING_PREPOSITIONS: FrozenSet[str] = frozenset({"в", "във"})

# English loan words starting with these keep a [w] for the initial 'у'
DEFAULT_LOAN_PREFIXES: Tuple[str, ...] = ("уи", "уеб", "уейлс", "уест", "уо")
