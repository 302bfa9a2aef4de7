"""Lexical tables for POS tagging and lemmatization."""

from __future__ import annotations

import re


def _tagged(pos: str, tag: str, words: str) -> dict[str, tuple[str, str]]:
    return {w: (pos, tag) for w in words.split()}


# Curated word -> (POS, tag) table, consulted before the rule list.
WORD_POS: dict[str, tuple[str, str]] = {
    **_tagged("VERB", "VB", """
    be have do say get make go know take see come think look want give use
    find tell ask seem feel try leave call need become put mean keep let
    begin show hear play run move live believe hold bring happen write
    provide sit stand lose pay meet include continue set learn lead
    understand watch follow stop create speak read allow add spend grow open
    walk win offer remember love consider appear buy wait serve die send
    expect build stay fall cut reach kill remain suggest raise pass sell
    require report decide pull develop
    """),
    **_tagged("NOUN", "NN", """
    time year way day man thing woman life child world school state family
    student group country problem hand part place case week company system
    program question work government number night point home water room
    mother area money story fact month lot study book eye job word business
    issue side kind head house service friend father power hour game line
    end member law car city community name president team minute idea kid
    body information parent face level office door health person art war
    history party result change morning reason research girl guy moment air
    teacher force education video content algorithm channel viewer creator
    audience engagement thumbnail hook script trend platform brand
    """),
    **_tagged("NOUN", "NNS", "people others"),
    **_tagged("ADJ", "JJ", """
    good new first last long great little own other old right big high
    different small large next early young important few public bad same
    able viral amazing incredible crazy insane shocking secret
    """),
    **_tagged("ADJ", "JJS", "best worst"),
    **_tagged("ADJ", "JJR", "better worse"),
    **_tagged("ADV", "RB", """
    now just also very then here well only even back there still down up out
    really never always actually literally
    """),
    **_tagged("ADV", "RBR", "more"),
    **_tagged("ADV", "RBS", "most"),
}

# Irregular verbs and contractions -> base form.
IRREGULAR_VERBS: dict[str, str] = {
    "was": "be", "were": "be", "been": "be", "being": "be", "am": "be",
    "is": "be", "are": "be", "had": "have", "has": "have", "having": "have",
    "did": "do", "does": "do", "doing": "do", "done": "do", "went": "go",
    "goes": "go", "going": "go", "gone": "go", "said": "say", "says": "say",
    "saying": "say", "made": "make", "makes": "make", "making": "make",
    "knew": "know", "knows": "know", "knowing": "know", "known": "know",
    "thought": "think", "thinks": "think", "thinking": "think",
    "took": "take", "takes": "take", "taking": "take", "taken": "take",
    "came": "come", "comes": "come", "coming": "come", "saw": "see",
    "sees": "see", "seeing": "see", "seen": "see", "got": "get",
    "gets": "get", "getting": "get", "gotten": "get", "gave": "give",
    "gives": "give", "giving": "give", "given": "give", "found": "find",
    "finds": "find", "finding": "find", "told": "tell", "tells": "tell",
    "telling": "tell", "felt": "feel", "feels": "feel", "feeling": "feel",
    "left": "leave", "leaves": "leave", "leaving": "leave",
    "brought": "bring", "brings": "bring", "bringing": "bring",
    "began": "begin", "begins": "begin", "beginning": "begin",
    "begun": "begin", "kept": "keep", "keeps": "keep", "keeping": "keep",
    "held": "hold", "holds": "hold", "holding": "hold", "wrote": "write",
    "writes": "write", "writing": "write", "written": "write",
    "stood": "stand", "stands": "stand", "standing": "stand",
    "heard": "hear", "hears": "hear", "hearing": "hear", "let": "let",
    "lets": "let", "letting": "let", "meant": "mean", "means": "mean",
    "meaning": "mean", "set": "set", "sets": "set", "setting": "set",
    "met": "meet", "meets": "meet", "meeting": "meet", "ran": "run",
    "runs": "run", "running": "run", "paid": "pay", "pays": "pay",
    "paying": "pay", "sat": "sit", "sits": "sit", "sitting": "sit",
    "spoke": "speak", "speaks": "speak", "speaking": "speak",
    "spoken": "speak", "lay": "lie", "lies": "lie", "lying": "lie",
    "lain": "lie", "led": "lead", "leads": "lead", "leading": "lead",
    "read": "read", "reads": "read", "reading": "read", "grew": "grow",
    "grows": "grow", "growing": "grow", "grown": "grow", "lost": "lose",
    "loses": "lose", "losing": "lose", "fell": "fall", "falls": "fall",
    "falling": "fall", "fallen": "fall", "sent": "send", "sends": "send",
    "sending": "send", "built": "build", "builds": "build",
    "building": "build", "spent": "spend", "spends": "spend",
    "spending": "spend", "cut": "cut", "cuts": "cut", "cutting": "cut",
    "hit": "hit", "hits": "hit", "hitting": "hit", "put": "put",
    "puts": "put", "putting": "put", "shut": "shut", "shuts": "shut",
    "shutting": "shut", "hurt": "hurt", "hurts": "hurt", "hurting": "hurt",
    "cost": "cost", "costs": "cost", "costing": "cost", "burst": "burst",
    "bursts": "burst", "bursting": "burst", "sold": "sell", "sells": "sell",
    "selling": "sell", "bought": "buy", "buys": "buy", "buying": "buy",
    "caught": "catch", "catches": "catch", "catching": "catch",
    "taught": "teach", "teaches": "teach", "teaching": "teach",
    "fought": "fight", "fights": "fight", "fighting": "fight",
    "sought": "seek", "seeks": "seek", "seeking": "seek", "wore": "wear",
    "wears": "wear", "wearing": "wear", "worn": "wear", "bore": "bear",
    "bears": "bear", "bearing": "bear", "borne": "bear", "born": "bear",
    "tore": "tear", "tears": "tear", "tearing": "tear", "torn": "tear",
    "swore": "swear", "swears": "swear", "swearing": "swear",
    "sworn": "swear", "broke": "break", "breaks": "break",
    "breaking": "break", "broken": "break", "chose": "choose",
    "chooses": "choose", "choosing": "choose", "chosen": "choose",
    "froze": "freeze", "freezes": "freeze", "freezing": "freeze",
    "frozen": "freeze", "woke": "wake", "wakes": "wake", "waking": "wake",
    "woken": "wake", "drove": "drive", "drives": "drive",
    "driving": "drive", "driven": "drive", "rode": "ride", "rides": "ride",
    "riding": "ride", "ridden": "ride", "rose": "rise", "rises": "rise",
    "rising": "rise", "risen": "rise", "hid": "hide", "hides": "hide",
    "hiding": "hide", "hidden": "hide", "bit": "bite", "bites": "bite",
    "biting": "bite", "bitten": "bite", "flew": "fly", "flies": "fly",
    "flying": "fly", "flown": "fly", "drew": "draw", "draws": "draw",
    "drawing": "draw", "drawn": "draw", "threw": "throw", "throws": "throw",
    "throwing": "throw", "thrown": "throw", "blew": "blow", "blows": "blow",
    "blowing": "blow", "blown": "blow", "slew": "slay", "slays": "slay",
    "slaying": "slay", "slain": "slay", "swam": "swim", "swims": "swim",
    "swimming": "swim", "swum": "swim", "sang": "sing", "sings": "sing",
    "singing": "sing", "sung": "sing", "rang": "ring", "rings": "ring",
    "ringing": "ring", "rung": "ring", "sank": "sink", "sinks": "sink",
    "sinking": "sink", "sunk": "sink", "shrank": "shrink",
    "shrinks": "shrink", "shrinking": "shrink", "shrunk": "shrink",
    "stank": "stink", "stinks": "stink", "stinking": "stink",
    "stunk": "stink", "drank": "drink", "drinks": "drink",
    "drinking": "drink", "drunk": "drink", "sprang": "spring",
    "springs": "spring", "springing": "spring", "sprung": "spring",
    "won't": "will not", "can't": "can not", "couldn't": "could not",
    "shouldn't": "should not", "wouldn't": "would not", "don't": "do not",
    "doesn't": "does not", "didn't": "did not", "isn't": "is not",
    "aren't": "are not", "wasn't": "was not", "weren't": "were not",
    "haven't": "have not", "hasn't": "has not", "hadn't": "had not",
    "i'm": "i am", "you're": "you are", "we're": "we are",
    "they're": "they are", "he's": "he is", "she's": "she is",
    "it's": "it is", "that's": "that is", "what's": "what is",
    "who's": "who is", "where's": "where is", "i've": "i have",
    "you've": "you have", "we've": "we have", "they've": "they have",
    "i'll": "i will", "you'll": "you will", "we'll": "we will",
    "they'll": "they will", "he'll": "he will", "she'll": "she will",
    "it'll": "it will", "i'd": "i would", "you'd": "you would",
    "we'd": "we would", "they'd": "they would", "he'd": "he would",
    "she'd": "she would", "it'd": "it would", "let's": "let us",
    "that'd": "that would", "who'd": "who would",
}

IRREGULAR_PLURALS: dict[str, str] = {
    "children": "child", "feet": "foot", "teeth": "tooth", "mice": "mouse",
    "geese": "goose", "men": "man", "women": "woman", "people": "person",
    "oxen": "ox", "dice": "die", "lice": "louse", "criteria": "criterion",
    "phenomena": "phenomenon", "data": "datum", "bacteria": "bacterium",
    "cacti": "cactus", "fungi": "fungus", "nuclei": "nucleus",
    "radii": "radius", "alumni": "alumnus", "syllabi": "syllabus",
    "analyses": "analysis", "bases": "basis", "crises": "crisis",
    "diagnoses": "diagnosis", "hypotheses": "hypothesis", "oases": "oasis",
    "parentheses": "parenthesis", "syntheses": "synthesis",
    "theses": "thesis", "appendices": "appendix", "indices": "index",
    "matrices": "matrix", "vertices": "vertex",
}


def _rule(pattern: str, pos: str, tag: str) -> tuple[re.Pattern[str], str, str]:
    return re.compile(pattern, re.IGNORECASE), pos, tag


# Ordered POS heuristics; first match wins, NOUN/NN when nothing matches.
POS_RULES: tuple[tuple[re.Pattern[str], str, str], ...] = (
    # Punctuation
    _rule(r"^[.!?;:…]$", "PUNCT", "."),
    _rule(r"^,$", "PUNCT", ","),
    _rule(r"^[-–—]$", "PUNCT", ":"),
    _rule(r"^['\"`‘’“”]$", "PUNCT", "''"),
    _rule(r"^[()\[\]{}]$", "PUNCT", "-LRB-"),
    # Numbers
    _rule(r"^\d+$", "NUM", "CD"),
    _rule(r"^\d+(?:[,.]\d+)+$", "NUM", "CD"),
    _rule(r"^\d+(?:st|nd|rd|th)$", "ADJ", "JJ"),
    _rule(r"^\d+(?:[,.]\d+)*%$", "NUM", "CD"),
    # Determiners
    _rule(r"^(?:a|an|the)$", "DET", "DT"),
    _rule(r"^(?:this|that|these|those)$", "DET", "DT"),
    _rule(r"^(?:my|your|his|her|its|our|their)$", "DET", "PRP$"),
    _rule(
        r"^(?:some|any|no|every|each|all|both|few|many|much|more|most"
        r"|other|another)$",
        "DET", "DT",
    ),
    # Pronouns
    _rule(r"^(?:i|me|myself)$", "PRON", "PRP"),
    _rule(r"^(?:you|yourself|yourselves)$", "PRON", "PRP"),
    _rule(r"^(?:he|him|himself|she|her|herself|it|itself)$", "PRON", "PRP"),
    _rule(r"^(?:we|us|ourselves|they|them|themselves)$", "PRON", "PRP"),
    _rule(
        r"^(?:who|whom|whose|which|what|whoever|whatever|whichever)$",
        "PRON", "WP",
    ),
    # Prepositions
    _rule(
        r"^(?:in|on|at|to|for|of|with|by|from|up|about|into|through|during"
        r"|before|after|above|below|between|under|again|further|then|once)$",
        "ADP", "IN",
    ),
    # Conjunctions
    _rule(r"^(?:and|or|but|nor|so|yet|for)$", "CONJ", "CC"),
    _rule(
        r"^(?:if|unless|although|because|since|while|when|where|whereas"
        r"|whether|as|than|that)$",
        "CONJ", "IN",
    ),
    # Auxiliaries and modals
    _rule(r"^(?:is|am|are|was|were|be|been|being)$", "VERB", "VB"),
    _rule(r"^(?:have|has|had|having)$", "VERB", "VB"),
    _rule(r"^(?:do|does|did|doing)$", "VERB", "VB"),
    _rule(
        r"^(?:will|would|shall|should|can|could|may|might|must)$",
        "VERB", "MD",
    ),
    # Suffix heuristics
    _rule(r"ing$", "VERB", "VBG"),
    _rule(r"ed$", "VERB", "VBD"),
    _rule(r"s$", "VERB", "VBZ"),
    _rule(
        r"(?:ful|less|able|ible|ous|ive|al|ial|ic|ical|ish|like|ly|y|ary|ory)$",
        "ADJ", "JJ",
    ),
    _rule(r"er$", "ADJ", "JJR"),
    _rule(r"est$", "ADJ", "JJS"),
    _rule(r"ly$", "ADV", "RB"),
    _rule(
        r"(?:tion|sion|ness|ment|ity|ism|ist|er|or|ant|ent|ance|ence|dom|hood"
        r"|ship|age)$",
        "NOUN", "NN",
    ),
    # Interjections
    _rule(
        r"^(?:oh|ah|wow|ouch|hey|hi|hello|bye|oops|ugh|huh|hmm|um|uh|well"
        r"|yeah|yes|no|okay|ok)$",
        "INTJ", "UH",
    ),
    # Particles
    _rule(r"^(?:not|n't)$", "PART", "RB"),
    _rule(r"^to$", "PART", "TO"),
    # Symbols
    _rule(r"^[@#$%&*+=<>~^|\\/]$", "SYM", "SYM"),
)

_VERB = frozenset({"VERB"})
_NOUN = frozenset({"NOUN"})
_ADJ = frozenset({"ADJ"})

# (suffix, replacement, min word length, POS the rule applies to).
# Ordered; the first applicable rule whose stem keeps >= 2 chars wins.
LEMMA_RULES: tuple[tuple[str, str, int, frozenset[str]], ...] = (
    # Verb conjugations
    ("ing", "", 5, _VERB),
    ("ying", "y", 5, _VERB),
    ("ied", "y", 4, _VERB),
    ("ies", "y", 4, _VERB),
    ("ed", "", 4, _VERB),
    ("es", "", 4, _VERB),
    ("s", "", 4, frozenset({"VERB", "NOUN"})),
    # Noun plurals
    ("ies", "y", 4, _NOUN),
    ("ves", "f", 4, _NOUN),
    ("xes", "x", 4, _NOUN),
    ("zes", "z", 4, _NOUN),
    ("ches", "ch", 5, _NOUN),
    ("shes", "sh", 5, _NOUN),
    ("ses", "s", 4, _NOUN),
    ("men", "man", 4, _NOUN),
    # Comparatives, superlatives, adverbs
    ("er", "", 4, _ADJ),
    ("est", "", 5, _ADJ),
    ("ier", "y", 4, _ADJ),
    ("iest", "y", 5, _ADJ),
    ("ly", "", 4, frozenset({"ADV"})),
    # Derivational suffixes
    ("ness", "", 6, _NOUN),
    ("ment", "", 6, _NOUN),
    ("tion", "te", 6, _NOUN),
    ("ation", "", 7, _NOUN),
    ("ity", "", 5, _NOUN),
    ("able", "", 6, _ADJ),
    ("ible", "", 6, _ADJ),
    ("ful", "", 5, _ADJ),
    ("less", "", 6, _ADJ),
    ("ous", "", 5, _ADJ),
    ("ive", "", 5, _ADJ),
)
