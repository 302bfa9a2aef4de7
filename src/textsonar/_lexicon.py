"""Sentiment lexicon, modifier tables and negation cues."""

from __future__ import annotations

from ._types import EmotionCategory, LexiconEntry

# word -> (base score in [-5, 5], intensity in [0, 1], emotion tags)
_RAW_LEXICON: dict[str, tuple[float, float, tuple[str, ...]]] = {
    # Strongly positive
    "amazing": (4, 0.9, ("joy", "surprise")),
    "awesome": (4, 0.85, ("joy",)),
    "beautiful": (3, 0.7, ("joy", "love")),
    "best": (4, 0.8, ("joy",)),
    "brilliant": (4, 0.85, ("joy", "surprise")),
    "celebrate": (3, 0.75, ("joy",)),
    "champion": (3, 0.7, ("joy", "pride")),
    "charming": (3, 0.65, ("love", "joy")),
    "delight": (4, 0.8, ("joy",)),
    "delightful": (4, 0.8, ("joy",)),
    "excellent": (4, 0.85, ("joy",)),
    "exceptional": (4, 0.85, ("joy", "surprise")),
    "exciting": (3, 0.75, ("joy", "anticipation")),
    "extraordinary": (4, 0.85, ("surprise", "joy")),
    "fabulous": (4, 0.85, ("joy",)),
    "fantastic": (4, 0.85, ("joy",)),
    "favorite": (3, 0.7, ("love", "joy")),
    "genius": (4, 0.85, ("admiration", "surprise")),
    "glorious": (4, 0.8, ("joy", "admiration")),
    "gorgeous": (4, 0.8, ("love", "joy")),
    "great": (3, 0.7, ("joy",)),
    "happy": (3, 0.75, ("joy",)),
    "incredible": (4, 0.85, ("surprise", "joy")),
    "inspiring": (3, 0.75, ("admiration", "joy")),
    "legendary": (4, 0.85, ("admiration", "surprise")),
    "love": (4, 0.9, ("love", "joy")),
    "lovely": (3, 0.7, ("love", "joy")),
    "magnificent": (4, 0.85, ("admiration", "joy")),
    "marvelous": (4, 0.85, ("joy", "surprise")),
    "masterpiece": (5, 0.95, ("admiration", "joy")),
    "outstanding": (4, 0.85, ("joy", "admiration")),
    "perfect": (5, 0.95, ("joy",)),
    "phenomenal": (4, 0.9, ("surprise", "joy")),
    "remarkable": (3, 0.75, ("surprise", "joy")),
    "sensational": (4, 0.85, ("surprise", "joy")),
    "spectacular": (4, 0.85, ("surprise", "joy")),
    "stunning": (4, 0.85, ("surprise", "joy")),
    "sublime": (4, 0.85, ("joy", "admiration")),
    "superb": (4, 0.85, ("joy",)),
    "superior": (3, 0.7, ("pride", "joy")),
    "terrific": (4, 0.8, ("joy",)),
    "thrilled": (4, 0.85, ("joy", "excitement")),
    "triumph": (4, 0.8, ("joy", "pride")),
    "unbelievable": (4, 0.85, ("surprise",)),
    "victory": (3, 0.75, ("joy", "pride")),
    "viral": (3, 0.7, ("excitement", "joy")),
    "win": (3, 0.7, ("joy", "pride")),
    "winner": (3, 0.7, ("joy", "pride")),
    "wonderful": (4, 0.85, ("joy",)),
    "wow": (3, 0.8, ("surprise", "joy")),

    # Mildly positive
    "accept": (1, 0.4, ("trust",)),
    "accomplished": (2, 0.6, ("pride", "joy")),
    "achievement": (2, 0.6, ("pride",)),
    "admire": (2, 0.6, ("admiration",)),
    "agree": (1, 0.4, ("trust",)),
    "amusing": (2, 0.5, ("joy", "amusement")),
    "appreciate": (2, 0.6, ("gratitude",)),
    "approval": (2, 0.5, ("trust",)),
    "attractive": (2, 0.5, ("love",)),
    "benefit": (2, 0.5, ("joy",)),
    "calm": (2, 0.5, ("serenity",)),
    "capable": (2, 0.5, ("trust",)),
    "care": (2, 0.6, ("love",)),
    "comfortable": (2, 0.5, ("serenity",)),
    "confidence": (2, 0.6, ("trust",)),
    "cool": (2, 0.5, ("joy",)),
    "creative": (2, 0.6, ("joy",)),
    "curious": (1, 0.5, ("anticipation",)),
    "easy": (1, 0.4, ("serenity",)),
    "effective": (2, 0.5, ("trust",)),
    "efficient": (2, 0.5, ("trust",)),
    "elegant": (2, 0.6, ("admiration",)),
    "encourage": (2, 0.6, ("trust", "joy")),
    "enjoy": (2, 0.6, ("joy",)),
    "entertaining": (2, 0.5, ("joy", "amusement")),
    "enthusiastic": (2, 0.7, ("joy", "anticipation")),
    "free": (2, 0.5, ("joy",)),
    "fresh": (1, 0.4, ("joy",)),
    "friendly": (2, 0.5, ("love", "trust")),
    "fun": (2, 0.6, ("joy",)),
    "generous": (2, 0.6, ("love",)),
    "glad": (2, 0.6, ("joy",)),
    "good": (2, 0.5, ("joy",)),
    "grateful": (2, 0.7, ("gratitude",)),
    "growth": (2, 0.5, ("anticipation",)),
    "helpful": (2, 0.5, ("trust",)),
    "honest": (2, 0.5, ("trust",)),
    "hope": (2, 0.6, ("anticipation", "optimism")),
    "improve": (2, 0.5, ("optimism",)),
    "innovative": (2, 0.6, ("surprise", "admiration")),
    "insight": (2, 0.5, ("trust",)),
    "intelligent": (2, 0.5, ("admiration",)),
    "interesting": (2, 0.5, ("anticipation",)),
    "kind": (2, 0.6, ("love",)),
    "laugh": (2, 0.6, ("joy", "amusement")),
    "learn": (1, 0.4, ("anticipation",)),
    "like": (2, 0.5, ("joy",)),
    "lucky": (2, 0.5, ("joy",)),
    "motivated": (2, 0.6, ("anticipation",)),
    "natural": (1, 0.4, ("serenity",)),
    "nice": (2, 0.5, ("joy",)),
    "opportunity": (2, 0.5, ("anticipation",)),
    "optimistic": (2, 0.6, ("optimism",)),
    "peaceful": (2, 0.5, ("serenity",)),
    "pleasant": (2, 0.5, ("joy",)),
    "pleased": (2, 0.6, ("joy",)),
    "popular": (2, 0.5, ("joy",)),
    "positive": (2, 0.5, ("optimism",)),
    "powerful": (2, 0.6, ("admiration",)),
    "pretty": (2, 0.5, ("love",)),
    "progress": (2, 0.5, ("optimism",)),
    "proud": (2, 0.7, ("pride",)),
    "quality": (2, 0.5, ("trust",)),
    "recommend": (2, 0.5, ("trust",)),
    "relax": (2, 0.5, ("serenity",)),
    "reliable": (2, 0.5, ("trust",)),
    "respect": (2, 0.6, ("admiration",)),
    "safe": (2, 0.5, ("trust", "serenity")),
    "satisfied": (2, 0.6, ("joy",)),
    "secure": (2, 0.5, ("trust",)),
    "simple": (1, 0.4, ("serenity",)),
    "smart": (2, 0.5, ("admiration",)),
    "smile": (2, 0.6, ("joy",)),
    "smooth": (1, 0.4, ("serenity",)),
    "special": (2, 0.5, ("joy", "love")),
    "strong": (2, 0.5, ("trust",)),
    "succeed": (2, 0.6, ("joy", "pride")),
    "success": (3, 0.7, ("joy", "pride")),
    "support": (2, 0.5, ("trust",)),
    "sweet": (2, 0.5, ("love", "joy")),
    "thank": (2, 0.6, ("gratitude",)),
    "trust": (2, 0.6, ("trust",)),
    "unique": (2, 0.5, ("surprise",)),
    "useful": (2, 0.5, ("trust",)),
    "valuable": (2, 0.5, ("trust",)),
    "warm": (2, 0.5, ("love",)),
    "welcome": (2, 0.5, ("trust", "joy")),
    "worth": (2, 0.5, ("trust",)),

    # Mildly negative
    "annoy": (-2, 0.5, ("anger",)),
    "anxious": (-2, 0.6, ("fear", "anticipation")),
    "bad": (-2, 0.5, ("sadness",)),
    "bored": (-2, 0.4, ("sadness",)),
    "boring": (-2, 0.4, ("sadness",)),
    "concern": (-1, 0.4, ("fear",)),
    "confused": (-1, 0.4, ("surprise",)),
    "criticism": (-2, 0.5, ("anger",)),
    "delay": (-1, 0.4, ("anger",)),
    "difficult": (-1, 0.4, ("fear",)),
    "disappoint": (-2, 0.6, ("sadness",)),
    "disappointed": (-2, 0.6, ("sadness",)),
    "dislike": (-2, 0.5, ("disgust",)),
    "doubt": (-1, 0.4, ("fear",)),
    "dull": (-1, 0.3, ("sadness",)),
    "empty": (-1, 0.4, ("sadness",)),
    "exhausted": (-2, 0.5, ("sadness",)),
    "fail": (-2, 0.6, ("sadness",)),
    "failure": (-2, 0.6, ("sadness",)),
    "fault": (-2, 0.5, ("anger",)),
    "fear": (-2, 0.7, ("fear",)),
    "frustrated": (-2, 0.6, ("anger",)),
    "frustrating": (-2, 0.6, ("anger",)),
    "guilty": (-2, 0.6, ("sadness", "fear")),
    "hard": (-1, 0.3, ("fear",)),
    "ignore": (-1, 0.4, ("sadness",)),
    "impatient": (-1, 0.4, ("anger",)),
    "jealous": (-2, 0.6, ("anger", "sadness")),
    "lack": (-1, 0.4, ("sadness",)),
    "late": (-1, 0.3, ("anger",)),
    "lazy": (-1, 0.4, ("disgust",)),
    "limit": (-1, 0.3, ("sadness",)),
    "lonely": (-2, 0.6, ("sadness",)),
    "lose": (-2, 0.6, ("sadness",)),
    "loss": (-2, 0.6, ("sadness",)),
    "mad": (-2, 0.6, ("anger",)),
    "mess": (-1, 0.4, ("disgust",)),
    "miss": (-1, 0.4, ("sadness",)),
    "mistake": (-2, 0.5, ("sadness",)),
    "negative": (-2, 0.5, ("sadness",)),
    "nervous": (-2, 0.5, ("fear",)),
    "problem": (-2, 0.5, ("sadness",)),
    "regret": (-2, 0.6, ("sadness",)),
    "reject": (-2, 0.6, ("sadness",)),
    "risk": (-1, 0.4, ("fear",)),
    "sad": (-2, 0.7, ("sadness",)),
    "scare": (-2, 0.6, ("fear",)),
    "slow": (-1, 0.3, ("anger",)),
    "sorry": (-1, 0.5, ("sadness",)),
    "stress": (-2, 0.6, ("fear", "anger")),
    "struggle": (-2, 0.5, ("sadness", "fear")),
    "stuck": (-1, 0.4, ("sadness",)),
    "tired": (-1, 0.4, ("sadness",)),
    "trouble": (-2, 0.5, ("fear",)),
    "ugly": (-2, 0.5, ("disgust",)),
    "uncomfortable": (-2, 0.4, ("fear",)),
    "unfair": (-2, 0.6, ("anger",)),
    "unhappy": (-2, 0.6, ("sadness",)),
    "upset": (-2, 0.6, ("anger", "sadness")),
    "useless": (-2, 0.5, ("sadness",)),
    "wait": (-1, 0.3, ("anticipation",)),
    "weak": (-1, 0.4, ("fear",)),
    "weird": (-1, 0.3, ("surprise", "disgust")),
    "worry": (-2, 0.6, ("fear",)),
    "wrong": (-2, 0.5, ("sadness",)),

    # Strongly negative
    "abuse": (-4, 0.9, ("anger", "fear")),
    "angry": (-3, 0.8, ("anger",)),
    "awful": (-4, 0.85, ("disgust",)),
    "betray": (-4, 0.9, ("anger", "sadness")),
    "catastrophe": (-4, 0.9, ("fear", "sadness")),
    "cheat": (-3, 0.8, ("anger", "disgust")),
    "corrupt": (-3, 0.8, ("anger", "disgust")),
    "cruel": (-4, 0.85, ("anger", "fear")),
    "damage": (-3, 0.7, ("fear", "anger")),
    "danger": (-3, 0.8, ("fear",)),
    "dangerous": (-3, 0.8, ("fear",)),
    "dead": (-3, 0.8, ("sadness", "fear")),
    "death": (-4, 0.9, ("sadness", "fear")),
    "destroy": (-4, 0.85, ("anger", "fear")),
    "disaster": (-4, 0.9, ("fear", "sadness")),
    "disgust": (-3, 0.8, ("disgust",)),
    "disgusting": (-4, 0.85, ("disgust",)),
    "dread": (-3, 0.8, ("fear",)),
    "enemy": (-3, 0.7, ("anger", "fear")),
    "evil": (-4, 0.9, ("fear", "anger")),
    "fake": (-3, 0.7, ("anger", "disgust")),
    "fraud": (-4, 0.85, ("anger", "disgust")),
    "grief": (-4, 0.9, ("sadness",)),
    "hate": (-4, 0.9, ("anger",)),
    "horrible": (-4, 0.85, ("fear", "disgust")),
    "horrify": (-4, 0.9, ("fear",)),
    "horror": (-4, 0.9, ("fear",)),
    "hurt": (-3, 0.7, ("sadness", "anger")),
    "idiot": (-3, 0.7, ("anger", "disgust")),
    "insult": (-3, 0.7, ("anger",)),
    "kill": (-4, 0.9, ("fear", "anger")),
    "liar": (-3, 0.8, ("anger", "disgust")),
    "lie": (-3, 0.7, ("anger", "disgust")),
    "miserable": (-4, 0.85, ("sadness",)),
    "murder": (-5, 1.0, ("fear", "anger")),
    "nightmare": (-4, 0.85, ("fear",)),
    "pain": (-3, 0.7, ("sadness", "fear")),
    "pathetic": (-3, 0.7, ("disgust", "sadness")),
    "poison": (-3, 0.8, ("fear", "disgust")),
    "rage": (-4, 0.9, ("anger",)),
    "ruin": (-3, 0.8, ("sadness", "anger")),
    "scam": (-4, 0.85, ("anger", "disgust")),
    "shame": (-3, 0.8, ("sadness",)),
    "shit": (-3, 0.7, ("anger", "disgust")),
    "shock": (-3, 0.8, ("surprise", "fear")),
    "sick": (-2, 0.6, ("sadness", "disgust")),
    "spam": (-3, 0.6, ("anger", "disgust")),
    "stupid": (-3, 0.7, ("anger", "disgust")),
    "suffer": (-3, 0.8, ("sadness",)),
    "terrible": (-4, 0.85, ("fear", "sadness")),
    "terrify": (-4, 0.9, ("fear",)),
    "terror": (-4, 0.9, ("fear",)),
    "threat": (-3, 0.8, ("fear",)),
    "toxic": (-3, 0.8, ("disgust", "fear")),
    "tragedy": (-4, 0.9, ("sadness",)),
    "tragic": (-4, 0.85, ("sadness",)),
    "trauma": (-4, 0.9, ("fear", "sadness")),
    "victim": (-3, 0.7, ("sadness", "fear")),
    "violence": (-4, 0.9, ("fear", "anger")),
    "violent": (-4, 0.85, ("fear", "anger")),
    "waste": (-2, 0.5, ("sadness", "anger")),
    "worst": (-4, 0.85, ("sadness", "anger")),
    "worthless": (-3, 0.8, ("sadness",)),
}

SENTIMENT_LEXICON: dict[str, LexiconEntry] = {
    word: LexiconEntry(score, intensity, tuple(EmotionCategory(e) for e in tags))
    for word, (score, intensity, tags) in _RAW_LEXICON.items()
}

INTENSIFIERS: dict[str, float] = {
    "absolutely": 1.5, "completely": 1.4, "definitely": 1.3,
    "extremely": 1.5, "greatly": 1.3, "highly": 1.3, "incredibly": 1.5,
    "insanely": 1.6, "literally": 1.2, "particularly": 1.2,
    "perfectly": 1.4, "purely": 1.3, "quite": 1.2, "really": 1.3,
    "remarkably": 1.3, "so": 1.3, "super": 1.4, "totally": 1.4,
    "truly": 1.3, "utterly": 1.5, "very": 1.3,
}

# Multi-word entries are matched as phrases over the token sequence.
DIMINISHERS: dict[str, float] = {
    "a bit": 0.6, "a little": 0.6, "barely": 0.4, "fairly": 0.7,
    "hardly": 0.3, "kind of": 0.6, "kinda": 0.6, "less": 0.6,
    "marginally": 0.5, "merely": 0.5, "mildly": 0.6, "moderately": 0.7,
    "only": 0.7, "partially": 0.6, "pretty": 0.8, "rather": 0.7,
    "slightly": 0.5, "somewhat": 0.6, "sort of": 0.6, "sorta": 0.6,
}

NEGATIONS: frozenset[str] = frozenset({
    "not", "n't", "no", "never", "neither", "nobody", "nothing", "nowhere",
    "none", "without", "hardly", "barely", "scarcely", "seldom", "rarely",
    "don't", "doesn't", "didn't", "won't", "wouldn't", "couldn't",
    "shouldn't", "can't", "cannot",
})

NEGATION_WINDOW = 3
NEGATION_FACTOR = -0.5
MAX_WORD_SCORE = 5.0
