"""English stop words for token flags and keyword filtering."""

# Function words flagged by the tokenizer (Token.is_stop_word).
STOP_WORDS: frozenset[str] = frozenset({
    "a", "an", "the", "and", "or", "but", "in", "on", "at", "to", "for",
    "of", "with", "by", "from", "up", "about", "into", "through", "during",
    "before", "after", "above", "below", "between", "under", "again",
    "further", "then", "once", "here", "there", "when", "where", "why",
    "how", "all", "each", "few", "more", "most", "other", "some", "such",
    "no", "nor", "not", "only", "own", "same", "so", "than", "too", "very",
    "s", "t", "can", "will", "just", "don", "should", "now", "i", "me",
    "my", "myself", "we", "our", "ours", "ourselves", "you", "your",
    "yours", "yourself", "yourselves", "he", "him", "his", "himself", "she",
    "her", "hers", "herself", "it", "its", "itself", "they", "them",
    "their", "theirs", "themselves", "what", "which", "who", "whom", "this",
    "that", "these", "those", "am", "is", "are", "was", "were", "be",
    "been", "being", "have", "has", "had", "having", "do", "does", "did",
    "doing", "would", "could", "ought", "as", "until", "while", "if",
    "because", "against", "both", "any", "over",
})

# Keyword extraction additionally drops contractions and common verb forms.
KEYWORD_STOP_WORDS: frozenset[str] = STOP_WORDS | frozenset({
    "add", "added", "adding", "allow", "allowed", "allowing", "also",
    "appear", "appeared", "appearing", "aren't", "ask", "asked", "asking",
    "began", "begin", "beginning", "begun", "believe", "believed",
    "believing", "bought", "bring", "bringing", "brought", "build",
    "building", "built", "buy", "buying", "call", "called", "calling",
    "came", "can't", "cannot", "change", "changed", "changing", "come",
    "coming", "consider", "considered", "considering", "continue",
    "continued", "continuing", "couldn't", "create", "created", "creating",
    "cut", "cutting", "decide", "decided", "deciding", "didn't", "die",
    "died", "doesn't", "don't", "down", "dying", "expect", "expected",
    "expecting", "fall", "fallen", "falling", "feel", "feeling", "fell",
    "felt", "find", "finding", "follow", "followed", "following", "found",
    "gave", "get", "getting", "give", "given", "giving", "go", "going",
    "gone", "got", "grew", "grow", "growing", "grown", "hadn't", "happen",
    "happened", "happening", "hasn't", "haven't", "he'd", "he'll", "he's",
    "hear", "heard", "hearing", "held", "here's", "hold", "holding",
    "how's", "i'd", "i'll", "i'm", "i've", "include", "included",
    "including", "isn't", "it's", "keep", "keeping", "kept", "kill",
    "killed", "killing", "knew", "know", "knowing", "known", "lead",
    "leading", "learn", "learned", "learning", "leave", "leaving", "led",
    "left", "let", "let's", "letting", "like", "live", "lived", "living",
    "lose", "losing", "lost", "love", "loved", "loving", "made", "make",
    "making", "may", "meet", "meeting", "met", "might", "move", "moved",
    "moving", "mustn't", "off", "offer", "offered", "offering", "open",
    "opened", "opening", "out", "paid", "pass", "passed", "passing", "pay",
    "paying", "play", "played", "playing", "provide", "provided",
    "providing", "pull", "pulled", "pulling", "raise", "raised", "raising",
    "ran", "reach", "reached", "reaching", "read", "reading", "remain",
    "remained", "remaining", "remember", "remembered", "remembering",
    "report", "reported", "reporting", "require", "required", "requiring",
    "run", "running", "sat", "saw", "see", "seeing", "seem", "seemed",
    "seeming", "seen", "sell", "selling", "send", "sending", "sent",
    "serve", "served", "serving", "set", "setting", "shall", "shan't",
    "she'd", "she'll", "she's", "shouldn't", "show", "showed", "showing",
    "shown", "sit", "sitting", "sold", "speak", "speaking", "spend",
    "spending", "spent", "spoke", "spoken", "stand", "standing", "stay",
    "stayed", "staying", "stood", "stop", "stopped", "stopping", "suggest",
    "suggested", "suggesting", "take", "taken", "taking", "tell", "telling",
    "that's", "there's", "they'd", "they'll", "they're", "they've", "think",
    "thinking", "thought", "told", "took", "tried", "try", "trying",
    "understand", "understanding", "understood", "use", "used", "using",
    "wait", "waited", "waiting", "walk", "walked", "walking", "want",
    "wanted", "wanting", "wasn't", "watch", "watched", "watching", "we'd",
    "we'll", "we're", "we've", "went", "weren't", "what's", "when's",
    "where's", "who's", "why's", "win", "winning", "won", "won't", "work",
    "worked", "working", "wouldn't", "write", "writing", "written", "wrote",
    "you'd", "you'll", "you're", "you've",
})


def is_stop_word(word: str) -> bool:
    return word.lower() in STOP_WORDS
