"""
Static word lists for ChatSignal v1
Polish + English lexicons shared by the text-scoring modules (read-only)
"""

import re
from types import MappingProxyType
from typing import Dict, FrozenSet, Tuple

from . import lexicon_data

# ============================================================================
# STOPWORDS
# ============================================================================

STOPWORDS: FrozenSet[str] = frozenset([
    # English
    "i", "me", "my", "myself", "we", "our", "ours", "ourselves", "you", "your", "yours",
    "yourself", "yourselves", "he", "him", "his", "himself", "she", "her", "hers",
    "herself", "it", "its", "itself", "they", "them", "their", "theirs", "themselves",
    "what", "which", "who", "whom", "this", "that", "these", "those", "am", "is", "are",
    "was", "were", "be", "been", "being", "have", "has", "had", "having", "do", "does",
    "did", "doing", "a", "an", "the", "and", "but", "if", "or", "because", "as", "until",
    "while", "of", "at", "by", "for", "with", "about", "against", "between", "through",
    "during", "before", "after", "above", "below", "to", "from", "up", "down", "in",
    "out", "on", "off", "over", "under", "again", "further", "then", "once", "here",
    "there", "when", "where", "why", "how", "all", "both", "each", "few", "more", "most",
    "other", "some", "such", "no", "nor", "not", "only", "own", "same", "so", "than",
    "too", "very", "s", "t", "can", "will", "just", "don", "should", "now", "d", "ll",
    "m", "o", "re", "ve", "y", "ain", "aren", "couldn", "didn", "doesn", "hadn", "hasn",
    "haven", "isn", "ma", "mightn", "mustn", "needn", "shan", "shouldn", "wasn",
    "weren", "won", "wouldn", "ok", "yes", "yeah", "yep", "nah", "nope", "oh",
    "ah", "um", "uh", "like", "lol", "haha", "hahaha", "xd", "xdd",
    # Polish
    "w", "z", "na", "do", "to", "je", "się", "nie", "że", "co", "tak", "za", "ale",
    "od", "po", "jak", "już", "mi", "ty", "ja", "ten", "ta", "te", "go", "mu", "czy",
    "jest", "są", "był", "była", "było", "być", "mam", "masz", "si", "tu",
    "tam", "też", "tym", "tego", "tej", "tych", "bo", "ze", "sobie", "tylko", "jeszcze",
    "może", "trzeba", "bardzo", "teraz", "kiedy", "gdzie", "dlaczego", "bez", "przy",
    "nad", "pod", "przed", "przez", "dla", "ani", "albo", "u", "ku", "aż",
    "juz", "sie", "moze", "tez", "wiec", "czyli", "dobra",
])

# ============================================================================
# SENTIMENT
# ============================================================================

POSITIVE_WORDS: Tuple[str, ...] = (
    # Polish: affection, love, admiration
    "kocham", "kochanie", "kochany", "kochana", "kochani",
    "uwielbiam", "lubię", "lubie", "adoruję", "adoruje",
    "tęsknię", "tesknię", "tesknie",
    "przytulam", "buziaki", "całuski", "caluski", "buziak",
    "serce", "serduszko", "skarbie", "kotku", "misiu",
    # Polish: praise, enthusiasm
    "cudownie", "cudowny", "cudowna", "cudowne",
    "świetnie", "świetny", "świetna", "świetne",
    "super", "mega", "ekstra", "extra",
    "pięknie", "piękny", "piękna", "piękne",
    "wspaniale", "wspaniały", "wspaniała", "wspaniałe",
    "genialnie", "genialny", "genialna", "genialne",
    "fantastycznie", "fantastyczny", "fantastyczna", "fantastyczne",
    "niesamowicie", "niesamowite", "niesamowity", "niesamowita",
    "idealnie", "idealne", "idealny", "idealna",
    "ślicznie", "śliczny", "śliczna", "śliczne",
    "rewelacja", "rewelacyjnie", "rewelacyjny", "rewelacyjna",
    "perfekcyjnie", "perfekcyjny", "perfekcyjna",
    # Polish: positive adjectives / states
    "dobrze", "dobry", "dobra", "dobre",
    "fajnie", "fajny", "fajna", "fajne",
    "miło", "miły", "miła", "miłe",
    "przyjemnie", "przyjemny", "przyjemna",
    "najlepszy", "najlepsza", "najlepsze", "najlepiej",
    "szczęśliwy", "szczęśliwa", "szczęśliwe", "szczęście",
    "zadowolony", "zadowolona", "zadowolone",
    "wdzięczny", "wdzięczna", "wdzięczne",
    "dumny", "dumna", "dumne",
    "radość", "radosny", "radosna", "radosne",
    "spokojny", "spokojna", "spokojne", "spokojnie",
    "uroczy", "urocza", "urocze",
    # Polish: exclamations, reactions
    "brawo", "brawa", "gratulacje", "gratki",
    "dziękuję", "dzięki", "dzięks",
    "hurra", "hura", "jejku",
    "wreszcie", "nareszcie",
    "udało", "udany", "udana", "udane",
    "sukces", "wygrana", "wygraliśmy",
    # Polish: slang, informal
    "zajebiście", "zajebisty", "zajebista", "zajebiste",
    "spoko", "spokojko", "spoczko",
    "kozak", "kozacki", "kozacka", "kozacko",
    "petarda", "bomba", "czad", "czadowy", "czadowa",
    "sztos", "sztosiwo", "sztosik",
    "cudo", "cud",
    "git", "gitara", "gituwa",
    "odjazd", "odjazdowy", "odjazdowa",
    "niezły", "niezła", "niezle", "niezłe",
    "zarąbisty", "zarąbista",
    "wow", "łał",
    # Polish: emotional engagement
    "cieszę", "cieszysz", "cieszymy",
    "zachwycam", "zachwycony", "zachwycona", "zachwycające",
    # English: love, affection
    "love", "adore", "cherish", "miss", "hug", "kiss",
    "darling", "sweetheart", "babe", "baby", "honey",
    # English: praise, enthusiasm
    "amazing", "awesome", "great", "perfect", "beautiful",
    "wonderful", "lovely", "excellent", "brilliant", "incredible",
    "fantastic", "outstanding", "superb", "magnificent", "spectacular",
    "phenomenal", "remarkable", "extraordinary", "fabulous", "marvelous",
    # English: positive states
    "happy", "glad", "grateful", "thankful", "proud",
    "excited", "thrilled", "delighted", "pleased", "joyful",
    "blessed", "lucky", "cheerful", "optimistic", "hopeful",
    "confident", "content", "satisfied", "peaceful", "calm",
    # English: reactions, exclamations
    "thank", "thanks", "congrats", "congratulations", "bravo",
    "omg", "yay", "woohoo", "hurray",
    "finally", "success", "winning",
    # English: slang, informal
    "fire", "lit", "dope", "epic",
    "goat", "based", "vibes", "slay",
    "iconic", "legendary", "unreal",
    "nice", "cool", "sweet", "chill", "solid",
    "best",
)

NEGATIVE_WORDS: Tuple[str, ...] = (
    # Polish: hatred, contempt
    "nienawidzę", "nienawidze", "nienawiść",
    "pogarda", "odraza", "wstręt",
    "obrzydliwe", "obrzydliwy", "obrzydliwa",
    # Polish: negative intensifiers
    "okropnie", "okropny", "okropna", "okropne",
    "strasznie", "straszny", "straszna", "straszne",
    "beznadziejnie", "beznadziejny", "beznadziejna", "beznadziejne",
    "fatalnie", "fatalny", "fatalna", "fatalne",
    "tragicznie", "tragiczny", "tragiczna", "tragiczne",
    "żałosne", "żałosny", "żałosna",
    "kiepski", "kiepska", "kiepskie", "kiepsko",
    "słaby", "słaba", "słabe", "słabo",
    # Polish: anger, irritation
    "wkurza", "wkurzony", "wkurzona", "wkurzające",
    "wkurwiający", "wkurwiająca",
    "denerwuje", "denerwujący", "denerwująca",
    "zdenerwowany", "zdenerwowana", "zdenerwowane",
    "sfrustrowany", "sfrustrowana", "sfrustrowane",
    "wściekły", "wściekła",
    "zły", "zła", "złe", "złość",
    "gniew", "gniewny", "gniewna",
    # Polish: sadness, suffering
    "smutno", "smutny", "smutna", "smutne", "smutek",
    "przykro", "przykry", "przykra",
    "boli", "ból", "bolące",
    "cierpię", "cierpienie",
    "martwię", "martwi",
    "płaczę", "płakać",
    "samotny", "samotna", "samotne", "samotność",
    "nieszczęśliwy", "nieszczęśliwa", "nieszczęśliwe",
    # Polish: disappointment, failure
    "rozczarowany", "rozczarowana", "rozczarowane", "rozczarowanie",
    "zawiedziony", "zawiedziona", "zawiedzeni",
    "załamany", "załamana",
    "porażka", "klęska",
    "zawód", "katastrofa", "koszmar",
    "dramat", "dramatyczny", "dramatyczna",
    "dno",
    # Polish: fear, anxiety
    "boję", "strach", "lęk",
    "obawa", "obawy", "przerażony", "przerażona",
    "niepokój", "nerwowy", "nerwowa",
    "panika", "stres", "stresujący",
    # Polish: guilt, shame (apologies are repair behaviour, not negative)
    "wstyd", "wina", "winny", "winna",
    "żal", "żałuję",
    # Polish: negative social
    "toksyczny", "toksyczna", "toksyczne",
    "manipulacja", "manipuluje", "manipulujący",
    "kłamstwo", "kłamca", "kłamiesz",
    "zdrada", "zdrajca", "zdradzić", "zdradza",
    "oszustwo", "oszust", "oszustka",
    "ignorujesz", "ignoruje", "olewa", "olewasz", "olejesz",
    # Polish: profanity
    "cholera", "kurwa", "kurde", "kurcze",
    "szlag",
    "pierdolę", "pierdol",
    "jebać", "jebany", "jebana",
    "gówno",
    "spierdolić", "spierdalaj",
    "chuj", "chujowy", "chujowa",
    # Polish: bleak markers
    "brak", "nigdy", "niestety",
    "rozpacz", "bezsens", "bezsensu",
    "frustracja", "frustrujące",
    # English: anger, hatred
    "hate", "angry", "furious", "rage", "enraged",
    "annoying", "annoyed", "irritating", "irritated",
    "pissed", "mad", "livid",
    # English: sadness, suffering
    "sad", "upset", "depressed", "miserable", "heartbroken",
    "cry", "crying", "tears", "sobbing",
    "lonely", "alone", "empty", "numb", "hopeless",
    "devastated", "broken", "shattered",
    # English: fear, anxiety
    "scared", "afraid", "terrified", "anxious", "worried",
    "nervous", "panicked", "dread", "frightened",
    # English: negative adjectives
    "terrible", "horrible", "awful", "disgusting", "gross",
    "worst", "stupid", "idiot", "pathetic", "ridiculous",
    "ugly", "dumb", "lame", "trash", "garbage",
    "toxic", "boring", "cringe", "crappy", "lousy",
    "useless", "worthless", "pointless", "meaningless",
    # English: disappointment
    "disappointed", "frustrated", "failed", "failure",
    "regret", "shame", "guilty", "blame",
    "never", "nothing", "nobody",
    # English: profanity
    "fuck", "fucking", "shit", "shitty", "damn",
    "asshole", "bastard", "bitch",
    "wtf", "stfu",
)

# Core lists plus the extended word lists; default scorer dictionaries
SENTIMENT_POSITIVE_WORDS: Tuple[str, ...] = (
    POSITIVE_WORDS
    + lexicon_data.PL_EMO_POSITIVE
    + lexicon_data.NAWL_POSITIVE
    + lexicon_data.PL_EXTENDED_POSITIVE
    + lexicon_data.SP_POSITIVE
)

SENTIMENT_NEGATIVE_WORDS: Tuple[str, ...] = (
    NEGATIVE_WORDS
    + lexicon_data.PL_EMO_NEGATIVE
    + lexicon_data.NAWL_NEGATIVE
    + lexicon_data.PL_EXTENDED_NEGATIVE
    + lexicon_data.SP_NEGATIVE
)

# Negation particles. "no" is excluded: in Polish it is a filler ("no tak", "no dobra").
NEGATION_PL: FrozenSet[str] = frozenset(["nie", "bez", "ani"])
NEGATION_EN: FrozenSet[str] = frozenset([
    "not", "dont", "cant", "wont", "isnt", "arent", "wasnt",
    "werent", "hasnt", "havent", "doesnt", "didnt", "couldnt",
    "wouldnt", "shouldnt", "never",
])
NEGATION_ALL: FrozenSet[str] = NEGATION_PL | NEGATION_EN

# Words that reliably mark a message as English (rare in Polish chat)
EN_SENTENCE_RE = re.compile(
    r"\b(the|this|that|with|from|they|them|their|you're|i'm|i'll|i've|we're|"
    r"it's|that's|what's|there's|here's|she's|he's)\b",
    re.IGNORECASE,
)

# QWERTY adjacency for typo candidates
QWERTY_NEIGHBORS: Dict[str, str] = MappingProxyType({
    "q": "wa", "w": "qeasd", "e": "wrdsf", "r": "etfgd",
    "t": "rygfh", "y": "tuhgj", "u": "yijhk", "i": "uojkl",
    "o": "ipkl", "p": "ol",
    "a": "qwsxz", "s": "awedxzc", "d": "serfcxv", "f": "drtgcvb",
    "g": "ftyhvbn", "h": "gyujbnm", "j": "huiknm", "k": "jiolm",
    "l": "kop",
    "z": "asx", "x": "zsdc", "c": "xdfv", "v": "cfgb",
    "b": "vghn", "n": "bhjm", "m": "njk",
})

# Polish inflection: suffix to strip -> base endings to try. Longest suffixes first.
INFLECTION_SUFFIXES: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    # present participle
    ("ującego", ("ujący", "ująca", "ujące")),
    ("ującemu", ("ujący", "ująca", "ujące")),
    ("ującą", ("ujący", "ująca", "ujące")),
    ("ującym", ("ujący", "ująca", "ujące")),
    ("ując", ("ujący", "ująca", "ujące")),
    # soft-stem adjective gen/dat
    ("iego", ("y", "a", "e", "i", "ie")),
    ("iemu", ("y", "a", "e", "i", "ie")),
    # hard-stem adjective gen/dat
    ("ego", ("y", "a", "e", "ie", "nie")),
    ("emu", ("y", "a", "e", "ie", "nie")),
    # instrumental / locative adjective
    ("ymi", ("y", "a", "e")),
    ("imi", ("y", "a", "e", "i")),
    # plural genitive adjective
    ("ych", ("y", "a", "e")),
    ("ich", ("y", "a", "e", "i")),
    # feminine gen/dat singular
    ("iej", ("a", "ie", "y", "")),
    # noun dative
    ("owi", ("", "a")),
    # noun plural
    ("ami", ("", "a")),
    ("ach", ("", "a", "ie")),
    ("om", ("", "a")),
    # abstract nouns
    ("ości", ("y", "a", "ość")),
    # verb past tense
    ("łem", ("ć", "ać", "yć", "")),
    ("łam", ("ć", "ać", "yć", "")),
    ("łeś", ("ć", "ać", "yć", "")),
    ("łaś", ("ć", "ać", "yć", "")),
)

# ============================================================================
# CONFLICT
# ============================================================================

ACCUSATORY_BIGRAMS: FrozenSet[Tuple[str, str]] = frozenset([
    # Polish
    ("ty", "zawsze"), ("ty", "nigdy"), ("zawsze", "ty"),
    ("twoja", "wina"), ("dlaczego", "ty"), ("przez", "ciebie"),
    ("ciągle", "ty"), ("znowu", "ty"),
    # English
    ("you", "always"), ("you", "never"), ("your", "fault"), ("you", "ruin"),
    ("why", "you"), ("blame", "you"),
])

# ============================================================================
# INTIMACY
# ============================================================================

EMOTIONAL_WORDS: FrozenSet[str] = frozenset([
    # Polish, positive
    "kocham", "kochanie", "kochana", "kochany", "kochanko", "tęsknię", "tęsknie",
    "tęsknota", "cudownie", "cudowny", "cudowna", "wspaniale", "wspaniały", "wspaniała",
    "szczęście", "szczescie", "pięknie", "pieknie", "piękna", "piekna", "piękny",
    "przepraszam", "przytulam", "buziaki", "buziak", "kochać",
    "najlepsza", "najlepszy", "skarbie", "kochasz", "kocha", "serce", "serduszko",
    "ślicznie", "slicznie", "śliczna", "sliczna", "uwielbiam", "idealna", "idealny",
    "szaleję", "szaleje", "obiecuję", "obiecuje", "wdzięczna", "wdzieczna",
    # Polish, negative
    "nienawidzę", "nienawidze", "nienawiść", "nienawisc", "złość", "zlosc",
    "wściekły", "wsciekly", "wściekła", "wsciekla", "wkurzony", "wkurzona",
    "wnerwiasz", "denerwujesz", "boli", "bolało", "bolalo", "płaczę", "placze",
    "smutno", "smutna", "smutny", "żal", "zal", "samotna", "samotny", "samotność",
    "strach", "boję", "boje", "boisz", "przestraszona", "przestraszony", "rozczarowana",
    "rozczarowany", "zdrada", "zdradziłeś", "zdradzilas", "kłamiesz", "klamiesz",
    "oszukujesz", "ból", "bol", "cierpienie", "cierpię", "cierpie",
    # English, positive
    "love", "adore", "miss", "missing", "beautiful", "wonderful", "amazing",
    "gorgeous", "incredible", "fantastic", "happiness", "grateful", "thankful",
    "appreciate", "cherish", "treasure", "sweetheart", "darling", "honey",
    "babe", "baby", "sweetie", "perfect", "paradise", "blessed", "proud",
    "passionate", "desire", "dream", "dreaming", "forever", "always",
    # English, negative
    "hate", "angry", "furious", "hurt", "crying", "depressed", "devastated",
    "heartbroken", "betrayed", "jealous", "lonely", "afraid", "scared",
    "terrified", "disappointed", "disgusted", "miserable", "suffering",
    "painful", "hopeless", "desperate", "broken", "destroyed", "nightmare",
    "betrayal", "cheating", "lying", "manipulation", "toxic", "abuse",
])

# ============================================================================
# PRONOUNS
# ============================================================================

I_WORDS: FrozenSet[str] = frozenset([
    # Polish: ja and its cases, possessives, reflexives
    "ja", "mnie", "mi", "mną", "mna",
    "mój", "moj", "moja", "moje", "moich", "moim", "moimi",
    "mojej", "mojemu", "moją",
    "sobie", "siebie",
    # English
    "i", "me", "my", "mine", "myself",
])

WE_WORDS: FrozenSet[str] = frozenset([
    # Polish ("my" is shadowed by English "my" in I_WORDS, checked first)
    "my", "nas", "nam", "nami",
    "nasz", "nasza", "nasze", "naszego", "naszej", "naszemu",
    "naszym", "naszą", "naszych", "naszymi",
    # English
    "we", "us", "our", "ours", "ourselves",
])

YOU_WORDS: FrozenSet[str] = frozenset([
    # Polish singular
    "ty", "ciebie", "cię", "cie", "ci", "tobie", "tobą", "toba",
    "twój", "twoj", "twoja", "twoje", "twojego", "twojej", "twojemu",
    "twoim", "twoją", "twoich", "twoimi",
    # Polish plural
    "wy", "was", "wam", "wami",
    "wasz", "wasza", "wasze", "waszego", "waszej", "waszemu",
    "waszym", "waszą", "waszych", "waszymi",
    # English
    "you", "your", "yours", "yourself", "yourselves",
])

# ============================================================================
# SHIFT / SUPPORT
# ============================================================================

SELF_START: FrozenSet[str] = frozenset([
    # Polish
    "ja", "mi", "mnie", "mój", "moja", "moje", "mam", "miałem", "miałam",
    "u", "też", "tez", "zresztą", "właściwie", "swoją", "btw", "nawiasem",
    "moim", "mojej", "moich",
    # English
    "me", "my", "mine", "also", "anyway", "i",
])

ACKNOWLEDGMENT_TOKENS: FrozenSet[str] = frozenset([
    # Polish
    "tak", "no", "aha", "mhm", "dokładnie", "dokladnie", "racja", "okej",
    "faktycznie", "właśnie", "wlasnie", "serio", "naprawdę", "naprawde",
    "wow", "ojej", "omg", "matko", "jezus", "kurde", "boże", "boze",
    # English
    "yeah", "yes", "right", "exactly", "true", "sure", "absolutely",
    "definitely", "totally", "seriously", "really",
])

PARTNER_REFERENCE: FrozenSet[str] = frozenset([
    # Polish
    "ty", "ci", "ciebie", "tobie", "twój", "twoja", "twoje", "twojej", "twoim",
    # English
    "you", "your", "yours", "yourself",
])

QUESTION_STARTS: FrozenSet[str] = frozenset([
    "co", "jak", "kiedy", "gdzie", "dlaczego", "czemu", "czy", "kto",
    "który", "która", "które", "ile", "skąd", "po",
    "what", "how", "when", "where", "why", "who", "which",
    "did", "do", "does", "is", "are", "was", "were", "will", "have",
    "can", "could", "would", "should",
])

# ============================================================================
# EMOTION CATEGORIES
# ============================================================================

EMOTION_LEXICON: Dict[str, Tuple[str, ...]] = MappingProxyType({
    "joy": (
        "szczęśliwy", "szczęśliwa", "szczęście", "radość", "radosny", "radosna", "cieszę", "cieszy",
        "wesoły", "wesoła", "uśmiech", "śmieję", "śmieje", "bawię", "fajnie", "super", "świetnie",
        "ekstra", "bomba", "bosko", "cudownie", "wspaniale",
        "happy", "happiness", "joy", "joyful", "glad", "pleased", "delighted", "cheerful",
        "great", "wonderful", "amazing", "fantastic", "awesome",
    ),
    "sadness": (
        "smutny", "smutna", "smutek", "smutno", "płaczę", "płakał", "płakała", "żal",
        "żałuję", "tęsknię", "tęsknota", "boli", "martwię", "żałosne", "ponuro", "ponury",
        "sad", "sadness", "unhappy", "depressed", "miserable", "crying", "lonely",
        "hopeless", "heartbroken", "grief", "sorrow", "miss",
    ),
    "anger": (
        "zły", "zła", "złość", "wkurwiony", "wkurwiona", "wkurwia", "wkurw",
        "wściekły", "wściekła", "wściekłość", "irytuje", "irytacja", "denerwuje",
        "nerwy", "nienawidzę", "nienawiść", "furia", "agresja", "cholera",
        "angry", "anger", "furious", "rage", "mad", "annoyed", "irritated", "hate",
        "pissed", "livid", "enraged", "hatred",
    ),
    "fear": (
        "boję", "boi", "strach", "straszny", "straszna", "przerażony", "przerażona",
        "przerażenie", "lęk", "niepokój", "panika", "nerwowy", "nerwowa", "stresuje",
        "afraid", "fear", "scared", "terrified", "anxious", "worried", "nervous",
        "panic", "dread", "frightened", "horror",
    ),
    "surprise": (
        "zaskoczony", "zaskoczona", "zaskoczenie", "niesamowite",
        "serio", "poważnie", "niemożliwe", "szok", "wow",
        "surprised", "shocking", "unexpected", "unbelievable", "omg", "seriously",
        "astonished", "amazed", "stunned", "whoa",
    ),
    "disgust": (
        "obrzydliwy", "obrzydliwa", "obrzydzenie", "ohydny", "fuj", "wstręt",
        "mdli", "paskudny", "paskudna",
        "disgusting", "disgusted", "gross", "revolting", "yuck", "horrible", "nasty",
    ),
    "anticipation": (
        "czekam", "podekscytowany", "podekscytowana",
        "planuję", "zamierzam",
        "anticipating", "hopeful", "eager",
    ),
    "trust": (
        "ufam", "zaufanie", "wierzę", "lojalny", "lojalna",
        "bezpiecznie", "spokojnie", "komfort", "swobodnie",
        "trust", "rely", "believe", "confident", "safe", "secure", "loyal",
    ),
    "frustration": (
        "frustracja", "sfrustrowany", "sfrustrowana",
        "znowu", "nieskutecznie",
        "frustrated", "frustrating", "useless", "pointless", "again", "always",
    ),
    "affection": (
        "kocham", "miłość", "serdeczność", "ciepło",
        "blisko", "bliski", "bliska", "przytulić", "buzi", "całuję", "misiu", "kotku",
        "love", "adore", "cherish", "fond", "affectionate", "hugs", "kiss",
        "darling", "sweetheart", "babe",
    ),
    "loneliness": (
        "samotny", "samotna", "samotność", "sam", "sama", "pusty", "pusta",
        "nikt", "nikogo", "odizolowany",
        "lonely", "alone", "isolated", "empty", "nobody",
    ),
    "pride": (
        "dumny", "dumna", "duma", "osiągnąłem", "osiągnęłam", "udało",
        "nareszcie", "pochwała",
        "proud", "accomplished", "achieved", "succeeded", "finally",
    ),
})

EMOTION_CATEGORY_LABELS: Dict[str, str] = MappingProxyType({
    "joy": "Radość",
    "sadness": "Smutek",
    "anger": "Złość",
    "fear": "Strach/Lęk",
    "surprise": "Zaskoczenie",
    "disgust": "Odraza",
    "anticipation": "Antycypacja",
    "trust": "Zaufanie",
    "frustration": "Frustracja",
    "affection": "Czułość",
    "loneliness": "Samotność",
    "pride": "Duma",
})


def _build_word_to_categories() -> Dict[str, Tuple[str, ...]]:
    index: Dict[str, list] = {}
    for category, words in EMOTION_LEXICON.items():
        for word in words:
            index.setdefault(word, []).append(category)
    return MappingProxyType({word: tuple(cats) for word, cats in index.items()})


WORD_TO_EMOTION_CATEGORIES: Dict[str, Tuple[str, ...]] = _build_word_to_categories()


# ============================================================================
# LANGUAGE STYLE MATCHING
# ============================================================================

# Function word categories (simplified LIWC). A token may sit in several.
LSM_CATEGORIES: Dict[str, FrozenSet[str]] = MappingProxyType({
    "articles": frozenset([
        "a", "an", "the",
        # Polish demonstratives used as articles
        "ten", "ta", "to", "tej", "tego", "temu", "tym", "te", "tych",
    ]),
    "prepositions": frozenset([
        "w", "na", "do", "za", "z", "ze", "od", "po", "przy", "nad", "pod",
        "przed", "między", "przez", "dla", "bez", "wśród", "wsrod", "obok",
        "koło", "kolo", "wokół", "wokol", "wobec", "poza", "mimo",
        "in", "on", "at", "for", "with", "to", "from", "by", "of",
        "about", "into", "through", "during", "before", "after",
        "above", "below", "between", "under", "over", "near",
    ]),
    "auxiliary_verbs": frozenset([
        "jest", "są", "był", "była", "było", "byli", "były",
        "będzie", "bedzie", "będą", "beda", "jestem", "jesteś", "jestes",
        "jesteśmy", "jestesmy", "byłem", "byłam", "bylam", "bylem",
        "można", "mozna", "trzeba", "powinno", "może", "moze",
        "is", "am", "are", "was", "were", "be", "been", "being",
        "have", "has", "had", "do", "does", "did",
        "will", "would", "shall", "should", "can", "could",
        "may", "might", "must",
    ]),
    "conjunctions": frozenset([
        "i", "ale", "lub", "albo", "bo", "ponieważ", "poniewaz",
        "więc", "wiec", "dlatego", "jednak", "natomiast", "chociaż", "chociaz",
        "że", "ze", "żeby", "zeby", "czy", "gdyby", "gdy", "kiedy",
        "and", "but", "or", "because", "so", "yet", "nor",
        "although", "though", "while", "since", "unless", "until",
        "if", "when", "where", "that", "which", "who",
    ]),
    "negations": frozenset([
        "nie", "nigdy", "żaden", "zaden", "żadna", "zadna", "żadne", "zadne",
        "nic", "nikt", "nigdzie", "ani",
        "not", "no", "never", "none", "nothing", "nobody", "nowhere", "neither",
    ]),
    "quantifiers": frozenset([
        "wszystko", "wszystkie", "wszyscy", "każdy", "kazdy", "każda", "kazda",
        "kilka", "kilku", "dużo", "duzo", "mało", "malo", "trochę", "troche",
        "wiele", "wielu", "parę", "pare", "niektóre", "niektore",
        "all", "some", "many", "few", "every", "each", "much",
        "several", "any", "most", "both", "enough", "more", "less",
    ]),
    "personal_pronouns": frozenset([
        "ja", "mnie", "mi", "mną", "mna",
        "ty", "ciebie", "ci", "cię", "cie", "tobą", "toba",
        "on", "go", "mu", "nim", "niego", "niej", "nią", "nia",
        "ona", "jej",
        "my", "nas", "nam", "nami",
        "wy", "was", "wam", "wami",
        "oni", "one", "ich", "im", "nimi",
        "i", "me", "you", "he", "him", "she", "her",
        "we", "us", "they", "them", "it",
    ]),
    "impersonal_pronouns": frozenset([
        "to", "tamto", "coś", "cos", "ktoś", "ktos",
        "czegoś", "czegos", "kogoś", "kogos", "komuś", "komus",
        "sobie", "siebie", "się", "sie",
        "this", "that", "these", "those",
        "something", "someone", "anything", "anyone",
        "everything", "everyone", "itself", "themselves",
    ]),
    "adverbs": frozenset([
        "bardzo", "naprawdę", "naprawde", "zawsze", "właśnie", "wlasnie",
        "już", "juz", "jeszcze", "tylko", "też", "tez", "również", "rowniez",
        "chyba", "raczej", "pewnie", "może", "moze", "jakoś", "jakos",
        "dość", "dosc", "dosyć", "dosyc", "całkiem", "calkiem",
        "very", "really", "always", "just", "still", "already",
        "also", "too", "even", "quite", "pretty", "almost",
        "often", "sometimes", "probably", "maybe", "perhaps",
    ]),
})


# ============================================================================
# PURSUIT / WITHDRAWAL
# ============================================================================

# Substring markers of someone waiting for a reply
DEMAND_MARKERS: Tuple[str, ...] = (
    # Polish
    "dlaczego nie odpisujesz", "czemu nie odpisujesz",
    "halo", "hej?", "odpowiedz", "odpisz",
    "jesteś tam", "ej", "no hej", "napisz coś", "czekam",
    # English
    "hello?", "are you there", "why aren't you responding",
    "answer me", "respond", "hey?", "you there?",
)

# Whole-message markers; "what??" inside a sentence does not count
DEMAND_PUNCTUATION: FrozenSet[str] = frozenset(["??", "???", "????"])


# ============================================================================
# BIDS FOR CONNECTION
# ============================================================================

DISCLOSURE_STARTERS: Tuple[str, ...] = (
    "słuchaj", "wiesz co", "pamiętasz", "wyobraź", "muszę ci", "chciałem powiedzieć",
    "chciałam powiedzieć", "powiem ci", "właśnie", "mam coś", "miałem dzisiaj",
    "miałam dzisiaj", "coś mi się", "śmieszy mnie", "denerwuje mnie", "boli mnie",
    "listen", "you know what", "i wanted to tell", "i need to tell", "guess what",
    "something happened", "you will not believe",
)

# Dismissive replies; only count in short messages
DISMISS_TOKENS: Tuple[str, ...] = (
    "spoko", "nieważne", "zapomnij", "daj spokój", "bez sensu", "kogo to obchodzi",
    "whatever", "forget it", "nevermind", "don't care",
)


# ============================================================================
# CONVERSATIONAL REPAIR
# ============================================================================

# Speaker clarifies their own words
SELF_REPAIR_MARKERS: Tuple[str, ...] = (
    # Polish
    "tzn", "tzn.", "to znaczy", "w sensie", "w sumie", "właściwie", "właściwie to",
    "miałem na myśli", "miałam na myśli", "chodzi mi o", "chcę powiedzieć",
    "mam na myśli", "raczej chodzi mi o", "przepraszam mówiłem", "przepraszam mówiłam",
    "nie nie", "nie tak", "czekaj", "zaraz", "poczekaj", "znaczy",
    "znaczy się", "no bo", "bo właśnie", "hmm nie", "ej nie",
    "poprawka", "cofnę się", "cofam się",
    # English
    "i mean", "sorry i meant", "what i meant", "what i meant was",
    "wait no", "actually", "correction", "let me rephrase", "by that i mean",
    "to clarify", "no wait", "scratch that",
)

# Listener asks for clarification
OTHER_REPAIR_MARKERS: Tuple[str, ...] = (
    # Polish
    "co?", "hę?", "hę", "co masz na myśli", "co chcesz powiedzieć",
    "nie rozumiem", "o czym mówisz", "nie ogarniam", "nie za bardzo rozumiem",
    "możesz wytłumaczyć", "co to znaczy", "co to jest", "słucham?",
    "nie kapuję", "nie łapię", "serio?", "co ty piszesz", "co to ma znaczyć",
    "???", "hm?", "hmm?", "no i?", "i co z tego", "bo niby jak", "jak to",
    # English
    "what?", "huh?", "i don't follow", "i don't understand", "what do you mean",
    "what does that mean", "can you explain", "can you clarify", "i'm confused",
    "come again", "say that again", "pardon?", "sorry what", "run that by me again",
)
