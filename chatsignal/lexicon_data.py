"""
Extended sentiment word lists for ChatSignal v1

Polish and English forms beyond the hand-curated core in lexicons.py:
- PL_EMO: plWordNet-emo / polemo2.0 forms (CC-BY 4.0)
- NAWL: Nencki Affective Word List, Riegel et al. (2015), PLoS ONE (CC-BY 4.0)
- PL_EXTENDED: everyday conversational vocabulary
- SP: AFINN-165 translated to Polish (sentiment-polish 1.0.0, MIT)

Duplicates across lists are harmless: dictionaries are built as sets.
"""

from typing import Tuple

# ============================================================================
# plWordNet-emo / polemo2.0
# ============================================================================

PL_EMO_POSITIVE: Tuple[str, ...] = (
    # Polish: admiration, wonder
    "zachwyt", "zachwycający", "zachwycająca", "zachwycająco",
    "zachwycam",
    "olśniewający", "olśniewająca", "olśniewająco",
    "przepiękny", "przepiękna", "przepięknie",
    "bajeczny", "bajeczna", "bajeczne", "bajeczni", "bajeczność",
    "niezwykły", "niezwykła", "niezwykłe", "niezwykle",
    "wyjątkowy", "wyjątkowa", "wyjątkowe", "wyjątkowo",
    "doskonały", "doskonała", "doskonałe", "doskonale",
    "wyśmienity", "wyśmienita", "wyśmienicie",
    "zafascynowany", "zafascynowana", "zafascynowanie",
    "entuzjastyczny", "entuzjastyczna", "entuzjastycznie", "entuzjazm",
    # Polish: love & warmth (extended forms)
    "rozkochany", "rozkochana", "rozkochani",
    "zakochany", "zakochana", "zakochani",
    "tęskno",
    "serdeczny", "serdeczna", "serdecznie",
    "czuły", "czuła", "czułe", "czule",
    "kochani",
    # Polish: happiness, well-being
    "szczęśliwie",
    "błogi", "błoga", "błogo", "błogość",
    "rozkoszny", "rozkoszna", "rozkosznie", "rozkosz",
    "radośnie",
    "uśmiech", "uśmiechnięty", "uśmiechnięta", "uśmiechać",
    "pogodny", "pogodna", "pogodnie", "pogoda",
    "wesoły", "wesoła", "wesoło", "wesołość",
    "promieniejący", "promieniejąca", "promienny", "promiennie",
    "beztroski", "beztroska", "beztroski",
    "życzliwy", "życzliwa", "życzliwie", "życzliwość",
    # Polish: safety, calm
    "bezpieczny", "bezpieczna", "bezpiecznie", "bezpieczeństwo",
    "harmonijny", "harmonijnie", "harmonia",
    "opiekuńczy", "opiekuńcza", "opiekuńczo",
    "troskliwy", "troskliwa", "troskliwie", "troska",
    "uzdrawiający", "uzdrawiająca",
    # Polish: pride, achievement
    "dumnie",
    "wartościowy", "wartościowa", "wartościowe",
    "niezastąpiony", "niezastąpiona",
    "bezcenny", "bezcenna", "bezcenne",
    "zasługuje", "zasługujesz", "zasłużony", "zasłużona",
    # Polish: gratitude, inspiration
    "wdzięcznie",
    "zainspirowany", "zainspirowana", "zainspirowanie",
    "inspirujący", "inspirująca", "inspirująco",
    "motywujący", "motywująca", "motywująco",
    "budujący", "budująca", "budująco",
    "pozytywny", "pozytywna", "pozytywnie", "pozytywność",
    # Polish: comfort, healing
    "pocieszający", "pocieszająca", "pocieszająco",
    "wspierający", "wspierająca", "wsparcie",
    "pomocny", "pomocna", "pomocnie",
    "rozumiejący", "rozumiejąca",
    # English: admiration
    "gorgeous", "stunning", "breathtaking", "dazzling", "glorious",
    "charming", "delightful", "enchanting", "captivating",
    "exceptional", "terrific", "splendid",
    # English: care, emotional support
    "caring", "thoughtful", "supportive", "compassionate", "empathetic",
    "nurturing", "kind", "generous", "gentle", "patient",
    "warm", "tender", "devoted", "faithful", "loyal",
    # English: positive states
    "elated", "euphoric", "overjoyed", "ecstatic", "radiant", "vibrant",
    "inspired", "motivated", "energized", "empowered",
    "adore",
    # English: gratitude / appreciation
    "appreciate", "appreciated", "grateful",
    "treasured", "cherished", "valued",
    "precious",
)

PL_EMO_NEGATIVE: Tuple[str, ...] = (
    # Polish: intensified negativity
    "koszmarny", "koszmarnie", "koszmarność",
    "wstrętny", "wstrętna", "wstrętnie",
    "obrzydliwość", "obrzydliwie",
    "straszliwy", "straszliwie",
    "okropność",
    # Polish: anger (extended)
    "wkurwiony", "wkurwiona",
    "wkurwia",
    "sfrustrowanie",
    "rozgniewany", "rozgniewana",
    "oburzony", "oburzona", "oburzające", "oburzenie",
    "zirytowany", "zirytowana", "irytujący", "irytująca", "irytacja",
    "wściekłość",
    "złość",
    "zdenerwowanie",
    # Polish: hurt, betrayal, relationship pain
    "zdradził", "zdradziła", "zdradzić",
    "kłamie", "kłamał", "kłamała",
    "manipuluje", "manipulował", "manipulowała",
    "ignoruje", "ignorował", "ignorowała",
    "porzucił", "porzuciła", "porzucenie",
    "opuścił", "opuściła", "opuszczony", "opuszczona",
    "urażony", "urażona", "uraza",
    "zraniony", "zraniona", "zranienie",
    "skrzywdzony", "skrzywdzona", "krzywda",
    "zawiodłem", "zawiodłam", "zawiodłeś", "zawiodłaś",
    "zdrajca",
    # Polish: despair, breakdown
    "zrozpaczony", "zrozpaczona", "rozpaczliwy", "rozpaczliwie",
    "zdewastowany", "zdewastowana",
    "zdruzgotany", "zdruzgotana",
    "bezsilny", "bezsilna", "bezsilność",
    "bezsensowny", "bezsensowna", "bezsensownie",
    "przygnębiony", "przygnębiona", "przygnębienie",
    "zniechęcony", "zniechęcona", "zniechęcenie",
    "zagubiony", "zagubiona", "zagubienie",
    "wyczerpany", "wyczerpana", "wyczerpanie",
    "zmęczony", "zmęczona", "zmęczenie",
    "znudzony", "znudzona", "znudzenie",
    "apatyczny", "apatyczna", "apatia",
    # Polish: fear (extended)
    "przerażający", "przerażająca", "przerażająco",
    "spanikowany", "spanikowana",
    "przeraźliwy", "przeraźliwie",
    # Polish: toxicity, harm
    "agresywny", "agresywna", "agresywnie", "agresja",
    "brutalny", "brutalna", "brutalnie", "brutalność",
    "przemoc", "przemocowy", "przemocowa",
    "destrukcyjny", "destrukcyjna", "destrukcyjnie",
    "toksyczność",
    # Polish: loneliness, isolation
    "samotność",
    "odrzucony", "odrzucona", "odrzucenie",
    "wykluczony", "wykluczona", "wykluczenie",
    "niezrozumiany", "niezrozumiana",
    # English: strong negative emotions
    "dreadful", "vile", "despicable", "repulsive", "revolting",
    "hateful", "loathsome",
    "anguish", "despair", "desolate", "grief", "torment", "agony",
    "traumatic", "traumatized", "overwhelmed",
    "suffocating", "trapped", "draining", "exhausting",
    # English: relationship harm
    "betrayed", "abandoned", "rejected", "dismissed", "belittled",
    "manipulative", "controlling", "abusive", "selfish",
    "cruel", "mean", "nasty", "vicious", "hurtful",
    "humiliated", "humiliation",
    "contempt", "disgrace", "degraded",
    "isolated", "ignored",
    # English: hopelessness
    "hopeless",
    "helpless", "powerless", "defeated", "broken",
)

# ============================================================================
# NAWL (Nencki Affective Word List)
# positive: happiness > 4.5 and mean negative emotion < 3.0
# negative: mean negative emotion > 4.0 and happiness < 3.0
# ============================================================================

NAWL_POSITIVE: Tuple[str, ...] = (
    "akceptować", "aktywność", "aktywny", "altanka", "ambitny", "anioł", "aplauz", "aromat", "aromatyczny", "atrakcyjny",
    "autorytet", "awans", "azyl", "bajka", "bawić", "bezpieczny", "biesiada", "biust", "blask", "bliski",
    "bliskość", "błogosławiony", "błyskotliwy", "bogaty", "bóg", "brat", "brylantowy", "bukiet", "bystry", "całować",
    "cel", "chichot", "chichotać", "chleb", "chronić", "ciastko", "ciasto", "ciekawy", "ciepły", "córka",
    "cud", "cukierek", "czar", "czarodziejski", "czysty", "czytać", "ćwiczyć", "dawać", "dbać", "deser",
    "diamentowy", "dobroduszny", "dobrodziejstwo", "doceniać", "dochód", "dokładność", "dom", "domostwo", "dostawać", "doznawać",
    "drzewo", "dumny", "dyplom", "działanie", "dziecko", "dziedziczyć", "dzielny", "dzieło", "dziewczyna", "dziękować",
    "dźwięk", "efekt", "ekstaza", "energiczny", "erotyczny", "euforyczny", "fantazja", "film", "fortuna", "fotografować",
    "genialny", "geniusz", "gitara", "gol", "gotówka", "gra", "grać", "gwiazda", "harmonia", "hobby",
    "hojny", "honor", "humor", "huśtawka", "hymn", "idealny", "idylla", "impreza", "instrument", "inteligentny",
    "istnieć", "jabłkowy", "jasność", "jazda", "jechać", "jedwabny", "jeść", "jezioro", "kakao", "kanaryjski",
    "kariera", "karnawałowy", "kasa", "klejnot", "kobieta", "kochać", "kochany", "kolega", "kolorowy", "komfort",
    "komiczny", "kominek", "kompan", "koncert", "koniczyna", "krajobraz", "kreatywny", "księżniczka", "księżyc", "kształcić",
    "kurort", "kwiat", "las", "latać", "lato", "laur", "lekkość", "lemoniada", "leżeć", "lilia",
    "lizak", "lojalny", "lubić", "luksusowy", "ładny", "łagodzić", "łazienki", "łąka", "łóżko", "magiczny",
    "maj", "maksimum", "malinowy", "malować", "małżeński", "małżonek", "mama", "mamusia", "mango", "marzyć",
    "masaż", "matka", "mądrość", "medal", "melodyjny", "mężczyzna", "mieszkać", "milion", "miłość", "miły",
    "miód", "mistrz", "miś", "morze", "motywować", "móc", "muzyk", "muzyka", "myśleć", "nabytek",
    "nadmorski", "nadzieja", "nagradzać", "narodziny", "naturalny", "niebo", "niemowlę", "oaza", "obejmować", "obrączka",
    "ocean", "ochota", "ochraniać", "odetchnąć", "odlatywać", "odpowiedzialny", "odwaga", "odważny", "odżywać", "ogród",
    "ojciec", "ojczyzna", "oklaski", "oklaskiwać", "opieka", "opiekuńczy", "optymistyczny", "osiągać", "osiągnięcie", "oswoić",
    "oszczędności", "oświadczyny", "otrzymywać", "owocowy", "pachnieć", "pamiątka", "panda", "para", "park", "partner",
    "paryż", "pasjonujący", "pełnia", "perfumy", "pielęgnować", "pieniądze", "pies", "pieścić", "piosenka", "piwo",
    "plaża", "pochwała", "podarować", "podniecający", "podróż", "podróżować", "poduszka", "podziękowanie", "pojętny", "pokój",
    "polana", "pomagać", "pomocny", "pomysł", "ponadczasowy", "posiłek", "poślubić", "powieść", "powietrze", "powitalny",
    "powrót", "pozdrawiać", "pozytywny", "pożądanie", "praca", "pragnąć", "prawdziwy", "premiera", "prezent", "profesjonalny",
    "prysznic", "przebaczyć", "przełom", "przełomowy", "przerwa", "przezwyciężać", "przeżycie", "przyjaciel", "przyjemność", "ptak",
    "puchar", "rabat", "radosny", "radość", "raj", "ratować", "rejs", "rekordowy", "reprezentować", "rodzinny",
    "rosnąć", "rower", "roześmiany", "rozkoszny", "rozkwitać", "rozmawiać", "rozmowny", "rozradowany", "rozsądny", "rozum",
    "rozumieć", "rozwiązanie", "róża", "rześki", "safari", "samowystarczalny", "satyryczny", "satysfakcjonować", "schronienie", "seks",
    "sen", "sens", "serce", "sierpień", "silny", "siła", "siostra", "sjesta", "skakać", "skarb",
    "skarbiec", "skowronek", "sława", "słoneczny", "słoń", "słońce", "sobota", "soczysty", "spać", "spełniać",
    "spełnienie", "spokojny", "spokój", "spontaniczny", "sport", "spotkanie", "stek", "sukces", "super", "syn",
    "szafirowy", "szaleć", "szampan", "szansa", "szczenię", "szczery", "szczęście", "szczęśliwy", "szczyt", "sztama",
    "sztuka", "śliczny", "ślub", "śmiech", "śnić", "śpiew", "śpiewać", "świat", "świąteczny", "świetny",
    "święto", "świętować", "talent", "tańczyć", "tata", "tatry", "teatr", "toast", "tolerancja", "tort",
    "towarzysz", "towarzyszyć", "triumfalny", "tropiki", "troskliwy", "truskawkowy", "trwały", "tulipan", "turystyczny", "tworzenie",
    "twórczy", "uczcić", "uczucie", "udany", "ufać", "ulepszać", "ulga", "upojny", "urlop", "uroczy",
    "uroczystość", "urodziny", "uśmiech", "utalentowany", "uwalniać", "uzdolniony", "uzdrowienie", "uznanie", "uzyskać", "wakacje",
    "wartościowy", "wdzięk", "weekend", "weselny", "wesoły", "wiara", "widok", "widzieć", "wieczny", "wieczór",
    "wiedza", "wiedzieć", "wielkanocny", "wierność", "wierny", "wierzyć", "willa", "wino", "winogrono", "wiosenny",
    "wiosna", "witalny", "wiwat", "wiwatować", "wnuk", "woda", "wolność", "wspaniały", "wsparcie", "wspierać",
    "wycieczka", "wyczekiwany", "wygodny", "wygrany", "wygrywać", "wyjątkowy", "wykształcenie", "wykształcony", "wykwintny", "wynagrodzenie",
    "wynalazca", "wypoczęty", "wypoczynek", "wyruszać", "wyspa", "wysportowany", "wytchnienie", "wytrwały", "wytworny", "wyzwolony",
    "wznosić", "zachwycać", "zadbać", "zadowolony", "zaistnieć", "zaleta", "zapach", "zapas", "zapraszać", "zaproszenie",
    "zarabiać", "zaręczony", "zasłużony", "zaufany", "zbawienny", "zdobywać", "zdolność", "zdrowie", "zdrowy", "zgoda",
    "zjeżdżalnia", "złoto", "zmysłowy", "znać", "znajomy", "znakomity", "zrelaksowany", "związek", "zwiększać", "zwycięstwo",
    "zwycięzca", "zwyciężać", "zyskiwać", "źrebię", "żart", "żartować", "życie", "życzenie", "życzyć", "żywy",
)

NAWL_NEGATIVE: Tuple[str, ...] = (
    "agresywny", "alkoholik", "awantura", "bandyta", "bankructwo", "barbarzyńca", "bestialski", "bezcześcić", "bezduszny", "bić",
    "bieda", "boleć", "bomba", "ból", "brakować", "cham", "cierpieć", "cierpienie", "donosić", "dręczyciel",
    "dręczyć", "dusić", "faszyzm", "getto", "gnębić", "grozić", "groźba", "grób", "guz", "holocaust",
    "kara", "katastrofa", "katować", "katusze", "kłamać", "kłamstwo", "kneblować", "kompromitujący", "komunistyczny", "konać",
    "koncentracyjny", "konflikt", "kraść", "krwawy", "kryzys", "krzyk", "krzywdzić", "ludobójstwo", "łajdak", "malaria",
    "martwy", "masakra", "męczarnia", "mord", "morderstwo", "mordować", "napadać", "napastować", "narkotyk", "nazista",
    "nieszczęście", "nieuczciwy", "niewierność", "niewierny", "niewolnica", "niewolniczy", "nieżywy", "nikotyna", "nowotwór", "obrabować",
    "ofiara", "okrutny", "oszust", "oszustwo", "owdowieć", "pasożyt", "piekło", "podejrzewać", "podły", "podstęp",
    "pogrzebać", "porażka", "poronić", "powódź", "przemoc", "przestępstwo", "ranić", "rozbój", "rozwód", "rzeź",
    "sadystyczny", "samobójstwo", "samotność", "skorumpowany", "słabość", "strach", "szubienica", "śmierć", "śmierdzący", "terrorystyczny",
    "tortura", "torturować", "tracić", "traumatyczny", "trucizna", "tyć", "tyfus", "tyran", "unicestwić", "utonąć",
    "wojna", "wrzeszczeć", "wtargnąć", "wyć", "wypadek", "zabić", "zabójca", "zabójstwo", "zadłużenie", "zadłużony",
    "zagazować", "zakładnik", "zamach", "zaraza", "zarażać", "zawodzić", "zazdrość", "zbankrutować", "zbrodnia", "zdradzić",
    "zdychać", "zginąć", "zgon", "złodziej", "zmarły", "zmusić", "zmuszać", "zwyrodnialec", "żałoba",
)

# ============================================================================
# CONVERSATIONAL EXTENSIONS
# ============================================================================

PL_EXTENDED_POSITIVE: Tuple[str, ...] = (
    # Emotional warmth, connection
    "celebrować", "ciepło", "darować", "dbały", "dbała", "delikatnie", "delikatny", "delikatna",
    "dotykać", "empatia", "entuzjazm", "fascynacja", "gorąco", "jasny", "jasna", "jasność",
    "kochać", "komfortowy", "komfortowa", "łagodny", "łagodna", "łagodnie", "lekki", "lekka", "lekko",
    "lubię", "luz", "miłosny", "miłosna", "normalnie", "obfitość", "optymista", "optymizm",
    "piękność", "plany", "pogodny", "pogodna", "pomaga", "pomost", "poprawa", "powodzenie",
    "przytulny", "przytulna", "przytulność", "przytulić", "pyszne", "pyszny", "pyszna",
    "raduj", "razem", "rozkosz", "różnorodność", "ślicznie", "stabilny", "stabilna",
    "staranny", "staranna", "sukcesy", "szacunek", "szczerość", "szczera", "szczerej",
    "ufać", "uprzejmy", "uprzejma", "uprzejmość", "uroczo", "wesoło", "współpraca",
    "wygrać", "wygrana", "wyzwanie", "zaufanie", "zdrowie", "zrozumienie", "zaufana",
    "życzliwy", "życzliwa", "życzliwość",
    # Exclamations / reactions
    "ach", "bajkowy", "bajkowo", "błogość", "błogi", "hej", "hurra", "hura", "juhu",
    # English additions
    "wholesome", "heartwarming", "uplifting", "fulfilling", "rewarding", "meaningful",
    "refreshing", "cozy", "comfy", "exciting", "adorable", "playful", "joyous",
    "blissful", "serene", "vibrant", "radiant", "nurturing",
)

PL_EXTENDED_NEGATIVE: Tuple[str, ...] = (
    # Psychological / emotional pain
    "apatia", "apatyczny", "apatyczna", "beznadziejność", "brzydzę", "brzydki", "brzydka",
    "chaos", "chory", "chora", "ciężar", "ciężki", "ciężka", "deprymujący", "deprymująca",
    "depresja", "depresyjny", "depresyjna", "dezorientacja", "dławić", "dramatycznie",
    "duszność", "fałsz", "fałszywy", "fałszywa", "głupio", "głupi", "głupia",
    "groza", "groźny", "groźna", "irytacja", "irytujący", "irytująca", "irytować",
    "kłamca", "krytykować", "krzywdzić", "lęk", "lękowy", "lękowa",
    "marny", "marna", "marnie", "melancholia", "melancholijny", "melancholijna",
    "morderczy", "mordercza", "nadużycie", "narzekać", "nieszczerość", "nieszczery", "nieszczera",
    "nieszczęśliwy", "nieszczęśliwa", "niesprawiedliwy", "niesprawiedliwa",
    "niezrozumiany", "niezrozumiana", "nuda", "nudny", "nudna",
    "paskudny", "paskudna", "pesymizm", "pesymista", "pesymistyczny", "pesymistyczna",
    "płakać", "podstępny", "podstępna", "pogardzać", "porzucenie",
    "przerażenie", "przykrość", "przykry", "przykra", "przykro",
    "rozgoryczenie", "rozgoryczony", "smutek", "smutny", "smutna", "smutno",
    "stresujący", "stresująca", "surowość", "szok", "tęsknota", "tragedia",
    "trudno", "trudny", "trudna", "trwoga", "udręka", "utrata", "więzić",
    "wstyd", "wyolbrzymiać", "zagrożenie", "zazdrosny", "zazdrosna",
    "zdesperowany", "zdesperowana", "złamane", "żal", "żałować", "zły", "zła", "źle",
    # English additions
    "dreadful", "vile", "despicable", "repulsive", "revolting", "hateful", "loathsome",
    "anguish", "desolate", "torment", "agony", "traumatic", "traumatized", "overwhelmed",
    "suffocating", "trapped", "draining", "exhausting", "betray", "betrayal",
    "abandoned", "rejected", "dismissed", "belittled", "manipulative", "controlling",
    "abusive", "cruel", "vicious", "hurtful", "humiliated", "humiliation",
    "contempt", "disgrace", "degraded", "isolated", "helpless", "powerless", "defeated",
)

# ============================================================================
# AFINN-165, POLISH TRANSLATION ("przepraszam" is not negative here)
# ============================================================================

SP_POSITIVE: Tuple[str, ...] = (
    "absorbująca", "absorbujące", "absorbujący", "adoracja", "adorować", "adorowanie", "akceptuje", "akcja",
    "akcje", "aktywna", "aktywne", "aktywny", "alleluja", "altruistyczna", "altruistyczne", "altruistyczny",
    "ambitny", "angażować", "apetyt", "arcydzieła", "arcydzieło", "atrakcja", "atrakcyjność", "atrakcyjny",
    "aura", "autorytet", "badanie", "bajecznie", "bawić", "beatyfikować", "bezinteresowna", "bezinteresowne",
    "bezinteresowny", "bezpieczeństwo", "bezpieczna", "bezpieczne", "bezpiecznie", "bezpieczniejsze", "bezpieczny", "bezproblemowo",
    "bezszwowy", "beztroski", "biesiadny", "blask", "błoga", "błogi", "błogie", "błogosławić",
    "błogosławieństwa", "błogosławieństwo", "błogość", "błyszcza", "błyszcząca", "błyszczące", "błyszczący", "błyszcze",
    "błyszczy", "bogactwo", "bogato", "bogatsi", "bogaty", "bohater", "bohaterowie", "bóg",
    "brakowało", "bravura", "brawo", "brilliances", "bronić", "bródkowy", "buziaki", "celowy",
    "ceniona", "cenione", "ceniony", "charytatywna", "charytatywne", "charytatywny", "charyzma", "chcieć",
    "chęci", "chętny", "chroni", "chroniona", "chronione", "chroniony", "chwalona", "chwalone",
    "chwalony", "chwała", "cichy", "ciekawy", "ciepła", "ciepłe", "ciepło", "ciepły",
    "ciesząc", "cieszyć", "cnotliwa", "cnotliwe", "cnotliwy", "cud", "cudowna", "cudowne",
    "cudownie", "cudowny", "czarująca", "czarujące", "czarujący", "czczona", "czczone", "czczony",
    "czoło", "czujny", "czuła", "czułe", "czułość", "czuły", "czysty", "czyści",
    "darowizna", "darowizny", "daruje", "dbanie", "decydująca", "decydujące", "decydujący", "dedykowane",
    "delikatny", "diament", "dilligence", "dobrobyt", "dobroczyńca", "dobroczyńców", "dobroć", "dobry",
    "docenia", "doceniać", "doceniająca", "doceniające", "doceniający", "doceniane", "dojrzała", "dojrzałe",
    "dojrzały", "dopasowanie", "doping", "dopingować", "dopracowuje", "dopuszczać", "dosięgnąć", "doskonale",
    "doskonała", "doskonałe", "doskonałość", "doskonały", "dostatni", "dostępny", "dotacja", "dotacje",
    "dowcipny", "droga", "drogi", "drogie", "drogo", "duch", "dumnie", "dumny",
    "duży", "dzielić", "dzielna", "dzielne", "dzielny", "dzięki", "efektywna", "efektywne",
    "efektywny", "ekscytująca", "ekscytujące", "ekscytujący", "ekshilarates", "ekskluzywna", "ekskluzywne", "ekskluzywny",
    "ekstatyczna", "ekstatyczne", "ekstatyczny", "elegancki", "elegancko", "empatyczna", "empatyczne", "empatyczny",
    "energetyczna", "energetyczne", "energetyczny", "energiczna", "energiczne", "energiczny", "entuzjastyczna", "entuzjastyczne",
    "entuzjastyczny", "estetycznie", "etyczna", "etyczne", "etyczny", "euforia", "euforyk", "fachowo",
    "fajne", "faktycznie", "fantastyczna", "fantastyczne", "fantastyczny", "fascynacja", "fascynować", "fascynująca",
    "fascynujące", "fascynujący", "fascynuje", "favourited", "faworyzowane", "fenomenalnie", "figlarny", "filantropia",
    "flagowy", "fortuna", "ftw", "galanteria", "gazowana", "godność", "godny", "gorliwa",
    "gorliwe", "gorliwy", "grad", "gratulacja", "gratulacje", "gratyfikacja", "grot", "gruby",
    "gust", "gwarancja", "ha", "hahaha", "hahahah", "harmonia", "harmonijnie", "harmonijny",
    "hehe", "heroiczna", "heroiczne", "heroiczny", "hojnie", "hojny", "hołd", "honor",
    "horyzont", "humanitarny", "humor", "humorystyczna", "humorystyczne", "humorystyczny", "humourous", "hurra",
    "idealna", "idealne", "idealny", "imponować", "imponująca", "imponujące", "imponujący", "innowacja",
    "innowacje", "innowacyjne", "inspiracja", "inspirować", "inspirująca", "inspirujące", "inspirujący", "inspiruje",
    "integralność", "inteligentny", "intensywna", "intensywne", "intensywny", "intymność", "iskra", "jakości",
    "jakość", "jasność", "jasny", "jezus", "jowialna", "jowialne", "jowialny", "kapitał",
    "kapryśny", "kibic", "klejnot", "klejnoty", "kocha", "kochać", "kochająca", "kochające",
    "kochający", "kochał", "kochanie", "kojąca", "kojące", "kojący", "kolejny", "komedia",
    "komfort", "komiczna", "komiczne", "komiczny", "kompetencji", "kompetentny", "komplement", "komplementy",
    "konkurencyjny", "korzystając", "korzystnie", "korzystny", "korzyści", "korzyść", "krzepki", "kurtuazja",
    "lansowana", "lansowane", "lansowany", "lawl", "leniwa", "leniwe", "leniwy", "lepszy",
    "lmfao", "lojalność", "lol", "lolol", "lololol", "lolololol", "lool", "loool",
    "looool", "lubi", "lubić", "lubił", "lukratywna", "lukratywne", "lukratywny", "luksus",
    "ładna", "ładne", "ładnie", "ładny", "łagodny", "łagodząca", "łagodzące", "łagodzący",
    "łagodzi", "łagodzić", "łał", "łaska", "łaskawy", "łatwo", "łatwość", "machinacje",
    "majątek", "malownicza", "malownicze", "malowniczy", "marzenia", "materia", "mądrość", "mądry",
    "mądrzejszy", "medal", "medytacyjny", "metodyczna", "metodyczne", "metodycznie", "metodyczny", "miła",
    "miłe", "miłość", "miłośnicy", "miły", "mistrz", "mistrzowie", "młodzieńcza", "młodzieńcze",
    "młodzieńczy", "modernizacja", "modernizacje", "motywacja", "motywować", "motywowanie", "możliwości", "na",
    "nabożna", "nabożne", "nabożny", "nabyty", "nadzieja", "nadzieje", "nagroda", "nagrody",
    "nagrodzona", "nagrodzone", "nagrodzony", "najczystsze", "najfatalniejszy", "najjaśniejszy", "najlepiej", "najlepsza",
    "najmądrzejszy", "najmodniejszy", "najsilniejszy", "najsłodszy", "najszczęśliwszy", "największy", "najwyższy", "namiętny",
    "natarczywa", "natarczywe", "natarczywy", "natchniona", "natchnione", "natchniony", "naturalna", "naturalne",
    "naturalny", "natychmiast", "niebiański", "niebo", "niedobitek", "niedrogie", "nienaruszona", "nienaruszone",
    "nienaruszony", "nieodparcie", "nieodparty", "niesamowita", "niesamowite", "niesamowity", "nieskazitelna", "nieskazitelne",
    "nieskazitelny", "nieśmiertelna", "nieśmiertelne", "nieśmiertelny", "nietrująca", "nietrujące", "nietrujący", "nieustraszona",
    "nieustraszone", "nieustraszoność", "nieustraszony", "niewrażliwa", "niewrażliwe", "niewrażliwy", "niezapomniana", "niezapomniane",
    "niezapomniany", "niezawodnie", "niezawodność", "niezawodny", "niezłomny", "niezniszczalna", "niezrównana", "niezrównane",
    "niezrównany", "niezwyciężona", "niezwyciężone", "niezwyciężony", "obiecał", "obietnica", "obietnice", "obrona",
    "obrońca", "obrońców", "obsesję", "ochraniać", "oczarować", "oczyścić", "odciążyć", "oddana",
    "oddane", "oddany", "odjechana", "odjechane", "odjechany", "odkurzacz", "odporny", "odpowiedni",
    "odpowiednio", "odpowiedzialna", "odpowiedzialne", "odpowiedzialność", "odpowiedzialny", "odpuszcza", "odpuszczając", "odświeżająco",
    "odwaga", "odważna", "odważne", "odważnie", "odważny", "okazja", "oklaski", "oklaskiwać",
    "oklaskiwana", "oklaskiwane", "oklaskiwany", "oks", "olbrzymi", "ominięcie", "opieka", "opłacalna",
    "opłacalne", "opłacalny", "optymistyczna", "optymistyczne", "optymistyczny", "optymizm", "osada", "osiąga",
    "osiągając", "osiągalna", "osiągalne", "osiągalny", "osiągnął", "osiągnęła", "osiągnęło", "osiągnięcia",
    "osiągnięcie", "ostrożna", "ostrożne", "ostrożnie", "ostrożność", "ostrożny", "oszałamiająca", "oszałamiające",
    "oszałamiający", "oszczędności", "oślepiająca", "oślepiające", "oślepiający", "oświeca", "oświecać", "oświecenie",
    "oświecona", "oświecone", "oświecony", "otrzeźwiająca", "otrzeźwiające", "otrzeźwiający", "ożywia", "panująca",
    "panujące", "panujący", "pardon", "pardoning", "pasja", "perspektywa", "pewna", "pewne",
    "pewni", "pewny", "pielęgnacja", "pielęgnować", "pielęgnuje", "piękna", "piękno", "piękny",
    "płodny", "pobudza", "pobudzająca", "pobudzające", "pobudzający", "pobudzanie", "pocałunek", "pochłonięta",
    "pochłonięte", "pochłonięty", "pochwala", "pochwalić", "pochwała", "pochwałe", "pochwały", "pociągać",
    "pociągająca", "pociągające", "pociągający", "pocieszająca", "pocieszające", "pocieszający", "podarować", "podekscytowana",
    "podekscytowane", "podekscytowany", "podniecać", "podniecenie", "podniecona", "podniecone", "podniecony", "podnieść",
    "podobieństwo", "podtrzymywalna", "podtrzymywalne", "podtrzymywalny", "podziękować", "podziw", "podziwia", "podziwiać",
    "podziwiana", "pogodzić", "pogratulować", "pogrubienie", "pojednania", "pojednanie", "pokorny", "pokój",
    "polecić", "pomaga", "pomocny", "poparcie", "poparła", "popełnić", "popiera", "poprawa",
    "poprawia", "popularność", "popularny", "porywająca", "porywające", "porywający", "postęp", "poszanowanie",
    "poszukiwania", "poświęcenie", "potężna", "potężne", "potężny", "potwierdza", "potwierdzone", "powierzone",
    "powieść", "powitać", "powitał", "powitanie", "powodzenie", "pozdrowienia", "pozytywna", "pozytywne",
    "pozytywnie", "pozytywny", "pożądana", "pożądane", "pożądany", "pragnąc", "pragnąca", "pragnące",
    "pragnący", "pragnienie", "prawda", "prawdziwa", "prawdziwe", "prawdziwy", "prawna", "prawne",
    "prawnie", "prawny", "prawość", "prawowita", "prawowite", "prawowity", "prezent", "prężna",
    "prężne", "prężny", "proaktywne", "promować", "promowanie", "promuje", "proste", "prostota",
    "proszę", "prowadząca", "prowadzące", "prowadzący", "przebaczenie", "przebaczono", "przebaczyć", "przebiegła",
    "przebiegłe", "przebiegły", "przebój", "przedsiębiorcza", "przedsiębiorcze", "przedsiębiorczy", "przejrzystość", "przekazane",
    "przekonać", "przekonana", "przekonane", "przekonany", "przekonuje", "przełom", "przemiła", "przemiłe",
    "przemiły", "przepyszny", "przerażająca", "przerażające", "przerażający", "przestronna", "przestronne", "przestronny",
    "przetrwanie", "przewidywanie", "przeżył", "przyciąga", "przyciąganie", "przyciągnęła", "przydatność", "przydatny",
    "przygoda", "przygody", "przygotowana", "przygotowane", "przygotowany", "przyjaciel", "przyjazny", "przyjaźń",
    "przyjąć", "przyjemne", "przyjemność", "przyjemny", "przyjęcie", "przyjęta", "przyjęte", "przyjęty",
    "przyjmowanie", "przyjmuje", "przysiek", "przysługa", "przysmaki", "przystojny", "przytulać", "przytulanie",
    "przytulność", "przywództwo", "przywraca", "przywracać", "przywracanie", "przywrócona", "przywrócone", "przywrócony",
    "przyznanie", "pyszne", "radosny", "radość", "radośnie", "rafinowana", "rafinowane", "rafinowany",
    "raj", "raptured", "raptures", "ratować", "ratownik", "ratuje", "ratyfikowana", "rofl",
    "roflcopter", "roflmao", "romans", "romantyczna", "romantyczne", "romantycznie", "romantyczny", "rotfl",
    "rotflmfao", "rotflol", "rozbawiona", "rozbawione", "rozbawiony", "rozbrykana", "rozbrykane", "rozbrykany",
    "rozgrzesza", "rozgrzeszać", "rozgrzeszyć", "rozkład", "rozkosz", "rozkoszne", "rozliczenia", "rozrywka",
    "rozstrzyganie", "rozszerzać", "roztropność", "rozum", "rozważna", "rozważne", "rozważny", "rozwiązać",
    "rozwiązana", "rozwiązane", "rozwiązania", "rozwiązanie", "rozwiązany", "rozwiązuje", "rozwikłać", "rozwój",
    "róża", "rygorystyczna", "rygorystyczne", "rygorystyczny", "ryzykowna", "ryzykowne", "ryzykowny", "rześki",
    "salut", "salutowanie", "saluty", "satysfakcjonująca", "satysfakcjonujące", "satysfakcjonujący", "seksowna", "seksowne",
    "seksowny", "sentyment", "serdeczna", "serdeczne", "serdecznie", "serdeczny", "sięga", "silna",
    "silne", "silniejszy", "silny", "skarb", "skarby", "skoncentrowana", "skoncentrowane", "skoncentrowany",
    "skuteczność", "sława", "sławna", "sławne", "sławny", "słodkie", "słodsze", "słusznie",
    "słynna", "słynne", "słynny", "solidarność", "solidny", "spełnia", "spełnić", "spełnienie",
    "spełniona", "spełnione", "spełniony", "spoko", "spokojna", "spokojnie", "spokojny", "sprawiedliwość",
    "sprawy", "sprytny", "sprzyja", "sprzymierzyć", "stabilna", "stabilne", "stabilny", "strasznie",
    "stymulować", "stymulowane", "stymuluje", "sukces", "super", "sympatyczna", "sympatyczne", "sympatyczny",
    "szacunek", "szanowana", "szanowane", "szanowany", "szansa", "szanse", "szczerosc", "szczery",
    "szczerze", "szczęściarz", "szczęście", "szczęśliwa", "szczęśliwe", "szczęśliwy", "szlachetny", "szufelka",
    "szybki", "szybko", "szyk", "śliczna", "śliczne", "śliczny", "śmiała", "śmiałe",
    "śmiałek", "śmiały", "śmiech", "śnić", "świąteczna", "świąteczne", "świąteczny", "świeży",
    "świętować", "świętuje", "taaak", "tak", "talent", "targi", "tęsknota", "tkliwość",
    "tolerancja", "tolerancyjny", "top", "triumf", "troska", "trudniejsze", "trwała", "trwałe",
    "trwały", "tryumfalna", "tryumfalne", "tryumfalny", "twardo", "twórcza", "twórcze", "twórczy",
    "uczciwość", "uczucie", "udana", "udane", "udany", "ufnie", "ufny", "ugruntowana",
    "uhonorowanie", "ukochana", "ukochane", "ukochany", "ukończyć", "ulepszać", "ulepszona", "ulepszone",
    "ulepszony", "ulubiona", "ulubione", "ulubiony", "ulżyło", "umiejętności", "umowa", "umożliwiać",
    "uniewinnia", "uniewinniająca", "uniewinniające", "uniewinniający", "uniewinnić", "uniewinniona", "uniewinnione", "uniewinniony",
    "upiększać", "upodmiotowienie", "uprawniona", "uprawomocnić", "uprzejmie", "uprzejmość", "uprzejmy", "uprzywilejowana",
    "uprzywilejowane", "uprzywilejowany", "uradowana", "uradowane", "uradowany", "uratował", "urocza", "urocze",
    "uroczo", "uroczy", "uroczystości", "uroczystość", "uroczysty", "urok", "uruchomiona", "uspokaja",
    "uspokajać", "uspokajająca", "uspokajające", "uspokajający", "uspokajona", "uspokajone", "uspokajony", "uspokojona",
    "uspokojone", "uspokojony", "usprawiedliwiona", "usprawiedliwione", "usprawiedliwiony", "ustalona", "uszczęśliwiona", "uszczęśliwione",
    "uszczęśliwiony", "uścisk", "uśmiech", "utrzymana", "utrzymane", "utrzymany", "uwielbiał", "uwielbiam",
    "uwielbienie", "uzasadnione", "uznana", "uznane", "uznanie", "uznany", "wartość", "ważna",
    "ważne", "ważny", "wdzięczna", "wdzięczne", "wdzięczny", "wdzięk", "wentylator", "wesoła",
    "wesołe", "wesoło", "wesołość", "wesoły", "wiara", "wibrująca", "wibrujące", "wibrujący",
    "wielki", "wierny", "większy", "wigor", "winwin", "witalność", "witamina", "witamy",
    "wiwatował", "wizja", "wizje", "wizjoner", "właściwa", "właściwe", "właściwy", "wnikliwość",
    "wolna", "wolne", "wolności", "wolność", "wolny", "woohoo", "wooo", "woow",
    "wowow", "wowww", "wpływowy", "wskazana", "wskazane", "wskazany", "wskrzesić", "wspaniale",
    "wspaniała", "wspaniałe", "wspaniały", "wsparcie", "wspiera", "wspierająca", "wspierające", "wspierający",
    "wspólne", "współczucie", "współczująca", "współczujące", "współczujący", "wstrząśnięta", "wstrząśnięte", "wstrząśnięty",
    "wszechobecny", "wszechstronna", "wszechstronne", "wszechstronny", "wybawienie", "wybitny", "wyczyszczone", "wygodnie",
    "wygodny", "wygrał", "wygrywa", "wyjaśnia", "wykupiona", "wykupione", "wykupiony", "wynagrodzona",
    "wynagrodzone", "wynagrodzony", "wyrafinowana", "wyrafinowane", "wyrafinowany", "wyraźnie", "wyrozumiała", "wyrozumiałe",
    "wyrozumiały", "wystająca", "wystające", "wystający", "wytrzymała", "wytrzymałe", "wytrzymałość", "wytrzymały",
    "wzmacnia", "wzmacniać", "wzmacniająca", "wzmacniające", "wzmacniający", "wzmocniona", "wzmocnione", "wzmocniony",
    "wzrasta", "wzrosła", "wzrost", "wzrostu", "wzruszająca", "wzruszające", "wzruszający", "xo",
    "zaabsorbowana", "zaabsorbowane", "zaabsorbowany", "zaakceptować", "zaangażowanie", "zaawansowane", "zabawa", "zabawna",
    "zabawne", "zabawny", "zabezpiecza", "zabezpieczone", "zabiegać", "zachęca", "zachęcać", "zachęcająca",
    "zachęcające", "zachęcający", "zachęta", "zachłanna", "zachłanne", "zachłanny", "zachwycać", "zachwycająca",
    "zachwycające", "zachwycający", "zachwyci", "zachwycona", "zachwycone", "zachwycony", "zachwyt", "zachwytu",
    "zadatek", "zadbana", "zadbane", "zadbany", "zadowolona", "zadowolone", "zadowolony", "zadziwiać",
    "zadziwiająca", "zadziwiające", "zadziwiający", "zafascynowana", "zafascynowane", "zafascynowany", "zainteresowana", "zainteresowane",
    "zainteresowania", "zainteresowanie", "zainteresowany", "zaintrygowana", "zaintrygowane", "zaintrygowany", "zajebista", "zajebiste",
    "zajebisty", "zajebiście", "zajefajne", "zakochana", "zakochane", "zakochany", "zaleca", "zalecana",
    "zalety", "zamożna", "zamożne", "zamożny", "zapalona", "zapalone", "zapalony", "zapewnić",
    "zapewnienie", "zapisać", "zapisane", "zapraszam", "zasalutował", "zasiłek", "zaskakująca", "zaskakujące",
    "zaskakujący", "zaspokoić", "zaspokojona", "zaspokojone", "zaspokojony", "zaszczycona", "zaszczycone", "zaszczycony",
    "zaślepienie", "zatwierdza", "zatwierdzanie", "zatwierdzenie", "zatwierdzona", "zatwierdzone", "zatwierdzony", "zaufana",
    "zaufane", "zaufanie", "zaufany", "zauważalna", "zauważalne", "zauważalny", "zawiła", "zawiłe",
    "zawiły", "zbawienie", "zdatność", "zdecydowana", "zdecydowane", "zdecydowany", "zdobyć", "zdolna",
    "zdolne", "zdolność", "zdolny", "zdrowy", "zdumieć", "zdumienie", "zdumiewająca", "zdumiewające",
    "zdumiewająco", "zdumiewający", "zdumiona", "zdumione", "zdumiony", "zestalać", "zestalona", "zestalone",
    "zestalony", "zgoda", "zgody", "zgrabny", "zimozielona", "zimozielone", "zimozielony", "zjednoczona",
    "zjednoczone", "zjednoczony", "złoto", "złowieszcza", "złowieszcze", "złowieszczy", "zmodernizować", "zmodernizowane",
    "zmotywowana", "zmotywowane", "zmotywowany", "zmuszona", "zmuszone", "zmuszony", "znacząca", "znaczące",
    "znaczący", "znaczenie", "znaczna", "znaczne", "znaczny", "znakomita", "znakomite", "znakomity",
    "zobowiązana", "zobowiązane", "zobowiązany", "zobowiązuje", "zrelaksowana", "zrelaksowane", "zrelaksowany", "zrównoważona",
    "zrównoważone", "zrównoważony", "zuchwała", "zuchwałe", "zuchwały", "zwiększać", "zwolennicy", "zwolnienie",
    "zwolniona", "zwolnione", "zwolniony", "zwycięski", "zwycięstwa", "zwycięstwo", "zwycięzca", "zwycięzcy",
    "zyczenia", "zysk", "zyskał", "zyski", "zyskując", "żarliwa", "żarliwe", "żarliwy",
    "żart", "żarty", "życzenia", "życzenie", "życzliwa", "życzliwe", "życzliwość", "życzliwy",
    "żywa", "żywe", "żywiołowy", "żywo", "żywy"
)

SP_NEGATIVE: Tuple[str, ...] = (
    "admonished", "afektowana", "afektowane", "afektowany", "agoniści", "agonizuje", "agresja", "agresji",
    "agresywna", "agresywne", "agresywnie", "agresywność", "agresywny", "akcentowana", "akcentowane", "akcentowany",
    "alarm", "alarmista", "alarmistami", "alienacja", "amatorski", "ambiwalentny", "analfabetyzm", "animozja",
    "antagonistyczna", "antagonistyczne", "antagonistyczny", "anty", "anulowanie", "anuluj", "anuluje", "apatia",
    "apatyczna", "apatyczne", "apatyczny", "apeshit", "apokaliptyczna", "apokaliptyczne", "apokaliptyczny", "aresztować",
    "aresztowana", "aresztowane", "aresztowania", "aresztowanie", "aresztowany", "arogancki", "arsehole", "atak",
    "ataków", "awarie", "awenges", "bagatelizować", "bałagan", "bamboy", "banalna", "banalne",
    "banalny", "bandyta", "bankructwo", "bankster", "barbarzyńca", "barbarzyński", "bariera", "beczenie",
    "bereaves", "bezbronna", "bezbronne", "bezbronny", "bezcelowy", "bezczynność", "bezdomny", "bezkompromisowość",
    "bezlitosny", "bezładu", "bezmyślna", "bezmyślne", "bezmyślny", "beznadziejnie", "beznadziejność", "beznadziejny",
    "bezowocny", "bezprawna", "bezprawne", "bezprawny", "bezradny", "bezrobocie", "bezrobotny", "bezrozumnie",
    "bezsenność", "bezsilna", "bezsilne", "bezsilny", "bezskutecznie", "bezużyteczna", "bezużyteczne", "bezużyteczność",
    "bezużyteczny", "bezwartościowy", "bezwzględny", "bezzębny", "bicie", "biedniejsze", "biernie", "bierny",
    "bita", "bite", "bitwa", "bitwy", "bity", "bla", "blizna", "blizny",
    "blok", "blokada", "bloki", "bloking", "blokować", "błąd", "błędny", "błędów",
    "błędy", "błyszczka", "bojaźliwa", "bojaźliwe", "bojaźliwy", "bojkot", "bojkotowanie", "bojkoty",
    "bolesny", "boleściwa", "boleściwe", "boleściwy", "boleść", "boli", "bomba", "boycotted",
    "ból", "brak", "braki", "brakująca", "brakujące", "brakujący", "brooding", "brud",
    "brudniejszy", "brudny", "brutalna", "brutalne", "brutalnie", "brutalny", "brzdęknięcie", "brzydki",
    "brzydota", "brzydzić", "bumelant", "bummer", "bunt", "buntownik", "bzdurnie", "bzdury",
    "cenzor", "cenzorzy", "cenzurowana", "cenzurowane", "cenzurowany", "chagrined", "chaos", "chaotyczna",
    "chaotyczne", "chaotyczny", "chciwa", "chciwe", "chciwość", "chciwy", "chełpliwa", "chełpliwe",
    "chełpliwy", "chides", "chiding", "chlapa", "chłodzenie", "cholera", "cholernie", "cholerny",
    "choroba", "choroby", "chory", "chowana", "chowane", "chowany", "chuj", "chuligan",
    "chuligani", "chuligaństwo", "chwiejny", "ciąć", "ciemność", "cierpi", "cierpiał", "cierpiąca",
    "cierpiące", "cierpiący", "cierpiących", "cierpienie", "cierpko", "cięcia", "cięcie", "ciężary",
    "ciężko", "cocksucker", "cocksuckers", "crappy", "crazier", "cunt", "cycki", "cyniczna",
    "cyniczne", "cyniczny", "cynik", "cynizm", "czarnuch", "czarnuchy", "czas", "czeka",
    "czop", "ćwok", "daremny", "deadening", "deficyt", "deformacje", "degradować", "degraduje",
    "dehumanized", "dehumanizes", "dehumanizowanie", "deklamator", "demonstracja", "demoralizowana", "demoralizowane", "demoralizowany",
    "demoralizuje", "denerwować", "denerwująca", "denerwujące", "denerwujący", "denerwuje", "denier", "denijczycy",
    "deplorująca", "deplorujące", "deplorujący", "deportacja", "deportacje", "deportować", "deportowana", "deportowane",
    "deportowanie", "deportowany", "deportuje", "depresja", "derides", "despotyczna", "despotyczne", "despotycznie",
    "despotyczny", "destrukcyjny", "deszczowy", "dewastacja", "dewastacje", "dezaprobata", "dezinformacja", "dezorientować",
    "dipshit", "disparages", "dithering", "dławiki", "dług", "dokuczliwa", "dokuczliwe", "dokuczliwy",
    "dość", "dotknięta", "dotknięte", "dotknięty", "downer", "drags", "draniu", "drań",
    "drapieżna", "drapieżne", "drapieżny", "drażliwa", "drażliwe", "drażliwy", "drażni", "dreading",
    "drwić", "drwina", "drwiny", "drżąca", "drżące", "drżący", "drżenie", "dupek",
    "dylemat", "dymienie", "dysfunkcja", "dyskryminacyjny", "dyskryminować", "dyskryminowane", "dyskryminuje", "dyskutowanie",
    "dystansuje", "dziecinna", "dziecinne", "dziecinny", "dziwaczna", "dziwaczne", "dziwaczny", "dziwka",
    "dziwna", "dziwne", "dziwnie", "dziwny", "dźgnięta", "dźgnięte", "dźgnięty", "egoizm",
    "eksmisja", "eksploatacja", "eksploatowana", "eksploatowane", "eksploatowany", "eksponuje", "ekstremista", "ekstremistów",
    "ewakuacja", "ewakuować", "ewakuowana", "ewakuowane", "ewakuowany", "fagoty", "fainthearted", "fake",
    "faker", "fałsz", "fałszować", "fałszowanie", "fałszywa", "fałszywe", "fałszywie", "fałszywy",
    "farsa", "faszystowski", "faszyści", "fatalna", "fatalne", "fatalny", "faul", "fiasko",
    "fiut", "flopsy", "fobia", "foreclosures", "frasobliwa", "frasobliwe", "frasobliwy", "frikin",
    "frustruje", "gagged", "głodować", "głodująca", "głodujące", "głodujący", "głośny", "głód",
    "głupcy", "głupek", "głupi", "głupio", "głupkowaty", "głupota", "gniew", "gniewna",
    "gniewne", "gniewny", "gnojek", "gorączka", "gorliwcy", "gorliwiec", "gorsząca", "gorszące",
    "gorszący", "gorsze", "gorszy", "gorzej", "gorzki", "gorzko", "gotowy", "gówno",
    "greenwash", "grozi", "grozić", "groźba", "groźby", "groźny", "grób", "gruzy",
    "grypa", "grzech", "grzechy", "grzeszny", "grzywna", "grzywne", "grzywny", "guz",
    "gwałciciel", "gwałtowna", "gwałtowne", "gwałtownie", "gwałtowny", "hamować", "handlarz", "haniebny",
    "hańba", "hejterzy", "histeria", "histeryczna", "histeryczne", "histeryczny", "histeryka", "hospitalizowana",
    "hospitalizowane", "hospitalizowany", "humbug", "icky", "idiota", "idiotyczna", "idiotyczne", "idiotyczny",
    "idiotyzm", "ignorancja", "ignorować", "ignoruje", "imbecyl", "imitacja", "impas", "impeachments",
    "impedes", "indoktrynacja", "indoktrynana", "indoktrynane", "indoktrynany", "indoktrynować", "indoktrynowane", "inediable",
    "infantylna", "infantylne", "infantylny", "infekcja", "infekcje", "infekować", "infekowanie", "infekuje",
    "infesting", "infestuje", "infracts", "infuriates", "inkwizycja", "inwalidztwo", "inwazja", "ironia",
    "ironiczna", "ironiczne", "ironiczny", "irracjonalna", "irracjonalne", "irracjonalny", "irytować", "irytująca",
    "irytujące", "irytujący", "jadowita", "jadowite", "jadowity", "jebać", "jebak", "jebana",
    "jebane", "jebanie", "jebany", "jebańce", "jebią", "jebiąc", "jebiąca", "jebiące",
    "jebiący", "jebie", "jęczeć", "jędza", "jęk", "jęki", "jęknął", "jęknęła",
    "jęknęło", "kadzidła", "kadzidło", "karać", "karane", "karanie", "karny", "katastrofa",
    "katastrofalna", "katastrofalne", "katastrofalny", "katastrofy", "kawałki", "kicha", "kichać", "kichanie",
    "kłamca", "kłamcy", "kłopot", "kłopotliwa", "kłopotliwe", "kłopotliwy", "kłopoty", "knebel",
    "kody", "kogut", "kolidować", "kolizja", "kolizje", "komplikuje", "konflikt", "konflikty",
    "kontrowersje", "kontrowersyjne", "kontrowersyjnie", "kontrowersyjny", "kontuzje", "korupcja", "kosztowna", "kosztowne",
    "kosztowny", "kpina", "kpiny", "kradnie", "kradzież", "kraść", "krosna", "krótkowzroczna",
    "krótkowzroczne", "krótkowzroczność", "krótkowzroczny", "kruszenia", "krwawy", "kryminalista", "krytyk", "krytyka",
    "krytykować", "krytykowana", "krytykowane", "krytykowany", "krytyków", "krytykując", "krytykuje", "kryzys",
    "krzyczał", "krzycząc", "krzyk", "krzyki", "krzywa", "krzywe", "krzywoprzysięstwo", "krzywy",
    "kulawy", "kurwa", "kutas", "kutasiarz", "kwestionowana", "kwestionowane", "kwestionowany", "lekceważąc",
    "lekceważenie", "lekkomyślna", "lekkomyślne", "lekkomyślny", "letarg", "lękliwa", "lękliwe", "lękliwy",
    "lobbował", "lobby", "lobbysta", "lobbystami", "los", "luźny", "lżenie", "łapówki",
    "łatwowierność", "łatwowierny", "łzy", "majdan", "makabryczna", "makabryczne", "makabryczny", "maldevelopment",
    "maltretowanie", "manipulacja", "manipulowane", "manipulowanie", "marnie", "marnotrawstwo", "matczyna", "mdła",
    "mdłe", "mdły", "melancholia", "memoriam", "męcząca", "męczące", "męczący", "męczyć",
    "męka", "miażdżąca", "miażdżące", "miażdżący", "minusem", "miscast", "mispricing", "misreport",
    "misreports", "mit", "mongering", "monopolizacja", "monopolizuje", "monotonia", "monotonna", "monotonne",
    "monotonny", "mop", "morderca", "mordercza", "mordercze", "morderczy", "morderstwa", "morderstwo",
    "mordęga", "mordowanie", "mroczna", "mroczne", "mroczny", "mrok", "mrowie", "mściciel",
    "mściciele", "mściwa", "mściwe", "mściwy", "mumpish", "murzyn", "murzyni", "mylące",
    "naciągnięcie", "nacisk", "nadąsana", "nadąsane", "nadąsany", "nadęta", "nadęte", "nadęty",
    "nadopiekuńcza", "nadopiekuńcze", "nadopiekuńczy", "nadstawa", "nadużycia", "nadużycie", "nadużywane", "nadużywanie",
    "nadwaga", "nagana", "naganiacz", "naiwna", "naiwne", "naiwny", "najbrudniejszy", "najciemniejszy",
    "najcięższe", "najgorszy", "najniższy", "najuboższy", "nakłada", "nakręcenie", "nakrzyczeć", "naładowana",
    "naładowane", "naładowany", "nałożone", "napadająca", "napadające", "napadający", "napastowanie", "napięcie",
    "napominać", "naprężenie", "narazić", "narażona", "narażone", "narażony", "narcyzm", "narozrabiać",
    "narusza", "naruszać", "naruszenia", "naruszenie", "naruszona", "naruszone", "naruszony", "narzekać",
    "narzucać", "następstwo", "nastrojowy", "natrysk", "nawiedzać", "nawiedzana", "nawiedzane", "nawiedzany",
    "nawiedzenie", "negatywna", "negatywne", "negatywny", "nerwowo", "nerwowość", "nerwowy", "nerwy",
    "nękać", "nękana", "nękane", "nękany", "nie", "niebezpieczeństwo", "niebezpieczna", "niebezpieczne",
    "niebezpiecznie", "niebezpieczny", "niechęć", "niechętny", "niechlujny", "nieczynna", "nieczynne", "nieczynny",
    "niedbała", "niedbałe", "niedbały", "niedobory", "niedobór", "niedobrze", "niedogodność", "niedogotowana",
    "niedogotowane", "niedogotowany", "niedonoszona", "niedonoszone", "niedonoszony", "niedopasowanie", "niedorozwinięta", "niedorozwinięte",
    "niedorozwinięty", "niedorzeczna", "niedorzeczne", "niedorzeczny", "niedoskonała", "niedoskonałe", "niedoskonały", "niedostępne",
    "niedoszacowana", "niedoszacowane", "niedoszacowanie", "niedoszacowany", "nieefektywnie", "nieetyczna", "nieetyczne", "nieetyczny",
    "niegodny", "niegodziwa", "niegodziwe", "niegodziwość", "niegodziwy", "niegrzeczna", "niegrzeczne", "niegrzeczny",
    "niehigieniczna", "niehigieniczne", "niehigieniczny", "nieinteligentny", "nieistotny", "niejasny", "niekochana", "niekochane",
    "niekochany", "niekompetencja", "niekompetentny", "niekompletny", "niekorzystnie", "niekorzystny", "niekorzyść", "nielegalna",
    "nielegalne", "nielegalnie", "nielegalny", "nielogiczna", "nielogiczne", "nielogiczny", "nieludzki", "nieład",
    "nieładny", "niemowlę", "niemożliwie", "niemożność", "nienaukowy", "nienawidząca", "nienawidzące", "nienawidzący",
    "nienawidzę", "nienawidzi", "nienawidzić", "nienawidzona", "nienawidzone", "nienawidzony", "nienawiść", "nieobecnych",
    "nieobsługiwane", "nieodebranych", "nieodpowiedzialna", "nieodpowiedzialne", "nieodpowiedzialnie", "nieodpowiedzialny", "nieodwracalna", "nieodwracalne",
    "nieodwracalnie", "nieodwracalny", "nieparlamentarny", "niepełnosprawność", "niepełny", "niepewna", "niepewne", "niepewny",
    "niepocieszona", "niepocieszone", "niepocieszony", "niepoczytalność", "niepokojąca", "niepokojące", "niepokojący", "niepokoje",
    "niepokojenie", "niepokój", "nieporozumienie", "niepotwierdzona", "niepotwierdzone", "niepotwierdzony", "niepowodzenie", "niepożądana",
    "niepożądane", "niepożądany", "nieprawdziwa", "nieprawdziwe", "nieprawdziwy", "nieproporcjonalna", "nieproporcjonalne", "nieproporcjonalny",
    "nieprzebaczalna", "nieprzebaczalne", "nieprzebaczalny", "nieprzejrzystość", "nieprzyjemność", "nieprzyjemny", "nieprzyzwoita", "nieprzyzwoite",
    "nieprzyzwoitość", "nieprzyzwoity", "nierówna", "nierówne", "nierówny", "nieskupiona", "nieskupione", "nieskupiony",
    "nieskuteczna", "nieskuteczne", "nieskuteczność", "nieskuteczny", "niesmaczne", "niesmak", "niespełnione", "niespokojny",
    "niespójny", "niesprawiedliwa", "niesprawiedliwe", "niesprawiedliwie", "niesprawiedliwość", "niesprawiedliwy", "niesprzedana", "niesprzedane",
    "niesprzedany", "niestety", "niestosowność", "nieszczelność", "nieszczęście", "nieszczęśliwa", "nieszczęśliwe", "nieszczęśliwy",
    "nieślubny", "nieśmiała", "nieśmiałe", "nieśmiały", "nieśmieszne", "nieświadomy", "nietrwała", "nietrwałe",
    "nietrwały", "nieubłagana", "nieubłagane", "nieubłagany", "nieuczciwa", "nieuczciwe", "nieuczciwy", "nieudana",
    "nieudane", "nieudany", "nieudolna", "nieudolne", "nieudolny", "nieufność", "nieufny", "nieumyślna",
    "nieumyślne", "nieumyślnie", "nieumyślny", "nieuprzejmy", "niewdzięczna", "niewdzięczne", "niewdzięczny", "niewesoła",
    "niewesołe", "niewesoły", "niewierząca", "niewierzące", "niewierzący", "niewłaściwa", "niewłaściwe", "niewłaściwie",
    "niewłaściwy", "niewolnictwo", "niewolnik", "niewolników", "niewrażliwość", "niewybaczalna", "niewybaczalne", "niewybaczalny",
    "niewydolność", "niewygoda", "niewygodny", "niewykorzystana", "niewykorzystane", "niewykorzystany", "niewymieniona", "niewymienione",
    "niewymieniony", "niewypał", "niewypłacalna", "niewypłacalne", "niewypłacalny", "niewystarczająca", "niewystarczające", "niewystarczająco",
    "niewystarczający", "niewyszukana", "niewyszukane", "niewyszukany", "niewzruszona", "niewzruszone", "niewzruszony", "niezabezpieczona",
    "niezadowalająca", "niezadowalające", "niezadowalający", "niezadowolenie", "niezadowolona", "niezadowolone", "niezadowolony", "niezatwierdzona",
    "niezatwierdzone", "niezbadane", "niezdecydowana", "niezdecydowane", "niezdecydowany", "niezdolna", "niezdolne", "niezdolny",
    "niezdrowy", "niezgoda", "nieznośny", "niezręczna", "niezręczne", "niezręczny", "niezrozumiała", "niezrozumiałe",
    "niezrozumiały", "niezrozumiana", "niezrozumiane", "niezrozumiany", "niszcza", "niszcząca", "niszczące", "niszczący",
    "niszcze", "niszczenie", "niszczy", "niszczycielski", "niszczyć", "nonsens", "notoryczna", "notoryczne",
    "notoryczny", "nowicjusz", "nowotwór", "nuda", "nudny", "nudziarz", "obawa", "obciążająca",
    "obciążające", "obciążający", "obciążenie", "obciążone", "obłudny", "obojętność", "obojętny", "obowiązkowy",
    "obrabować", "obraza", "obrazić", "obrazoburcza", "obrazoburcze", "obrazoburczy", "obraźliwa", "obraźliwe",
    "obraźliwy", "obrażona", "obrażone", "obrażony", "obrzydliwa", "obrzydliwe", "obrzydliwy", "oburzająca",
    "oburzające", "oburzający", "oburzenie", "oburzona", "oburzone", "oburzony", "obwinianie", "obwiniona",
    "obwinione", "obwiniony", "oczekiwano", "odcięcie", "odczłowieczać", "odeprzeć", "oderwana", "oderwane",
    "oderwany", "odkłada", "odkładanie", "odkosz", "odmawia", "odmawiając", "odmowa", "odmowy",
    "odmówił", "odmówiono", "odosobniona", "odosobnione", "odosobniony", "odpychająca", "odpychające", "odpychający",
    "odpychana", "odpychane", "odpychany", "odraczać", "odraza", "odrazu", "odrażająca", "odrażające",
    "odrażający", "odroczenie", "odrzuca", "odrzucać", "odrzucenia", "odrzucenie", "odrzucona", "odrzucone",
    "odrzucony", "odrzuć", "odrzuty", "odsłaniając", "odstraszająca", "odstraszające", "odstraszający", "odszkodowanie",
    "odwołana", "odwołane", "odwołany", "odwrócona", "odwrócone", "odwrócony", "ofensywa", "offline",
    "ofiara", "ofiary", "ogień", "ogłuszająca", "ogłuszające", "ogłuszający", "ogranicza", "ograniczać",
    "ograniczająca", "ograniczające", "ograniczający", "ograniczanie", "ograniczenie", "ograniczeń", "ograniczona", "ograniczone",
    "ograniczony", "ohydny", "okpiona", "okpione", "okpiony", "okropne", "okropny", "okrucieństwo",
    "okrutny", "okrycie", "oksymoron", "oops", "opłakiwać", "opłakiwana", "opłakiwane", "opłakiwany",
    "opłat", "opór", "opóźniać", "opóźnienia", "opóźnienie", "opóźniona", "opóźnione", "opóźniony",
    "opresje", "opuszczona", "opuszczone", "opuszczony", "orzechy", "osioł", "osiowane", "oskarżać",
    "oskarżanie", "oskarżenia", "oskarżenie", "oskarżona", "oskarżone", "oskarżony", "osłabiać", "osłabienie",
    "osłabiona", "osłabione", "osłabiony", "ospała", "ospałe", "ospały", "ostryzje", "ostrzał",
    "ostrzec", "ostrzega", "ostrzejszy", "ostrzeżenia", "ostrzeżenie", "ostrzeżona", "ostrzeżone", "ostrzeżony",
    "osuszona", "osuszone", "osuszony", "oszalała", "oszalałe", "oszalały", "oszczercza", "oszczercze",
    "oszczerczy", "oszołomiona", "oszołomione", "oszołomiony", "oszukać", "oszukana", "oszukane", "oszukany",
    "oszukańcza", "oszukańcze", "oszukańczy", "oszukiwanie", "oszust", "oszustwa", "oszustwami", "oszustwo",
    "oszuści", "otulina", "ouch", "overran", "oversell", "overselling", "pamiętliwa", "pamiętliwe",
    "pamiętliwy", "panika", "paniki", "panować", "papieros", "paradoks", "paraliżować", "parodia",
    "parsknął", "parsknęła", "parsknęło", "parszywa", "parszywe", "parszywy", "paskudny", "pech",
    "pedał", "penalizowanie", "penalizuje", "pesymistyczna", "pesymistyczne", "pesymistyczny", "pesymizm", "pęk",
    "piekielna", "piekielne", "piekielny", "piekło", "pieprzona", "pieprzone", "pieprzony", "pierdole",
    "pierdolę", "pierdoli", "pierdolić", "pierdolona", "pierdolone", "pierdolony", "pijana", "pijane",
    "pijany", "pika", "pilna", "pilne", "pilny", "pissing", "pistolet", "pizda",
    "plaga", "plagi", "plamić", "plądrowanie", "plodding", "plotki", "płacz", "płacze",
    "płakać", "płakał", "płakała", "płakało", "pobłażliwa", "pobłażliwe", "pobłażliwy", "pobudzenie",
    "pocięte", "podejrzana", "podejrzane", "podejrzany", "podejrzanych", "podejrzewać", "podła", "podłe",
    "podły", "podstępny", "podważa", "podważona", "podważone", "podważony", "pogarda", "pogardliwa",
    "pogardliwe", "pogardliwie", "pogardliwy", "pogardzie", "pogarszać", "pogarszona", "pogarszone", "pogarszony",
    "pogłębia", "pogłębiają", "pogrzeb", "pogrzeby", "pogwałcić", "poirytowana", "poirytowane", "poirytowany",
    "pokonać", "pokonana", "pokonane", "pokonany", "pokrycie", "pomaganie", "pomijając", "pominięte",
    "pomniejszać", "pomszczona", "pomszczone", "pomszczony", "pomścić", "pomyłka", "ponieść", "ponuro",
    "ponury", "popełniona", "popełnione", "popełniony", "popieprzona", "popieprzone", "popieprzony", "popłoch",
    "porwana", "porwane", "porwania", "porwanie", "porwany", "porzucenie", "porzucić", "porzucone",
    "posądzać", "poszkodowana", "poszkodowane", "poszkodowany", "poślizg", "potępia", "potępiać", "potępienie",
    "potrzebująca", "potrzebujące", "potrzebujący", "powalona", "powalone", "powalony", "powolna", "powolne",
    "powolny", "powstrzymując", "pozbawienie", "pozostawiać", "pozwać", "pozwana", "pozwane", "pozwany",
    "pozwy", "prblm", "prblms", "pretekst", "problem", "problemy", "propaganda", "protest",
    "protestować", "protestująca", "protestujące", "protestujący", "protesty", "prowokuje", "przebrana", "przebrane",
    "przebrania", "przebranie", "przebrany", "przecenić", "przeciągnięta", "przeciągnięte", "przeciągnięty", "przeciążać",
    "przeciętność", "przeciwnik", "przegrana", "przegrane", "przegrany", "przegrywająca", "przegrywające", "przegrywający",
    "przekazywanie", "przekleństwo", "przeklęta", "przeklęte", "przeklęty", "przeklinał", "przekłuwa", "przekraczać",
    "przekręcanie", "przekupić", "przekupiona", "przekupione", "przekupiony", "przekupstwo", "przeładowanie", "przemoc",
    "przemocą", "przemycać", "przemycanie", "przemycona", "przemycone", "przemycony", "przeoczenie", "przeoczone",
    "przepraszać", "przepraszał", "przeprosiny", "przerażona", "przerażone", "przerażony", "przerwać", "przerwał",
    "przerwanie", "przerwy", "przerywając", "przesada", "przesadne", "przesadny", "przesady", "przesadza",
    "przesłuchiwana", "przesłuchiwane", "przesłuchiwany", "przestarzała", "przestarzałe", "przestarzały", "przestępca", "przestępcy",
    "przestępstw", "przestępstwo", "przestraszona", "przestraszone", "przestraszony", "przestraszyć", "przesunięta", "przesunięte",
    "przesunięty", "przeszkadza", "przeszkadzać", "przeszkadzał", "przeszkoda", "przeszkody", "prześladowana", "prześladowane",
    "prześladowanie", "prześladowany", "przewinienia", "przyczajona", "przyczajone", "przyczajony", "przygnębiać", "przygnębiająca",
    "przygnębiające", "przygnębiający", "przygnębiona", "przygnębione", "przygnębiony", "przymus", "przypadkowo", "przypadkowy",
    "przysięga", "przysięgać", "przystanki", "przyznać", "przyznaje", "przyznał", "przyzwoita", "przyzwoite",
    "przyzwoity", "pseudonauka", "psota", "psychopatyczna", "psychopatyczne", "psychopatyczny", "pułapka", "pushy",
    "pustka", "pusty", "pytająca", "pytające", "pytający", "ragująca", "ragujące", "ragujący",
    "ranna", "ranne", "ranny", "ranters", "rants", "rasistami", "rasistowski", "rasizm",
    "ratunek", "rebeliantów", "recesja", "reperkusje", "represjonować", "reprimanding", "reprimands", "rezygnacja",
    "rezygnować", "rezygnuje", "robing", "roboty", "rozbite", "rozczarowana", "rozczarowane", "rozczarowania",
    "rozczarowanie", "rozczarowany", "rozdarty", "rozdrażnia", "rozgniewana", "rozgniewane", "rozgniewany", "rozgoryczona",
    "rozgoryczone", "rozgoryczony", "rozmaz", "rozmyte", "rozpacz", "rozpraszać", "rozsądny", "roztargnienie",
    "roztargniona", "roztargnione", "roztargniony", "roztrzepana", "roztrzepane", "roztrzepany", "rozwalona", "rozwalone",
    "rozwalony", "rozwścieczona", "rozwścieczone", "rozwścieczony", "rozwścieczyć", "rozzłoszczona", "rozzłoszczone", "rozzłoszczony",
    "ruina", "rygiel", "ryzyka", "ryzyko", "rzepak", "sabotaż", "sam", "samobójcza",
    "samobójcze", "samobójczy", "samobójstw", "samobójstwo", "samolubny", "samotny", "samozgodne", "sarkastyczna",
    "sarkastyczne", "sarkastyczny", "savange", "savanges", "sceptycy", "sceptycyzm", "sceptyczna", "sceptyczne",
    "sceptyczny", "sceptyk", "seksista", "seksistyczne", "sfałszowane", "sfrustrowana", "sfrustrowane", "sfrustrowany",
    "shithead", "shoody", "siki", "singleminded", "skamieniałe", "skandal", "skandale", "skandaliczna",
    "skandaliczne", "skandaliczny", "skarga", "skaza", "skazana", "skazane", "skazanie", "skazany",
    "skażenie", "skażona", "skażone", "skażony", "skąpy", "skłamał", "skłonność", "skorumpowana",
    "skorumpowane", "skorumpowany", "skórki", "skradziona", "skradzione", "skradziony", "skruszona", "skruszone",
    "skruszony", "skrzywdzona", "skrzywdzone", "skrzywdzony", "skurcz", "skurczona", "skurczone", "skurczony",
    "skurwielu", "skurwysyn", "slumping", "słabo", "słabości", "słabość", "słaby", "smętny",
    "smog", "smród", "smutek", "smutny", "snubbing", "snubs", "soczysty", "spadanie",
    "spam", "spamerze", "spamerzy", "spamowanie", "spekulacyjny", "spekulować", "spięta", "spięte",
    "spiętrzyć", "spięty", "spisek", "sporny", "spór", "sprawca", "sprawców", "sprowokować",
    "sprowokowana", "sprowokowane", "sprowokowany", "sprzeczna", "sprzeczne", "sprzeczny", "sprzeniewierzenie", "spustoszenie",
    "sroga", "srogi", "srogie", "ssać", "stabs", "stalled", "stalling", "starves",
    "stereotyp", "stereotypowy", "stękanie", "stłumiona", "stłumione", "stłumiony", "stoisko", "strach",
    "stracona", "stracone", "stracony", "strajk", "strajkująca", "strajkujące", "strajkujący", "straszliwa",
    "straszliwe", "straszliwy", "straszne", "straszny", "straty", "stresor", "stresory", "stronnicza",
    "stronnicze", "stronniczość", "stronniczy", "strzelać", "sueing", "suka", "suki", "sumowanie",
    "surowo", "surowy", "swędząca", "swędzące", "swędzący", "szaleńców", "szaleństwo", "szalona",
    "szalone", "szalony", "szał", "szantaż", "szantażowana", "szantażowane", "szantażowanie", "szantażowany",
    "szantażuje", "szarpnięcie", "szary", "szkoda", "szkodliwa", "szkodliwe", "szkodliwy", "szkody",
    "szmata", "szmugluje", "szorstki", "szumowiny", "szydzić", "ścigać", "ścigana", "ścigane",
    "ścigany", "śledziennik", "ślepy", "śmieci", "śmierć", "śmierdząca", "śmierdzące", "śmierdzący",
    "śmierdzi", "śmiertelna", "śmiertelne", "śmiertelnie", "śmiertelność", "śmiertelny", "śmieszny", "takielunek",
    "tard", "tchórz", "tchórzliwa", "tchórzliwe", "tchórzliwy", "terror", "terrorysta", "terrorystami",
    "terroryzować", "terroryzowane", "terroryzuje", "tęsknić", "tnąca", "tnące", "tnący", "toksyczna",
    "toksyczne", "toksyczny", "topór", "torturować", "torturowana", "torturowane", "torturowanie", "torturowany",
    "tortury", "totalitarny", "totalitaryzm", "touting", "traci", "tragedia", "tragedie", "tragiczna",
    "tragiczne", "tragiczny", "traumatyczna", "traumatyczne", "traumatyczny", "truciznach", "trudność", "trudny",
    "trwonienie", "trzęsienie", "twat", "tyłek", "tyrada", "tyran", "tyranianie", "tyrans",
    "ubliżać", "ubliżająca", "ubliżające", "ubliżający", "uboga", "ubogi", "ubogie", "ubolewa",
    "ubolewać", "ubolewał", "ubóstwo", "uciążliwa", "uciążliwe", "uciążliwy", "ucieczka", "ucieka",
    "uciekając", "ucisk", "uciskana", "uciskane", "uciskany", "uciszająca", "uciszające", "uciszający",
    "uczulona", "uczulone", "uczulony", "udać", "udaje", "udaremniać", "udaremnienie", "udaremniona",
    "udaremnione", "udaremniony", "udawanie", "uderzenia", "uduszone", "ugh", "ujarzmiać", "ukarana",
    "ukarane", "ukarany", "ukłucie", "ukośniki", "ukradłem", "ukryć", "ukrywanie", "umierać",
    "umierająca", "umierające", "umierający", "unieruchomiona", "unieruchomione", "unieruchomiony", "unikać", "unikając",
    "uniknąć", "upadek", "upadł", "upadła", "upadłe", "upadły", "uparty", "upiorny",
    "upłynął", "upłynęła", "upłynęło", "upokorzenie", "upokorzona", "upokorzone", "upokorzony", "upomniana",
    "upomniane", "upomniany", "upośledza", "upośledzenie", "upośledzone", "upraszcza", "uproszczenie", "uproszczona",
    "uproszczone", "uproszczony", "uprościć", "uprowadzenia", "uprowadzenie", "uprowadzona", "uprowadzone", "uprowadzony",
    "upuszczać", "uraz", "urazy", "urażona", "urażone", "urażony", "usunąć", "uszkodzić",
    "uszkodzona", "uszkodzone", "uszkodzony", "utknął", "utknęła", "utknęło", "utonął", "utonęła",
    "utonęło", "utonie", "utopić", "utrapienie", "utrata", "utrudnia", "utrudniać", "uwiedziona",
    "uwiedzione", "uwiedziony", "uwięzienie", "uwięziona", "uwięzione", "uwięziony", "uzdrawia", "używana",
    "używane", "używany", "victimizes", "wad", "wada", "wadliwa", "wadliwe", "wadliwy",
    "wady", "walcząc", "walcząca", "walczące", "walczący", "walczyć", "walczył", "walka",
    "walki", "wanker", "wariat", "wątpić", "wątpienie", "wątpliwa", "wątpliwe", "wątpliwy",
    "wdowy", "werdykt", "werdyktów", "westchnienie", "więzienie", "więzień", "więźniowie", "wiktymizacja",
    "wina", "winić", "winna", "winne", "winny", "winy", "wkurw", "wkurwi",
    "wkurwia", "wkurwić", "wkurwili", "wkurwił", "wkurwiła", "wkurwiło", "wkurwiły", "włamanie",
    "włamywacz", "wojna", "wrak", "wrażliwa", "wrażliwe", "wrażliwość", "wrażliwy", "wroga",
    "wrogi", "wrogie", "wrogowie", "wróg", "wrzask", "wrzaskliwa", "wrzaskliwe", "wrzaskliwy",
    "wrzawa", "wstrząsająca", "wstrząsające", "wstrząsający", "wstrząsy", "wstyd", "wścibski", "wściekła",
    "wściekłe", "wściekłość", "wściekły", "wtf", "wtff", "wtfff", "wybielić", "wybryk",
    "wybuch", "wybuchy", "wyciekła", "wyciekłe", "wyciekły", "wycofanie", "wyczerpana", "wyczerpane",
    "wyczerpany", "wyczuwał", "wydalona", "wydalone", "wydalony", "wydrążona", "wydrążone", "wydrążony",
    "wygięcie", "wygnać", "wyjść", "wykluczać", "wykluczenie", "wykoleić", "wykolejenia", "wykolejona",
    "wykolejone", "wykolejony", "wykorzystać", "wykorzystywania", "wykroczenie", "wyłączenie", "wyłączona", "wyłączone",
    "wyłączony", "wyłom", "wymagające", "wymazać", "wymęczona", "wymęczone", "wymęczony", "wymiociny",
    "wymiotował", "wymioty", "wymuszona", "wymuszone", "wymuszony", "wyolbrzymiać", "wypadek", "wypadki",
    "wypłaty", "wyprzedzona", "wyprzedzone", "wyprzedzony", "wyrzuca", "wyrzucenie", "wysypisko", "wysypka",
    "wyszczerbienie", "wyśmiewanie", "wywrotowy", "wyzwanie", "wyzywająca", "wyzywające", "wyzywający", "yucky",
    "zaatakowana", "zaatakowane", "zaatakowany", "zabicie", "zabić", "zabija", "zabita", "zabite",
    "zabity", "zablokowana", "zablokowane", "zablokowany", "zaborcza", "zaborcze", "zaborczy", "zabójstwa",
    "zabójstwo", "zabrania", "zabroniona", "zabronione", "zabroniony", "zaburzenia", "zaburzona", "zaburzone",
    "zaburzony", "zachmurzone", "zachowane", "zadać", "zadaje", "zadane", "zadanie", "zadławienie",
    "zagłodzona", "zagłodzone", "zagłodzony", "zagroził", "zagrożenie", "zagrożeń", "zagrożona", "zagrożone",
    "zagrożony", "zakaz", "zakazać", "zakazana", "zakazane", "zakazany", "zakaźny", "zakażenie",
    "zakłamać", "zakłopotana", "zakłopotane", "zakłopotania", "zakłopotanie", "zakłopotany", "zakłócać", "zakłócenia",
    "zakłócenie", "zakłóceń", "zakłócona", "zakłócone", "zakłócony", "zakręcona", "zakręcone", "zakręcony",
    "zalana", "zalane", "zalany", "zamach", "zamieszek", "zamieszki", "zamyślona", "zamyślone",
    "zamyślony", "zanieczyszczać", "zanieczyszczają", "zanieczyszczająca", "zanieczyszczające", "zanieczyszczający", "zanieczyszczających", "zanieczyszczenia",
    "zanieczyszczenie", "zanieczyszczeń", "zanieczyszczona", "zanieczyszczone", "zanieczyszczony", "zanieczyścić", "zaniedbana", "zaniedbane",
    "zaniedbanie", "zaniedbany", "zaniedbując", "zaniedbuje", "zaniepokojona", "zaniepokojone", "zaniepokojony", "zanika",
    "zaniżone", "zaostrza", "zaostrzona", "zaostrzone", "zaostrzony", "zaostrzyć", "zapada", "zaparcie",
    "zapierająca", "zapierające", "zapierający", "zapłacić", "zapobiec", "zapobiega", "zapobiegać", "zapobieganie",
    "zapodziać", "zapominalski", "zapomniałem", "zapomniana", "zapomniane", "zapomniany", "zapomnieć", "zaprzecza",
    "zaprzeczać", "zaprzeczając", "zapytał", "zaraźliwa", "zaraźliwe", "zaraźliwy", "zarażona", "zarażone",
    "zarażony", "zarozumiała", "zarozumiałe", "zarozumiały", "zarzut", "zarzuty", "zaskarżyć", "zaskoczona",
    "zaskoczone", "zaskoczony", "zasmucać", "zasmucona", "zasmucone", "zasmucony", "zastraszają", "zastraszanie",
    "zastraszenie", "zastraszona", "zastraszone", "zastraszony", "zastraszyć", "zaszokować", "zasztyletować", "zatkane",
    "zatruć", "zatrute", "zatrzasnąć", "zatrzymać", "zatrzymana", "zatrzymane", "zatrzymanie", "zatrzymany",
    "zawieszać", "zawieszona", "zawieszone", "zawieszony", "zawieść", "zawodnik", "zawstydzić", "zawstydzona",
    "zawstydzone", "zawstydzony", "zazdrosny", "zazdroszczę", "zazdrość", "zażądał", "zażenowanie", "zbesztać",
    "zboczeniec", "zbolała", "zbolałe", "zbolały", "zbrodnie", "zdania", "zdanie", "zdeformowana",
    "zdeformowane", "zdeformowany", "zdegradowana", "zdegradowane", "zdegradowany", "zdemoralizować", "zdenerwowana", "zdenerwowane",
    "zdenerwowanie", "zdenerwowany", "zderzenie", "zdesperowana", "zdesperowane", "zdesperowany", "zdewastowana", "zdewastowane",
    "zdewastowany", "zdezorganizowana", "zdezorganizowane", "zdezorganizowany", "zdezorientowana", "zdezorientowane", "zdezorientowany", "zdrada",
    "zdrady", "zdradzać", "zdradzieckie", "zdradzona", "zdradzone", "zdradzony", "zdrętwiała", "zdrętwiałe",
    "zdrętwiały", "zdyskontowane", "zdyskredytowana", "zdyskredytowane", "zdyskredytowany", "zdyskwalifikowana", "zdyskwalifikowane", "zdyskwalifikowany",
    "zemsta", "zepsuty", "zgnieciona", "zgniecione", "zgnieciony", "zgniła", "zgniłe", "zgniły",
    "zgwałcona", "zgwałcone", "zgwałcony", "zielonkawy", "zignorowane", "zirytowana", "zirytowane", "zirytowany",
    "zjadliwa", "zjadliwe", "zjadliwy", "zjeb", "zła", "złagodzi", "złamana", "złamane",
    "złamany", "złe", "zło", "złodupiec", "złości", "złośliwa", "złośliwe", "złośliwy",
    "złowroga", "złowrogi", "złowrogie", "zły", "zmarła", "zmarłe", "zmarły", "zmarnować",
    "zmarnowana", "zmarnowane", "zmarnowanie", "zmarnowany", "zmarszczki", "zmarszczona", "zmarszczone", "zmarszczony",
    "zmartwienie", "zmartwiona", "zmartwione", "zmartwiony", "zmącić", "zmęczenie", "zmęczona", "zmęczone",
    "zmęczony", "zmiażdżyć", "zmieszana", "zmieszane", "zmieszany", "zmonopolizować", "zmówienie", "zmywarka",
    "zmywarki", "zniechęcona", "zniechęcone", "zniechęcony", "zniecierpliwiona", "zniecierpliwione", "zniecierpliwiony", "zniekształca",
    "zniekształcać", "zniekształcając", "zniekształcenie", "zniekształcona", "zniekształcone", "zniekształcony", "znienawidzona", "znienawidzone",
    "znienawidzony", "znieważona", "znieważone", "znieważony", "zniewolona", "zniewolone", "zniewolony", "znika",
    "znikać", "zniknął", "zniknęła", "zniknęło", "zniszczenie", "zniszczona", "zniszczone", "zniszczony",
    "zniszczyć", "znudzona", "znudzone", "znudzony", "zranienie", "zrezygnowana", "zrezygnowane", "zrezygnowany",
    "zrujnować", "zrujnowana", "zrujnowane", "zrujnowany", "zwariowana", "zwariowane", "zwariowany", "zwisająca",
    "zwisające", "zwisający", "zwłoki", "zwodnicza", "zwodnicze", "zwodniczy", "zwodzi", "źle",
    "żal", "żałoba", "żałoby", "żałosne", "żałosny", "żałośnie", "żałowałem", "żałuje",
    "żądania", "żądanie", "żenująca", "żenujące", "żenujący"
)
