"""Name lists used to classify entity candidates."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Iterable

NAME_PREFIXES = frozenset({
    "mr", "mrs", "ms", "miss", "dr", "prof", "professor", "sir", "madam",
    "lord", "lady", "rev", "reverend", "fr", "father", "sister", "brother",
    "rabbi", "imam", "senator", "representative", "governor", "mayor",
    "president", "ceo", "cfo", "cto", "coo", "vp", "director", "manager",
})

NAME_SUFFIXES = frozenset({
    "jr", "sr", "ii", "iii", "iv", "v", "phd", "md", "esq", "jd", "dds",
    "cpa", "mba", "msc", "bsc", "ba", "ma",
})

FIRST_NAMES = frozenset({
    "james", "john", "robert", "michael", "william", "david", "richard",
    "joseph", "thomas", "charles", "christopher", "daniel", "matthew",
    "anthony", "mark", "donald", "steven", "paul", "andrew", "joshua",
    "kenneth", "kevin", "brian", "mary", "patricia", "jennifer", "linda",
    "elizabeth", "barbara", "susan", "jessica", "sarah", "karen", "nancy",
    "lisa", "betty", "margaret", "sandra", "ashley", "dorothy", "kimberly",
    "emily", "donna", "michelle", "carol", "amanda", "melissa", "deborah",
    "stephanie", "rebecca", "sharon", "laura", "elon", "jeff", "tim",
    "sundar", "satya", "jensen", "sam", "alex",
})

ORG_INDICATORS = frozenset({
    "inc", "corp", "corporation", "company", "co", "llc", "ltd", "limited",
    "group", "holdings", "partners", "association", "foundation", "institute",
    "university", "college", "school", "academy", "hospital", "clinic",
    "bank", "trust", "fund", "capital", "ventures", "labs", "technologies",
    "tech", "software", "systems", "solutions", "services", "industries",
    "entertainment", "media", "studios", "productions", "records", "music",
    "games", "sports", "airlines", "airways", "motors", "automotive",
})

ORGANIZATIONS = frozenset({
    "google", "apple", "microsoft", "amazon", "facebook", "meta", "netflix",
    "twitter", "x", "tesla", "spacex", "nvidia", "intel", "amd", "ibm",
    "oracle", "salesforce", "adobe", "spotify", "uber", "lyft", "airbnb",
    "tiktok", "bytedance", "alibaba", "tencent", "baidu", "samsung", "sony",
    "nintendo", "disney", "warner", "paramount", "universal", "fox", "hbo",
    "cnn", "bbc", "nbc", "cbs", "abc", "espn", "nfl", "nba", "mlb", "fifa",
    "youtube", "instagram", "snapchat", "pinterest", "linkedin", "reddit",
    "twitch", "discord", "slack", "zoom", "github", "gitlab", "openai",
    "anthropic", "deepmind", "huggingface", "stability", "midjourney",
})

LOCATION_INDICATORS = frozenset({
    "city", "town", "village", "county", "state", "province", "region",
    "country", "nation", "island", "peninsula", "continent", "ocean", "sea",
    "river", "lake", "mountain", "valley", "desert", "forest", "park",
    "street", "avenue", "boulevard", "road", "highway", "bridge", "tunnel",
    "airport", "station", "terminal", "port", "harbor", "beach", "coast",
})

# Multi-word places are listed both squashed ("newyork") and spaced
# ("silicon valley"); classification compares with whitespace removed.
LOCATIONS = frozenset({
    "usa", "america", "canada", "mexico", "brazil", "argentina", "uk",
    "england", "france", "germany", "italy", "spain", "portugal", "russia",
    "china", "japan", "korea", "india", "australia", "africa", "europe",
    "asia", "california", "texas", "florida", "newyork", "chicago", "boston",
    "seattle", "denver", "atlanta", "miami", "dallas", "houston", "phoenix",
    "sanfrancisco", "losangeles", "sandiego", "lasvegas", "portland",
    "london", "paris", "berlin", "rome", "madrid", "amsterdam", "vienna",
    "tokyo", "beijing", "shanghai", "singapore", "hongkong", "dubai",
    "sydney", "melbourne", "toronto", "vancouver", "montreal", "hollywood",
    "silicon valley", "wall street", "broadway", "times square", "manhattan",
})

PRODUCTS = frozenset({
    "iphone", "ipad", "macbook", "airpods", "apple watch", "imac",
    "pixel", "android", "chrome", "chromebook", "nest",
    "windows", "xbox", "surface", "office", "azure", "teams",
    "alexa", "kindle", "echo", "aws", "prime",
    "model s", "model 3", "model x", "model y", "cybertruck",
    "playstation", "switch", "quest", "oculus",
    "chatgpt", "gpt", "claude", "gemini", "copilot", "midjourney",
    "photoshop", "illustrator", "premiere", "after effects",
})

CONNECTORS = frozenset({"of", "the", "and", "for", "in", "at", "on", "&", "-"})


def _names(values: Iterable[str]) -> frozenset[str]:
    return frozenset(" ".join(v.lower().split()) for v in values if v.strip())


@dataclass(slots=True, frozen=True)
class Gazetteer:
    """Lower-cased lookup lists for entity classification."""

    organizations: frozenset[str] = ORGANIZATIONS
    org_indicators: frozenset[str] = ORG_INDICATORS
    locations: frozenset[str] = LOCATIONS
    location_indicators: frozenset[str] = LOCATION_INDICATORS
    products: frozenset[str] = PRODUCTS
    first_names: frozenset[str] = FIRST_NAMES
    name_prefixes: frozenset[str] = NAME_PREFIXES
    name_suffixes: frozenset[str] = NAME_SUFFIXES

    def extended(
        self,
        *,
        organizations: Iterable[str] = (),
        locations: Iterable[str] = (),
        products: Iterable[str] = (),
        first_names: Iterable[str] = (),
    ) -> Gazetteer:
        """Return a copy with extra names merged into the known-name lists."""
        return dataclasses.replace(
            self,
            organizations=self.organizations | _names(organizations),
            locations=self.locations | _names(locations),
            products=self.products | _names(products),
            first_names=self.first_names | _names(first_names),
        )


DEFAULT_GAZETTEER = Gazetteer()
