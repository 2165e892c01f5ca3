"""Great-circle distance of Turkish provinces to Istanbul, bucketed into categories.

Keys are the canonical forms produced by ``locale_normalizer.normalize``.
Coordinates approximate the province centers.
"""

import math
from typing import Literal

from services.locale_normalizer import REFERENCE_CITY, normalize

DistanceCategory = Literal["çok yakın", "yakın", "orta", "uzak", "çok uzak"]

EARTH_RADIUS_KM = 6371.0

REFERENCE_POINT = (41.0082, 28.9784)

# Exclusive upper bounds in km, nearest first. Anything beyond is "çok uzak".
CATEGORY_BOUNDS: tuple[tuple[float, DistanceCategory], ...] = (
    (50, "çok yakın"),  # commutable
    (150, "yakın"),  # same region
    (400, "orta"),
    (800, "uzak"),
)
FARTHEST_CATEGORY: DistanceCategory = "çok uzak"

CATEGORY_ORDER: tuple[DistanceCategory, ...] = (
    "çok yakın", "yakın", "orta", "uzak", "çok uzak",
)

PROVINCE_COORDS: dict[str, tuple[float, float]] = {
    "adana": (37.0000, 35.3213),
    "adiyaman": (37.7648, 38.2786),
    "afyonkarahisar": (38.7567, 30.5433),
    "agri": (39.7191, 43.0503),
    "aksaray": (38.3687, 34.0370),
    "amasya": (40.6524, 35.8288),
    "ankara": (39.9208, 32.8541),
    "antalya": (36.8969, 30.7133),
    "ardahan": (41.1105, 42.7022),
    "artvin": (41.1833, 41.8167),
    "aydin": (37.8450, 27.8396),
    "balikesir": (39.6484, 27.8826),
    "bartin": (41.6358, 32.3375),
    "batman": (37.8812, 41.1351),
    "bayburt": (40.2552, 40.2249),
    "bilecik": (40.1500, 29.9833),
    "bingol": (38.8853, 40.4983),
    "bitlis": (38.4012, 42.1078),
    "bolu": (40.7350, 31.6119),
    "burdur": (37.7167, 30.2833),
    "bursa": (40.1950, 29.0600),
    "canakkale": (40.1450, 26.4064),
    "cankiri": (40.6013, 33.6134),
    "corum": (40.5489, 34.9533),
    "denizli": (37.7765, 29.0864),
    "diyarbakir": (37.9144, 40.2306),
    "duzce": (40.8389, 31.1639),
    "edirne": (41.6772, 26.5556),
    "elazig": (38.6800, 39.2200),
    "erzincan": (39.7505, 39.4926),
    "erzurum": (39.9043, 41.2679),
    "eskisehir": (39.7767, 30.5206),
    "gaziantep": (37.0662, 37.3833),
    "giresun": (40.9128, 38.3895),
    "gumushane": (40.4600, 39.4817),
    "hakkari": (37.5744, 43.7408),
    "hatay": (36.2028, 36.1606),
    "igdir": (39.9237, 44.0436),
    "isparta": (37.7648, 30.5566),
    "istanbul": REFERENCE_POINT,
    "izmir": (38.4189, 27.1287),
    "kahramanmaras": (37.5753, 36.9228),
    "karabuk": (41.1964, 32.6228),
    "karaman": (37.1811, 33.2150),
    "kars": (40.6013, 43.0975),
    "kastamonu": (41.3887, 33.7827),
    "kayseri": (38.7312, 35.4787),
    "kilis": (36.7167, 37.1167),
    "kirikkale": (39.8468, 33.5153),
    "kirklareli": (41.7339, 27.2253),
    "kirsehir": (39.1458, 34.1639),
    "kocaeli": (40.8533, 29.8815),
    "konya": (37.8714, 32.4847),
    "kutahya": (39.4167, 29.9833),
    "malatya": (38.3552, 38.3095),
    "manisa": (38.6191, 27.4289),
    "mardin": (37.3131, 40.7436),
    "mersin": (36.8000, 34.6333),
    "mugla": (37.2153, 28.3636),
    "mus": (38.7432, 41.5067),
    "nevsehir": (38.6244, 34.7239),
    "nigde": (37.9667, 34.6833),
    "ordu": (40.9833, 37.8833),
    "osmaniye": (37.0742, 36.2475),
    "rize": (41.0201, 40.5234),
    "sakarya": (40.7731, 30.3948),
    "samsun": (41.2867, 36.3300),
    "sanliurfa": (37.1674, 38.7955),
    "siirt": (37.9333, 41.9500),
    "sinop": (42.0264, 35.1550),
    "sirnak": (37.5219, 42.4543),
    "sivas": (39.7477, 37.0179),
    "tekirdag": (40.9778, 27.5153),
    "tokat": (40.3167, 36.5500),
    "trabzon": (41.0015, 39.7178),
    "tunceli": (39.1062, 39.5484),
    "usak": (38.6823, 29.4082),
    "van": (38.4891, 43.4089),
    "yalova": (40.6500, 29.2667),
    "yozgat": (39.8200, 34.8044),
    "zonguldak": (41.4564, 31.7987),
}

# Common alternate names seen in profile data
PROVINCE_ALIASES: dict[str, str] = {
    "afyon": "afyonkarahisar",
    "afyon karahisar": "afyonkarahisar",
    "antep": "gaziantep",
    "maras": "kahramanmaras",
    "urfa": "sanliurfa",
    "icel": "mersin",
    "izmit": "kocaeli",
    "adapazari": "sakarya",
}


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance in kilometers between two lat/lon points."""
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lon / 2) ** 2
    )
    return EARTH_RADIUS_KM * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def distance_km(city_key: str | None) -> int | None:
    """Rounded distance from the reference point, or ``None`` for unknown keys."""
    if not city_key:
        return None
    if city_key == REFERENCE_CITY:
        return 0
    coords = PROVINCE_COORDS.get(PROVINCE_ALIASES.get(city_key, city_key))
    if coords is None:
        return None
    return round(haversine_km(coords[0], coords[1], *REFERENCE_POINT))


def category_for_distance(km: float) -> DistanceCategory:
    for upper, category in CATEGORY_BOUNDS:
        if km < upper:
            return category
    return FARTHEST_CATEGORY


def classify(city_key: str | None) -> DistanceCategory | Literal[""]:
    """Bucket a canonical key; ``""`` means unknown (neither penalize nor reward)."""
    km = distance_km(city_key)
    if km is None:
        return ""
    return category_for_distance(km)


def distance_km_from_raw(raw: str | None) -> int | None:
    return distance_km(normalize(raw))


def classify_raw(raw: str | None) -> DistanceCategory | Literal[""]:
    return classify(normalize(raw))
