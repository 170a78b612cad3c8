"""
Pincode proximity heuristics.

The first three digits of an Indian pincode identify the sorting district.
Two pincodes are treated as nearby when they share a district or are
numerically close; distance is a linear estimate of roughly 50 km per 1000
pincode steps. None of this is geographic, it only ranks theaters.
"""

import math
import re
from typing import Optional

from bookmyblock.core.logging import get_logger

logger = get_logger(__name__)

DISTRICT_PREFIX_LENGTH = 3
NEARBY_THRESHOLD = 1000
KM_PER_THOUSAND = 50

_PINCODE = re.compile(r"^\d{6}$")
_DIGITS = re.compile(r"[0-9]+")

CITY_PINCODES: dict[str, str] = {
    # Metro cities
    "mumbai": "400001",
    "delhi": "110001",
    "bangalore": "560001",
    "bengaluru": "560001",
    "hyderabad": "500001",
    "chennai": "600001",
    "kolkata": "700001",
    "pune": "411001",
    "ahmedabad": "380001",
    # Tier 1
    "jaipur": "302001",
    "surat": "395001",
    "lucknow": "226001",
    "kanpur": "208001",
    "nagpur": "440001",
    "indore": "452001",
    "thane": "400601",
    "bhopal": "462001",
    "visakhapatnam": "530001",
    "patna": "800001",
    "vadodara": "390001",
    "ghaziabad": "201001",
    "ludhiana": "141001",
    "agra": "282001",
    "nashik": "422001",
    "faridabad": "121001",
    "meerut": "250001",
    "rajkot": "360001",
    "varanasi": "221001",
    "srinagar": "190001",
    "aurangabad": "431001",
    "dhanbad": "826001",
    "amritsar": "143001",
    "allahabad": "211001",
    "prayagraj": "211001",
    "ranchi": "834001",
    "howrah": "711101",
    "coimbatore": "641001",
    "jabalpur": "482001",
    "gwalior": "474001",
    "vijayawada": "520001",
    "jodhpur": "342001",
    "madurai": "625001",
    "raipur": "492001",
    "kota": "324001",
    "chandigarh": "160001",
    "guwahati": "781001",
    "solapur": "413001",
    "bareilly": "243001",
    "tirupati": "517501",
    # Tier 2
    "mysore": "570001",
    "mysuru": "570001",
    "salem": "636001",
    "madura": "625001",
    "tiruchirappalli": "620001",
    "trichy": "620001",
    "erode": "638001",
    "vellore": "632001",
    "thoothukudi": "628001",
    "tirunelveli": "627001",
    "kochi": "682001",
    "kozhikode": "673001",
    "thrissur": "680001",
    "kollam": "691001",
    "thiruvananthapuram": "695001",
    "trivandrum": "695001",
    "mangalore": "575001",
    "hubli": "580001",
    "belgaum": "590001",
    "gulbarga": "585101",
    "davangere": "577001",
    "bellary": "583101",
    "bijapur": "586101",
    "shimoga": "577201",
    "tumkur": "572101",
    "raichur": "584101",
    "bidar": "585401",
    "hospet": "583201",
    "gadag": "582101",
    "robertson pet": "563122",
    "bhadravati": "577301",
    "chitradurga": "577501",
    "udupi": "576101",
    "karwar": "581301",
    "ranebennuru": "581115",
    "gangavati": "583227",
    "bagalkot": "587101",
    "port blair": "744101",
    # Telangana
    "warangal": "506002",
    "nizamabad": "503001",
    "karimnagar": "505001",
    "ramagundam": "505209",
    "khammam": "507001",
    "mahbubnagar": "509001",
    "nalgonda": "508001",
    "adilabad": "504001",
    "suryapet": "508213",
    "miryalaguda": "508207",
    "jagtial": "505327",
    "mancherial": "504208",
    "nirmal": "504106",
    "kothagudem": "507101",
    "bodhan": "503185",
    "tandur": "501141",
    "siddipet": "502103",
    "wanaparthy": "509103",
    "palwancha": "507115",
    "bhongir": "508116",
    # Hyderabad localities
    "secunderabad": "500003",
    "kompally": "500014",
    "kukatpally": "500072",
    "madhapur": "500081",
    "gachibowli": "500032",
    "hitec city": "500081",
    "banjara hills": "500034",
    "jubilee hills": "500033",
    "begumpet": "500016",
    "somajiguda": "500082",
    "ameerpet": "500016",
    "sr nagar": "500038",
    "punjagutta": "500082",
    "lakdikapul": "500004",
    "abids": "500001",
    "koti": "500095",
    "sultan bazar": "500095",
    "charminar": "500002",
    "falaknuma": "500053",
    "malakpet": "500036",
    "dilsukhnagar": "500060",
    "lb nagar": "500074",
    "vanasthalipuram": "500070",
    "uppal": "500039",
    "nagole": "500068",
    "tarnaka": "500017",
    "habsiguda": "500007",
    "malkajgiri": "500047",
    "alwal": "500015",
    "bollaram": "502325",
    "quthbullapur": "500055",
    "medchal": "501401",
    "shamirpet": "500078",
    "ghatkesar": "501301",
    "keesara": "501301",
    "ibrahimpatnam": "501506",
    "hayathnagar": "501505",
    "badangpet": "500058",
    "rajendranagar": "500030",
    "shamshabad": "501218",
    "chevella": "501503",
}


def is_valid_pincode(value: str) -> bool:
    return bool(value) and bool(_PINCODE.match(value))


def _as_number(pincode: Optional[str]) -> Optional[int]:
    if not isinstance(pincode, str) or not _DIGITS.fullmatch(pincode):
        return None
    return int(pincode)


def is_pincode_nearby(user_pincode: str, theater_pincode: str, max_distance: int = 50) -> bool:
    """
    Same sorting district, or numerically within NEARBY_THRESHOLD.

    max_distance is unused; the threshold is fixed.
    """
    if not user_pincode or not theater_pincode:
        return False

    if user_pincode[:DISTRICT_PREFIX_LENGTH] == theater_pincode[:DISTRICT_PREFIX_LENGTH]:
        return True

    user_number, theater_number = _as_number(user_pincode), _as_number(theater_pincode)
    if user_number is None or theater_number is None:
        logger.warning("pincode_not_numeric", user_pincode=user_pincode, theater_pincode=theater_pincode)
        return False
    return abs(user_number - theater_number) < NEARBY_THRESHOLD


def approximate_distance_km(pincode_a: str, pincode_b: str) -> int:
    number_a, number_b = _as_number(pincode_a), _as_number(pincode_b)
    if number_a is None or number_b is None:
        return 0
    difference = abs(number_a - number_b)
    # half-up rounding
    return math.floor(difference / NEARBY_THRESHOLD * KM_PER_THOUSAND + 0.5)


def get_pincode_from_city(city_name: Optional[str]) -> Optional[str]:
    """Exact table lookup, then substring containment in either direction."""
    if not city_name:
        return None

    normalized = city_name.strip().lower()
    if not normalized:
        return None

    if normalized in CITY_PINCODES:
        return CITY_PINCODES[normalized]

    for city, pincode in CITY_PINCODES.items():
        if city in normalized or normalized in city:
            return pincode
    return None
