"""State / province abbreviation tables, keyed by country code.

Keys are lowercased region names as customers type them; values are the
lowercase abbreviation the matching API expects.  Compound names are
listed before any shorter name they contain ("west virginia" before
"virginia") because entries are applied in order.
"""
from __future__ import annotations

US_STATES: dict[str, str] = {
    "alabama": "al", "alaska": "ak", "arizona": "az", "arkansas": "ar",
    "california": "ca", "colorado": "co", "connecticut": "ct",
    "delaware": "de", "district of columbia": "dc", "florida": "fl",
    "georgia": "ga", "hawaii": "hi", "idaho": "id", "illinois": "il",
    "indiana": "in", "iowa": "ia", "kansas": "ks", "kentucky": "ky",
    "louisiana": "la", "maine": "me", "maryland": "md",
    "massachusetts": "ma", "michigan": "mi", "minnesota": "mn",
    "mississippi": "ms", "missouri": "mo", "montana": "mt",
    "nebraska": "ne", "nevada": "nv", "new hampshire": "nh",
    "new jersey": "nj", "new mexico": "nm", "new york": "ny",
    "north carolina": "nc", "north dakota": "nd", "ohio": "oh",
    "oklahoma": "ok", "oregon": "or", "pennsylvania": "pa",
    "rhode island": "ri", "south carolina": "sc", "south dakota": "sd",
    "tennessee": "tn", "texas": "tx", "utah": "ut", "vermont": "vt",
    "west virginia": "wv", "virginia": "va", "washington": "wa",
    "wisconsin": "wi", "wyoming": "wy",
    "american samoa": "as", "guam": "gu", "northern mariana islands": "mp",
    "puerto rico": "pr", "us virgin islands": "vi", "virgin islands": "vi",
}

CA_PROVINCES: dict[str, str] = {
    "alberta": "ab", "british columbia": "bc", "manitoba": "mb",
    "new brunswick": "nb", "newfoundland and labrador": "nl",
    "newfoundland": "nl", "labrador": "nl", "northwest territories": "nt",
    "nova scotia": "ns", "nunavut": "nu", "ontario": "on",
    "prince edward island": "pe", "québec": "qc", "quebec": "qc",
    "saskatchewan": "sk", "yukon": "yt",
}

AU_STATES: dict[str, str] = {
    "australian capital territory": "act", "new south wales": "nsw",
    "northern territory": "nt", "queensland": "qld",
    "south australia": "sa", "tasmania": "tas", "victoria": "vic",
    "western australia": "wa",
}

MX_STATES: dict[str, str] = {
    "aguascalientes": "agu", "baja california sur": "bcs",
    "baja california": "bcn", "campeche": "cam", "chiapas": "chp",
    "chihuahua": "chh", "ciudad de méxico": "cmx", "ciudad de mexico": "cmx",
    "coahuila": "coa", "colima": "col", "durango": "dur",
    "estado de méxico": "mex", "estado de mexico": "mex",
    "guanajuato": "gua", "guerrero": "gro", "hidalgo": "hid",
    "jalisco": "jal", "michoacán": "mic", "michoacan": "mic",
    "morelos": "mor", "nayarit": "nay", "nuevo león": "nle",
    "nuevo leon": "nle", "oaxaca": "oax", "puebla": "pue",
    "querétaro": "que", "queretaro": "que", "quintana roo": "roo",
    "san luis potosí": "slp", "san luis potosi": "slp", "sinaloa": "sin",
    "sonora": "son", "tabasco": "tab", "tamaulipas": "tam",
    "tlaxcala": "tla", "veracruz": "ver", "yucatán": "yuc",
    "yucatan": "yuc", "zacatecas": "zac",
    "méxico": "mex", "mexico": "mex",
}

DE_STATES: dict[str, str] = {
    "baden-württemberg": "bw", "baden-wuerttemberg": "bw",
    "bayern": "by", "bavaria": "by", "berlin": "be",
    "brandenburg": "bb", "bremen": "hb", "hamburg": "hh",
    "hessen": "he", "hesse": "he",
    "mecklenburg-vorpommern": "mv", "niedersachsen": "ni",
    "lower saxony": "ni", "nordrhein-westfalen": "nw",
    "north rhine-westphalia": "nw", "rheinland-pfalz": "rp",
    "rhineland-palatinate": "rp", "saarland": "sl",
    "sachsen-anhalt": "st", "saxony-anhalt": "st",
    "sachsen": "sn", "saxony": "sn", "schleswig-holstein": "sh",
    "thüringen": "th", "thuringia": "th",
}

IN_STATES: dict[str, str] = {
    "andhra pradesh": "ap", "arunachal pradesh": "ar", "assam": "as",
    "bihar": "br", "chhattisgarh": "cg", "goa": "ga", "gujarat": "gj",
    "haryana": "hr", "himachal pradesh": "hp", "jharkhand": "jh",
    "karnataka": "ka", "kerala": "kl", "madhya pradesh": "mp",
    "maharashtra": "mh", "manipur": "mn", "meghalaya": "ml",
    "mizoram": "mz", "nagaland": "nl", "odisha": "od", "punjab": "pb",
    "rajasthan": "rj", "sikkim": "sk", "tamil nadu": "tn",
    "telangana": "ts", "tripura": "tr", "uttar pradesh": "up",
    "uttarakhand": "uk", "west bengal": "wb",
    "andaman and nicobar islands": "an", "chandigarh": "ch",
    "dadra and nagar haveli and daman and diu": "dh",
    "jammu and kashmir": "jk", "ladakh": "la", "lakshadweep": "ld",
    "national capital territory of delhi": "dl", "delhi": "dl",
    "puducherry": "py",
}

STATE_MAPPINGS: dict[str, dict[str, str]] = {
    "us": US_STATES,
    "ca": CA_PROVINCES,
    "au": AU_STATES,
    "mx": MX_STATES,
    "de": DE_STATES,
    "in": IN_STATES,
}
