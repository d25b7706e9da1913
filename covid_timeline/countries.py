import logging

import cachetools.func
import pycountry

logger = logging.getLogger(__name__)


# JHU spellings that pycountry does not resolve on its own (keys lower-case)
aliases = {
    'us': 'USA',
    'usa': 'USA',
    'uk': 'GBR',
    'korea, south': 'KOR',
    's. korea': 'KOR',
    'south korea': 'KOR',
    'korea, north': 'PRK',
    'north korea': 'PRK',
    'taiwan*': 'TWN',
    'taiwan': 'TWN',
    'burma': 'MMR',
    'congo (kinshasa)': 'COD',
    'drc': 'COD',
    'congo (brazzaville)': 'COG',
    'congo': 'COG',
    "cote d'ivoire": 'CIV',
    'ivory coast': 'CIV',
    'laos': 'LAO',
    'russia': 'RUS',
    'iran': 'IRN',
    'syria': 'SYR',
    'vietnam': 'VNM',
    'brunei': 'BRN',
    'bolivia': 'BOL',
    'venezuela': 'VEN',
    'tanzania': 'TZA',
    'moldova': 'MDA',
    'micronesia': 'FSM',
    'west bank and gaza': 'PSE',
    'palestine': 'PSE',
    'holy see': 'VAT',
    'vatican city': 'VAT',
    'cabo verde': 'CPV',
    'cape verde': 'CPV',
    'czech republic': 'CZE',
    'eswatini': 'SWZ',
    'swaziland': 'SWZ',
    'turkey': 'TUR',
    'timor-leste': 'TLS',
    'east timor': 'TLS',
    'macedonia': 'MKD',
    'north macedonia': 'MKD',
}

# display names used in place of the ISO short names
names = {
    'USA': 'USA',
    'GBR': 'UK',
    'KOR': 'S. Korea',
    'PRK': 'North Korea',
    'TWN': 'Taiwan',
    'COD': 'DRC',
    'COG': 'Congo',
    'CIV': "Côte d'Ivoire",
    'LAO': 'Laos',
    'RUS': 'Russia',
    'IRN': 'Iran',
    'SYR': 'Syria',
    'VNM': 'Vietnam',
    'BRN': 'Brunei',
    'BOL': 'Bolivia',
    'VEN': 'Venezuela',
    'TZA': 'Tanzania',
    'MDA': 'Moldova',
    'FSM': 'Micronesia',
    'PSE': 'Palestine',
    'VAT': 'Holy See',
    'CZE': 'Czechia',
    'TUR': 'Turkey',
    'MKD': 'Macedonia',
}

# province spellings (lower-case) mapped to their standard form
province_aliases = {
    'hong kong sar': 'hong kong',
    'macao': 'macau',
    'macao sar': 'macau',
    'reunion': 'réunion',
    'curacao': 'curaçao',
    'saint barthelemy': 'st. barth',
    'st martin': 'saint martin',
    'falkland islands (malvinas)': 'falkland islands (islas malvinas)',
    'bonaire, sint eustatius and saba': 'bonaire, sint eustatius, and saba',
}

FIELDS = ('_id', 'country', 'iso2', 'iso3', 'lat', 'long')


def empty_country_data():
    '''Identity record returned when a name cannot be resolved'''
    return dict.fromkeys(FIELDS)


@cachetools.func.lru_cache(maxsize=1024)
def _lookup(text):
    key = text.strip().lower()
    if not key:
        return None
    try:
        if key in aliases:
            country = pycountry.countries.get(alpha_3=aliases[key])
        else:
            country = pycountry.countries.lookup(key)
    except LookupError:
        return None
    if country is None:
        return None

    name = names.get(country.alpha_3) or getattr(country, 'common_name', None) or country.name
    return (int(country.numeric), name, country.alpha_2, country.alpha_3)


def get_country_data(text):
    '''Resolve free text (name, ISO2, ISO3 or numeric code) to a country record

    Never raises: unknown names give a record with every field set to None.
    Each call returns a new dict, so callers may modify it.
    '''
    data = empty_country_data()
    found = _lookup(str(text))
    if found is None:
        logger.debug('no country match for %r', text)
        return data
    data['_id'], data['country'], data['iso2'], data['iso3'] = found
    return data


def standardize_name(text):
    '''Standard spelling of a (lower-cased) province name'''
    text = ' '.join(text.split())
    return province_aliases.get(text, text)
