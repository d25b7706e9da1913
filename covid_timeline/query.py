import math
from collections import namedtuple

from .countries import get_country_data


ByName = namedtuple('ByName', ['text', 'province'], defaults=[None])
ById = namedtuple('ById', ['id', 'province'], defaults=[None])


def parse_query(text, province=None):
    '''ById if text reads as a number, otherwise ByName'''
    try:
        number = float(text)
    except (TypeError, ValueError):
        return ByName(text, province)
    if not math.isfinite(number):
        return ByName(text, province)
    return ById(number, province)


def _same_country(info, wanted):
    # an unset field on the location never equals a resolved query field
    return any((info.get(f) or 'null') == wanted.get(f)
               for f in ('country', 'iso2', 'iso3'))


def find_location(collection, query, province=None):
    '''First location matching a country (and optional province) query

    query is a ByName / ById value, or a string which is read as an id when
    it is numeric. Name queries are resolved to a country and matched on name,
    ISO2 or ISO3; id queries match the numeric country code. Returns a copy of
    the location without countryInfo, or None.
    '''
    if not isinstance(query, (ByName, ById)):
        query = parse_query(query)
    if province is not None:
        query = query._replace(province=province)

    if isinstance(query, ById):
        def matches(info):
            return info.get('_id') == query.id
    else:
        wanted = get_country_data(query.text)

        def matches(info):
            return _same_country(info, wanted)

    for item in collection:
        if query.province and not (item['province'] and item['province'] == query.province):
            continue
        if matches(item.get('countryInfo') or {}):
            return {k: v for k, v in item.items() if k != 'countryInfo'}
    return None


def aggregate_global(collection):
    '''Sum cases and deaths over all locations for each date'''
    cases = {}
    deaths = {}
    for location in collection:
        timeline = location['timeline']
        for date, count in timeline['cases'].items():
            cases[date] = cases.get(date, 0) + count
        for date, count in timeline['deaths'].items():
            deaths[date] = deaths.get(date, 0) + count
    return {
        'cases' : cases,
        'deaths' : deaths
    }
