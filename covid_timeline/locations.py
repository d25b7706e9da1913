from .countries import get_country_data, standardize_name
from .timeline import merge_timeline


def annotate(row, normalize=get_country_data, standardize=standardize_name):
    '''Country and province identity of a raw row

    Returns a dict with country, countryInfo and province. An unresolved
    country keeps the raw text as its name and an all-None countryInfo.
    countryInfo depends only on the country text, so every province of a
    country carries the same record.
    '''
    province, country = row[0], row[1]

    info = dict(normalize(country))

    return {
        'country': info.get('country') or country,
        'countryInfo': info,
        'province': None if province == '' else standardize(province.lower()),
    }


def build_location(dates, cases_row, deaths_row, recovered_row=None, **kwargs):
    '''One location record from the matching rows of the three tables'''
    location = annotate(cases_row, **kwargs)
    location['timeline'] = merge_timeline(dates, cases_row, deaths_row, recovered_row)
    return location
