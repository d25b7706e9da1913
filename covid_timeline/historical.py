import json
import logging

from . import jhu
from .locations import build_location
from .timeline import META_COLS, align_rows

logger = logging.getLogger(__name__)


def build_collection(cases, deaths, recovered, **kwargs):
    '''Merge the parsed cases, deaths and recovered tables into location records

    The first table row is the header; it supplies the date labels and no
    record. Deaths and recovered rows are matched to cases rows by
    (province, country); a row missing from either table counts as zeros.
    '''
    if not cases:
        return []

    # dates key for timeline
    dates = cases[0][META_COLS:]

    deaths = align_rows(cases, deaths)
    recovered = align_rows(cases, recovered)

    result = [build_location(dates, c, d, r, **kwargs)
              for c, d, r in zip(cases, deaths, recovered)]

    # first record comes from the header row
    return result[1:]


def historical_v2(keys, store, fetch=jhu.get_csv_data, on_event=None):
    '''Rebuild the historical collection from JHU CSSE and write it to store

    keys['historical_v2'] names the slot. If any download fails nothing is
    written and None is returned; otherwise returns the number of locations.
    on_event(name, **details) is called with 'fetch_failed' or 'updated'.
    '''
    def emit(name, **details):
        if on_event is not None:
            on_event(name, **details)

    try:
        raw = fetch()
    except jhu.FetchError as e:
        logger.error('JHU CSSE Historical not updated: %s', e)
        emit('fetch_failed', error=e)
        return None

    tables = {key: jhu.parse_csv(text) for key, text in raw.items()}
    collection = build_collection(tables['cases'], tables['deaths'], tables.get('recovered', []))

    key = keys['historical_v2']
    store.set(key, json.dumps(collection))

    logger.info('Updated JHU CSSE Historical: %d locations', len(collection))
    emit('updated', count=len(collection), key=key)
    return len(collection)


def load_collection(keys, store):
    '''Read the stored collection back; empty list if nothing has been written'''
    value = store.get(keys['historical_v2'])
    if not value:
        return []
    return json.loads(value)
