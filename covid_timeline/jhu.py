import io
import logging

import pandas as pd
import requests

from . import config

logger = logging.getLogger(__name__)


class FetchError(Exception):
    '''A raw time series file could not be retrieved'''

    def __init__(self, url, reason):
        super().__init__(f'failed to fetch {url}: {reason}')
        self.url = url
        self.reason = reason


def fetch(url, timeout=None):
    '''Download one CSV file and return its text'''
    timeout = config.REQUEST_TIMEOUT if timeout is None else timeout
    logger.debug('fetching %s', url)
    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as e:
        raise FetchError(url, e) from e
    return response.text


def get_csv_data(base=None, files=None, fetch=fetch):
    '''Retrieve the raw cases, deaths and recovered files from the JHU repo

    Files are fetched one after the other; the first failure raises FetchError
    and nothing further is requested.
    '''
    base = config.BASE_URL if base is None else base
    files = config.SOURCES if files is None else files
    return {key: fetch(base + fname) for key, fname in files.items()}


def parse_csv(text):
    '''Parse CSV text into a list of rows of string cells

    No header handling: the header line is returned as row 0. The header sets
    the row width: shorter rows are padded with empty strings, extra cells on
    longer rows are dropped.
    '''
    try:
        header = pd.read_csv(io.StringIO(text), header=None, dtype=str, nrows=1)
    except pd.errors.EmptyDataError:
        return []
    width = header.shape[1]

    df = pd.read_csv(io.StringIO(text),
                     header=None,
                     dtype=str,
                     keep_default_na=False,
                     skip_blank_lines=True,
                     engine='python',
                     on_bad_lines=lambda bad: bad[:width])

    df = df.fillna('')
    return df.values.tolist()
