import numpy as onp
import pandas as pd


# cells before the first date column: province, country, lat, long
META_COLS = 4


def row_key(row):
    '''(province, country) identity of a raw row'''
    return tuple(row[:2])


def align_rows(reference, table):
    '''Pair every row of reference with the row of table for the same location

    Rows whose (province, country) key matches at the same position are paired
    directly; otherwise the row is looked up by key. Rows with no counterpart
    in table are None. The header row is always paired by position.
    '''
    index = {}
    for row in table[1:]:
        index.setdefault(row_key(row), row)

    aligned = []
    for i, row in enumerate(reference):
        if i < len(table) and (i == 0 or row_key(table[i]) == row_key(row)):
            aligned.append(table[i])
        else:
            aligned.append(index.get(row_key(row)))
    return aligned


def parse_counts(cells, n):
    '''Parse count cells to a list of n integers

    Non-numeric cells are 0, fractions are truncated, missing cells are 0 and
    cells past n are ignored.
    '''
    cells = [str(c).strip() for c in cells[:n]]
    counts = pd.to_numeric(pd.Series(cells, dtype=object), errors='coerce')
    counts = counts.reindex(range(n)).astype(float)
    # out of int64 range would wrap on the cast
    counts[~onp.isfinite(counts) | (counts.abs() >= 2**63)] = 0
    return counts.astype('int64').tolist()


def merge_timeline(dates, cases_row, deaths_row, recovered_row=None):
    '''Merge the rows of the three tables into one timeline

    dates are the header labels after the metadata columns; a missing row
    (None) contributes zeros for every date.
    '''
    n = len(dates)
    series = {}
    for name, row in (('cases', cases_row), ('deaths', deaths_row), ('recovered', recovered_row)):
        cells = (row or [])[META_COLS:]
        series[name] = dict(zip(dates, parse_counts(cells, n)))
    return series
