from covid_timeline.timeline import align_rows, merge_timeline, parse_counts


DATES = ['1/1', '1/2', '1/3']


def test_parse_counts_best_effort():
    cells = ['1', 'x', '', ' 4 ', '2.9', 'nan', 'inf']
    assert parse_counts(cells, 7) == [1, 0, 0, 4, 2, 0, 0]


def test_parse_counts_length_follows_n():
    assert parse_counts(['1'], 3) == [1, 0, 0]
    assert parse_counts(['1', '2', '3', '4'], 2) == [1, 2]
    assert parse_counts([], 0) == []


def test_merge_timeline():
    row = ['', 'Italy', '0', '0']
    timeline = merge_timeline(DATES, row + ['1', '2', '3'], row + ['0', '1', '1'], row + ['0', '0', '2'])
    assert timeline == {
        'cases': {'1/1': 1, '1/2': 2, '1/3': 3},
        'deaths': {'1/1': 0, '1/2': 1, '1/3': 1},
        'recovered': {'1/1': 0, '1/2': 0, '1/3': 2},
    }
    assert list(timeline['cases']) == DATES


def test_merge_timeline_missing_and_short_rows():
    row = ['', 'Italy', '0', '0']
    timeline = merge_timeline(DATES, row + ['1', 'oops'], row + ['1', '2', '3', '4'], None)
    assert timeline['cases'] == {'1/1': 1, '1/2': 0, '1/3': 0}
    assert timeline['deaths'] == {'1/1': 1, '1/2': 2, '1/3': 3}
    assert timeline['recovered'] == dict.fromkeys(DATES, 0)


def test_align_rows_positional():
    header = ['p', 'c', 'lat', 'long']
    a = [header, ['', 'Italy'], ['Hubei', 'China']]
    b = [header, ['', 'Italy', 'x'], ['Hubei', 'China', 'y']]
    assert align_rows(a, b) == b


def test_align_rows_by_key_when_order_differs():
    a = [['h'], ['', 'Italy'], ['Hubei', 'China'], ['', 'France']]
    b = [['h2'], ['Hubei', 'China', 'y'], ['', 'Italy', 'x']]
    assert align_rows(a, b) == [['h2'], ['', 'Italy', 'x'], ['Hubei', 'China', 'y'], None]


def test_align_rows_shorter_table():
    a = [['h'], ['', 'Italy'], ['Hubei', 'China']]
    b = [['h'], ['', 'Italy', 'x']]
    assert align_rows(a, b) == [['h'], ['', 'Italy', 'x'], None]
    assert align_rows(a, []) == [None, None, None]


def test_parse_counts_out_of_range_is_zero():
    assert parse_counts(['1e30', '-1e30', '-5', '7'], 4) == [0, 0, -5, 7]
