import pytest

from covid_timeline import jhu
from covid_timeline.historical import build_collection

CASES = '''Province/State,Country/Region,Lat,Long,1/1,1/2,1/3
,Italy,41.87,12.56,1,2,3
Hubei,China,30.97,112.27,4,5,6
'''

DEATHS = '''Province/State,Country/Region,Lat,Long,1/1,1/2,1/3
,Italy,41.87,12.56,0,1,1
Hubei,China,30.97,112.27,1,2,3
'''

# one row short: no Hubei line
RECOVERED = '''Province/State,Country/Region,Lat,Long,1/1,1/2,1/3
,Italy,41.87,12.56,0,0,2
'''


@pytest.fixture
def raw():
    return {'cases': CASES, 'deaths': DEATHS, 'recovered': RECOVERED}

@pytest.fixture
def tables(raw):
    return {key: jhu.parse_csv(text) for key, text in raw.items()}

@pytest.fixture
def collection(tables):
    return build_collection(tables['cases'], tables['deaths'], tables['recovered'])
