import os


BASE_URL = 'https://raw.githubusercontent.com/CSSEGISandData/COVID-19/master/csse_covid_19_data/csse_covid_19_time_series/'

# one file per metric, fetched in this order
SOURCES = {
    'cases' : 'time_series_covid19_confirmed_global.csv',
    'deaths' : 'time_series_covid19_deaths_global.csv',
    'recovered' : 'time_series_covid19_recovered_global.csv'
}

# cache slots in the key-value store
KEYS = {
    'historical_v2' : 'historical_v2'
}

REDIS_URL = os.environ.get('REDIS_URL', 'redis://localhost:6379/0')

REQUEST_TIMEOUT = float(os.environ.get('COVID_TIMELINE_TIMEOUT', 30))

UPDATE_INTERVAL = 600
