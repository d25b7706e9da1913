import argparse
import json
import logging
import sys

from covid_timeline import config
from covid_timeline import store
from covid_timeline.historical import load_collection
from covid_timeline.query import aggregate_global, find_location


if __name__ == "__main__":

    parser = argparse.ArgumentParser(description='Query the stored JHU CSSE historical collection')
    parser.add_argument('--redis-url', help='redis connection URL', default=config.REDIS_URL)
    parser.add_argument('--key', help='cache key for the collection', default=config.KEYS['historical_v2'])
    parser.add_argument('--log-level', help='logging level', default='WARNING')

    sub = parser.add_subparsers(dest='command', required=True)

    country = sub.add_parser('country', help='timeline of one country or province')
    country.add_argument('query', help='country name, ISO2, ISO3 or numeric id')
    country.add_argument('--province', help='province name (lower case)', default=None)

    sub.add_parser('all', help='global cases and deaths per date')

    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper())

    keys = dict(config.KEYS, historical_v2=args.key)
    data = load_collection(keys, store.connect(args.redis_url))

    if args.command == 'all':
        result = aggregate_global(data)
    else:
        result = find_location(data, args.query, args.province)
        if result is None:
            print(f"no data for {args.query}" + (f" / {args.province}" if args.province else ''), file=sys.stderr)
            sys.exit(1)

    print(json.dumps(result, indent=2))
