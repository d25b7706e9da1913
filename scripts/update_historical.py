import argparse
import logging
import time

from covid_timeline import config
from covid_timeline import store
from covid_timeline.historical import historical_v2


if __name__ == "__main__":

    parser = argparse.ArgumentParser(description='Update the JHU CSSE historical collection')

    # store
    parser.add_argument('--redis-url', help='redis connection URL', default=config.REDIS_URL)
    parser.add_argument('--key', help='cache key for the collection', default=config.KEYS['historical_v2'])

    # schedule
    parser.add_argument('--loop', help='keep running, one update every --interval seconds', action='store_true')
    parser.add_argument('--interval', help='seconds between updates', type=float, default=config.UPDATE_INTERVAL)

    # other
    parser.add_argument('--log-level', help='logging level', default='INFO')

    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper(),
                        format='%(asctime)s %(name)s %(levelname)s %(message)s')

    keys = dict(config.KEYS, historical_v2=args.key)
    db = store.connect(args.redis_url)

    while True:
        historical_v2(keys, db)
        if not args.loop:
            break
        time.sleep(args.interval)
