import redis

from . import config


class MemoryStore():
    '''Dict-backed store with the subset of the redis interface we use'''

    def __init__(self):
        self.data = {}

    def set(self, key, value):
        self.data[key] = value
        return True

    def get(self, key):
        return self.data.get(key)


def connect(url=None):
    '''Redis client for the configured URL; values come back as str'''
    url = config.REDIS_URL if url is None else url
    return redis.Redis.from_url(url, decode_responses=True)
