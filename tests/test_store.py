from unittest import mock

from covid_timeline import config, store


def test_memory_store():
    db = store.MemoryStore()
    assert db.get('k') is None
    assert db.set('k', '[]') is True
    assert db.get('k') == '[]'
    db.set('k', '[1]')
    assert db.get('k') == '[1]'


def test_connect_uses_configured_url():
    with mock.patch('covid_timeline.store.redis.Redis.from_url') as from_url:
        store.connect()
    from_url.assert_called_once_with(config.REDIS_URL, decode_responses=True)


def test_connect_explicit_url():
    with mock.patch('covid_timeline.store.redis.Redis.from_url') as from_url:
        store.connect('redis://cache:6379/2')
    assert from_url.call_args.args == ('redis://cache:6379/2',)
