"""Exceptions raised inside counterlist."""


class CounterListError(Exception):
    """Base error for counterlist."""
    pass


class StorageError(CounterListError):
    """Reading or writing the persisted collection failed."""
    pass
