"""
Lazy Singleton
==============

Core Design: Process-wide single instance per class, created on first access.

Each subclass owns its instance slot and its own lock. The slot is only read
and filled while holding that lock, so two threads can never both construct
the instance. Direct construction is refused; instance() is the only way in.
The instance lives for the rest of the process.
"""

import threading


class LazySingleton:
    """Base class for lazily created, thread-safe singletons"""

    _instance = None
    _lock = threading.Lock()
    _constructing = False

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        cls._instance = None
        cls._lock = threading.Lock()
        cls._constructing = False

    def __new__(cls, *args, **kwargs):
        if not cls._constructing:
            raise TypeError(f"{cls.__name__} is a singleton, use {cls.__name__}.instance()")
        return super().__new__(cls)

    @classmethod
    def instance(cls):
        """Return the shared instance, constructing it on first call"""
        with cls._lock:
            if cls._instance is None:
                cls._constructing = True
                try:
                    # A raising constructor leaves the slot empty for a retry
                    cls._instance = cls()
                finally:
                    cls._constructing = False
            return cls._instance

    @classmethod
    def is_initialized(cls) -> bool:
        with cls._lock:
            return cls._instance is not None
