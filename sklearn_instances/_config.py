"""Default options of sklearn_instances, kept per thread.

Currently only `strict_nominal`, which decides whether bare numbers stored on
nominal attributes are validated when no explicit choice is passed.
"""

import threading
from contextlib import contextmanager

_global_config = {
    'strict_nominal': False,
}
_threadlocal = threading.local()


def _get_threadlocal_config():
    """:return: The options dict of the calling thread, initialized from
    `_global_config` on first use. Changes to it affect only this thread."""
    if not hasattr(_threadlocal, 'options'):
        _threadlocal.options = _global_config.copy()
    return _threadlocal.options


def get_config() -> dict:
    """:return: A copy of the current configuration, see `set_config`."""
    return _get_threadlocal_config().copy()


def set_config(strict_nominal: bool = None):
    """Set default options of the calling thread. Parameters left at `None`
    are not changed.

    :param strict_nominal: bool
        If True, a bare number stored on a nominal attribute has to be a valid
        label index, otherwise `UnknownCategory` is raised. If False (the
        default) such numbers are stored unchecked.
    """
    local_config = _get_threadlocal_config()
    if strict_nominal is not None:
        local_config['strict_nominal'] = bool(strict_nominal)


@contextmanager
def config_context(**new_config):
    """Temporarily override options such as `strict_nominal` for the calling
    thread, restoring the previous values on exit. See `set_config`.

    >>> with config_context(strict_nominal=True):
    ...     pass  # numbers on nominal attributes are validated in here
    """
    old_config = get_config()
    set_config(**new_config)
    try:
        yield
    finally:
        set_config(**old_config)


def resolve_strict_nominal(strict_nominal: bool = None) -> bool:
    """:return: `strict_nominal` or, if it is None, the configured default."""
    if strict_nominal is None:
        return _get_threadlocal_config()['strict_nominal']
    return bool(strict_nominal)
