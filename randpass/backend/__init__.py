# secure random byte source
# (the first importable backend provides `randombytes`)
#

import logging
from importlib import import_module

__all__ = ('randombytes',)

log = logging.getLogger(__name__)

# ordered by priority
all_backend_names = ('pynacl', 'standard')

available_backends = ()
for backend_name in all_backend_names:
    try:
        available_backends += (import_module('.' + backend_name, __name__),)
    except ImportError:
        pass
del backend_name


class MissingError(RuntimeError):
    pass


def __getattr__(name):
    if name != 'randombytes':
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    if not available_backends:
        raise MissingError(f"Missing {name}. Please install {' or '.join(all_backend_names)}.")
    backend = available_backends[0]
    log.debug("Using %s from %s", name, backend.__name__)
    return backend.randombytes
