"""
Registry of accessory types that can be built from a config file.

Accessory modules register their class under a type name when they are
imported. The runner looks up the ``accessory`` key of each config entry
here.
"""
import logging

logger = logging.getLogger(__name__)

_accessory_types = {}


def register_accessory(name, accessory_cls):
    """Register an accessory class under the given type name.

    :raise ValueError: When another class is already registered with that name.
    """
    existing = _accessory_types.get(name)
    if existing is not None and existing is not accessory_cls:
        raise ValueError(
            "Accessory type {} is already registered to {}".format(
                name, existing.__name__
            )
        )
    _accessory_types[name] = accessory_cls
    logger.debug("Registered accessory type %s", name)


def get_accessory_class(name):
    """Return the class registered for the given type name."""
    try:
        return _accessory_types[name]
    except KeyError:
        raise KeyError("Unknown accessory type {}!".format(name)) from None


def accessory_types():
    """Return the registered type names."""
    return sorted(_accessory_types)
