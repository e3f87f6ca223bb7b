import math
import random
import re

from .const import MQTT_CLIENT_ID_SUFFIX_MAX

rand = random.SystemRandom()

DECIMAL_RE = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")


def generate_client_id(name):
    """
    Generates a pseudo-unique MQTT client identifier for a device.

    :param name: The device name.
    :type name: str

    :return: Client id in format ``<name>_<0-9999>``
    :rtype: str
    """
    return "{}_{}".format(name, rand.randint(0, MQTT_CLIENT_ID_SUFFIX_MAX))


def to_number(value):
    """
    Convert a sensor payload field to a float.

    Booleans, ``None``, NaN, infinities, integers too large for a float and
    strings that are not plain decimal numbers are rejected.

    :return: The value as a float, or None if it is not numeric.
    :rtype: float
    """
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, str):
        value = value.strip()
        if not DECIMAL_RE.match(value):
            return None
    elif not isinstance(value, (int, float)):
        return None
    try:
        number = float(value)
    except (OverflowError, ValueError):
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number
