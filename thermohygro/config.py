"""Module for `Config` and `AccessoryConfig` classes."""
import json
import logging

from thermohygro.const import (
    ACCESSORY_TYPE,
    CONFIG_ACCESSORY,
    CONFIG_MANUFACTURER,
    CONFIG_MODEL,
    CONFIG_MQTT_PASS,
    CONFIG_MQTT_URL,
    CONFIG_MQTT_USER,
    CONFIG_NAME,
    CONFIG_SERIAL_NUMBER,
    CONFIG_TOPIC_STATUS,
    DEFAULT_BRIDGE_NAME,
    DEFAULT_PERSIST_FILE,
    DEFAULT_PORT,
)

logger = logging.getLogger(__name__)

ACCESSORY_KEYS = (
    CONFIG_NAME,
    CONFIG_MANUFACTURER,
    CONFIG_MODEL,
    CONFIG_SERIAL_NUMBER,
    CONFIG_MQTT_URL,
    CONFIG_MQTT_USER,
    CONFIG_MQTT_PASS,
    CONFIG_TOPIC_STATUS,
)


class AccessoryConfig:
    """Configuration of a single thermo-hygrometer.

    All values are treated as opaque strings. No defaults are applied: a
    missing key is kept as None and passed on as is.
    """

    def __init__(self, *, name=None, manufacturer=None, model=None,
                 serial_number=None, mqtt_url=None, mqtt_user=None,
                 mqtt_pass=None, topic_status=None,
                 accessory_type=ACCESSORY_TYPE):
        """Initialize a new object. Must be called with keyword arguments."""
        self.accessory_type = accessory_type
        self.name = name
        self.manufacturer = manufacturer
        self.model = model
        self.serial_number = serial_number
        self.mqtt_url = mqtt_url
        self.mqtt_user = mqtt_user
        self.mqtt_pass = mqtt_pass
        self.topic_status = topic_status

    def __repr__(self):
        return "<AccessoryConfig accessory='{}' name='{}' topic='{}'>".format(
            self.accessory_type, self.name, self.topic_status
        )

    @classmethod
    def from_dict(cls, acc_dict):
        """Create a new instance from a config dict using the plugin's key names.

        :param acc_dict: One entry of the ``accessories`` list, e.g.
            ``{"accessory": "ThermoHygrometer", "name": "Attic", ...}``
        :type acc_dict: dict
        """
        missing = [key for key in ACCESSORY_KEYS if not acc_dict.get(key)]
        if missing:
            logger.warning(
                "Accessory %s is missing config values: %s",
                acc_dict.get(CONFIG_NAME),
                ", ".join(missing),
            )
        return cls(
            accessory_type=acc_dict.get(CONFIG_ACCESSORY, ACCESSORY_TYPE),
            name=acc_dict.get(CONFIG_NAME),
            manufacturer=acc_dict.get(CONFIG_MANUFACTURER),
            model=acc_dict.get(CONFIG_MODEL),
            serial_number=acc_dict.get(CONFIG_SERIAL_NUMBER),
            mqtt_url=acc_dict.get(CONFIG_MQTT_URL),
            mqtt_user=acc_dict.get(CONFIG_MQTT_USER),
            mqtt_pass=acc_dict.get(CONFIG_MQTT_PASS),
            topic_status=acc_dict.get(CONFIG_TOPIC_STATUS),
        )


class Config:
    """Process level settings: where the HAP server listens and what it hosts."""

    def __init__(self, *, accessories=None, bridge_name=None, pincode=None,
                 port=None, persist_file=None):
        self.accessories = accessories or []
        self.bridge_name = bridge_name or DEFAULT_BRIDGE_NAME
        self.pincode = pincode
        self.port = port or DEFAULT_PORT
        self.persist_file = persist_file or DEFAULT_PERSIST_FILE

    @classmethod
    def from_dict(cls, config_dict):
        """Create a new instance from a parsed config file."""
        bridge = config_dict.get("bridge") or {}
        pincode = bridge.get("pincode")
        return cls(
            accessories=[
                AccessoryConfig.from_dict(acc)
                for acc in config_dict.get("accessories") or []
            ],
            bridge_name=bridge.get("name"),
            pincode=str(pincode).encode("ascii") if pincode else None,
            port=bridge.get("port"),
            persist_file=bridge.get("persist_file"),
        )


def load_config(path):
    """Read a JSON config file and return a `Config`.

    :raise ValueError: When the file is not a JSON object.
    """
    with open(path, "r", encoding="utf8") as file:
        try:
            config_dict = json.load(file)
        except json.JSONDecodeError as e:
            raise ValueError("Invalid config file {}: {}".format(path, e)) from e
    if not isinstance(config_dict, dict):
        raise ValueError("Invalid config file {}: expected an object".format(path))
    logger.debug("Loaded config from %s", path)
    return Config.from_dict(config_dict)
