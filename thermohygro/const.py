"""This module contains constants used by other modules."""
MAJOR_VERSION = 1
MINOR_VERSION = 0
PATCH_VERSION = 0
__short_version__ = "{}.{}".format(MAJOR_VERSION, MINOR_VERSION)
__version__ = "{}.{}".format(__short_version__, PATCH_VERSION)
REQUIRED_PYTHON_VER = (3, 7)

# ### Accessory ###
ACCESSORY_TYPE = "ThermoHygrometer"
DEFAULT_PORT = 51826
DEFAULT_PERSIST_FILE = "thermohygro.state"
DEFAULT_BRIDGE_NAME = "ThermoHygrometer Bridge"

# ### Config keys ###
CONFIG_ACCESSORY = "accessory"
CONFIG_NAME = "name"
CONFIG_MANUFACTURER = "manufacturer"
CONFIG_MODEL = "model"
CONFIG_SERIAL_NUMBER = "serialNumber"
CONFIG_MQTT_URL = "mqttUrl"
CONFIG_MQTT_USER = "mqttUser"
CONFIG_MQTT_PASS = "mqttPass"
CONFIG_TOPIC_STATUS = "topicStatus"

# ### MQTT ###
MQTT_KEEPALIVE = 10  # seconds
MQTT_RECONNECT_PERIOD = 1  # seconds
MQTT_CONNECT_TIMEOUT = 30  # seconds
MQTT_WILL_TOPIC = "home/will"
MQTT_WILL_QOS = 0
MQTT_WILL_RETAIN = False
MQTT_CLIENT_ID_SUFFIX_MAX = 9999

MQTT_DEFAULT_PORTS = {
    "mqtt": 1883,
    "tcp": 1883,
    "mqtts": 8883,
    "ssl": 8883,
    "ws": 80,
    "wss": 443,
}
MQTT_TLS_SCHEMES = ("mqtts", "ssl", "wss")
MQTT_WEBSOCKET_SCHEMES = ("ws", "wss")

# ### Sensor payload ###
PAYLOAD_TEMPERATURE = "temp"
PAYLOAD_HUMIDITY = "humidity"
