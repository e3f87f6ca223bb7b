"""Set up paho-mqtt clients for the broker a sensor reports to."""
import logging
import ssl
from urllib.parse import urlparse

import paho.mqtt.client as mqtt

from thermohygro.const import (
    MQTT_CONNECT_TIMEOUT,
    MQTT_DEFAULT_PORTS,
    MQTT_KEEPALIVE,
    MQTT_RECONNECT_PERIOD,
    MQTT_TLS_SCHEMES,
    MQTT_WEBSOCKET_SCHEMES,
    MQTT_WILL_QOS,
    MQTT_WILL_RETAIN,
    MQTT_WILL_TOPIC,
)

logger = logging.getLogger(__name__)


class BrokerAddress:
    """Where to reach the broker, as parsed from a broker URL."""

    def __init__(self, host, port, transport="tcp", path="/", tls=False):
        self.host = host
        self.port = port
        self.transport = transport
        self.path = path
        self.tls = tls

    def __repr__(self):
        return "<BrokerAddress {}:{} transport={} tls={}>".format(
            self.host, self.port, self.transport, self.tls
        )

    def __eq__(self, other):
        return isinstance(other, BrokerAddress) and vars(self) == vars(other)


def parse_broker_url(url):
    """Parse a broker URL such as ``mqtt://broker.local:1883``.

    Supported schemes are ``mqtt``/``tcp``, ``mqtts``/``ssl``, ``ws`` and
    ``wss``. A URL without a scheme is treated as ``mqtt``.

    :raise ValueError: If the URL is empty or uses an unknown scheme.
    """
    if not url:
        raise ValueError("No broker URL configured")
    if "://" not in url:
        url = "mqtt://" + url
    parsed = urlparse(url)
    scheme = parsed.scheme.lower()
    if scheme not in MQTT_DEFAULT_PORTS:
        raise ValueError("Unsupported broker URL scheme: {}".format(parsed.scheme))
    if not parsed.hostname:
        raise ValueError("No host in broker URL: {}".format(url))
    return BrokerAddress(
        host=parsed.hostname,
        port=parsed.port or MQTT_DEFAULT_PORTS[scheme],
        transport="websockets" if scheme in MQTT_WEBSOCKET_SCHEMES else "tcp",
        path=parsed.path or "/",
        tls=scheme in MQTT_TLS_SCHEMES,
    )


class BrokerOptions:
    """Connection options shared by every sensor client.

    Defaults: MQTT 3.1.1, 10s keepalive, clean session, 1s reconnect
    period, 30s connect timeout and a non retained last will on
    ``home/will``.
    """

    def __init__(self, *, keepalive=MQTT_KEEPALIVE, clean_session=True,
                 reconnect_period=MQTT_RECONNECT_PERIOD,
                 connect_timeout=MQTT_CONNECT_TIMEOUT,
                 will_topic=MQTT_WILL_TOPIC, will_qos=MQTT_WILL_QOS,
                 will_retain=MQTT_WILL_RETAIN, verify_tls=False):
        self.protocol = mqtt.MQTTv311
        self.keepalive = keepalive
        self.clean_session = clean_session
        self.reconnect_period = reconnect_period
        self.connect_timeout = connect_timeout
        self.will_topic = will_topic
        self.will_qos = will_qos
        self.will_retain = will_retain
        self.verify_tls = verify_tls


def create_client(client_id, address, options, will_payload=None,
                  username=None, password=None):
    """Return a configured, not yet connected, paho client.

    :param client_id: The MQTT client identifier.
    :type client_id: str

    :param address: Where the broker lives.
    :type address: BrokerAddress

    :param options: Shared connection options.
    :type options: BrokerOptions

    :param will_payload: Payload of the last will, usually the device name.
    :type will_payload: str
    """
    client = mqtt.Client(
        mqtt.CallbackAPIVersion.VERSION2,
        client_id=client_id,
        clean_session=options.clean_session,
        protocol=options.protocol,
        transport=address.transport,
    )
    if address.transport == "websockets":
        client.ws_set_options(path=address.path)

    if username or password:
        client.username_pw_set(username, password)

    if address.tls:
        if options.verify_tls:
            client.tls_set(cert_reqs=ssl.CERT_REQUIRED)
        else:
            client.tls_set(cert_reqs=ssl.CERT_NONE)
            client.tls_insecure_set(True)
            logger.debug("TLS certificate verification disabled for %s", client_id)

    if options.will_topic:
        client.will_set(
            options.will_topic,
            will_payload or "",
            qos=options.will_qos,
            retain=options.will_retain,
        )

    client.reconnect_delay_set(
        min_delay=options.reconnect_period, max_delay=options.reconnect_period
    )
    client.connect_timeout = options.connect_timeout
    return client
