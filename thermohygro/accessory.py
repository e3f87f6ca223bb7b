"""An Accessory for a remote temperature and humidity sensor.

The sensor publishes its readings as JSON to an MQTT topic, e.g.::

    {"temp": 21.5, "humidity": 48}

Either field may be left out. The accessory keeps the latest value of each and
serves it to HomeKit clients, pushing changes as they arrive.
"""
import json
import logging

import paho.mqtt.client as mqtt
from pyhap.accessory import Accessory
from pyhap.const import CATEGORY_SENSOR
from pyhap.util import callback

from thermohygro.broker import BrokerOptions, create_client, parse_broker_url
from thermohygro.const import ACCESSORY_TYPE, PAYLOAD_HUMIDITY, PAYLOAD_TEMPERATURE
from thermohygro.registry import register_accessory
from thermohygro.util import generate_client_id, to_number

logger = logging.getLogger(__name__)


class ThermoHygrometer(Accessory):
    """Temperature and humidity sensor fed by an MQTT status topic."""

    category = CATEGORY_SENSOR

    def __init__(self, driver, config, *, log=None, aid=None, client=None,
                 options=None):
        """Initialise and start connecting to the broker.

        :param driver: The driver hosting this accessory.
        :type driver: AccessoryDriver

        :param config: Device identity and broker settings.
        :type config: AccessoryConfig

        :param client: A paho client to use instead of creating one.
        :type client: paho.mqtt.client.Client

        :param options: Connection options for a newly created client.
        :type options: BrokerOptions
        """
        super().__init__(driver, config.name, aid=aid)
        self.log = log or logger
        self.config = config
        self.topic_status = config.topic_status

        self.temperature = 0
        self.humidity = 0

        self.set_info_service(
            manufacturer=config.manufacturer,
            model=config.model,
            serial_number=config.serial_number,
        )
        self.serv_info = self.get_service("AccessoryInformation")
        self.serv_info.configure_char("Identify", setter_callback=self._on_identify)

        self.serv_temp = self.add_preload_service("TemperatureSensor")
        self.char_temp = self.serv_temp.configure_char(
            "CurrentTemperature", getter_callback=self.get_temperature
        )

        self.serv_humidity = self.add_preload_service("HumiditySensor")
        self.char_humidity = self.serv_humidity.configure_char(
            "CurrentRelativeHumidity", getter_callback=self.get_humidity
        )

        self.client_id = generate_client_id(config.name)
        self.address = parse_broker_url(config.mqtt_url)
        self.options = options or BrokerOptions()
        if client is None:
            client = create_client(
                self.client_id,
                self.address,
                self.options,
                will_payload=config.name,
                username=config.mqtt_user,
                password=config.mqtt_pass,
            )
        self.client = client
        self.client.on_connect = self._on_connect
        self.client.on_subscribe = self._on_subscribe
        self.client.on_message = self._on_message
        self.client.on_disconnect = self._on_disconnect

        self.log.debug("Connecting %s to %s", self.client_id, self.address)
        self.client.connect_async(
            self.address.host, self.address.port, keepalive=self.options.keepalive
        )

        self.log.info("%s plugin loaded.", self.display_name)

    def get_temperature(self):
        """Return the last temperature received, 0 until the first one."""
        return self.temperature

    def get_humidity(self):
        """Return the last relative humidity received, 0 until the first one."""
        return self.humidity

    def get_services(self):
        """Return the services exposed to HomeKit clients."""
        return [self.serv_info, self.serv_temp, self.serv_humidity]

    def identify(self):
        """Called when a client asks the accessory to identify itself."""
        self.log.debug("Identify requested for %s", self.display_name)

    def _on_identify(self, _value):
        self.identify()

    async def run(self):
        """Start the MQTT network loop."""
        self.client.loop_start()

    async def stop(self):
        """Disconnect from the broker and stop the MQTT network loop."""
        self.client.disconnect()
        self.client.loop_stop()

    # MQTT callbacks, called from the paho network thread.

    def _on_connect(self, client, userdata, flags, reason_code, properties=None):
        if reason_code.is_failure:
            self.log.warning(
                "%s could not connect to MQTT broker: %s", self.display_name, reason_code
            )
            return
        self.log.debug("%s connected to MQTT broker", self.client_id)
        self.subscribe(client)

    def subscribe(self, client):
        """Subscribe to the status topic. Failures are only logged."""
        try:
            result, _mid = client.subscribe(self.topic_status)
        except ValueError as e:
            self.log.warning("Failed to subscribe : %s (%s)", self.topic_status, e)
            return False
        if result != mqtt.MQTT_ERR_SUCCESS:
            self.log.warning("Failed to subscribe : %s", self.topic_status)
            return False
        return True

    def _on_subscribe(self, client, userdata, mid, reason_code_list, properties=None):
        if any(reason_code.is_failure for reason_code in reason_code_list):
            self.log.warning("Failed to subscribe : %s", self.topic_status)

    def _on_disconnect(self, client, userdata, disconnect_flags, reason_code,
                       properties=None):
        self.log.info("MQTT connection closed.")
        self.log.debug("Disconnect reason for %s: %s", self.client_id, reason_code)

    def _on_message(self, client, userdata, message):
        self.driver.add_job(self.async_handle_message, message.topic, message.payload)

    @callback
    def async_handle_message(self, topic, payload):
        """Apply a status message to the stored readings.

        Must be called in the event loop.
        """
        if topic != self.topic_status:
            return

        try:
            if isinstance(payload, (bytes, bytearray)):
                payload = payload.decode("utf-8")
            data = json.loads(payload)
        except ValueError as e:
            self.log.warning("Discarding malformed message on %s: %s", topic, e)
            return
        if not isinstance(data, dict):
            self.log.warning("Discarding message on %s: not a JSON object", topic)
            return

        temperature = to_number(data.get(PAYLOAD_TEMPERATURE))
        if temperature is not None:
            self.temperature = temperature
            self.char_temp.set_value(temperature)
            self.log.info("Temp : %s", temperature)

        humidity = to_number(data.get(PAYLOAD_HUMIDITY))
        if humidity is not None:
            self.humidity = humidity
            self.char_humidity.set_value(humidity)
            self.log.info("Humidity : %s", humidity)


register_accessory(ACCESSORY_TYPE, ThermoHygrometer)
