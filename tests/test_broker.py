"""Tests for thermohygro.broker."""
import ssl
from unittest.mock import patch

import paho.mqtt.client as mqtt
import pytest

from thermohygro.broker import (
    BrokerAddress,
    BrokerOptions,
    create_client,
    parse_broker_url,
)


@pytest.mark.parametrize(
    "url, expected",
    [
        ("mqtt://broker.local", BrokerAddress("broker.local", 1883)),
        ("tcp://10.0.0.2:1884", BrokerAddress("10.0.0.2", 1884)),
        ("mqtts://broker.local", BrokerAddress("broker.local", 8883, tls=True)),
        ("ssl://broker.local:8884", BrokerAddress("broker.local", 8884, tls=True)),
        (
            "ws://broker.local:9001/mqtt",
            BrokerAddress("broker.local", 9001, transport="websockets", path="/mqtt"),
        ),
        (
            "wss://broker.local",
            BrokerAddress("broker.local", 443, transport="websockets", tls=True),
        ),
        ("broker.local:1885", BrokerAddress("broker.local", 1885)),
    ],
)
def test_parse_broker_url(url, expected):
    assert parse_broker_url(url) == expected


@pytest.mark.parametrize("url", [None, "", "http://broker.local", "mqtt://"])
def test_parse_broker_url_invalid(url):
    with pytest.raises(ValueError):
        parse_broker_url(url)


def test_broker_options_defaults():
    options = BrokerOptions()
    assert options.protocol == mqtt.MQTTv311
    assert options.keepalive == 10
    assert options.clean_session is True
    assert options.reconnect_period == 1
    assert options.connect_timeout == 30
    assert options.will_topic == "home/will"
    assert options.will_qos == 0
    assert options.will_retain is False
    assert options.verify_tls is False


def test_create_client():
    address = parse_broker_url("mqtt://broker.local")
    with patch("thermohygro.broker.mqtt.Client") as mock_client_cls:
        client = create_client(
            "Attic_42",
            address,
            BrokerOptions(),
            will_payload="Attic",
            username="user",
            password="secret",
        )
    mock_client_cls.assert_called_once_with(
        mqtt.CallbackAPIVersion.VERSION2,
        client_id="Attic_42",
        clean_session=True,
        protocol=mqtt.MQTTv311,
        transport="tcp",
    )
    assert client is mock_client_cls.return_value
    client.username_pw_set.assert_called_once_with("user", "secret")
    client.will_set.assert_called_once_with(
        "home/will", "Attic", qos=0, retain=False
    )
    client.reconnect_delay_set.assert_called_once_with(min_delay=1, max_delay=1)
    assert client.connect_timeout == 30
    client.tls_set.assert_not_called()
    client.ws_set_options.assert_not_called()


def test_create_client_anonymous():
    address = parse_broker_url("mqtt://broker.local")
    with patch("thermohygro.broker.mqtt.Client") as mock_client_cls:
        client = create_client("Attic_1", address, BrokerOptions())
    assert client is mock_client_cls.return_value
    client.username_pw_set.assert_not_called()
    client.will_set.assert_called_once_with("home/will", "", qos=0, retain=False)


def test_create_client_websocket_tls():
    address = parse_broker_url("wss://broker.local/mqtt")
    with patch("thermohygro.broker.mqtt.Client") as mock_client_cls:
        client = create_client("Attic_7", address, BrokerOptions())
    assert mock_client_cls.call_args[1]["transport"] == "websockets"
    client.ws_set_options.assert_called_once_with(path="/mqtt")
    client.tls_set.assert_called_once_with(cert_reqs=ssl.CERT_NONE)
    client.tls_insecure_set.assert_called_once_with(True)


def test_create_client_verified_tls():
    address = parse_broker_url("mqtts://broker.local")
    with patch("thermohygro.broker.mqtt.Client") as mock_client_cls:
        client = create_client("Attic_7", address, BrokerOptions(verify_tls=True))
    assert client is mock_client_cls.return_value
    client.tls_set.assert_called_once_with(cert_reqs=ssl.CERT_REQUIRED)
    client.tls_insecure_set.assert_not_called()


def test_create_client_real():
    """A real paho client can be configured without a broker."""
    client = create_client(
        "Attic_3", parse_broker_url("mqtt://broker.local"), BrokerOptions()
    )
    assert isinstance(client, mqtt.Client)
    assert client.connect_timeout == 30
