"""Test fixtures and mocks."""

import asyncio
from unittest.mock import AsyncMock, MagicMock, patch

import paho.mqtt.client as mqtt
import pytest
from pyhap.accessory_driver import AccessoryDriver
from pyhap.loader import Loader

from thermohygro.config import AccessoryConfig


@pytest.fixture(scope="session")
def mock_driver():
    yield MockDriver()


@pytest.fixture(name="async_zeroconf")
def async_zc():
    with patch("pyhap.accessory_driver.AsyncZeroconf") as mock_async_zeroconf:
        aiozc = mock_async_zeroconf.return_value
        aiozc.async_register_service = AsyncMock()
        aiozc.async_update_service = AsyncMock()
        aiozc.async_unregister_service = AsyncMock()
        aiozc.async_close = AsyncMock()
        yield aiozc


@pytest.fixture
def driver(async_zeroconf):
    loop = asyncio.new_event_loop()
    with patch(
        "pyhap.accessory_driver.HAPServer.async_stop", new_callable=AsyncMock
    ), patch(
        "pyhap.accessory_driver.HAPServer.async_start", new_callable=AsyncMock
    ), patch(
        "pyhap.accessory_driver.AccessoryDriver.persist"
    ):
        yield AccessoryDriver(loop=loop, address="127.0.0.1")
    loop.close()


@pytest.fixture
def acc_config():
    return AccessoryConfig(
        name="Attic",
        manufacturer="Acme",
        model="TH-1",
        serial_number="0001",
        mqtt_url="mqtt://broker.local:1883",
        mqtt_user="user",
        mqtt_pass="secret",
        topic_status="home/attic/status",
    )


@pytest.fixture
def mqtt_client():
    client = MagicMock()
    client.subscribe.return_value = (mqtt.MQTT_ERR_SUCCESS, 1)
    return client


class MockDriver:
    def __init__(self):
        self.loader = Loader()

    def publish(self, data, client_addr=None, immediate=False):
        pass

    def add_job(self, target, *args):
        if asyncio.iscoroutinefunction(target):
            loop = asyncio.new_event_loop()
            try:
                loop.run_until_complete(target(*args))
            finally:
                loop.close()
        else:
            target(*args)
