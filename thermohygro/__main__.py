"""Run the configured thermo-hygrometers.

This is:
1. Read the config file and create an Accessory for every configured sensor.
2. Add a single Accessory directly to an AccessoryDriver, or put several of them
    behind a Bridge, which will advertise it on the local network,
    setup a server to answer client queries, etc.

Usage:
    python -m thermohygro -c config.json
"""
import argparse
import logging
import signal

from pyhap.accessory import Bridge
from pyhap.accessory_driver import AccessoryDriver

# Importing the module registers the ThermoHygrometer type.
from thermohygro import accessory  # noqa: F401 pylint: disable=unused-import
from thermohygro.config import load_config
from thermohygro.const import __version__
from thermohygro.registry import get_accessory_class

logger = logging.getLogger(__name__)


def get_accessories(driver, config):
    """Create an Accessory for every entry of the config."""
    return [
        get_accessory_class(acc_config.accessory_type)(driver, acc_config)
        for acc_config in config.accessories
    ]


def get_root_accessory(driver, config):
    """Return the single configured Accessory, or a Bridge holding all of them."""
    accessories = get_accessories(driver, config)
    if not accessories:
        raise ValueError("No accessories configured")
    if len(accessories) == 1:
        return accessories[0]

    bridge = Bridge(driver, config.bridge_name)
    for acc in accessories:
        bridge.add_accessory(acc)
    return bridge


def get_parser():
    parser = argparse.ArgumentParser(
        prog="thermohygro",
        description="HomeKit temperature and humidity sensors fed by MQTT.",
    )
    parser.add_argument(
        "-c", "--config", default="config.json", help="path to the JSON config file"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="enable debug logging"
    )
    parser.add_argument(
        "--version", action="version", version="%(prog)s {}".format(__version__)
    )
    return parser


def main(argv=None):
    args = get_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="[%(module)s] %(message)s",
    )

    config = load_config(args.config)
    driver = AccessoryDriver(
        port=config.port, persist_file=config.persist_file, pincode=config.pincode
    )
    driver.add_accessory(accessory=get_root_accessory(driver, config))

    # We want SIGTERM (kill) to be handled by the driver itself,
    # so that it can gracefully stop the accessory, server and advertising.
    signal.signal(signal.SIGTERM, driver.signal_handler)

    driver.start()


if __name__ == "__main__":
    main()
