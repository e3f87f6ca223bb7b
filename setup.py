#!/usr/bin/env python3
from setuptools import setup

import thermohygro.const as thermohygro_const

NAME = "HAP-thermohygrometer"
DESCRIPTION = "HomeKit temperature and humidity sensor accessory fed by MQTT"


MIN_PY_VERSION = ".".join(map(str, thermohygro_const.REQUIRED_PYTHON_VER))

with open("README.md", "r", encoding="utf-8") as f:
    README = f.read()


REQUIRES = ["HAP-python>=4.0.0", "paho-mqtt>=2.0.0"]


setup(
    name=NAME,
    version=thermohygro_const.__version__,
    description=DESCRIPTION,
    long_description=README,
    long_description_content_type="text/markdown",
    packages=["thermohygro"],
    include_package_data=True,
    python_requires=">={}".format(MIN_PY_VERSION),
    install_requires=REQUIRES,
    license="Apache License 2.0",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: End Users/Desktop",
        "License :: OSI Approved :: Apache Software License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Topic :: Home Automation",
    ],
    entry_points={
        "console_scripts": ["thermohygro=thermohygro.__main__:main"],
    },
    extras_require={
        "QRCode": ["HAP-python[QRCode]"],
        "test": ["pytest", "pytest-asyncio"],
    },
)
