"""HomeKit thermo-hygrometer accessory fed by an MQTT sensor."""
