"""A paddle-and-ball arcade game, with helpers for MQTT publishing, status text and verification codes."""

__version__ = "0.1.0"