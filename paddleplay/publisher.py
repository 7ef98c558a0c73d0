"""MQTT message publishing, including simulcast to several brokers."""

from __future__ import annotations

import enum
import logging
import uuid
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Optional

import paho.mqtt.client as mqtt

logger = logging.getLogger(__name__)


class MqttProtocolVersion(enum.Enum):
    """MQTT protocol versions supported by the publisher."""

    V3 = "v3"
    V5 = "v5"


@dataclass(frozen=True)
class BrokerInfo:
    """Parameters needed to reach and talk to one broker."""

    broker_address: str
    capacity: int
    broker_port: int
    keep_alive: float
    protocol_version: MqttProtocolVersion


class PublisherQoS(enum.IntEnum):
    """Quality of service for publishing, independent of the MQTT client in use."""

    AT_MOST_ONCE = 0
    AT_LEAST_ONCE = 1
    EXACTLY_ONCE = 2

    def to_mqtt_qos(self) -> int:
        """Return the QoS level handed to the MQTT client."""
        # At-most-once is deliberately upgraded to at-least-once.
        if self is PublisherQoS.EXACTLY_ONCE:
            return 2
        return 1


class PublisherError(Exception):
    """Base class for errors raised while publishing."""


class ClientNotConfiguredError(PublisherError):
    """The client has no usable connection configured."""

    def __init__(self, message: str = "ClientNotConfigured") -> None:
        super().__init__(message)


class FailedToMessageError(PublisherError):
    """The message could not be handed to the broker."""

    def __init__(self, message: str = "FailedToMessage") -> None:
        super().__init__(message)


class PublishError(PublisherError):
    """Publishing failed on one or more brokers; ``errors`` holds each failure."""

    def __init__(self, errors: list[PublisherError]) -> None:
        self.errors = list(errors)
        super().__init__(
            f"failed to publish on {len(self.errors)} broker(s): "
            + ", ".join(str(error) for error in self.errors)
        )


ClientFactory = Callable[[BrokerInfo], Any]


def _default_client_factory(broker: BrokerInfo) -> Any:
    """Create a paho client for the broker and start its network loop."""
    protocol = mqtt.MQTTv311 if broker.protocol_version is MqttProtocolVersion.V3 else mqtt.MQTTv5
    options = {"client_id": str(uuid.uuid4()), "protocol": protocol}
    callback_api = getattr(mqtt, "CallbackAPIVersion", None)
    if callback_api is not None:
        client = mqtt.Client(callback_api.VERSION2, **options)
    else:
        client = mqtt.Client(**options)
    client.max_queued_messages_set(broker.capacity)
    client.enable_logger(logger)
    client.connect_async(
        broker.broker_address,
        broker.broker_port,
        keepalive=max(1, int(broker.keep_alive)),
    )
    client.loop_start()
    return client


class MqttClient:
    """One connection to one broker, over whichever protocol version it asks for."""

    def __init__(self, broker: BrokerInfo, client_factory: Optional[ClientFactory] = None) -> None:
        self.broker = broker
        factory = client_factory or _default_client_factory
        self._client: Any = factory(broker)

    async def publish_with_payload(self, payload: str, topic: str, qos: PublisherQoS) -> None:
        """Publish ``payload`` to ``topic``; raise a PublisherError on failure."""
        if self._client is None:
            raise ClientNotConfiguredError()
        try:
            info = self._client.publish(topic, payload, qos=PublisherQoS(qos).to_mqtt_qos(), retain=False)
        except (ValueError, RuntimeError, OSError) as error:
            logger.error("%s", error)
            raise FailedToMessageError(str(error)) from error
        rc = getattr(info, "rc", info)
        if rc != mqtt.MQTT_ERR_SUCCESS:
            logger.error("publish to %r returned code %s", topic, rc)
            raise FailedToMessageError(f"FailedToMessage (code {rc})")
        logger.debug("Message published over %s protocol", self.broker.protocol_version.value)

    def close(self) -> None:
        """Disconnect and stop the network loop; later publishes fail."""
        client, self._client = self._client, None
        if client is None:
            return
        client.disconnect()
        client.loop_stop()


class Publisher:
    """Publishes messages to one broker or simulcasts them to several."""

    def __init__(self, broker: BrokerInfo, client_factory: Optional[ClientFactory] = None) -> None:
        self._clients = [MqttClient(broker, client_factory)]

    @classmethod
    def for_simulcast(
        cls, brokers: Iterable[BrokerInfo], client_factory: Optional[ClientFactory] = None
    ) -> "Publisher":
        """Create a publisher that sends every message to each distinct broker."""
        publisher = cls.__new__(cls)
        publisher._clients = [MqttClient(broker, client_factory) for broker in dict.fromkeys(brokers)]
        return publisher

    async def publish(self, topic: str, qos: PublisherQoS) -> None:
        """Publish an empty message to ``topic``."""
        await self.publish_with_payload("", topic, qos)

    async def publish_with_payload(self, payload: str, topic: str, qos: PublisherQoS) -> None:
        """Publish to every broker; raise PublishError listing each failure."""
        failures: list[PublisherError] = []
        for client in self._clients:
            try:
                await client.publish_with_payload(payload, topic, qos)
            except PublisherError as error:
                logger.error("Failed to publish message: %s", error)
                failures.append(error)
        if failures:
            raise PublishError(failures)

    def close(self) -> None:
        """Close every broker connection."""
        for client in self._clients:
            client.close()

    def __enter__(self) -> "Publisher":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()