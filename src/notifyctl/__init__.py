"""notifyctl: broadcast notifications to Kafka or Kinesis."""

__version__ = "0.1.0"
