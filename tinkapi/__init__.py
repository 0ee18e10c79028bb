"""Resource types, index functions and converters for bare-metal provisioning."""

__version__ = "0.1.0"