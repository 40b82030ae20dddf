"""Echo service: byte-for-byte echo on "/" and a static health probe on "/health"."""
