"""Application layer: services, transport adapters and process wiring."""
