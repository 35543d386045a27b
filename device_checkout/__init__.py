"""Device checkout sheets relay and client."""
