"""HTTP surface of the Pokébattle service."""
