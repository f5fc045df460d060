"""Utilities — payload encoding, crypto primitives, unit conversion."""
