"""Errors — base exception classes and pre-defined error instances."""
