"""Concrete units built on the generic quantity and rate types."""
