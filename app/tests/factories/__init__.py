"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_group,
    make_message_data,
    make_message_table,
)

__all__ = [
    "make_group",
    "make_message_data",
    "make_message_table",
]
