"""CLI command modules.

Every .py file in this package that defines a `command` object is
auto-registered by cms_decode.registry.discover().
"""
