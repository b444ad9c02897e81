"""cms_decode.core — the color management decode configuration model.

Profiles, slot registry, transform chain, configuration, finalize(), plus the
JSON file shape and report formatting used by the CLI.
This module has NO dependencies on cms_decode.commands or cms_decode.registry.
Only stdlib and PIL are allowed here.
"""
