"""Application Layer - Opus E-model queries.

Wires the static coefficient table into the domain query service and exposes
the result as module-level functions and the ``opus-emodel`` command.
"""
