"""Extension module package.

Add extension modules as packages under ``app/extensions/<name>/`` with a
``module.py`` that exports ``module``: an object with ``execute() -> str``.
The module is registered under its ``name`` attribute (or its class name)
at startup; list it in ``DISABLED_MODULES`` to leave it uninstalled.
"""
