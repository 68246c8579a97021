"""
simdata: data-access layer for a renewable-energy financial simulator.

This package loads tariff, emissions and simulation parameter documents,
validates them against declarative schemas, and provides small lookup
helpers over the validated records.
"""

from importlib.metadata import version

from simdata.utils.logging import configure_default_logging

__version__ = version("simdata")

configure_default_logging()

__all__ = ["__version__"]
