"""Document validation module."""

from simdata.validation.core import ValidationResult, ValidationRunner
from simdata.validation.reporter import ConsoleReporter

__all__ = ["ValidationResult", "ValidationRunner", "ConsoleReporter"]
