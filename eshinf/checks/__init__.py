"""The ESH-INF descriptor check."""

from eshinf.checks.dispatcher import EshInfXmlCheck, classify_directory

__all__ = ["EshInfXmlCheck", "classify_directory"]
