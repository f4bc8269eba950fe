"""Core interfaces and abstractions for eshinf."""

from eshinf.core.interfaces import DiagnosticSink, XmlValidator

__all__ = ["DiagnosticSink", "XmlValidator"]
