"""Utility modules for the face recognition shell."""

from .template_builder import Template, TemplateBuilder

__all__ = ["Template", "TemplateBuilder"]
