"""Templating — kida integration for building URLs inside templates."""
