"""Prompt templates, one package per domain."""
