"""Markup conversion pipeline.

This module reads Jira markup sources and applies the ordered rewrite rules.
It emits Markdown to stdout or files for the CLI and SDK.
"""
