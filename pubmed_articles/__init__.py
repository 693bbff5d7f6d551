"""
PubMed Articles MCP Server

A FastMCP-based server exposing PubMed literature search, metadata lookup
and PDF link resolution as one unified tool for LLM applications.
"""

__version__ = "1.0.0"
__author__ = "PubMed MCP Team"
