"""Core constants and exceptions for GridSchema."""
