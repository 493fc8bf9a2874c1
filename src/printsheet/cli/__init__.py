"""Command line interface for print sheet yield and pricing."""
