"""Command groups for the asientos CLI."""
