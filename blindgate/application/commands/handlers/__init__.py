"""Command handlers for the identity workflows."""
