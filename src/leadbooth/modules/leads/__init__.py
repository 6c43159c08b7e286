"""Leads module - badge photo capture and form analytics."""
