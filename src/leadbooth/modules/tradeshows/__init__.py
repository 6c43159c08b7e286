"""Tradeshows module - events at which leads are captured."""
