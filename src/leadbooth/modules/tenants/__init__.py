"""Tenants module - Multi-tenancy support."""
