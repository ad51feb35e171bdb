"""Repair shop service: clients, service orders, abonos and sales statistics."""
