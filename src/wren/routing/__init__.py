"""Routing — pattern compilation, the ordered route table and resolution.

Patterns are compiled when a route is defined; resolution walks the
table in registration order.
"""
