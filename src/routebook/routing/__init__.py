"""Routing — ordered route table with compiled regex matchers.

Routes are validated and compiled once when the router is built; the
resulting table is immutable and matched in declaration order.
"""
