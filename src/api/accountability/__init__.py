"""Accountability bounded context.

Tracks groups, their members and the point-valued tasks assigned to them,
and derives productivity analytics from that state.
"""
