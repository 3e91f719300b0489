"""
Design State configuration: default settings and theme token tables.
"""
