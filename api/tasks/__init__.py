"""
The `tasks` resource: a to-do item with a title, optional description and a
completion flag.
"""
