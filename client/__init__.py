"""
Terminal client for the posts API.

`api` talks HTTP, `state` owns the form/list state and its transitions,
`view` renders it and reads commands. Run with `python -m client`.
"""
