"""Starter .autocommit.toml template."""

DEFAULT_TOML = """\
# autocommit configuration
version = "1.0"

[input]
format = "auto"           # auto | status | diff-index

[output]
format = "text"           # text | json
explain = false           # print a per-file table on stderr

[logging]
level = "warning"         # debug | info | warning | error
"""
