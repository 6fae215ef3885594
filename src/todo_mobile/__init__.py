"""todo-mobile: console task list kept in sync with a remote task REST API."""

__version__ = "0.1.0"
