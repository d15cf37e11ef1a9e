"""Pulumi dynamic providers for the Custom Example todo store."""

from .todo import TodoItems, TodoListProvider, get_todo

__all__ = [
    "TodoItems",
    "TodoListProvider",
    "get_todo",
]
