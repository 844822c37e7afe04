"""MiniC tokenizer, expression parser, syntax tree classes and abstract syntax tree nodes."""

__version__ = "1.0.1"