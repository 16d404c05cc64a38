"""Domain layer: immutable models, ports and exceptions."""
