"""Infrastructure layer: process, filesystem and directory primitives."""
