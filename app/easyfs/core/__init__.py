"""Core infrastructure: configuration, XDG paths and theming."""
